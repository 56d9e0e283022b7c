from __future__ import annotations
from typing import Any, ClassVar, Sequence, Self

from boundednumbers import clamp

from ..interpolate import Interpolate, interpolator_for
from ..types.value_types import ColorMode, Position, SamplePair, Scalar, ScalarVector, is_alpha_mode


class ColorBase(Interpolate):
    """
    Immutable color whose channels interpolate independently.

    Subclasses pick the channel scalar type; interpolating a color is the
    same as interpolating each channel with the same position.
    """

    __slots__ = ('_value', '_frozen')

    num_channels: ClassVar[int]
    mode:         ClassVar[ColorMode]
    channel_type: ClassVar[type]
    maxima:       ClassVar[Scalar]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Sequence[Any]) -> None:
        if isinstance(value, ColorBase):
            value = value.value

        if len(value) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels, got {len(value)}"
            )

        # clamp before the cast; out-of-range ints do not fit the channel type
        self._value = tuple(
            self.channel_type(clamp(v, 0, self.maxima)).item() for v in value
        )

        # no more writes after this
        super().__setattr__('_frozen', True)

    @classmethod
    def _from_channels(cls, channels: Sequence[Any]) -> Self:
        """Build a color from interpolated channels, casting without clamping."""
        color = cls.__new__(cls)
        color._value = tuple(cls.channel_type(c).item() for c in channels)
        super(ColorBase, color).__setattr__('_frozen', True)
        return color

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color mode includes an alpha channel."""
        return is_alpha_mode(self.mode)

    def __iter__(self):
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"

    # ------------------ INTERPOLATION ------------------
    @classmethod
    def lerp(cls, v: SamplePair[Self], x: Position) -> Self:
        start, end = v
        if type(start) is not cls or type(end) is not cls:
            raise TypeError(
                f"{cls.__name__}.lerp expects two {cls.__name__} samples, "
                f"got {type(start).__name__} and {type(end).__name__}"
            )
        channel = interpolator_for(cls.channel_type)
        return cls._from_channels(tuple(
            channel.lerp((cls.channel_type(a), cls.channel_type(b)), x)
            for a, b in zip(start.value, end.value)
        ))


class WithAlpha:
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    mode: ClassVar[ColorMode]
    value: ScalarVector

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: Scalar) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped like every other channel.

        Returns:
            New color instance with updated alpha.
        """
        return self.__class__(self.value[:-1] + (alpha,))  # type: ignore
