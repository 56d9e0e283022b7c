"""
Interpolation capability.

A type is interpolable when it can combine two samples of itself at a
fractional position. ``Interpolate`` is the capability: subclasses supply
``lerp`` and inherit a ``bilerp`` built from three one-dimensional
interpolations.

Types that cannot subclass ``Interpolate`` (numpy scalars, builtins,
third-party classes) are handled through a registry that maps the value type
to an ``Interpolate`` subclass doing the work.
"""

from __future__ import annotations
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Type

from .types.value_types import T, Position, SamplePair, SampleQuad


class Interpolate(ABC):
    """
    Capability for values that can be linearly and bilinearly interpolated.

    Positions are plain floats, conventionally in [0, 1]. Values outside
    that range extrapolate; nothing is validated.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def lerp(cls, v: SamplePair[T], x: Position) -> T:
        """Interpolate between ``v[0]`` (at 0.0) and ``v[1]`` (at 1.0)."""

    @classmethod
    def bilerp(cls, v: SampleQuad[T], x: Position, y: Position) -> T:
        """
        Interpolate inside the unit square spanned by a 2x2 quad.

        ``v[i][j]`` is the sample at corner ``(x=i, y=j)``. Each x side is
        interpolated along ``y`` first, then the two results along ``x``.

        Args:
            v: Sample quad
            x: Position along the first axis
            y: Position along the second axis

        Returns:
            The doubly interpolated value.
        """
        v0 = cls.lerp((v[0][0], v[0][1]), y)
        v1 = cls.lerp((v[1][0], v[1][1]), y)
        return cls.lerp((v0, v1), x)


_registry: Dict[type, Type[Interpolate]] = {}


def register_interpolator(value_type: type, interpolator: Type[Interpolate]) -> None:
    """
    Register ``interpolator`` as the handler for values of ``value_type``.

    Subclasses of ``value_type`` resolve to the same handler unless they are
    registered themselves.
    """
    if not (isinstance(interpolator, type) and issubclass(interpolator, Interpolate)):
        raise TypeError(f"Interpolator must be an Interpolate subclass, got {interpolator!r}")

    previous = _registry.get(value_type)
    if previous is not None and previous is not interpolator:
        warnings.warn(
            f"Replacing interpolator for {value_type.__name__}: "
            f"{previous.__name__} -> {interpolator.__name__}",
            RuntimeWarning,
            stacklevel=2,
        )
    _registry[value_type] = interpolator


def interpolator_for(value: Any) -> Type[Interpolate]:
    """
    Return the ``Interpolate`` class handling a value or a type.

    Raises:
        TypeError: If the type neither subclasses ``Interpolate`` nor has a
            registered handler.
    """
    value_type = value if isinstance(value, type) else type(value)

    if issubclass(value_type, Interpolate):
        return value_type

    for base in value_type.__mro__:
        interpolator = _registry.get(base)
        if interpolator is not None:
            return interpolator

    raise TypeError(
        f"{value_type.__name__} is not interpolable; subclass Interpolate "
        f"or call register_interpolator"
    )


def lerp(v: SamplePair[T], x: Position) -> T:
    """
    Linear interpolation of a sample pair, dispatched on the type of ``v[0]``.

    Mixed pairs follow the first sample: ``lerp((0, 10.0), 0.25)`` is an
    integer interpolation and returns ``2``.
    """
    return interpolator_for(v[0]).lerp(v, x)


def bilerp(v: SampleQuad[T], x: Position, y: Position) -> T:
    """Bilinear interpolation of a sample quad, dispatched on the type of ``v[0][0]``."""
    return interpolator_for(v[0][0]).bilerp(v, x, y)
