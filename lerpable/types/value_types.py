from __future__ import annotations
from typing import Literal, Sequence, Tuple, TypeVar

T = TypeVar("T")

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
Position = float
SamplePair = Sequence[T]
SampleQuad = Sequence[Sequence[T]]
ColorMode = Literal["rgb", "rgba"]
ALPHA_MODES = {"rgba"}


def is_alpha_mode(mode: ColorMode) -> bool:
    """
    Check if the given color mode carries an alpha channel.

    Args:
        mode: Color mode string
    Returns:
        True if the last channel is alpha, False otherwise
    """
    return mode.lower() in ALPHA_MODES
