"""
Lerpable Color Classes
======================

Immutable RGB colors that implement the interpolation capability by
interpolating every channel with the same position.

- ``ColorRGBINT`` / ``ColorRGBAINT``: 8-bit channels, truncating interpolation
- ``ColorUnitRGB`` / ``ColorUnitRGBA``: float32 channels in [0, 1]

Usage
-----
>>> from lerpable.colors import RGB
>>> RGB.lerp((RGB((0, 255, 0)), RGB((100, 0, 200))), 0.5)
ColorRGBINT((50, 127, 100))

Channels are clamped to ``[0, maxima]`` on construction. Interpolated colors
are not: a float color extrapolated past 1.0 keeps its channel values, while
8-bit channels saturate through their own truncating interpolation.
"""

from .color_base import ColorBase, WithAlpha
from .rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    RGB,
    RGBA,
)

__all__ = [
    "ColorBase",
    "WithAlpha",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "RGB",
    "RGBA",
]
