from typing import ClassVar

import numpy as np

from ..types.value_types import ColorMode
from .color_base import ColorBase, WithAlpha


class ColorRGBINT(ColorBase):
    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorMode] = "rgb"
    channel_type: ClassVar[type] = np.uint8
    maxima:       ClassVar[int] = 255


class ColorRGBAINT(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode:         ClassVar[ColorMode] = "rgba"
    channel_type: ClassVar[type] = np.uint8
    maxima:       ClassVar[int] = 255


class ColorUnitRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorMode] = "rgb"
    channel_type: ClassVar[type] = np.float32
    maxima:       ClassVar[float] = 1.0


class ColorUnitRGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode:         ClassVar[ColorMode] = "rgba"
    channel_type: ClassVar[type] = np.float32
    maxima:       ClassVar[float] = 1.0


RGB = ColorRGBINT
RGBA = ColorRGBAINT
