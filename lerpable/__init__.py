"""Lerpable: linear and bilinear interpolation for numeric and composite values."""

from .interpolate import (
    Interpolate,
    interpolator_for,
    register_interpolator,
    lerp,
    bilerp,
)
from .numeric import (
    FloatInterpolate,
    IntegerInterpolate,
    Float32,
    Float64,
    PyFloat,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    PyInt,
)
from .array import interpolate_array, lerp_array
from .colors import (
    ColorBase,
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    RGB,
    RGBA,
)

from boundednumbers import BoundType

__version__ = "0.1.0"

__all__ = [
    # capability
    "Interpolate",
    "interpolator_for",
    "register_interpolator",
    "lerp",
    "bilerp",
    # numeric interpolators
    "FloatInterpolate",
    "IntegerInterpolate",
    "Float32",
    "Float64",
    "PyFloat",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "PyInt",
    # arrays
    "interpolate_array",
    "lerp_array",
    "BoundType",
    # colors
    "ColorBase",
    "ColorRGBINT",
    "ColorRGBAINT",
    "ColorUnitRGB",
    "ColorUnitRGBA",
    "RGB",
    "RGBA",
    "__version__",
]
