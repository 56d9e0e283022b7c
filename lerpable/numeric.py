"""
Interpolators for the built-in numeric types.

Floating-point types interpolate at their own precision. Integer types widen
their samples to a float type, interpolate there and truncate the result back
toward zero. 8 and 16-bit integers widen to float32; 32 and 64-bit integers
widen to float64.

Truncation saturates: results beyond the integer range become the range limit
and NaN becomes 0.
"""

from __future__ import annotations
import math
from typing import ClassVar, Dict, Tuple, Type

import numpy as np

from .interpolate import Interpolate, register_interpolator
from .types.value_types import Position, SamplePair, SampleQuad, Scalar


class FloatInterpolate(Interpolate):
    """
    Linear and bilinear interpolation for a floating-point scalar type.

    The position is converted to ``scalar_type`` before any arithmetic, so
    narrower types never compute at double precision.
    """

    scalar_type: ClassVar[type]

    @classmethod
    def lerp(cls, v: SamplePair, x: Position):
        with np.errstate(over="ignore", invalid="ignore"):
            t = cls.scalar_type(x)
            v0 = cls.scalar_type(v[0])
            v1 = cls.scalar_type(v[1])
            return cls.scalar_type(v0 + t * (v1 - v0))

    @classmethod
    def bilerp(cls, v: SampleQuad, x: Position, y: Position):
        with np.errstate(over="ignore", invalid="ignore"):
            x = cls.scalar_type(x)
            y = cls.scalar_type(y)
            one = cls.scalar_type(1.0)
            v00, v01 = cls.scalar_type(v[0][0]), cls.scalar_type(v[0][1])
            v10, v11 = cls.scalar_type(v[1][0]), cls.scalar_type(v[1][1])
            return cls.scalar_type(
                v00 * (one - x) * (one - y)
                + v10 * x * (one - y)
                + v01 * (one - x) * y
                + v11 * x * y
            )


class IntegerInterpolate(Interpolate):
    """
    Interpolation for an integer scalar type through a wider float type.

    ``bilerp`` widens all four corners and truncates only the final value.
    """

    scalar_type: ClassVar[type]
    float_impl: ClassVar[Type[FloatInterpolate]]
    limits_type: ClassVar[type | None] = None

    @classmethod
    def bounds(cls) -> Tuple[int, int]:
        info = np.iinfo(cls.limits_type or cls.scalar_type)
        return int(info.min), int(info.max)

    @classmethod
    def truncate(cls, value: Scalar):
        """Drop the fractional part of ``value``, saturating at the type limits."""
        value = float(value)
        lo, hi = cls.bounds()
        if math.isnan(value):
            return cls.scalar_type(0)
        if value >= hi:
            return cls.scalar_type(hi)
        if value <= lo:
            return cls.scalar_type(lo)
        return cls.scalar_type(int(value))

    @classmethod
    def widen(cls, value):
        return cls.float_impl.scalar_type(value)

    @classmethod
    def lerp(cls, v: SamplePair, x: Position):
        widened = (cls.widen(v[0]), cls.widen(v[1]))
        return cls.truncate(cls.float_impl.lerp(widened, x))

    @classmethod
    def bilerp(cls, v: SampleQuad, x: Position, y: Position):
        widened = (
            (cls.widen(v[0][0]), cls.widen(v[0][1])),
            (cls.widen(v[1][0]), cls.widen(v[1][1])),
        )
        return cls.truncate(cls.float_impl.bilerp(widened, x, y))


# ------------------ floating point ------------------
class Float32(FloatInterpolate):
    scalar_type: ClassVar[type] = np.float32


class Float64(FloatInterpolate):
    scalar_type: ClassVar[type] = np.float64


class PyFloat(FloatInterpolate):
    scalar_type: ClassVar[type] = float


# ------------------ signed integers ------------------
class Int8(IntegerInterpolate):
    scalar_type: ClassVar[type] = np.int8
    float_impl: ClassVar[Type[FloatInterpolate]] = Float32


class Int16(IntegerInterpolate):
    scalar_type: ClassVar[type] = np.int16
    float_impl: ClassVar[Type[FloatInterpolate]] = Float32


class Int32(IntegerInterpolate):
    scalar_type: ClassVar[type] = np.int32
    float_impl: ClassVar[Type[FloatInterpolate]] = Float64


class Int64(IntegerInterpolate):
    scalar_type: ClassVar[type] = np.int64
    float_impl: ClassVar[Type[FloatInterpolate]] = Float64


# ------------------ unsigned integers ------------------
class UInt8(IntegerInterpolate):
    scalar_type: ClassVar[type] = np.uint8
    float_impl: ClassVar[Type[FloatInterpolate]] = Float32


class UInt16(IntegerInterpolate):
    scalar_type: ClassVar[type] = np.uint16
    float_impl: ClassVar[Type[FloatInterpolate]] = Float32


class UInt32(IntegerInterpolate):
    scalar_type: ClassVar[type] = np.uint32
    float_impl: ClassVar[Type[FloatInterpolate]] = Float64


class UInt64(IntegerInterpolate):
    scalar_type: ClassVar[type] = np.uint64
    float_impl: ClassVar[Type[FloatInterpolate]] = Float64


# Builtin int is unbounded; it follows the signed 64-bit path.
class PyInt(IntegerInterpolate):
    scalar_type: ClassVar[type] = int
    float_impl: ClassVar[Type[FloatInterpolate]] = Float64
    limits_type: ClassVar[type | None] = np.int64

    @classmethod
    def widen(cls, value):
        # bring huge ints into range first; float64 cannot hold them
        lo, hi = cls.bounds()
        return cls.float_impl.scalar_type(min(max(value, lo), hi))


def build_registry(*classes: Type[FloatInterpolate] | Type[IntegerInterpolate]) -> Dict[type, Type[Interpolate]]:
    return {cls.scalar_type: cls for cls in classes}


numeric_interpolators = build_registry(
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

for _scalar_type, _interpolator in numeric_interpolators.items():
    register_interpolator(_scalar_type, _interpolator)
