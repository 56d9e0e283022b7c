"""Basic Lerpable usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from lerpable import (
    Interpolate,
    RGB,
    UInt8,
    bilerp,
    lerp,
    register_interpolator,
)


def demonstrate_scalars() -> None:
    # Floats interpolate at their own precision.
    print("float64 midpoint:", lerp((0.0, 100.0), 0.5))
    print("float32 at 0.1:", lerp((np.float32(0.0), np.float32(1.0)), 0.1))

    # Integers truncate toward zero instead of rounding.
    print("uint8 at 0.99:", lerp((np.uint8(0), np.uint8(1)), 0.99))
    print("int32 at 0.5:", lerp((np.int32(0), np.int32(-3)), 0.5))

    corners = ((0.0, 10.0), (20.0, 30.0))
    print("bilinear centre:", bilerp(corners, 0.5, 0.5))


def demonstrate_colors() -> None:
    green = RGB((0, 255, 0))
    purple = RGB((100, 0, 200))
    print("halfway:", lerp((green, purple), 0.5))


class Vec2:
    def __init__(self, x: float, y: float) -> None:
        self.x, self.y = x, y

    def __repr__(self) -> str:
        return f"Vec2({self.x}, {self.y})"


class Vec2Interpolate(Interpolate):
    @classmethod
    def lerp(cls, v, x):
        return Vec2(lerp((v[0].x, v[1].x), x), lerp((v[0].y, v[1].y), x))


def demonstrate_registration() -> None:
    # Third-party classes join through the registry instead of subclassing.
    register_interpolator(Vec2, Vec2Interpolate)
    print("vector at 0.25:", lerp((Vec2(0.0, 0.0), Vec2(4.0, 8.0)), 0.25))
    print("uint8 channel:", UInt8.lerp((10, 20), 0.5))


def main() -> None:
    demonstrate_scalars()
    demonstrate_colors()
    demonstrate_registration()


if __name__ == "__main__":
    main()
