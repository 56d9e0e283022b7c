"""Element-wise interpolation over sequences.

Run with:
    python examples/array_operations.py
"""
import numpy as np

from lerpable import BoundType, RGB, interpolate_array, lerp_array


def demonstrate_arrays() -> None:
    start = np.array([0, 255, 0], dtype=np.uint8)
    end = np.array([100, 0, 200], dtype=np.uint8)

    # Output buffers are written in place; extra slots keep their values.
    out = np.full(5, 7, dtype=np.uint8)
    interpolate_array((start, end), out, 0.5)
    print("uint8 buffer:", out)

    # Positions outside [0, 1] extrapolate unless a bound type folds them back.
    print("extrapolated:", lerp_array(([0.0, 1.0], [10.0, 11.0]), 1.5))
    print("clamped:", lerp_array(([0.0, 1.0], [10.0, 11.0]), 1.5, bound_type=BoundType.CLAMP))

    # Composite values work the same way.
    palette = lerp_array(([RGB((255, 0, 0)), RGB((0, 0, 0))], [RGB((0, 0, 255)), RGB((255, 255, 255))]), 0.25)
    print("palette:", palette)


def main() -> None:
    demonstrate_arrays()


if __name__ == "__main__":
    main()
