import numpy as np
import pytest

from lerpable import BoundType, interpolate_array, lerp, lerp_array, RGB
from lerpable.utils import bound_position


def test_interpolate_uint8_arrays():
    start = np.array([0, 255, 0], dtype=np.uint8)
    end = np.array([100, 0, 200], dtype=np.uint8)
    out = np.zeros(3, dtype=np.uint8)
    interpolate_array((start, end), out, 0.5)
    np.testing.assert_array_equal(out, [50, 127, 100])


def test_interpolate_int_lists():
    out = [0, 0, 0]
    interpolate_array(([0, 255, 0], [100, 0, 200]), out, 0.5)
    assert out == [50, 127, 100]


def test_elementwise_matches_lerp():
    start = [0.0, -2.5, 10.0, 3.25]
    end = [1.0, 7.5, -10.0, 3.25]
    for x in (0.0, 0.3, 0.5, 1.0, 1.7):
        out = [None] * len(start)
        interpolate_array((start, end), out, x)
        assert out == [lerp((a, b), x) for a, b in zip(start, end)]


def test_float32_array_keeps_dtype():
    start = np.array([0.0, 1.0], dtype=np.float32)
    end = np.array([1.0, 3.0], dtype=np.float32)
    out = np.empty(2, dtype=np.float32)
    interpolate_array((start, end), out, 0.25)
    assert out.dtype == np.float32
    assert np.allclose(out, [0.25, 1.5])


def test_longer_output_keeps_trailing_elements():
    out = [9, 9, 9, 9, 9]
    interpolate_array(([0.0, 1.0], [2.0, 3.0]), out, 0.5)
    assert out == [1.0, 2.0, 9, 9, 9]


def test_shorter_output_is_filled_only():
    out = [None]
    interpolate_array(([0.0, 1.0, 2.0], [2.0, 3.0, 4.0]), out, 0.5)
    assert out == [1.0]


def test_mismatched_inputs_use_shortest():
    out = [-1, -1, -1]
    interpolate_array(([0, 10, 20], [10]), out, 0.5)
    assert out == [5, -1, -1]


def test_empty_inputs_leave_output_untouched():
    out = np.full(4, 7, dtype=np.int16)
    interpolate_array(([], []), out, 0.5)
    np.testing.assert_array_equal(out, [7, 7, 7, 7])


def test_extrapolates_by_default():
    out = [None]
    interpolate_array(([0.0], [10.0]), out, 1.5)
    assert out == [15.0]


def test_clamped_position():
    out = [None, None]
    interpolate_array(([0.0, 5.0], [10.0, 15.0]), out, 1.5, bound_type=BoundType.CLAMP)
    assert out == [10.0, 15.0]

    interpolate_array(([0.0, 5.0], [10.0, 15.0]), out, -0.5, bound_type=BoundType.CLAMP)
    assert out == [0.0, 5.0]


def test_bound_position():
    assert bound_position(1.5) == 1.5
    assert bound_position(1.5, BoundType.CLAMP) == 1.0
    assert bound_position(-0.2, BoundType.CLAMP) == 0.0
    assert bound_position(0.4, BoundType.CLAMP) == pytest.approx(0.4)


def test_invalid_bound_type():
    with pytest.raises(ValueError):
        interpolate_array(([0.0], [1.0]), [None], 0.5, bound_type="clamp")


def test_lerp_array():
    result = lerp_array(([0, 255, 0, 9], [100, 0, 200]), 0.5)
    assert result == [50, 127, 100]


def test_color_arrays():
    start = [RGB((0, 255, 0)), RGB((10, 10, 10))]
    end = [RGB((100, 0, 200)), RGB((20, 30, 40))]
    assert lerp_array((start, end), 0.5) == [RGB((50, 127, 100)), RGB((15, 20, 25))]
