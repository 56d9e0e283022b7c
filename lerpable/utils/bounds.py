from boundednumbers import BoundType, bound_type_to_np_function

from ..types.value_types import Position


def bound_position(x: Position, bound_type: BoundType = BoundType.IGNORE) -> Position:
    """
    Fold a fractional position into [0, 1].

    Args:
        x: Fractional position
        bound_type: How out-of-range positions are handled. IGNORE returns
            ``x`` unchanged, so extrapolation stays possible.

    Returns:
        The bounded position.
    """
    if not isinstance(bound_type, BoundType):
        raise ValueError(f"Invalid bound_type argument: {bound_type!r}")
    if bound_type is BoundType.IGNORE:
        return x
    fn = bound_type_to_np_function[bound_type]
    return float(fn(x, 0.0, 1.0))
