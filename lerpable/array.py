"""
Element-wise interpolation over sequences.
"""

from __future__ import annotations
from typing import Any, List, MutableSequence, Sequence, Tuple

from boundednumbers import BoundType

from .interpolate import lerp
from .types.value_types import Position
from .utils.bounds import bound_position


def interpolate_array(
    v: Tuple[Sequence[Any], Sequence[Any]],
    out: MutableSequence[Any],
    x: Position,
    bound_type: BoundType = BoundType.IGNORE,
) -> None:
    """
    Interpolate two sequences element by element into ``out``.

    Only the overlapping prefix of ``start``, ``end`` and ``out`` is
    processed. Mismatched lengths are not an error: extra input elements are
    ignored and trailing output elements are left untouched.

    Args:
        v: ``(start, end)`` sequences of an interpolable type
        out: Mutable output sequence (list or numpy array), written in place
        x: Fractional position shared by every element
        bound_type: Optional bounding of ``x`` into [0, 1]
    """
    x = bound_position(x, bound_type)
    start, end = v
    for i, pair in zip(range(len(out)), zip(start, end)):
        out[i] = lerp(pair, x)


def lerp_array(
    v: Tuple[Sequence[Any], Sequence[Any]],
    x: Position,
    bound_type: BoundType = BoundType.IGNORE,
) -> List[Any]:
    """Return a new list with ``start`` and ``end`` interpolated at ``x``."""
    start, end = v
    out: List[Any] = [None] * min(len(start), len(end))
    interpolate_array(v, out, x, bound_type=bound_type)
    return out
