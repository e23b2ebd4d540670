"""Interval overlap predicates backing the builders' can_insert checks."""
from typing import Iterable

from pypartfn.core.pieces import BoundedPiece, LowerBoundedPiece


def intervals_overlap(start: float, end: float, other_start: float, other_end: float) -> bool:
    """
    Check whether [start, end) overlaps [other_start, other_end).

    Intervals that only touch at an endpoint do not overlap, so [0, 1) and
    [1, 2) can both be registered.
    """
    return ((other_start <= start < other_end)
            or (other_start < end <= other_end)
            or (start <= other_start and end >= other_end))


def can_insert_bounded(pieces: Iterable[BoundedPiece], start: float, end: float) -> bool:
    return not any(intervals_overlap(start, end, p.start, p.end) for p in pieces)


def can_insert_lower(pieces: Iterable[LowerBoundedPiece], start: float) -> bool:
    return not any(p.start == start for p in pieces)
