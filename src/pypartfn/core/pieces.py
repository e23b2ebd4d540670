"""Piece records: one interval plus the computation that applies on it."""
from dataclasses import dataclass

from pypartfn.core.computation import Computation


@dataclass(frozen=True)
class BoundedPiece:
    """A computation defined on the closed interval [start, end]."""
    start: float
    end: float
    computation: Computation

    def contains(self, x) -> bool:
        # A reversed interval (start > end) never matches
        return self.start <= x <= self.end


@dataclass(frozen=True)
class LowerBoundedPiece:
    """A computation defined from start upwards, until a greater start takes over."""
    start: float
    computation: Computation

    def contains(self, x) -> bool:
        return self.start <= x
