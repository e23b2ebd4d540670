"""
Bounded partial functions.

A PartialFunction is assembled from pieces that each cover a closed interval
[start, end]. Evaluation scans the pieces in registration order and dispatches
to the first one containing the point, so overlaps and shared endpoints
resolve to the earliest registered piece. Points outside every interval are
undefined and evaluate to None.

Example:
    >>> f = (PartialFunction.new()
    ...      .with_(0.0, 5.0, lambda x: x)
    ...      .with_(5.0, 10.0, lambda x: x * 2)
    ...      .build())
    >>> f.eval(5.0)
    5.0
    >>> f.eval(11.0) is None
    True
"""
import logging
from typing import Any, List, Optional, Tuple

from pypartfn.core.computation import ComputationLike, as_computation
from pypartfn.core.exceptions import BuilderConsumedError, OverlapError
from pypartfn.core.overlap import can_insert_bounded
from pypartfn.core.pieces import BoundedPiece
from pypartfn.data.constants import ProcessingConstants, ErrorMessages

logger = logging.getLogger(__name__)


class PartialFunction:
    """Immutable function defined by bounded pieces."""
    __slots__ = ("_pieces",)

    def __init__(self, pieces: Tuple[BoundedPiece, ...]):
        self._pieces = tuple(pieces)

    @staticmethod
    def new(strict: bool = False) -> 'PartialFunctionBuilder':
        """Creates a new PartialFunctionBuilder."""
        return PartialFunctionBuilder(strict=strict)

    @property
    def pieces(self) -> Tuple[BoundedPiece, ...]:
        return self._pieces

    def eval(self, x) -> Optional[Any]:
        """
        Evaluate the function at x.
        Args:
            x: Point to evaluate at
        Returns:
            Output of the first registered piece whose interval contains x,
            or None when no piece does
        """
        for piece in self._pieces:
            if piece.contains(x):
                return piece.computation(x)
        logger.debug("No piece defined at x=%s (%d pieces)", x, len(self._pieces))
        return None

    def __call__(self, x) -> Optional[Any]:
        return self.eval(x)

    def __len__(self) -> int:
        return len(self._pieces)

    def __repr__(self) -> str:
        bounds = ", ".join(f"[{p.start}, {p.end}]" for p in self._pieces[:ProcessingConstants.MAX_LOGGED_PIECES])
        if len(self._pieces) > ProcessingConstants.MAX_LOGGED_PIECES:
            bounds += ", ..."
        return f"PartialFunction({bounds})"


class PartialFunctionBuilder:
    """Mutable accumulator of bounded pieces, consumed by build()."""

    def __init__(self, strict: bool = False):
        self._pieces: List[BoundedPiece] = []
        self._strict = strict
        self._consumed = False

    @property
    def strict(self) -> bool:
        return self._strict

    def __len__(self) -> int:
        return len(self._pieces)

    def _ensure_usable(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(ErrorMessages.BUILDER_CONSUMED.format(builder=type(self).__name__))

    def with_(self, start: float, end: float, computation: ComputationLike,
              symbol_name: str = ProcessingConstants.DEFAULT_SYMBOL_NAME) -> 'PartialFunctionBuilder':
        """
        Register a piece defined on [start, end].
        Args:
            start: Lower bound of the interval (inclusive)
            end: Upper bound of the interval (inclusive)
            computation: Callable, SymPy expression, expression string or number
            symbol_name: Variable name used when computation is an expression
        Returns:
            PartialFunctionBuilder: self, to allow chaining
        Raises:
            BuilderConsumedError: If build() was already called
            OverlapError: If the builder is strict and the interval overlaps a registered piece
        """
        self._ensure_usable()
        if not can_insert_bounded(self._pieces, start, end):
            if self._strict:
                raise OverlapError(ErrorMessages.BOUNDED_OVERLAP.format(start=start, end=end))
            logger.warning("Interval [%s, %s] overlaps a registered piece; earlier pieces take precedence",
                           start, end)
        if start > end:
            logger.warning("Reversed interval [%s, %s] will never match", start, end)
        piece = BoundedPiece(start, end, as_computation(computation, symbol_name))
        self._pieces.append(piece)
        logger.debug("Registered piece %d: [%s, %s] -> %r", len(self._pieces), start, end, piece.computation)
        return self

    def can_insert(self, start: float, end: float) -> bool:
        """Check if [start, end) can be added without overlapping a registered piece."""
        return can_insert_bounded(self._pieces, start, end)

    def build(self) -> PartialFunction:
        """Consume the builder and return the immutable PartialFunction."""
        self._ensure_usable()
        self._consumed = True
        function = PartialFunction(tuple(self._pieces))
        self._pieces = []
        logger.info("Built partial function with %d pieces", len(function))
        return function
