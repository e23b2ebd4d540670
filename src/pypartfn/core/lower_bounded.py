"""
Lower-bounded partial functions.

Each piece is valid from its start upwards until a piece with a greater start
takes over. Evaluation picks the piece with the greatest start that is still
<= x, regardless of registration order. When several pieces share that start,
the last registered one wins.

Example:
    [0..inf[ = 5
    [1..inf[ = 10

    f(0.5) = 5
    f(1)   = 10
    f(70)  = 10
    f(-1)  = None
"""
import logging
from typing import Any, List, Optional, Tuple

from pypartfn.core.computation import ComputationLike, as_computation
from pypartfn.core.exceptions import BuilderConsumedError, OverlapError
from pypartfn.core.overlap import can_insert_lower
from pypartfn.core.pieces import LowerBoundedPiece
from pypartfn.data.constants import ProcessingConstants, ErrorMessages

logger = logging.getLogger(__name__)


class LowerPartialFunction:
    """Immutable function defined by lower-bounded pieces."""
    __slots__ = ("_pieces",)

    def __init__(self, pieces: Tuple[LowerBoundedPiece, ...]):
        self._pieces = tuple(pieces)

    @staticmethod
    def new(strict: bool = False) -> 'LowerPartialFunctionBuilder':
        """Creates a new LowerPartialFunctionBuilder."""
        return LowerPartialFunctionBuilder(strict=strict)

    @property
    def pieces(self) -> Tuple[LowerBoundedPiece, ...]:
        return self._pieces

    def select(self, x) -> Optional[LowerBoundedPiece]:
        """Return the piece that applies at x, or None below every start."""
        best = None
        for piece in self._pieces:
            # >= so that the last registered piece wins a tie
            if piece.contains(x) and (best is None or piece.start >= best.start):
                best = piece
        return best

    def eval(self, x) -> Optional[Any]:
        """
        Evaluate the function at x.
        Returns:
            Output of the applicable piece, or None if x lies below every start
        """
        piece = self.select(x)
        if piece is None:
            logger.debug("No piece defined at x=%s (%d pieces)", x, len(self._pieces))
            return None
        return piece.computation(x)

    def __call__(self, x) -> Optional[Any]:
        return self.eval(x)

    def __len__(self) -> int:
        return len(self._pieces)

    def __repr__(self) -> str:
        starts = ", ".join(f"[{p.start}..[" for p in self._pieces[:ProcessingConstants.MAX_LOGGED_PIECES])
        if len(self._pieces) > ProcessingConstants.MAX_LOGGED_PIECES:
            starts += ", ..."
        return f"LowerPartialFunction({starts})"


class LowerPartialFunctionBuilder:
    """Mutable accumulator of lower-bounded pieces, consumed by build()."""

    def __init__(self, strict: bool = False):
        self._pieces: List[LowerBoundedPiece] = []
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

    def with_(self, start: float, computation: ComputationLike,
              symbol_name: str = ProcessingConstants.DEFAULT_SYMBOL_NAME) -> 'LowerPartialFunctionBuilder':
        """
        Register a piece valid from start upwards.
        Args:
            start: Lower bound (inclusive)
            computation: Callable, SymPy expression, expression string or number
            symbol_name: Variable name used when computation is an expression
        Returns:
            LowerPartialFunctionBuilder: self, to allow chaining
        Raises:
            BuilderConsumedError: If build() was already called
            OverlapError: If the builder is strict and start is already registered
        """
        self._ensure_usable()
        if not can_insert_lower(self._pieces, start):
            if self._strict:
                raise OverlapError(ErrorMessages.DUPLICATE_START.format(start=start))
            logger.warning("Duplicate start %s; the last registered piece takes precedence", start)
        piece = LowerBoundedPiece(start, as_computation(computation, symbol_name))
        self._pieces.append(piece)
        logger.debug("Registered piece %d: [%s..[ -> %r", len(self._pieces), start, piece.computation)
        return self

    def can_insert(self, start: float) -> bool:
        """Check if no piece with the same start is registered yet."""
        return can_insert_lower(self._pieces, start)

    def build(self) -> LowerPartialFunction:
        """Consume the builder and return the immutable LowerPartialFunction."""
        self._ensure_usable()
        self._consumed = True
        function = LowerPartialFunction(tuple(self._pieces))
        self._pieces = []
        logger.info("Built lower partial function with %d pieces", len(function))
        return function
