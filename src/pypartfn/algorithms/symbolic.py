import logging
from typing import Optional, Union

import sympy as sp

from pypartfn.core.bounded import PartialFunction
from pypartfn.core.exceptions import ComputationError, PartialFunctionError
from pypartfn.core.lower_bounded import LowerPartialFunction
from pypartfn.core.symbol_registry import SymbolRegistry
from pypartfn.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


def _piece_expression(piece, index: int, target: sp.Symbol) -> sp.Expr:
    computation = piece.computation
    if not computation.is_symbolic:
        raise ComputationError(ErrorMessages.MISSING_EXPRESSION.format(index=index))
    return computation.expression.subs(computation.symbol, target)


def to_piecewise(function: Union[PartialFunction, LowerPartialFunction],
                 symbol: Optional[Union[str, sp.Symbol]] = None) -> sp.Piecewise:
    """
    Convert a partial function into an equivalent SymPy Piecewise.

    SymPy picks the first true condition, which is exactly the registration
    order policy of bounded functions. Lower-bounded pieces are emitted by
    descending start, later registrations first among equal starts.
    Args:
        function: Partial function whose pieces all carry symbolic expressions
        symbol: Variable of the result, defaults to the registry symbol 'x'
    Returns:
        sp.Piecewise: Symbolic piecewise function, undefined where the function is
    Raises:
        ComputationError: If a piece wraps a plain callable
    """
    if not isinstance(function, (PartialFunction, LowerPartialFunction)):
        raise TypeError(f"Expected a partial function, got {type(function).__name__}")
    if len(function) == 0:
        raise PartialFunctionError("Cannot convert a partial function without pieces")
    target = SymbolRegistry.resolve(symbol)
    conditions = []
    if isinstance(function, PartialFunction):
        for index, piece in enumerate(function.pieces):
            expr = _piece_expression(piece, index, target)
            conditions.append((expr, sp.And(target >= piece.start, target <= piece.end)))
    else:
        ordered = sorted(enumerate(function.pieces), key=lambda item: (item[1].start, item[0]), reverse=True)
        for index, piece in ordered:
            expr = _piece_expression(piece, index, target)
            conditions.append((expr, target >= piece.start))
    logger.debug("Converted %s with %d pieces to Piecewise", type(function).__name__, len(conditions))
    return sp.Piecewise(*conditions)
