import logging
import numbers
from typing import Any, Callable, Optional, Union

import sympy as sp

from pypartfn.core.exceptions import ComputationError
from pypartfn.core.symbol_registry import SymbolRegistry
from pypartfn.data.constants import ProcessingConstants, ErrorMessages

logger = logging.getLogger(__name__)

ComputationLike = Union['Computation', Callable[[float], Any], sp.Expr, str, float, int]


class Computation:
    """
    A unit of work mapping one numeric input to one numeric output.

    Every piece of a partial function owns exactly one Computation. It either
    wraps an arbitrary Python callable or a SymPy expression in a single
    variable, compiled with lambdify. Only expression-backed computations can
    be exported symbolically.
    """
    __slots__ = ("_func", "_expression", "_symbol")

    def __init__(self, func: Callable[[float], Any],
                 expression: Optional[sp.Expr] = None, symbol: Optional[sp.Symbol] = None):
        if not callable(func):
            raise ComputationError(ErrorMessages.NOT_A_COMPUTATION.format(
                type_name=type(func).__name__, value=func))
        self._func = func
        self._expression = expression
        self._symbol = symbol

    @classmethod
    def from_expression(cls, expr: Union[sp.Expr, str, float, int],
                        symbol_name: str = ProcessingConstants.DEFAULT_SYMBOL_NAME) -> 'Computation':
        """
        Create a computation from a symbolic expression.
        Args:
            expr: SymPy expression, string parseable by sympify, or a number
            symbol_name: Name of the single free variable the expression may use
        Returns:
            Computation: Compiled computation carrying its expression
        Raises:
            ComputationError: If the expression cannot be parsed or uses other symbols
        """
        symbol = SymbolRegistry.get(symbol_name)
        logger.debug("Parsing expression %r in variable '%s'", expr, symbol_name)
        try:
            if isinstance(expr, sp.Lambda):
                if len(expr.variables) != 1:
                    raise ComputationError(
                        f"Lambda must take exactly one argument, got {len(expr.variables)}")
                parsed = expr.expr.subs(expr.variables[0], symbol)
            elif isinstance(expr, str):
                parsed = sp.sympify(expr, locals={symbol_name: symbol})
            else:
                parsed = sp.sympify(expr)
        except (sp.SympifyError, SyntaxError, TypeError) as e:
            raise ComputationError(f"Failed to parse expression '{expr}': {e}") from e
        if not isinstance(parsed, sp.Expr):
            raise ComputationError(ErrorMessages.NOT_A_COMPUTATION.format(
                type_name=type(parsed).__name__, value=expr))
        # Symbols built by the caller carry no assumptions; map them by name
        same_name = {s: symbol for s in parsed.free_symbols if s.name == symbol_name and s != symbol}
        if same_name:
            parsed = parsed.subs(same_name)
        invalid_symbols = sorted(str(s) for s in parsed.free_symbols if s != symbol)
        if invalid_symbols:
            logger.error("Invalid symbols in expression '%s': %s (only '%s' allowed)",
                         expr, invalid_symbols, symbol_name)
            raise ComputationError(ErrorMessages.INVALID_SYMBOLS.format(
                symbols=invalid_symbols, expr=expr, symbol=symbol_name))
        compiled = sp.lambdify(symbol, parsed, modules=ProcessingConstants.LAMBDIFY_MODULES)

        def evaluate(x):
            return float(compiled(x))

        logger.debug("Compiled expression: %s", parsed)
        return cls(evaluate, expression=parsed, symbol=symbol)

    @property
    def expression(self) -> Optional[sp.Expr]:
        """Symbolic expression of the computation, None for plain callables."""
        return self._expression

    @property
    def symbol(self) -> Optional[sp.Symbol]:
        return self._symbol

    @property
    def is_symbolic(self) -> bool:
        return self._expression is not None

    def __call__(self, x):
        return self._func(x)

    def __repr__(self) -> str:
        if self._expression is not None:
            return f"Computation({self._symbol} -> {self._expression})"
        return f"Computation({getattr(self._func, '__name__', type(self._func).__name__)})"


def as_computation(value: ComputationLike,
                   symbol_name: str = ProcessingConstants.DEFAULT_SYMBOL_NAME) -> Computation:
    """Coerce a callable, expression, string or number into a Computation."""
    if isinstance(value, Computation):
        return value
    # SymPy objects are callable, so they are checked first
    if isinstance(value, (sp.Basic, str)):
        return Computation.from_expression(value, symbol_name)
    if isinstance(value, numbers.Number) and not isinstance(value, bool):
        return Computation.from_expression(value, symbol_name)
    if callable(value):
        return Computation(value)
    raise ComputationError(ErrorMessages.NOT_A_COMPUTATION.format(
        type_name=type(value).__name__, value=value))
