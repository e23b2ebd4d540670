"""
Core data structures for partial functions.

This module contains the computation wrapper, the piece records, and the
builder/function pairs of the bounded and lower-bounded variants.
"""

from .computation import Computation, as_computation
from .symbol_registry import SymbolRegistry
from .pieces import BoundedPiece, LowerBoundedPiece
from .bounded import PartialFunction, PartialFunctionBuilder
from .lower_bounded import LowerPartialFunction, LowerPartialFunctionBuilder
from .exceptions import (
    PartialFunctionError,
    BuilderConsumedError,
    OverlapError,
    ComputationError,
    PartialFunctionSyntaxError
)

__all__ = [
    "Computation",
    "as_computation",
    "SymbolRegistry",
    "BoundedPiece",
    "LowerBoundedPiece",
    "PartialFunction",
    "PartialFunctionBuilder",
    "LowerPartialFunction",
    "LowerPartialFunctionBuilder",
    "PartialFunctionError",
    "BuilderConsumedError",
    "OverlapError",
    "ComputationError",
    "PartialFunctionSyntaxError"
]
