"""
pypartfn - Partial functions assembled from bounds-delimited pieces.

A partial function is built piece by piece, each piece pairing an interval
with the computation that applies on it, and evaluated at a point by
dispatching to the piece whose interval contains that point. Points no piece
covers evaluate to None.

Main Components:
- Core: computations, pieces, builders and the two function variants
- Algorithms: declarative construction, array evaluation, SymPy export
- Data: processing constants and message templates
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pypartfn")
except PackageNotFoundError:
    __version__ = "0.1.0+unknown"  # Fallback version

# Core types
from .core.computation import Computation
from .core.pieces import BoundedPiece, LowerBoundedPiece
from .core.bounded import PartialFunction, PartialFunctionBuilder
from .core.lower_bounded import LowerPartialFunction, LowerPartialFunctionBuilder
from .core.exceptions import (
    PartialFunctionError,
    BuilderConsumedError,
    OverlapError,
    ComputationError,
    PartialFunctionSyntaxError
)

# Algorithms
from .algorithms.declarative import partfn, lowpartfn, parse_partfn, parse_lowpartfn
from .algorithms.evaluation import evaluate_array
from .algorithms.symbolic import to_piecewise

__all__ = [
    # Version
    '__version__',

    # Core classes
    'Computation',
    'BoundedPiece',
    'LowerBoundedPiece',
    'PartialFunction',
    'PartialFunctionBuilder',
    'LowerPartialFunction',
    'LowerPartialFunctionBuilder',

    # Exceptions
    'PartialFunctionError',
    'BuilderConsumedError',
    'OverlapError',
    'ComputationError',
    'PartialFunctionSyntaxError',

    # Algorithms
    'partfn',
    'lowpartfn',
    'parse_partfn',
    'parse_lowpartfn',
    'evaluate_array',
    'to_piecewise'
]
