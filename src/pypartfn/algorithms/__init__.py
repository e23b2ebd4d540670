"""
Algorithms layered on top of the core partial functions.

This module provides declarative construction (from literals or the text
form), array evaluation with numpy, and conversion to SymPy Piecewise.
"""

from .declarative import partfn, lowpartfn, parse_partfn, parse_lowpartfn
from .evaluation import evaluate_array
from .symbolic import to_piecewise

__all__ = [
    "partfn",
    "lowpartfn",
    "parse_partfn",
    "parse_lowpartfn",
    "evaluate_array",
    "to_piecewise"
]
