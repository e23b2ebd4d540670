"""Declarative construction of partial functions from literals and text."""
import logging
import re
from typing import Any, Iterable, List, Mapping, Tuple, Union

import sympy as sp

from pypartfn.core.bounded import PartialFunction
from pypartfn.core.computation import Computation, ComputationLike
from pypartfn.core.exceptions import PartialFunctionError, PartialFunctionSyntaxError
from pypartfn.core.lower_bounded import LowerPartialFunction
from pypartfn.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)

_ENTRY_PATTERN = re.compile(ProcessingConstants.ENTRY_REGEX, re.DOTALL)
_SEPARATOR_PATTERN = re.compile(ProcessingConstants.SEPARATOR_REGEX)

BoundedPieces = Union[Mapping[Tuple[float, float], ComputationLike],
                      Iterable[Tuple[Tuple[float, float], ComputationLike]]]
LowerPieces = Union[Mapping[float, ComputationLike], Iterable[Tuple[float, ComputationLike]]]


def _items(pieces) -> Iterable[Tuple[Any, Any]]:
    return pieces.items() if isinstance(pieces, Mapping) else pieces


def partfn(pieces: BoundedPieces, symbol: str = ProcessingConstants.DEFAULT_SYMBOL_NAME,
           strict: bool = False) -> PartialFunction:
    """
    Build a PartialFunction from (start, end) -> computation entries.
    Args:
        pieces: Mapping or iterable of ((start, end), computation), registered in iteration order
        symbol: Variable name used by expression computations
        strict: Reject overlapping intervals
    Returns:
        PartialFunction: The built function
    """
    builder = PartialFunction.new(strict=strict)
    for bounds, computation in _items(pieces):
        try:
            start, end = bounds
        except (TypeError, ValueError) as e:
            raise PartialFunctionError(f"Bounded piece needs (start, end) bounds, got {bounds!r}") from e
        builder.with_(start, end, computation, symbol)
    return builder.build()


def lowpartfn(pieces: LowerPieces, symbol: str = ProcessingConstants.DEFAULT_SYMBOL_NAME,
              strict: bool = False) -> LowerPartialFunction:
    """Build a LowerPartialFunction from start -> computation entries, in iteration order."""
    builder = LowerPartialFunction.new(strict=strict)
    for start, computation in _items(pieces):
        builder.with_(start, computation, symbol)
    return builder.build()


def _parse_bound(text: str, position: int, bound: str) -> float:
    try:
        return float(sp.sympify(bound))
    except (sp.SympifyError, SyntaxError, TypeError, ValueError) as e:
        raise PartialFunctionSyntaxError(text, position, f"invalid bound '{bound}': {e}") from e


def _parse_entries(text: str, n_bounds: int) -> List[Tuple[List[float], Computation]]:
    """Split definition text into parsed bounds and compiled computations."""
    entries = []
    position = 0
    for match in _ENTRY_PATTERN.finditer(text):
        if not _SEPARATOR_PATTERN.match(text[position:match.start()]):
            raise PartialFunctionSyntaxError(text, position, "expected '[bounds]: var -> expression'")
        bounds = [b.strip() for b in match.group('bounds').split(',')]
        if len(bounds) != n_bounds:
            raise PartialFunctionSyntaxError(
                text, match.start(), f"expected {n_bounds} bound(s), got {len(bounds)}")
        values = [_parse_bound(text, match.start(), b) for b in bounds]
        try:
            computation = Computation.from_expression(match.group('expr'), match.group('var'))
        except PartialFunctionError as e:
            raise PartialFunctionSyntaxError(text, match.start('expr'), str(e)) from e
        entries.append((values, computation))
        position = match.end()
    if not _SEPARATOR_PATTERN.match(text[position:]):
        raise PartialFunctionSyntaxError(text, position, "unexpected trailing text")
    logger.debug("Parsed %d entries from definition text", len(entries))
    return entries


def parse_partfn(text: str, strict: bool = False) -> PartialFunction:
    """
    Build a PartialFunction from its text form.

    Example:
        parse_partfn('''
            [0.0, 1.0]: x -> x,
            [1.0, 2.0]: x -> 5.0,
        ''')
    """
    return partfn((((start, end), computation) for (start, end), computation in _parse_entries(text, 2)),
                  strict=strict)


def parse_lowpartfn(text: str, strict: bool = False) -> LowerPartialFunction:
    """Build a LowerPartialFunction from entries of the form '[start]: x -> expr'."""
    return lowpartfn(((start, computation) for (start,), computation in _parse_entries(text, 1)),
                     strict=strict)
