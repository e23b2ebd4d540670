from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used when building and evaluating partial functions."""
    # Expressions
    DEFAULT_SYMBOL_NAME: Final[str] = 'x'
    LAMBDIFY_MODULES: Final[str] = 'math'
    # Declarative text form: "[start, end]: x -> expr" or "[start]: x -> expr"
    ENTRY_REGEX: Final[str] = r'\[(?P<bounds>[^\[\]]*)\]\s*:\s*(?P<var>[A-Za-z_]\w*)\s*->\s*(?P<expr>.+?)\s*(?:,\s*)?(?=\[|\Z)'
    SEPARATOR_REGEX: Final[str] = r'^[\s,]*$'
    # Logging
    MAX_LOGGED_PIECES: Final[int] = 10


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    BUILDER_CONSUMED: Final[str] = "{builder} has already been built and cannot be reused"
    BOUNDED_OVERLAP: Final[str] = "Interval [{start}, {end}) overlaps an already registered piece"
    DUPLICATE_START: Final[str] = "A piece starting at {start} is already registered"
    INVALID_SYMBOLS: Final[str] = "Invalid symbols {symbols} in expression '{expr}'. Only '{symbol}' is allowed."
    NOT_A_COMPUTATION: Final[str] = "Cannot use {type_name} as a computation: {value!r}"
    MISSING_EXPRESSION: Final[str] = "Piece {index} has no symbolic expression"
