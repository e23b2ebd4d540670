"""Custom exceptions for pypartfn core functionality."""
import logging

logger = logging.getLogger(__name__)


class PartialFunctionError(Exception):
    """Base exception for all partial-function errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("PartialFunctionError raised: %s", message)


class BuilderConsumedError(PartialFunctionError):
    """Exception raised when a builder is used after build() consumed it."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("BuilderConsumedError raised: %s", message)


class OverlapError(PartialFunctionError):
    """Exception raised when a strict builder rejects an overlapping piece."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("OverlapError raised: %s", message)


class ComputationError(PartialFunctionError):
    """Exception raised when a value cannot be used as a piece computation."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("ComputationError raised: %s", message)


class PartialFunctionSyntaxError(PartialFunctionError):
    """Exception for malformed declarative partial-function text."""

    def __init__(self, text: str, position: int, reason: str):
        self.text = text
        self.position = position
        self.reason = reason
        snippet = text[position:position + 30]
        message = f"Invalid partial function definition at position {position}: {reason}\nNear: '{snippet}'"
        super().__init__(message)
