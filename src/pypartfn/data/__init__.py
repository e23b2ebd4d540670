"""Processing constants and message templates for pypartfn."""

from .constants import ProcessingConstants, ErrorMessages

__all__ = [
    "ProcessingConstants",
    "ErrorMessages"
]
