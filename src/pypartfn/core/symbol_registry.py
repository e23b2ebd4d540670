import logging
import sympy as sp
from typing import Dict, Optional, Union

from pypartfn.core.exceptions import ComputationError
from pypartfn.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)


class SymbolRegistry:
    """Registry of the real-valued SymPy symbols used as piece variables."""
    _symbols = {}

    @classmethod
    def get(cls, name: str) -> sp.Symbol:
        """Get or create the variable symbol with the given name."""
        if not isinstance(name, str) or not name.isidentifier():
            raise ComputationError(f"Invalid variable name: {name!r}")
        if name not in cls._symbols:
            cls._symbols[name] = sp.Symbol(name, real=True)
            logger.debug("Created new variable symbol: %s", name)
        return cls._symbols[name]

    @classmethod
    def resolve(cls, symbol: Optional[Union[str, sp.Symbol]] = None) -> sp.Symbol:
        """Turn a name, a symbol or None (the default variable) into a symbol."""
        if symbol is None:
            return cls.get(ProcessingConstants.DEFAULT_SYMBOL_NAME)
        if isinstance(symbol, sp.Symbol):
            return symbol
        return cls.get(symbol)

    @classmethod
    def get_all(cls) -> Dict[str, sp.Symbol]:
        """Get all registered symbols."""
        return cls._symbols.copy()

    @classmethod
    def clear(cls) -> None:
        """Forget all registered symbols. Equal symbols are recreated on demand."""
        count = len(cls._symbols)
        cls._symbols.clear()
        logger.info("Cleared %d symbols from registry", count)
