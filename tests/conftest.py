"""Shared pytest fixtures for pypartfn tests."""
import pytest
import sympy as sp

from pypartfn.core.bounded import PartialFunction
from pypartfn.core.lower_bounded import LowerPartialFunction
from pypartfn.core.symbol_registry import SymbolRegistry


@pytest.fixture
def x_symbol():
    """Registry symbol used by expression computations."""
    return SymbolRegistry.get('x')


@pytest.fixture
def plain_symbol():
    """Symbol created without assumptions, as callers usually do."""
    return sp.Symbol('x')


@pytest.fixture
def identity_then_double():
    """[0, 5]: x registered before [5, 10]: 2x."""
    return (PartialFunction.new()
            .with_(0.0, 5.0, lambda x: x)
            .with_(5.0, 10.0, lambda x: x * 2)
            .build())


@pytest.fixture
def step_function():
    """[0..inf[ = 1, [1..inf[ = 2."""
    return (LowerPartialFunction.new()
            .with_(0.0, lambda x: 1)
            .with_(1.0, lambda x: 2)
            .build())


@pytest.fixture
def symbolic_bounded():
    """Bounded function whose pieces all carry expressions."""
    return (PartialFunction.new()
            .with_(0.0, 1.0, "x")
            .with_(1.0, 2.0, "x**2 + 1")
            .with_(3.0, 4.0, 7)
            .build())


@pytest.fixture
def symbolic_lower():
    """Lower-bounded function whose pieces all carry expressions."""
    return (LowerPartialFunction.new()
            .with_(0.0, "x + 1")
            .with_(10.0, "2*x")
            .with_(5.0, "x - 5")
            .build())
