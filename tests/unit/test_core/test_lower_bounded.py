"""Unit tests for LowerPartialFunction and LowerPartialFunctionBuilder."""
from concurrent.futures import ThreadPoolExecutor

import pytest

from pypartfn.core.exceptions import BuilderConsumedError, OverlapError
from pypartfn.core.lower_bounded import LowerPartialFunction, LowerPartialFunctionBuilder
from pypartfn.core.pieces import LowerBoundedPiece


class TestLowerEvaluation:
    """Test cases for evaluating lower-bounded partial functions."""
    def test_normal(self, step_function):
        """Test evaluation below, at and above each start."""
        assert step_function.eval(-1.0) is None
        assert step_function.eval(0.0) == 1
        assert step_function.eval(0.5) == 1
        assert step_function.eval(1.0) == 2
        assert step_function.eval(1000.0) == 2

    def test_inverse_insert(self):
        """Test that the greatest start wins regardless of registration order."""
        f = (LowerPartialFunction.new()
             .with_(1.0, lambda x: 2)
             .with_(0.0, lambda x: 1)
             .build())
        assert f.eval(-1.0) is None
        assert f.eval(0.0) == 1
        assert f.eval(0.5) == 1
        assert f.eval(1.0) == 2
        assert f.eval(1000.0) == 2

    def test_boundary_values(self):
        """Test start=0 -> f0, start=5 -> f1 around the boundary."""
        f = (LowerPartialFunction.new()
             .with_(0.0, lambda x: x)
             .with_(5.0, lambda x: x * 10)
             .build())
        assert f.eval(5.0) == 50.0
        assert f.eval(4.999) == 4.999
        assert f.eval(-1.0) is None

    def test_duplicate_start_last_registered_wins(self):
        """Test the tie-break among pieces sharing the maximum start."""
        f = (LowerPartialFunction.new()
             .with_(0.0, lambda x: 1)
             .with_(0.0, lambda x: 2)
             .build())
        assert f.eval(0.0) == 2
        assert f.eval(10.0) == 2
        assert f.eval(-0.1) is None

    def test_duplicate_start_below_maximum(self):
        """Test that ties below the maximum start do not matter once a greater start applies."""
        f = (LowerPartialFunction.new()
             .with_(0.0, lambda x: 1)
             .with_(3.0, lambda x: 3)
             .with_(0.0, lambda x: 2)
             .build())
        assert f.eval(1.0) == 2
        assert f.eval(3.0) == 3

    def test_unsorted_many_pieces(self):
        """Test the greatest applicable start is chosen among unsorted pieces."""
        starts = [7.0, -3.0, 2.0, 10.0, 0.0]
        builder = LowerPartialFunction.new()
        for start in starts:
            builder.with_(start, lambda x, s=start: s)
        f = builder.build()
        assert f.eval(-5.0) is None
        assert f.eval(-3.0) == -3.0
        assert f.eval(1.0) == 0.0
        assert f.eval(6.9) == 2.0
        assert f.eval(9.0) == 7.0
        assert f.eval(1e12) == 10.0

    def test_select_returns_piece(self, step_function):
        """Test that select exposes the applicable piece."""
        piece = step_function.select(0.5)
        assert isinstance(piece, LowerBoundedPiece)
        assert piece.start == 0.0
        assert step_function.select(-0.5) is None

    def test_nan_is_undefined(self, step_function):
        """Test that NaN is below no start."""
        assert step_function.eval(float('nan')) is None

    def test_infinite_start(self):
        """Test a piece starting at -inf covers every finite point."""
        f = LowerPartialFunction.new().with_(float('-inf'), lambda x: 0.0).build()
        assert f.eval(-1e300) == 0.0

    def test_empty_function(self):
        """Test that a function without pieces is undefined everywhere."""
        f = LowerPartialFunction.new().build()
        assert len(f) == 0
        for x in (-1e9, 0.0, 1e9):
            assert f.eval(x) is None

    def test_call_alias(self, step_function):
        """Test that calling the function is the same as eval."""
        assert step_function(0.5) == 1
        assert step_function(-0.5) is None

    def test_expression_computation(self):
        """Test registering a string expression."""
        f = LowerPartialFunction.new().with_(0.0, "x**2").build()
        assert f.eval(3.0) == pytest.approx(9.0)

    def test_idempotent(self, step_function):
        """Test that repeated evaluation returns the same result."""
        assert [step_function.eval(1.0) for _ in range(5)] == [2] * 5

    def test_concurrent_evaluation(self, step_function):
        """Test that a built function can be evaluated from many threads."""
        points = [i / 4 for i in range(-8, 40)]
        expected = [step_function.eval(x) for x in points]
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(step_function.eval, points))
        assert results == expected


class TestLowerPartialFunctionBuilder:
    """Test cases for LowerPartialFunctionBuilder."""
    def test_new_returns_builder(self):
        """Test that LowerPartialFunction.new() creates an empty builder."""
        builder = LowerPartialFunction.new()
        assert isinstance(builder, LowerPartialFunctionBuilder)
        assert len(builder) == 0

    def test_with_returns_self(self):
        """Test that registration returns the builder for chaining."""
        builder = LowerPartialFunctionBuilder()
        assert builder.with_(0.0, lambda x: x) is builder

    def test_build_keeps_registration_order(self):
        """Test that build does not sort the pieces."""
        f = (LowerPartialFunctionBuilder()
             .with_(1.0, lambda x: 2)
             .with_(0.0, lambda x: 1)
             .build())
        assert [piece.start for piece in f.pieces] == [1.0, 0.0]

    def test_builder_consumed_by_build(self):
        """Test that a builder cannot be reused after build."""
        builder = LowerPartialFunction.new().with_(0.0, lambda x: 1)
        builder.build()
        with pytest.raises(BuilderConsumedError):
            builder.with_(1.0, lambda x: 2)
        with pytest.raises(BuilderConsumedError):
            builder.build()

    def test_can_insert(self):
        """Test duplicate start detection."""
        builder = LowerPartialFunction.new().with_(0.0, lambda x: 1)
        assert not builder.can_insert(0.0)
        assert builder.can_insert(1.0)

    def test_strict_rejects_duplicate_start(self):
        """Test that a strict builder refuses a duplicate start."""
        builder = LowerPartialFunction.new(strict=True).with_(0.0, lambda x: 1)
        with pytest.raises(OverlapError, match="already registered"):
            builder.with_(0.0, lambda x: 2)
        assert len(builder) == 1

    def test_repr(self, step_function):
        """Test the string representation lists the starts."""
        assert repr(step_function) == "LowerPartialFunction([0.0..[, [1.0..[)"
