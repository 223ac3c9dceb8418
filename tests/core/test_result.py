"""Tests for IndicatorResult and Action"""

import math

import pytest

from ta_dispatch.core.result import Action, IndicatorResult


class TestAction:
    """Test Action helpers"""

    def test_from_sign(self):
        assert Action.from_sign(2.5) is Action.BUY
        assert Action.from_sign(-0.1) is Action.SELL
        assert Action.from_sign(0.0) is Action.NONE

    def test_from_sign_nan(self):
        """NaN carries no direction"""
        assert Action.from_sign(math.nan) is Action.NONE

    def test_sign(self):
        assert [a.sign for a in (Action.BUY, Action.SELL, Action.NONE)] == [1, -1, 0]


class TestIndicatorResult:
    """Test the result payload"""

    def test_size(self):
        result = IndicatorResult(values=(1.0, 2.0), signals=(Action.BUY,))
        assert result.size == (2, 1)
        assert result.value(1) == 2.0
        assert result.signal(0) is Action.BUY

    def test_empty_result(self):
        assert IndicatorResult().size == (0, 0)

    def test_coerces_to_tuples(self):
        """Lists and ints are normalized to float/Action tuples"""
        result = IndicatorResult.of([1, 2], ["sell"])
        assert result.values == (1.0, 2.0)
        assert result.signals == (Action.SELL,)

    def test_nan_values_compare_equal(self):
        """NaN sentinels do not break result equality"""
        left = IndicatorResult(values=(math.nan, 1.0), signals=(Action.NONE,))
        right = IndicatorResult(values=(math.nan, 1.0), signals=(Action.NONE,))
        assert left == right
        assert hash(left) == hash(right)

    def test_inequality(self):
        base = IndicatorResult(values=(1.0,), signals=(Action.NONE,))
        assert base != IndicatorResult(values=(1.5,), signals=(Action.NONE,))
        assert base != IndicatorResult(values=(1.0,), signals=(Action.BUY,))
        assert base != IndicatorResult(values=(1.0,))
        assert base != (1.0,)

    def test_invalid_signal_rejected(self):
        with pytest.raises(ValueError):
            IndicatorResult(signals=("hold",))
