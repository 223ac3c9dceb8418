"""Tests for the dynamically dispatched configuration and instance adapters"""

from dataclasses import dataclass
from unittest.mock import patch

import pytest

from ta_dispatch.core.config import IndicatorConfig
from ta_dispatch.core.dd import (
    DynConfig,
    DynInstance,
    IndicatorConfigDyn,
    IndicatorInstanceDyn,
    into_dyn,
    into_dyn_instance,
)
from ta_dispatch.errors import (
    IncompatibleSeedError,
    IndicatorDomainError,
    InvalidParameterError,
)
from ta_dispatch.indicators.atr import AverageTrueRange
from ta_dispatch.indicators.example import Example, ExampleInstance
from ta_dispatch.indicators.rvol import RelativeVolume


@dataclass
class Failing(IndicatorConfig):
    """Indicator whose initialization always fails with a domain error."""
    NAME = "failing"

    def validate(self) -> bool:
        return True

    def size(self) -> tuple[int, int]:
        return 0, 0

    def instantiate(self, seed):
        raise IndicatorDomainError("warm-up data unavailable", indicator=self.NAME)


class TestBridge:
    """Test that any static config becomes dynamically dispatchable"""

    def test_into_dyn_wraps_static_config(self):
        config = Example(period=3)
        dyn = into_dyn(config)
        assert isinstance(dyn, IndicatorConfigDyn)
        assert isinstance(dyn, DynConfig)
        assert dyn.config is config

    def test_into_dyn_passes_boxed_through(self):
        dyn = into_dyn(Example())
        assert into_dyn(dyn) is dyn

    def test_boxed(self):
        assert Example(period=4).boxed() == DynConfig(Example(period=4))

    def test_rejects_non_configs(self):
        with pytest.raises(TypeError):
            DynConfig(object())
        with pytest.raises(TypeError):
            DynInstance(Example())

    def test_into_dyn_instance(self, sample_candle):
        instance = Example().init(sample_candle)
        dyn = into_dyn_instance(instance)
        assert isinstance(dyn, IndicatorInstanceDyn)
        assert dyn.instance is instance
        assert into_dyn_instance(dyn) is dyn


class TestDynConfig:
    """Test the dynamic configuration facade"""

    def test_pass_through_queries(self):
        dyn = into_dyn(AverageTrueRange(period=5))
        assert dyn.name() == "atr"
        assert dyn.size() == (2, 0)
        assert dyn.validate() is True

    def test_set_mutates_wrapped_config(self):
        dyn = into_dyn(Example())
        dyn.set("period", "7")
        assert dyn.config.period == 7

    def test_set_errors_pass_through(self):
        dyn = into_dyn(Example(period=3))
        with pytest.raises(InvalidParameterError):
            dyn.set("period", "0")
        assert dyn.config == Example(period=3)

    def test_init_returns_boxed_instance(self, sample_candle):
        dyn = into_dyn(Example(period=3))
        instance = dyn.init(sample_candle)
        assert isinstance(instance, IndicatorInstanceDyn)
        assert isinstance(instance.instance, ExampleInstance)
        assert instance.name() == "example"
        assert instance.size() == (1, 1)

    def test_init_duplicates_config(self, sample_candle):
        """The instance never aliases the borrowed configuration"""
        config = Example(period=3)
        dyn = into_dyn(config)
        instance = dyn.init(sample_candle)

        assert instance.instance.config == config
        assert instance.instance.config is not config

        dyn.set("period", "9")
        assert instance.instance.config.period == 3

    def test_init_and_over_leave_config_unchanged(self, trending_candles):
        config = Example(period=3)
        snapshot = config.copy()
        dyn = into_dyn(config)

        dyn.init(trending_candles[0])
        dyn.over(trending_candles)

        assert config == snapshot
        assert dyn.config is config

    def test_init_can_be_repeated(self, trending_candles):
        """Each init() is independent"""
        dyn = into_dyn(Example(period=3))
        first = dyn.init(trending_candles[0]).over(trending_candles)
        second = dyn.init(trending_candles[0]).over(trending_candles)
        assert first == second

    def test_invalid_config_fails_init(self, sample_candle):
        dyn = into_dyn(Example(period=0))
        with pytest.raises(InvalidParameterError):
            dyn.init(sample_candle)
        with pytest.raises(InvalidParameterError):
            dyn.over([sample_candle])

    def test_domain_errors_pass_through_unchanged(self, sample_candle):
        dyn = into_dyn(Failing())
        with pytest.raises(IndicatorDomainError, match="warm-up data unavailable") as exc_info:
            dyn.init(sample_candle)
        assert exc_info.value.indicator == "failing"
        with pytest.raises(IndicatorDomainError):
            dyn.over([sample_candle, sample_candle])

    def test_init_failure_is_logged(self, sample_candle):
        with patch("ta_dispatch.core.dd.logger") as logger:
            with pytest.raises(IndicatorDomainError):
                into_dyn(Failing()).init(sample_candle)
        logger.debug.assert_called_once()
        assert logger.debug.call_args.kwargs["indicator"] == "failing"
        assert logger.debug.call_args.kwargs["error_type"] == "IndicatorDomainError"

    def test_over_empty_does_not_init(self):
        with patch.object(Example, "init") as init:
            assert into_dyn(Example()).over([]) == []
            init.assert_not_called()

    def test_over_seed_error_yields_no_partial_results(self, sample_candle):
        bad = type(sample_candle)(open=1.0, high=1.0, low=3.0, close=2.0)
        with pytest.raises(IncompatibleSeedError):
            into_dyn(AverageTrueRange()).over([bad, sample_candle])


class TestErasureParity:
    """Type erasure must not change observable results"""

    @pytest.mark.parametrize("config", [
        Example(period=3),
        AverageTrueRange(period=4),
        RelativeVolume(period=3, threshold=1.2),
    ])
    def test_dynamic_over_matches_static_over(self, trending_candles, config):
        dynamic = into_dyn(config.copy()).over(trending_candles)
        static = config.copy().over(trending_candles)
        assert dynamic == static
        assert len(dynamic) == len(trending_candles)

    def test_dynamic_next_matches_static_next(self, trending_candles):
        dynamic = into_dyn(Example(period=2)).init(trending_candles[0])
        static = Example(period=2).init(trending_candles[0])
        for candle in trending_candles:
            assert dynamic.next(candle) == static.next(candle)

    def test_dynamic_instance_over_matches_config_over(self, trending_candles):
        dyn = into_dyn(AverageTrueRange(period=3))
        from_instance = dyn.init(trending_candles[0]).over(trending_candles)
        assert from_instance == dyn.over(trending_candles)


class TestHeterogeneousCollection:
    """A host can drive mixed indicator kinds uniformly"""

    def test_mixed_collection(self, trending_candles):
        configs: list[IndicatorConfigDyn] = [
            into_dyn(Example(period=3)),
            into_dyn(AverageTrueRange(period=3)),
            into_dyn(RelativeVolume(period=3)),
        ]

        instances = [config.init(trending_candles[0]) for config in configs]
        for candle in trending_candles:
            for config, instance in zip(configs, instances):
                assert instance.next(candle).size == config.size()

        assert [config.name() for config in configs] == ["example", "atr", "rvol"]
