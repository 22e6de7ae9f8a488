"""Tests for the routing strategies."""

import pytest

from conftest import RecordingSender
from log_router import levels
from log_router.exceptions import InvalidArgumentError
from log_router.senders.null import NullSender
from log_router.strategies.base import Strategy, StrategyBase
from log_router.strategies.leveled import LeveledStrategy
from log_router.strategies.trivial import TrivialStrategy


@pytest.fixture
def bands():
    return RecordingSender(), RecordingSender(), RecordingSender()


class TestStrategyBase:
    def test_defaults(self):
        strategy = StrategyBase()
        assert strategy.customize_senders([NullSender()]) == []
        assert strategy.customize_logger(object()) is None
        with pytest.raises(NotImplementedError):
            strategy.select_senders(0)

    def test_protocol(self):
        assert isinstance(StrategyBase(), Strategy)
        assert not isinstance(object(), Strategy)


class TestLeveledStrategy:
    def test_explicit_thresholds(self, bands):
        low, medium, high = bands
        strategy = LeveledStrategy(low, medium, high, min_low=7, max_high=3)
        assert strategy.select_senders(7) == [low]
        assert strategy.select_senders(0) == [high]
        assert strategy.select_senders(5) == [medium]

    def test_default_thresholds(self, bands):
        low, medium, high = bands
        strategy = LeveledStrategy(low, medium, high)
        assert strategy.min_low == levels.DEBUG
        assert strategy.max_high == levels.WARNING
        expected = {
            0: high, 1: high, 2: high, 3: high, 4: high,
            5: medium, 6: medium,
            7: low,
        }
        for level, sender in expected.items():
            assert strategy.select_senders(level) == [sender]

    def test_exactly_one_sender_per_level(self, bands):
        strategy = LeveledStrategy(*bands, min_low=6, max_high=2)
        for level in range(8):
            assert len(strategy.select_senders(level)) == 1

    def test_degenerate_thresholds_starve_medium(self, bands):
        low, medium, high = bands
        strategy = LeveledStrategy(low, medium, high, min_low=3, max_high=5)
        selected = [strategy.select_senders(level)[0] for level in range(8)]
        assert medium not in selected

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_rejects_non_senders(self, bands, position):
        senders = list(bands)
        senders[position] = "not a sender"
        with pytest.raises(InvalidArgumentError):
            LeveledStrategy(*senders)

    def test_customize_senders_adds_each_band_once(self):
        shared = RecordingSender()
        high = RecordingSender()
        strategy = LeveledStrategy(shared, shared, high)
        assert strategy.customize_senders([]) == [shared, high]
        assert strategy.customize_senders([high]) == [shared]


class TestTrivialStrategy:
    def test_single_sender_for_every_level(self):
        sender = RecordingSender()
        strategy = TrivialStrategy(sender)
        for level in range(8):
            assert strategy.select_senders(level) == [sender]

    def test_defaults_to_null_sender(self):
        strategy = TrivialStrategy()
        assert isinstance(strategy.sender, NullSender)

    def test_customize_senders(self):
        sender = RecordingSender()
        strategy = TrivialStrategy(sender)
        assert strategy.customize_senders([]) == [sender]
        assert strategy.customize_senders([sender]) == []

    def test_rejects_non_sender(self):
        with pytest.raises(InvalidArgumentError):
            TrivialStrategy(42)
