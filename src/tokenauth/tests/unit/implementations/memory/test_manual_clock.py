# ABOUTME: Unit tests for ManualClock
# ABOUTME: Tests setting, advancing and concurrent use of the in-memory clock

import threading

import pytest

from tokenauth.implementations.memory.clock import ManualClock
from tokenauth.interfaces.clock import AbstractClock


class TestManualClock:
    """Test suite for ManualClock."""

    @pytest.mark.unit
    def test_starts_at_given_instant(self):
        clock = ManualClock(1_700_000_000_000)
        assert isinstance(clock, AbstractClock)
        assert clock.now_millis() == 1_700_000_000_000

    @pytest.mark.unit
    def test_default_start_is_epoch(self):
        assert ManualClock().now_millis() == 0

    @pytest.mark.unit
    def test_advance_millis_and_seconds(self):
        clock = ManualClock(1000)

        assert clock.advance(500) == 1500
        assert clock.advance(seconds=2) == 3500
        assert clock.advance(1, seconds=0.5) == 4001
        assert clock.now_millis() == 4001

    @pytest.mark.unit
    def test_advance_rejects_negative_step(self):
        clock = ManualClock(1000)
        with pytest.raises(ValueError):
            clock.advance(-1)
        assert clock.now_millis() == 1000

    @pytest.mark.unit
    def test_set_jumps_anywhere(self):
        clock = ManualClock(1000)
        clock.set(10)
        assert clock.now_millis() == 10

    @pytest.mark.unit
    def test_concurrent_advances_are_not_lost(self):
        clock = ManualClock(0)

        def worker():
            for _ in range(1000):
                clock.advance(1)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert clock.now_millis() == 8000

    @pytest.mark.unit
    def test_repr(self):
        assert repr(ManualClock(5)) == "ManualClock(now_millis=5)"
