"""Unit tests for the debounce timer."""

import pytest

from shiki.util.debounce import Debouncer


class FakeClock:
    """Manually advanced clock; ``sleep`` advances it instantly."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    async def sleep(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


class TestDebouncer:
    """Tests for Debouncer."""

    def test_not_ready_before_quiet_period(self, clock):
        debouncer = Debouncer(0.3, clock=clock)
        debouncer.submit("re")

        clock.advance(0.2)

        assert debouncer.poll() is None
        assert debouncer.pending

    def test_fires_latest_value_once(self, clock):
        # Arrange
        debouncer = Debouncer(0.3, clock=clock)
        debouncer.submit("r")
        clock.advance(0.1)
        debouncer.submit("re")
        clock.advance(0.1)
        debouncer.submit("react")

        # Act
        clock.advance(0.3)
        fired = debouncer.poll()

        # Assert
        assert fired == "react"
        assert debouncer.poll() is None
        assert not debouncer.pending

    def test_new_input_resets_deadline(self, clock):
        debouncer = Debouncer(0.3, clock=clock)
        debouncer.submit("a")
        clock.advance(0.25)
        debouncer.submit("ab")
        clock.advance(0.25)

        assert debouncer.poll() is None
        clock.advance(0.1)
        assert debouncer.poll() == "ab"

    def test_cancel_drops_pending(self, clock):
        debouncer = Debouncer(0.3, clock=clock)
        debouncer.submit("a")
        debouncer.cancel()
        clock.advance(1)

        assert debouncer.poll() is None

    def test_flush_fires_early(self, clock):
        debouncer = Debouncer(0.3, clock=clock)
        debouncer.submit("a")

        assert debouncer.flush() == "a"
        assert debouncer.flush() is None

    @pytest.mark.asyncio
    async def test_wait_sleeps_until_due(self, clock):
        debouncer = Debouncer(0.3, clock=clock, sleep=clock.sleep)
        debouncer.submit("react")

        fired = await debouncer.wait()

        assert fired == "react"
        assert clock.now == pytest.approx(0.3)

    @pytest.mark.asyncio
    async def test_wait_with_nothing_pending(self, clock):
        debouncer = Debouncer(0.3, clock=clock, sleep=clock.sleep)
        assert await debouncer.wait() is None

    def test_negative_quiet_period_rejected(self):
        with pytest.raises(ValueError):
            Debouncer(-1)
