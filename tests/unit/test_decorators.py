"""Tests for the timed decorator."""

import asyncio

import pytest

from perf_timer.context import timer_context
from perf_timer.decorators import timed
from perf_timer.schemas import Measure


class TestTimedSync:
    """Tests for timed on regular functions."""

    def test_records_into_current_timer(self, timer, clock):
        """Test the call is measured under the given name."""

        @timed("work")
        def work():
            clock.advance(8)
            return "done"

        with timer_context(timer):
            assert work() == "done"

        assert timer.measures == (Measure(name="work", duration=8.0),)

    def test_default_name_is_qualname(self, timer):
        """Test the function's qualified name is used by default."""

        @timed()
        def parse():
            return None

        with timer_context(timer):
            parse()

        assert timer.measures[0].name == parse.__qualname__

    def test_runs_untimed_without_timer(self):
        """Test the function still runs when no timer is installed."""

        @timed("work")
        def work(x, y=1):
            return x + y

        assert work(1, y=2) == 3

    def test_exception_propagates_and_is_measured(self, timer, clock):
        """Test errors propagate and the call is still recorded."""

        @timed("failing")
        def failing():
            clock.advance(1)
            raise KeyError("missing")

        with timer_context(timer):
            with pytest.raises(KeyError):
                failing()

        assert timer.measures == (Measure(name="failing", duration=1.0),)

    def test_preserves_metadata(self):
        """Test functools.wraps keeps the wrapped name and docstring."""

        @timed()
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


class TestTimedAsync:
    """Tests for timed on coroutine functions."""

    @pytest.mark.asyncio
    async def test_records_async_call(self, timer, clock):
        """Test coroutine calls are measured."""

        @timed("fetch")
        async def fetch():
            clock.advance(3)
            return 42

        with timer_context(timer):
            assert await fetch() == 42

        assert timer.measures == (Measure(name="fetch", duration=3.0),)

    @pytest.mark.asyncio
    async def test_overlapping_calls_measured_independently(self, timer, clock):
        """Test concurrent calls of one coroutine each record a full duration."""

        @timed("fetch")
        async def fetch(ms):
            await asyncio.sleep(0)
            clock.advance(ms)
            await asyncio.sleep(0)

        with timer_context(timer):
            await asyncio.gather(fetch(10), fetch(20))

        assert [m.duration for m in timer.measures] == [30.0, 30.0]

    @pytest.mark.asyncio
    async def test_async_untimed_without_timer(self):
        """Test coroutines run untimed when no timer is installed."""

        @timed()
        async def fetch():
            return "ok"

        assert await fetch() == "ok"
