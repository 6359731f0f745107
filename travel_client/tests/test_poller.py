"""
Tests for AsyncCompletionPoller.

Intervals are a few milliseconds so the loops finish quickly; each test
drives its own event loop with asyncio.run.
"""

import asyncio
import logging

import pytest

from travel_client.polling.poller import AsyncCompletionPoller, PollConfig


FAST = PollConfig(interval_ms=10, max_attempts=3)


def _counting_check(results):
    """Check function returning the given results in order, then False."""
    calls = []

    async def check():
        calls.append(len(calls) + 1)
        index = len(calls) - 1
        return results[index] if index < len(results) else False

    return check, calls


class TestPollConfig:
    def test_defaults(self):
        config = PollConfig()
        assert config.interval_ms == 2000
        assert config.max_attempts == 30

    @pytest.mark.parametrize("interval_ms,max_attempts", [(-1, 3), (10, 0)])
    def test_rejects_invalid_values(self, interval_ms, max_attempts):
        with pytest.raises(ValueError):
            PollConfig(interval_ms=interval_ms, max_attempts=max_attempts)


class TestCompletion:
    """Tests for the done, exhausted, and failure paths."""

    def test_gives_up_silently_after_max_attempts(self):
        check, calls = _counting_check([])
        completed = []

        async def run():
            poller = AsyncCompletionPoller()
            assert poller.start(check, lambda: completed.append(True), FAST)
            await poller.wait()
            return poller

        poller = asyncio.run(run())

        assert len(calls) == 3
        assert completed == []
        assert poller.is_active is False
        assert poller.attempt == 3

    def test_completes_once_and_stops_ticking(self):
        check, calls = _counting_check([False, True])
        completed = []

        async def run():
            poller = AsyncCompletionPoller()
            poller.start(check, lambda: completed.append(True), PollConfig(10, 10))
            await poller.wait()
            # Give a stray tick the chance to show up
            await asyncio.sleep(0.05)
            return poller

        poller = asyncio.run(run())

        assert len(calls) == 2
        assert completed == [True]
        assert poller.is_active is False

    def test_check_errors_count_as_not_done(self):
        calls = []

        async def check():
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError("backend hiccup")
            return True

        completed = []

        async def run():
            poller = AsyncCompletionPoller()
            poller.start(check, lambda: completed.append(True), FAST)
            await poller.wait()

        asyncio.run(run())

        assert len(calls) == 2
        assert completed == [True]

    def test_async_on_complete_is_awaited(self):
        check, _ = _counting_check([True])
        completed = []

        async def on_complete():
            await asyncio.sleep(0)
            completed.append(True)

        async def run():
            poller = AsyncCompletionPoller()
            poller.start(check, on_complete, FAST)
            await poller.wait()

        asyncio.run(run())

        assert completed == [True]

    def test_failing_on_complete_is_logged(self, caplog):
        check, _ = _counting_check([True])

        def on_complete():
            raise RuntimeError("render failed")

        async def run():
            poller = AsyncCompletionPoller(name="map")
            poller.start(check, on_complete, FAST)
            await poller.wait()
            return poller

        with caplog.at_level(logging.ERROR, logger="travel_client.polling.poller"):
            poller = asyncio.run(run())

        assert poller.is_active is False
        assert any("on_complete callback failed" in r.getMessage() for r in caplog.records)


class TestLifecycle:
    """Tests for start/stop idempotence and teardown."""

    def test_stop_without_start_is_noop(self):
        poller = AsyncCompletionPoller()
        poller.stop()
        poller.stop()
        assert poller.is_active is False

    def test_second_start_is_ignored(self):
        first, first_calls = _counting_check([])
        second, second_calls = _counting_check([])

        async def run():
            poller = AsyncCompletionPoller()
            started = [
                poller.start(first, lambda: None, FAST),
                poller.start(second, lambda: None, FAST),
            ]
            await poller.wait()
            return started

        started = asyncio.run(run())

        assert started == [True, False]
        assert len(first_calls) == 3
        assert second_calls == []

    def test_stop_halts_ticks(self):
        check, calls = _counting_check([])
        completed = []

        async def run():
            poller = AsyncCompletionPoller()
            poller.start(check, lambda: completed.append(True), PollConfig(10, 100))
            await asyncio.sleep(0.035)
            poller.stop()
            poller.stop()
            seen = len(calls)
            await asyncio.sleep(0.05)
            return poller, seen

        poller, seen = asyncio.run(run())

        assert poller.is_active is False
        assert len(calls) == seen
        assert completed == []

    def test_context_manager_stops_on_exit(self):
        check, calls = _counting_check([])

        async def run():
            async with AsyncCompletionPoller() as poller:
                poller.start(check, lambda: None, PollConfig(10, 100))
                await asyncio.sleep(0.025)
            seen = len(calls)
            await asyncio.sleep(0.05)
            return poller, seen

        poller, seen = asyncio.run(run())

        assert poller.is_active is False
        assert len(calls) == seen

    def test_restart_after_completion(self):
        check, calls = _counting_check([True, True])
        completed = []

        async def run():
            poller = AsyncCompletionPoller()
            poller.start(check, lambda: completed.append(1), FAST, target_id=5)
            await poller.wait()
            restarted = poller.start(check, lambda: completed.append(2), FAST, target_id=6)
            await poller.wait()
            return poller, restarted

        poller, restarted = asyncio.run(run())

        assert restarted is True
        assert completed == [1, 2]
        assert poller.session.target_id == 6
        assert poller.session.active is False

    def test_wait_after_stop_sees_cancellation_through(self):
        """wait() after stop() returns only once the in-flight check has unwound."""
        unwound = []

        async def check():
            try:
                await asyncio.sleep(10)
            finally:
                unwound.append(True)
            return True

        async def run():
            poller = AsyncCompletionPoller()
            poller.start(check, lambda: None, PollConfig(10, 3))
            await asyncio.sleep(0.03)
            poller.stop()
            await poller.wait()
            return list(unwound)

        assert asyncio.run(run()) == [True]
