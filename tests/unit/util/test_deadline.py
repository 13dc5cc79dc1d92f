"""Unit tests for deadline enforcement."""

import asyncio

import pytest

from dealort.util import deadline
from dealort.util.deadline import (
    RequestTimeoutError,
    _abandoned_count,
    race_deadline,
    timeout_message,
    with_timeout,
)


class TestTimeoutMessage:
    def test_message_states_whole_seconds(self):
        assert "longer than 300 seconds" in timeout_message(300_000)

    def test_half_second_rounds_up(self):
        assert "longer than 2 seconds" in timeout_message(1_500)
        assert "longer than 1 seconds" in timeout_message(1_400)

    def test_error_carries_timeout_and_message(self):
        error = RequestTimeoutError(180_000, "reports.create")

        assert error.timeout_ms == 180_000
        assert error.route_key == "reports.create"
        assert error.message.startswith("Request timeout: The operation took longer")
        assert "contact support" in error.message


class TestRaceDeadline:
    @pytest.mark.asyncio
    async def test_returns_result_when_operation_is_fast(self):
        async def fast():
            return 42

        assert await race_deadline(fast, 1_000) == 42

    @pytest.mark.asyncio
    async def test_propagates_operation_error_unchanged(self):
        async def failing():
            raise KeyError("boom")

        with pytest.raises(KeyError):
            await race_deadline(failing, 1_000)

    @pytest.mark.asyncio
    async def test_raises_timeout_when_deadline_fires_first(self):
        async def slow():
            await asyncio.sleep(1)

        with pytest.raises(RequestTimeoutError) as exc_info:
            await race_deadline(
                slow, 10, route_key="products.list", cancel_on_timeout=True
            )

        assert exc_info.value.timeout_ms == 10
        assert exc_info.value.route_key == "products.list"

    @pytest.mark.asyncio
    async def test_abandoned_operation_keeps_running(self):
        finished = asyncio.Event()

        async def slow():
            await asyncio.sleep(0.05)
            finished.set()

        before = _abandoned_count()

        with pytest.raises(RequestTimeoutError):
            await race_deadline(slow, 5)

        assert _abandoned_count() == before + 1
        await asyncio.wait_for(finished.wait(), timeout=1)
        await asyncio.sleep(0.01)
        assert _abandoned_count() == before

    @pytest.mark.asyncio
    async def test_late_failure_is_discarded(self):
        async def slow_failure():
            await asyncio.sleep(0.02)
            raise RuntimeError("late")

        before = _abandoned_count()

        with pytest.raises(RequestTimeoutError):
            await race_deadline(slow_failure, 5)

        # The late error is logged by the done-callback, never re-raised
        await asyncio.sleep(0.05)
        assert _abandoned_count() == before

    @pytest.mark.asyncio
    async def test_cancel_on_timeout_cancels_operation(self):
        cancelled = asyncio.Event()

        async def slow():
            try:
                await asyncio.sleep(1)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        with pytest.raises(RequestTimeoutError):
            await race_deadline(slow, 5, cancel_on_timeout=True)

        await asyncio.wait_for(cancelled.wait(), timeout=1)


class TestWithTimeout:
    @pytest.mark.asyncio
    async def test_uses_route_timeout(self, monkeypatch):
        seen = []

        def fake_lookup(route_key):
            seen.append(route_key)
            return 5

        monkeypatch.setattr(deadline, "get_timeout_for_route", fake_lookup)

        async def slow():
            await asyncio.sleep(1)

        with pytest.raises(RequestTimeoutError) as exc_info:
            await with_timeout(slow, "comments.list", cancel_on_timeout=True)

        assert seen == ["comments.list"]
        assert exc_info.value.timeout_ms == 5
