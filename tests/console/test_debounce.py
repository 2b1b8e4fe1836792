"""Tests for the debouncer behind the filter bar."""

import asyncio

import pytest

from backoffice.console.debounce import Debouncer


class TestDebouncer:
    def test_rejects_non_positive_delay(self):
        with pytest.raises(ValueError):
            Debouncer(lambda: None, delay_ms=0)

    @pytest.mark.asyncio
    async def test_reschedule_restarts_the_timer(self):
        calls = []
        debouncer = Debouncer(calls.append, delay_ms=30)
        debouncer.schedule(1)
        await asyncio.sleep(0.02)
        debouncer.schedule(2)
        await asyncio.sleep(0.02)
        assert calls == []
        await asyncio.sleep(0.03)
        assert calls == [2]
        assert not debouncer.pending

    @pytest.mark.asyncio
    async def test_failing_callback_does_not_escape(self):
        async def boom(_):
            raise RuntimeError("backend down")

        debouncer = Debouncer(boom, delay_ms=5)
        debouncer.schedule("x")
        await asyncio.sleep(0.02)
        await debouncer.wait()
        assert not debouncer.pending

    @pytest.mark.asyncio
    async def test_cancel_drops_pending_call(self):
        calls = []
        debouncer = Debouncer(calls.append, delay_ms=5)
        debouncer.schedule(1)
        debouncer.cancel()
        await asyncio.sleep(0.02)
        assert calls == []
