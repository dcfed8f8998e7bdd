"""
Unit tests for the Debouncer.
"""

import asyncio

from valuationdesk.utils.debounce import Debouncer


def test_fires_once_after_quiet_period():
    calls = []

    async def scenario():
        debouncer = Debouncer(0.05, calls.append)
        debouncer.call("j")
        debouncer.call("ja")
        debouncer.call("jalan")
        assert calls == []
        assert debouncer.pending is True
        await asyncio.sleep(0.1)
        assert debouncer.pending is False

    asyncio.run(scenario())
    assert calls == ["jalan"]


def test_each_call_restarts_the_timer():
    calls = []

    async def scenario():
        debouncer = Debouncer(0.08, calls.append)
        debouncer.call("a")
        await asyncio.sleep(0.05)
        debouncer.call("ab")
        await asyncio.sleep(0.05)
        # 0.1s since the first call, but only 0.05s since the last
        assert calls == []
        await asyncio.sleep(0.08)

    asyncio.run(scenario())
    assert calls == ["ab"]


def test_cancel_drops_pending_call():
    calls = []

    async def scenario():
        debouncer = Debouncer(0.03, calls.append)
        debouncer.call("x")
        debouncer.cancel()
        await asyncio.sleep(0.06)

    asyncio.run(scenario())
    assert calls == []


def test_flush_fires_immediately():
    calls = []

    async def scenario():
        debouncer = Debouncer(10, calls.append)
        debouncer.call("now")
        debouncer.flush()
        assert calls == ["now"]
        assert debouncer.pending is False

    asyncio.run(scenario())


def test_flush_without_pending_call_does_nothing():
    calls = []

    async def scenario():
        Debouncer(0.01, calls.append).flush()

    asyncio.run(scenario())
    assert calls == []


def test_zero_delay_fires_synchronously():
    calls = []
    Debouncer(0, calls.append).call("direct")
    assert calls == ["direct"]
