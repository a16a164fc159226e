import asyncio

import pytest

from ecolista.logic.query.debounce import Debouncer


@pytest.mark.asyncio
async def test_only_settled_text_fires_once():
    fired = []
    debouncer = Debouncer(fired.append, delay_ms=30)

    for text in ("a", "ab", "abc"):
        debouncer.schedule(text)
        await asyncio.sleep(0.005)
    assert fired == []

    await asyncio.sleep(0.1)
    assert fired == ["abc"]
    assert not debouncer.pending


@pytest.mark.asyncio
async def test_close_cancels_pending_fire():
    fired = []
    debouncer = Debouncer(fired.append, delay_ms=20)
    debouncer.schedule("leche")
    assert debouncer.pending

    debouncer.close()
    await asyncio.sleep(0.06)
    assert fired == []
    with pytest.raises(RuntimeError):
        debouncer.schedule("otra")


@pytest.mark.asyncio
async def test_cancel_reports_whether_something_was_pending():
    debouncer = Debouncer(lambda _: None, delay_ms=20)
    assert debouncer.cancel() is False
    debouncer.schedule("x")
    assert debouncer.cancel() is True


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        Debouncer(lambda _: None, delay_ms=-1)
