"""Debounced scheduling of the search recompute.

``Debouncer.schedule(value)`` arms an asyncio timer and returns its handle.
A newer ``schedule`` cancels the previous handle, so only a value left alone
for the whole quiet period reaches the callback. ``close`` cancels whatever is
pending when the owning view goes away.
"""
import asyncio
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    def __init__(self, callback: Callable[[Any], None], delay_ms: int):
        if delay_ms < 0:
            raise ValueError(f"Delay cannot be negative: {delay_ms}")
        self._callback = callback
        self._delay = delay_ms / 1000.0
        self._handle: Optional[asyncio.TimerHandle] = None
        self._closed = False

    @property
    def pending(self) -> bool:
        return self._handle is not None and not self._handle.cancelled()

    def schedule(self, value: Any) -> asyncio.TimerHandle:
        """Arm the timer for ``value``; must be called from inside a running event loop."""
        if self._closed:
            raise RuntimeError("Debouncer is closed")
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay, self._fire, value)
        return self._handle

    def _fire(self, value: Any):
        self._handle = None
        self._callback(value)

    def cancel(self) -> bool:
        """Cancel the pending fire, if any. Returns True if something was cancelled."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        return True

    def close(self):
        if self.cancel():
            logger.debug("Pending search recompute cancelled on teardown")
        self._closed = True


__all__ = ['Debouncer']
