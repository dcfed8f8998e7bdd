"""
Debounce Timer

Coalesces rapid calls so a callback only fires once its input has been
stable for a quiet period. Runs on the current asyncio event loop.

Usage:
    debouncer = Debouncer(0.3, apply_search)
    debouncer.call("jal")
    debouncer.call("jalan")   # only "jalan" is applied, 0.3s after this call
"""

import asyncio
from typing import Any, Callable, Optional, Tuple

from valuationdesk.logging_config import get_logger

logger = get_logger(__name__)


class Debouncer:
    """Delay-coalescing timer bound to the running event loop."""

    def __init__(self, delay: float, callback: Callable[..., Any]):
        self.delay = delay
        self.callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None
        self._args: Tuple = ()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def call(self, *args) -> None:
        """Schedule the callback, replacing any call still waiting.

        Must be called from code running inside an event loop.
        """
        self.cancel()
        self._args = args
        if self.delay <= 0:
            self._fire()
            return
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def flush(self) -> None:
        """Fire a pending call immediately."""
        if self._handle is not None:
            self.cancel()
            self._fire()

    def _fire(self) -> None:
        self._handle = None
        args, self._args = self._args, ()
        logger.debug("Debounced call fired after %.3fs", self.delay)
        self.callback(*args)
