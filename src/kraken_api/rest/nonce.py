# SPDX-License-Identifier: Apache-2.0
"""Nonce sources for private requests.

The exchange rejects any nonce that is not larger than the last one it saw
for the same API key, so sources here guarantee strictly increasing values
within the process.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class NonceSource(Protocol):
    """Anything callable that returns the next nonce."""

    def __call__(self) -> int:
        ...


class ClockNonce:
    """Wall-clock nonce, strictly increasing across threads.

    Args:
        resolution: Ticks per second; ``1_000_000`` gives microseconds,
            ``1_000`` milliseconds.
        clock: Time source in seconds (injectable for tests).
    """

    def __init__(
        self,
        resolution: int = 1_000_000,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if resolution <= 0:
            raise ValueError("Resolution must be positive")
        self._resolution = resolution
        self._clock = clock or time.time
        self._last = 0
        self._lock = threading.Lock()

    @property
    def resolution(self) -> int:
        return self._resolution

    def __call__(self) -> int:
        with self._lock:
            candidate = int(self._clock() * self._resolution)
            # Clock stalled or stepped back: keep counting up from the last value.
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate


class CounterNonce:
    """Plain incrementing counter starting after ``start``."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            self._value += 1
            return self._value


_default_source: Optional[ClockNonce] = None
_default_lock = threading.Lock()


def default_nonce_source() -> ClockNonce:
    """Process-wide microsecond nonce shared by every client."""
    global _default_source
    with _default_lock:
        if _default_source is None:
            _default_source = ClockNonce()
        return _default_source


__all__ = ["NonceSource", "ClockNonce", "CounterNonce", "default_nonce_source"]
