from __future__ import annotations

import functools
import threading
from typing import Any

from .source import RandomSource


class SynchronizedSource(RandomSource):
    """Serialise every draw on a generator shared between threads.

    Generator-specific methods (``next``, ``next_below``...) are forwarded and
    run under the same lock as the common ``RandomSource`` calls.
    """

    def __init__(self, inner: RandomSource):
        self.inner = inner
        self.cryptographically_secure = inner.cryptographically_secure
        self._lock = threading.Lock()

    def next_bytes(self, n: int) -> bytes:
        with self._lock:
            return self.inner.next_bytes(n)

    def next_in_range(self, low: int, high: int) -> int:
        with self._lock:
            return self.inner.next_in_range(low, high)

    def __getattr__(self, name: str) -> Any:
        # copy and pickle look up hooks before __dict__ is restored
        if name == "inner":
            raise AttributeError(name)
        attr = getattr(self.inner, name)
        if not callable(attr):
            return attr

        @functools.wraps(attr)
        def locked(*args, **kwargs):
            with self._lock:
                return attr(*args, **kwargs)

        return locked
