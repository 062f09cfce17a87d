"""Entropy sources consumed by :class:`seedkit.secure.SecureGenerator`.

``SystemEntropySource`` is a thin adapter over the operating system CSPRNG as
exposed by PyCryptodomex. ``KeystreamEntropySource`` is an optional CSPRNG
stage: an XChaCha20 keystream whose key and nonce come only from another
entropy source, rekeyed after every read so earlier output cannot be
reconstructed from the current state.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from Cryptodome.Cipher import ChaCha20
from Cryptodome.Random import get_random_bytes

from .constants import KEY_SIZE, NONCE_SIZE, RESEED_INTERVAL
from .errors import EntropyUnavailableError
from .source import check_length


log = logging.getLogger(__name__)


class EntropySource(ABC):
    """Supplier of unpredictable bytes."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def read(self, n: int) -> bytes:
        """Return exactly ``n`` unpredictable bytes.

        Raises:
            EntropyUnavailableError: the source cannot supply bytes right now.
        """


class SystemEntropySource(EntropySource):
    """Operating system CSPRNG (``getrandom``/``/dev/urandom``/``BCryptGenRandom``)."""

    @property
    def name(self) -> str:
        return "system"

    def read(self, n: int) -> bytes:
        check_length(n)
        if n == 0:
            return b""
        try:
            return get_random_bytes(n)
        except OSError as exc:
            log.warning("System entropy source failed: %s", exc)
            raise EntropyUnavailableError(f"System entropy unavailable: {exc}") from exc


def read_exact(source: EntropySource, n: int) -> bytes:
    """Read ``n`` bytes from ``source``, refusing short, long or failed reads."""
    try:
        data = source.read(n)
    except EntropyUnavailableError:
        raise
    except OSError as exc:
        raise EntropyUnavailableError(f"{source.name}: {exc}") from exc
    if not isinstance(data, (bytes, bytearray)) or len(data) != n:
        got = len(data) if isinstance(data, (bytes, bytearray)) else type(data).__name__
        raise EntropyUnavailableError(f"{source.name}: requested {n} bytes, got {got}")
    return bytes(data)


class KeystreamEntropySource(EntropySource):
    """XChaCha20 keystream seeded exclusively from ``upstream``."""

    def __init__(self, upstream: EntropySource, *, reseed_interval: int = RESEED_INTERVAL):
        if reseed_interval <= 0:
            raise ValueError("reseed_interval must be positive")
        self.upstream = upstream
        self.reseed_interval = reseed_interval
        self.reseeds = 0
        self._key: Optional[bytes] = None
        self._nonce: Optional[bytes] = None
        self._served = 0

    @property
    def name(self) -> str:
        return f"keystream({self.upstream.name})"

    def _reseed(self) -> None:
        material = read_exact(self.upstream, KEY_SIZE + NONCE_SIZE)
        self._key = material[:KEY_SIZE]
        self._nonce = material[KEY_SIZE:]
        self._served = 0
        self.reseeds += 1
        log.debug("%s reseeded (%d)", self.name, self.reseeds)

    def read(self, n: int) -> bytes:
        check_length(n)
        if n == 0:
            return b""
        if self._key is None or self._served >= self.reseed_interval:
            self._reseed()
        cipher = ChaCha20.new(key=self._key, nonce=self._nonce)
        block = cipher.encrypt(bytes(n + KEY_SIZE))
        # Fast key erasure: the tail of this block replaces the key.
        self._key = block[n:]
        self._served += n
        return block[:n]
