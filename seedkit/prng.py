from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Union

from .constants import COUNTER_SIZE, DIGEST_SIZE
from .errors import InvalidSeedError
from .seeds import Seed
from .source import RandomSource, check_length, check_range, rejection_limit


log = logging.getLogger(__name__)


class DeterministicGenerator(RandomSource):
    """Reproducible pseudo-random generator with explicit, inspectable state.

    Each draw computes ``state = HMAC-SHA256(key=state, msg=counter)`` and then
    increments the counter. Output is a pure function of the seed and the
    number of prior draws, so two generators built from the same seed emit the
    same sequence. That reproducibility is the point: the generator is only as
    unpredictable as its seed. Seeds derived from wall-clock time or a
    passphrase are low entropy and must not be used where an attacker could
    guess them; use :class:`seedkit.secure.SecureGenerator` for secrets.
    """

    cryptographically_secure = False

    def __init__(self, seed: Union[bytes, bytearray, Seed]):
        low_entropy = False
        origin = "bytes"
        if isinstance(seed, Seed):
            low_entropy = seed.low_entropy
            origin = seed.origin
            seed = seed.material
        if not isinstance(seed, (bytes, bytearray)):
            raise InvalidSeedError(f"Seed must be bytes, got {type(seed).__name__}")
        if not seed:
            raise InvalidSeedError("Seed must not be empty")
        self._state = bytes(seed)
        self._counter = 0
        self._low_entropy = low_entropy
        if low_entropy:
            log.warning("Deterministic generator seeded from low-entropy %s seed; output is predictable", origin)

    @property
    def state(self) -> bytes:
        return self._state

    @property
    def counter(self) -> int:
        return self._counter

    @property
    def low_entropy(self) -> bool:
        return self._low_entropy

    def next(self) -> bytes:
        material = self._counter.to_bytes(COUNTER_SIZE, "big")
        self._state = hmac.new(self._state, material, hashlib.sha256).digest()
        self._counter += 1
        return self._state

    def next_bytes(self, n: int) -> bytes:
        check_length(n)
        out = bytearray()
        while len(out) < n:
            out += self.next()
        return bytes(out[:n])

    def _next_wide(self, blocks: int) -> int:
        v = 0
        for _ in range(blocks):
            v = (v << (DIGEST_SIZE * 8)) | int.from_bytes(self.next(), "big")
        return v

    def next_in_range(self, low: int, high: int) -> int:
        span = check_range(low, high)
        if span == 1:
            return low
        block_bits = DIGEST_SIZE * 8
        blocks = -(-span.bit_length() // block_bits)
        limit = rejection_limit(blocks * block_bits, span)
        while True:
            v = self._next_wide(blocks)
            if v < limit:
                return low + (v % span)
