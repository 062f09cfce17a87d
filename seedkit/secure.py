from __future__ import annotations

from typing import Optional

from .entropy import EntropySource, SystemEntropySource, read_exact
from .errors import InvalidBoundError
from .source import RandomSource, check_length, check_range


class SecureGenerator(RandomSource):
    """Generator that asks its entropy source for fresh bytes on every draw.

    No seed or state is kept here. To amortise entropy reads, wrap the source
    in :class:`seedkit.entropy.KeystreamEntropySource`, which is itself keyed
    only from its upstream source.
    """

    cryptographically_secure = True

    def __init__(self, source: Optional[EntropySource] = None):
        self.source = source if source is not None else SystemEntropySource()

    def next(self, n: int) -> bytes:
        check_length(n)
        if n == 0:
            return b""
        return read_exact(self.source, n)

    def next_bytes(self, n: int) -> bytes:
        return self.next(n)

    def next_below(self, bound: int) -> int:
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise InvalidBoundError(f"Bound must be an integer, got {type(bound).__name__}")
        if bound <= 0:
            raise InvalidBoundError(f"Bound must be positive, got {bound}")
        if bound == 1:
            return 0
        bits = (bound - 1).bit_length()
        nbytes = (bits + 7) // 8
        mask = (1 << bits) - 1
        # Masking to the bit length of bound-1 keeps the rejection rate under 1/2.
        while True:
            v = int.from_bytes(self.next(nbytes), "big") & mask
            if v < bound:
                return v

    def next_in_range(self, low: int, high: int) -> int:
        span = check_range(low, high)
        return low + self.next_below(span)
