from __future__ import annotations

from abc import ABC, abstractmethod

from .errors import InvalidRangeError


class RandomSource(ABC):
    """Capability shared by every generator: raw bytes and unbiased integers."""

    cryptographically_secure: bool = False

    @abstractmethod
    def next_bytes(self, n: int) -> bytes:
        """Return exactly ``n`` bytes."""

    @abstractmethod
    def next_in_range(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high)`` without modulo bias."""


def check_length(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("Byte count must be an integer")
    if n < 0:
        raise ValueError(f"Byte count must be non-negative, got {n}")
    return n


def check_range(low: int, high: int) -> int:
    """Validate ``[low, high)`` and return its span."""
    for bound in (low, high):
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise InvalidRangeError(f"Range bounds must be integers, got {type(bound).__name__}")
    if low >= high:
        raise InvalidRangeError(f"Empty range: low={low} must be below high={high}")
    return high - low


def rejection_limit(width_bits: int, span: int) -> int:
    # Largest multiple of span representable in width_bits; values at or above
    # it would favour the low residues.
    space = 1 << width_bits
    return space - (space % span)
