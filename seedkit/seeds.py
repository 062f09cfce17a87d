from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from argon2.low_level import Type as _ArgonType, hash_secret_raw as _argon_hash

from .constants import (
    ARGON_MEMORY_COST_KIB,
    ARGON_PARALLELISM,
    ARGON_TIME_COST,
    CLOCK_SEED_SIZE,
    MIN_SALT_SIZE,
    SEED_SIZE,
)
from .entropy import EntropySource, SystemEntropySource, read_exact


@dataclass(frozen=True)
class Seed:
    material: bytes
    origin: str
    low_entropy: bool

    def hex(self) -> str:
        return self.material.hex()


def clock_seed(now: Optional[float] = None, resolution: int = 1) -> Seed:
    """Seed from the wall clock, the way naive programs do.

    Anyone who can bound the moment of seeding can enumerate every candidate,
    so the result is always flagged ``low_entropy``.
    """
    if resolution <= 0:
        raise ValueError("resolution must be positive")
    if now is None:
        now = time.time()
    tick = int(now) // resolution
    return Seed(tick.to_bytes(CLOCK_SEED_SIZE, "big"), "clock", True)


def passphrase_seed(passphrase: str, salt: bytes) -> Seed:
    """Stretch ``passphrase`` with Argon2id into a ``SEED_SIZE`` seed.

    Stretching makes each guess expensive but adds no entropy, so the seed is
    still flagged ``low_entropy``.
    """
    if len(salt) < MIN_SALT_SIZE:
        raise ValueError(f"Salt must be at least {MIN_SALT_SIZE} bytes")
    material = _argon_hash(
        passphrase.encode("utf-8"),
        bytes(salt),
        time_cost=ARGON_TIME_COST,
        memory_cost=ARGON_MEMORY_COST_KIB,
        parallelism=ARGON_PARALLELISM,
        hash_len=SEED_SIZE,
        type=_ArgonType.ID,
    )
    return Seed(material, "passphrase", True)


def entropy_seed(source: Optional[EntropySource] = None, size: int = SEED_SIZE) -> Seed:
    if size <= 0:
        raise ValueError("Seed size must be positive")
    if source is None:
        source = SystemEntropySource()
    return Seed(read_exact(source, size), "entropy", False)
