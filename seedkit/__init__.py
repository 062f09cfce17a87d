"""
seedkit: predictable versus unpredictable randomness, side by side.

- DeterministicGenerator: HMAC-SHA256 state/counter generator whose output is a
  pure function of its seed. Reproducible by construction, so only as strong
  as the seed (clock and passphrase seeds are flagged as low entropy).
- SecureGenerator: draws every request from an EntropySource (the OS CSPRNG by
  default, optionally through an XChaCha20 keystream keyed from it).
- Unbiased integers via rejection sampling on both paths.
- Seed helpers (clock, Argon2id passphrase, entropy) and a clock-seed recovery
  demonstration; the ``seedkit`` CLI exposes all of it.
"""

__version__ = "0.1"

from .errors import (
    SeedkitError,
    InvalidSeedError,
    InvalidRangeError,
    InvalidBoundError,
    EntropyUnavailableError,
)
from .source import RandomSource
from .entropy import EntropySource, SystemEntropySource, KeystreamEntropySource
from .seeds import Seed, clock_seed, passphrase_seed, entropy_seed
from .prng import DeterministicGenerator
from .secure import SecureGenerator
from .sync import SynchronizedSource
from .crack import recover_clock_seed

__all__ = [
    "SeedkitError",
    "InvalidSeedError",
    "InvalidRangeError",
    "InvalidBoundError",
    "EntropyUnavailableError",
    "RandomSource",
    "EntropySource",
    "SystemEntropySource",
    "KeystreamEntropySource",
    "Seed",
    "clock_seed",
    "passphrase_seed",
    "entropy_seed",
    "DeterministicGenerator",
    "SecureGenerator",
    "SynchronizedSource",
    "recover_clock_seed",
]
