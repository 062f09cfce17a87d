from __future__ import annotations

import logging
from typing import Optional

from .prng import DeterministicGenerator
from .seeds import Seed, clock_seed


log = logging.getLogger(__name__)


def recover_clock_seed(observed: bytes, start: float, end: float, resolution: int = 1) -> Optional[Seed]:
    """Find the clock seed whose first output equals ``observed``.

    Every tick in ``[start, end]`` is tried in order; a window of a day at
    one-second resolution is only 86400 candidates.
    """
    if resolution <= 0:
        raise ValueError("resolution must be positive")
    if end < start:
        raise ValueError("end must not precede start")
    first = int(start) // resolution
    last = int(end) // resolution
    for tick in range(first, last + 1):
        candidate = clock_seed(tick * resolution, resolution)
        # Built from raw material to keep the search quiet.
        if DeterministicGenerator(candidate.material).next() == observed:
            log.debug("Clock seed recovered after %d candidates", tick - first + 1)
            return candidate
    return None
