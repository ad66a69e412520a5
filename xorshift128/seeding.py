"""Seed derived from the running process, for callers without a seed.

Kept apart from ``prng`` so the generator core never reads the clock.
Nothing here is unpredictable to an adversary.
"""

from __future__ import annotations

import threading
import time

from .types import to_signed64


def default_seed() -> int:
    """Mix a monotonic clock reading with thread and object identity.

    The identity values are shifted left by 7 and 13 bits so their low bits
    do not line up with the fast-changing low bits of the clock.
    """
    t = time.perf_counter_ns()
    t ^= threading.get_ident() << 7
    t ^= id(object()) << 13
    return to_signed64(t)
