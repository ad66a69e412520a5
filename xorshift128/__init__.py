"""Deterministic xorshift128+ pseudorandom number generator."""

from .seeding import default_seed
from .prng import (
    FALLBACK_STATE,
    GOLDEN_GAMMA,
    XorShift128Plus,
    init_state,
    next_raw64,
    splitmix64,
)
from .types import GeneratorState, InvalidArgument, to_signed32, to_signed64

__all__ = [
    "FALLBACK_STATE",
    "GOLDEN_GAMMA",
    "GeneratorState",
    "InvalidArgument",
    "XorShift128Plus",
    "default_seed",
    "init_state",
    "next_raw64",
    "splitmix64",
    "to_signed32",
    "to_signed64",
]
