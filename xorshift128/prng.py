"""xorshift128+ pseudorandom number generator.

Two 64-bit state words, seeded by expanding a single integer with the
splitmix64 finalizer. Reference: Vigna, "Further scramblings of Marsaglia's
xorshift generators" (2017), shift triple (23, 17, 26).

The module is split into a pure core and a stateful wrapper:

- ``splitmix64``, ``init_state`` and ``next_raw64`` are pure functions of
  their arguments. ``next_raw64`` takes a ``GeneratorState`` and returns the
  raw 64-bit output together with the successor state.
- ``XorShift128Plus`` owns one state and derives every value type from
  successive raw outputs. Each derived operation consumes exactly as many raw
  outputs as it draws; validation happens before the first draw, so a
  rejected call leaves the state untouched.

Python ints are unbounded, so every add, multiply and left shift is masked
back to 64 bits. Right shifts on the masked (non-negative) words are logical.

Not cryptographically secure, and not thread-safe: give each thread its own
generator, or serialize access externally.
"""

from __future__ import annotations

from .seeding import default_seed
from .types import (
    INT32_MAX,
    MASK64,
    GeneratorState,
    InvalidArgument,
    to_signed32,
    to_signed64,
)

GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_MIX_MUL1 = 0xBF58476D1CE4E5B9
_MIX_MUL2 = 0x94D049BB133111EB

# Replaces an all-zero expansion, which is a fixed point of the transition.
FALLBACK_STATE = GeneratorState(s0=0x9E3779B97F4A7C15, s1=0xDA3E39CB94B95BDB)

_FLOAT64_SCALE = 1.0 / (1 << 53)
_FLOAT32_SCALE = 1.0 / (1 << 24)


def splitmix64(z: int) -> int:
    """One splitmix64 step: add the golden gamma, then finalize."""
    z = (z + GOLDEN_GAMMA) & MASK64
    z = ((z ^ (z >> 30)) * _MIX_MUL1) & MASK64
    z = ((z ^ (z >> 27)) * _MIX_MUL2) & MASK64
    return z ^ (z >> 31)


def init_state(seed: int) -> GeneratorState:
    """Expand a seed into a non-zero two-word state.

    ``seed`` is taken as its 64-bit two's-complement bit pattern, so any
    Python int is accepted.
    """
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise TypeError(f"seed must be an int, got {type(seed).__name__}")
    z = (seed + GOLDEN_GAMMA) & MASK64
    state = GeneratorState(
        s0=splitmix64(z),
        s1=splitmix64((z + GOLDEN_GAMMA) & MASK64),
    )
    if state.is_zero():
        return FALLBACK_STATE
    return state


def next_raw64(state: GeneratorState) -> tuple[int, GeneratorState]:
    """Advance ``state`` one step. Returns (raw output, successor state)."""
    x = state.s0
    y = state.s1
    result = (x + y) & MASK64
    x ^= (x << 23) & MASK64
    x ^= x >> 17
    x ^= y ^ (y >> 26)
    return result, GeneratorState(s0=y, s1=x)


class XorShift128Plus:
    """Seedable xorshift128+ generator.

    All outputs are pure transformations of ``next_raw64``; two generators
    built from the same seed produce identical sequences for the same
    sequence of calls.
    """

    def __init__(self, seed: int) -> None:
        self._s0: int = 0
        self._s1: int = 0
        self.set_seed(seed)

    @classmethod
    def from_default_seed(cls) -> XorShift128Plus:
        """Seed from the clock and thread/object identity (see ``default_seed``)."""
        return cls(default_seed())

    @classmethod
    def from_state(cls, state: GeneratorState) -> XorShift128Plus:
        """Continue from a snapshot previously taken with ``state``."""
        s0 = state.s0 & MASK64
        s1 = state.s1 & MASK64
        if s0 == 0 and s1 == 0:
            raise InvalidArgument("state words must not both be zero")
        rng = cls.__new__(cls)
        rng._s0 = s0
        rng._s1 = s1
        return rng

    @property
    def state(self) -> GeneratorState:
        return GeneratorState(s0=self._s0, s1=self._s1)

    def set_seed(self, seed: int) -> None:
        """Re-initialize from ``seed``, discarding all prior state."""
        state = init_state(seed)
        self._s0 = state.s0
        self._s1 = state.s1

    def next_raw64(self) -> int:
        """Unsigned 64-bit raw output in [0, 2**64)."""
        x = self._s0
        y = self._s1
        result = (x + y) & MASK64
        self._s0 = y
        x ^= (x << 23) & MASK64
        x ^= x >> 17
        x ^= y ^ (y >> 26)
        self._s1 = x
        return result

    def next_int64(self) -> int:
        """Signed 64-bit integer, full range."""
        return to_signed64(self.next_raw64())

    def next_int32(self) -> int:
        """Signed 32-bit integer from the low 32 bits of one raw output."""
        return to_signed32(self.next_raw64())

    def next_bounded_int32(self, bound: int) -> int:
        """Uniform integer in [0, bound).

        Power-of-two bounds mask the low bits of a single draw. Other bounds
        use rejection sampling on 31-bit draws: values at or above the largest
        multiple of ``bound`` below ``INT32_MAX`` are discarded and redrawn.
        Each draw is rejected with probability < 1/2, so the expected number
        of draws is < 2, but there is no worst-case bound on the loop.
        """
        if not isinstance(bound, int) or isinstance(bound, bool):
            raise TypeError(f"bound must be an int, got {type(bound).__name__}")
        if bound <= 0 or bound > INT32_MAX:
            raise InvalidArgument(
                f"bound must be in [1, {INT32_MAX}], got {bound}"
            )
        mask = bound - 1
        if bound & mask == 0:
            return self.next_raw64() & mask
        limit = INT32_MAX - (INT32_MAX % bound)
        while True:
            r = (self.next_raw64() >> 1) & INT32_MAX
            if r < limit:
                return r % bound

    def next_float64(self) -> float:
        """Uniform float in [0.0, 1.0) with 53 bits of precision."""
        return (self.next_raw64() >> 11) * _FLOAT64_SCALE

    def next_float32(self) -> float:
        """Uniform float in [0.0, 1.0) with 24 bits of precision.

        The result is exactly representable as an IEEE binary32 value.
        """
        return (self.next_raw64() >> 40) * _FLOAT32_SCALE

    def next_bool(self) -> bool:
        return (self.next_raw64() & 1) != 0

    def fill_bytes(self, buf) -> None:
        """Fill a writable buffer with random bytes.

        Each raw output supplies 8 bytes, least-significant byte first; the
        last output is truncated when the length is not a multiple of 8.
        Accepts any writable C-contiguous buffer (bytearray, memoryview,
        array.array, numpy arrays).
        """
        view = memoryview(buf)
        if view.readonly:
            raise TypeError("fill_bytes requires a writable buffer")
        view = view.cast("B")
        n = len(view)
        for i in range(0, n, 8):
            chunk = self.next_raw64().to_bytes(8, "little")
            view[i : i + 8] = chunk[: n - i]
