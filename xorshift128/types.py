"""Data types shared by the generator core and its callers."""

from __future__ import annotations

from dataclasses import dataclass

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
INT32_MAX = 0x7FFFFFFF


class InvalidArgument(ValueError):
    """An argument is outside the domain an operation accepts."""


def to_signed64(x: int) -> int:
    """Reinterpret the low 64 bits of ``x`` as a two's-complement integer."""
    x &= MASK64
    return x - (1 << 64) if x >> 63 else x


def to_signed32(x: int) -> int:
    """Reinterpret the low 32 bits of ``x`` as a two's-complement integer."""
    x &= MASK32
    return x - (1 << 32) if x >> 31 else x


@dataclass(frozen=True)
class GeneratorState:
    """The two 64-bit state words of an xorshift128+ generator.

    Both words are stored as unsigned ints in ``[0, 2**64)``.
    """

    s0: int
    s1: int

    def is_zero(self) -> bool:
        return self.s0 == 0 and self.s1 == 0

    @staticmethod
    def from_dict(d: dict) -> GeneratorState:
        return GeneratorState(s0=d["s0"] & MASK64, s1=d["s1"] & MASK64)

    def to_dict(self) -> dict:
        return {"s0": self.s0, "s1": self.s1}
