"""Pseudorandom generator reproducing the linear congruential algorithm of java.util.Random.

Some query test suites fill their tables with data produced by that
generator, so the exact sequence matters.
"""

from __future__ import annotations

_MULTIPLIER = 0x5DFFCE66D
_ADDEND = 0xB
_MASK = (1 << 48) - 1


def _to_i32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


class Random:
    """A 48-bit linear congruential generator seeded like java.util.Random."""

    def __init__(self, seed: int) -> None:
        self._seed = (seed ^ _MULTIPLIER) & _MASK

    def next(self, bits: int) -> int:
        """Advance the generator and return its top ``bits`` bits as a signed 32-bit int."""
        if not 1 <= bits <= 32:
            raise ValueError(f"bits must be between 1 and 32, got {bits}")
        self._seed = (self._seed * _MULTIPLIER + _ADDEND) & _MASK
        return _to_i32(self._seed >> (48 - bits))

    def next_int(self, bound: int) -> int:
        """Return a value in ``[0, bound)``."""
        if bound < 2:
            raise ValueError(f"bound must be at least 2, got {bound}")
        x = self.next(31)
        m = bound - 1
        if bound % m == 0:
            return _to_i32((bound * x) >> 31)

        u = x
        while True:
            x = u % bound
            if _to_i32(u - x + m) >= 0:
                return x
            u = self.next(31)