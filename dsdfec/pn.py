"""Pseudo-noise sequence from the 9-stage LFSR with taps at bits 0 and 4."""

from __future__ import annotations

_PERIOD_BITS = 512
_PERIOD_BYTES = _PERIOD_BITS // 8


class PN95:
    """Precomputed 512-bit PN(9,5) sequence, addressable by bit or by byte.

    The register is seeded with ``seed``; each step outputs bit 0 and feeds
    ``bit0 ^ bit4`` back into bit 8. Bytes pack eight successive bits, the
    first one in the most significant position.
    """

    def __init__(self, seed: int) -> None:
        if seed < 0:
            raise ValueError("seed must not be negative")
        self.seed = seed
        self._bits = tuple(self._generate(seed))
        self._bytes = tuple(
            int("".join(map(str, self._bits[i : i + 8])), 2)
            for i in range(0, _PERIOD_BITS, 8)
        )

    @staticmethod
    def _generate(seed: int):
        sr = seed
        for _ in range(_PERIOD_BITS):
            bit0 = sr & 1
            bit4 = (sr >> 4) & 1
            sr = (sr >> 1) | ((bit4 ^ bit0) << 8)
            yield bit0

    def byte(self, index: int) -> int:
        """Return the byte at ``index``, wrapping every 64 bytes."""
        return self._bytes[index % _PERIOD_BYTES]

    def bit(self, index: int) -> int:
        """Return the bit at ``index``, wrapping every 512 bits."""
        return self._bits[index % _PERIOD_BITS]

    def bits(self) -> tuple[int, ...]:
        """Return the whole 512-bit sequence."""
        return self._bits