"""Convolutional encoder and hard-decision Viterbi decoder."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

_MASK32 = 0xFFFFFFFF


def parity(x: int) -> int:
    """Return the parity (0 or 1) of the low 32 bits of ``x``."""
    return bin(x & _MASK32).count("1") & 1


def _ones(x: int) -> int:
    return bin(x).count("1")


def bitify(data: bytes) -> list[int]:
    """Expand bytes into bits, most significant bit first."""
    return [(byte >> (7 - i)) & 1 for byte in data for i in range(8)]


def charify(bits: Iterable[int]) -> bytes:
    """Pack bits, most significant first, into bytes; a trailing partial byte is dropped."""
    bits = list(bits)
    out = bytearray()
    for start in range(0, len(bits) - 7, 8):
        value = 0
        for b in bits[start : start + 8]:
            value = (value << 1) | (b & 1)
        out.append(value)
    return bytes(out)


class Viterbi:
    """Rate 1/n convolutional code with constraint length ``k``.

    ``polys`` holds the ``n`` generator polynomials. With ``msb_first`` the
    output of the first polynomial is the most significant bit of a symbol,
    otherwise the least significant.
    """

    POLY23 = (0x7, 0x6)  # MIT lecture example
    POLY23A = (0x7, 0x5)  # D-Star
    POLY24 = (0xF, 0xB)
    POLY25 = (0x17, 0x19)
    POLY25A = (0x13, 0x1B)
    POLY25Y = (0x13, 0x1D)  # Yaesu System Fusion or NXDN SACCH

    def __init__(self, k: int, n: int, polys: Sequence[int], msb_first: bool = True) -> None:
        if k < 2:
            raise ValueError("constraint length must be at least 2")
        if n < 1:
            raise ValueError("code must produce at least one bit per symbol")
        polys = tuple(polys)
        if len(polys) < n:
            raise ValueError(f"{n} polynomials needed, got {len(polys)}")
        self.k = k
        self.n = n
        self.polys = polys[:n]
        self.msb_first = msb_first
        self._nb_states = 1 << (k - 1)
        self._half = 1 << (k - 2)

        self.branch_codes = tuple(
            self._symbol(state | (bit << (k - 1)))
            for state in range(self._nb_states)
            for bit in (0, 1)
        )
        self.pred_a = tuple((s & (self._half - 1)) << 1 for s in range(self._nb_states))
        self.pred_b = tuple(p + 1 for p in self.pred_a)

    def _symbol(self, encstate: int) -> int:
        return sum(
            parity(encstate & poly) << ((self.n - 1 - j) if self.msb_first else j)
            for j, poly in enumerate(self.polys)
        )

    def _register(self, data_bits: Iterable[int], start_state: int) -> Iterator[int]:
        encstate = start_state
        for bit in data_bits:
            if bit not in (0, 1):
                raise ValueError(f"data bits must be 0 or 1, got {bit!r}")
            encstate = (encstate >> 1) | (bit << (self.k - 1))
            yield encstate

    def encode_to_symbols(self, data_bits: Iterable[int], start_state: int = 0) -> list[int]:
        """Encode data bits into one n-bit symbol per input bit."""
        return [self._symbol(s) for s in self._register(data_bits, start_state)]

    def encode_to_bits(self, data_bits: Iterable[int], start_state: int = 0) -> list[int]:
        """Encode data bits into n coded bits per input bit, first polynomial first."""
        return [
            parity(s & poly)
            for s in self._register(data_bits, start_state)
            for poly in self.polys
        ]

    def _check_start_state(self, start_state: int) -> None:
        if not 0 <= start_state < self._nb_states:
            raise ValueError(f"start state must be in range 0..{self._nb_states - 1}")

    def decode_from_symbols(self, symbols: Sequence[int], start_state: int = 0) -> list[int]:
        """Decode symbols into data bits; the trace back starts from state 0."""
        self._check_start_state(start_state)
        states = range(self._nb_states)
        # Every state starts with a zero path metric.
        metrics = [0] * self._nb_states
        traceback: list[list[int]] = []

        for symbol in symbols:
            new_metrics = [0] * self._nb_states
            choices = [0] * self._nb_states
            for ib in states:
                bit = 0 if ib < self._half else 1

                pred_a = self.pred_a[ib]
                bm_a = _ones(self.branch_codes[(pred_a << 1) + bit] ^ symbol)
                pm_a = metrics[pred_a] + bm_a

                pred_b = self.pred_b[ib]
                bm_b = _ones(self.branch_codes[(pred_b << 1) + bit] ^ symbol)
                pm_b = metrics[pred_b] + bm_b

                if pm_a == pm_b:
                    take_a = True if bm_a == bm_b else bm_a < bm_b
                else:
                    take_a = pm_a < pm_b

                if take_a:
                    new_metrics[ib], choices[ib] = pm_a, pred_a
                else:
                    new_metrics[ib], choices[ib] = pm_b, pred_b
            metrics = new_metrics
            traceback.append(choices)

        data_bits = [0] * len(traceback)
        state = 0
        for index in reversed(range(len(traceback))):
            data_bits[index] = 0 if state < self._half else 1
            state = traceback[index][state]
        return data_bits

    def decode_from_bits(self, bits: Sequence[int], start_state: int = 0) -> list[int]:
        """Group coded bits into symbols, first bit least significant, and decode them."""
        if len(bits) % self.n:
            raise ValueError(f"number of bits must be a multiple of {self.n}")
        symbols = [
            sum(b << j for j, b in enumerate(bits[i : i + self.n]))
            for i in range(0, len(bits), self.n)
        ]
        return self.decode_from_symbols(symbols, start_state)