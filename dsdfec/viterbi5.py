"""Viterbi decoder specialised for constraint length 5."""

from __future__ import annotations

from collections.abc import Sequence

from .viterbi import Viterbi

_NB_STATES = 16
_HALF = _NB_STATES // 2


class Viterbi5(Viterbi):
    """Rate 1/n convolutional code with constraint length 5 and a 16-state trellis.

    Ties between the two paths entering a state go to the higher
    predecessor, and the trace back starts from the state with the smallest
    final path metric.
    """

    def __init__(self, n: int, polys: Sequence[int], msb_first: bool = True) -> None:
        super().__init__(5, n, polys, msb_first)

    def decode_from_symbols(self, symbols: Sequence[int], start_state: int = 0) -> list[int]:
        """Decode symbols into data bits."""
        self._check_start_state(start_state)
        codes = self.branch_codes
        # Every state starts with a zero path metric.
        metrics = [0] * _NB_STATES
        traceback: list[tuple[int, ...]] = []

        for symbol in symbols:
            branch = [bin(code ^ symbol).count("1") for code in codes]
            new_metrics = []
            choices = []
            for state in range(_NB_STATES):
                # State s is entered from states 2*(s&7) and 2*(s&7)+1 with bit s>>3.
                bit = state >> 3
                upper = (state & (_HALF - 1)) << 1
                lower = upper + 1
                m1 = branch[(upper << 1) + bit] + metrics[upper]
                m2 = branch[(lower << 1) + bit] + metrics[lower]
                if m1 < m2:
                    choices.append(upper)
                    new_metrics.append(m1)
                else:
                    choices.append(lower)
                    new_metrics.append(m2)
            metrics = new_metrics
            traceback.append(tuple(choices))

        state = min(range(_NB_STATES), key=metrics.__getitem__)
        data_bits = [0] * len(traceback)
        for index in reversed(range(len(traceback))):
            data_bits[index] = state >> 3
            state = traceback[index][state]
        return data_bits