"""Type-2, fourth order phase-locked loop for tracking a pilot tone."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Iterable

_log = logging.getLogger(__name__)

_TWO_PI = 2.0 * math.pi


class PhaseLock(ABC):
    """Phase-locked loop tracking a pilot tone in a real sample stream.

    The open-loop transfer function is::

        G(z) = K * (z - q1) / ((z - p1) * (z - p2) * (z - 1) * (z - 1))
        K  = 3.788 * (bandwidth * 2 * pi) ** 3
        q1 = exp(-0.1153 * bandwidth * 2 * pi)
        p1 = exp(-1.146 * bandwidth * 2 * pi)
        p2 = exp(-5.331 * bandwidth * 2 * pi)

    ``freq`` is the centre frequency relative to the sample rate (0.5 is
    Nyquist), ``bandwidth`` the loop bandwidth relative to the sample rate and
    ``minsignal`` the phase error threshold below which the loop counts as
    tracking.
    """

    def __init__(self, freq: float, bandwidth: float, minsignal: float) -> None:
        self.psin = 0.0
        self.pcos = 1.0
        self._setup(freq, bandwidth, minsignal)

    def configure(self, freq: float, bandwidth: float, minsignal: float) -> None:
        """Change the loop parameters and reset the loop state."""
        self._setup(freq, bandwidth, minsignal)
        _log.debug(
            "PhaseLock.configure: freq: %f bandwidth: %f minsignal: %f, lock_delay: %d",
            freq,
            bandwidth,
            minsignal,
            self._lock_delay,
        )

    def _setup(self, freq: float, bandwidth: float, minsignal: float) -> None:
        if bandwidth <= 0:
            raise ValueError("bandwidth must be positive")

        self._minfreq = (freq - bandwidth) * _TWO_PI
        self._maxfreq = (freq + bandwidth) * _TWO_PI

        self._minsignal = minsignal
        self._lock_delay = int(1.0 / bandwidth)
        self._lock_cnt = 0

        # Two-pole low-pass filter on the I/Q phase error, unit DC gain.
        p1 = math.exp(-1.146 * bandwidth * _TWO_PI)
        p2 = math.exp(-5.331 * bandwidth * _TWO_PI)
        self._phasor_a1 = -p1 - p2
        self._phasor_a2 = p1 * p2
        self._phasor_b0 = 1 + self._phasor_a1 + self._phasor_a2

        # Loop filter stabilising the loop.
        q1 = math.exp(-0.1153 * bandwidth * _TWO_PI)
        self._loopfilter_b0 = 0.62 * bandwidth * _TWO_PI
        self._loopfilter_b1 = -self._loopfilter_b0 * q1

        self._freq = freq * _TWO_PI
        self.phase = 0.0

        self._phasor_i1 = 0.0
        self._phasor_i2 = 0.0
        self._phasor_q1 = 0.0
        self._phasor_q2 = 0.0
        self._loopfilter_x1 = 0.0

        self.sample_count = 0

    def _track(self, x: float, psin: float, pcos: float) -> None:
        """Advance the loop by one input sample given the current tone."""
        phasor_i = psin * x
        phasor_q = pcos * x

        phasor_i = (
            self._phasor_b0 * phasor_i
            - self._phasor_a1 * self._phasor_i1
            - self._phasor_a2 * self._phasor_i2
        )
        phasor_q = (
            self._phasor_b0 * phasor_q
            - self._phasor_a1 * self._phasor_q1
            - self._phasor_a2 * self._phasor_q2
        )
        self._phasor_i2, self._phasor_i1 = self._phasor_i1, phasor_i
        self._phasor_q2, self._phasor_q1 = self._phasor_q1, phasor_q

        if phasor_i > abs(phasor_q):
            # Within +/- 45 degrees of lock: linear approximation of arctan.
            phase_err = phasor_q / phasor_i
        elif phasor_q > 0:
            phase_err = 1.0
        else:
            phase_err = -1.0

        if -self._minsignal < phase_err < self._minsignal:
            if self._lock_cnt < 2 * self._lock_delay:
                self._lock_cnt += 1
        elif self._lock_cnt > 0:
            self._lock_cnt -= 1

        self._freq += (
            self._loopfilter_b0 * phase_err + self._loopfilter_b1 * self._loopfilter_x1
        )
        self._loopfilter_x1 = phase_err
        self._freq = max(self._minfreq, min(self._maxfreq, self._freq))

        self.phase += self._freq
        if self.phase > _TWO_PI:
            self.phase -= _TWO_PI

        self.sample_count += 1

    def process_block(self, samples: Iterable[float]) -> list[float]:
        """Track the pilot in ``samples`` and return the locked double-frequency tone."""
        output = []
        for x in samples:
            psin = math.sin(self.phase)
            pcos = math.cos(self.phase)
            output.append(2 * psin * pcos)
            self._track(x, psin, pcos)
        return output

    def process_sample(self, sample: float) -> tuple[float, ...]:
        """Track the pilot with one sample and return the outputs of :meth:`process_phase`."""
        self.psin = math.sin(self.phase)
        self.pcos = math.cos(self.phase)
        output = self.process_phase()
        self._track(sample, self.psin, self.pcos)
        return output

    @abstractmethod
    def process_phase(self) -> tuple[float, ...]:
        """Produce outputs from ``phase``, ``psin`` and ``pcos``."""

    def locked(self) -> bool:
        """Return True if the loop is locked."""
        return self._lock_cnt >= self._lock_delay


class SimplePhaseLock(PhaseLock):
    """Phase-locked loop whose outputs are the sine and cosine of the locked pilot."""

    def process_phase(self) -> tuple[float, float]:
        return (self.psin, self.pcos)