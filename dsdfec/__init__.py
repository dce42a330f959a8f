"""Convolutional coding, Viterbi decoding, PN sequences, a PLL and sliding-window helpers for digital voice radio."""

__version__ = "0.1.0"
__all__ = ["phaselock", "pn", "runningmaxmin", "timeutil", "viterbi", "viterbi3", "viterbi5"]