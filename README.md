# dsdfec

Building blocks for decoding digital voice radio modes such as D-Star,
Yaesu System Fusion and NXDN, in pure Python with no dependencies.

## Contents

- `dsdfec.viterbi`
  - `Viterbi(k, n, polys, msb_first=True)`: convolutional encoder and
    hard-decision Viterbi decoder for constraint length `k` and rate `1/n`.
    It has `encode_to_symbols`, `encode_to_bits`, `decode_from_symbols` and
    `decode_from_bits`. Generator polynomials come as class constants:
    `POLY23`, `POLY23A` (D-Star), `POLY24`, `POLY25`, `POLY25A`, `POLY25Y`
    (YSF / NXDN SACCH). The trace back starts from state 0, so flush the
    encoder with `k - 1` zero bits.
  - `parity(x)`, `bitify(data)` (bytes to bits, MSB first) and
    `charify(bits)` (bits back to bytes, a trailing partial byte dropped).
- `dsdfec.viterbi3.Viterbi3(n, polys, msb_first=True)` and
  `dsdfec.viterbi5.Viterbi5(n, polys, msb_first=True)`: decoders with a
  fixed trellis for constraint lengths 3 and 5. Their trace back starts from
  the state with the smallest final path metric.
- `dsdfec.pn.PN95(seed)`: the 512-bit pseudo-noise sequence of a 9-stage
  shift register with feedback from bits 0 and 4 (NXDN scrambling), read
  with `bit(index)`, `byte(index)` or `bits()`; indices wrap around.
- `dsdfec.phaselock.PhaseLock` (abstract) and `SimplePhaseLock`: a type-2,
  4th order phase-locked loop tracking a pilot tone. `process_block(samples)`
  returns the locked double-frequency tone; `process_sample(sample)` returns
  what `process_phase()` produces, for `SimplePhaseLock` the sine and cosine
  of the locked pilot. `locked()` tells whether the loop has locked and
  `configure(freq, bandwidth, minsignal)` resets it with new parameters.
- `dsdfec.runningmaxmin`: `RunningMaxMin(width)` keeps the maximum and
  minimum of the last `width` values given to `update`; `next_power_of_two(x)`.
- `dsdfec.timeutil`: `now_ms()` and `now_us()` return the time since the
  epoch as integers.

## Installation

```
pip install .
```

## Example

```python
from dsdfec.viterbi import Viterbi, bitify, charify

# D-Star: K=3, rate 1/2, dibits LSB first
codec = Viterbi(3, 2, Viterbi.POLY23A, msb_first=False)

bits = bitify(b"hello") + [0, 0]          # flush the encoder
symbols = codec.encode_to_symbols(bits, 0)
symbols[20] ^= 1                           # a transmission error
decoded = codec.decode_from_symbols(symbols, 0)
print(charify(decoded[:40]))               # b'hello'
```

```python
from dsdfec.pn import PN95

scrambler = PN95(0xE4)
print(hex(scrambler.byte(0)))              # 0x27
```

## What it does not do

This is a library of parts. It has no command-line program and no complete
decoder for any radio mode: it does not read audio, demodulate symbols,
find frame syncs or produce voice. Block codes (Golay, Hamming and the like)
and CRCs are not included.

## Tests

```
pip install .[test]
pytest
```