import pytest

from dsdfec.viterbi import Viterbi, bitify, charify
from dsdfec.viterbi5 import Viterbi5

PHRASE = b"The quick brown fox jumps over the lazy dog\x00"
DATA_BITS_A = [1, 0, 1, 1, 0, 0, 0, 1, 0, 1]


@pytest.fixture(params=[Viterbi.POLY25, Viterbi.POLY25Y, Viterbi.POLY25A])
def polys(request):
    return request.param


def test_constraint_length_is_five(polys):
    viterbi = Viterbi5(2, polys)
    assert viterbi.k == 5
    assert len(viterbi.branch_codes) == 32


def test_short_message_round_trip(polys):
    viterbi = Viterbi5(2, polys)
    data = DATA_BITS_A + [0] * (viterbi.k - 1)
    symbols = viterbi.encode_to_symbols(data, 0)
    decoded = viterbi.decode_from_symbols(symbols, 0)
    assert decoded[:10] == DATA_BITS_A


def test_phrase_round_trip(polys):
    viterbi = Viterbi5(2, polys)
    symbols = viterbi.encode_to_symbols(bitify(PHRASE), 0)
    decoded = viterbi.decode_from_symbols(symbols, 0)
    assert charify(decoded)[:43] == PHRASE[:43]


@pytest.mark.parametrize("position", [20, 100, 250])
def test_corrects_single_bit_error(polys, position):
    viterbi = Viterbi5(2, polys)
    symbols = viterbi.encode_to_symbols(bitify(PHRASE), 0)
    symbols[position] ^= 1
    decoded = viterbi.decode_from_symbols(symbols, 0)
    assert charify(decoded)[:43] == PHRASE[:43]


def test_lsb_first_bits_round_trip(polys):
    viterbi = Viterbi5(2, polys, msb_first=False)
    coded = viterbi.encode_to_bits(bitify(PHRASE), 0)
    assert len(coded) == 2 * len(PHRASE) * 8
    decoded = viterbi.decode_from_bits(coded, 0)
    assert charify(decoded)[:43] == PHRASE[:43]


def test_agrees_with_generic_decoder_on_clean_input(polys):
    specialised = Viterbi5(2, polys)
    generic = Viterbi(5, 2, polys)
    symbols = specialised.encode_to_symbols(bitify(PHRASE), 0)
    assert specialised.decode_from_symbols(symbols, 0) == generic.decode_from_symbols(symbols, 0)


def test_output_length_matches_symbols():
    viterbi = Viterbi5(2, Viterbi.POLY25)
    symbols = [1, 2, 3, 0, 1, 2, 3]
    assert len(viterbi.decode_from_symbols(symbols, 0)) == len(symbols)


def test_empty_input_decodes_to_nothing():
    viterbi = Viterbi5(2, Viterbi.POLY25)
    assert viterbi.decode_from_symbols([], 0) == []


@pytest.mark.parametrize("state", [-1, 16])
def test_invalid_start_state(state):
    viterbi = Viterbi5(2, Viterbi.POLY25)
    with pytest.raises(ValueError):
        viterbi.decode_from_symbols([0, 1], state)


def test_odd_bit_count_rejected():
    viterbi = Viterbi5(2, Viterbi.POLY25)
    with pytest.raises(ValueError):
        viterbi.decode_from_bits([0, 1, 1], 0)