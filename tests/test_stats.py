import pytest

from huffman_coding.util.pipeline import compress
from huffman_coding.util.stats import average_code_length, entropy, \
    packed_size, summarize


def test_entropy_uniform():
    assert entropy({'a': 1, 'b': 1, 'c': 1, 'd': 1}) == pytest.approx(2.0)


def test_entropy_single_symbol():
    assert entropy({'a': 10}) == 0.0
    assert entropy({}) == 0.0


def test_average_code_length_abracadabra():
    compression = compress('abracadabra')
    assert average_code_length(compression.freqs, compression.codes) == \
        pytest.approx(23 / 11)


def test_average_code_length_bounds_entropy():
    compression = compress('the quick brown fox jumps over the lazy dog')
    h = entropy(compression.freqs)
    length = average_code_length(compression.freqs, compression.codes)
    assert h <= length < h + 1


def test_packed_size():
    assert packed_size('') == 0
    assert packed_size('0') == 1
    assert packed_size('0' * 8) == 1
    assert packed_size('0' * 9) == 2


def test_summarize():
    compression = compress('abracadabra')
    summary = summarize('abracadabra', compression)
    assert summary['symbols'] == 11
    assert summary['distinct'] == 5
    assert summary['encoded_bits'] == 23
    assert summary['packed_bytes'] == 3
    assert summary['ratio'] == pytest.approx(23 / 88)
