import pytest

from huffman_coding.util.codes import SINGLE_SYMBOL_CODE, generate_codes, \
    invert_codes, is_prefix_free
from huffman_coding.util.tree import huffman_tree, tree_from_freqs


def test_abracadabra_codes():
    codes = generate_codes(huffman_tree('abracadabra'))
    assert codes == {'a': '0', 'b': '10', 'r': '110', 'c': '1110',
        'd': '1111'}


def test_tie_break_codes():
    codes = generate_codes(tree_from_freqs({'a': 2, 'b': 2, 'c': 3}))
    assert codes == {'c': '0', 'a': '10', 'b': '11'}


@pytest.mark.parametrize('text', [
    'abracadabra',
    'the quick brown fox jumps over the lazy dog',
    'aaaaaaaaaaaaaaaaaaaaaaaaaaab',
    bytes(range(256)),
])
def test_codes_are_prefix_free(text):
    codes = generate_codes(huffman_tree(text))
    assert len(codes) == len(set(text))
    assert is_prefix_free(codes)


def test_single_symbol_gets_sentinel_code():
    assert generate_codes(huffman_tree('aaaa')) == {'a': SINGLE_SYMBOL_CODE}


def test_two_symbols_get_one_bit_each():
    codes = generate_codes(huffman_tree('ab'))
    assert sorted(codes.values()) == ['0', '1']


def test_is_prefix_free_rejects_prefix():
    assert not is_prefix_free({'a': '0', 'b': '01', 'c': '11'})
    assert not is_prefix_free({'a': '10', 'b': '10'})
    assert is_prefix_free({'a': '0', 'b': '10', 'c': '11'})


def test_code_lengths_follow_frequencies():
    freqs = {'a': 40, 'b': 20, 'c': 10, 'd': 5, 'e': 5}
    codes = generate_codes(tree_from_freqs(freqs))
    assert len(codes['a']) <= len(codes['b']) <= len(codes['c'])


def test_invert_codes():
    assert invert_codes({'a': '0', 'b': '1'}) == {'0': 'a', '1': 'b'}
