'''
util/decoder.py

Decoders for Huffman encoded bitstrings.

huffman_decode walks the tree itself; table_decode only needs a code table and
is used when the tree is not at hand, e.g. after reading a table file.
'''

from bitstring import Bits

from .codes import SINGLE_SYMBOL_CODE, invert_codes
from .errors import InvalidBit, TruncatedCode
from .tree import is_leaf


def as_bin(bits):
    '''
    Returns bits as a string of 0s and 1s.

    Args:
        bits: str or bitstring.Bits
            encoded stream, either as text or as a bitstring object
    '''

    if isinstance(bits, Bits):
        return bits.bin
    return bits


def huffman_decode(root, bits):
    '''
    Decodes a bitstring by walking the tree from its root.

    A 0 moves to the low child and a 1 to the high child. Landing on a leaf
    emits its symbol and returns to the root.

    Args:
        root: Leaf or Internal
            root of the tree the bitstring was encoded with
        bits: str or bitstring.Bits
            encoded stream

    Returns:
        decoded_stream: list
            stream as a list of decoded symbols

    Raises:
        InvalidBit: a character other than 0 or 1, or a 1 for a single-leaf
            tree
        TruncatedCode: the stream ends in the middle of a code
    '''

    bits = as_bin(bits)

    if is_leaf(root):
        return _decode_single(root, bits)

    decoded_stream = list()
    node = root
    dangling = 0
    for position, bit in enumerate(bits):
        if bit == '0':
            node = node.low
        elif bit == '1':
            node = node.high
        else:
            raise InvalidBit(bit, position)
        dangling += 1
        if is_leaf(node):
            decoded_stream.append(node.symbol)
            node = root
            dangling = 0

    if node is not root:
        raise TruncatedCode(dangling)
    return decoded_stream


def _decode_single(leaf, bits):
    for position, bit in enumerate(bits):
        if bit != SINGLE_SYMBOL_CODE:
            raise InvalidBit(bit, position)
    return [leaf.symbol] * len(bits)


def table_decode(codes, bits):
    '''
    Decodes a bitstring using only a code table.

    Bits are accumulated until they spell a code of the table, which is
    unambiguous because Huffman codes are prefix-free.

    Args:
        codes: dict
            code table as returned by generate_codes
        bits: str or bitstring.Bits
            encoded stream

    Returns:
        decoded_stream: list
            stream as a list of decoded symbols

    Raises:
        InvalidBit: a character other than 0 or 1, or a bit that leads away
            from every code of the table
        TruncatedCode: the stream ends in the middle of a code
    '''

    bits = as_bin(bits)
    decodings = invert_codes(codes)
    prefixes = {code[:i] for code in decodings for i in range(1, len(code))}

    decoded_stream = list()
    possible_encoding = ''
    for position, bit in enumerate(bits):
        if bit not in '01':
            raise InvalidBit(bit, position)
        possible_encoding += bit
        if possible_encoding in decodings:
            decoded_stream.append(decodings[possible_encoding])
            possible_encoding = ''
        elif possible_encoding not in prefixes:
            raise InvalidBit(bit, position)

    if possible_encoding:
        raise TruncatedCode(len(possible_encoding))
    return decoded_stream
