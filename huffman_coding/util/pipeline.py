'''
util/pipeline.py

Runs the whole Huffman pipeline over one in-memory sequence:
frequencies -> priority queue -> tree -> code table -> bitstring, and back.
'''

from collections import namedtuple

from .codes import generate_codes
from .decoder import huffman_decode
from .encoder import huffman_encode
from .errors import EmptyInput
from .frequencies import get_freqs
from .tree import tree_from_freqs


Compression = namedtuple('Compression', ['freqs', 'tree', 'codes', 'bits'])


def compress(data):
    '''
    Huffman codes data with a tree built from its own frequencies.

    Args:
        data: bytes, str or sequence
            symbols to compress

    Returns:
        compression: Compression
            the frequency table, the tree, the code table and the encoded
            bitstring

    Raises:
        EmptyInput: data holds no symbols
    '''

    freqs = get_freqs(data)
    if not freqs:
        raise EmptyInput()
    tree = tree_from_freqs(freqs)
    codes = generate_codes(tree)
    bits = huffman_encode(codes, data)
    return Compression(freqs, tree, codes, bits)


def decompress(tree, bits, like=None):
    '''
    Decodes bits with tree.

    Args:
        tree: Leaf or Internal
            root of the tree bits were encoded with
        bits: str or bitstring.Bits
            encoded stream
        like: bytes, str or None
            if given, the decoded symbols are rebuilt into this type

    Returns:
        decoded: bytes, str or list
            decoded symbols
    '''

    decoded = huffman_decode(tree, bits)
    return rebuild(decoded, like)


def rebuild(symbols, like):
    if isinstance(like, (bytes, bytearray)):
        return type(like)(symbols)
    if isinstance(like, str):
        return ''.join(symbols)
    return symbols


def round_trip(data):
    '''
    Compresses and decompresses data, returning the decompressed copy.
    '''

    compression = compress(data)
    return decompress(compression.tree, compression.bits, like=data)
