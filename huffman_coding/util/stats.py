'''
util/stats.py

Figures for judging a Huffman code against its input: entropy, average code
length, and the size the bitstring would take if it were packed into bytes.
'''

from bitstring import BitArray
import numpy as np

# Bits per symbol of the uncompressed input
SYMBOL_BITS = 8


def entropy(freqs):
    '''
    Shannon entropy of the symbol distribution in bits per symbol.

    Args:
        freqs: dict
            dictionary of symbols to frequencies

    Returns:
        h: float
            entropy; 0 for a single symbol
    '''

    counts = np.array(list(freqs.values()), dtype=np.float64)
    counts = counts[counts > 0]
    if counts.size == 0:
        return 0.0
    p = counts / counts.sum()
    return float(-np.sum(p * np.log2(p)))


def average_code_length(freqs, codes):
    '''
    Mean number of bits spent per input symbol.
    '''

    symbols = list(freqs)
    counts = np.array([freqs[s] for s in symbols], dtype=np.float64)
    lengths = np.array([len(codes[s]) for s in symbols], dtype=np.float64)
    if counts.sum() == 0:
        return 0.0
    return float(np.dot(counts, lengths) / counts.sum())


def packed_size(bits):
    '''
    Number of bytes bits would occupy packed, padding the last byte.
    '''

    if not bits:
        return 0
    return len(BitArray(bin=bits).tobytes())


def summarize(data, compression):
    '''
    Collects statistics about a compression.

    Args:
        data: bytes, str or sequence
            the input that was compressed
        compression: Compression
            as returned by pipeline.compress

    Returns:
        summary: dict
            with keys symbols, distinct, entropy, average_code_length,
            encoded_bits, packed_bytes and ratio (encoded bits over
            SYMBOL_BITS bits per input symbol)
    '''

    n_symbols = len(data)
    n_bits = len(compression.bits)
    return {
        'symbols': n_symbols,
        'distinct': len(compression.freqs),
        'entropy': entropy(compression.freqs),
        'average_code_length': average_code_length(compression.freqs,
            compression.codes),
        'encoded_bits': n_bits,
        'packed_bytes': packed_size(compression.bits),
        'ratio': n_bits / (SYMBOL_BITS * n_symbols) if n_symbols else 0.0,
    }
