'''
util/encoder.py

Encodes a sequence of symbols with a code table.
'''

from .errors import UnknownSymbol


def huffman_encode(codes, symbols):
    '''
    Substitutes every symbol with its code, in input order.

    Args:
        codes: dict
            code table as returned by generate_codes
        symbols: iterable
            sequence to encode

    Returns:
        bits: str
            concatenation of the codes, a string of 0s and 1s

    Raises:
        UnknownSymbol: a symbol has no entry in codes
    '''

    bitstream = []
    for position, symbol in enumerate(symbols):
        try:
            bitstream.append(codes[symbol])
        except KeyError:
            raise UnknownSymbol(symbol, position) from None
    return ''.join(bitstream)
