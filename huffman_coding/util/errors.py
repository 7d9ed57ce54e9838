'''
util/errors.py

Exceptions raised by the Huffman coder. All of them derive from HuffmanError so
that the drivers can catch a single type and report it.
'''


class HuffmanError(Exception):
    pass


class EmptyInput(HuffmanError):
    '''
    Raised when a tree is requested for an input with no symbols.
    '''

    def __init__(self, message='no symbols to encode'):
        super().__init__(message)


class EmptyQueue(HuffmanError, IndexError):
    '''
    Raised when popping from or peeking at an empty priority queue.
    '''

    def __init__(self, message='pop from empty priority queue'):
        super().__init__(message)


class UnknownSymbol(HuffmanError, ValueError):
    '''
    Raised by the encoder when a symbol has no entry in the code table.

    Args:
        symbol: hashable
            symbol missing from the table
        position: int
            index of the symbol in the input
    '''

    def __init__(self, symbol, position):
        self.symbol = symbol
        self.position = position
        super().__init__(f'symbol {symbol!r} at position {position} is not '
            'in the code table')


class TruncatedCode(HuffmanError, ValueError):
    '''
    Raised by a decoder when the bitstring ends in the middle of a code.

    Args:
        dangling: int
            number of trailing bits that do not complete a code
    '''

    def __init__(self, dangling):
        self.dangling = dangling
        super().__init__(f'bitstring ends with {dangling} bit(s) of an '
            'incomplete code')


class InvalidBit(HuffmanError, ValueError):
    '''
    Raised by a decoder on a character that is not a valid branch.

    Args:
        bit: str
            offending character
        position: int
            index of the character in the bitstring
    '''

    def __init__(self, bit, position):
        self.bit = bit
        self.position = position
        super().__init__(f'invalid bit {bit!r} at position {position}')


class MalformedTable(HuffmanError, ValueError):
    '''
    Raised when a code table file cannot be decoded with: a line that is not
    "<symbol> <code>", a symbol listed twice, or codes that are not
    prefix-free.

    Args:
        tablefile: string
            path of the table file
        line: int or None
            line number of the offending entry, None for the table as a whole
        reason: str
            what is wrong with the table
    '''

    def __init__(self, tablefile, line=None,
        reason='expected "<symbol> <code>"'):
        self.tablefile = tablefile
        self.line = line
        self.reason = reason
        where = f'{tablefile}:{line}' if line is not None else f'{tablefile}'
        super().__init__(f'{where}: {reason}')
