'''
util/frequencies.py

Frequency analysis of an input sequence.
'''


def get_freqs(symbols):
    '''
    Counts how often each symbol occurs in the input.

    Only symbols that actually occur get an entry, so the table covers the
    alphabet in use rather than every possible byte.

    Args:
        symbols: iterable
            input to count; bytes give int symbols, str gives characters

    Returns:
        freqs: dict
            symbol -> occurrence count, in order of first occurrence:
            {'a': 5, 'b': 2, 'r': 2, 'c': 1, 'd': 1}
    '''

    freqs = dict()
    for symbol in symbols:
        freqs[symbol] = freqs.get(symbol, 0) + 1
    return freqs
