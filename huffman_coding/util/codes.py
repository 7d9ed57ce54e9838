'''
util/codes.py

Derives the code table of a Huffman tree.
'''

from .tree import is_leaf


# Code given to the only symbol of a single-leaf tree
SINGLE_SYMBOL_CODE = '0'


def generate_codes(root):
    '''
    Walks the tree and records the path to every leaf.

    Taking the low child appends a 0 and taking the high child appends a 1. A
    tree that is a single leaf has no path at all, so its symbol is given
    SINGLE_SYMBOL_CODE and every occurrence costs one bit.

    Args:
        root: Leaf or Internal
            root of the Huffman tree

    Returns:
        codes: dict
            dictionary whose keys are the symbols of the tree and whose values
            are their codes as strings of 0s and 1s:
            {'a': '0', 'b': '10', 'r': '110', 'c': '1110', 'd': '1111'}
    '''

    if is_leaf(root):
        return {root.symbol: SINGLE_SYMBOL_CODE}

    codes = dict()
    stack = [(root, '')]
    while stack:
        node, code = stack.pop()
        if is_leaf(node):
            codes[node.symbol] = code
        else:
            stack.append((node.high, code + '1'))
            stack.append((node.low, code + '0'))
    return codes


def is_prefix_free(codes):
    '''
    Checks that no code in the table is a prefix of another.

    Once sorted, any code that prefixes another also prefixes its immediate
    successor, so only neighbours need comparing.
    '''

    ordered = sorted(codes.values())
    for i in range(1, len(ordered)):
        if ordered[i].startswith(ordered[i-1]):
            return False
    return True


def invert_codes(codes):
    return {code: symbol for symbol, code in codes.items()}
