'''
util/tree.py

Huffman tree nodes and the greedy tree builder.

A tree is made of two record types. A Leaf holds one symbol and its count. An
Internal node holds the sum of its children's weights and exactly two children,
low (the lighter one, reached with a 0 bit) and high (reached with a 1 bit).
'''

from collections import namedtuple

from .errors import EmptyInput
from .frequencies import get_freqs
from .priority_queue import PriorityQueue


Leaf = namedtuple('Leaf', ['symbol', 'weight'])
Internal = namedtuple('Internal', ['weight', 'low', 'high'])


def is_leaf(node):
    return isinstance(node, Leaf)


def make_queue(freqs):
    '''
    Builds the initial priority queue with one leaf per symbol present.

    Leaves are pushed in ascending symbol order so that equal weights always
    resolve the same way for the same input.

    Args:
        freqs: dict
            dictionary of symbols to frequencies, as generated by get_freqs

    Returns:
        queue: PriorityQueue
            queue of Leaf nodes
    '''

    queue = PriorityQueue()
    for symbol in sorted(freqs):
        if freqs[symbol] > 0:
            queue.push(Leaf(symbol, freqs[symbol]))
    return queue


def build_tree(queue):
    '''
    Repeatedly merges the two lightest nodes of queue until one remains.

    The first node popped becomes the high child only if it is strictly
    heavier than the second; on equal weights the second node popped is the
    high child.

    Args:
        queue: PriorityQueue
            queue of nodes, consumed by this function

    Returns:
        root: Leaf or Internal
            root of the Huffman tree; a Leaf if only one symbol is present

    Raises:
        EmptyInput: queue holds no nodes
    '''

    if len(queue) == 0:
        raise EmptyInput()

    while len(queue) > 1:
        a = queue.pop()
        b = queue.pop()
        if a.weight > b.weight:
            queue.push(Internal(a.weight + b.weight, b, a))
        else:
            queue.push(Internal(a.weight + b.weight, a, b))

    return queue.pop()


def tree_from_freqs(freqs):
    return build_tree(make_queue(freqs))


def huffman_tree(symbols):
    return tree_from_freqs(get_freqs(symbols))


def iter_nodes(root):
    '''
    Yields every node of the tree in pre-order, low child before high child.
    '''

    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if not is_leaf(node):
            stack.append(node.high)
            stack.append(node.low)


def leaves(root):
    return [node for node in iter_nodes(root) if is_leaf(node)]


def depth(root):
    '''
    Number of edges on the longest root-to-leaf path.
    '''

    deepest = 0
    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        if is_leaf(node):
            deepest = max(deepest, level)
        else:
            stack.append((node.low, level + 1))
            stack.append((node.high, level + 1))
    return deepest
