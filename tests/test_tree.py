import pytest

from huffman_coding.util.errors import EmptyInput
from huffman_coding.util.frequencies import get_freqs
from huffman_coding.util.priority_queue import PriorityQueue
from huffman_coding.util.tree import Internal, Leaf, build_tree, depth, \
    huffman_tree, is_leaf, iter_nodes, leaves, make_queue, tree_from_freqs


def test_get_freqs_abracadabra():
    assert get_freqs('abracadabra') == {'a': 5, 'b': 2, 'r': 2, 'c': 1,
        'd': 1}


def test_get_freqs_bytes_yields_ints():
    assert get_freqs(b'aab') == {97: 2, 98: 1}


def test_make_queue_skips_zero_counts():
    queue = make_queue({'a': 3, 'b': 0, 'c': 1})
    assert sorted(node.symbol for node in queue) == ['a', 'c']


def test_tie_break_second_popped_is_high_child():
    root = tree_from_freqs({'a': 2, 'b': 2, 'c': 3})
    assert root == Internal(7, Leaf('c', 3),
        Internal(4, Leaf('a', 2), Leaf('b', 2)))


def test_tie_break_is_stable_across_runs():
    trees = [huffman_tree('aabbccc') for _ in range(5)]
    assert all(tree == trees[0] for tree in trees)


class FifoQueue:
    '''Hands nodes out in insertion order, whatever their weights.'''

    def __init__(self, nodes):
        self.nodes = list(nodes)

    def __len__(self):
        return len(self.nodes)

    def pop(self):
        return self.nodes.pop(0)

    def push(self, node):
        self.nodes.append(node)


def test_heavier_first_pop_becomes_high_child():
    root = build_tree(FifoQueue([Leaf('z', 3), Leaf('y', 2)]))
    assert root == Internal(5, Leaf('y', 2), Leaf('z', 3))


def test_weight_conservation():
    text = 'the quick brown fox jumps over the lazy dog'
    root = huffman_tree(text)
    assert root.weight == len(text)
    for node in iter_nodes(root):
        if not is_leaf(node):
            assert node.weight == node.low.weight + node.high.weight


def test_every_symbol_has_one_leaf():
    text = 'mississippi river'
    symbols = [leaf.symbol for leaf in leaves(huffman_tree(text))]
    assert sorted(symbols) == sorted(set(text))


def test_single_symbol_root_is_leaf():
    root = huffman_tree('aaaa')
    assert root == Leaf('a', 4)
    assert depth(root) == 0


def test_empty_queue_is_empty_input():
    with pytest.raises(EmptyInput):
        build_tree(PriorityQueue())
    with pytest.raises(EmptyInput):
        huffman_tree('')


def test_depth_of_skewed_tree():
    # Fibonacci weights give the most unbalanced tree
    freqs = {'a': 1, 'b': 1, 'c': 2, 'd': 3, 'e': 5, 'f': 8}
    assert depth(tree_from_freqs(freqs)) == 5


def test_get_freqs_keeps_first_occurrence_order():
    assert list(get_freqs('banana')) == ['b', 'a', 'n']
