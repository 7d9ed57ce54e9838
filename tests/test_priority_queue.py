import random

import pytest

from huffman_coding.util.errors import EmptyQueue
from huffman_coding.util.priority_queue import PriorityQueue
from huffman_coding.util.tree import Leaf


def test_pop_returns_in_weight_order():
    weights = [5, 2, 2, 1, 1, 7, 3]
    queue = PriorityQueue(Leaf(i, w) for i, w in enumerate(weights))
    popped = [queue.pop().weight for _ in range(len(weights))]
    assert popped == sorted(weights)
    assert len(queue) == 0


def test_heap_invariant_after_random_operations():
    rng = random.Random(1234)
    queue = PriorityQueue()
    for step in range(500):
        if len(queue) and rng.random() < 0.4:
            queue.pop()
        else:
            queue.push(Leaf(step, rng.randint(0, 20)))
        assert queue.is_heap()


def test_size_and_peek():
    queue = PriorityQueue()
    queue.push(Leaf('a', 3))
    queue.push(Leaf('b', 1))
    assert queue.size() == 2
    assert queue.peek() == Leaf('b', 1)
    assert queue.size() == 2


def test_equal_weights_keep_insertion_position():
    queue = PriorityQueue([Leaf('a', 2), Leaf('b', 2), Leaf('c', 3)])
    assert [node.symbol for node in queue] == ['a', 'b', 'c']
    assert queue.pop().symbol == 'a'
    assert queue.pop().symbol == 'b'


def test_pop_empty_raises():
    queue = PriorityQueue()
    with pytest.raises(EmptyQueue):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()
