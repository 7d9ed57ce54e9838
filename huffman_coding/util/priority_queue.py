'''
util/priority_queue.py

Binary min-heap of tree nodes keyed by node weight.

Sifting only moves a node past a strictly heavier one, so nodes of equal weight
keep the order the heap arithmetic gives them. The tie-break in the tree builder
depends on this order.
'''

from .errors import EmptyQueue


def parent(i):
    return (i - 1) // 2


def left_child(i):
    return 2 * i + 1


def right_child(i):
    return 2 * i + 2


class PriorityQueue:
    '''
    Array-backed binary min-heap ordered by the weight attribute of its items.

    Items only need a numeric weight attribute; in practice they are the Leaf
    and Internal nodes from util/tree.py.
    '''

    def __init__(self, nodes=()):
        self.data = []
        for node in nodes:
            self.push(node)

    def __len__(self):
        return len(self.data)

    def __iter__(self):
        return iter(self.data)

    def size(self):
        return len(self.data)

    def push(self, node):
        '''
        Inserts node and restores heap order by sifting it up.
        '''

        self.data.append(node)
        i = len(self.data) - 1
        while i > 0 and self.data[i].weight < self.data[parent(i)].weight:
            self._swap(i, parent(i))
            i = parent(i)

    def pop(self):
        '''
        Removes and returns the minimum-weight node.

        Returns:
            node: Leaf or Internal
                the lightest node in the queue

        Raises:
            EmptyQueue: the queue holds no nodes
        '''

        if not self.data:
            raise EmptyQueue()
        top = self.data[0]
        last = self.data.pop()
        if self.data:
            self.data[0] = last
            self._heapify(0)
        return top

    def peek(self):
        if not self.data:
            raise EmptyQueue('peek at empty priority queue')
        return self.data[0]

    def is_heap(self):
        '''
        Checks that every parent weighs no more than either of its children.
        '''

        return all(self.data[parent(i)].weight <= self.data[i].weight
            for i in range(1, len(self.data)))

    def _heapify(self, i):
        size = len(self.data)
        while True:
            least = i
            left = left_child(i)
            right = right_child(i)
            if left < size and \
                self.data[left].weight < self.data[least].weight:
                least = left
            if right < size and \
                self.data[right].weight < self.data[least].weight:
                least = right
            if least == i:
                return
            self._swap(i, least)
            i = least

    def _swap(self, i, j):
        self.data[i], self.data[j] = self.data[j], self.data[i]
