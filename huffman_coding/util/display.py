'''
util/display.py

Text rendering of the intermediate structures for debugging, used by the
--verbose flag of compress_text.py.
'''

from .tree import is_leaf


def format_node(node):
    if node is None:
        return 'NULL'
    if is_leaf(node):
        return f'{node.symbol!r} : {node.weight}'
    return f'NODE : {node.weight}'


def format_priority_queue(queue):
    '''
    Lists the queued nodes in heap order under a header with the queue size.
    '''

    lines = ['PRIORITY QUEUE', f'SIZE = {len(queue)}']
    lines.extend(format_node(node) for node in queue)
    return '\n'.join(lines)


def format_code_table(codes):
    '''
    Lists the code of every symbol, in ascending symbol order.
    '''

    lines = ['HUFFMAN TREE DICTIONARY']
    lines.extend(f'{symbol!r} : {codes[symbol]}' for symbol in sorted(codes))
    return '\n'.join(lines)


def format_tree(root, indent='  '):
    '''
    Draws the tree one node per line, each child indented under its parent
    and prefixed with the bit that leads to it:

        NODE : 7
          0 'c' : 3
          1 NODE : 4
            0 'a' : 2
            1 'b' : 2
    '''

    lines = []
    stack = [(root, 0, '')]
    while stack:
        node, level, bit = stack.pop()
        lines.append(f'{indent * level}{bit}{format_node(node)}')
        if not is_leaf(node):
            stack.append((node.high, level + 1, '1 '))
            stack.append((node.low, level + 1, '0 '))
    return '\n'.join(lines)


def print_priority_queue(queue):
    print(f'\n{format_priority_queue(queue)}')


def print_code_table(codes):
    print(f'\n{format_code_table(codes)}')


def print_tree(root):
    print(f'\n{format_tree(root)}')
