from .codes import generate_codes, is_prefix_free
from .decoder import huffman_decode, table_decode
from .encoder import huffman_encode
from .errors import HuffmanError, EmptyInput, EmptyQueue, UnknownSymbol, \
    TruncatedCode, InvalidBit, MalformedTable
from .frequencies import get_freqs
from .pipeline import Compression, compress, decompress
from .priority_queue import PriorityQueue
from .tree import Leaf, Internal, build_tree, make_queue, huffman_tree
