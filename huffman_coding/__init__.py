'''
huffman_coding

Huffman coding of symbol sequences: the coder itself lives in util/, the
command-line drivers in compress_text.py and decompress_text.py.
'''
