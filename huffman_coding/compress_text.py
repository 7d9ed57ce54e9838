#!/usr/bin/env python3

'''
compress_text.py

This is the executable used to Huffman code a text file.
The first line of the input file is compressed; the encoded bitstring and the
code table are written to two text files.
'''

import argparse
import sys

from datetime import timedelta
from humanize import naturalsize
from timeit import default_timer as timer

from huffman_coding.util.compressor import compress_file
from huffman_coding.util.codes import is_prefix_free
from huffman_coding.util.display import print_code_table, \
    print_priority_queue, print_tree
from huffman_coding.util.errors import HuffmanError
from huffman_coding.util.pipeline import decompress
from huffman_coding.util.plotter import plot_frequencies
from huffman_coding.util.stats import summarize
from huffman_coding.util.tree import make_queue


DEFAULT_OUTFILE = 'output.txt'
DEFAULT_TABLEFILE = 'huffman_tree_dictionary.txt'


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Huffman code the first line of a text file.')
    parser.add_argument('infile', type=str, help='text file to compress')
    parser.add_argument('-o', '--output', type=str, default=DEFAULT_OUTFILE,
        help='file to write the encoded bitstring to', dest='outfile')
    parser.add_argument('-t', '--table', type=str, default=DEFAULT_TABLEFILE,
        help='file to write the code table to', dest='tablefile')
    parser.add_argument('-v', '--verbose', action='store_true',
        help='print the priority queue, code table and tree')
    parser.add_argument('--verify', action='store_true',
        help='decode the bitstring again and check it matches the input')
    parser.add_argument('--plot', type=str, metavar='FILE',
        help='save a chart of the symbol frequencies to FILE')
    return parser.parse_args(argv)


def report(data, compression):
    summary = summarize(data, compression)
    print(f"\tInput: {summary['symbols']} symbols, "
        f"{summary['distinct']} distinct, {naturalsize(len(data.encode()))}.")
    print(f"\tEncoded: {summary['encoded_bits']} bits, "
        f"{naturalsize(summary['packed_bytes'])} packed.")
    print(f"\tEntropy: {summary['entropy']:.4f} bits/symbol, "
        f"average code length: {summary['average_code_length']:.4f}.")
    print(f"\tRatio: {summary['ratio']:.4f}.\n")


def verify(data, compression):
    decoded = decompress(compression.tree, compression.bits, like=data)
    if decoded != data or not is_prefix_free(compression.codes):
        sys.exit('\n\tCOMPRESSION INCORRECT.\n')
    print('\n\tCOMPRESSION CORRECT.\n')


def main(argv=None):
    args = parse_args(argv)

    start = timer()
    try:
        data, compression = compress_file(args.infile, args.outfile,
            args.tablefile)
    except HuffmanError as e:
        sys.exit(f'{args.infile}: {e}')
    end = timer()
    print(f'compress in {timedelta(seconds=end-start)}.\n')

    if args.verbose:
        print_priority_queue(make_queue(compression.freqs))
        print_code_table(compression.codes)
        print_tree(compression.tree)
        print()

    report(data, compression)

    if args.plot:
        plot_frequencies(compression.freqs, args.plot)
        print(f'\tFrequencies plotted to {args.plot}.\n')

    if args.verify:
        verify(data, compression)


if __name__ == '__main__':
    main()
