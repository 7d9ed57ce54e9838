#!/usr/bin/env python3

'''
decompress_text.py

This is the executable used to decode a bitstring written by compress_text.py,
using the code table written alongside it.
'''

import argparse
import sys

from datetime import timedelta
from timeit import default_timer as timer

from huffman_coding.util.decompressor import decompress_file
from huffman_coding.util.errors import HuffmanError


DEFAULT_OUTFILE = 'decompressed.txt'


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Decode a Huffman bitstring with its code table.')
    parser.add_argument('bitfile', type=str, help='encoded bitstring')
    parser.add_argument('tablefile', type=str,
        help='code table the bitstring was encoded with')
    parser.add_argument('-o', '--output', type=str, default=DEFAULT_OUTFILE,
        help='file to write the decoded text to', dest='outfile')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    start = timer()
    try:
        text = decompress_file(args.bitfile, args.tablefile, args.outfile)
    except HuffmanError as e:
        sys.exit(f'{args.bitfile}: {e}')
    end = timer()

    print(f'\tDecoded {len(text)} symbols to {args.outfile}.')
    print(f'decompress in {timedelta(seconds=end-start)}.\n')


if __name__ == '__main__':
    main()
