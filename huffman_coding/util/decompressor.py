'''
util/decompressor.py

File side of decompression: reads a bitstring and a code table written by
util/compressor.py and writes the decoded text.
'''

from .codes import is_prefix_free
from .decoder import table_decode
from .errors import MalformedTable


# Takes in a relative filepath to a bitstring file.
#
# Returns the bitstring with surrounding whitespace removed.
def read_bitstring(bitfile):
    with open(bitfile, encoding='utf-8') as f:
        return f.read().strip()


# Takes in a relative filepath to a code table file, as written by
# write_code_table().
#
# Returns a dict whose keys are symbols and whose values are their codes:
# {'a': '0', 'b': '10', 'r': '110'}
#
# The symbol is the first character of a line and may itself be a space, so
# lines are split by position rather than on whitespace. A symbol listed twice
# or a set of codes that is not prefix-free raises MalformedTable.
def read_code_table(tablefile):
    with open(tablefile, encoding='utf-8', newline='') as f:
        text = f.read()

    codes = dict()
    for number, line in enumerate(text.split('\n'), start=1):
        if line == '':
            continue
        symbol, separator, code = line[0], line[1:2], line[2:]
        if separator != ' ' or code == '' or code.strip('01') != '':
            raise MalformedTable(tablefile, number)
        if symbol in codes:
            raise MalformedTable(tablefile, number,
                f'symbol {symbol!r} is listed twice')
        codes[symbol] = code

    if not is_prefix_free(codes):
        raise MalformedTable(tablefile,
            reason='codes are not prefix-free')
    return codes


# Takes in relative filepaths to a bitstring and a code table and a relative
# filepath to write the decoded text to.
#
# Calls all the necessary helper functions to decompress the file and returns
# the decoded text.
def decompress_file(bitfile, tablefile, outfile):
    bits = read_bitstring(bitfile)
    codes = read_code_table(tablefile)
    text = ''.join(table_decode(codes, bits))
    with open(outfile, 'w', encoding='utf-8') as f:
        f.write(text)
    return text
