'''
util/compressor.py

File side of compression: reads the text to compress and writes the encoded
bitstring and the code table next to each other.
'''

from .pipeline import compress


# Takes in a relative filepath to a text file.
#
# Returns the first line of the file without its newline; the rest of the file
# is ignored.
def read_input(infile):
    with open(infile, encoding='utf-8') as f:
        return f.readline().rstrip('\n')


# Takes in a relative filepath and a bitstring of 0's and 1's, as returned by
# huffman_encode().
#
# The bitstring is written as text, without packing and without a trailing
# newline.
def write_bitstring(outfile, bits):
    with open(outfile, 'w', encoding='utf-8') as f:
        f.write(bits)


# Takes in a relative filepath and a code table, as returned by
# generate_codes(), whose keys are single characters.
#
# Writes one "<symbol> <code>" line per symbol in ascending symbol order:
# a 0
# b 10
# r 110
def write_code_table(tablefile, codes):
    with open(tablefile, 'w', encoding='utf-8', newline='') as f:
        for symbol in sorted(codes):
            f.write(f"{symbol} {codes[symbol]}\n")


# Takes in a relative filepath to a text file, and the relative filepaths to
# write the bitstring and the code table to.
#
# Calls all the necessary helper functions to compress the file. Returns the
# text that was read and its Compression, as returned by compress().
def compress_file(infile, outfile, tablefile):
    data = read_input(infile)
    compression = compress(data)
    write_bitstring(outfile, compression.bits)
    write_code_table(tablefile, compression.codes)
    return data, compression
