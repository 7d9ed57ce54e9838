'''
util/plotter.py

Plots the symbol frequencies of an input, most frequent first.
'''

from matplotlib import pyplot as plt
import numpy as np


def plot_frequencies(freqs, outfile):
    '''
    Saves a bar chart of symbol counts to outfile.

    Args:
        freqs: dict
            dictionary of symbols to frequencies, as generated by get_freqs
        outfile: string
            path of the image to write; the format follows its extension
    '''

    items = [(symbol, count) for symbol, count in freqs.items()]
    items.sort(key=lambda x: -x[1])

    labels = [repr(item[0]) for item in items]
    counts = np.array([item[1] for item in items])

    fig, ax = plt.subplots(figsize=(max(6, len(items) * 0.3), 4))
    ax.bar(np.arange(len(items)), counts)
    ax.set_xticks(np.arange(len(items)))
    ax.set_xticklabels(labels, rotation=90)
    ax.set_xlabel('symbol')
    ax.set_ylabel('count')
    fig.tight_layout()
    fig.savefig(outfile)
    plt.close(fig)
