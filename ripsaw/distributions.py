"""Strand-symmetric dinucleotide distributions and their statistics."""
import numpy as np

from .dinucleotides import N_SYMBOLS, A, C, G, T, N

# Each bin merges a dinucleotide with its reverse complement. Palindromic
# dinucleotides (AT, CG, GC, TA, and NN) are counted twice so that every
# bin holds the counts of both strands.
DINUCLEOTIDE_BINS = [
    ("AA,TT", [(A, A), (T, T)]),
    ("AC,GT", [(A, C), (G, T)]),
    ("AG,CT", [(A, G), (C, T)]),
    ("AT", [(A, T), (A, T)]),
    ("CA,TG", [(C, A), (T, G)]),
    ("CC,GG", [(C, C), (G, G)]),
    ("CG", [(C, G), (C, G)]),
    ("GC", [(G, C), (G, C)]),
    ("TA", [(T, A), (T, A)]),
    ("AN,NT", [(A, N), (N, T)]),
    ("CN,NG", [(C, N), (N, G)]),
    ("GN,NC", [(G, N), (N, C)]),
    ("TN,NA", [(T, N), (N, A)]),
    ("NN", [(N, N), (N, N)]),
]
BIN_NAMES = [name for name, _ in DINUCLEOTIDE_BINS]
N_BINS = len(DINUCLEOTIDE_BINS)

# (25, 14) matrix such that flat_counts.dot(BINS_MATRIX) gives the bins.
BINS_MATRIX = np.zeros((N_SYMBOLS ** 2, N_BINS), dtype="int64")
for _bin, (_, _pairs) in enumerate(DINUCLEOTIDE_BINS):
    for _previous, _current in _pairs:
        BINS_MATRIX[N_SYMBOLS * _previous + _current, _bin] += 1


def dinucleotide_bins(counts):
    """Return the 14 strand-merged bin counts of a count matrix.

    ``counts`` can also be a stack of matrices of shape (..., 5, 5), in
    which case the result has shape (..., 14).
    """
    counts = np.asarray(counts)
    flat = counts.reshape(counts.shape[:-2] + (N_SYMBOLS ** 2,))
    return flat.dot(BINS_MATRIX)


def dinucleotide_distribution(counts):
    """Return the 14-bin probability distribution of a count matrix.

    Matrices without any pair give an all-zero vector. Like
    ``dinucleotide_bins``, this works on stacks of matrices.
    """
    bins = dinucleotide_bins(counts)
    total = bins.sum(axis=-1, keepdims=True)
    distribution = np.zeros(bins.shape, dtype="float64")
    np.divide(bins, total, out=distribution, where=(total > 0))
    return distribution


def shannon_entropy(distribution):
    """Return the Shannon entropy (in bits) of the distribution.

    Empty bins contribute nothing. Works along the last axis, so a stack
    of distributions gives an array of entropies.
    """
    distribution = np.asarray(distribution, dtype="float64")
    logs = np.zeros(distribution.shape)
    np.log2(distribution, out=logs, where=(distribution > 0))
    return -(distribution * logs).sum(axis=-1)


def euclidean_distance(p, q):
    """Return the euclidean distance between two distributions."""
    difference = np.asarray(p, dtype="float64") - np.asarray(q)
    return float(np.sqrt((difference * difference).sum()))


def is_degenerate(distribution):
    """Return True for the all-zero distribution of an empty matrix."""
    return not np.asarray(distribution).any()
