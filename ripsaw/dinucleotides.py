"""Dinucleotide counts of encoded sequences.

Count matrices are 5x5 integer arrays where ``counts[p, c]`` is the number
of times symbol class ``p`` is immediately followed by class ``c``
(classes A=0, C=1, G=2, T=3, unknown=4, see ``biotools.encode_sequence``).
"""
import numpy as np

N_SYMBOLS = 5
A, C, G, T, N = range(N_SYMBOLS)


def pair_codes(encoded):
    """Return the flat cell index ``5 * previous + current`` of each
    adjacent pair in the encoded sequence (one less than its length)."""
    encoded = np.asarray(encoded, dtype="int64")
    return N_SYMBOLS * encoded[:-1] + encoded[1:]


def count_dinucleotides(encoded):
    """Return the 5x5 matrix of adjacent-pair counts of an encoded sequence.

    Sequences shorter than 2 give an all-zero matrix.
    """
    if len(encoded) < 2:
        return np.zeros((N_SYMBOLS, N_SYMBOLS), dtype="int64")
    counts = np.bincount(pair_codes(encoded), minlength=N_SYMBOLS ** 2)
    return counts.reshape((N_SYMBOLS, N_SYMBOLS))


def gc_fraction(counts):
    """Return GC / (GC + AT), counted on the second base of every pair.

    Returns 0 for a matrix without any A/C/G/T second base.
    """
    second_bases = np.asarray(counts).sum(axis=0)
    gc = second_bases[C] + second_bases[G]
    at = second_bases[A] + second_bases[T]
    if gc + at == 0:
        return 0.0
    return float(gc) / (gc + at)


def rip_index(counts):
    """Return the ratio (ApC + GpT) / (CpA + TpG).

    This is a crude indicator of Repeat-Induced Point mutations (RIP turns
    CpA into TpA, i.e. depletes CpA/TpG). Returns 0 when there is no CpA
    nor TpG in the counts.
    """
    counts = np.asarray(counts)
    denominator = counts[C, A] + counts[T, G]
    if denominator == 0:
        return 0.0
    return float(counts[A, C] + counts[G, T]) / denominator
