"""Nearest-reference classification of dinucleotide distributions."""
from collections import OrderedDict

import numpy as np

from .distributions import euclidean_distance, is_degenerate

# Dinucleotide distributions (same bins as ``DINUCLEOTIDE_BINS``) of three
# genome-composition archetypes.
REFERENCE_DISTRIBUTIONS = OrderedDict([
    ("A", np.array([0.1704377, 0.06633411, 0.1541075, 0.1709693,
                    0.02717819, 0.01615981, 0.02071386, 0.07266667,
                    0.30141589, 0, 0, 0, 0, 0])),
    ("B", np.array([0.1041197, 0.10521961, 0.1171455, 0.1026425,
                    0.13173368, 0.11020999, 0.12192831, 0.13965545,
                    0.06733974, 0, 0, 0, 0, 0])),
    ("C", np.array([0.22606667, 0.08146667, 0.09600000, 0.18870000,
                    0.07200000, 0.04806667, 0.03183333, 0.03980000,
                    0.21600000, 0, 0, 0, 0, 0])),
])
for _reference in REFERENCE_DISTRIBUTIONS.values():
    _reference.setflags(write=False)


def reference_distances(distribution):
    """Return a dict ``{"A": d_A, "B": d_B, "C": d_C}`` of the euclidean
    distances between the distribution and each reference.

    The distribution of an empty region is infinitely far from all
    references.
    """
    if is_degenerate(distribution):
        return OrderedDict((label, np.inf) for label in REFERENCE_DISTRIBUTIONS)
    return OrderedDict(
        (label, euclidean_distance(distribution, reference))
        for label, reference in REFERENCE_DISTRIBUTIONS.items()
    )


def classify_distances(distances):
    """Return the label ("A", "B" or "C") of the smallest distance.

    B is compared to A first, then C to the winner. Ties go to the
    reference compared first (A over B over C), so equal distances
    (e.g. all infinite) give "A".
    """
    d_a, d_b, d_c = distances["A"], distances["B"], distances["C"]
    if d_b < d_a:
        return "C" if d_c < d_b else "B"
    return "C" if d_c < d_a else "A"


def classify_distribution(distribution):
    """Return the label of the reference nearest to the distribution."""
    return classify_distances(reference_distances(distribution))
