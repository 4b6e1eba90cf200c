""" ripsaw/__init__.py """

# __all__ = []

from .ContigSegmenter import ContigSegmenter, iter_split_counts
from .parallel import segment_contigs
from .biotools import (encode_sequence, split_contigs, read_fasta,
                       records_contigs)
from .dinucleotides import count_dinucleotides, gc_fraction, rip_index
from .distributions import (dinucleotide_distribution, shannon_entropy,
                            euclidean_distance, BIN_NAMES)
from .classifier import (REFERENCE_DISTRIBUTIONS, reference_distances,
                         classify_distribution)
from .reports import format_region, write_regions
from .version import __version__
