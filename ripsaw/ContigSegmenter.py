import numpy as np
from proglog import default_bar_logger

from .biotools import encode_sequence
from .dinucleotides import (N_SYMBOLS, pair_codes, count_dinucleotides,
                            gc_fraction, rip_index)
from .distributions import dinucleotide_distribution, shannon_entropy
from .classifier import reference_distances, classify_distances

DEFAULT_MIN_LENGTH = 1000
DEFAULT_BLOCK_SIZE = 4096
MATRIX_SHAPE = (N_SYMBOLS, N_SYMBOLS)


def iter_split_counts(encoded):
    """Iterate over the left/right count matrices of every candidate split.

    Yields ``(i, left, right)`` for i in 1..len(encoded)-2, where the pair
    crossing position ``i`` has just been moved from ``right`` to ``left``.
    The same two arrays are updated in place and yielded at every step.
    """
    left = np.zeros(MATRIX_SHAPE, dtype="int64")
    right = count_dinucleotides(encoded).copy()
    for i in range(1, len(encoded) - 1):
        pair = (encoded[i - 1], encoded[i])
        left[pair] += 1
        right[pair] -= 1
        yield i, left, right


class ContigSegmenter:
    """Segmenter of DNA sequences into regions of homogeneous dinucleotide
    composition.

    The contig is split at the position which maximizes the entropy gain
    between the dinucleotide distribution of the whole contig and the
    (length-weighted) distributions of its two halves. Both halves are
    segmented in turn, until one of them would be too short.

    Parameters
    ----------

    min_length
      A region is only split if both its halves are strictly longer than
      ``min_length`` nucleotides.

    block_size
      Number of candidate split positions evaluated together during the
      scan of a region. Only affects memory use and speed.

    progress_logger
      Either 'bar' for a progress bar, None for no logging, or any
      Proglog logger.
    """

    def __init__(self, min_length=DEFAULT_MIN_LENGTH,
                 block_size=DEFAULT_BLOCK_SIZE, progress_logger='bar'):
        """Initialize the object (see class description)."""
        if min_length < 0:
            raise ValueError("min_length must be positive (got %s)"
                             % min_length)
        if block_size < 1:
            raise ValueError("block_size must be at least 1 (got %s)"
                             % block_size)
        self.min_length = min_length
        self.block_size = block_size
        self.progress_logger = default_bar_logger(progress_logger,
                                                  min_time_interval=0.2)

    def parameters(self):
        """Return the keyword arguments re-creating this segmenter (without
        its logger)."""
        return dict(min_length=self.min_length, block_size=self.block_size)

    def _entropies(self, counts):
        """Return the entropies of a (n, 25) stack of flat count matrices."""
        counts = counts.reshape((-1,) + MATRIX_SHAPE)
        return shannon_entropy(dinucleotide_distribution(counts))

    def find_split(self, encoded):
        """Return the best split of an encoded region.

        The candidate positions are 1..len(encoded)-2. At each position the
        pair crossing it moves from the right counts to the left counts,
        and the gain ``E - (fl * H(left) + fr * H(right))`` is computed,
        with ``fl = (i + 1) / len(encoded)`` and ``fr = 1 - fl``.
        The left counts are kept as a running prefix sum carried from one
        block of positions to the next, the right counts being the total
        counts minus the left counts.

        Returns
        -------

        (split_index, gain, left_counts)
          ``split_index`` is the first position with the highest gain, or 0
          if no position has a positive gain. ``left_counts`` is the 5x5
          matrix of the pairs 1..len(encoded)-2 (the left counts at the end
          of the scan).
        """
        length = len(encoded)
        flat_size = N_SYMBOLS ** 2
        left_counts = np.zeros(flat_size, dtype="int64")
        best_index, best_gain = 0, 0.0
        if length < 3:
            return best_index, best_gain, left_counts.reshape(MATRIX_SHAPE)

        codes = pair_codes(encoded)
        total_counts = np.bincount(codes, minlength=flat_size)
        total_entropy = self._entropies(total_counts)[0]
        steps = codes[:length - 2]
        for block_start in range(0, len(steps), self.block_size):
            block = steps[block_start: block_start + self.block_size]
            increments = np.zeros((len(block), flat_size), dtype="int64")
            increments[np.arange(len(block)), block] = 1
            left = left_counts + np.cumsum(increments, axis=0)
            right = total_counts - left
            indices = np.arange(block_start + 1,
                                block_start + len(block) + 1)
            left_fractions = (indices + 1.0) / length
            right_fractions = 1.0 - left_fractions
            gains = total_entropy - (
                left_fractions * self._entropies(left) +
                right_fractions * self._entropies(right)
            )
            best_in_block = int(np.argmax(gains))
            if gains[best_in_block] > best_gain:
                best_gain = float(gains[best_in_block])
                best_index = int(indices[best_in_block])
            left_counts = left[-1]
        return best_index, best_gain, left_counts.reshape(MATRIX_SHAPE)

    def _region_record(self, name, start, end, depth, counts):
        distribution = dinucleotide_distribution(counts)
        distances = reference_distances(distribution)
        return dict(
            name=name,
            start=start,
            end=end,
            depth=depth,
            label=classify_distances(distances),
            distances=distances,
            gc=gc_fraction(counts),
            rip_index=rip_index(counts),
            distribution=distribution,
            counts=counts
        )

    def segment(self, sequence, name="sequence", offset=0):
        """Segment the sequence into regions of homogeneous composition.

        Parameters
        ----------

        sequence
          An ATGC string (other symbols are allowed and treated as unknown)
          or a Biopython record.

        name
          Name of the sequence, reported in every region.

        offset
          Position of the sequence in its parent sequence. All region
          coordinates are shifted by this offset.

        Returns
        -------

        regions
          A list of dictionaries, one per final region, ordered by
          position, with properties ``name``, ``start``, ``end`` (end
          excluded), ``depth`` (number of splits leading to the region),
          ``label`` (nearest reference, "A", "B" or "C"), ``distances``
          (distances to each reference), ``gc``, ``rip_index``,
          ``distribution`` (14 bins) and ``counts`` (5x5 matrix).
        """
        encoded = encode_sequence(sequence)
        regions = []
        # Pending regions as (start, end, depth), left region on top.
        stack = [(0, len(encoded), 0)]
        while stack:
            start, end, depth = stack.pop()
            split_index, _, left_counts = self.find_split(
                encoded[start:end])
            middle = start + split_index
            if ((middle - start > self.min_length) and
                    (end - middle > self.min_length)):
                stack.append((middle, end, depth + 1))
                stack.append((start, middle, depth + 1))
            else:
                regions.append(self._region_record(
                    name, offset + start, offset + end, depth, left_counts))
        self.progress_logger(sequence=name, regions=len(regions))
        return regions
