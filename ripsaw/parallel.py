"""Segmentation of many contigs, sequentially or in a pool of processes."""
import os
from concurrent.futures import ProcessPoolExecutor, as_completed

from .ContigSegmenter import ContigSegmenter


def default_workers():
    """Return the default number of worker processes (all CPUs but one)."""
    return max(1, (os.cpu_count() or 1) - 1)


def _segment_contig(parameters, contig):
    """Segment one ``(name, start, sequence)`` contig.

    Runs in a worker process: the segmenter is rebuilt from its parameters
    so that no logger is shared between processes.
    """
    name, start, sequence = contig
    segmenter = ContigSegmenter(progress_logger=None, **parameters)
    return segmenter.segment(sequence, name=name, offset=start)


def segment_contigs(contigs, segmenter=None, workers=1, ordered=False):
    """Segment all contigs and iterate over the resulting regions.

    Parameters
    ----------

    contigs
      Iterable of ``(name, start, sequence)`` tuples, as produced by
      ``split_contigs`` or ``records_contigs``.

    segmenter
      The ContigSegmenter to use. Defaults to a segmenter with default
      parameters.

    workers
      Number of worker processes. With 1, contigs are segmented one after
      the other in the current process.

    ordered
      When using several workers, the regions of a contig are yielded as
      soon as the contig is done, so contigs can come in any order. With
      ``ordered=True`` contigs are yielded in input order.

    Within one contig, regions always come in order of position.
    """
    if segmenter is None:
        segmenter = ContigSegmenter()
    if workers < 1:
        raise ValueError("workers must be at least 1 (got %s)" % workers)
    if workers == 1:
        return _iter_sequential_regions(contigs, segmenter)
    return _iter_pool_regions(contigs, segmenter, workers, ordered)


def _iter_sequential_regions(contigs, segmenter):
    logger = segmenter.progress_logger
    for name, start, sequence in logger.iter_bar(contig=list(contigs)):
        for region in segmenter.segment(sequence, name=name, offset=start):
            yield region


def _iter_pool_regions(contigs, segmenter, workers, ordered):
    logger = segmenter.progress_logger
    parameters = segmenter.parameters()
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_segment_contig, parameters, contig)
            for contig in contigs
        ]
        if not futures:
            return
        logger(contigs=len(futures), workers=workers)
        # as_completed has no length, so the bar is driven by hand.
        logger(contig__total=len(futures))
        done = futures if ordered else as_completed(futures)
        for index, future in enumerate(done):
            logger(contig__index=index)
            regions = future.result()
            if len(regions):
                logger(sequence=regions[0]["name"], regions=len(regions))
            for region in regions:
                yield region
        logger(contig__index=len(futures))
