"""Command line interface: ``ripsaw [options] genome.fasta``."""
import argparse
import sys

from .version import __version__
from .biotools import read_fasta, records_contigs, MAX_GAP_RUN
from .ContigSegmenter import ContigSegmenter, DEFAULT_MIN_LENGTH
from .parallel import segment_contigs, default_workers
from .reports import write_regions, LABEL_MODES, VALUE_MODES


def get_parser():
    parser = argparse.ArgumentParser(
        prog="ripsaw",
        description="Segment the genome according to dinucleotide "
                    "frequencies.",
    )
    parser.add_argument("fasta", help="FASTA file of the sequences to "
                                      "segment.")
    parser.add_argument("-o", "--output", default=None,
                        help="Output file (default: standard output).")
    parser.add_argument("--min-length", type=int, default=DEFAULT_MIN_LENGTH,
                        help="Regions are only split when both halves are "
                             "longer than this (default: %(default)s).")
    parser.add_argument("--max-gap-run", type=int, default=MAX_GAP_RUN,
                        help="Longer runs of unknown bases split the "
                             "sequences into contigs (default: %(default)s).")
    parser.add_argument("--label", choices=LABEL_MODES, default="type",
                        help="Report the nearest reference type or the "
                             "depth of each region (default: %(default)s).")
    parser.add_argument("--value", choices=VALUE_MODES, default="gc",
                        help="Report the GC content or the RIP index x50 "
                             "of each region (default: %(default)s).")
    parser.add_argument("--workers", type=int, default=default_workers(),
                        help="Number of worker processes "
                             "(default: %(default)s).")
    parser.add_argument("--ordered", action="store_true",
                        help="Report the contigs in input order.")
    parser.add_argument("--header", action="store_true",
                        help="Write a header line with the column names.")
    parser.add_argument("--progress", action="store_true",
                        help="Display progress bars on standard error.")
    parser.add_argument("--version", action="version",
                        version="%(prog)s " + __version__)
    return parser


def main(argv=None):
    """Run ripsaw with the given command line arguments, return the exit
    status."""
    parser = get_parser()
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be at least 1")
    if args.min_length < 0:
        parser.error("--min-length must be positive")

    try:
        records = read_fasta(args.fasta)
    except (OSError, ValueError) as error:
        parser.exit(1, "ripsaw: error: cannot read %s: %s\n"
                    % (args.fasta, error))

    segmenter = ContigSegmenter(
        min_length=args.min_length,
        progress_logger='bar' if args.progress else None
    )
    contigs = records_contigs(records, max_gap_run=args.max_gap_run)
    regions = segment_contigs(contigs, segmenter, workers=args.workers,
                              ordered=args.ordered)
    target = sys.stdout if args.output is None else args.output
    write_regions(regions, target, label_mode=args.label,
                  value_mode=args.value, header=args.header)
    return 0


if __name__ == "__main__":
    sys.exit(main())
