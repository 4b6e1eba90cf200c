import numpy as np
from Bio import SeqIO

BASES = "ACGT"
UNKNOWN = 4
MAX_GAP_RUN = 5

# Byte -> symbol class. Everything that is not A/C/G/T (any case) is UNKNOWN.
_ENCODING_TABLE = np.full(256, UNKNOWN, dtype="uint8")
for _index, _base in enumerate(BASES):
    _ENCODING_TABLE[ord(_base)] = _index
    _ENCODING_TABLE[ord(_base.lower())] = _index


def sequence_to_string(sequence):
    """Return the sequence as a plain string.

    ``sequence`` can be a string, bytes, a Biopython Seq or a SeqRecord.
    """
    if hasattr(sequence, "seq"):
        sequence = sequence.seq
    if isinstance(sequence, (bytes, bytearray)):
        return sequence.decode("ascii", errors="replace")
    return str(sequence)


def encode_sequence(sequence):
    """Return an array of symbol classes (A=0, C=1, G=2, T=3, other=4).

    The encoding never fails: ambiguity codes, gaps and any other symbol
    are mapped to class 4.
    """
    sequence = sequence_to_string(sequence)
    data = sequence.encode("ascii", errors="replace")
    return _ENCODING_TABLE[np.frombuffer(data, dtype="uint8")]


def split_contigs(name, sequence, max_gap_run=MAX_GAP_RUN):
    """Split a sequence around runs of unknown symbols.

    Yields ``(name, start, subsequence)`` tuples where ``start`` is the
    position of the subsequence in the original sequence.

    A run of more than ``max_gap_run`` unknown symbols followed by a
    known base closes the current contig and opens a new one at that
    base. Shorter runs are kept inside the contigs. The unknown symbols
    at the end of the sequence are always trimmed.

    Parameters
    ----------

    name
      Name given to every contig.

    sequence
      A string, Biopython Seq or record.

    max_gap_run
      Longest run of unknown symbols that does not break a contig.
    """
    sequence = sequence_to_string(sequence)
    unknown = (encode_sequence(sequence) == UNKNOWN).astype("int8")
    edges = np.diff(np.concatenate([[0], unknown, [0]])).nonzero()[0]
    runs = [(int(s), int(e)) for s, e in zip(edges[::2], edges[1::2])]
    end = len(sequence)
    if runs and runs[-1][1] == end:
        end = runs.pop()[0]
    base_start = 0
    for run_start, run_end in runs:
        if run_end - run_start <= max_gap_run:
            continue
        if run_start > base_start:
            yield (name, base_start, sequence[base_start:run_start])
        base_start = run_end
    if end > base_start:
        yield (name, base_start, sequence[base_start:end])


def read_fasta(path):
    """Return the list of Biopython records in a FASTA file.

    Raises ``OSError`` if the file cannot be opened.
    """
    with open(path, "r") as f:
        return list(SeqIO.parse(f, "fasta"))


def records_contigs(records, max_gap_run=MAX_GAP_RUN):
    """Iterate over ``(name, start, subsequence)`` for all the contigs of
    the given Biopython records (see ``split_contigs``)."""
    for record in records:
        for contig in split_contigs(record.id, record.seq,
                                    max_gap_run=max_gap_run):
            yield contig
