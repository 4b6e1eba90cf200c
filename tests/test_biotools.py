import os
import pytest
from Bio.Seq import Seq
from ripsaw import encode_sequence, split_contigs, read_fasta, records_contigs


@pytest.fixture
def fasta_path(tmpdir):
    path = os.path.join(str(tmpdir), "genome.fa")
    with open(path, "w") as f:
        f.write(">seq1 first sequence\n")
        f.write("ACGT" + 8 * "N" + "\n")
        f.write("GGCC\n")
        f.write(">seq2\n")
        f.write("ttaannnnnnnnGCGC\n")
    return path


def test_encode_biopython_sequence():
    assert list(encode_sequence(Seq("acgtN"))) == [0, 1, 2, 3, 4]
    assert list(encode_sequence(b"GT")) == [2, 3]


def test_split_contigs():
    sequence = "ACGT" + 6 * "N" + "GGCC" + "NNN" + "TTAA" + "NN"
    assert list(split_contigs("s", sequence)) == [
        ("s", 0, "ACGT"),
        ("s", 10, "GGCCNNNTTAA"),
    ]


def test_split_contigs_short_gaps_are_kept():
    sequence = "AC" + 5 * "N" + "GT"
    assert list(split_contigs("s", sequence)) == [("s", 0, sequence)]


def test_split_contigs_leading_and_trailing_gaps():
    assert list(split_contigs("s", 8 * "N" + "ACGT")) == [("s", 8, "ACGT")]
    assert list(split_contigs("s", "ACGT" + 10 * "N")) == [("s", 0, "ACGT")]
    assert list(split_contigs("s", "ACGTN")) == [("s", 0, "ACGT")]
    assert list(split_contigs("s", 10 * "N")) == []
    assert list(split_contigs("s", "")) == []


def test_split_contigs_max_gap_run():
    sequence = "AC" + 3 * "N" + "GT"
    assert list(split_contigs("s", sequence, max_gap_run=2)) == [
        ("s", 0, "AC"),
        ("s", 5, "GT"),
    ]


def test_read_fasta(fasta_path):
    records = read_fasta(fasta_path)
    assert [r.id for r in records] == ["seq1", "seq2"]
    assert list(records_contigs(records)) == [
        ("seq1", 0, "ACGT"),
        ("seq1", 12, "GGCC"),
        ("seq2", 0, "ttaa"),
        ("seq2", 12, "GCGC"),
    ]


def test_read_missing_fasta(tmpdir):
    with pytest.raises(OSError):
        read_fasta(os.path.join(str(tmpdir), "missing.fa"))
