import os
import pytest
from ripsaw.cli import main


@pytest.fixture
def fasta_path(tmpdir):
    path = os.path.join(str(tmpdir), "genome.fa")
    with open(path, "w") as f:
        f.write(">seq1\n" + 10 * "AC" + 10 * "N" + 10 * "AT" + "\n")
    return path


def test_no_arguments_shows_usage(capsys):
    with pytest.raises(SystemExit) as error:
        main([])
    assert error.value.code != 0
    assert "usage: ripsaw" in capsys.readouterr().err


def test_missing_file_is_fatal(tmpdir, capsys):
    path = os.path.join(str(tmpdir), "missing.fa")
    with pytest.raises(SystemExit) as error:
        main([path])
    assert error.value.code == 1
    assert "cannot read" in capsys.readouterr().err


def test_segment_file(fasta_path, capsys):
    assert main([fasta_path, "--workers", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    first, second = [line.split("\t") for line in lines]
    assert first[:3] == ["seq1", "0", "20"]
    assert first[4] == "0.50"
    assert second[:3] == ["seq1", "30", "50"]
    assert second[4] == "0.00"
    assert len(first) == len(second) == 19


def test_output_file_and_modes(fasta_path, tmpdir):
    output = os.path.join(str(tmpdir), "regions.tsv")
    main([fasta_path, "--workers", "2", "--ordered", "--header",
          "--label", "depth", "--value", "rip", "-o", output])
    with open(output) as f:
        lines = f.read().splitlines()
    assert len(lines) == 3
    assert lines[0].split("\t")[3:5] == ["depth", "rip_index_x50"]
    assert lines[1].split("\t")[3:5] == ["0", "50.00"]
    assert lines[2].split("\t")[1] == "30"


def test_invalid_workers(fasta_path):
    with pytest.raises(SystemExit):
        main([fasta_path, "--workers", "0"])


def test_progress_with_workers(tmpdir, capsys):
    path = os.path.join(str(tmpdir), "two_records.fa")
    with open(path, "w") as f:
        f.write(">a\n" + 600 * "AC" + "\n>b\n" + 600 * "AT" + "\n")
    for extra in [[], ["--ordered"]]:
        assert main([path, "--workers", "2", "--progress"] + extra) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert all(len(line.split("\t")) == 19 for line in lines)
        assert sorted(line.split("\t")[0] for line in lines) == ["a", "b"]
