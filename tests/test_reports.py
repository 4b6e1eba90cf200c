import io
import numpy as np
import pytest
from ripsaw import ContigSegmenter, format_region, write_regions
from ripsaw.reports import header_line


@pytest.fixture
def region():
    distribution = np.zeros(14)
    distribution[0] = 0.75
    distribution[4] = 0.25
    return dict(name="chr1", start=120, end=1300, depth=3, label="B",
                gc=0.4567, rip_index=0.5, distribution=distribution)


def test_format_region(region):
    fields = format_region(region).split("\t")
    assert len(fields) == 19
    assert fields[:5] == ["chr1", "120", "1300", "B", "0.46"]
    assert fields[5] == "0.7500"
    assert fields[9] == "0.2500"
    assert fields[6] == "0.0000"


def test_format_region_modes(region):
    fields = format_region(region, label_mode="depth",
                           value_mode="rip").split("\t")
    assert fields[3] == "3"
    assert fields[4] == "25.00"


def test_invalid_modes(region):
    with pytest.raises(ValueError):
        format_region(region, label_mode="color")
    with pytest.raises(ValueError):
        format_region(region, value_mode="at")


def test_header_line():
    columns = header_line().split("\t")
    assert len(columns) == 19
    assert columns[:5] == ["name", "start", "end", "type", "gc"]
    assert header_line("depth", "rip").split("\t")[3:5] == [
        "depth", "rip_index_x50"]


def test_write_regions_in_memory(region):
    text = write_regions([region, region], "@memory", header=True)
    lines = text.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("name\tstart")
    assert lines[1] == lines[2] == format_region(region)


def test_write_segmentation(tmpdir):
    segmenter = ContigSegmenter(progress_logger=None)
    regions = segmenter.segment(10 * "AC", name="ac")
    stream = io.StringIO()
    assert write_regions(regions, stream) == 1
    assert stream.getvalue().startswith("ac\t0\t20\t")
    path = str(tmpdir.join("regions.tsv"))
    write_regions(regions, path, value_mode="rip")
    with open(path) as f:
        assert f.read().split("\t")[4] == "50.00"
