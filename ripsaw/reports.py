import io

from .distributions import BIN_NAMES

LABEL_MODES = ("type", "depth")
VALUE_MODES = ("gc", "rip")
RIP_SCALE = 50


def check_modes(label_mode, value_mode):
    """Raise a ValueError for an unknown label or value mode."""
    if label_mode not in LABEL_MODES:
        raise ValueError("label_mode should be one of %s, not %s"
                         % (LABEL_MODES, label_mode))
    if value_mode not in VALUE_MODES:
        raise ValueError("value_mode should be one of %s, not %s"
                         % (VALUE_MODES, value_mode))


def region_label(region, label_mode="type"):
    """Return the nearest reference ("A", "B", "C") or the depth of the
    region, as a string."""
    if label_mode == "depth":
        return "%d" % region["depth"]
    return region["label"]


def region_value(region, value_mode="gc"):
    """Return the GC fraction or the scaled RIP index of the region."""
    if value_mode == "rip":
        return RIP_SCALE * region["rip_index"]
    return region["gc"]


def format_region(region, label_mode="type", value_mode="gc"):
    """Return the tab-separated line describing a region.

    The fields are the sequence name, start, end, label, GC fraction (or
    RIP index x 50) and the 14 values of the dinucleotide distribution.
    """
    check_modes(label_mode, value_mode)
    fields = [
        region["name"],
        "%d" % region["start"],
        "%d" % region["end"],
        region_label(region, label_mode),
        "%.2f" % region_value(region, value_mode),
    ] + ["%.4f" % p for p in region["distribution"]]
    return "\t".join(fields)


def header_line(label_mode="type", value_mode="gc"):
    """Return the tab-separated column names of ``format_region`` lines."""
    check_modes(label_mode, value_mode)
    label = "type" if label_mode == "type" else "depth"
    value = "gc" if value_mode == "gc" else "rip_index_x%d" % RIP_SCALE
    return "\t".join(["name", "start", "end", label, value] + BIN_NAMES)


def write_regions(regions, target, label_mode="type", value_mode="gc",
                  header=False):
    """Write one line per region (see ``format_region``).

    Parameters
    ----------

    regions
      Iterable of regions as returned by ``ContigSegmenter.segment``.

    target
      Either a path to a file, a file-like object, or "@memory" to return
      the text instead of writing it.

    header
      If True, a first line with the column names is written.

    Returns
    -------

    The text if ``target`` is "@memory", else the number of regions
    written.
    """
    check_modes(label_mode, value_mode)
    if target == "@memory":
        stream = io.StringIO()
        write_regions(regions, stream, label_mode=label_mode,
                      value_mode=value_mode, header=header)
        return stream.getvalue()
    if isinstance(target, str):
        with open(target, "w") as f:
            return write_regions(regions, f, label_mode=label_mode,
                                 value_mode=value_mode, header=header)
    if header:
        target.write(header_line(label_mode, value_mode) + "\n")
    n_regions = 0
    for region in regions:
        target.write(format_region(region, label_mode, value_mode) + "\n")
        n_regions += 1
    return n_regions
