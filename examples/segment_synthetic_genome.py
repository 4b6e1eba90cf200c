"""Segment a synthetic sequence made of AT-rich and GC-rich blocks.

The boundaries of the blocks are found back by the segmentation.
"""
import numpy as np
from ripsaw import ContigSegmenter, format_region

rng = np.random.RandomState(123)
blocks = [(3000, [0.4, 0.1, 0.1, 0.4]),
          (5000, [0.2, 0.3, 0.3, 0.2]),
          (4000, [0.35, 0.15, 0.15, 0.35])]
sequence = "".join([
    "".join(rng.choice(list("ACGT"), size=size, p=probabilities))
    for size, probabilities in blocks
])

segmenter = ContigSegmenter(min_length=1000)
for region in segmenter.segment(sequence, name="synthetic"):
    print(format_region(region))
