"""Board measurements shared by the evaluator.

Heights here are *row indices* of each column's topmost filled cell, so a
smaller value is a taller stack and an empty column has height ``HEIGHT``.
All fractional arithmetic runs in ``numpy.float32`` so scores match the
single-precision reference values bit for bit.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .tetromino import HEIGHT, WIDTH

F32 = np.float32

RowMasks = Sequence[int]


def column_heights(rows: RowMasks) -> List[int]:
    heights = [HEIGHT] * WIDTH
    top = 0
    while top < HEIGHT and rows[top] == 0:
        top += 1
    for col in range(WIDTH):
        bit = 1 << col
        for row in range(top, HEIGHT):
            if rows[row] & bit:
                heights[col] = row
                break
    return heights


def hole_stats(rows: RowMasks, heights: Sequence[int]) -> Tuple[int, int]:
    """Return ``(holes, depth_sum_sq)``.

    A hole is an empty cell strictly below its column's top cell; its depth is
    the row distance to that top cell.
    """

    holes = 0
    depth_sum_sq = 0
    for col in range(WIDTH):
        bit = 1 << col
        for row in range(heights[col] + 1, HEIGHT):
            if not rows[row] & bit:
                holes += 1
                depth = row - heights[col]
                depth_sum_sq += depth * depth
    return holes, depth_sum_sq


def average_height(heights: Sequence[int]) -> np.float32:
    return F32(sum(heights)) / F32(WIDTH)


def find_well(heights: Sequence[int], avg: np.float32, threshold: float) -> Optional[int]:
    """Return the column sitting deepest below ``avg`` by at least ``threshold``.

    On equal depth the leftmost column wins.
    """

    threshold = F32(threshold)
    well: Optional[int] = None
    for col in range(WIDTH):
        d = avg - F32(heights[col])
        if d < 0 and abs(d) >= threshold:
            if well is None or avg - F32(heights[well]) > d:
                well = col
    return well


def average_without(heights: Sequence[int], avg: np.float32, well: int) -> np.float32:
    """Return ``avg`` recomputed with column ``well`` left out."""

    return (avg * F32(WIDTH) - F32(heights[well])) / F32(WIDTH - 1)


def global_deviation(
    heights: Sequence[int], avg: np.float32, well: Optional[int] = None
) -> np.float32:
    """Sum of squared deviations from ``avg``, skipping ``well``."""

    sum_sq = F32(0.0)
    for col in range(WIDTH):
        if col == well:
            continue
        d = avg - F32(heights[col])
        sum_sq += d * d
    return sum_sq


def local_deviation(heights: Sequence[int], well: Optional[int] = None) -> np.float32:
    """Sum of squared neighbour differences, skipping both pairs touching ``well``."""

    sum_sq = F32(0.0)
    for col in range(1, WIDTH):
        if well is not None and (col == well or col == well + 1):
            continue
        d = F32(abs(heights[col] - heights[col - 1]))
        sum_sq += d * d
    return sum_sq


__all__ = [
    "F32",
    "average_height",
    "average_without",
    "column_heights",
    "find_well",
    "global_deviation",
    "hole_stats",
    "local_deviation",
]
