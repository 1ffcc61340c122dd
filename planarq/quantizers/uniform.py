"""Uniform per-channel quantization.

The same interval/midpoint arithmetic is reused by the piecewise
logarithmic quantizer for each of its two sub-ranges.
"""
from __future__ import annotations

import math


def interval_index(offset: float, interval: float, levels: int) -> int:
    """Return the interval containing ``offset``, clamped to ``levels - 1``.

    Float division can land one past the last interval at the top of the
    range, hence the clamp.
    """
    idx = int(offset / interval)
    if idx >= levels:
        idx = levels - 1
    return idx


def midpoint(lower: float, upper: float) -> int:
    """Round the midpoint of ``[lower, upper]``; exact halves round down."""
    # Log boundaries carry ulp noise; snap it so ties stay ties.
    mid = round((lower + upper) / 2.0, 9)
    return int(math.ceil(mid - 0.5))


def quantize_range(value: int, start: int, width: int, levels: int) -> int:
    """Quantize ``value`` within ``[start, start + width - 1]`` using ``levels`` equal intervals.

    Parameters
    ----------
    value : int
        Channel value inside the range.
    start : int
        First value of the range.
    width : int
        Number of values covered by the range.
    levels : int
        Number of reconstruction levels (>=1).

    Returns
    -------
    int
        Midpoint of the interval that contains ``value``.
    """
    interval = width / float(levels)
    idx = interval_index(value - start, interval, levels)
    lower = start + idx * interval
    upper = start + (idx + 1) * interval - 1
    return midpoint(lower, upper)


def quantize_uniform(value: int, bits: int) -> int:
    """Quantize an 8-bit value to ``2**bits`` equal-width levels over [0, 255]."""
    return quantize_range(value, 0, 256, 1 << bits)
