"""Logarithmic quantization: pure log-spaced levels and a pivot-split variant.

Log spacing concentrates reconstruction levels at low intensities. The
piecewise variant splits the level budget at a pivot and quantizes each
side uniformly, so the pivot placement decides where resolution goes.
"""
from __future__ import annotations

import math

from .uniform import midpoint, quantize_range

_LOG_MAX = math.log(256)


def log_boundary(i: int, levels: int) -> float:
    """Upper boundary of log level ``i`` (``1 <= i <= levels``)."""
    return math.exp(_LOG_MAX * i / levels) - 1


def quantize_log(value: int, bits: int) -> int:
    """Quantize ``value`` to ``2**bits`` log-spaced levels over [0, 255]."""
    levels = 1 << bits
    idx = levels - 1
    for i in range(1, levels + 1):
        if value <= log_boundary(i, levels):
            idx = i - 1
            break
    lower = 0.0 if idx == 0 else log_boundary(idx, levels)
    upper = log_boundary(idx + 1, levels)
    return midpoint(lower, upper)


def split_levels(bits: int, pivot: int) -> tuple[int, int]:
    """Split ``2**bits`` levels between ``[0, pivot]`` and ``[pivot + 1, 255]``.

    The lower share is proportional to the width of ``[0, pivot]`` and is
    clamped so each side keeps at least one level.
    """
    levels = 1 << bits
    lower = int(math.floor(levels * ((pivot + 1) / 256.0) + 0.5))
    if lower < 1:
        lower = 1
    if lower > levels - 1:
        lower = levels - 1
    return lower, levels - lower


def quantize_piecewise_log(value: int, bits: int, pivot: int) -> int:
    """Quantize ``value`` with the level budget split at ``pivot``.

    Accepts ``pivot == 0``: the lower side then holds the single value 0.
    """
    lower_levels, upper_levels = split_levels(bits, pivot)
    if value <= pivot:
        return quantize_range(value, 0, pivot + 1, lower_levels)
    return quantize_range(value, pivot + 1, 255 - pivot, upper_levels)
