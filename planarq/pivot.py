"""Automatic pivot estimation for piecewise logarithmic quantization."""
from __future__ import annotations

import numpy as np

Array = np.ndarray


def estimate_pivot(arr: Array) -> int:
    """Return the mean per-pixel intensity of an RGB image as a pivot.

    Each pixel's intensity is ``(R + G + B) // 3``; the mean over all pixels
    is rounded half up, so the result lies in [0, 255].
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must be an RGB image with shape (H, W, 3)")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError("arr must contain at least one pixel")

    intensity = arr.astype(np.int64).sum(axis=2) // 3
    mean = intensity.sum() / float(intensity.size)
    return int(np.floor(mean + 0.5))
