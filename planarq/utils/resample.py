"""Box-filtered nearest-source-pixel resampling for NumPy arrays.

Each output pixel maps back to its nearest source pixel, and the 3x3
neighbourhood around that pixel is averaged. Windows touching the image
border shrink to the in-bounds cells and are divided by the actual count.
"""
from __future__ import annotations

import math

import numpy as np

from ..quantizers import MAX_BITS, UNIFORM, build_lut, validate_params

Array = np.ndarray

_WINDOW = (-1, 0, 1)


def output_size(h: int, w: int, scale: float) -> tuple[int, int]:
    """Return the (height, width) produced by ``scale``; dimensions truncate."""
    if not math.isfinite(scale) or scale <= 0:
        raise ValueError("scale must be a finite number > 0")
    new_h = int(h * scale)
    new_w = int(w * scale)
    if new_h < 1 or new_w < 1:
        raise ValueError(f"scale {scale} gives an empty image for a {w}x{h} source")
    return new_h, new_w


def _source_centers(n_out: int, n_src: int, scale: float) -> Array:
    # Nearest source index, rounding halves up.
    pos = np.arange(n_out, dtype=np.float64) / scale
    return np.clip(np.floor(pos + 0.5), 0, n_src - 1).astype(np.int64)


def resample_box3(
    arr: Array,
    scale: float,
    bits: int = MAX_BITS,
    mode: int = UNIFORM,
    quantize: bool = True,
) -> Array:
    """Resample an RGB image by ``scale`` using a 3x3 box filter.

    Parameters
    ----------
    arr : np.ndarray
        Input array of shape (H, W, 3), dtype=uint8. Never modified.
    scale : float
        Scale factor (>0). Output is ``int(H*scale) x int(W*scale)``.
    bits : int
        Bits per channel (1..8) for inline quantization.
    mode : int
        Quantization mode, see :func:`planarq.quantizers.quantize`.
    quantize : bool
        Quantize the averaged channels inline when ``bits < 8``.

    Returns
    -------
    np.ndarray
        Newly allocated resampled image, dtype=uint8.
    """
    if not isinstance(arr, np.ndarray) or arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must be an RGB image with shape (H, W, 3)")
    validate_params(bits, mode)

    H, W, _ = arr.shape
    new_h, new_w = output_size(H, W, scale)
    cy = _source_centers(new_h, H, scale)
    cx = _source_centers(new_w, W, scale)

    sums = np.zeros((new_h, new_w, 3), dtype=np.int64)
    counts = np.zeros((new_h, new_w), dtype=np.int64)
    for dy in _WINDOW:
        ys = cy + dy
        valid_y = (ys >= 0) & (ys < H)
        ys = np.clip(ys, 0, H - 1)
        for dx in _WINDOW:
            xs = cx + dx
            valid_x = (xs >= 0) & (xs < W)
            xs = np.clip(xs, 0, W - 1)
            mask = valid_y[:, None] & valid_x[None, :]
            sums += arr[ys[:, None], xs[None, :], :] * mask[:, :, None]
            counts += mask

    avg = np.floor(sums / counts[:, :, None] + 0.5)
    out = np.clip(avg, 0, 255).astype(np.uint8)

    if quantize and bits < MAX_BITS:
        out = build_lut(bits, mode)[out]
    return out
