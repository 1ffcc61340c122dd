"""Per-channel quantizers and a unified entry-point for application.

Exported API
------------
- quantize(value, bits, mode)
- build_lut(bits, mode)
- quantize_array(image_array, bits, mode)
- build_piecewise_lut(bits, pivot)
- quantize_array_inplace(image_array, lut)

Supported modes
---------------
- ``-1``       : uniform quantization over [0, 255]
- ``0``        : pure logarithmic quantization
- ``1..255``   : piecewise logarithmic quantization split at this pivot

Implementation notes
--------------------
The scalar functions define the result for a single channel value. Whole
rasters are quantized through a 256-entry lookup table built from the
scalar function, so every pixel and channel goes through identical
arithmetic. ``bits == 8`` keeps all 256 values and is the identity.
"""
from __future__ import annotations

import numpy as np

from .uniform import interval_index, quantize_range, quantize_uniform
from .logarithmic import log_boundary, quantize_log, quantize_piecewise_log, split_levels

Array = np.ndarray

UNIFORM = -1
MAX_BITS = 8


def validate_params(bits: int, mode: int) -> None:
    """Raise ValueError unless ``bits`` is in 1..8 and ``mode`` in -1..255."""
    if not 1 <= bits <= MAX_BITS:
        raise ValueError(f"bits must be between 1 and {MAX_BITS}, got {bits}")
    if not UNIFORM <= mode <= 255:
        raise ValueError(f"mode must be -1 (uniform) or a pivot in 0..255, got {mode}")


def quantize(value: int, bits: int, mode: int) -> int:
    """Quantize one 8-bit channel value.

    Parameters
    ----------
    value : int
        Channel intensity in [0, 255].
    bits : int
        Bits per channel (1..8). 8 returns ``value`` unchanged.
    mode : int
        -1 uniform, 0 pure logarithmic, 1..255 logarithmic with that pivot.

    Returns
    -------
    int
        Reconstruction level in [0, 255].
    """
    validate_params(bits, mode)
    if not 0 <= value <= 255:
        raise ValueError(f"value must be in 0..255, got {value}")
    if bits >= MAX_BITS:
        return value
    if mode == UNIFORM:
        return quantize_uniform(value, bits)
    if mode == 0:
        return quantize_log(value, bits)
    return quantize_piecewise_log(value, bits, mode)


def build_lut(bits: int, mode: int) -> Array:
    """Return a (256,) uint8 table mapping each channel value to its level."""
    return np.array([quantize(v, bits, mode) for v in range(256)], dtype=np.uint8)


def build_piecewise_lut(bits: int, pivot: int) -> Array:
    """Lookup table for the piecewise scheme, used even when ``pivot`` is 0."""
    validate_params(bits, pivot)
    if bits >= MAX_BITS:
        return np.arange(256, dtype=np.uint8)
    return np.array(
        [quantize_piecewise_log(v, bits, pivot) for v in range(256)], dtype=np.uint8
    )


def _check_rgb(image_array: Array) -> None:
    if not isinstance(image_array, np.ndarray) or image_array.ndim != 3 or image_array.shape[2] != 3:
        raise ValueError("image_array must be an RGB array with shape (H, W, 3)")
    if image_array.dtype != np.uint8:
        raise TypeError("image_array must have dtype=uint8")


def quantize_array(image_array: Array, bits: int, mode: int) -> Array:
    """Quantize every channel of an RGB image array into a new array."""
    _check_rgb(image_array)
    if bits >= MAX_BITS:
        validate_params(bits, mode)
        return image_array.copy()
    return build_lut(bits, mode)[image_array]


def quantize_array_inplace(image_array: Array, lut: Array) -> None:
    """Overwrite ``image_array`` with ``lut`` applied to each channel value."""
    _check_rgb(image_array)
    image_array[...] = lut[image_array]


__all__ = [
    "UNIFORM",
    "MAX_BITS",
    "validate_params",
    "quantize",
    "quantize_uniform",
    "quantize_log",
    "quantize_piecewise_log",
    "quantize_range",
    "interval_index",
    "log_boundary",
    "split_levels",
    "build_lut",
    "build_piecewise_lut",
    "quantize_array",
    "quantize_array_inplace",
]
