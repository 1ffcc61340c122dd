"""Planar RGB reading and writing, plus Pillow saving, with NumPy arrays.

All processing in this project occurs on NumPy arrays. These helpers only
convert between on-disk bytes and NumPy ``uint8`` RGB arrays for IO.

The planar container holds the full red plane, then the full green plane,
then the full blue plane, each in scan-line order with one byte per pixel.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from ..errors import FormatError

Array = np.ndarray

SOURCE_WIDTH = 512
SOURCE_HEIGHT = 512


def decode_planar(data: bytes, width: int = SOURCE_WIDTH, height: int = SOURCE_HEIGHT) -> Array:
    """Decode planar RGB bytes into an RGB NumPy array (uint8).

    Parameters
    ----------
    data : bytes
        Exactly ``width * height * 3`` bytes.
    width, height : int
        Source dimensions (>=1).

    Returns
    -------
    np.ndarray
        Array of shape (height, width, 3), dtype=uint8, in RGB order.
    """
    if width < 1 or height < 1:
        raise ValueError("width and height must be >= 1")
    expected = width * height * 3
    if len(data) != expected:
        raise FormatError(
            f"File size does not match expected {expected} bytes (got {len(data)})."
        )
    planes = np.frombuffer(data, dtype=np.uint8).reshape(3, height, width)
    return np.ascontiguousarray(planes.transpose(1, 2, 0))


def encode_planar(arr: Array) -> bytes:
    """Encode an RGB NumPy array (uint8) as planar RGB bytes."""
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must have shape (H, W, 3)")
    return np.ascontiguousarray(arr.transpose(2, 0, 1)).tobytes()


def read_planar_rgb(
    path: Union[str, Path], width: int = SOURCE_WIDTH, height: int = SOURCE_HEIGHT
) -> Array:
    """Load a planar ``.rgb`` file into an RGB NumPy array (uint8)."""
    p = Path(path)
    expected = width * height * 3
    size = p.stat().st_size
    if size != expected:
        raise FormatError(f"File size does not match expected {expected} bytes (got {size}).")
    data = p.read_bytes()
    return decode_planar(data, width, height)


def save_planar_rgb(arr: Array, path: Union[str, Path]) -> None:
    """Write an RGB NumPy array (uint8) as a planar ``.rgb`` file."""
    Path(path).write_bytes(encode_planar(arr))


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Save an RGB NumPy array (uint8) to an image file via Pillow.

    Parameters
    ----------
    arr : np.ndarray
        Array of shape (H, W, 3), dtype=uint8.
    path : str | Path
        Output file path. The format is inferred from the extension.
    """
    if not isinstance(arr, np.ndarray):
        raise TypeError("arr must be a NumPy array")
    if arr.dtype != np.uint8:
        raise TypeError("arr must have dtype=uint8")
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError("arr must have shape (H, W, 3)")

    p = Path(path)
    im = Image.fromarray(arr)
    im.save(p)
