"""Utility functions for PlanarQ.

Modules:
- loader: planar RGB bytes <-> NumPy conversion and Pillow saving.
- resample: 3x3 box-filtered nearest-source-pixel resampling.
"""
from .loader import (
    SOURCE_HEIGHT,
    SOURCE_WIDTH,
    decode_planar,
    encode_planar,
    read_planar_rgb,
    save_image,
    save_planar_rgb,
)
from .resample import output_size, resample_box3

__all__ = [
    "SOURCE_HEIGHT",
    "SOURCE_WIDTH",
    "decode_planar",
    "encode_planar",
    "read_planar_rgb",
    "save_image",
    "save_planar_rgb",
    "output_size",
    "resample_box3",
]
