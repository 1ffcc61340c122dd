from __future__ import annotations

# Public API.
from .errors import FormatError, PlanarQError, UsageError  # noqa: F401
from .pipeline import PipelineResult, process_raster, run  # noqa: F401
from .pivot import estimate_pivot  # noqa: F401
from .quantizers import UNIFORM, quantize, quantize_array  # noqa: F401
from .utils.loader import decode_planar, encode_planar, read_planar_rgb, save_image  # noqa: F401
from .utils.resample import resample_box3  # noqa: F401

__all__ = [
    "FormatError",
    "PlanarQError",
    "UsageError",
    "PipelineResult",
    "process_raster",
    "run",
    "estimate_pivot",
    "UNIFORM",
    "quantize",
    "quantize_array",
    "decode_planar",
    "encode_planar",
    "read_planar_rgb",
    "save_image",
    "resample_box3",
]
