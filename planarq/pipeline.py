"""Resample-and-quantize pipeline shared by the CLI and library callers.

Sequence: read the planar source, resample with a 3x3 box filter and
quantize inline, or, in auto-pivot mode, resample first, estimate the
pivot from the resampled image and re-quantize that image in place.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

import numpy as np

from .pivot import estimate_pivot
from .quantizers import MAX_BITS, UNIFORM, build_piecewise_lut, quantize_array_inplace
from .utils.loader import SOURCE_HEIGHT, SOURCE_WIDTH, read_planar_rgb
from .utils.resample import resample_box3


@dataclass
class PipelineResult:
    image: np.ndarray
    pivot: Optional[int] = None  # set only when auto-pivot ran


def _print_pivot(pivot: int) -> None:
    print(f"Computed optimal pivot: {pivot}")


def process_raster(
    src: np.ndarray,
    scale: float,
    bits: int,
    mode: Optional[int] = None,
    report: Callable[[int], None] = _print_pivot,
) -> PipelineResult:
    """Resample ``src`` and quantize it.

    ``mode=None`` selects auto-pivot: quantization is deferred until the
    whole resampled image is available, then the piecewise logarithmic
    scheme is applied with the estimated pivot (also when it comes out 0).
    ``report`` receives the estimated pivot.
    """
    auto_pivot = mode is None
    out = resample_box3(
        src,
        scale,
        bits=bits,
        mode=UNIFORM if auto_pivot else mode,
        quantize=not auto_pivot,
    )

    if not auto_pivot or bits >= MAX_BITS:
        return PipelineResult(image=out)

    # ``out`` is freshly allocated and owned here, so it may be mutated.
    pivot = estimate_pivot(out)
    report(pivot)
    quantize_array_inplace(out, build_piecewise_lut(bits, pivot))
    return PipelineResult(image=out, pivot=pivot)


def run(
    source: Union[str, Path],
    scale: float,
    bits: int,
    mode: Optional[int] = None,
    width: int = SOURCE_WIDTH,
    height: int = SOURCE_HEIGHT,
    report: Callable[[int], None] = _print_pivot,
) -> PipelineResult:
    """Read a planar ``.rgb`` file and run :func:`process_raster` on it.

    Read and format errors propagate before any processing happens.
    """
    img = read_planar_rgb(source, width, height)
    return process_raster(img, scale, bits, mode, report=report)
