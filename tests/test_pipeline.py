import numpy as np
import pytest

from planarq.errors import FormatError
from planarq.pipeline import process_raster, run
from planarq.pivot import estimate_pivot
from planarq.quantizers import UNIFORM, build_piecewise_lut, quantize_array
from planarq.utils.loader import save_planar_rgb
from planarq.utils.resample import resample_box3


def _split_source() -> np.ndarray:
    # Columns 0..1 black, 2..3 white.
    src = np.zeros((4, 4, 3), dtype=np.uint8)
    src[:, 2:] = 255
    return src


def test_auto_pivot_uses_resampled_image() -> None:
    src = _split_source()
    reported = []
    result = process_raster(src, 0.5, 2, None, report=reported.append)

    resampled = resample_box3(src, 0.5, quantize=False)
    assert reported == [85]
    assert result.pivot == 85
    assert estimate_pivot(resampled) == 85
    assert estimate_pivot(src) != 85
    assert np.array_equal(result.image, build_piecewise_lut(2, 85)[resampled])


def test_auto_pivot_skipped_at_eight_bits() -> None:
    src = _split_source()
    reported = []
    result = process_raster(src, 0.5, 8, None, report=reported.append)
    assert reported == []
    assert result.pivot is None
    assert np.array_equal(result.image, resample_box3(src, 0.5, quantize=False))


def test_zero_pivot_still_uses_piecewise_scheme(capsys) -> None:
    src = np.zeros((32, 32, 3), dtype=np.uint8)
    src[0, 0] = (3, 3, 3)
    result = process_raster(src, 1.0, 2)
    assert result.pivot == 0
    assert "Computed optimal pivot: 0" in capsys.readouterr().out
    # The corner averages to 1, which sits above a zero pivot.
    assert result.image[0, 0, 0] == 43
    assert result.image[5, 5, 0] == 0


@pytest.mark.parametrize("mode", [UNIFORM, 0, 200])
def test_explicit_mode_quantizes_inline(mode: int) -> None:
    rng = np.random.default_rng(3)
    src = rng.integers(0, 256, size=(16, 16, 3), dtype=np.uint8)
    reported = []
    result = process_raster(src, 0.75, 3, mode, report=reported.append)
    expected = quantize_array(resample_box3(src, 0.75, quantize=False), 3, mode)
    assert reported == []
    assert result.pivot is None
    assert np.array_equal(result.image, expected)


def test_constant_source_end_to_end() -> None:
    src = np.full((4, 4, 3), 200, dtype=np.uint8)
    result = process_raster(src, 0.5, 8, UNIFORM)
    assert result.image.shape == (2, 2, 3)
    assert np.all(result.image == 200)


def test_run_reads_planar_file(tmp_path) -> None:
    src = np.full((4, 4, 3), 200, dtype=np.uint8)
    path = tmp_path / "src.rgb"
    save_planar_rgb(src, path)
    result = run(path, 0.5, 1, UNIFORM, width=4, height=4)
    assert result.image.shape == (2, 2, 3)
    assert np.all(result.image == 191)


def test_run_rejects_wrong_size(tmp_path) -> None:
    path = tmp_path / "short.rgb"
    path.write_bytes(bytes(10))
    with pytest.raises(FormatError):
        run(path, 0.5, 4, UNIFORM)
