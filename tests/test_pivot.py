import numpy as np
import pytest

from planarq.pivot import estimate_pivot


def test_constant_image() -> None:
    img = np.full((6, 4, 3), 123, dtype=np.uint8)
    assert estimate_pivot(img) == 123


def test_per_pixel_intensity_uses_integer_division() -> None:
    img = np.array([[[1, 1, 2]]], dtype=np.uint8)
    assert estimate_pivot(img) == 1


def test_mean_rounds_half_up() -> None:
    img = np.array([[[10, 10, 10], [11, 11, 11]]], dtype=np.uint8)
    assert estimate_pivot(img) == 11


def test_no_uint8_overflow() -> None:
    img = np.full((3, 3, 3), 255, dtype=np.uint8)
    assert estimate_pivot(img) == 255


def test_rejects_bad_shape() -> None:
    with pytest.raises(ValueError):
        estimate_pivot(np.zeros((4, 4), dtype=np.uint8))
