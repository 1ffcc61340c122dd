import numpy as np
import pytest
from PIL import Image

from planarq.errors import FormatError
from planarq.utils.loader import (
    decode_planar,
    encode_planar,
    read_planar_rgb,
    save_image,
    save_planar_rgb,
)


def test_decode_reads_planes_in_order() -> None:
    data = bytes([1, 2, 3, 4, 5, 6])  # R plane, G plane, B plane for 2x1
    img = decode_planar(data, width=2, height=1)
    assert img.shape == (1, 2, 3)
    assert img.dtype == np.uint8
    assert tuple(img[0, 0]) == (1, 3, 5)
    assert tuple(img[0, 1]) == (2, 4, 6)


def test_decode_is_row_major() -> None:
    red = bytes(range(6))
    data = red + bytes(6) + bytes(6)
    img = decode_planar(data, width=3, height=2)
    assert img[0, 2, 0] == 2
    assert img[1, 0, 0] == 3


def test_decode_rejects_wrong_length() -> None:
    with pytest.raises(FormatError):
        decode_planar(bytes(11), width=2, height=2)
    with pytest.raises(ValueError):
        decode_planar(bytes(13), width=2, height=2)


def test_default_size_is_512_square() -> None:
    img = decode_planar(bytes(512 * 512 * 3))
    assert img.shape == (512, 512, 3)


def test_encode_writes_planar_layout() -> None:
    img = np.array([[[1, 3, 5], [2, 4, 6]]], dtype=np.uint8)
    assert encode_planar(img) == bytes([1, 2, 3, 4, 5, 6])


def test_encode_rejects_wrong_dtype() -> None:
    with pytest.raises(TypeError):
        encode_planar(np.zeros((2, 2, 3), dtype=np.float32))


def test_read_and_save_planar_file(tmp_path) -> None:
    img = np.arange(4 * 3 * 3, dtype=np.uint8).reshape(4, 3, 3)
    path = tmp_path / "img.rgb"
    save_planar_rgb(img, path)
    assert path.stat().st_size == 4 * 3 * 3
    assert np.array_equal(read_planar_rgb(path, width=3, height=4), img)


def test_read_missing_file_raises(tmp_path) -> None:
    with pytest.raises(OSError):
        read_planar_rgb(tmp_path / "missing.rgb")


def test_save_image_png(tmp_path) -> None:
    img = np.zeros((5, 7, 3), dtype=np.uint8)
    img[:, :, 1] = 99
    path = tmp_path / "out.png"
    save_image(img, path)
    with Image.open(path) as im:
        assert im.size == (7, 5)
        assert im.mode == "RGB"
        assert im.getpixel((3, 2)) == (0, 99, 0)


def test_read_rejects_oversized_file(tmp_path) -> None:
    path = tmp_path / "big.rgb"
    path.write_bytes(bytes(2 * 2 * 3 + 1))
    with pytest.raises(FormatError, match="got 13"):
        read_planar_rgb(path, width=2, height=2)
