"""Test ImageLoader decoding and PNG encoding."""

import cv2
import numpy as np
import pytest

from meghnet.contracts import ContractViolation
from meghnet.imagery.loader import DecodeError, ImageLoader, encode_png

pytestmark = pytest.mark.unit


@pytest.fixture
def rgb_raster():
    raster = np.zeros((6, 8, 3), dtype=np.uint8)
    raster[..., 0] = 200  # red channel only
    raster[2:4, 2:5] = 255
    return raster


def test_decode_returns_rgb(rgb_raster):
    """Channel order is RGB, not OpenCV's BGR."""
    ok, buf = cv2.imencode(".png", cv2.cvtColor(rgb_raster, cv2.COLOR_RGB2BGR))
    assert ok

    decoded = ImageLoader().decode(buf.tobytes())

    assert decoded.dtype == np.uint8
    assert np.array_equal(decoded, rgb_raster)


def test_encode_png_is_decodable(rgb_raster):
    data = encode_png(rgb_raster)

    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    assert np.array_equal(ImageLoader().decode(data), rgb_raster)


def test_grayscale_png_decodes_to_rgb():
    gray = np.full((4, 4), 190, dtype=np.uint8)

    decoded = ImageLoader().decode(encode_png(gray))

    assert decoded.shape == (4, 4, 3)
    assert (decoded == 190).all()


def test_load_from_path(tmp_path, rgb_raster):
    path = tmp_path / "t0.png"
    path.write_bytes(encode_png(rgb_raster))

    assert np.array_equal(ImageLoader().load(path), rgb_raster)
    assert np.array_equal(ImageLoader().load(str(path)), rgb_raster)


def test_corrupt_bytes_raise_decode_error():
    with pytest.raises(DecodeError):
        ImageLoader().decode(b"definitely not an image" * 10)


def test_empty_bytes_raise_decode_error():
    with pytest.raises(DecodeError, match="empty"):
        ImageLoader().decode(b"")


def test_corrupt_file_names_the_file(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"\x00\x01\x02garbage")

    with pytest.raises(DecodeError, match="broken.png"):
        ImageLoader().load(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ImageLoader().load(tmp_path / "nope.png")


def test_decode_error_is_value_error():
    assert issubclass(DecodeError, ValueError)


def test_encode_rejects_invalid_raster():
    with pytest.raises(ContractViolation):
        encode_png(np.zeros((2, 2), dtype=np.float64))
