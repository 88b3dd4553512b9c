"""Decode satellite image files into RGB rasters.

This module turns encoded image bytes (PNG, JPEG, TIFF, ...) into the
uint8 RGB arrays the segmenter consumes, and encodes display rasters back
to PNG for the presentation layer.

Key behavior:
- OpenCV decodes to BGR; rasters are converted to RGB(A) on the way out
- Corrupt or unsupported data raises DecodeError (no retries)
- Missing files raise FileNotFoundError
"""

import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np

from meghnet.contracts import assert_raster

__all__ = ['ImageLoader', 'DecodeError', 'encode_png']

logger = logging.getLogger(__name__)


class DecodeError(ValueError):
    """Input bytes cannot be interpreted as a raster image."""
    pass


class ImageLoader:
    """Decode encoded images into RGB uint8 rasters.

    Stateless and safe to share between threads.

    Examples
    --------
    >>> loader = ImageLoader()
    >>> raster = loader.load("insat_ir_t0.png")
    >>> raster.shape
    (480, 640, 3)
    """

    def decode(self, data: bytes) -> np.ndarray:
        """Decode image bytes to an (H, W, 3) RGB raster.

        Parameters
        ----------
        data : bytes
            Encoded image file contents.

        Returns
        -------
        np.ndarray
            uint8 RGB raster.

        Raises
        ------
        DecodeError
            If the bytes are empty or not a decodable image.
        """
        if not data:
            raise DecodeError("Cannot decode empty image data")

        buf = np.frombuffer(data, dtype=np.uint8)
        try:
            bgr = cv2.imdecode(buf, cv2.IMREAD_COLOR)
        except cv2.error as e:
            raise DecodeError(f"Could not decode {len(data)} bytes as an image: {e}") from e
        if bgr is None:
            raise DecodeError(f"Could not decode {len(data)} bytes as an image")

        rgb = cv2.cvtColor(bgr, cv2.COLOR_BGR2RGB)
        assert_raster(rgb)

        logger.debug("Decoded image: %dx%d", rgb.shape[1], rgb.shape[0])
        return rgb

    def load(self, path: Union[str, Path]) -> np.ndarray:
        """Read and decode an image file.

        Raises
        ------
        FileNotFoundError
            If the file does not exist.
        DecodeError
            If the file is not a decodable image.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Image not found: {path}")

        try:
            return self.decode(path.read_bytes())
        except DecodeError as e:
            raise DecodeError(f"{path.name}: {e}") from e


def encode_png(raster: np.ndarray) -> bytes:
    """Encode an RGB(A) or grayscale raster as PNG bytes.

    Raises
    ------
    ContractViolation
        If the raster is not a valid uint8 image array.
    """
    assert_raster(raster)

    if raster.ndim == 3 and raster.shape[2] == 4:
        out = cv2.cvtColor(raster, cv2.COLOR_RGBA2BGRA)
    elif raster.ndim == 3 and raster.shape[2] == 3:
        out = cv2.cvtColor(raster, cv2.COLOR_RGB2BGR)
    else:
        out = raster

    ok, buf = cv2.imencode(".png", out)
    if not ok:
        raise RuntimeError("PNG encoding failed")
    return buf.tobytes()
