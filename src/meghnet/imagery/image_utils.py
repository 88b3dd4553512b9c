"""Pixel-level helpers for cloud segmentation.

Centralized helper functions for:
- Downscale factor and resampling
- Brightness and cloud classification
- Centroid and bounding box measurement
- Display recoloring and overlay drawing

Measurement helpers never touch display buffers, so a non-visual caller
can classify and measure without paying for recoloring.
"""

import logging
from typing import Optional, Tuple

import cv2
import numpy as np

from meghnet.models import BoundingBox, Point

__all__ = [
    'downscale_factor',
    'resize_raster',
    'brightness',
    'cloud_mask',
    'measure_mask',
    'recolor',
    'draw_overlay',
]

logger = logging.getLogger(__name__)

RESAMPLE_FLAGS = {
    "area": cv2.INTER_AREA,
    "linear": cv2.INTER_LINEAR,
    "nearest": cv2.INTER_NEAREST,
    "cubic": cv2.INTER_CUBIC,
}


# ============================================================================
# RESAMPLING
# ============================================================================

def downscale_factor(width: int, max_width: int) -> float:
    """Scale that brings ``width`` to at most ``max_width`` (never upscales)."""
    return min(1.0, max_width / width)


def resize_raster(raster: np.ndarray, scale: float, resample: str = "area") -> np.ndarray:
    """Resize by ``scale`` preserving aspect ratio.

    Target size is truncated to whole pixels, minimum 1x1. A scale of 1
    returns the input unchanged.
    """
    if scale >= 1.0:
        return raster

    height, width = raster.shape[:2]
    new_w = max(1, int(width * scale))
    new_h = max(1, int(height * scale))

    resized = cv2.resize(raster, (new_w, new_h), interpolation=RESAMPLE_FLAGS[resample])
    logger.debug("Resized raster %dx%d -> %dx%d (scale=%.4f)", width, height, new_w, new_h, scale)
    return resized


# ============================================================================
# CLASSIFICATION
# ============================================================================

def brightness(raster: np.ndarray) -> np.ndarray:
    """Per-pixel brightness: mean of the three color channels.

    Alpha is ignored. Grayscale rasters are their own brightness.
    """
    if raster.ndim == 2:
        return raster.astype(np.float64)
    return raster[..., :3].astype(np.float64).mean(axis=-1)


def cloud_mask(raster: np.ndarray, threshold: float) -> np.ndarray:
    """Boolean mask of cloud pixels (brightness strictly above threshold)."""
    return brightness(raster) > threshold


# ============================================================================
# MEASUREMENT
# ============================================================================

def measure_mask(mask: np.ndarray) -> Tuple[Optional[Point], Optional[BoundingBox], int]:
    """Centroid, bounding box and pixel count of a boolean mask.

    Sums are order-independent, so the centroid does not depend on pixel
    traversal order. An empty mask returns ``(None, None, 0)``.

    Parameters
    ----------
    mask : np.ndarray
        2D boolean array, True for cloud pixels.

    Returns
    -------
    tuple
        (centroid, bounding_box, count)
    """
    ys, xs = np.nonzero(mask)
    count = int(xs.size)

    if count == 0:
        return None, None, 0

    centroid = Point(
        x=float(xs.sum(dtype=np.int64)) / count,
        y=float(ys.sum(dtype=np.int64)) / count,
    )
    box = BoundingBox(
        min_x=int(xs.min()),
        min_y=int(ys.min()),
        max_x=int(xs.max()),
        max_y=int(ys.max()),
    )
    return centroid, box, count


# ============================================================================
# DISPLAY
# ============================================================================

def _as_color(raster: np.ndarray) -> np.ndarray:
    """Expand grayscale to RGB; color rasters pass through."""
    if raster.ndim == 2:
        return np.repeat(raster[..., np.newaxis], 3, axis=2)
    return raster


def recolor(raster: np.ndarray, mask: np.ndarray, highlight: Tuple[int, int, int],
            darken_factor: float) -> np.ndarray:
    """Highlight cloud pixels and darken the background.

    Background channels are multiplied by ``darken_factor`` and rounded
    half-to-even; cloud pixels are set to ``highlight``. Alpha (if any) is
    copied unchanged. Returns a new array; the input is not modified.
    """
    color = _as_color(raster)
    out = color.copy()

    rgb = color[..., :3].astype(np.float64)
    darkened = np.clip(np.round(rgb * darken_factor), 0, 255).astype(np.uint8)

    out[..., :3] = darkened
    out[mask, :3] = np.asarray(highlight, dtype=np.uint8)
    return out


def draw_overlay(image: np.ndarray, box: BoundingBox, centroid: Point,
                 box_color: Tuple[int, int, int], centroid_color: Tuple[int, int, int]) -> np.ndarray:
    """Draw the bounding box outline and a centroid dot in place."""
    alpha = (255,) if image.shape[2] == 4 else ()

    cv2.rectangle(image, (box.min_x, box.min_y), (box.max_x, box.max_y),
                  tuple(box_color) + alpha, thickness=2)
    cv2.circle(image, (int(round(centroid.x)), int(round(centroid.y))), 4,
               tuple(centroid_color) + alpha, thickness=-1)
    return image
