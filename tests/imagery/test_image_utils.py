"""Test pixel-level helpers used by the segmenter."""

import random

import numpy as np
import pytest

from meghnet.imagery.image_utils import (
    brightness,
    cloud_mask,
    downscale_factor,
    measure_mask,
    recolor,
    resize_raster,
)
from meghnet.models import BoundingBox, Point

pytestmark = pytest.mark.unit


def test_downscale_factor():
    assert downscale_factor(1000, 500) == 0.5
    assert downscale_factor(500, 500) == 1.0
    assert downscale_factor(200, 500) == 1.0


def test_resize_noop_at_unit_scale():
    raster = np.zeros((3, 3, 3), dtype=np.uint8)
    assert resize_raster(raster, 1.0) is raster


def test_brightness_grayscale_passthrough():
    gray = np.array([[0, 128, 255]], dtype=np.uint8)
    assert np.array_equal(brightness(gray), [[0.0, 128.0, 255.0]])


def test_cloud_mask_threshold():
    raster = np.array([[[181, 181, 181], [180, 180, 180]]], dtype=np.uint8)
    assert cloud_mask(raster, 180).tolist() == [[True, False]]


def test_measure_empty_mask():
    assert measure_mask(np.zeros((4, 4), dtype=bool)) == (None, None, 0)


def test_measure_l_shape():
    mask = np.zeros((5, 5), dtype=bool)
    mask[1:4, 1] = True   # vertical bar
    mask[3, 1:4] = True   # horizontal bar

    centroid, box, count = measure_mask(mask)

    assert count == 5
    assert box == BoundingBox(1, 1, 3, 3)
    assert centroid.x == pytest.approx((1 + 1 + 1 + 2 + 3) / 5)
    assert centroid.y == pytest.approx((1 + 2 + 3 + 3 + 3) / 5)


def test_centroid_independent_of_traversal_order():
    """Sum-based centroid equals the mean over any ordering of pixels."""
    rng = np.random.default_rng(7)
    mask = rng.random((40, 60)) > 0.7

    centroid, _, count = measure_mask(mask)

    coords = [(int(x), int(y)) for y, x in zip(*np.nonzero(mask))]
    random.Random(3).shuffle(coords)
    sx = sy = 0
    for x, y in coords:
        sx += x
        sy += y

    assert count == len(coords)
    assert centroid == Point(sx / count, sy / count)


def test_recolor_does_not_modify_input():
    raster = np.full((2, 2, 3), 200, dtype=np.uint8)
    mask = np.array([[True, False], [False, False]])

    out = recolor(raster, mask, (0, 255, 255), 0.3)

    assert (raster == 200).all()
    assert tuple(out[0, 0]) == (0, 255, 255)
    assert tuple(out[1, 1]) == (60, 60, 60)
