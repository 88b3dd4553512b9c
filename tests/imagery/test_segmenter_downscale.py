"""Test CloudSegmenter downscaling consistency."""

import numpy as np
import pytest

from meghnet.imagery.cloud_segmenter import CloudSegmenter
from meghnet.models import BoundingBox

pytestmark = pytest.mark.unit


def test_wide_image_is_downscaled(internal_config):
    """Width above the cap is reduced, aspect ratio preserved."""
    raster = np.full((200, 1000, 3), 255, dtype=np.uint8)

    result = CloudSegmenter(internal_config).segment(raster)

    assert result.scale == 0.5
    assert result.shape == (100, 500)
    assert result.recolored.shape == (100, 500, 3)
    assert result.area_px == 100 * 500
    assert result.bounding_box == BoundingBox(0, 0, 499, 99)


def test_narrow_image_is_not_upscaled(internal_config):
    raster = np.full((30, 300, 3), 255, dtype=np.uint8)

    result = CloudSegmenter(internal_config).segment(raster)

    assert result.scale == 1.0
    assert result.shape == (30, 300)


def test_downscale_disabled(make_config):
    raster = np.full((10, 1000, 3), 255, dtype=np.uint8)

    result = CloudSegmenter(make_config(DOWNSCALE=False)).segment(raster)

    assert result.scale == 1.0
    assert result.area_px == 10 * 1000


def test_same_rule_for_every_frame(make_config):
    """Frames of equal width get the same factor, so areas compare."""
    seg = CloudSegmenter(make_config(MAX_WIDTH=100))
    small = np.zeros((100, 400, 3), dtype=np.uint8)
    large = np.zeros((100, 400, 3), dtype=np.uint8)
    small[:40, :40] = 255
    large[:80, :80] = 255

    r_small = seg.segment(small)
    r_large = seg.segment(large)

    assert r_small.scale == r_large.scale == 0.25
    assert r_small.area_px == 100
    assert r_large.area_px == 400


def test_tiny_result_keeps_one_pixel(make_config):
    """Extreme aspect ratios never collapse to zero height."""
    raster = np.full((1, 1000, 3), 255, dtype=np.uint8)

    result = CloudSegmenter(make_config(MAX_WIDTH=10)).segment(raster)

    assert result.shape == (1, 10)
    assert result.area_px == 10
