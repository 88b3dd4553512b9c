"""Root-level pytest fixtures for the Megh-Net test suite.

Provides shared configuration fixtures following the Pydantic-based
architecture, plus synthetic rasters. All tests should use these fixtures
instead of building raw dict configs.
"""

import logging

import numpy as np
import pytest

from meghnet.schemas import ParamConfig, UserConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides).

    Examples
    --------
    >>> def test_segmenter_init(internal_config):
    ...     seg = CloudSegmenter(internal_config)
    ...     assert seg.threshold == 180.0
    """
    return resolve_config(param_config, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Returns a callable that accepts UserConfig-compatible kwargs
    (field names or uppercase aliases).

    Examples
    --------
    >>> def test_custom_threshold(make_config):
    ...     config = make_config(THRESHOLD=200)
    ...     seg = CloudSegmenter(config)
    ...     assert seg.threshold == 200.0
    """
    def _make(**user_overrides):
        """Create InternalConfig with user overrides."""
        if user_overrides:
            user = UserConfig(**user_overrides)
            return resolve_config(param_config, user)
        return resolve_config(param_config, None)

    return _make


@pytest.fixture
def restore_root_logging():
    """Put root logger handlers and level back after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


# =============================================================================
# Raster Fixtures
# =============================================================================

def make_blob_raster(height, width, x0, y0, size_x, size_y, background=20, cloud=255):
    """RGB raster with one rectangular bright blob on a dark background."""
    raster = np.full((height, width, 3), background, dtype=np.uint8)
    raster[y0:y0 + size_y, x0:x0 + size_x] = cloud
    return raster


@pytest.fixture
def make_blob():
    """Factory for single-blob rasters (see make_blob_raster)."""
    return make_blob_raster


@pytest.fixture
def black_raster():
    """All-background 8x12 RGB raster."""
    return np.zeros((8, 12, 3), dtype=np.uint8)


@pytest.fixture
def white_raster():
    """All-cloud 8x12 RGB raster."""
    return np.full((8, 12, 3), 255, dtype=np.uint8)


@pytest.fixture
def blob_raster():
    """10x10 raster with a 4x3 cloud at columns 3-6, rows 2-4.

    Centroid (4.5, 3.0), bounding box (3, 2, 6, 4), area 12.
    """
    return make_blob_raster(10, 10, x0=3, y0=2, size_x=4, size_y=3)
