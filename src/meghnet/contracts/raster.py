"""Raster input contract.

Enforces the guarantee that a decoded image is a 2D grayscale or
3/4-channel 8-bit raster before any per-pixel work starts.
"""

import numpy as np
from meghnet.contracts.base import require


def assert_raster(raster: np.ndarray) -> None:
    """Enforce raster input contract.

    Called before segmentation. Verifies shape and dtype only; pixel
    values of a uint8 array are always within [0, 255].

    Parameters
    ----------
    raster : np.ndarray
        (H, W) grayscale, (H, W, 3) RGB or (H, W, 4) RGBA array.

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        isinstance(raster, np.ndarray),
        f"Raster contract violated: input is {type(raster).__name__}, expected numpy array"
    )
    require(
        raster.ndim in (2, 3),
        f"Raster contract violated: array has {raster.ndim} dims, expected 2 or 3"
    )
    if raster.ndim == 3:
        require(
            raster.shape[2] in (1, 3, 4),
            f"Raster contract violated: {raster.shape[2]} channels, expected 1, 3 or 4"
        )
    require(
        raster.shape[0] > 0 and raster.shape[1] > 0,
        f"Raster contract violated: empty raster of shape {raster.shape}"
    )
    require(
        raster.dtype == np.uint8,
        f"Raster contract violated: dtype is {raster.dtype}, expected uint8"
    )
