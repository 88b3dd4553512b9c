"""Segmentation stage contract.

Enforces the guarantee that after segmentation the centroid and bounding
box are present exactly when cloud pixels were found, and that they are
consistent with each other and with the measured raster.
"""

import math

from meghnet.contracts.base import require
from meghnet.models import SegmentationResult


def assert_segmented(result: SegmentationResult) -> None:
    """Enforce segmentation stage contract.

    Called immediately after segmentation. An empty region (area 0) is a
    valid outcome and passes.

    Parameters
    ----------
    result : SegmentationResult
        Output from segmenter.segment() or segmenter.measure()

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    require(
        isinstance(result, SegmentationResult),
        f"Segmentation contract violated: output is {type(result).__name__}, expected SegmentationResult"
    )
    require(
        result.area_px >= 0,
        f"Segmentation contract violated: negative area ({result.area_px})"
    )

    if result.area_px == 0:
        require(
            result.centroid is None and result.bounding_box is None,
            "Segmentation contract violated: empty region must not carry centroid or bounding box"
        )
    else:
        require(
            result.centroid is not None and result.bounding_box is not None,
            "Segmentation contract violated: non-empty region is missing centroid or bounding box"
        )
        c, box = result.centroid, result.bounding_box
        require(
            math.isfinite(c.x) and math.isfinite(c.y),
            f"Segmentation contract violated: centroid is not finite ({c.x}, {c.y})"
        )
        require(
            box.min_x <= c.x <= box.max_x and box.min_y <= c.y <= box.max_y,
            "Segmentation contract violated: centroid lies outside bounding box"
        )
        require(
            result.area_px <= box.width * box.height,
            "Segmentation contract violated: area exceeds bounding box size"
        )

    if result.recolored is not None:
        require(
            result.recolored.shape[:2] == tuple(result.shape),
            f"Segmentation contract violated: recolored shape {result.recolored.shape[:2]} "
            f"does not match measured shape {tuple(result.shape)}"
        )
