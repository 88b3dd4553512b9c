"""Segment the cold cloud region of a satellite frame.

Bright pixels in infrared imagery are cold cloud tops. The segmenter
classifies every pixel by mean channel brightness, measures the cloud
region (centroid, bounding box, pixel area) in a single vectorized pass,
and optionally builds a recolored raster for visual feedback.

Key capability:
- Consistent downscaling (same rule for every frame, factor reported)
- Measurement decoupled from recoloring (``measure`` vs ``segment``)
- Empty frames are valid results, not errors
"""

import logging
from typing import TYPE_CHECKING

import numpy as np

from meghnet.contracts import assert_raster, assert_segmented
from meghnet.imagery.image_utils import (
    cloud_mask,
    downscale_factor,
    draw_overlay,
    measure_mask,
    recolor,
    resize_raster,
)
from meghnet.models import SegmentationResult

if TYPE_CHECKING:
    from meghnet.schemas import InternalConfig

__all__ = ['CloudSegmenter']

logger = logging.getLogger(__name__)


class CloudSegmenter:
    """Config-driven threshold segmentation of one cloud mass per frame.

    The segmenter holds configuration only, so one instance may segment
    several frames concurrently.

    Configuration
    =============
    Read from ``config.segmenter``:

    - `threshold` : float, default 180
        Brightness (0-255) above which a pixel is cloud.
    - `downscale`, `max_width` : bool, int, default True, 500
        Downscale so width <= max_width before measuring.
    - `resample` : str, default "area"
        OpenCV interpolation used for downscaling.
    - `recolor`, `highlight_color`, `darken_factor`
        Display raster: cloud pixels highlighted, background darkened.
    - `draw_overlay`, `box_color`, `centroid_color`
        Draw bounding box and centroid onto the display raster.

    Examples
    --------
    >>> from meghnet.schemas import resolve_config, ParamConfig
    >>> segmenter = CloudSegmenter(resolve_config(ParamConfig()))
    >>> result = segmenter.segment(raster)
    >>> result.centroid, result.area_px
    """

    def __init__(self, config: "InternalConfig"):
        """Store config.

        Parameters
        ----------
        config : InternalConfig
            Fully validated runtime configuration.
        """
        self.config = config
        seg = config.segmenter
        self.threshold = seg.threshold
        self.darken_factor = seg.darken_factor
        self.downscale = seg.downscale
        self.max_width = seg.max_width
        self.resample = seg.resample
        self.recolor = seg.recolor
        self.highlight_color = seg.highlight_color
        self.draw_overlay = seg.draw_overlay
        self.box_color = seg.box_color
        self.centroid_color = seg.centroid_color

        logger.info("CloudSegmenter initialized: threshold=%s, max_width=%s",
                    self.threshold, self.max_width if self.downscale else None)

    def segment(self, raster: np.ndarray) -> SegmentationResult:
        """Measure the cloud region and build the display raster.

        Parameters
        ----------
        raster : np.ndarray
            uint8 (H, W), (H, W, 3) or (H, W, 4) raster.

        Returns
        -------
        SegmentationResult
            Centroid, bounding box and area in the (possibly downscaled)
            raster; ``recolored`` is None when recoloring is disabled.

        Raises
        ------
        ContractViolation
            If the raster shape or dtype is invalid.
        """
        return self._segment(raster, with_display=self.recolor)

    def measure(self, raster: np.ndarray) -> SegmentationResult:
        """Like ``segment`` but never builds a display raster."""
        return self._segment(raster, with_display=False)

    def cloud_mask(self, raster: np.ndarray) -> np.ndarray:
        """Boolean cloud classification of the prepared raster."""
        prepared, _ = self._prepare(raster)
        return cloud_mask(prepared, self.threshold)

    def _prepare(self, raster: np.ndarray):
        """Validate, flatten single-channel input, and downscale."""
        assert_raster(raster)
        if raster.ndim == 3 and raster.shape[2] == 1:
            raster = raster[..., 0]

        scale = 1.0
        if self.downscale:
            scale = downscale_factor(raster.shape[1], self.max_width)
            raster = resize_raster(raster, scale, self.resample)

        return raster, scale

    def _segment(self, raster: np.ndarray, with_display: bool) -> SegmentationResult:
        prepared, scale = self._prepare(raster)

        mask = cloud_mask(prepared, self.threshold)
        centroid, box, area = measure_mask(mask)

        display = None
        if with_display:
            display = recolor(prepared, mask, self.highlight_color, self.darken_factor)
            if self.draw_overlay and area > 0:
                draw_overlay(display, box, centroid, self.box_color, self.centroid_color)
            display.flags.writeable = False

        result = SegmentationResult(
            recolored=display,
            centroid=centroid,
            bounding_box=box,
            area_px=area,
            scale=scale,
            shape=(int(prepared.shape[0]), int(prepared.shape[1])),
        )
        assert_segmented(result)

        if area == 0:
            logger.debug("No cloud pixels above threshold %s", self.threshold)
        else:
            logger.debug("Cloud region: area=%d px, centroid=(%.2f, %.2f), bbox=%s",
                         area, centroid.x, centroid.y, box.as_tuple())

        return result
