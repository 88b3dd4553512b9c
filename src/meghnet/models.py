"""Value objects passed between the segmentation and prediction stages.

All objects are immutable. Coordinates are in image pixel space with the
origin at the top-left corner and y increasing downward.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import numpy as np

__all__ = ['Point', 'BoundingBox', 'SegmentationResult', 'Severity', 'PredictionResult']


@dataclass(frozen=True)
class Point:
    """Floating-point pixel position."""
    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance in pixels."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class BoundingBox:
    """Inclusive integer pixel bounds of a segmented region."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def __post_init__(self):
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"Invalid bounding box: ({self.min_x}, {self.min_y}, {self.max_x}, {self.max_y})"
            )

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)


@dataclass(frozen=True)
class SegmentationResult:
    """Cold cloud region measured in one frame.

    Attributes
    ----------
    recolored : np.ndarray or None
        Read-only display raster (H, W, 3|4), None when recoloring is off.
        Excluded from equality; compare with ``np.array_equal``.
    centroid : Point or None
        Mean position of cloud pixels. None iff ``area_px == 0``.
    bounding_box : BoundingBox or None
        Tight box around cloud pixels. None iff ``area_px == 0``.
    area_px : int
        Number of cloud pixels in the measured raster.
    scale : float
        Downscale factor applied before measuring (1.0 = native size).
    shape : tuple of int
        (height, width) of the measured raster.
    """
    recolored: Optional[np.ndarray] = field(repr=False, compare=False)
    centroid: Optional[Point]
    bounding_box: Optional[BoundingBox]
    area_px: int
    scale: float = 1.0
    shape: Tuple[int, int] = (0, 0)

    @property
    def is_empty(self) -> bool:
        """True when no cloud pixel was detected."""
        return self.area_px == 0


class Severity(str, Enum):
    """Growth-trend classification of a tracked cloud mass."""
    WARNING = "WARNING"
    SAFE = "SAFE"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class PredictionResult:
    """Forecast for the next frame of a three-frame sequence."""
    predicted_centroid: Point
    speed_estimate: float
    severity: Severity
    reason: str
    area_change_pct: Optional[float] = None
