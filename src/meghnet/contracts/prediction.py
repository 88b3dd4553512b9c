"""Prediction stage contracts.

Before prediction: all three frames must carry a centroid and the areas
must be non-negative. After prediction: the forecast must be finite.
"""

import math
from typing import Optional, Sequence

from meghnet.contracts.base import require
from meghnet.models import Point, PredictionResult


def assert_trackable(centroids: Sequence[Optional[Point]], area_t0: int, area_t60: int) -> None:
    """Enforce the trajectory precondition.

    The caller must ensure every segmentation produced a non-empty region
    before asking for a prediction; the predictor does not guess.

    Parameters
    ----------
    centroids : sequence of Point or None
        Centroids at t0, t30 and t60.
    area_t0, area_t60 : int
        Cloud pixel areas of the first and last frames.

    Raises
    ------
    ContractViolation
        If a centroid is missing or an area is negative
    """
    require(
        len(centroids) == 3,
        f"Trajectory contract violated: need exactly 3 centroids, got {len(centroids)}"
    )
    for idx, centroid in enumerate(centroids):
        require(
            centroid is not None,
            f"Trajectory contract violated: missing centroid for frame {idx}"
        )
    require(
        area_t0 >= 0 and area_t60 >= 0,
        f"Trajectory contract violated: negative area (t0={area_t0}, t60={area_t60})"
    )


def assert_prediction(result: PredictionResult) -> None:
    """Enforce prediction output contract.

    Raises
    ------
    ContractViolation
        If the predicted point or speed is not finite, or speed is negative
    """
    p = result.predicted_centroid
    require(
        math.isfinite(p.x) and math.isfinite(p.y),
        f"Prediction contract violated: predicted centroid is not finite ({p.x}, {p.y})"
    )
    require(
        math.isfinite(result.speed_estimate) and result.speed_estimate >= 0,
        f"Prediction contract violated: invalid speed estimate {result.speed_estimate}"
    )
    if result.area_change_pct is not None:
        require(
            math.isfinite(result.area_change_pct),
            f"Prediction contract violated: area change is not finite ({result.area_change_pct})"
        )
