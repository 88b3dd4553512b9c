"""Extrapolate a cloud mass one step ahead and classify its growth trend.

Given the centroids of three equally spaced frames (T0, T30, T60) and the
cloud areas of the first and last frame, the predictor produces:

- the T90 centroid, using the most recent displacement only (a recent turn
  dominates the forecast),
- a speed estimate: mean per-interval pixel rate times a calibration
  constant that maps it to a km/h-like display unit,
- a WARNING/SAFE severity from the relative area change, or UNKNOWN when
  the first frame has no cloud and the change is undefined.

The calibration constant and thresholds are display approximations, not
physical quantities.
"""

import logging
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

import numpy as np

from meghnet.contracts import assert_prediction, assert_trackable
from meghnet.models import Point, PredictionResult, SegmentationResult, Severity

if TYPE_CHECKING:
    from meghnet.schemas import InternalConfig

__all__ = ['TrajectoryPredictor', 'extrapolate_position', 'interval_speed']

logger = logging.getLogger(__name__)


def extrapolate_position(t30: Point, t60: Point) -> Point:
    """Constant-velocity step: t60 + (t60 - t30)."""
    return Point(x=t60.x + (t60.x - t30.x), y=t60.y + (t60.y - t30.y))


def interval_speed(p1: Point, p2: Point, interval_factor: float) -> float:
    """Pixel distance between two centroids scaled to a per-hour rate."""
    return p1.distance_to(p2) * interval_factor


def _format_span(hours: float) -> str:
    hours = round(hours, 2)
    return f"{hours:g} hour" if hours == 1 else f"{hours:g} hours"


class TrajectoryPredictor:
    """Stateless T90 forecast from three centroids and two areas.

    Configuration
    =============
    Read from ``config.predictor``:

    - `interval_factor` : float, default 2.0
        Multiplier turning a per-interval distance into a per-hour rate
        (2 = 30 minute spacing). Replaced by timestamp-derived factors when
        timestamps are passed to ``predict``.
    - `speed_calibration` : float, default 0.5
        Scale from pixels/hour to the displayed speed unit.
    - `growth_threshold_pct` : float, default 5.0
    - `dissipation_threshold_pct` : float, default -5.0

    Examples
    --------
    >>> predictor = TrajectoryPredictor(config)
    >>> result = predictor.predict(Point(0, 0), Point(3, 4), Point(6, 8), 100, 106)
    >>> result.predicted_centroid, result.speed_estimate, result.severity
    (Point(x=9.0, y=12.0), 5.0, <Severity.WARNING: 'WARNING'>)
    """

    def __init__(self, config: "InternalConfig"):
        self.config = config
        pred = config.predictor
        self.interval_factor = pred.interval_factor
        self.speed_calibration = pred.speed_calibration
        self.growth_threshold_pct = pred.growth_threshold_pct
        self.dissipation_threshold_pct = pred.dissipation_threshold_pct

        logger.info("TrajectoryPredictor initialized: interval_factor=%s, calibration=%s, "
                    "thresholds=(%s, %s)", self.interval_factor, self.speed_calibration,
                    self.dissipation_threshold_pct, self.growth_threshold_pct)

    def predict(self, t0: Optional[Point], t30: Optional[Point], t60: Optional[Point],
                area_t0: int, area_t60: int,
                timestamps: Optional[Sequence[datetime]] = None) -> PredictionResult:
        """Forecast the next centroid and classify the area trend.

        Parameters
        ----------
        t0, t30, t60 : Point
            Centroids of the three frames in time order.
        area_t0, area_t60 : int
            Cloud pixel areas of the first and last frames.
        timestamps : sequence of datetime, optional
            Acquisition times of the three frames. When given, each
            interval's rate uses the actual elapsed time instead of
            ``interval_factor``.

        Returns
        -------
        PredictionResult

        Raises
        ------
        ContractViolation
            If a centroid is missing or an area is negative.
        ValueError
            If timestamps are not three strictly increasing values.
        """
        assert_trackable([t0, t30, t60], area_t0, area_t60)

        factors = self._interval_factors(timestamps)
        predicted = extrapolate_position(t30, t60)

        rates = [
            interval_speed(t0, t30, factors[0]),
            interval_speed(t30, t60, factors[1]),
        ]
        speed = float(np.mean(rates)) * self.speed_calibration

        span_hours = self._observation_span(timestamps)
        severity, reason, change = self.classify_area_change(area_t0, area_t60, span_hours)

        result = PredictionResult(
            predicted_centroid=predicted,
            speed_estimate=speed,
            severity=severity,
            reason=reason,
            area_change_pct=change,
        )
        assert_prediction(result)

        logger.debug("Prediction: T90=(%.2f, %.2f), speed=%.2f, severity=%s",
                     predicted.x, predicted.y, speed, severity.value)
        return result

    def predict_from_results(self, results: Sequence[SegmentationResult],
                             timestamps: Optional[Sequence[datetime]] = None) -> PredictionResult:
        """Forecast from three segmentation results (T0, T30, T60)."""
        if len(results) != 3:
            raise ValueError(f"Need exactly 3 segmentation results, got {len(results)}")

        r0, r30, r60 = results
        return self.predict(r0.centroid, r30.centroid, r60.centroid,
                            r0.area_px, r60.area_px, timestamps=timestamps)

    def classify_area_change(self, area_t0: int, area_t60: int,
                             span_hours: float = 1.0) -> Tuple[Severity, str, Optional[float]]:
        """Severity, explanation and percent change of the cloud area.

        A zero starting area makes the change undefined; the result is
        UNKNOWN and no division is attempted.
        """
        if area_t0 == 0:
            return (
                Severity.UNKNOWN,
                "Undefined area change: no cloud detected at T0, growth trend cannot be assessed.",
                None,
            )

        change = (area_t60 - area_t0) / area_t0 * 100

        if change > self.growth_threshold_pct:
            reason = (f"Developing storm: cloud cluster area increased by {change:.1f}% "
                      f"in {_format_span(span_hours)}.")
            return Severity.WARNING, reason, change

        if change < self.dissipation_threshold_pct:
            reason = f"Dissipating system: cloud cluster area decreased by {abs(change):.1f}%."
            return Severity.SAFE, reason, change

        return Severity.SAFE, "Stable system: no significant change in cloud mass.", change

    def _observation_span(self, timestamps: Optional[Sequence[datetime]]) -> float:
        """Hours between the first and last frame."""
        if timestamps is None:
            return 2.0 / self.interval_factor
        return (timestamps[-1] - timestamps[0]).total_seconds() / 3600.0

    def _interval_factors(self, timestamps: Optional[Sequence[datetime]]) -> List[float]:
        """Per-interval rate multipliers (1 / hours elapsed)."""
        if timestamps is None:
            return [self.interval_factor, self.interval_factor]

        if len(timestamps) != 3:
            raise ValueError(f"Need exactly 3 timestamps, got {len(timestamps)}")

        factors = []
        for start, end in zip(timestamps[:-1], timestamps[1:]):
            hours = (end - start).total_seconds() / 3600.0
            if hours <= 0:
                raise ValueError(f"Timestamps must be strictly increasing: {start} -> {end}")
            factors.append(1.0 / hours)

        return factors
