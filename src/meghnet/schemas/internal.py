"""Frozen configuration handed to CloudSegmenter, TrajectoryPredictor and
SequenceProcessor.

Every field is required here; defaults belong to ParamConfig. Components
read attributes directly and never re-validate or fall back.
"""

from typing import Literal
from pydantic import Field, ConfigDict
from meghnet.schemas.base import MeghnetBaseModel


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalSegmenterConfig(MeghnetBaseModel):
    """Runtime segmentation configuration."""
    threshold: float
    darken_factor: float
    downscale: bool
    max_width: int
    resample: Literal["area", "linear", "nearest", "cubic"]
    recolor: bool
    highlight_color: tuple[int, int, int]
    draw_overlay: bool
    box_color: tuple[int, int, int]
    centroid_color: tuple[int, int, int]


class InternalPredictorConfig(MeghnetBaseModel):
    """Runtime prediction configuration."""
    interval_factor: float = Field(gt=0)
    speed_calibration: float = Field(gt=0)
    growth_threshold_pct: float
    dissipation_threshold_pct: float


class InternalPipelineConfig(MeghnetBaseModel):
    """Runtime sequence processing configuration."""
    frame_labels: tuple[str, str, str]
    predicted_label: str
    max_workers: int = Field(ge=1, le=32)


class InternalLoggingConfig(MeghnetBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(MeghnetBaseModel):
    """Resolved runtime configuration (read-only).

    Produced by ``resolve_config``; components copy the values they need in
    their constructors::

        def __init__(self, config: InternalConfig):
            self.threshold = config.segmenter.threshold
            self.speed_calibration = config.predictor.speed_calibration
    """

    segmenter: InternalSegmenterConfig
    predictor: InternalPredictorConfig
    pipeline: InternalPipelineConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
