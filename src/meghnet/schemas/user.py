"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs in a variety of formats, with aliases
for common naming patterns (e.g., THRESHOLD → threshold, LOG_LEVEL → log_level).

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults. Validation is lenient to accept
both uppercase and lowercase keys, integers where floats are expected, etc.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from meghnet.schemas.base import MeghnetBaseModel


class UserSegmenterConfig(MeghnetBaseModel):
    """User-facing segmentation config."""
    threshold: Optional[float] = None
    darken_factor: Optional[float] = None
    downscale: Optional[bool] = None
    max_width: Optional[int] = None
    resample: Optional[str] = None
    recolor: Optional[bool] = None
    highlight_color: Optional[tuple[int, int, int]] = None
    draw_overlay: Optional[bool] = None
    box_color: Optional[tuple[int, int, int]] = None
    centroid_color: Optional[tuple[int, int, int]] = None

    @field_validator("threshold", "darken_factor", mode="before")
    @classmethod
    def coerce_numeric(cls, v):
        """Accept int or float."""
        if v is not None:
            return float(v)
        return v

    @field_validator("resample", mode="before")
    @classmethod
    def normalize_resample(cls, v):
        """Normalize resample names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class UserPredictorConfig(MeghnetBaseModel):
    """User-facing predictor config."""
    interval_factor: Optional[float] = None
    speed_calibration: Optional[float] = None
    growth_threshold_pct: Optional[float] = None
    dissipation_threshold_pct: Optional[float] = None


class UserPipelineConfig(MeghnetBaseModel):
    """User-facing pipeline config."""
    frame_labels: Optional[tuple[str, str, str]] = None
    predicted_label: Optional[str] = None
    max_workers: Optional[int] = None


class UserConfig(MeghnetBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Users only specify
    what they want to override from ParamConfig defaults.

    This config is converted to internal overrides during resolution.

    Usage
    -----
        user_cfg = UserConfig(
            THRESHOLD=200,
            SPEED_CALIBRATION=0.8,
            LOG_LEVEL="DEBUG",
        )

        internal = resolve_config(param_cfg, user_cfg)
    """

    # Segmentation settings (flat aliases)
    threshold: Optional[float] = Field(None, alias="THRESHOLD")
    darken_factor: Optional[float] = Field(None, alias="DARKEN_FACTOR")
    downscale: Optional[bool] = Field(None, alias="DOWNSCALE")
    max_width: Optional[int] = Field(None, alias="MAX_WIDTH")
    recolor: Optional[bool] = Field(None, alias="RECOLOR")
    draw_overlay: Optional[bool] = Field(None, alias="DRAW_OVERLAY")

    # Prediction settings (flat aliases)
    interval_factor: Optional[float] = Field(None, alias="INTERVAL_FACTOR")
    speed_calibration: Optional[float] = Field(None, alias="SPEED_CALIBRATION")
    growth_threshold_pct: Optional[float] = Field(None, alias="GROWTH_THRESHOLD_PCT")
    dissipation_threshold_pct: Optional[float] = Field(None, alias="DISSIPATION_THRESHOLD_PCT")

    # Operational settings
    max_workers: Optional[int] = Field(None, alias="MAX_WORKERS")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(None, alias="LOG_LEVEL")

    # Nested overrides (advanced users)
    segmenter: Optional[UserSegmenterConfig] = None
    predictor: Optional[UserPredictorConfig] = None
    pipeline: Optional[UserPipelineConfig] = None

    model_config = MeghnetBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator(
        "threshold", "darken_factor", "interval_factor", "speed_calibration",
        "growth_threshold_pct", "dissipation_threshold_pct", mode="before",
    )
    @classmethod
    def coerce_numeric_fields(cls, v):
        """Accept int or float for numeric fields."""
        if v is not None:
            return float(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        # Segmenter section
        segmenter = {}
        for name in ("threshold", "darken_factor", "downscale", "max_width",
                     "recolor", "draw_overlay"):
            value = getattr(self, name)
            if value is not None:
                segmenter[name] = value

        # Merge with explicit segmenter config
        if self.segmenter is not None:
            segmenter.update(self.segmenter.model_dump(exclude_none=True))

        if segmenter:
            overrides["segmenter"] = segmenter

        # Predictor section
        predictor = {}
        for name in ("interval_factor", "speed_calibration",
                     "growth_threshold_pct", "dissipation_threshold_pct"):
            value = getattr(self, name)
            if value is not None:
                predictor[name] = value

        if self.predictor is not None:
            predictor.update(self.predictor.model_dump(exclude_none=True))

        if predictor:
            overrides["predictor"] = predictor

        # Pipeline section
        pipeline = {}
        if self.max_workers is not None:
            pipeline["max_workers"] = self.max_workers

        if self.pipeline is not None:
            pipeline.update(self.pipeline.model_dump(exclude_none=True))

        if pipeline:
            overrides["pipeline"] = pipeline

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
