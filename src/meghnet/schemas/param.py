"""ParamConfig: Expert defaults for Megh-Net.

This module defines the complete default configuration. ALL tunable
parameters must have defaults here. No runtime code should define fallback
values - this is the single source of truth for defaults.

The thresholds and calibration constants are demonstration values without a
physical derivation. They are kept configurable so they can be tuned against
real imagery.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal
from pydantic import Field, field_validator, model_validator
from meghnet.schemas.base import MeghnetBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class SegmenterConfig(MeghnetBaseModel):
    """Cold cloud segmentation configuration."""
    threshold: float = Field(180.0, ge=0, le=255, description="Brightness threshold on a 0-255 scale")
    darken_factor: float = Field(0.3, ge=0, le=1.0, description="Background multiplier for display")
    downscale: bool = True
    max_width: int = Field(500, ge=1, description="Downscale cap in pixels")
    resample: Literal["area", "linear", "nearest", "cubic"] = "area"
    recolor: bool = True
    highlight_color: tuple[int, int, int] = (0, 255, 255)
    draw_overlay: bool = False
    box_color: tuple[int, int, int] = (239, 68, 68)
    centroid_color: tuple[int, int, int] = (250, 204, 21)

    @field_validator("threshold", mode="before")
    @classmethod
    def coerce_threshold_to_float(cls, v):
        """Allow int or float for threshold."""
        return float(v)

    @field_validator("highlight_color", "box_color", "centroid_color")
    @classmethod
    def check_color_range(cls, v):
        """Colors are 8-bit RGB triplets."""
        if any(c < 0 or c > 255 for c in v):
            raise ValueError(f"Color channels must be within 0-255, got {v}")
        return v

    @field_validator("resample", mode="before")
    @classmethod
    def normalize_resample_name(cls, v):
        """Normalize resample names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class PredictorConfig(MeghnetBaseModel):
    """Trajectory extrapolation and severity classification."""
    interval_factor: float = Field(2.0, gt=0, description="Per-interval rate multiplier (1 / interval hours)")
    speed_calibration: float = Field(0.5, gt=0, description="Pixel rate to display-unit scale")
    growth_threshold_pct: float = Field(5.0, description="Area growth above this is a WARNING")
    dissipation_threshold_pct: float = Field(-5.0, description="Area change below this is dissipating")

    @model_validator(mode="after")
    def check_threshold_order(self):
        """Dissipation threshold cannot exceed growth threshold."""
        if self.dissipation_threshold_pct > self.growth_threshold_pct:
            raise ValueError(
                f"dissipation_threshold_pct ({self.dissipation_threshold_pct}) must be "
                f"<= growth_threshold_pct ({self.growth_threshold_pct})"
            )
        return self


class PipelineConfig(MeghnetBaseModel):
    """Three-frame sequence processing."""
    frame_labels: tuple[str, str, str] = ("T0", "T30", "T60")
    predicted_label: str = "T90"
    max_workers: int = Field(3, ge=1, le=32)


class LoggingConfig(MeghnetBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(MeghnetBaseModel):
    """Complete expert configuration with all defaults.

    This is the single source of truth for all parameters.
    Every tunable parameter MUST have a default here.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg)

    Runtime code only sees InternalConfig.
    """

    segmenter: SegmenterConfig = Field(default_factory=SegmenterConfig)
    predictor: PredictorConfig = Field(default_factory=PredictorConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
