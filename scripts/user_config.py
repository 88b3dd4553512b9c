"""Megh-Net User Configuration.

This is the user-facing configuration file. Modify settings here to customize
segmentation and prediction. Expert defaults live in meghnet.schemas.param.

Usage:
    from meghnet.schemas import init_runtime_config
    from meghnet.pipeline import SequenceProcessor

    config = init_runtime_config("scripts/user_config.py")
    result = SequenceProcessor(config).process(["t0.png", "t30.png", "t60.png"])
"""

CONFIG = {
    # ========================================================================
    # SEGMENTATION SETTINGS
    # ========================================================================
    "THRESHOLD": 180,         # Mean RGB brightness above this is cloud (0-255)
    "DARKEN_FACTOR": 0.3,     # Background dimming in the recolored image
    "DOWNSCALE": True,        # Shrink wide images before measuring
    "MAX_WIDTH": 500,         # Width cap in pixels when downscaling
    "RECOLOR": True,          # Build the highlighted display image
    "DRAW_OVERLAY": False,    # Draw bounding box and centroid on the display

    # ========================================================================
    # PREDICTION SETTINGS
    # ========================================================================
    "INTERVAL_FACTOR": 2.0,   # 1 / hours between frames (30 min spacing)
    "SPEED_CALIBRATION": 0.5, # px/hour -> displayed speed unit
    "GROWTH_THRESHOLD_PCT": 5.0,
    "DISSIPATION_THRESHOLD_PCT": -5.0,

    # ========================================================================
    # OPERATIONAL
    # ========================================================================
    "MAX_WORKERS": 3,
    "LOG_LEVEL": "INFO",
}
