"""Formal stage invariants.

This file documents what each stage MUST produce. Use it as a reviewer
anchor; the assert_* functions enforce these at runtime.
"""

STAGE_INVARIANTS = {
    "decode": [
        "Raster is a uint8 numpy array",
        "Shape is (H, W), (H, W, 3) or (H, W, 4) with H, W > 0",
        "Color rasters are RGB(A) ordered",
    ],

    "segmentation": [
        "area_px >= 0",
        "centroid and bounding_box are None iff area_px == 0",
        "Centroid lies inside the bounding box",
        "Recolored raster (if any) matches the measured (H, W)",
        "scale is the same downscale rule for every frame",
    ],

    "prediction": [
        "Requires three centroids (no empty frames)",
        "Predicted centroid = t60 + (t60 - t30)",
        "Speed estimate is finite and >= 0",
        "Zero t0 area yields UNKNOWN severity, never NaN or inf",
    ],
}

# Which stages are optional vs required
STAGE_REQUIREMENTS = {
    "decode": "OPTIONAL",        # Callers may pass decoded rasters
    "segmentation": "REQUIRED",  # Every frame must be segmented
    "prediction": "OPTIONAL",    # Only if all three frames have a cloud
}
