"""Satellite image processing modules.

- loader: Decode image files into RGB rasters
- cloud_segmenter: Cold cloud segmentation and measurement
- trajectory_predictor: Centroid extrapolation and growth classification
"""

from meghnet.imagery.loader import ImageLoader, DecodeError, encode_png
from meghnet.imagery.cloud_segmenter import CloudSegmenter
from meghnet.imagery.trajectory_predictor import TrajectoryPredictor

__all__ = [
    "ImageLoader",
    "DecodeError",
    "encode_png",
    "CloudSegmenter",
    "TrajectoryPredictor",
]
