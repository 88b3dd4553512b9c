"""Three-frame cloud tracking pipeline.

Takes the T0, T30 and T60 images of a cloud mass through decoding,
segmentation and trajectory prediction, and collects the results in a
table suitable for plotting or export.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from meghnet.imagery.cloud_segmenter import CloudSegmenter
from meghnet.imagery.loader import ImageLoader
from meghnet.imagery.trajectory_predictor import TrajectoryPredictor
from meghnet.models import PredictionResult, SegmentationResult

if TYPE_CHECKING:
    from meghnet.schemas import InternalConfig

__all__ = ['SequenceProcessor', 'SequenceResult', 'FrameResult']

logger = logging.getLogger(__name__)

FrameSource = Union[bytes, bytearray, str, Path, np.ndarray]

TABLE_COLUMNS = [
    "frame", "kind", "centroid_x", "centroid_y", "area_px",
    "bbox_min_x", "bbox_min_y", "bbox_max_x", "bbox_max_y", "scale",
]


@dataclass(frozen=True)
class FrameResult:
    """Segmentation of one labeled frame."""
    label: str
    segmentation: SegmentationResult


@dataclass(frozen=True)
class SequenceResult:
    """Outcome of processing one three-frame sequence.

    ``prediction`` is None when any frame had no detectable cloud.
    """
    frames: Tuple[FrameResult, FrameResult, FrameResult]
    prediction: Optional[PredictionResult]
    predicted_label: str = "T90"

    @property
    def has_prediction(self) -> bool:
        return self.prediction is not None

    def to_dataframe(self) -> pd.DataFrame:
        """Trajectory table: one row per observed frame plus the forecast.

        Observed rows carry area and bounding box; empty frames have NaN
        centroid columns. The predicted row (if any) only has a centroid.
        """
        rows = []
        for frame in self.frames:
            seg = frame.segmentation
            box = seg.bounding_box
            rows.append({
                "frame": frame.label,
                "kind": "observed",
                "centroid_x": seg.centroid.x if seg.centroid else np.nan,
                "centroid_y": seg.centroid.y if seg.centroid else np.nan,
                "area_px": seg.area_px,
                "bbox_min_x": box.min_x if box else pd.NA,
                "bbox_min_y": box.min_y if box else pd.NA,
                "bbox_max_x": box.max_x if box else pd.NA,
                "bbox_max_y": box.max_y if box else pd.NA,
                "scale": seg.scale,
            })

        if self.prediction is not None:
            point = self.prediction.predicted_centroid
            rows.append({
                "frame": self.predicted_label,
                "kind": "predicted",
                "centroid_x": point.x,
                "centroid_y": point.y,
                "area_px": pd.NA,
                "bbox_min_x": pd.NA,
                "bbox_min_y": pd.NA,
                "bbox_max_x": pd.NA,
                "bbox_max_y": pd.NA,
                "scale": np.nan,
            })

        df = pd.DataFrame(rows, columns=TABLE_COLUMNS)
        int_cols = ["area_px", "bbox_min_x", "bbox_min_y", "bbox_max_x", "bbox_max_y"]
        df[int_cols] = df[int_cols].astype("Int64")
        return df


class SequenceProcessor:
    """Decode, segment and track a T0/T30/T60 image sequence.

    The three frames are independent until prediction, so they are decoded
    and segmented on a thread pool. Prediction runs after all three have
    finished, and only if each frame contains a cloud region.

    Errors are not caught: a corrupt image raises ``DecodeError`` and an
    invalid raster raises ``ContractViolation`` from ``process``.

    Example usage::

        processor = SequenceProcessor(config)
        result = processor.process(["t0.png", "t30.png", "t60.png"])
        if result.has_prediction:
            print(result.prediction.severity, result.prediction.reason)
        table = result.to_dataframe()
    """

    def __init__(self, config: "InternalConfig", loader: Optional[ImageLoader] = None):
        self.config = config
        self.frame_labels = config.pipeline.frame_labels
        self.predicted_label = config.pipeline.predicted_label
        self.max_workers = config.pipeline.max_workers

        self.loader = loader or ImageLoader()
        self.segmenter = CloudSegmenter(config)
        self.predictor = TrajectoryPredictor(config)

        logger.info("SequenceProcessor initialized: frames=%s, workers=%d",
                    list(self.frame_labels), self.max_workers)

    def process(self, sources: Sequence[FrameSource],
                timestamps: Optional[Sequence[datetime]] = None) -> SequenceResult:
        """Run the full pipeline on three frames.

        Parameters
        ----------
        sources : sequence of bytes, path or np.ndarray
            T0, T30 and T60 images, as encoded bytes, file paths or
            decoded uint8 rasters.
        timestamps : sequence of datetime, optional
            Acquisition times; forwarded to the predictor.

        Returns
        -------
        SequenceResult
        """
        if len(sources) != 3:
            raise ValueError(f"Need exactly 3 frames (T0, T30, T60), got {len(sources)}")

        with ThreadPoolExecutor(max_workers=self.max_workers,
                                thread_name_prefix="meghnet-segment") as pool:
            futures = [pool.submit(self.process_frame, src) for src in sources]
            segmentations = [f.result() for f in futures]

        frames = tuple(
            FrameResult(label=label, segmentation=seg)
            for label, seg in zip(self.frame_labels, segmentations)
        )

        empty = [f.label for f in frames if f.segmentation.is_empty]
        if empty:
            logger.warning("No detectable cloud in frame(s) %s; skipping trajectory prediction",
                           ", ".join(empty))
            prediction = None
        else:
            prediction = self.predictor.predict_from_results(segmentations, timestamps=timestamps)
            logger.info("Predicted %s centroid (%.1f, %.1f): %s",
                        self.predicted_label,
                        prediction.predicted_centroid.x,
                        prediction.predicted_centroid.y,
                        prediction.severity.value)

        return SequenceResult(frames=frames, prediction=prediction,
                              predicted_label=self.predicted_label)

    def process_frame(self, source: FrameSource) -> SegmentationResult:
        """Decode (if needed) and segment a single frame."""
        return self.segmenter.segment(self._to_raster(source))

    def _to_raster(self, source: FrameSource) -> np.ndarray:
        if isinstance(source, np.ndarray):
            return source
        if isinstance(source, (bytes, bytearray)):
            return self.loader.decode(bytes(source))
        if isinstance(source, (str, Path)):
            return self.loader.load(source)
        raise TypeError(f"Unsupported frame source: {type(source).__name__}")
