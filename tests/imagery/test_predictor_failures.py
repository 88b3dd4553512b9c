"""Test TrajectoryPredictor precondition handling."""

import numpy as np
import pytest

from meghnet.contracts import ContractViolation
from meghnet.imagery.cloud_segmenter import CloudSegmenter
from meghnet.imagery.trajectory_predictor import TrajectoryPredictor
from meghnet.models import Point, Severity

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("missing", [0, 1, 2])
def test_missing_centroid_raises(missing, internal_config):
    centroids = [Point(0, 0), Point(1, 1), Point(2, 2)]
    centroids[missing] = None

    with pytest.raises(ContractViolation, match=f"missing centroid for frame {missing}"):
        TrajectoryPredictor(internal_config).predict(*centroids, 10, 10)


def test_negative_area_raises(internal_config):
    with pytest.raises(ContractViolation, match="negative area"):
        TrajectoryPredictor(internal_config).predict(Point(0, 0), Point(1, 1), Point(2, 2), -1, 10)


def test_predict_from_results(make_blob, internal_config):
    seg = CloudSegmenter(internal_config)
    frames = [
        make_blob(30, 30, x0=2, y0=2, size_x=4, size_y=4),
        make_blob(30, 30, x0=6, y0=2, size_x=4, size_y=4),
        make_blob(30, 30, x0=10, y0=2, size_x=5, size_y=4),
    ]
    results = [seg.segment(f) for f in frames]

    prediction = TrajectoryPredictor(internal_config).predict_from_results(results)

    # centroids x: 3.5, 7.5, 12.0 -> 12 + 4.5
    assert prediction.predicted_centroid == Point(16.5, 3.5)
    # area 16 -> 20 is +25%
    assert prediction.severity == Severity.WARNING


def test_predict_from_results_with_empty_frame(make_blob, internal_config):
    seg = CloudSegmenter(internal_config)
    results = [
        seg.segment(make_blob(10, 10, x0=1, y0=1, size_x=2, size_y=2)),
        seg.segment(np.zeros((10, 10, 3), dtype=np.uint8)),
        seg.segment(make_blob(10, 10, x0=5, y0=5, size_x=2, size_y=2)),
    ]

    with pytest.raises(ContractViolation, match="frame 1"):
        TrajectoryPredictor(internal_config).predict_from_results(results)


def test_predict_from_results_needs_three(internal_config):
    with pytest.raises(ValueError, match="exactly 3"):
        TrajectoryPredictor(internal_config).predict_from_results([])
