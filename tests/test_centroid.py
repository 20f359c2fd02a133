import numpy as np
import pytest

from strikeprint.pipeline.centroid import SEGMENT_WEIGHTS, TRUNK_WEIGHT, centroid, total_weight


def test_weights_are_approximately_unit():
    assert total_weight() == pytest.approx(0.992, abs=1e-9)
    assert len(SEGMENT_WEIGHTS) == 13
    assert TRUNK_WEIGHT == 0.50


def test_collapsed_pose_centroid_is_that_point():
    pose = np.tile([0.3, -0.2, 1.5], (33, 1))
    assert centroid(pose) == pytest.approx([0.3, -0.2, 1.5])


def test_translation_moves_centroid(pose):
    c = centroid(pose)
    shifted = centroid(pose + [1.0, 2.0, 3.0])
    assert shifted == pytest.approx(c + [1.0, 2.0, 3.0])


def test_symmetric_pose_has_zero_lateral_offset(pose):
    sym = pose.copy()
    sym[:, 2] = 0.0
    # make both sides mirror images
    from strikeprint.utils.landmarks import MIRROR_PAIRS
    for l, r in MIRROR_PAIRS:
        sym[r] = sym[l] * [-1, 1, 1]
    sym[:11, 0] = 0.0
    assert centroid(sym)[0] == pytest.approx(0.0, abs=1e-12)
