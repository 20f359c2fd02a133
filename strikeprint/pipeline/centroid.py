# strikeprint/pipeline/centroid.py
"""
Whole-body center of gravity from segmental mass fractions (Dempster).

The table sums to roughly 0.99; the result is divided by the accumulated
weight, so the missing mass does not bias the estimate. Keep the values as
they are: stored fingerprints were produced with them.
"""

import numpy as np

from strikeprint.utils.landmarks import Landmark as L, hip_center, midpoint, shoulder_center


TRUNK_WEIGHT = 0.50

SEGMENT_WEIGHTS = (
    # (segment, landmarks averaged for its center, mass fraction)
    ("head", (L.NOSE,), 0.07),
    ("upper_arm_left", (L.LEFT_SHOULDER, L.LEFT_ELBOW), 0.028),
    ("upper_arm_right", (L.RIGHT_SHOULDER, L.RIGHT_ELBOW), 0.028),
    ("forearm_left", (L.LEFT_ELBOW, L.LEFT_WRIST), 0.016),
    ("forearm_right", (L.RIGHT_ELBOW, L.RIGHT_WRIST), 0.016),
    ("hand_left", (L.LEFT_WRIST, L.LEFT_PINKY, L.LEFT_INDEX, L.LEFT_THUMB), 0.006),
    ("hand_right", (L.RIGHT_WRIST, L.RIGHT_PINKY, L.RIGHT_INDEX, L.RIGHT_THUMB), 0.006),
    ("thigh_left", (L.LEFT_HIP, L.LEFT_KNEE), 0.10),
    ("thigh_right", (L.RIGHT_HIP, L.RIGHT_KNEE), 0.10),
    ("shank_left", (L.LEFT_KNEE, L.LEFT_ANKLE), 0.0465),
    ("shank_right", (L.RIGHT_KNEE, L.RIGHT_ANKLE), 0.0465),
    ("foot_left", (L.LEFT_ANKLE, L.LEFT_HEEL, L.LEFT_FOOT_INDEX), 0.0145),
    ("foot_right", (L.RIGHT_ANKLE, L.RIGHT_HEEL, L.RIGHT_FOOT_INDEX), 0.0145),
)


def total_weight():
    return TRUNK_WEIGHT + sum(w for _, _, w in SEGMENT_WEIGHTS)


def centroid(pose):
    """
    Center of gravity of a smoothed (33, 3) pose, returned as a (3,) array.
    """
    pose = np.asarray(pose, dtype=float)[:, :3]

    trunk = midpoint(shoulder_center(pose), hip_center(pose))
    acc = trunk * TRUNK_WEIGHT
    mass = TRUNK_WEIGHT

    for _, indices, weight in SEGMENT_WEIGHTS:
        center = pose[list(indices)].mean(axis=0)
        acc = acc + center * weight
        mass += weight

    return acc / mass
