# strikeprint/pipeline/features.py
"""
Per-frame feature vector (layout v3.1, 24 values).

  0-17  trajectories: left hand, right hand, left foot, right foot,
        left knee, right knee (x, y, z each)
  18    hip torsion reference (always 0 after normalization)
  19    shoulder torsion in degrees, i.e. the X-factor against the hips
  20-21 center of gravity offset (x, z)
  22-23 guard: nose to left hand, nose to right hand
"""

from typing import List

from strikeprint.utils.geometry import distance, yaw_degrees
from strikeprint.utils.landmarks import (
    LEFT_FOOT,
    LEFT_HAND,
    RIGHT_FOOT,
    RIGHT_HAND,
    Landmark,
)


TRAJECTORY_LANDMARKS = (
    ("left_hand", LEFT_HAND),
    ("right_hand", RIGHT_HAND),
    ("left_foot", LEFT_FOOT),
    ("right_foot", RIGHT_FOOT),
    ("left_knee", Landmark.LEFT_KNEE),
    ("right_knee", Landmark.RIGHT_KNEE),
)

FEATURE_NAMES = tuple(
    f"{name}_{axis}" for name, _ in TRAJECTORY_LANDMARKS for axis in "xyz"
) + (
    "hip_torsion_deg",
    "shoulder_torsion_deg",
    "cog_x",
    "cog_z",
    "guard_left",
    "guard_right",
)

FEATURE_COUNT = len(FEATURE_NAMES)


def extract(pose, cog) -> List[float]:
    features = []

    for _, idx in TRAJECTORY_LANDMARKS:
        features.extend(pose[idx][:3])

    features.append(0.0)
    features.append(yaw_degrees(pose[Landmark.LEFT_SHOULDER], pose[Landmark.RIGHT_SHOULDER]))

    features.append(cog[0])
    features.append(cog[2])

    features.append(distance(pose[Landmark.NOSE], pose[LEFT_HAND]))
    features.append(distance(pose[Landmark.NOSE], pose[RIGHT_HAND]))

    return [float(v) for v in features]
