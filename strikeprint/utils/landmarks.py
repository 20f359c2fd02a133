# strikeprint/utils/landmarks.py
"""
MediaPipe Pose landmark layout (33 points) and array conversion helpers.

Every pose inside the pipeline is a numpy array shaped (33, 3) for
coordinates, or (33, 4) when visibility travels along as the last column.
"""

from enum import IntEnum

import numpy as np


class Landmark(IntEnum):
    NOSE = 0
    LEFT_EYE_INNER = 1
    LEFT_EYE = 2
    LEFT_EYE_OUTER = 3
    RIGHT_EYE_INNER = 4
    RIGHT_EYE = 5
    RIGHT_EYE_OUTER = 6
    LEFT_EAR = 7
    RIGHT_EAR = 8
    MOUTH_LEFT = 9
    MOUTH_RIGHT = 10

    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16

    LEFT_PINKY = 17
    RIGHT_PINKY = 18
    LEFT_INDEX = 19
    RIGHT_INDEX = 20
    LEFT_THUMB = 21
    RIGHT_THUMB = 22

    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28

    LEFT_HEEL = 29
    RIGHT_HEEL = 30
    LEFT_FOOT_INDEX = 31
    RIGHT_FOOT_INDEX = 32


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2


NUM_LANDMARKS = len(Landmark)

# The index landmark stands in for the hand, the foot index for the foot
LEFT_HAND = Landmark.LEFT_INDEX
RIGHT_HAND = Landmark.RIGHT_INDEX
LEFT_FOOT = Landmark.LEFT_FOOT_INDEX
RIGHT_FOOT = Landmark.RIGHT_FOOT_INDEX

# Left/right pairs exchanged when a pose is mirrored
MIRROR_PAIRS = (
    (Landmark.LEFT_SHOULDER, Landmark.RIGHT_SHOULDER),
    (Landmark.LEFT_ELBOW, Landmark.RIGHT_ELBOW),
    (Landmark.LEFT_WRIST, Landmark.RIGHT_WRIST),
    (Landmark.LEFT_PINKY, Landmark.RIGHT_PINKY),
    (Landmark.LEFT_INDEX, Landmark.RIGHT_INDEX),
    (Landmark.LEFT_THUMB, Landmark.RIGHT_THUMB),
    (Landmark.LEFT_HIP, Landmark.RIGHT_HIP),
    (Landmark.LEFT_KNEE, Landmark.RIGHT_KNEE),
    (Landmark.LEFT_ANKLE, Landmark.RIGHT_ANKLE),
    (Landmark.LEFT_HEEL, Landmark.RIGHT_HEEL),
    (Landmark.LEFT_FOOT_INDEX, Landmark.RIGHT_FOOT_INDEX),
)


def _field(p, *names, default=None):
    for name in names:
        if isinstance(p, dict):
            if p.get(name) is not None:
                return p[name]
        elif getattr(p, name, None) is not None:
            return getattr(p, name)
    return default


def is_complete(landmarks) -> bool:
    """True when a frame carries at least the 33 pose landmarks."""
    return landmarks is not None and len(landmarks) >= NUM_LANDMARKS


def pose_array(landmarks, with_visibility: bool = False) -> np.ndarray:
    """
    Convert one frame to a float array.

    Accepts an ndarray, a list of dicts ({"x","y","z","visibility"|"vis"|"v"})
    or a list of objects with x/y/z/visibility attributes (pydantic models,
    MediaPipe landmarks). Entries past the 33rd are dropped.
    """
    cols = 4 if with_visibility else 3

    if isinstance(landmarks, np.ndarray):
        arr = np.asarray(landmarks, dtype=float)[:NUM_LANDMARKS]
        if arr.shape[1] >= cols:
            return arr[:, :cols].copy()
        out = np.zeros((len(arr), cols), float)
        out[:, :arr.shape[1]] = arr
        return out

    rows = []
    for p in list(landmarks)[:NUM_LANDMARKS]:
        row = [
            float(_field(p, "x", default=0.0)),
            float(_field(p, "y", default=0.0)),
            float(_field(p, "z", default=0.0)),
        ]
        if with_visibility:
            row.append(float(_field(p, "visibility", "vis", "v", default=0.0)))
        rows.append(row)
    return np.array(rows, dtype=float).reshape(-1, cols)


def midpoint(a, b):
    return (np.asarray(a, float) + np.asarray(b, float)) / 2.0


def hip_center(pose):
    return midpoint(pose[..., Landmark.LEFT_HIP, :3], pose[..., Landmark.RIGHT_HIP, :3])


def shoulder_center(pose):
    return midpoint(
        pose[..., Landmark.LEFT_SHOULDER, :3],
        pose[..., Landmark.RIGHT_SHOULDER, :3],
    )
