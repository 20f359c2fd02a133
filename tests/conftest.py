import numpy as np
import pytest

from strikeprint.models.window_model import CapturedFrame, LandmarkPoint
from strikeprint.utils.landmarks import Landmark as L


def standing_pose():
    """
    A plausible upright orthodox pose in metres (hips at y=0, y up),
    shape (33, 3). Left side on +x.
    """
    p = np.zeros((33, 3), float)

    p[L.NOSE] = [0.0, 0.65, -0.05]
    for i in range(1, 11):
        p[i] = [0.0, 0.6, 0.0]

    p[L.LEFT_SHOULDER] = [0.18, 0.5, 0.0]
    p[L.RIGHT_SHOULDER] = [-0.18, 0.5, 0.0]
    p[L.LEFT_ELBOW] = [0.25, 0.25, -0.1]
    p[L.RIGHT_ELBOW] = [-0.25, 0.25, -0.1]
    p[L.LEFT_WRIST] = [0.15, 0.45, -0.25]
    p[L.RIGHT_WRIST] = [-0.15, 0.45, -0.25]
    for i, base in ((L.LEFT_PINKY, L.LEFT_WRIST), (L.LEFT_INDEX, L.LEFT_WRIST),
                    (L.LEFT_THUMB, L.LEFT_WRIST), (L.RIGHT_PINKY, L.RIGHT_WRIST),
                    (L.RIGHT_INDEX, L.RIGHT_WRIST), (L.RIGHT_THUMB, L.RIGHT_WRIST)):
        p[i] = p[base] + [0.0, 0.02, -0.05]

    p[L.LEFT_HIP] = [0.1, 0.0, 0.0]
    p[L.RIGHT_HIP] = [-0.1, 0.0, 0.0]
    p[L.LEFT_KNEE] = [0.12, -0.45, -0.05]
    p[L.RIGHT_KNEE] = [-0.12, -0.45, 0.05]
    p[L.LEFT_ANKLE] = [0.13, -0.85, 0.0]
    p[L.RIGHT_ANKLE] = [-0.13, -0.85, 0.1]
    p[L.LEFT_HEEL] = [0.13, -0.9, 0.05]
    p[L.RIGHT_HEEL] = [-0.13, -0.9, 0.15]
    p[L.LEFT_FOOT_INDEX] = [0.13, -0.9, -0.1]
    p[L.RIGHT_FOOT_INDEX] = [-0.13, -0.9, 0.0]
    return p


def to_points(pose, visibility=1.0):
    return [
        LandmarkPoint(x=float(x), y=float(y), z=float(z), visibility=visibility)
        for x, y, z in np.asarray(pose)[:, :3]
    ]


def jab_frames(n=30, apex=12, dt_ms=33.0, reach=0.6, t0=1_000_000.0):
    """
    Right hand travels straight forward (-z) for frames 0..apex and back
    for apex..n-1; everything else stays put.
    """
    base = standing_pose()
    frames = []
    for i in range(n):
        pose = base.copy()
        if i <= apex:
            frac = i / apex
        else:
            frac = (n - 1 - i) / (n - 1 - apex)
        pose[L.RIGHT_INDEX] = base[L.RIGHT_INDEX] + [0.0, 0.0, -reach * frac]
        frames.append(CapturedFrame(timestamp_ms=t0 + i * dt_ms, landmarks=to_points(pose)))
    return frames


@pytest.fixture
def pose():
    return standing_pose()


@pytest.fixture
def frames():
    return jab_frames()
