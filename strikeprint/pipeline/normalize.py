# strikeprint/pipeline/normalize.py

import numpy as np

from strikeprint.utils.geometry import rotate_y, yaw_angle
from strikeprint.utils.landmarks import Landmark, hip_center, shoulder_center


def normalize(pose, cog):
    """
    Rigid normalization of a smoothed pose and its center of gravity.

    1. Translate: hip midpoint -> origin.
    2. Rotate about Y so the right-hip -> left-hip line lies on +X.
    3. Scale so the spine (origin -> shoulder midpoint) has length 1.

    A zero spine length is treated as 1.0 (pose left unscaled).
    Returns (pose (33, 3), cog (3,)).
    """
    pose = np.asarray(pose, dtype=float)[:, :3]
    cog = np.asarray(cog, dtype=float)[:3]

    # A. Translation
    origin = hip_center(pose)
    pose = pose - origin
    cog = cog - origin

    # B. Yaw
    theta = yaw_angle(pose[Landmark.LEFT_HIP], pose[Landmark.RIGHT_HIP])
    pose = rotate_y(pose, -theta)
    cog = rotate_y(cog, -theta)

    # C. Scale (measured after rotation)
    spine = float(np.linalg.norm(shoulder_center(pose)))
    if spine == 0.0:
        spine = 1.0

    return pose / spine, cog / spine
