# strikeprint/pipeline/motion_metrics.py
"""
Timing and speed metadata for one captured technique.

Runs on the mirrored but unfiltered world landmarks (metres), so speeds are
real-world values scaled by the performer's height.
"""

import numpy as np

from strikeprint.models.metrics_model import MetricsModel
from strikeprint.utils.landmarks import LEFT_FOOT, LEFT_HAND, RIGHT_FOOT, RIGHT_HAND, hip_center


# -----------------------------
# Tunable (but NOT hard-coded)
# -----------------------------
MIN_FRAMES = 5
REFERENCE_HEIGHT_CM = 175.0
MAX_PLAUSIBLE_SPEED = 25.0   # m/s, anything at or above is a tracking glitch

CANDIDATE_PARTS = (
    (LEFT_HAND, "left_hand"),
    (RIGHT_HAND, "right_hand"),
    (LEFT_FOOT, "left_foot"),
    (RIGHT_FOOT, "right_foot"),
)
DEFAULT_PART = (RIGHT_HAND, "right_hand")


class WindowTooShort(ValueError):
    pass


def detect_active_part(poses):
    """
    Find the limb that travels furthest from the hip center.

    poses: (F, 33, K)
    Returns (landmark index, part name, apex frame index). Ties keep the
    earlier candidate; a window where nothing moves away from the hips
    reports the right hand at frame 0.
    """
    poses = np.asarray(poses, dtype=float)
    hips = hip_center(poses)

    best_dist = 0.0
    idx, name = DEFAULT_PART
    apex = 0

    for part_idx, part_name in CANDIDATE_PARTS:
        dist = np.linalg.norm(poses[:, part_idx, :3] - hips, axis=1)
        local_apex = int(np.argmax(dist))
        local_max = float(dist[local_apex])

        if local_max > best_dist:
            best_dist = local_max
            idx, name = part_idx, part_name
            apex = local_apex

    return idx, name, apex


def max_speed_in_range(timestamps_ms, points, start, end, scale=1.0):
    """
    Peak speed (m/s) between frames start..end inclusive.

    Pairs with dt <= 0 are skipped; samples >= MAX_PLAUSIBLE_SPEED are
    ignored. Rounded to 2 decimals.
    """
    if end <= start:
        return 0.0

    best = 0.0
    for i in range(start + 1, end + 1):
        dt = (timestamps_ms[i] - timestamps_ms[i - 1]) / 1000.0
        if dt <= 0:
            continue

        dist = float(np.linalg.norm(points[i, :3] - points[i - 1, :3]))
        speed = dist * scale / dt

        if speed < MAX_PLAUSIBLE_SPEED and speed > best:
            best = speed

    return round(best, 2)


def compute_metrics(window, height_cm) -> MetricsModel:
    """
    window: MotionWindow (timestamps in ms, poses (F, 33, K))
    apex_frame counts every frame of the selection, incomplete ones included
    height_cm: performer height, used to rescale the 175 cm reference model
    """
    n = len(window)
    if n < MIN_FRAMES:
        raise WindowTooShort(f"Need at least {MIN_FRAMES} frames for metrics, got {n}")

    ts = np.asarray(window.timestamps_ms, dtype=float)
    poses = np.asarray(window.poses, dtype=float)

    part_idx, part_name, apex = detect_active_part(poses)
    scale = float(height_cm) / REFERENCE_HEIGHT_CM
    track = poses[:, part_idx, :3]

    outbound = max_speed_in_range(ts, track, 0, apex, scale)
    inbound = max_speed_in_range(ts, track, apex, n - 1, scale)

    duration = (ts[-1] - ts[0]) / 1000.0

    return MetricsModel(
        duration_sec=round(float(duration), 2),
        active_part=part_name,
        max_speed_outbound=outbound,
        max_speed_return=inbound,
        apex_frame=int(window.frame_indices[apex]),
    )
