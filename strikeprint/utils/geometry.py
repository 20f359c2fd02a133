# strikeprint/utils/geometry.py

import numpy as np


# -----------------------------------------------------------
# DISTANCES
# -----------------------------------------------------------

def distance(a, b):
    """Euclidean distance between two 3D points."""
    return float(np.linalg.norm(np.asarray(a, float)[:3] - np.asarray(b, float)[:3]))


# -----------------------------------------------------------
# YAW (rotation about the vertical Y axis)
# -----------------------------------------------------------

def yaw_angle(a, b):
    """
    Angle in radians of the vector b -> a projected on the X/Z plane,
    measured from +X towards +Z.
    """
    dx = a[0] - b[0]
    dz = a[2] - b[2]
    return float(np.arctan2(dz, dx))


def rotate_y(points, theta):
    """
    Rotate one point (3,) or many points (..., 3) about the Y axis.

      x' = x cos(theta) - z sin(theta)
      z' = x sin(theta) + z cos(theta)
    """
    pts = np.asarray(points, dtype=float)
    c, s = np.cos(theta), np.sin(theta)

    out = pts.copy()
    out[..., 0] = pts[..., 0] * c - pts[..., 2] * s
    out[..., 2] = pts[..., 0] * s + pts[..., 2] * c
    return out


def yaw_degrees(a, b):
    """Planar X/Z angle of b -> a in degrees."""
    return float(np.degrees(yaw_angle(a, b)))
