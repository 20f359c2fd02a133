# strikeprint/pipeline/one_euro.py
"""
Adaptive (One Euro) low-pass filtering of raw landmark coordinates.

One filter per (landmark, axis) signal. The cutoff relaxes as the estimated
signal speed grows, so fast strikes keep low lag while a still guard is
smoothed hard. The sampling frequency is re-estimated from every pair of
timestamps, so an irregular camera cadence is tolerated.

Timestamps are in seconds. Deltas are clamped to MIN_DT_SEC (1 ms): a
repeated or backwards timestamp therefore reads as a 1000 Hz sample instead
of an infinite or negative frequency.
"""

import math

import numpy as np

from strikeprint.utils.landmarks import NUM_LANDMARKS, Axis
from strikeprint.utils.logger import warn


# -----------------------------
# Tunable (but NOT hard-coded)
# -----------------------------
DEFAULT_FREQ = 30.0     # Hz, used until two timestamps have been seen
MIN_CUTOFF = 1.0        # Hz, smoothing strength at rest
BETA = 0.0              # speed coefficient (0 = fixed cutoff)
D_CUTOFF = 1.0          # Hz, cutoff for the derivative estimate
MIN_DT_SEC = 1e-3


class LowPassFilter:
    """Exponential smoother that remembers its last raw and filtered value."""

    def __init__(self, alpha=1.0):
        self.alpha = alpha
        self.last_raw = None
        self.last_filtered = None

    def has_last_raw(self):
        return self.last_raw is not None

    def filter(self, value, alpha=None):
        if alpha is not None:
            self.alpha = alpha

        if self.last_filtered is None:
            result = value
        else:
            result = self.alpha * value + (1.0 - self.alpha) * self.last_filtered

        self.last_filtered = result
        self.last_raw = value
        return result


class OneEuroFilter:
    def __init__(
        self,
        freq=DEFAULT_FREQ,
        min_cutoff=MIN_CUTOFF,
        beta=BETA,
        d_cutoff=D_CUTOFF,
        min_dt=MIN_DT_SEC,
    ):
        if freq <= 0:
            raise ValueError(f"freq must be positive, got {freq}")
        if min_cutoff <= 0 or d_cutoff <= 0:
            raise ValueError("cutoff frequencies must be positive")

        self.freq = float(freq)
        self.min_cutoff = float(min_cutoff)
        self.beta = float(beta)
        self.d_cutoff = float(d_cutoff)
        self.min_dt = float(min_dt)

        self.x = LowPassFilter(self.alpha(self.min_cutoff))
        self.dx = LowPassFilter(self.alpha(self.d_cutoff))
        self.last_time = None

    def alpha(self, cutoff):
        te = 1.0 / self.freq
        tau = 1.0 / (2.0 * math.pi * cutoff)
        return 1.0 / (1.0 + tau / te)

    def filter(self, value, timestamp=None):
        if self.last_time is not None and timestamp is not None:
            self.freq = 1.0 / max(timestamp - self.last_time, self.min_dt)
        if timestamp is not None:
            self.last_time = timestamp

        dvalue = (value - self.x.last_raw) * self.freq if self.x.has_last_raw() else 0.0
        edvalue = self.dx.filter(dvalue, self.alpha(self.d_cutoff))

        cutoff = self.min_cutoff + self.beta * abs(edvalue)
        return self.x.filter(value, self.alpha(cutoff))


class AdaptiveFilterBank:
    """
    Filter state for one recording session: a fixed 33 x 3 grid of
    OneEuroFilter, addressed by Landmark and Axis.

    Construct at recording start, discard at recording end. Frames must be
    fed in non-decreasing timestamp order.
    """

    def __init__(
        self,
        freq=DEFAULT_FREQ,
        min_cutoff=MIN_CUTOFF,
        beta=BETA,
        d_cutoff=D_CUTOFF,
        min_dt=MIN_DT_SEC,
    ):
        self._filters = [
            [
                OneEuroFilter(freq, min_cutoff, beta, d_cutoff, min_dt)
                for _ in Axis
            ]
            for _ in range(NUM_LANDMARKS)
        ]
        self.last_timestamp = None

    def feed(self, landmark, axis, value, timestamp):
        return float(self._filters[int(landmark)][int(axis)].filter(float(value), timestamp))

    def smooth(self, pose, timestamp):
        """Filter a whole (33, 3) pose captured at `timestamp` seconds."""
        if self.last_timestamp is not None and timestamp < self.last_timestamp:
            warn(
                f"[WARN] FilterBank: timestamp went backwards "
                f"({self.last_timestamp:.4f} -> {timestamp:.4f})"
            )
        self.last_timestamp = timestamp

        pose = np.asarray(pose, dtype=float)
        out = pose[:NUM_LANDMARKS, :3].copy()
        for i in range(NUM_LANDMARKS):
            for a in Axis:
                out[i, a] = self.feed(i, a, pose[i, a], timestamp)
        return out
