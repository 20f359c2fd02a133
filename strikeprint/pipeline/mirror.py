# strikeprint/pipeline/mirror.py

import numpy as np

from strikeprint.utils.landmarks import MIRROR_PAIRS

_LEFT = [int(l) for l, _ in MIRROR_PAIRS]
_RIGHT = [int(r) for _, r in MIRROR_PAIRS]


def mirror(pose):
    """
    Southpaw -> orthodox: negate X and exchange left/right landmarks.

    Accepts one pose (33, K) or a stacked window (F, 33, K); the input is
    not modified. mirror(mirror(p)) == p.
    """
    out = np.array(pose, dtype=float, copy=True)
    out[..., 0] = -out[..., 0]

    left = out[..., _LEFT, :].copy()
    out[..., _LEFT, :] = out[..., _RIGHT, :]
    out[..., _RIGHT, :] = left
    return out
