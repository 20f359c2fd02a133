# strikeprint/pipeline/resample.py

import numpy as np


def resample(sequence, target_length):
    """
    Linear time-axis resampling to exactly `target_length` elements.

    Elements may be scalars or equal-length vectors; interpolation is
    component-wise between the two bracketing samples.
      []   -> []
      [v]  -> target_length copies of v
    """
    if target_length <= 0 or len(sequence) == 0:
        return []

    data = np.asarray(sequence, dtype=float)
    n = len(data)

    if n == 1:
        return [data[0].tolist() for _ in range(target_length)]
    if target_length == 1:
        return [data[0].tolist()]

    step = (n - 1) / (target_length - 1)
    positions = np.arange(target_length) * step

    low = np.minimum(np.floor(positions).astype(int), n - 1)
    high = np.minimum(np.ceil(positions).astype(int), n - 1)
    ratio = (positions - low).reshape((-1,) + (1,) * (data.ndim - 1))

    out = data[low] + (data[high] - data[low]) * ratio
    return out.tolist()
