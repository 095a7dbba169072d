import numpy as np

from . import config
from .errors import InvalidClusterCount


def _check_k(data, k):
    n = len(data)
    if k <= 0 or k > n:
        raise InvalidClusterCount(f"Number of clusters must be in [1, {n}], got {k}")


def strided_seeds(data, k, stride=None):
    """Seed with the points at indices stride, 2*stride, ..., k*stride.

    The stride shrinks to N // (k + 1) when the requested one runs past the
    end of the data. Reproducible, but biased towards the file order.
    """
    data = np.asarray(data, dtype=np.float64)
    _check_k(data, k)
    n = len(data)
    stride = config.SEED_STRIDE if stride is None else stride
    if stride <= 0:
        raise ValueError(f"stride must be positive, got {stride}")
    if k == n:
        return data.copy()
    if k * stride >= n:
        stride = n // (k + 1)
    indices = [i * stride for i in range(1, k + 1)]
    return data[indices].copy()


def random_seeds(data, k, seed=None):
    data = np.asarray(data, dtype=np.float64)
    _check_k(data, k)
    rng = np.random.default_rng(seed)
    idx = rng.choice(len(data), k, replace=False)
    return data[idx].copy()
