"""
Logarithmic mean (b - a) / (log b - log a) and its inverse.

Both use the series expansion of Ranocha et al., "Efficient implementation
of modern entropy stable and kinetic energy preserving discontinuous
Galerkin methods for conservation laws" (Algorithms 2 and 3), when the
arguments are nearly equal, which avoids the 0/0 of the direct formula.
"""

import numpy as np


SERIES_THRESHOLD = 1e-4


def _series_parameter(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    if np.any(a <= 0) or np.any(b <= 0):
        raise ValueError("Logarithmic mean is only defined for positive arguments")
    # u = ((a - b) / (a + b))²
    return (a * (a - 2 * b) + b * b) / (a * (a + 2 * b) + b * b)


def _series(u: np.ndarray) -> np.ndarray:
    return 2 + u * (2 / 3 + u * (2 / 5 + u * 2 / 7))


def logarithmic_mean(a, b) -> np.ndarray:
    """Logarithmic mean of positive a and b, elementwise."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    u = _series_parameter(a, b)
    with np.errstate(divide='ignore', invalid='ignore'):
        direct = (b - a) / np.log(b / a)
    return np.where(u < SERIES_THRESHOLD, (a + b) / _series(u), direct)


def inverse_logarithmic_mean(a, b) -> np.ndarray:
    """Reciprocal of the logarithmic mean of positive a and b, elementwise."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    u = _series_parameter(a, b)
    with np.errstate(divide='ignore', invalid='ignore'):
        direct = np.log(b / a) / (b - a)
    return np.where(u < SERIES_THRESHOLD, _series(u) / (a + b), direct)
