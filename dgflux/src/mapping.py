"""
Affine mapping between a physical segment [x0, x1] and the reference
segment [-1, 1].
"""

import numpy as np


def _check_segment(x0, x1):
    if not np.all(np.asarray(x0) < np.asarray(x1)):
        raise ValueError(f"Degenerate or inverted segment: [{x0}, {x1}]")


def x_to_r(x0, x1, x):
    """Reference coordinate of physical position x."""
    _check_segment(x0, x1)
    return (2 * x - x0 - x1) / (x1 - x0)


def r_to_x(x0, x1, r):
    """Physical position of reference coordinate r."""
    return ((1 - r) * x0 + (1 + r) * x1) / 2


def jacobian(x0, x1):
    """dx/dr, half the segment width."""
    return (x1 - x0) / 2


def contravariant_basis(x0, x1):
    """dr/dx, the reciprocal of the Jacobian."""
    _check_segment(x0, x1)
    return 2 / (x1 - x0)
