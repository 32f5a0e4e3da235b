"""
Gauss-Lobatto quadrature on the reference interval [-1, 1].

Nodes and weights come from a closed-form table, so only 2 to 7 points are
available. The nodes include both end points, which is what makes the
collocated mass matrix diagonal and the derivative operator SBP.
"""

import numpy as np
from typing import Tuple


MIN_POINTS = 2
MAX_POINTS = 7


def _symmetric(interior_nodes, interior_weights, end_weight, center_weight=None):
    """Assemble an ascending rule from the positive half of a symmetric rule."""
    half_nodes = list(interior_nodes)
    half_weights = list(interior_weights)

    nodes = [-1.0] + [-x for x in reversed(half_nodes)]
    weights = [end_weight] + list(reversed(half_weights))
    if center_weight is not None:
        nodes.append(0.0)
        weights.append(center_weight)
    nodes += half_nodes + [1.0]
    weights += half_weights + [end_weight]
    return np.array(nodes), np.array(weights)


def gauss_lobatto(n_points: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Gauss-Lobatto nodes and weights.

    Args:
        n_points: Number of quadrature points, 2 to 7

    Returns:
        nodes: Ascending node positions, first and last exactly -1 and 1
        weights: Positive weights summing to 2
    """
    if n_points == 2:
        return _symmetric([], [], 1.0)

    if n_points == 3:
        return _symmetric([], [], 1 / 3, center_weight=4 / 3)

    if n_points == 4:
        return _symmetric([np.sqrt(1 / 5)], [5 / 6], 1 / 6)

    if n_points == 5:
        return _symmetric([np.sqrt(3 / 7)], [49 / 90], 1 / 10, center_weight=32 / 45)

    if n_points == 6:
        s7 = np.sqrt(7.0)
        inner = np.sqrt(1 / 3 - 2 * s7 / 21)
        outer = np.sqrt(1 / 3 + 2 * s7 / 21)
        return _symmetric([inner, outer],
                          [(14 + s7) / 30, (14 - s7) / 30],
                          1 / 15)

    if n_points == 7:
        r = 2 * np.sqrt(5 / 3) / 11
        s15 = np.sqrt(15.0)
        inner = np.sqrt(5 / 11 - r)
        outer = np.sqrt(5 / 11 + r)
        return _symmetric([inner, outer],
                          [(124 + 7 * s15) / 350, (124 - 7 * s15) / 350],
                          1 / 21, center_weight=256 / 525)

    raise ValueError(f"Unsupported Gauss-Lobatto order: {n_points} points "
                     f"(supported: {MIN_POINTS} to {MAX_POINTS})")
