"""
Reference segment [-1, 1] for collocated nodal DG / FR discretizations.

The interpolation nodes are the Gauss-Lobatto quadrature nodes, so the mass
matrix is diagonal (the quadrature weights) and the pair (M, D) satisfies
summation by parts:

    M D + D^T M = B,   B = diag(-1, 0, ..., 0, 1)
"""

import numpy as np

from .basis import LagrangeBasis
from .quadrature import gauss_lobatto


class ReferenceSegment:
    """Fixed-order reference element built once per polynomial order."""

    def __init__(self, order: int):
        """
        Args:
            order: Polynomial order k >= 1; the element has k + 1 nodes
        """
        if order < 1:
            raise ValueError(f"Polynomial order must be at least 1, got {order}")

        nodes, weights = gauss_lobatto(order + 1)
        self.order = order
        self.basis = LagrangeBasis(nodes)
        self._weights = weights

        n = self.basis.num_nodes
        # D[i, j] = derivative of basis j at node i
        self._derivative = np.array([[self.basis.derivative_at_node(j, i) for j in range(n)]
                                     for i in range(n)])

    @property
    def num_nodes(self) -> int:
        return self.basis.num_nodes

    @property
    def weights(self) -> np.ndarray:
        """Quadrature weights, the diagonal of the mass matrix."""
        return self._weights.copy()

    def node_position(self, i: int) -> float:
        return self.basis.node(i)

    def node_positions(self) -> np.ndarray:
        return np.array(self.basis.nodes)

    def mass_matrix(self) -> np.ndarray:
        """Diagonal mass matrix of quadrature weights."""
        return np.diag(self._weights)

    def derivative_matrix(self) -> np.ndarray:
        """Maps nodal values to nodal derivatives with respect to r."""
        return self._derivative.copy()

    def boundary_matrix(self) -> np.ndarray:
        """B = diag(-1, 0, ..., 0, 1), the right-hand side of the SBP identity."""
        B = np.zeros((self.num_nodes, self.num_nodes))
        B[0, 0] = -1.0
        B[-1, -1] = 1.0
        return B
