"""
Lagrange interpolation basis over an arbitrary set of distinct nodes.

Values and derivatives use the barycentric form:
    w_i  = 1 / prod_{j != i} (x_i - x_j)
    l_i(x) = w_i * prod_j (x - x_j) / (x - x_i)
"""

import numpy as np


class LagrangeBasis:
    """
    Nodal Lagrange basis with barycentric weights.

    The basis is immutable once built: the node and weight arrays are
    read-only.
    """

    def __init__(self, nodes):
        """
        Args:
            nodes: Distinct node positions (at least two)
        """
        nodes = np.array(nodes, dtype=float)
        if nodes.ndim != 1 or nodes.size < 2:
            raise ValueError(f"A Lagrange basis needs at least two nodes, got {nodes.size}")

        # Incremental O(n²) product of node differences
        weights = np.ones_like(nodes)
        for i in range(1, nodes.size):
            for j in range(i):
                if nodes[j] == nodes[i]:
                    raise ValueError(f"Basis nodes must be distinct: nodes {j} and {i} "
                                     f"are both at {nodes[i]}")
                weights[j] *= nodes[j] - nodes[i]
                weights[i] *= nodes[i] - nodes[j]
        weights = 1.0 / weights

        nodes.flags.writeable = False
        weights.flags.writeable = False
        self._nodes = nodes
        self._weights = weights

    @property
    def nodes(self) -> np.ndarray:
        return self._nodes

    @property
    def barycentric_weights(self) -> np.ndarray:
        return self._weights

    @property
    def num_nodes(self) -> int:
        return self._nodes.size

    @property
    def degree(self) -> int:
        return self._nodes.size - 1

    def _check_index(self, *indices):
        for i in indices:
            if not 0 <= i < self._nodes.size:
                raise IndexError(f"Basis index {i} out of range for {self._nodes.size} nodes")

    def node(self, i: int) -> float:
        self._check_index(i)
        return float(self._nodes[i])

    def barycentric_weight(self, i: int) -> float:
        self._check_index(i)
        return float(self._weights[i])

    def value_at_node(self, i: int, j: int) -> float:
        """Value of the ith basis polynomial at the jth node (Kronecker delta)."""
        self._check_index(i, j)
        return 1.0 if i == j else 0.0

    def value(self, i: int, x: float) -> float:
        """Value of the ith basis polynomial at x."""
        self._check_index(i)
        if x == self._nodes[i]:
            return 1.0

        val = self._weights[i]
        for xj in self._nodes:
            val *= x - xj
        return float(val / (x - self._nodes[i]))

    def derivative_at_node(self, i: int, j: int) -> float:
        """First derivative of the ith basis polynomial at the jth node."""
        self._check_index(i, j)
        x = self._nodes[j]

        if i == j:
            # l_i'(x_i) = sum_{k != i} 1 / (x_i - x_k)
            gaps = x - np.delete(self._nodes, i)
            return float(np.sum(1.0 / gaps))

        dev = self._weights[i]
        for k, xk in enumerate(self._nodes):
            if k != i and k != j:
                dev *= x - xk
        return float(dev)

    def derivative(self, i: int, x: float) -> float:
        """First derivative of the ith basis polynomial at x."""
        self._check_index(i)

        coeff = 0.0
        for j, xj in enumerate(self._nodes):
            if j == i:
                continue
            if x == xj:
                return self.derivative_at_node(i, j)
            coeff += 1.0 / (x - xj)

        if x == self._nodes[i]:
            return self.derivative_at_node(i, i)
        return coeff * self.value(i, x)
