"""
Element-wise divergence of the convective flux by flux differencing.

For an element with N collocated Gauss-Lobatto nodes, mass weights m and
derivative matrix D, the divergence at node i is

    (2 sum_j D[i, j] F[i, j] - lift_i) / J

where F[i, j] is the symmetric two-point volume flux between nodes i and j
(the physical flux on the diagonal) and the surface lifting acts on the two
end nodes only:

    lift_0     = (f*_left  - F[0, 0])       / m_0
    lift_{N-1} = (F[N-1, N-1] - f*_right)   / m_{N-1}

This is the 1D specialisation of the SBP lifting operator: the face mass is 1,
the face normals are -1 (node 0) and +1 (node N-1), and the contravariant
basis cancels against the Jacobian. No over-integration is needed.
"""

import numpy as np

from .flux import FluxCalculator
from .reference_element import ReferenceSegment


class FluxDivergence1D:
    """Flux-differencing divergence operator on 1D elements."""

    def __init__(self, ref_elem: ReferenceSegment, flux: FluxCalculator):
        self.ref_elem = ref_elem
        self.flux = flux

        weights = ref_elem.weights
        self._D = ref_elem.derivative_matrix()
        self._inv_mass_left = 1.0 / weights[0]
        self._inv_mass_right = 1.0 / weights[-1]

        n = ref_elem.num_nodes
        n_var_axes = len(flux.variable_shape)
        upper = np.triu(np.ones((n, n), dtype=bool), k=1)
        self._upper = upper.reshape(upper.shape + (1,) * n_var_axes)
        self._diagonal = np.arange(n)

    @property
    def num_nodes(self) -> int:
        return self.ref_elem.num_nodes

    def volume_flux_matrix(self, U: np.ndarray) -> np.ndarray:
        """
        Symmetric matrix of two-point volume fluxes for a batch of elements.

        Args:
            U: Nodal states (n_cells, N, *variable_shape)

        Returns:
            F: (n_cells, N, N, *variable_shape), F[c, i, i] = f(U[c, i])
        """
        # Pairwise states broadcast to (n_cells, N, N, *variable_shape)
        F = self.flux.numerical_volume_flux(U[:, :, None], U[:, None, :])

        # Keep the upper triangle and mirror it into the lower one
        F = np.where(self._upper, F, np.swapaxes(F, 1, 2))

        F[:, self._diagonal, self._diagonal] = self.flux.physical_flux(U)
        return F

    def apply(self, U, surface_fluxes, J):
        """
        Flux divergence at every node of one element or a batch of elements.

        Args:
            U: Nodal states, (N, *variable_shape) or (n_cells, N, *variable_shape)
            surface_fluxes: Numerical fluxes at the left and right faces,
                (2, *variable_shape) or (n_cells, 2, *variable_shape)
            J: Jacobian of each element, scalar or (n_cells,)

        Returns:
            Divergence with the same shape as U
        """
        U = np.asarray(U, dtype=float)
        surface_fluxes = np.asarray(surface_fluxes, dtype=float)
        J = np.asarray(J, dtype=float)

        single = U.ndim == 1 + len(self.flux.variable_shape)
        if single:
            U = U[None]
            surface_fluxes = surface_fluxes[None]
        J = np.broadcast_to(J, (U.shape[0],))

        if U.shape[1] != self.num_nodes:
            raise ValueError(f"Expected {self.num_nodes} nodes per element, got {U.shape[1]}")
        if np.any(J <= 0):
            raise ValueError(f"Element Jacobian must be positive, min = {np.min(J)}")

        # Volume integration
        F = self.volume_flux_matrix(U)
        div = 2.0 * np.einsum('ij,cij...->ci...', self._D, F)

        # Surface integration lifting
        div[:, 0] -= (surface_fluxes[:, 0] - F[:, 0, 0]) * self._inv_mass_left
        div[:, -1] -= (F[:, -1, -1] - surface_fluxes[:, 1]) * self._inv_mass_right

        # Map back to physical coordinates
        div /= J.reshape((-1,) + (1,) * (div.ndim - 1))

        return div[0] if single else div
