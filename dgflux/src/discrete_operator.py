"""
Discrete spatial operator of a 1D conservation law, dU/dt = L(U, t).

Degrees of freedom are stored cell-major then node-minor:
    U[cell * n_nodes + node, ...]
with the conserved components (if any) on the trailing axis.

Each evaluation first assembles one numerical flux per cell interface
(n_cells + 1 of them, boundary conditions supplying the outer states), then
applies the flux-differencing divergence to all cells at once.
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple

from .boundary import BoundaryCondition
from .divergence import FluxDivergence1D
from .flux import FluxCalculator
from .mesh import UniformMesh1D
from .reference_element import ReferenceSegment


@dataclass
class FluxWorkspace:
    """
    Scratch memory for the interface numerical fluxes.

    Owned by the caller and fully overwritten on every evaluation. Concurrent
    evaluations need separate workspaces; the operator itself holds no
    mutable state.
    """
    fluxes: np.ndarray


class DiscreteOperator:
    """Flux-differencing DG / FR spatial operator on a uniform 1D mesh."""

    def __init__(self, mesh: UniformMesh1D, ref_elem: ReferenceSegment,
                 flux: FluxCalculator, bc_left: BoundaryCondition,
                 bc_right: BoundaryCondition, negate: bool = True):
        """
        Args:
            mesh: Computational mesh
            ref_elem: Reference element (fixes the polynomial order)
            flux: Flux calculator of the conservation law
            bc_left, bc_right: Boundary conditions
            negate: Return -div f (dU/dt + div f = 0) instead of div f
        """
        self.mesh = mesh
        self.ref_elem = ref_elem
        self.flux = flux
        self.bc_left = bc_left
        self.bc_right = bc_right
        self.negate = negate

        self.div_op = FluxDivergence1D(ref_elem, flux)
        self._J = mesh.jacobians()

    @property
    def n_cells(self) -> int:
        return self.mesh.n_cells

    @property
    def n_nodes(self) -> int:
        return self.ref_elem.num_nodes

    @property
    def num_dofs(self) -> int:
        return self.n_cells * self.n_nodes

    @property
    def variable_shape(self) -> Tuple[int, ...]:
        return self.flux.variable_shape

    @property
    def state_shape(self) -> Tuple[int, ...]:
        return (self.num_dofs,) + self.variable_shape

    def make_workspace(self) -> FluxWorkspace:
        return FluxWorkspace(fluxes=np.empty((self.n_cells + 1,) + self.variable_shape))

    def cell_view(self, U: np.ndarray) -> np.ndarray:
        """View of U as (n_cells, n_nodes, *variable_shape)."""
        return U.reshape((self.n_cells, self.n_nodes) + self.variable_shape)

    def node_coordinates(self) -> np.ndarray:
        """Physical positions of all degrees of freedom."""
        return self.mesh.node_coordinates(self.ref_elem.node_positions())

    def numerical_fluxes(self, U: np.ndarray, t: float, out: np.ndarray) -> np.ndarray:
        """
        Numerical flux at every cell interface.

        Interface i sits between cell i - 1 (minus side, its last node) and
        cell i (plus side, its first node). The boundary conditions supply the
        minus state of interface 0 and the plus state of interface n_cells.

        Args:
            U: Solution, shape state_shape
            t: Time, passed to the boundary conditions
            out: Interface fluxes, shape (n_cells + 1, *variable_shape)
        """
        cells = self.cell_view(U)
        first = cells[:, 0]
        last = cells[:, -1]

        ghost_left = self.bc_left.boundary_state(first[0], t)
        ghost_right = self.bc_right.boundary_state(last[-1], t)

        minus = np.concatenate([np.asarray(ghost_left, dtype=float)[None], last])
        plus = np.concatenate([first, np.asarray(ghost_right, dtype=float)[None]])

        out[...] = self.flux.numerical_surface_flux(minus, plus, 1.0)
        return out

    def __call__(self, U: np.ndarray, t: float, out: np.ndarray,
                 workspace: FluxWorkspace = None) -> np.ndarray:
        """
        Evaluate the right-hand side into out.

        Args:
            U: Solution, shape state_shape
            t: Time
            out: Right-hand side buffer, C-contiguous, shape state_shape
            workspace: Interface flux scratch; a private one is allocated if None

        Returns:
            out
        """
        U = np.asarray(U, dtype=float)
        if U.shape != self.state_shape:
            raise ValueError(f"Expected solution of shape {self.state_shape}, got {U.shape}")
        if out.shape != self.state_shape or not out.flags.c_contiguous:
            raise ValueError(f"Output must be a C-contiguous array of shape {self.state_shape}")

        if workspace is None:
            workspace = self.make_workspace()
        fluxes = self.numerical_fluxes(U, t, workspace.fluxes)

        # Left and right face fluxes of every cell
        surface_fluxes = np.stack([fluxes[:-1], fluxes[1:]], axis=1)
        div = self.div_op.apply(self.cell_view(U), surface_fluxes, self._J)

        out_cells = self.cell_view(out)
        if self.negate:
            np.negative(div, out=out_cells)
        else:
            out_cells[...] = div
        return out
