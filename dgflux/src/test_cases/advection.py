"""
Linear advection of a sine wave on [-pi, pi].

    du/dt + c du/dx = 0,   c = 2 pi,   u(x, 0) = sin(x)

The exact solution sin(x - c t) is imposed as inflow at the left boundary;
the right boundary is an outflow (extrapolation).
"""

import numpy as np
from typing import Dict, Tuple

from ..boundary import ExtrapolationBC, InflowBC
from ..discrete_operator import DiscreteOperator
from ..flux import AdvectionFlux
from ..mesh import UniformMesh1D
from ..reference_element import ReferenceSegment
from ..timestepping import compute_timestep


class Advection1D:
    """Traveling sine wave problem for the scalar advection law."""

    wave_speed = 2 * np.pi

    def __init__(self, n_cells: int = 1024, order: int = 1,
                 x0: float = -np.pi, x1: float = np.pi):
        self.n_cells = n_cells
        self.order = order

        self.mesh = UniformMesh1D(x0, x1, n_cells)
        self.ref_elem = ReferenceSegment(order)
        self.flux = AdvectionFlux(self.wave_speed)
        self.operator = DiscreteOperator(self.mesh, self.ref_elem, self.flux,
                                         bc_left=InflowBC(self.inflow_state),
                                         bc_right=ExtrapolationBC())

    @property
    def min_elem_size(self) -> float:
        return self.mesh.min_cell_size

    @property
    def num_dofs(self) -> int:
        return self.operator.num_dofs

    def inflow_state(self, t: float) -> float:
        """Exact solution at the left boundary."""
        return np.sin(self.mesh.x0 - self.wave_speed * t)

    def initialize_dofs(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Node positions and initial values.

        Returns:
            x: Positions of the degrees of freedom
            U: Initial solution sin(x)
        """
        x = self.operator.node_coordinates()
        return x, np.sin(x)

    def exact_solution(self, t: float) -> np.ndarray:
        x = self.operator.node_coordinates()
        return np.sin(x - self.wave_speed * t)

    def timestep_size(self, U: np.ndarray = None, cfl: float = 0.25) -> float:
        """dt = cfl / p² * h / c."""
        return compute_timestep(self.flux, U, self.mesh, self.order, cfl)

    def fields(self, U: np.ndarray) -> Dict[str, np.ndarray]:
        return {'u': U}
