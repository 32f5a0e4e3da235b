"""
Sod's shock tube for the 1D Euler equations.

The shock tube problem (Sod, 1978) is a Riemann problem with:
- Left state: rho = 1, u = 0, p = 1
- Right state: rho = 0.125, u = 0, p = 0.1
- Initial discontinuity at x = 0.5 on [0, 1]

Both domain boundaries hold fixed far-field states (the initial left and
right states), which is exact until a wave reaches the boundary.
"""

import numpy as np
from typing import Callable, Dict, Tuple

from ..boundary import FarFieldBC
from ..discrete_operator import DiscreteOperator
from ..flux import EulerFlux, FluxCalculator
from ..gas import GasProperties
from ..mesh import UniformMesh1D
from ..reference_element import ReferenceSegment
from ..state import FlowState, conservative


SOD_LEFT = (1.0, 0.0, 1.0)
SOD_RIGHT = (0.125, 0.0, 0.1)


class Euler1D:
    """Euler equations on a uniform mesh with far-field boundaries."""

    def __init__(self, n_cells: int = 1024, order: int = 2,
                 gas: GasProperties = None, x0: float = 0.0, x1: float = 1.0,
                 left_primitives: Tuple[float, float, float] = SOD_LEFT,
                 right_primitives: Tuple[float, float, float] = SOD_RIGHT,
                 x_diaphragm: float = 0.5,
                 initial_condition: Callable[[np.ndarray], np.ndarray] = None,
                 flux: FluxCalculator = None):
        """
        Args:
            n_cells: Number of cells
            order: Polynomial order
            gas: Gas properties
            x0, x1: Domain bounds
            left_primitives, right_primitives: (rho, u, p) of the far-field states
            x_diaphragm: Initial discontinuity position
            initial_condition: Function(x) -> conserved states (n, 3); defaults
                to the Riemann problem between the far-field states
            flux: Flux calculator; defaults to EulerFlux
        """
        self.n_cells = n_cells
        self.order = order
        self.gas = gas if gas is not None else GasProperties()
        self.x_diaphragm = x_diaphragm
        self.initial_condition = initial_condition

        self.left_state = conservative(*left_primitives, self.gas.gamma)
        self.right_state = conservative(*right_primitives, self.gas.gamma)

        self.mesh = UniformMesh1D(x0, x1, n_cells)
        self.ref_elem = ReferenceSegment(order)
        self.flux = flux if flux is not None else EulerFlux(self.gas)
        self.operator = DiscreteOperator(self.mesh, self.ref_elem, self.flux,
                                         bc_left=FarFieldBC(self.left_state),
                                         bc_right=FarFieldBC(self.right_state))

    @property
    def num_dofs(self) -> int:
        return self.operator.num_dofs

    def riemann_initial_condition(self, x: np.ndarray) -> np.ndarray:
        return np.where((x < self.x_diaphragm)[:, None], self.left_state, self.right_state)

    def initialize_dofs(self) -> Tuple[np.ndarray, np.ndarray]:
        """
        Node positions and initial conserved variables.

        Returns:
            x: Positions of the degrees of freedom
            U: Initial solution, shape (n_dofs, 3)
        """
        x = self.operator.node_coordinates()
        ic = self.initial_condition or self.riemann_initial_condition
        U = np.ascontiguousarray(ic(x), dtype=float)
        return x, U

    def timestep_size(self, U: np.ndarray, cfl: float = 0.25) -> float:
        """dt = cfl * h / (max(|u| + a) * p)."""
        return cfl * self.mesh.min_cell_size / self.flux.max_wave_speed(U) / self.order

    def get_state(self, U: np.ndarray) -> FlowState:
        return FlowState.from_array(U, self.gas)

    def fields(self, U: np.ndarray) -> Dict[str, np.ndarray]:
        state = self.get_state(U)
        return {'rho': state.rho, 'u': state.u, 'p': state.p}


def sod_shock_tube_exact(x: np.ndarray, t: float, gamma: float = 1.4,
                         left=SOD_LEFT, right=SOD_RIGHT, x0: float = 0.5) -> dict:
    """
    Exact solution of a shock tube Riemann problem with a left rarefaction
    and a right shock (the Sod configuration).

    Args:
        x: Position array
        t: Time
        gamma: Specific heat ratio
        left, right: (rho, u, p) of the initial states
        x0: Diaphragm position

    Returns:
        Dictionary with exact solution: rho, u, p, e
    """
    rho_L, u_L, p_L = left
    rho_R, u_R, p_R = right

    # Speed of sound
    a_L = np.sqrt(gamma * p_L / rho_L)
    a_R = np.sqrt(gamma * p_R / rho_R)

    gm1 = gamma - 1
    gp1 = gamma + 1

    def pressure_function(p, rho_k, p_k, a_k):
        """Toro's f_K(p) and its derivative."""
        if p > p_k:
            # Shock
            A = 2 / (gp1 * rho_k)
            B = gm1 / gp1 * p_k
            f = (p - p_k) * np.sqrt(A / (p + B))
            df = np.sqrt(A / (p + B)) * (1 - 0.5 * (p - p_k) / (p + B))
        else:
            # Rarefaction
            f = 2 * a_k / gm1 * ((p / p_k)**(gm1 / (2 * gamma)) - 1)
            df = 1 / (rho_k * a_k) * (p / p_k)**(-gp1 / (2 * gamma))
        return f, df

    # Newton iteration for pressure in star region
    p_star = 0.5 * (p_L + p_R)
    for _ in range(50):
        f_L, df_L = pressure_function(p_star, rho_L, p_L, a_L)
        f_R, df_R = pressure_function(p_star, rho_R, p_R, a_R)
        p_new = max(1e-3 * min(p_L, p_R), p_star - (f_L + f_R + u_R - u_L) / (df_L + df_R))
        converged = abs(p_new - p_star) / p_star < 1e-12
        p_star = p_new
        if converged:
            break

    f_L, _ = pressure_function(p_star, rho_L, p_L, a_L)
    f_R, _ = pressure_function(p_star, rho_R, p_R, a_R)
    u_star = 0.5 * (u_L + u_R) + 0.5 * (f_R - f_L)

    # Post-shock density (right side)
    p_ratio = p_star / p_R
    rho_star_R = rho_R * (p_ratio + gm1 / gp1) / (gm1 / gp1 * p_ratio + 1)

    # Post-rarefaction density (left side)
    rho_star_L = rho_L * (p_star / p_L)**(1 / gamma)

    # Wave speeds
    S = u_R + a_R * np.sqrt(gp1 / (2 * gamma) * p_ratio + gm1 / (2 * gamma))
    C = u_star
    H = u_L - a_L
    a_star_L = a_L * (p_star / p_L)**(gm1 / (2 * gamma))
    T = u_star - a_star_L

    x = np.asarray(x, dtype=float)
    s = (x - x0) / t if t > 0 else np.where(x < x0, -np.inf, np.inf)

    regions = [s < H, s < T, s < C, s < S]
    with np.errstate(invalid='ignore', over='ignore'):
        # Rarefaction fan
        u_fan = 2 / gp1 * (a_L + gm1 / 2 * u_L + s)
        a_fan = a_L + 0.5 * gm1 * (u_L - u_fan)

        rho = np.select(regions, [rho_L, rho_L * (a_fan / a_L)**(2 / gm1), rho_star_L, rho_star_R], rho_R)
        u = np.select(regions, [u_L, u_fan, u_star, u_star], u_R)
        p = np.select(regions, [p_L, p_L * (a_fan / a_L)**(2 * gamma / gm1), p_star, p_star], p_R)

    return {'rho': rho, 'u': u, 'p': p, 'e': p / (gm1 * rho)}
