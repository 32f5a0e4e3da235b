"""
Time-marching driver for the flux-differencing DG / FR discretization.
"""

import functools

import numpy as np
import matplotlib.pyplot as plt
from dataclasses import dataclass
from typing import Dict, Optional

from .timestepping import SCHEMES, allocate_work


@dataclass
class SolverConfig:
    """Configuration for the time-marching driver."""
    cfl: float = 0.25
    max_iter: int = 10000
    print_interval: int = 1000
    time_scheme: str = 'rk4'  # Options: 'rk4', 'rk2', 'euler'
    fixed_dt: Optional[float] = None  # Overrides the CFL time step
    check_finite: bool = True  # Stop with FloatingPointError on blow-up


class Solver1D:
    """
    Drives a problem's discrete operator with an explicit time integrator.

    The problem supplies:
    - operator: DiscreteOperator
    - initialize_dofs() -> (x, U)
    - timestep_size(U, cfl) -> dt
    - fields(U) -> {name: nodal values} for output

    The driver owns the interface flux workspace and the Runge-Kutta scratch
    buffers, so stepping allocates nothing beyond what numpy needs.
    """

    def __init__(self, problem, config: SolverConfig = None):
        """
        Initialize the solver.

        Args:
            problem: Problem definition (see class docstring)
            config: Solver configuration
        """
        self.problem = problem
        self.operator = problem.operator
        self.config = config if config is not None else SolverConfig()

        # Select time integration scheme
        if self.config.time_scheme not in SCHEMES:
            raise ValueError(f"Unknown time scheme: {self.config.time_scheme}. "
                             f"Options: {', '.join(SCHEMES)}")
        self.time_step_func, self.n_work = SCHEMES[self.config.time_scheme]

        self.workspace = self.operator.make_workspace()
        self.rhs = functools.partial(self.operator, workspace=self.workspace)

        # Solution storage
        self.x, U = problem.initialize_dofs()
        self.set_initial_condition(U)

    def set_initial_condition(self, U: np.ndarray):
        """Set the initial solution and reset time."""
        U = np.array(U, dtype=float)
        if U.shape != self.operator.state_shape:
            raise ValueError(f"Initial condition has shape {U.shape}, "
                             f"expected {self.operator.state_shape}")
        self.U = U
        self.work = allocate_work(self.U, self.n_work)
        self.time = 0.0
        self.iteration = 0

    def timestep(self) -> float:
        if self.config.fixed_dt is not None:
            return self.config.fixed_dt
        return self.problem.timestep_size(self.U, cfl=self.config.cfl)

    def step(self, dt: float = None) -> float:
        """
        Perform one time step.

        Args:
            dt: Time step; chosen from the configuration if None

        Returns:
            dt: Time step taken
        """
        if dt is None:
            dt = self.timestep()

        self.time_step_func(self.U, self.time, dt, self.rhs, self.work)

        if self.config.check_finite and not np.all(np.isfinite(self.U)):
            raise FloatingPointError(f"Non-finite solution at iteration {self.iteration + 1}, "
                                     f"t = {self.time + dt:.4e}; reduce the time step")

        # Update time and iteration
        self.time += dt
        self.iteration += 1

        return dt

    def solve(self, max_time: float = None) -> Dict:
        """
        Run the solver to the maximum time or number of iterations.

        Args:
            max_time: Final simulation time (optional); the last step is
                shortened to land on it exactly

        Returns:
            Dictionary with run info
        """
        print("Starting flux-differencing DG solver")
        print("=" * 50)
        print(f"Cells: {self.operator.n_cells}, Order: {self.operator.ref_elem.order}, "
              f"DOFs: {self.operator.num_dofs}")
        print(f"Time scheme: {self.config.time_scheme}, Max iterations: {self.config.max_iter}")
        print("=" * 50)

        for _ in range(self.config.max_iter):
            if max_time is not None and self.time >= max_time:
                break

            dt = self.timestep()
            final = max_time is not None and self.time + dt >= max_time
            if final:
                dt = max_time - self.time
            self.step(dt)
            if final:
                self.time = max_time

            # Print progress
            if self.config.print_interval and self.iteration % self.config.print_interval == 0:
                print(f"Iter {self.iteration:6d}, t = {self.time:.4e}, dt = {dt:.4e}, "
                      f"max|U| = {np.max(np.abs(self.U)):.4e}")

        if max_time is not None and self.time >= max_time:
            print(f"\nReached final time {self.time:.4e}")

        return {
            'iterations': self.iteration,
            'time': self.time,
        }

    def plot_solution(self, filename: str = None, exact: Dict[str, np.ndarray] = None):
        """Plot every field of the current solution."""
        fields = self.problem.fields(self.U)

        fig, axes = plt.subplots(len(fields), 1, figsize=(8, 3 * len(fields)), squeeze=False)
        fig.suptitle(f'Solution (t = {self.time:.4e}, iter = {self.iteration})')

        for ax, (name, values) in zip(axes[:, 0], fields.items()):
            ax.plot(self.x, values, 'b-', linewidth=2, label='DG')
            if exact is not None and name in exact:
                ax.plot(self.x, exact[name], 'r--', linewidth=2, label='Exact')
                ax.legend()
            ax.set_xlabel('x')
            ax.set_ylabel(name)
            ax.grid(True)

        plt.tight_layout()

        if filename:
            plt.savefig(filename, dpi=150, bbox_inches='tight')
            print(f"Saved plot to {filename}")

        return fig
