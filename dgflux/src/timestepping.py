"""
Explicit time integration schemes and timestep computation.

All steppers advance the solution in place:

    step(U, t, dt, op, work)

where op(U, t, out) writes the right-hand side dU/dt into out and work is a
list of caller-owned scratch buffers shaped like U. Nothing is allocated
inside a step, so the same buffers are reused for the whole time march.
"""

import numpy as np
from typing import Callable, List, Sequence

from .flux import FluxCalculator
from .mesh import UniformMesh1D


RHS = Callable[[np.ndarray, float, np.ndarray], np.ndarray]


def axpy(a: float, x: np.ndarray, y: np.ndarray, out: np.ndarray) -> np.ndarray:
    """
    out = a * x + y, elementwise over all conserved components.

    out must not alias x or y, and x must not alias y.
    """
    if np.may_share_memory(x, y):
        raise ValueError("axpy inputs x and y must not alias")
    if np.may_share_memory(out, x) or np.may_share_memory(out, y):
        raise ValueError("axpy output must not alias its inputs")

    np.multiply(x, a, out=out)
    out += y
    return out


def allocate_work(U: np.ndarray, n: int = 5) -> List[np.ndarray]:
    """Scratch buffers shaped like U for the steppers."""
    return [np.empty_like(U) for _ in range(n)]


def _check_work(work: Sequence[np.ndarray], n: int):
    if len(work) < n:
        raise ValueError(f"Scheme needs {n} scratch buffers, got {len(work)}")


def forward_euler_step(U: np.ndarray, t: float, dt: float, op: RHS,
                       work: Sequence[np.ndarray]) -> np.ndarray:
    """
    Forward Euler time step - simplest and fastest (1 RHS evaluation).

    Only first order; mainly useful for testing.

    Args:
        U: Solution, updated in place
        t: Current time
        dt: Time step
        op: Right-hand side evaluator op(U, t, out)
        work: At least 1 scratch buffer
    """
    _check_work(work, 1)
    k = work[0]

    op(U, t, k)
    k *= dt
    U += k

    return U


def ssp_rk2_step(U: np.ndarray, t: float, dt: float, op: RHS,
                 work: Sequence[np.ndarray]) -> np.ndarray:
    """
    2nd-order Strong Stability Preserving (SSP) Runge-Kutta (RK2).

    Twice as fast as RK4 (2 RHS evaluations vs 4).

    Args:
        U: Solution, updated in place
        t: Current time
        dt: Time step
        op: Right-hand side evaluator op(U, t, out)
        work: At least 2 scratch buffers
    """
    _check_work(work, 2)
    k, U1 = work[0], work[1]

    # U1 = U + dt * L(U)
    op(U, t, k)
    axpy(dt, k, U, U1)

    # U_new = (U + U1 + dt * L(U1)) / 2
    op(U1, t + dt, k)
    k *= dt
    U += U1
    U += k
    U *= 0.5

    return U


def rk4_step(U: np.ndarray, t: float, dt: float, op: RHS,
             work: Sequence[np.ndarray]) -> np.ndarray:
    """
    Perform one classical fourth-order Runge-Kutta step.

        k1 = L(U, t)
        k2 = L(U + dt/2 k1, t + dt/2)
        k3 = L(U + dt/2 k2, t + dt/2)
        k4 = L(U + dt k3, t + dt)
        U <- U + dt/6 (k1 + 2 k2 + 2 k3 + k4)

    Args:
        U: Solution, updated in place
        t: Current time
        dt: Time step
        op: Right-hand side evaluator op(U, t, out)
        work: At least 5 scratch buffers
    """
    _check_work(work, 5)
    wk0, wk1, wk2, wk3, wk4 = work[:5]
    half_dt = 0.5 * dt

    # RK4 stages
    op(U, t, wk1)

    axpy(half_dt, wk1, U, wk0)
    op(wk0, t + half_dt, wk2)

    axpy(half_dt, wk2, U, wk0)
    op(wk0, t + half_dt, wk3)

    axpy(dt, wk3, U, wk0)
    op(wk0, t + dt, wk4)

    # Combine: wk0 = k1 + 2 k2, wk1 = k4 + 2 k3
    axpy(2.0, wk2, wk1, wk0)
    axpy(2.0, wk3, wk4, wk1)
    axpy(dt / 6.0, wk0, U, wk2)
    axpy(dt / 6.0, wk1, wk2, U)

    return U


SCHEMES = {
    'rk4': (rk4_step, 5),
    'rk2': (ssp_rk2_step, 2),
    'euler': (forward_euler_step, 1),
}


def compute_timestep(flux: FluxCalculator, U: np.ndarray, mesh: UniformMesh1D,
                     order: int, cfl: float) -> float:
    """
    Compute time step based on a CFL condition for polynomial order p.

        dt = cfl * dx_min / (max wave speed * p²)

    Args:
        flux: Flux calculator (supplies the wave speeds)
        U: Current solution
        mesh: Computational mesh
        order: Polynomial order of the elements
        cfl: CFL number

    Returns:
        dt: Time step
    """
    wave_speed = flux.max_wave_speed(U)
    if wave_speed <= 0:
        raise ValueError("Cannot derive a time step from a zero wave speed")
    return cfl * mesh.min_cell_size / (wave_speed * order**2)
