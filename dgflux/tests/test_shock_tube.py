"""
Pytest tests for Sod's shock tube problem.

Tests verify:
1. Exact Riemann solution star-region values
2. Short simulation stays physical
3. Conservation of mass, momentum and energy before waves reach the boundaries
4. Comparison with the exact solution
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from dgflux.src import GasProperties, RanochaFlux, Solver1D, SolverConfig
from dgflux.src.test_cases import Euler1D, sod_shock_tube_exact
from dgflux.src.test_cases.shock_tube import SOD_LEFT, SOD_RIGHT


@pytest.fixture
def gas():
    """Standard air properties."""
    return GasProperties(gamma=1.4, R=287.0)


@pytest.fixture
def solver_config():
    """Solver configuration for shock tube tests."""
    return SolverConfig(
        cfl=0.25,
        max_iter=100000,
        print_interval=0,
        time_scheme='rk4',
    )


def total_conserved(problem, U):
    """Integral of the conserved variables over the domain."""
    weights = problem.ref_elem.weights
    J = problem.mesh.jacobians()
    cells = problem.operator.cell_view(U)
    return np.einsum('c,n,cnv->v', J, weights, cells)


class TestExactSolution:
    """Tests for the exact Riemann solver."""

    @pytest.fixture
    def exact(self):
        x = np.array([0.1, 0.3, 0.6, 0.75, 0.9])
        return sod_shock_tube_exact(x, 0.2)

    def test_undisturbed_states(self, exact):
        assert exact['rho'][0] == pytest.approx(1.0)
        assert exact['p'][0] == pytest.approx(1.0)
        assert exact['rho'][-1] == pytest.approx(0.125)
        assert exact['p'][-1] == pytest.approx(0.1)

    def test_star_region(self, exact):
        np.testing.assert_allclose(exact['p'][2:4], 0.30313, rtol=1e-4)
        np.testing.assert_allclose(exact['u'][2:4], 0.92745, rtol=1e-4)
        assert exact['rho'][2] == pytest.approx(0.42632, rel=1e-4)
        assert exact['rho'][3] == pytest.approx(0.26557, rel=1e-4)

    def test_rarefaction_fan(self, exact):
        """Inside the fan the state lies between the left and star states."""
        assert 0.42632 < exact['rho'][1] < 1.0
        assert 0.0 < exact['u'][1] < 0.92745
        # Fan is isentropic
        assert exact['p'][1] / exact['rho'][1]**1.4 == pytest.approx(1.0)

    def test_initial_time(self):
        x = np.array([0.2, 0.8])
        exact = sod_shock_tube_exact(x, 0.0)
        np.testing.assert_allclose(exact['rho'], [1.0, 0.125])
        np.testing.assert_allclose(exact['u'], 0.0)


class TestShockTubeSimulation:
    """Short shock tube runs."""

    @pytest.mark.parametrize("use_ranocha", [False, True])
    def test_stays_physical(self, gas, solver_config, use_ranocha):
        flux = RanochaFlux(gas) if use_ranocha else None
        problem = Euler1D(n_cells=100, order=1, gas=gas, flux=flux)
        solver = Solver1D(problem, solver_config)
        solver.solve(max_time=0.05)

        state = problem.get_state(solver.U)
        assert solver.time == pytest.approx(0.05)
        assert np.all(np.isfinite(solver.U))
        assert np.all(state.rho > 0)
        assert np.all(state.p > 0)

    def test_conservation(self, gas, solver_config):
        """
        Until the waves arrive the boundary states stay at rest, so mass and
        energy are conserved while momentum grows by the pressure difference
        of the two far-field states.
        """
        problem = Euler1D(n_cells=60, order=2, gas=gas)
        solver = Solver1D(problem, solver_config)
        initial = total_conserved(problem, solver.U)
        solver.solve(max_time=0.03)
        total = total_conserved(problem, solver.U)

        np.testing.assert_allclose(total[[0, 2]], initial[[0, 2]], atol=1e-10)
        p_left, p_right = SOD_LEFT[2], SOD_RIGHT[2]
        assert total[1] - initial[1] == pytest.approx((p_left - p_right) * solver.time, abs=1e-10)

    def test_close_to_exact(self, gas, solver_config):
        problem = Euler1D(n_cells=100, order=1, gas=gas)
        solver = Solver1D(problem, solver_config)
        solver.solve(max_time=0.05)

        state = problem.get_state(solver.U)
        exact = sod_shock_tube_exact(solver.x, solver.time, gas.gamma)
        assert np.mean(np.abs(state.rho - exact['rho'])) < 0.05
        assert np.mean(np.abs(state.p - exact['p'])) < 0.05

    def test_initial_condition(self, gas):
        problem = Euler1D(n_cells=10, order=1, gas=gas)
        x, U = problem.initialize_dofs()
        state = problem.get_state(U)
        np.testing.assert_allclose(state.rho, np.where(x < 0.5, SOD_LEFT[0], SOD_RIGHT[0]))
        np.testing.assert_allclose(state.p, np.where(x < 0.5, SOD_LEFT[2], SOD_RIGHT[2]))
        assert U.shape == (20, 3)

    def test_timestep(self, gas):
        problem = Euler1D(n_cells=10, order=2, gas=gas)
        _, U = problem.initialize_dofs()
        dt = problem.timestep_size(U, cfl=0.5)
        assert dt == pytest.approx(0.5 * 0.1 / np.sqrt(1.4) / 2)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
