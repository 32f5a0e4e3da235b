"""
Pytest tests for the time-marching driver and the text output.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

import numpy as np
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from dgflux.src import Solver1D, SolverConfig, write_columns
from dgflux.src.test_cases import Advection1D, Euler1D


@pytest.fixture
def problem():
    return Advection1D(n_cells=16, order=2)


@pytest.fixture
def solver_config():
    return SolverConfig(cfl=0.25, max_iter=10000, print_interval=0)


class TestSolverConfiguration:
    """Configuration and setup errors."""

    def test_unknown_scheme(self, problem):
        with pytest.raises(ValueError, match="Unknown time scheme"):
            Solver1D(problem, SolverConfig(time_scheme='rk3'))

    def test_default_config(self, problem):
        solver = Solver1D(problem)
        assert solver.config.time_scheme == 'rk4'
        assert len(solver.work) == 5
        assert solver.time == 0.0

    @pytest.mark.parametrize("scheme, n_work", [('rk4', 5), ('rk2', 2), ('euler', 1)])
    def test_work_buffers(self, problem, scheme, n_work):
        solver = Solver1D(problem, SolverConfig(time_scheme=scheme))
        assert len(solver.work) == n_work
        assert all(w.shape == solver.U.shape for w in solver.work)

    def test_initial_condition_shape(self, problem, solver_config):
        solver = Solver1D(problem, solver_config)
        with pytest.raises(ValueError):
            solver.set_initial_condition(np.zeros(problem.num_dofs + 1))


class TestTimeMarching:
    """Stepping and run control."""

    def test_lands_on_final_time(self, problem, solver_config):
        solver = Solver1D(problem, solver_config)
        info = solver.solve(max_time=0.1)
        assert info['time'] == 0.1
        assert solver.time == 0.1
        assert info['iterations'] == solver.iteration > 0

    def test_max_iterations(self, problem):
        solver = Solver1D(problem, SolverConfig(max_iter=7, print_interval=0))
        info = solver.solve()
        assert info['iterations'] == 7
        assert info['time'] == pytest.approx(7 * problem.timestep_size())

    def test_fixed_dt(self, problem):
        solver = Solver1D(problem, SolverConfig(fixed_dt=1e-3, print_interval=0))
        assert solver.step() == 1e-3
        assert solver.time == pytest.approx(1e-3)

    def test_accuracy(self, problem, solver_config):
        solver = Solver1D(problem, solver_config)
        solver.solve(max_time=0.5)
        error = np.max(np.abs(solver.U - problem.exact_solution(solver.time)))
        assert error < 1e-2

    def test_non_finite_detected(self, problem, solver_config):
        solver = Solver1D(problem, solver_config)
        U = solver.U.copy()
        U[3] = np.nan
        solver.set_initial_condition(U)
        with pytest.raises(FloatingPointError):
            solver.step()

    def test_progress_output(self, problem, capsys):
        solver = Solver1D(problem, SolverConfig(max_iter=4, print_interval=2))
        solver.solve()
        out = capsys.readouterr().out
        assert "Starting flux-differencing DG solver" in out
        assert "Iter      2" in out
        assert "Iter      4" in out


class TestPlotting:
    """Matplotlib output."""

    def test_one_axis_per_field(self):
        problem = Euler1D(n_cells=8, order=1)
        solver = Solver1D(problem, SolverConfig(print_interval=0))
        fig = solver.plot_solution()
        assert len(fig.axes) == 3
        plt.close(fig)

    def test_saves_file(self, problem, tmp_path):
        solver = Solver1D(problem, SolverConfig(print_interval=0))
        filename = tmp_path / "advection.png"
        fig = solver.plot_solution(str(filename), exact={'u': problem.exact_solution(0.0)})
        assert filename.exists()
        plt.close(fig)


class TestWriteColumns:
    """Plain-text column output."""

    def test_format(self, tmp_path):
        path = write_columns(tmp_path / "out.dat", np.array([0.0, 0.5]),
                             {'u': np.array([1.0, 2.0]), 'v': np.array([-3.0, 4.25])})
        assert path.read_text() == (
            "#         x         u\n"
            "0.0  1.0\n"
            "0.5  2.0\n"
            "\n"
            "#         x         v\n"
            "0.0  -3.0\n"
            "0.5  4.25\n"
        )

    def test_full_precision(self, tmp_path):
        x = np.array([np.pi])
        path = write_columns(tmp_path / "pi.dat", x, {'u': x / 3})
        values = [float(v) for v in path.read_text().splitlines()[1].split()]
        assert values == [np.pi, np.pi / 3]

    def test_shape_mismatch(self, tmp_path):
        with pytest.raises(ValueError):
            write_columns(tmp_path / "bad.dat", np.zeros(3), {'u': np.zeros(2)})


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
