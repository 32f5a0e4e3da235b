"""
Run the traveling sine wave advection test with comparison to the exact solution.

This script demonstrates:
1. Flux-differencing DG / FR on a scalar conservation law
2. Exact inflow boundary condition with outflow extrapolation
3. Classical RK4 time integration at a fixed CFL time step
4. Error against the exact traveling wave

Run from the repository root:
    python dgflux/scripts/run_advection.py --num-cells 1024 --order 1
"""

import argparse
import sys
from pathlib import Path

# Add repository root to path
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import numpy as np
from dgflux.src import Solver1D, SolverConfig, write_columns
from dgflux.src.test_cases import Advection1D


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Linear advection of a sine wave on [-pi, pi]")
    parser.add_argument("--num-cells", type=int, default=1024, help="Number of cells")
    parser.add_argument("--order", type=int, default=1, help="Polynomial order")
    parser.add_argument("--steps", type=int, default=10000, help="Number of time steps")
    parser.add_argument("--cfl", type=float, default=0.25, help="CFL number")
    parser.add_argument("--output", type=str, default="advection.dat",
                        help="Column output file")
    parser.add_argument("--plot", type=str, default="advection_results.png",
                        help="Plot file (empty to skip)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    problem = Advection1D(n_cells=args.num_cells, order=args.order)
    config = SolverConfig(
        cfl=args.cfl,
        max_iter=args.steps,
        print_interval=max(args.steps // 10, 1),
        time_scheme='rk4',
    )
    solver = Solver1D(problem, config)

    print(f"DOFs: {problem.num_dofs}, min element size: {problem.min_elem_size:.6e}, "
          f"dt: {solver.timestep():.6e}")

    info = solver.solve()

    exact = problem.exact_solution(solver.time)
    error = solver.U - exact
    mse = np.mean(error**2)

    print("\n" + "=" * 50)
    print("ADVECTION RESULTS")
    print("=" * 50)
    print(f"Iterations:   {info['iterations']}")
    print(f"Final time:   {info['time']:.6e}")
    print(f"MSE:          {mse:.6e}")
    print(f"Max error:    {np.max(np.abs(error)):.6e}")

    path = write_columns(args.output, solver.x, {'u': solver.U, 'exact': exact})
    print(f"Saved columns to: {path}")

    if args.plot:
        solver.plot_solution(args.plot, exact={'u': exact})

    return mse


if __name__ == "__main__":
    main()
