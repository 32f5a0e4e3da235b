"""
Run Sod's shock tube with the flux-differencing DG / FR Euler solver and
compare to the exact Riemann solution.

This script demonstrates:
1. Unsteady Euler simulation to t = 0.2
2. Kennedy-Gruber (default) or Ranocha entropy conserving volume fluxes
3. Comparison to the exact Riemann solution
4. Resolution study

Run from the repository root:
    python dgflux/scripts/run_shock_tube.py --num-cells 400 --order 2
"""

import argparse
import sys
from pathlib import Path

# Add repository root to path
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import numpy as np
import matplotlib.pyplot as plt
from dgflux.src import EulerFlux, GasProperties, RanochaFlux, Solver1D, SolverConfig, write_columns
from dgflux.src.test_cases import Euler1D, sod_shock_tube_exact


FLUXES = {
    'kg': EulerFlux,
    'ranocha': RanochaFlux,
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Sod's shock tube for the 1D Euler equations")
    parser.add_argument("--num-cells", type=int, default=400, help="Number of cells")
    parser.add_argument("--order", type=int, default=2, help="Polynomial order")
    parser.add_argument("--t-final", type=float, default=0.2, help="Final time")
    parser.add_argument("--cfl", type=float, default=0.25, help="CFL number")
    parser.add_argument("--flux", choices=sorted(FLUXES), default='kg',
                        help="Two-point volume flux")
    parser.add_argument("--output", type=str, default="shock_tube.dat",
                        help="Column output file")
    parser.add_argument("--convergence", action="store_true",
                        help="Also run a resolution study")
    return parser.parse_args(argv)


def run_shock_tube(n_cells, order, t_final, cfl, flux_name='kg', print_interval=1000):
    """Run one shock tube simulation and return the solver and exact solution."""
    gas = GasProperties(gamma=1.4)
    problem = Euler1D(n_cells=n_cells, order=order, gas=gas, flux=FLUXES[flux_name](gas))
    config = SolverConfig(cfl=cfl, max_iter=1000000, print_interval=print_interval)
    solver = Solver1D(problem, config)
    solver.solve(max_time=t_final)

    exact = sod_shock_tube_exact(solver.x, solver.time, gas.gamma)
    return solver, exact


def run_convergence_study(order, t_final, cfl, flux_name):
    """Density L1 error for a sequence of meshes."""
    resolutions = [50, 100, 200, 400]
    errors = []

    for n_cells in resolutions:
        print(f"\n{'-'*80}")
        print(f"Resolution: {n_cells} cells")
        print(f"{'-'*80}")

        solver, exact = run_shock_tube(n_cells, order, t_final, cfl, flux_name, print_interval=0)
        state = solver.problem.get_state(solver.U)
        errors.append(np.mean(np.abs(state.rho - exact['rho'])))

    dx = 1.0 / np.array(resolutions)

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.loglog(dx, errors, 'b-o', linewidth=2, label='L1 norm')
    ax.loglog(dx, errors[0] * dx / dx[0], 'k--', alpha=0.5, label='1st order')
    ax.set_xlabel('Grid spacing Δx')
    ax.set_ylabel('Density error')
    ax.set_title('Density Error Convergence')
    ax.legend()
    ax.grid(True, alpha=0.3)
    ax.invert_xaxis()

    plt.tight_layout()
    plt.savefig('shock_tube_convergence.png', dpi=150, bbox_inches='tight')
    print(f"\nSaved convergence plot to: shock_tube_convergence.png")

    print("\n" + "=" * 80)
    print("CONVERGENCE SUMMARY")
    print("=" * 80)
    print(f"\n{'N cells':<10} {'ρ L1':<12}")
    print("-" * 80)
    for n, err in zip(resolutions, errors):
        print(f"{n:<10} {err:<12.6f}")

    return errors


def main(argv=None):
    args = parse_args(argv)

    print("\n" + "=" * 80)
    print("SOD SHOCK TUBE")
    print("=" * 80)

    solver, exact = run_shock_tube(args.num_cells, args.order, args.t_final, args.cfl, args.flux)
    state = solver.problem.get_state(solver.U)

    print("\nL1 errors:")
    for name in ('rho', 'u', 'p'):
        print(f"  {name:<4} {np.mean(np.abs(getattr(state, name) - exact[name])):.6e}")

    path = write_columns(args.output, solver.x, {
        'rho': state.rho, 'u': state.u, 'p': state.p,
        'rho_exact': exact['rho'], 'u_exact': exact['u'], 'p_exact': exact['p'],
    })
    print(f"Saved columns to: {path}")

    solver.plot_solution('shock_tube_results.png', exact=exact)

    if args.convergence:
        run_convergence_study(args.order, args.t_final, args.cfl, args.flux)


if __name__ == "__main__":
    main()
