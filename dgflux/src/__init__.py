"""
Flux-Differencing DG / FR Solver Package
========================================

Nodal discontinuous Galerkin / flux reconstruction discretization of 1D
hyperbolic conservation laws with summation-by-parts flux differencing.

Features:
- Gauss-Lobatto collocation (diagonal mass matrix, SBP derivative matrix)
- Flux-differencing volume terms with symmetric two-point fluxes
- Scalar linear advection and compressible Euler flux calculators
- Kennedy-Gruber and Ranocha entropy conserving Euler volume fluxes
- Explicit RK4, SSP-RK2 and forward Euler time integration

State representation:
    Degrees of freedom are stored cell-major then node-minor. Scalar laws
    use an array of shape (n_dofs,); the Euler law uses (n_dofs, 3) with
    components [rho, rhoU, rhoE].

Example:
    problem = Advection1D(n_cells=64, order=3)
    x, U = problem.initialize_dofs()
    work = allocate_work(U)
    dt = problem.timestep_size(U)
    rk4_step(U, 0.0, dt, problem.operator, work)
"""

from .gas import GasProperties
from .state import FlowState
from .quadrature import gauss_lobatto
from .polynomials import (jacobi_polynomial, jacobi_polynomials,
                          jacobi_derivative, jacobi_derivatives)
from .basis import LagrangeBasis
from .reference_element import ReferenceSegment
from .mesh import UniformMesh1D
from .logmean import logarithmic_mean, inverse_logarithmic_mean
from .flux import FluxCalculator, AdvectionFlux, EulerFlux, RanochaFlux
from .divergence import FluxDivergence1D
from .boundary import BoundaryCondition, FarFieldBC, InflowBC, ExtrapolationBC
from .discrete_operator import DiscreteOperator, FluxWorkspace
from .timestepping import (axpy, allocate_work, rk4_step, ssp_rk2_step,
                           forward_euler_step, compute_timestep)
from .solver import Solver1D, SolverConfig
from .output import write_columns

__all__ = [
    # Gas properties and flow state
    'GasProperties',
    'FlowState',

    # Reference element
    'gauss_lobatto',
    'jacobi_polynomial',
    'jacobi_polynomials',
    'jacobi_derivative',
    'jacobi_derivatives',
    'LagrangeBasis',
    'ReferenceSegment',

    # Mesh
    'UniformMesh1D',

    # Flux calculators
    'logarithmic_mean',
    'inverse_logarithmic_mean',
    'FluxCalculator',
    'AdvectionFlux',
    'EulerFlux',
    'RanochaFlux',

    # Spatial operators
    'FluxDivergence1D',
    'DiscreteOperator',
    'FluxWorkspace',

    # Boundary conditions
    'BoundaryCondition',
    'FarFieldBC',
    'InflowBC',
    'ExtrapolationBC',

    # Time integration
    'axpy',
    'allocate_work',
    'rk4_step',
    'ssp_rk2_step',
    'forward_euler_step',
    'compute_timestep',

    # Solver
    'Solver1D',
    'SolverConfig',

    # Output
    'write_columns',
]

__version__ = '1.0.0'
