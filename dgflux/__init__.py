"""
dgflux - Flux-Differencing DG / FR for 1D Conservation Laws
===========================================================

Re-exports all public components from dgflux.src
"""

from dgflux.src import (
    # Gas properties and flow state
    GasProperties,
    FlowState,
    # Reference element
    gauss_lobatto,
    jacobi_polynomial,
    jacobi_polynomials,
    jacobi_derivative,
    jacobi_derivatives,
    LagrangeBasis,
    ReferenceSegment,
    # Mesh
    UniformMesh1D,
    # Flux calculators
    logarithmic_mean,
    inverse_logarithmic_mean,
    FluxCalculator,
    AdvectionFlux,
    EulerFlux,
    RanochaFlux,
    # Spatial operators
    FluxDivergence1D,
    DiscreteOperator,
    FluxWorkspace,
    # Boundary conditions
    BoundaryCondition,
    FarFieldBC,
    InflowBC,
    ExtrapolationBC,
    # Time integration
    axpy,
    allocate_work,
    rk4_step,
    ssp_rk2_step,
    forward_euler_step,
    compute_timestep,
    # Solver
    Solver1D,
    SolverConfig,
    # Output
    write_columns,
)
from dgflux.src.test_cases import Advection1D, Euler1D, sod_shock_tube_exact

__all__ = [
    'GasProperties',
    'FlowState',
    'gauss_lobatto',
    'jacobi_polynomial',
    'jacobi_polynomials',
    'jacobi_derivative',
    'jacobi_derivatives',
    'LagrangeBasis',
    'ReferenceSegment',
    'UniformMesh1D',
    'logarithmic_mean',
    'inverse_logarithmic_mean',
    'FluxCalculator',
    'AdvectionFlux',
    'EulerFlux',
    'RanochaFlux',
    'FluxDivergence1D',
    'DiscreteOperator',
    'FluxWorkspace',
    'BoundaryCondition',
    'FarFieldBC',
    'InflowBC',
    'ExtrapolationBC',
    'axpy',
    'allocate_work',
    'rk4_step',
    'ssp_rk2_step',
    'forward_euler_step',
    'compute_timestep',
    'Solver1D',
    'SolverConfig',
    'write_columns',
    'Advection1D',
    'Euler1D',
    'sod_shock_tube_exact',
]
