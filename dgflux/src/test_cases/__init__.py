"""
Example problems for the flux-differencing solver.
"""

from .advection import Advection1D
from .shock_tube import Euler1D, sod_shock_tube_exact

__all__ = [
    'Advection1D',
    'Euler1D',
    'sod_shock_tube_exact',
]
