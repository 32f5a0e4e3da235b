"""
Boundary conditions for the 1D discrete operator.

A boundary condition supplies the conserved state on the outside of a domain
boundary (the ghost value). The discrete operator pairs it with the interior
trace to form the numerical flux at interface 0 or interface n_cells.
"""

import numpy as np
from abc import ABC, abstractmethod
from typing import Callable


class BoundaryCondition(ABC):
    """Abstract base class for boundary conditions."""

    @abstractmethod
    def boundary_state(self, interior: np.ndarray, t: float) -> np.ndarray:
        """
        Conserved state outside the boundary.

        Args:
            interior: Interior trace value at the boundary node
            t: Time

        Returns:
            Ghost value with the same shape as interior
        """
        pass


class FarFieldBC(BoundaryCondition):
    """Fixed far-field state, independent of time and of the interior."""

    def __init__(self, state):
        """
        Args:
            state: Conserved far-field value
        """
        self.state = np.array(state, dtype=float)
        self.state.flags.writeable = False

    def boundary_state(self, interior: np.ndarray, t: float) -> np.ndarray:
        return self.state


class InflowBC(BoundaryCondition):
    """Prescribed time-dependent state, e.g. an exact inflow solution."""

    def __init__(self, state_func: Callable[[float], np.ndarray]):
        """
        Args:
            state_func: Function(t) -> conserved value at the boundary
        """
        self.state_func = state_func

    def boundary_state(self, interior: np.ndarray, t: float) -> np.ndarray:
        return np.asarray(self.state_func(t), dtype=float)


class ExtrapolationBC(BoundaryCondition):
    """
    Outflow by extrapolation: the ghost value echoes the interior trace,
    so the boundary flux reduces to the physical flux of the interior state.
    """

    def boundary_state(self, interior: np.ndarray, t: float) -> np.ndarray:
        return interior
