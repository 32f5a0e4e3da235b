"""
Euler flow state at a set of nodes using conservative variables.

State is stored node by node, with the conserved components on the last axis:
    U[..., 0] = rho   - density
    U[..., 1] = rhoU  - momentum per volume
    U[..., 2] = rhoE  - total energy per volume

This is the layout used by the discrete operator for the Euler law
(shape ``(n_dofs, 3)``), so a FlowState can wrap a solution array directly.
"""

import numpy as np
from dataclasses import dataclass

from .gas import GasProperties


N_VARS = 3


def pressure(U: np.ndarray, gamma: float) -> np.ndarray:
    """Pressure from conservative variables, p = (gamma - 1) * (rhoE - rhoU² / (2 rho))."""
    rho = U[..., 0]
    rhoU = U[..., 1]
    return (gamma - 1) * (U[..., 2] - 0.5 * rhoU * rhoU / rho)


def conservative(rho, u, p, gamma: float) -> np.ndarray:
    """Stack primitive variables into a conservative array with components last."""
    rho, u, p = np.broadcast_arrays(np.asarray(rho, dtype=float),
                                    np.asarray(u, dtype=float),
                                    np.asarray(p, dtype=float))
    # rhoE = p / (gamma - 1) + 0.5 * rho * u²
    return np.stack([rho, rho * u, p / (gamma - 1) + 0.5 * rho * u**2], axis=-1)


@dataclass
class FlowState:
    """
    Flow state at a set of nodes.

    Conservative variables (stored directly):
        U : array of shape (n_nodes, 3), components [rho, rhoU, rhoE]

    Primitive variables (computed as properties):
        u, p, T, e, E, H, a, M
    """
    U: np.ndarray
    gas: GasProperties

    def __post_init__(self):
        self.U = np.asarray(self.U, dtype=float)
        if self.U.shape[-1] != N_VARS:
            raise ValueError(f"Expected {N_VARS} conserved components, got shape {self.U.shape}")

    # --- Conservative variables ---

    @property
    def rho(self) -> np.ndarray:
        """Density."""
        return self.U[..., 0]

    @property
    def rhoU(self) -> np.ndarray:
        """Momentum per volume."""
        return self.U[..., 1]

    @property
    def rhoE(self) -> np.ndarray:
        """Total energy per volume."""
        return self.U[..., 2]

    # --- Primitive variables as properties ---

    @property
    def u(self) -> np.ndarray:
        """Velocity."""
        return self.rhoU / self.rho

    @property
    def p(self) -> np.ndarray:
        """Pressure from total energy."""
        return pressure(self.U, self.gas.gamma)

    @property
    def T(self) -> np.ndarray:
        """Temperature from ideal gas law."""
        return self.p / (self.rho * self.gas.R)

    @property
    def e(self) -> np.ndarray:
        """Specific internal energy."""
        return self.p / (self.rho * (self.gas.gamma - 1))

    @property
    def E(self) -> np.ndarray:
        """Total specific energy."""
        return self.rhoE / self.rho

    @property
    def H(self) -> np.ndarray:
        """Total specific enthalpy."""
        return self.E + self.p / self.rho

    @property
    def a(self) -> np.ndarray:
        """Speed of sound."""
        return np.sqrt(self.gas.gamma * self.p / self.rho)

    @property
    def M(self) -> np.ndarray:
        """Mach number."""
        return self.u / self.a

    # --- Array conversion methods ---

    def to_array(self) -> np.ndarray:
        """Copy of the conservative variable array, shape (n_nodes, 3)."""
        return self.U.copy()

    @classmethod
    def from_array(cls, U: np.ndarray, gas: GasProperties) -> 'FlowState':
        """
        Create FlowState from a conservative variable array.

        Args:
            U: Conservative variables [..., (rho, rhoU, rhoE)]
            gas: Gas properties
        """
        return cls(U=U, gas=gas)

    @classmethod
    def from_primitives(cls, rho, u, p, gas: GasProperties) -> 'FlowState':
        """
        Create FlowState from primitive variables.

        Args:
            rho: Density
            u: Velocity
            p: Pressure
            gas: Gas properties
        """
        return cls(U=conservative(rho, u, p, gas.gamma), gas=gas)
