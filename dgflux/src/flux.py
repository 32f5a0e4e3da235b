"""
Flux calculators for the flux-differencing DG / FR schemes.

A flux calculator supplies three fluxes of one conservation law:
    physical_flux(U)                      f(U)
    numerical_volume_flux(UL, UR)         symmetric, consistent two-point flux
    numerical_surface_flux(UL, UR, sign)  volume flux plus dissipation

Conserved values carry their components on the trailing axes
(``variable_shape``); every method broadcasts over the leading axes, so a
whole array of nodes or interfaces is evaluated in one call.

In 1D the outward unit normal of a face degenerates to a sign. The surface
flux jump is oriented by the sign of the first (minus) state: for sign > 0
the minus state sits on the left of the face.
"""

import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple

from .gas import GasProperties
from .logmean import logarithmic_mean, inverse_logarithmic_mean
from .state import N_VARS


class FluxCalculator(ABC):
    """Abstract base class for the fluxes of a conservation law."""

    variable_shape: Tuple[int, ...] = ()

    @abstractmethod
    def physical_flux(self, U: np.ndarray) -> np.ndarray:
        """
        Physical flux f(U).

        Args:
            U: Conserved values (..., *variable_shape)

        Returns:
            Flux with the same shape as U
        """
        pass

    @abstractmethod
    def numerical_volume_flux(self, UL: np.ndarray, UR: np.ndarray) -> np.ndarray:
        """
        Symmetric two-point flux used by flux differencing inside an element.

        Must be consistent: numerical_volume_flux(U, U) == physical_flux(U).
        """
        pass

    @abstractmethod
    def numerical_surface_flux(self, UL: np.ndarray, UR: np.ndarray,
                               sign) -> np.ndarray:
        """
        Dissipative numerical flux at an element face.

        Args:
            UL: Minus-side states
            UR: Plus-side states
            sign: Outward normal of the minus side, -1 or +1 (scalar or per face)
        """
        pass

    @abstractmethod
    def max_wave_speed(self, U: np.ndarray) -> float:
        """Largest characteristic speed over all given states."""
        pass

    def oriented_jump(self, UL: np.ndarray, UR: np.ndarray, sign) -> np.ndarray:
        """UL - UR for sign >= 0, UR - UL for sign < 0."""
        sign = np.asarray(sign, dtype=float)
        sign = sign.reshape(sign.shape + (1,) * len(self.variable_shape))
        return np.where(sign < 0, UR - UL, UL - UR)


class AdvectionFlux(FluxCalculator):
    """
    Scalar linear advection, f(u) = c u.

    The surface flux is the central flux plus upwind dissipation |c| jump / 2.
    """

    variable_shape = ()

    def __init__(self, velocity: float):
        self.velocity = float(velocity)

    def physical_flux(self, U: np.ndarray) -> np.ndarray:
        return self.velocity * np.asarray(U)

    def numerical_volume_flux(self, UL: np.ndarray, UR: np.ndarray) -> np.ndarray:
        return self.velocity * (np.asarray(UL) + np.asarray(UR)) / 2

    def numerical_surface_flux(self, UL: np.ndarray, UR: np.ndarray,
                               sign) -> np.ndarray:
        UL = np.asarray(UL)
        UR = np.asarray(UR)
        jump = self.oriented_jump(UL, UR, sign)
        return self.numerical_volume_flux(UL, UR) + abs(self.velocity) * jump / 2

    def max_wave_speed(self, U: np.ndarray) -> float:
        return abs(self.velocity)


class EulerFlux(FluxCalculator):
    """
    1D compressible Euler equations, U = (rho, rhoU, rhoE).

    Volume flux: the split form of Kennedy and Gruber, see "Split Form Nodal
    Discontinuous Galerkin Schemes with Summation-By-Parts Property for the
    Compressible Euler Equations" by Gassner, Winters and Kopriva (2016).
    Arithmetic averages of rho, u, p and E/rho are combined as
        (rho u, rho u u + p, (rho e + p) u).

    Surface flux: the volume flux plus local Lax-Friedrichs dissipation
    max(|u| + a) / 2 * jump.
    """

    variable_shape = (N_VARS,)

    def __init__(self, gas: GasProperties = None):
        self.gas = gas if gas is not None else GasProperties()

    def primitives(self, U: np.ndarray):
        """Density, velocity and pressure of conserved states."""
        U = np.asarray(U, dtype=float)
        rho = U[..., 0]
        if np.any(rho <= 0):
            raise ValueError(f"Non-positive density in flux evaluation, min = {np.min(rho)}")
        u = U[..., 1] / rho
        p = (self.gas.gamma - 1) * (U[..., 2] - 0.5 * U[..., 1] * u)
        return rho, u, p

    def sound_speed(self, rho: np.ndarray, p: np.ndarray) -> np.ndarray:
        if np.any(p <= 0):
            raise ValueError(f"Non-positive pressure in flux evaluation, min = {np.min(p)}")
        return np.sqrt(self.gas.gamma * p / rho)

    def physical_flux(self, U: np.ndarray) -> np.ndarray:
        U = np.asarray(U, dtype=float)
        rho, u, p = self.primitives(U)
        rhoU = U[..., 1]
        return np.stack([rhoU, rhoU * u + p, (U[..., 2] + p) * u], axis=-1)

    def numerical_volume_flux(self, UL: np.ndarray, UR: np.ndarray) -> np.ndarray:
        UL = np.asarray(UL, dtype=float)
        UR = np.asarray(UR, dtype=float)
        rhoL, uL, pL = self.primitives(UL)
        rhoR, uR, pR = self.primitives(UR)

        # Arithmetic averages
        rho = (rhoL + rhoR) / 2
        u = (uL + uR) / 2
        p = (pL + pR) / 2
        e = (UL[..., 2] / rhoL + UR[..., 2] / rhoR) / 2

        return np.stack([rho * u, rho * u * u + p, (rho * e + p) * u], axis=-1)

    def numerical_surface_flux(self, UL: np.ndarray, UR: np.ndarray,
                               sign) -> np.ndarray:
        UL = np.asarray(UL, dtype=float)
        UR = np.asarray(UR, dtype=float)
        rhoL, uL, pL = self.primitives(UL)
        rhoR, uR, pR = self.primitives(UR)

        # Maximum local wave speed
        smax = np.maximum(np.abs(uL) + self.sound_speed(rhoL, pL),
                          np.abs(uR) + self.sound_speed(rhoR, pR))

        jump = self.oriented_jump(UL, UR, sign)
        return self.numerical_volume_flux(UL, UR) + (smax / 2)[..., None] * jump

    def max_wave_speed(self, U: np.ndarray) -> float:
        rho, u, p = self.primitives(U)
        return float(np.max(np.abs(u) + self.sound_speed(rho, p)))


class RanochaFlux(EulerFlux):
    """
    Entropy conserving and kinetic energy preserving Euler flux of Ranocha.

    Built on logarithmic means of density and of rho / p, it conserves the
    mathematical entropy -rho s / (gamma - 1) in the volume terms. The surface
    flux adds the same local Lax-Friedrichs dissipation as EulerFlux.
    """

    def numerical_volume_flux(self, UL: np.ndarray, UR: np.ndarray) -> np.ndarray:
        UL = np.asarray(UL, dtype=float)
        UR = np.asarray(UR, dtype=float)
        rhoL, uL, pL = self.primitives(UL)
        rhoR, uR, pR = self.primitives(UR)
        if np.any(pL <= 0) or np.any(pR <= 0):
            raise ValueError("Non-positive pressure in flux evaluation")

        rho_mean = logarithmic_mean(rhoL, rhoR)
        # Inverse of the logarithmic mean of rho / p
        inv_rho_p_mean = pL * pR * inverse_logarithmic_mean(rhoL * pR, rhoR * pL)
        u_avg = (uL + uR) / 2
        p_avg = (pL + pR) / 2
        u2_avg = uL * uR / 2

        f_rho = rho_mean * u_avg
        f_rhoU = f_rho * u_avg + p_avg
        f_rhoE = (f_rho * (u2_avg + inv_rho_p_mean / (self.gas.gamma - 1))
                  + (pL * uR + pR * uL) / 2)
        return np.stack([f_rho, f_rhoU, f_rhoE], axis=-1)
