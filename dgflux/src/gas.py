"""
Gas properties for calorically perfect gas.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GasProperties:
    """Thermodynamic properties for a calorically perfect gas."""
    gamma: float = 1.4          # Ratio of specific heats
    R: float = 287.0            # Specific gas constant [J/(kg·K)]

    def __post_init__(self):
        if self.gamma <= 1.0:
            raise ValueError(f"Ratio of specific heats must exceed 1, got {self.gamma}")

    @property
    def cp(self) -> float:
        """Specific heat at constant pressure [J/(kg·K)]."""
        return self.gamma * self.R / (self.gamma - 1)

    @property
    def cv(self) -> float:
        """Specific heat at constant volume [J/(kg·K)]."""
        return self.R / (self.gamma - 1)
