"""
Uniform 1D mesh of an interval.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Tuple

from . import mapping


@dataclass
class UniformMesh1D:
    """
    Uniform partition of [x0, x1] into n_cells cells.

    Cells are adjacent by index; cell 0 touches the left physical boundary
    and cell n_cells - 1 the right one.
    - x_faces: Vertex locations (n_cells + 1)
    - x_cells: Cell centers (n_cells)
    - dx: Cell widths (n_cells)
    """
    x0: float
    x1: float
    n_cells: int
    delta: float = field(init=False)

    def __post_init__(self):
        if not self.x0 < self.x1:
            raise ValueError(f"Mesh bounds must satisfy x0 < x1, got [{self.x0}, {self.x1}]")
        if self.n_cells <= 0:
            raise ValueError(f"Mesh needs at least one cell, got {self.n_cells}")

        self.delta = (self.x1 - self.x0) / self.n_cells
        self.x_faces = self.x0 + np.arange(self.n_cells + 1) * self.delta
        self.x_cells = 0.5 * (self.x_faces[:-1] + self.x_faces[1:])
        self.dx = self.x_faces[1:] - self.x_faces[:-1]

    @property
    def num_vertices(self) -> int:
        return self.n_cells + 1

    @property
    def min_cell_size(self) -> float:
        return float(np.min(self.dx))

    def vertex(self, i: int) -> float:
        if not 0 <= i <= self.n_cells:
            raise IndexError(f"Vertex {i} out of range for {self.num_vertices} vertices")
        return self.x0 + i * self.delta

    def cell(self, i: int) -> Tuple[float, float]:
        """Bounds (left, right) of cell i."""
        if not 0 <= i < self.n_cells:
            raise IndexError(f"Cell {i} out of range for {self.n_cells} cells")
        return self.x0 + i * self.delta, self.x0 + (i + 1) * self.delta

    def jacobians(self) -> np.ndarray:
        """Per-cell Jacobian of the reference mapping, dx/dr."""
        return mapping.jacobian(self.x_faces[:-1], self.x_faces[1:])

    def node_coordinates(self, ref_nodes) -> np.ndarray:
        """
        Physical positions of reference nodes in every cell.

        Args:
            ref_nodes: Node positions on [-1, 1]

        Returns:
            Positions in DOF order (cell-major, node-minor), shape (n_cells * n_nodes,)
        """
        r = np.asarray(ref_nodes, dtype=float)
        x = mapping.r_to_x(self.x_faces[:-1, None], self.x_faces[1:, None], r[None, :])
        return x.reshape(-1)
