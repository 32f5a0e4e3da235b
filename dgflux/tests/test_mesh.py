"""
Pytest tests for the uniform mesh and the reference mapping.
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from dgflux.src import UniformMesh1D, ReferenceSegment
from dgflux.src import mapping
from dgflux.src.test_cases import Advection1D


class TestUniformMesh:
    """Tests for mesh geometry."""

    def test_geometry(self):
        mesh = UniformMesh1D(0.0, 2.0, 4)
        assert mesh.num_vertices == 5
        assert mesh.delta == pytest.approx(0.5)
        np.testing.assert_allclose(mesh.x_faces, [0.0, 0.5, 1.0, 1.5, 2.0])
        np.testing.assert_allclose(mesh.x_cells, [0.25, 0.75, 1.25, 1.75])
        np.testing.assert_allclose(mesh.dx, 0.5)
        assert mesh.min_cell_size == pytest.approx(0.5)
        assert mesh.vertex(4) == pytest.approx(2.0)
        assert mesh.cell(1) == pytest.approx((0.5, 1.0))
        np.testing.assert_allclose(mesh.jacobians(), 0.25)

    def test_node_coordinates_order(self):
        mesh = UniformMesh1D(0.0, 2.0, 2)
        x = mesh.node_coordinates([-1.0, 0.0, 1.0])
        np.testing.assert_allclose(x, [0.0, 0.5, 1.0, 1.0, 1.5, 2.0])

    @pytest.mark.parametrize("x0, x1, n", [(1.0, 0.0, 4), (0.0, 0.0, 4), (0.0, 1.0, 0)])
    def test_invalid_mesh(self, x0, x1, n):
        with pytest.raises(ValueError):
            UniformMesh1D(x0, x1, n)

    def test_bad_indices(self):
        mesh = UniformMesh1D(0.0, 1.0, 3)
        with pytest.raises(IndexError):
            mesh.cell(3)
        with pytest.raises(IndexError):
            mesh.vertex(-1)


class TestMapping:
    """Tests for the affine reference mapping."""

    def test_round_trip_and_end_points(self):
        x0, x1 = -2.0, 3.0
        assert mapping.r_to_x(x0, x1, -1.0) == pytest.approx(x0)
        assert mapping.r_to_x(x0, x1, 1.0) == pytest.approx(x1)
        assert mapping.x_to_r(x0, x1, 0.5) == pytest.approx(0.0)
        r = np.linspace(-1, 1, 7)
        np.testing.assert_allclose(mapping.x_to_r(x0, x1, mapping.r_to_x(x0, x1, r)), r)

    def test_jacobian_and_contravariant_basis(self):
        assert mapping.jacobian(1.0, 5.0) == pytest.approx(2.0)
        assert mapping.contravariant_basis(1.0, 5.0) == pytest.approx(0.5)

    def test_degenerate_segment(self):
        with pytest.raises(ValueError):
            mapping.x_to_r(1.0, 1.0, 1.0)
        with pytest.raises(ValueError):
            mapping.contravariant_basis(2.0, 1.0)


class TestAdvectionLayout:
    """Degree-of-freedom layout of the advection problem with 4 cells of order 1."""

    @pytest.fixture
    def problem(self):
        return Advection1D(n_cells=4, order=1)

    def test_num_dofs(self, problem):
        assert problem.num_dofs == 8

    def test_min_elem_size(self, problem):
        assert problem.min_elem_size == pytest.approx(np.pi / 2)

    def test_initial_positions(self, problem):
        x, U = problem.initialize_dofs()
        assert x.shape == (8,)
        assert x[0] == pytest.approx(-np.pi)
        assert x[1] == pytest.approx(-np.pi / 2)
        assert x[2] == pytest.approx(-np.pi / 2)
        assert x[-1] == pytest.approx(np.pi)
        np.testing.assert_allclose(U, np.sin(x))

    def test_positions_match_reference_nodes(self, problem):
        elem = ReferenceSegment(1)
        x, _ = problem.initialize_dofs()
        left, right = problem.mesh.cell(0)
        assert x[0] == pytest.approx(mapping.r_to_x(left, right, elem.node_position(0)))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
