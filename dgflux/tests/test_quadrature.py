"""
Pytest tests for Gauss-Lobatto quadrature and Jacobi polynomials.

Tests verify:
1. Weights sum to the interval length
2. End points and symmetry of the nodes
3. Exactness for polynomials up to degree 2n - 3
4. Orthonormal Jacobi polynomials against closed forms
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from dgflux.src import (
    gauss_lobatto, jacobi_polynomial, jacobi_polynomials,
    jacobi_derivative, jacobi_derivatives
)
from dgflux.src.quadrature import MIN_POINTS, MAX_POINTS


SUPPORTED = list(range(MIN_POINTS, MAX_POINTS + 1))


class TestGaussLobatto:
    """Tests for the Gauss-Lobatto rule."""

    @pytest.mark.parametrize("n", SUPPORTED)
    def test_weights_sum_to_two(self, n):
        _, weights = gauss_lobatto(n)
        assert np.sum(weights) == pytest.approx(2.0, abs=1e-14)

    @pytest.mark.parametrize("n", SUPPORTED)
    def test_end_points(self, n):
        nodes, _ = gauss_lobatto(n)
        assert len(nodes) == n
        assert nodes[0] == -1.0
        assert nodes[-1] == 1.0

    @pytest.mark.parametrize("n", SUPPORTED)
    def test_symmetric_and_ascending(self, n):
        nodes, weights = gauss_lobatto(n)
        assert np.all(np.diff(nodes) > 0)
        np.testing.assert_allclose(nodes, -nodes[::-1], atol=1e-15)
        np.testing.assert_allclose(weights, weights[::-1], atol=1e-15)
        assert np.all(weights > 0)

    @pytest.mark.parametrize("n", SUPPORTED)
    def test_polynomial_exactness(self, n):
        """The n-point rule integrates x^k exactly for k <= 2n - 3."""
        nodes, weights = gauss_lobatto(n)
        for k in range(2 * n - 2):
            exact = 0.0 if k % 2 else 2.0 / (k + 1)
            assert np.dot(weights, nodes**k) == pytest.approx(exact, abs=1e-13)

    @pytest.mark.parametrize("n", SUPPORTED[1:])
    def test_interior_nodes_are_jacobi_roots(self, n):
        """Interior nodes are the roots of P_{n-2}^(1,1)."""
        nodes, _ = gauss_lobatto(n)
        values = jacobi_polynomial(1, 1, n - 2, nodes[1:-1])
        np.testing.assert_allclose(values, 0.0, atol=1e-12)

    @pytest.mark.parametrize("n", [0, 1, 8, 12])
    def test_unsupported_order(self, n):
        with pytest.raises(ValueError, match="Unsupported Gauss-Lobatto order"):
            gauss_lobatto(n)


class TestJacobiPolynomials:
    """Tests for the orthonormal Jacobi recurrence."""

    @pytest.fixture
    def x(self):
        return np.linspace(-1, 1, 11)

    def test_legendre_closed_forms(self, x):
        P = jacobi_polynomials(0, 0, 3, x)
        assert P.shape == (4, 11)
        np.testing.assert_allclose(P[0], np.sqrt(1 / 2))
        np.testing.assert_allclose(P[1], np.sqrt(3 / 2) * x)
        np.testing.assert_allclose(P[2], np.sqrt(5 / 2) * (3 * x**2 - 1) / 2, atol=1e-14)
        np.testing.assert_allclose(P[3], np.sqrt(7 / 2) * (5 * x**3 - 3 * x) / 2, atol=1e-14)

    def test_single_matches_all(self, x):
        P = jacobi_polynomials(1, 1, 5, x)
        for n in range(6):
            np.testing.assert_allclose(jacobi_polynomial(1, 1, n, x), P[n])

    @pytest.mark.parametrize("alpha, beta", [(0, 0), (1, 1), (2, 0)])
    def test_orthonormal(self, alpha, beta):
        """Gram matrix under the weight (1 - x)^alpha (1 + x)^beta is the identity."""
        nodes, weights = gauss_lobatto(7)
        x = nodes
        w = weights * (1 - x)**alpha * (1 + x)**beta
        P = jacobi_polynomials(alpha, beta, 2, x)
        gram = P @ np.diag(w) @ P.T
        np.testing.assert_allclose(gram, np.eye(3), atol=1e-12)

    def test_derivatives_of_legendre(self, x):
        dP = jacobi_derivatives(0, 0, 3, x)
        np.testing.assert_allclose(dP[0], 0.0)
        np.testing.assert_allclose(dP[1], np.sqrt(3 / 2))
        np.testing.assert_allclose(dP[2], np.sqrt(5 / 2) * 3 * x, atol=1e-14)
        np.testing.assert_allclose(dP[3], np.sqrt(7 / 2) * (15 * x**2 - 3) / 2, atol=1e-13)

    def test_single_derivative_matches_all(self, x):
        dP = jacobi_derivatives(0, 0, 4, x)
        for n in range(5):
            np.testing.assert_allclose(jacobi_derivative(0, 0, n, x), dP[n], atol=1e-14)

    def test_negative_degree(self):
        with pytest.raises(ValueError):
            jacobi_polynomial(0, 0, -1, 0.5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
