"""
Orthonormal Jacobi polynomials on [-1, 1].

P_n^(alpha, beta) is normalised so that its square integrates to one against
the weight (1 - x)^alpha (1 + x)^beta. Legendre polynomials are the case
alpha = beta = 0. Evaluation uses the three-term recurrence and is vectorized
over x.
"""

from math import gamma as gamma_function

import numpy as np


def _recurrence(alpha: float, beta: float, n: int, x: np.ndarray):
    """Yield P_0 ... P_n evaluated at x."""
    if n < 0:
        raise ValueError(f"Polynomial degree must be non-negative, got {n}")

    a1 = alpha + 1
    b1 = beta + 1
    ab2 = alpha + beta + 2

    p_prev_prev = np.full_like(x, np.sqrt(gamma_function(ab2) / gamma_function(a1)
                                          / gamma_function(b1) / 2.0**(a1 + beta)))
    yield p_prev_prev
    if n == 0:
        return

    p_prev = 0.5 * p_prev_prev * np.sqrt((ab2 + 1) / a1 / b1) * (ab2 * x + alpha - beta)
    yield p_prev

    a_old = 2 / ab2 * np.sqrt(a1 * b1 / (ab2 + 1))
    for i in range(1, n):
        h = 2 * i + alpha + beta
        b_new = (alpha + beta) * (beta - alpha) / h / (h + 2)
        a_new = 2 / (h + 2) * np.sqrt((i + 1) * (i + a1 + beta) * (i + a1) * (i + b1)
                                      / (h + 1) / (h + 3))
        p = ((x - b_new) * p_prev - a_old * p_prev_prev) / a_new
        yield p

        a_old = a_new
        p_prev_prev, p_prev = p_prev, p


def jacobi_polynomial(alpha: float, beta: float, n: int, x) -> np.ndarray:
    """Value of the degree-n orthonormal Jacobi polynomial at x."""
    x = np.asarray(x, dtype=float)
    value = None
    for value in _recurrence(alpha, beta, n, x):
        pass
    return value


def jacobi_polynomials(alpha: float, beta: float, n: int, x) -> np.ndarray:
    """
    Values of all orthonormal Jacobi polynomials of degree 0..n at x.

    Returns:
        Array of shape (n + 1,) + x.shape
    """
    x = np.asarray(x, dtype=float)
    return np.stack(list(_recurrence(alpha, beta, n, x)))


def jacobi_derivative(alpha: float, beta: float, n: int, x) -> np.ndarray:
    """First derivative of the degree-n orthonormal Jacobi polynomial at x."""
    x = np.asarray(x, dtype=float)
    if n == 0:
        return np.zeros_like(x)
    # d/dx P_n^(a,b) = sqrt(n (n + a + b + 1)) P_{n-1}^(a+1,b+1)
    return np.sqrt(n * (n + alpha + beta + 1)) * jacobi_polynomial(alpha + 1, beta + 1, n - 1, x)


def jacobi_derivatives(alpha: float, beta: float, n: int, x) -> np.ndarray:
    """
    First derivatives of all orthonormal Jacobi polynomials of degree 0..n at x.

    Returns:
        Array of shape (n + 1,) + x.shape
    """
    x = np.asarray(x, dtype=float)
    derivatives = [np.zeros_like(x)]
    if n > 0:
        shifted = jacobi_polynomials(alpha + 1, beta + 1, n - 1, x)
        for k in range(1, n + 1):
            derivatives.append(np.sqrt(k * (k + alpha + beta + 1)) * shifted[k - 1])
    return np.stack(derivatives)
