"""
Univariate polynomials in the Bernstein basis on the interval [0, 1].

The polynomial of degree n with coefficients c_0 .. c_n is:

    p(t) = sum_i c_i * C(n, i) * t^i * (1-t)^(n-i)

This is the basis of the Bezier curves, so the X and Y coordinate functions
of a curve are just its control point coordinates.
"""

import numpy as np
from scipy.special import comb


class BernsteinPoly:
    """
    Immutable polynomial in the Bernstein basis.

    Product of two polynomials has degree equal to the sum of the degrees (no truncation).
    The all-ones coefficient vector of any degree represents the constant 1, so
    multiplication by `BernsteinPoly.ones(k)` raises the degree by `k` without
    changing the function. This does not hold in the power basis.
    """
    # Let numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    @classmethod
    def ones(cls, degree):
        return cls(np.ones(degree + 1))

    @classmethod
    def zero(cls, degree):
        return cls(np.zeros(degree + 1))

    def __init__(self, coefficients):
        """
        :param coefficients: Sequence of n+1 floats, n is the degree.
        """
        coefficients = np.array(coefficients, dtype=float)
        if coefficients.ndim != 1 or len(coefficients) == 0:
            raise ValueError(f"Expected nonempty vector of coefficients, shape: {coefficients.shape}.")
        coefficients.flags.writeable = False
        self.coefficients = coefficients
        self.degree = len(coefficients) - 1

    def elevate(self, k):
        """
        Return the same polynomial represented with degree `self.degree + k`.
        """
        assert k >= 0
        if k == 0:
            return self
        return self * BernsteinPoly.ones(k)

    def __add__(self, other):
        if not isinstance(other, BernsteinPoly):
            return NotImplemented
        a, b = self, other
        if a.degree < b.degree:
            a = a.elevate(b.degree - a.degree)
        elif b.degree < a.degree:
            b = b.elevate(a.degree - b.degree)
        return BernsteinPoly(a.coefficients + b.coefficients)

    def __neg__(self):
        return BernsteinPoly(-self.coefficients)

    def __sub__(self, other):
        if not isinstance(other, BernsteinPoly):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other):
        if isinstance(other, BernsteinPoly):
            # Convert to the scaled basis t^i (1-t)^(n-i), where the product is a plain convolution.
            m, n = self.degree, other.degree
            a = self.coefficients * comb(m, np.arange(m + 1))
            b = other.coefficients * comb(n, np.arange(n + 1))
            c = np.convolve(a, b) / comb(m + n, np.arange(m + n + 1))
            return BernsteinPoly(c)
        if np.isscalar(other):
            return BernsteinPoly(other * self.coefficients)
        return NotImplemented

    def __rmul__(self, other):
        if np.isscalar(other):
            return BernsteinPoly(other * self.coefficients)
        return NotImplemented

    def eval(self, t):
        """
        Evaluate by the de Casteljau algorithm.
        :param t: float or array of floats
        :return: float or array of the shape of `t`
        """
        t = np.asarray(t, dtype=float)
        n = self.degree
        b = np.broadcast_to(self.coefficients, t.shape + (n + 1,)).copy()
        s = t[..., None]
        for r in range(1, n + 1):
            b[..., :n - r + 1] = (1 - s) * b[..., :n - r + 1] + s * b[..., 1:n - r + 2]
        value = b[..., 0]
        if value.ndim == 0:
            return float(value)
        return value

    __call__ = eval

    def isclose(self, other, atol=1e-12):
        """
        True if both polynomials represent the same function up to `atol` in coefficients.
        """
        diff = self - other
        return bool(np.all(np.abs(diff.coefficients) <= atol))

    def __repr__(self):
        return f"BernsteinPoly({self.coefficients.tolist()})"
