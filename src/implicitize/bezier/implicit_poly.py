import numpy as np
from scipy.signal import convolve2d

from .bernstein import BernsteinPoly


class ImplicitPolynomial:
    """
    Bivariate polynomial F(x, y) with the same degree bound `order` in both variables.

    Coefficients are stored in a dense square table, `coefficients[i, j]` is
    the coefficient of x^i * y^j for 0 <= i, j <= order. The table is read only,
    all operations produce new instances.

    Addition and subtraction require equal orders, there is no implicit
    promotion of the order. Only the product raises the order.
    """
    # Let numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    @staticmethod
    def line(a, b, c):
        """
        Polynomial of the line a * x + b * y + c = 0.
        """
        return ImplicitPolynomial([[c, b], [a, 0.0]])

    def __init__(self, coefficients):
        """
        :param coefficients: (order+1) x (order+1) table of floats.
        """
        coefficients = np.array(coefficients, dtype=float)
        if coefficients.ndim != 2 or coefficients.shape[0] != coefficients.shape[1] or coefficients.shape[0] == 0:
            raise ValueError(f"Expected nonempty square table of coefficients, shape: {coefficients.shape}.")
        coefficients.flags.writeable = False
        self.coefficients = coefficients
        self.order = coefficients.shape[0] - 1

    def coefficient(self, i, j):
        """
        Coefficient of x^i y^j.
        """
        if not (0 <= i <= self.order and 0 <= j <= self.order):
            raise IndexError(f"Coefficient ({i}, {j}) out of range of the polynomial of order {self.order}.")
        return self.coefficients[i, j]

    def scale(self, k):
        return ImplicitPolynomial(k * self.coefficients)

    def _check_order(self, other):
        if self.order != other.order:
            raise ValueError(f"Order mismatch: {self.order} != {other.order}.")

    def __add__(self, other):
        if not isinstance(other, ImplicitPolynomial):
            return NotImplemented
        self._check_order(other)
        return ImplicitPolynomial(self.coefficients + other.coefficients)

    def __sub__(self, other):
        if not isinstance(other, ImplicitPolynomial):
            return NotImplemented
        self._check_order(other)
        return ImplicitPolynomial(self.coefficients - other.coefficients)

    def __neg__(self):
        return ImplicitPolynomial(-self.coefficients)

    def __mul__(self, other):
        if isinstance(other, ImplicitPolynomial):
            # Full 2d convolution: out[i, j] = sum a[i1, j1] * b[i - i1, j - j1]
            return ImplicitPolynomial(convolve2d(self.coefficients, other.coefficients, mode='full'))
        if np.isscalar(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if np.isscalar(other):
            return self.scale(other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, ImplicitPolynomial):
            return NotImplemented
        return self.order == other.order and np.array_equal(self.coefficients, other.coefficients)

    __hash__ = None

    def isclose(self, other, atol=1e-12):
        return self.order == other.order and np.allclose(self.coefficients, other.coefficients, rtol=0, atol=atol)

    def value(self, point):
        """
        Evaluate F at a point or at an array of points.
        :param point: (x, y) or array of shape (..., 2)
        :return: float or array of shape (...)
        """
        point = np.asarray(point, dtype=float)
        x, y = point[..., 0], point[..., 1]
        total = np.zeros(x.shape)
        for i in range(self.order + 1):
            for j in range(self.order + 1):
                total = total + self.coefficients[i, j] * x ** i * y ** j
        if total.ndim == 0:
            return float(total)
        return total

    def __call__(self, x, y):
        return self.value(np.stack(np.broadcast_arrays(x, y), axis=-1))

    def value_along(self, x, y):
        """
        Substitute the curve coordinate functions, return F(X(t), Y(t)) as a Bernstein polynomial
        of degree `order ** 2`.

        :param x: BernsteinPoly X(t)
        :param y: BernsteinPoly Y(t)
        """
        x_powers = [BernsteinPoly([1.0])]
        y_powers = [BernsteinPoly([1.0])]
        for i in range(1, self.order + 1):
            x_powers.append(x_powers[i - 1] * x)
            y_powers.append(y_powers[i - 1] * y)

        result_degree = self.order * self.order
        total = BernsteinPoly.zero(result_degree)
        for i in range(self.order + 1):
            for j in range(self.order + 1):
                c = self.coefficients[i, j]
                if c == 0:
                    continue
                term = x_powers[i] * y_powers[j]
                k = result_degree - term.degree
                if k > 0:
                    term = term * BernsteinPoly.ones(k)
                else:
                    assert k == 0, f"Nonzero coefficient ({i}, {j}) of a term of degree {term.degree} > {result_degree}."
                total = total + c * term
        return total

    def __repr__(self):
        return f"ImplicitPolynomial(order={self.order}, {self.coefficients.tolist()})"
