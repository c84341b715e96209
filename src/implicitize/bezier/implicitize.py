"""
Implicit equations and inverse maps of quadratic and cubic Bezier curves.

All constructions combine the line functions l(i, j) of pairs of control points:
the implicit polynomial is the determinant of the Bezout matrix of the curve,
the inverse map t = N(x, y) / D(x, y) recovers the parameter of a point lying on the curve.

Functions take any curve object providing:
- `order`: int, degree of the curve
- `points`: array (order + 1) x 2 of control points
- `binomial(n, k)`: binomial coefficient
"""
import logging
import numpy as np

from ..core.config import get_config
from ..core.report import report
from .implicit_poly import ImplicitPolynomial
from .exceptions import ParamError, DegenerateCurveError


def line_function(curve, i, j):
    """
    Line through the control points i and j weighted by C(n, i) * C(n, j).
    """
    n = curve.order
    pi = curve.points[i]
    pj = curve.points[j]
    b = curve.binomial(n, i) * curve.binomial(n, j)
    return b * ImplicitPolynomial.line(pi[1] - pj[1], pj[0] - pi[0], pi[0] * pj[1] - pj[0] * pi[1])


def _check_order(curve, order):
    if curve.order != order:
        raise ParamError(f"Expected curve of order {order}, got order {curve.order}.")


def quadratic_implicit(curve):
    _check_order(curve, 2)
    l = lambda i, j: line_function(curve, i, j)
    l20 = l(2, 0)
    return l(2, 1) * l(1, 0) - l20 * l20


def quadratic_inverse(curve):
    _check_order(curve, 2)
    l20 = line_function(curve, 2, 0)
    l21 = line_function(curve, 2, 1)
    return l20, l20 - l21


def cubic_implicit(curve):
    _check_order(curve, 3)
    l = lambda i, j: line_function(curve, i, j)
    l30 = l(3, 0)
    l20 = l(2, 0)
    l31 = l(3, 1)
    # Symmetric Bezout matrix.
    m = [[l(3, 2), l31,           l30    ],
         [l31,     l30 + l(2, 1), l20    ],
         [l30,     l20,           l(1, 0)]]
    return m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1]) \
         - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0]) \
         + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])


def _cross(a, b):
    return a[0] * b[1] - a[1] * b[0]


def _det(points, i, j, k):
    """
    Twice the signed area of the triangle of control points i, j, k.
    """
    pi, pj, pk = points[i], points[j], points[k]
    return _cross(pj, pk) - _cross(pi, pk) + _cross(pi, pj)


def _points_scale(curve):
    return float(np.max(np.abs(curve.points)))


def cubic_degeneracy(curve):
    """
    Return det(1, 2, 3) divided by the square of the control points scale.
    Zero for collinear control points 1, 2, 3, where the cubic inverse map is undefined.
    Zero also for all control points at the origin.
    """
    _check_order(curve, 3)
    scale = _points_scale(curve)
    if scale == 0:
        return 0.0
    return _det(curve.points, 1, 2, 3) / scale ** 2


def cubic_inverse(curve, tol=None):
    """
    :param tol: Relative tolerance for the degeneracy check, `degenerate_tol` from the config by default.
    :raise DegenerateCurveError: for |det(1,2,3)| <= tol * scale ** 2
    """
    _check_order(curve, 3)
    cfg = get_config()
    if tol is None:
        tol = cfg.degenerate_tol
    points = curve.points
    degeneracy = cubic_degeneracy(curve)
    if abs(degeneracy) <= tol:
        raise DegenerateCurveError(
            f"Inverse map undefined, control points 1, 2, 3 are collinear: {points[1:].tolist()}")
    if abs(degeneracy) <= cfg.ill_conditioned_tol:
        logging.warning(f"Badly conditioned cubic inverse map, relative det(1,2,3): {degeneracy}")

    det123 = _det(points, 1, 2, 3)
    c1 = _det(points, 0, 1, 3) / (3 * det123)
    c2 = -_det(points, 0, 2, 3) / (3 * det123)
    l = lambda i, j: line_function(curve, i, j)
    la = c1 * l(3, 1) + c2 * (l(3, 0) + l(2, 1)) + l(2, 0)
    lb = c1 * l(3, 0) + c2 * l(2, 0) + l(1, 0)
    return lb, lb - la


_implicit_fn = {2: quadratic_implicit, 3: cubic_implicit}
_inverse_fn = {2: quadratic_inverse, 3: cubic_inverse}


def _select(table, curve):
    try:
        return table[curve.order]
    except KeyError:
        raise ParamError(f"Curves of order {curve.order} not supported, only orders: {sorted(table)}.")


@report
def implicit_polynomial(curve):
    """
    Implicit polynomial F of the curve, F(x(t), y(t)) = 0 for all t.
    """
    poly = _select(_implicit_fn, curve)(curve)
    logging.debug(f"Implicit polynomial of order {poly.order} for curve of order {curve.order}.")
    return poly


@report
def inverse(curve):
    """
    Inverse map (numerator, denominator) of the curve. For a point (x, y) on the curve
    t = numerator.value((x, y)) / denominator.value((x, y)).
    """
    return _select(_inverse_fn, curve)(curve)
