"""
Planar Bezier curves.
Classes provide just the functionality needed for the implicitization:
- storing the control points
- evaluation of XY for t
- coordinate functions as Bernstein polynomials
- implicit polynomial and the inverse map (only for quadratic and cubic curves)
"""
from functools import cached_property

import numpy as np
from scipy.special import comb

from ..core.config import get_config
from .exceptions import ParamError
from .bernstein import BernsteinPoly
from . import implicitize as imp


def check_matrix(mat, shape, values, idx=()):
    '''
    Check shape and type of scalar, vector or matrix.
    :param mat: Scalar, vector, or vector of vectors (i.e. matrix). Vector may be list or other iterable.
    :param shape: List of dimensions: [] for scalar, [ n ] for vector, [n_rows, n_cols] for matrix.
    If a value in this list is None, the dimension can be arbitrary. The shape list is set fo actual dimensions
    of the matrix.
    :param values: Type or tuple of  allowed types of elements of the matrix. E.g. ( int, float )
    :param idx: Internal. Used to pass actual index in the matrix for possible error messages.
    :return:
    '''
    try:
        if len(shape) == 0:
            if not isinstance(mat, values):
                raise ParamError("Element at index {} of type {}, expected instance of {}.".format(idx, type(mat), values))
        else:
            if shape[0] is None:
                shape[0] = len(mat)
            l=None
            if not hasattr(mat, '__len__'):
                l=0
            elif len(mat) != shape[0]:
                l=len(mat)
            if not l is None:
                raise ParamError("Wrong len {} of element {}, should be  {}.".format(l, idx, shape[0]))
            for i, item in enumerate(mat):
                sub_shape = shape[1:]
                check_matrix(item, sub_shape, values, idx = (i, *idx))
                shape[1:] = sub_shape
        return shape
    except ParamError:
        raise
    except Exception as e:
        raise ParamError(e)


scalar_types = (int, float, np.integer, np.floating)


def binomial(n, k):
    return int(comb(n, k, exact=True))


class BezierCurve:
    """
    Bezier curve in the plane given by n + 1 control points, n is the order (degree) of the curve.
    """

    @classmethod
    def make(cls, points):
        """
        Construct the curve class matching the number of the control points,
        QuadraticCurve for 3 points, CubicCurve for 4 points, BezierCurve otherwise.
        """
        curve_class = {3: QuadraticCurve, 4: CubicCurve}.get(len(points), BezierCurve)
        return curve_class(points)

    binomial = staticmethod(binomial)

    def __init__(self, points):
        """
        :param points: List of control points (X, Y), X, Y are floats.
        """
        shape = check_matrix(points, [None, 2], scalar_types)
        if shape[0] < 2:
            raise ParamError(f"At least two control points needed, got {shape[0]}.")
        points = np.array(points, dtype=float)
        points.flags.writeable = False
        self.points = points
        # N x 2
        self.order = len(points) - 1

    @cached_property
    def x_poly(self):
        return BernsteinPoly(self.points[:, 0])

    @cached_property
    def y_poly(self):
        return BernsteinPoly(self.points[:, 1])

    def eval(self, t):
        """
        :param t: float or array of floats
        :return: point (2,) or array of points (..., 2)
        """
        return np.stack([self.x_poly.eval(t), self.y_poly.eval(t)], axis=-1)

    def line_function(self, i, j):
        return imp.line_function(self, i, j)

    @cached_property
    def implicit_polynomial(self):
        return imp.implicit_polynomial(self)

    @cached_property
    def inverse(self):
        return imp.inverse(self)

    def parameter_of(self, point):
        """
        Parameter t of a point lying on the curve, computed by the inverse map.
        Result is meaningless for points out of the curve.
        """
        numerator, denominator = self.inverse
        return numerator.value(point) / denominator.value(point)

    def on_curve(self, point, tol=None):
        """
        Test that the point lies on the (unbounded) implicit curve, i.e.
        |F(x, y)| <= tol * max |coefficient of F|.
        """
        if tol is None:
            tol = get_config().on_curve_tol
        poly = self.implicit_polynomial
        norm = np.max(np.abs(poly.coefficients))
        return np.abs(poly.value(point)) <= tol * norm

    def __repr__(self):
        return f"{type(self).__name__}({self.points.tolist()})"


class QuadraticCurve(BezierCurve):
    def __init__(self, points):
        super().__init__(points)
        if self.order != 2:
            raise ParamError(f"Quadratic curve needs 3 control points, got {len(self.points)}.")


class CubicCurve(BezierCurve):
    def __init__(self, points):
        super().__init__(points)
        if self.order != 3:
            raise ParamError(f"Cubic curve needs 4 control points, got {len(self.points)}.")

    def is_degenerate(self, tol=None):
        """
        True if the inverse map can not be constructed, see `implicitize.cubic_degeneracy`.
        """
        if tol is None:
            tol = get_config().degenerate_tol
        return abs(imp.cubic_degeneracy(self)) <= tol
