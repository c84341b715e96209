from .exceptions import ParamError, ImplicitizeError, DegenerateCurveError
from .bernstein import BernsteinPoly
from .implicit_poly import ImplicitPolynomial
from .curve import BezierCurve, QuadraticCurve, CubicCurve, binomial
from .implicitize import line_function, implicit_polynomial, inverse

__all__ = [
    'ParamError', 'ImplicitizeError', 'DegenerateCurveError',
    'BernsteinPoly', 'ImplicitPolynomial',
    'BezierCurve', 'QuadraticCurve', 'CubicCurve', 'binomial',
    'line_function', 'implicit_polynomial', 'inverse',
]
