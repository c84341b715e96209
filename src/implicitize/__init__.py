"""
Implicit equations of quadratic and cubic Bezier curves.

 - bezier.implicit_poly: bivariate polynomials with per-axis degree bound.
 - bezier.implicitize: implicit polynomials and inverse maps built from control points.
 - bezier.curve: Bezier curves in the plane.
 - bezier.bernstein: univariate polynomials in the Bernstein basis.
 - core: configuration of tolerances, timing reports.
"""
from .bezier import *
from .core import load_config, get_config, set_config

__version__ = '0.1.0'
