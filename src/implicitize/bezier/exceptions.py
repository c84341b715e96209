

class ParamError(Exception):
    pass


class ImplicitizeError(Exception):
    pass


class DegenerateCurveError(ImplicitizeError, ZeroDivisionError):
    """
    Control points of the curve do not allow construction of the inverse map,
    e.g. collinear inner control points of a cubic.
    """
    pass
