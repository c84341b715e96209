import pytest
import numpy as np

from implicitize import BezierCurve, QuadraticCurve, CubicCurve, ParamError, binomial


def de_casteljau(points, t):
    pts = np.array(points, dtype=float)
    n = len(pts) - 1
    for r in range(1, n + 1):
        pts[:n - r + 1] = (1.0 - t) * pts[:n - r + 1] + t * pts[1:n - r + 2]
    return pts[0]


class TestBezierCurve:

    def test_binomial(self):
        assert [binomial(3, k) for k in range(4)] == [1, 3, 3, 1]
        assert binomial(2, 1) == 2
        assert BezierCurve.binomial(4, 2) == 6

    def test_make(self):
        assert type(BezierCurve.make([(0, 0), (1, 1), (2, 0)])) is QuadraticCurve
        assert type(BezierCurve.make([(0, 0), (1, 1), (2, 0), (3, 3)])) is CubicCurve
        curve = BezierCurve.make(np.array([[0, 0], [1, 1], [2, 0], [3, 3], [4, 0]]))
        assert type(curve) is BezierCurve
        assert curve.order == 4

    def test_eval(self):
        points = [(0, 0), (1, 2), (3, 2), (4, 0)]
        curve = CubicCurve(points)
        assert np.allclose(curve.eval(0.0), points[0])
        assert np.allclose(curve.eval(1.0), points[-1])
        t = np.linspace(0, 1, 9)
        xy = curve.eval(t)
        assert xy.shape == (9, 2)
        for ti, p in zip(t, xy):
            assert np.allclose(p, de_casteljau(points, ti))
        # Explicit cubic form.
        t = 0.3
        ref = (1 - t) ** 3 * np.array(points[0]) + 3 * (1 - t) ** 2 * t * np.array(points[1]) \
              + 3 * (1 - t) * t ** 2 * np.array(points[2]) + t ** 3 * np.array(points[3])
        assert np.allclose(curve.eval(t), ref)

    def test_coordinate_polynomials(self):
        curve = QuadraticCurve([(0, 1), (2, 3), (4, -1)])
        assert curve.x_poly.degree == 2
        assert np.allclose(curve.y_poly.coefficients, [1, 3, -1])
        for t in np.linspace(0, 1, 5):
            assert np.allclose([curve.x_poly.eval(t), curve.y_poly.eval(t)], curve.eval(t))

    def test_immutable_points(self):
        points = [[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]]
        curve = QuadraticCurve(points)
        points[0][0] = 5.0
        assert curve.points[0, 0] == 0.0
        with pytest.raises(ValueError):
            curve.points[0, 0] = 1.0

    def test_invalid_points(self):
        with pytest.raises(ParamError):
            BezierCurve([(0, 0)])
        with pytest.raises(ParamError):
            BezierCurve([(0, 0, 0), (1, 1, 1)])
        with pytest.raises(ParamError):
            BezierCurve([(0, 0), (1, 'a')])
        with pytest.raises(ParamError):
            BezierCurve([0, 1, 2])
        with pytest.raises(ParamError):
            QuadraticCurve([(0, 0), (1, 1), (2, 0), (3, 3)])
        with pytest.raises(ParamError):
            CubicCurve([(0, 0), (1, 1), (2, 0)])


class TestPackage:

    def test_public_names(self):
        import implicitize
        from implicitize import bezier
        assert 'CubicCurve' in bezier.__all__
        assert not hasattr(implicitize, 'implicitize')
        assert not hasattr(implicitize, 'curve')
        assert implicitize.ImplicitPolynomial is bezier.ImplicitPolynomial
