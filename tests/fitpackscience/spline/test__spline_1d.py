"""Tests for Spline1D fitting and evaluation."""

import dataclasses

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy.interpolate import splev, splint, splrep

from fitpackscience.spline import (
    Boundary,
    DegreeError,
    Diagnostic,
    ExtrapolationError,
    FitFailure,
    FitWarning,
    KnotError,
    RootTruncationWarning,
    Spline1D,
    ValidationError,
    _fitpack,
    spline_1d_derivative,
    spline_1d_evaluate,
    spline_1d_fit,
    spline_1d_integral,
    spline_1d_roots,
)


@pytest.fixture
def sine():
    x = np.linspace(0.0, 2.0 * np.pi, 25)
    return x, np.sin(x)


@pytest.fixture
def forbid_fitpack(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("FITPACK must not be called")

    monkeypatch.setattr(_fitpack, "curfit", fail)
    monkeypatch.setattr(_fitpack, "percur", fail)


class TestSpline1DFit:
    """Tests for spline_1d_fit."""

    @pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
    def test_interpolates_samples(self, k):
        """Should reproduce every sample when s = 0."""
        x = np.linspace(0.0, 1.0, 12)
        y = np.sin(2.0 * np.pi * x) + x

        spline = spline_1d_fit(x, y, k=k)

        assert_allclose(spline(x), y, atol=1e-10)
        assert spline.status.diagnostic is Diagnostic.INTERPOLATING

    @pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
    def test_coefficient_count(self, k, sine):
        """Should store n - k - 1 coefficients for n knots."""
        x, y = sine

        spline = spline_1d_fit(x, y, k=k, s=0.1)

        assert spline.coefficients.shape[0] == spline.knots.shape[0] - k - 1
        assert spline.get_knots().shape[0] == spline.knots.shape[0] - 2 * k

    def test_worked_example(self):
        """Should interpolate the alternating example exactly."""
        x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
        y = np.array([0.0, 1.0, 0.0, 1.0, 0.0])

        spline = spline_1d_fit(x, y, k=3, s=0.0)

        assert abs(spline(2.0)) <= 1e-9
        assert spline.get_residual() == pytest.approx(0.0, abs=1e-12)

    def test_matches_scipy(self, sine):
        """Should produce the knots and coefficients of splrep."""
        x, y = sine
        t, c, k = splrep(x, y, k=3, s=0.2)

        spline = spline_1d_fit(x, y, k=3, s=0.2)

        assert_allclose(spline.knots, t)
        assert_allclose(spline.coefficients, c[: t.shape[0] - k - 1])

    def test_smoothing_condition(self):
        """Should keep the residual at or below s."""
        rng = np.random.default_rng(0)
        x = np.linspace(0.0, 1.0, 50)
        y = np.sin(2.0 * np.pi * x) + 0.1 * rng.standard_normal(50)
        s = 50 * 0.01

        spline = spline_1d_fit(x, y, s=s)

        assert spline.residual <= s * 1.001
        assert spline.status.ok

    def test_uniform_weights_default(self, sine):
        """Should treat missing weights as ones."""
        x, y = sine

        assert spline_1d_fit(x, y, s=0.1) == spline_1d_fit(x, y, w=np.ones_like(x), s=0.1)

    def test_large_smoothing_gives_polynomial(self):
        """Should fall back to the least-squares polynomial."""
        x = np.linspace(0.0, 1.0, 20)
        y = x**2

        spline = spline_1d_fit(x, y, k=3, s=1e6)

        assert spline.status.diagnostic is Diagnostic.POLYNOMIAL
        assert spline.knots.shape[0] == 8

    def test_boundary_stored(self, sine):
        """Should coerce the boundary mode."""
        x, y = sine

        assert spline_1d_fit(x, y, boundary="zero").boundary is Boundary.ZERO
        assert spline_1d_fit(x, y).boundary is Boundary.NEAREST

    def test_periodic(self):
        """Should give equal values and slopes at both ends."""
        x = np.linspace(0.0, 2.0 * np.pi, 21)
        y = np.sin(x) + np.cos(2.0 * x)
        y[-1] = y[0]

        spline = spline_1d_fit(x, y, periodic=True)

        assert spline(x[0]) == pytest.approx(spline(x[-1]), abs=1e-10)
        assert spline_1d_derivative(spline, x[0]) == pytest.approx(
            spline_1d_derivative(spline, x[-1]), abs=1e-8
        )
        assert_allclose(spline(x), y, atol=1e-10)

    def test_periodic_matches_scipy(self):
        """Should produce the spline of splrep with per=1."""
        x = np.linspace(0.0, 1.0, 15)
        y = np.cos(2.0 * np.pi * x)
        y[-1] = y[0]
        tck = splrep(x, y, per=1)

        spline = spline_1d_fit(x, y, periodic=True)
        xq = np.linspace(0.0, 1.0, 37)

        assert_allclose(spline(xq), splev(xq, tck), atol=1e-12)

    def test_explicit_knots(self):
        """Should fit on the given interior knots."""
        x = np.linspace(0.0, 10.0, 21)
        y = np.sin(x)
        knots = np.array([2.5, 5.0, 7.5])
        tck = splrep(x, y, t=knots, k=3)

        spline = spline_1d_fit(x, y, knots=knots)
        xq = np.linspace(0.0, 10.0, 41)

        assert_allclose(spline.get_knots(), [0.0, 2.5, 5.0, 7.5, 10.0])
        assert_allclose(spline(xq), splev(xq, tck), atol=1e-12)
        assert spline.coefficients.shape[0] == 7

    def test_explicit_knots_outside_domain(self):
        """Should reject knots on or outside the domain."""
        x = np.linspace(0.0, 1.0, 10)

        with pytest.raises(KnotError):
            spline_1d_fit(x, x, knots=[0.0, 0.5])

        with pytest.raises(KnotError):
            spline_1d_fit(x, x, knots=[0.5, 1.5])

    def test_explicit_knots_not_increasing(self):
        """Should reject unordered knots."""
        x = np.linspace(0.0, 1.0, 10)

        with pytest.raises(KnotError):
            spline_1d_fit(x, x, knots=[0.6, 0.4])

    def test_explicit_knots_too_many(self):
        """Should reject more than m + k + 1 knots."""
        x = np.linspace(0.0, 1.0, 5)

        with pytest.raises(KnotError):
            spline_1d_fit(x, x, k=1, knots=np.linspace(0.1, 0.9, 8))

    def test_schoenberg_whitney(self):
        """Should reject knots with an unsupported B-spline."""
        x = np.linspace(0.0, 1.0, 10)
        knots = [0.5, 0.501, 0.502, 0.503, 0.504]

        with pytest.raises(KnotError, match="Schoenberg-Whitney"):
            spline_1d_fit(x, np.sin(x), knots=knots)

    def test_knot_error_is_validation_error(self):
        """Should be catchable as ValidationError."""
        x = np.linspace(0.0, 1.0, 10)

        with pytest.raises(ValidationError):
            spline_1d_fit(x, x, knots=[2.0])

    def test_degraded_fit_warns(self, monkeypatch, sine):
        """Should warn and still return the spline for codes 2 and 3."""
        x, y = sine
        curfit = _fitpack.curfit

        def degraded(*args):
            n, c, fp, ier = curfit(*args)
            return n, c, fp, 3

        monkeypatch.setattr(_fitpack, "curfit", degraded)

        with pytest.warns(FitWarning) as record:
            spline = spline_1d_fit(x, y, s=0.1)

        assert spline.status.diagnostic is Diagnostic.ITERATION_LIMIT
        assert record[0].message.status is spline.status

    @pytest.mark.parametrize("code", [1, 10, 7])
    def test_fatal_codes(self, monkeypatch, sine, code):
        """Should raise FitFailure for storage, input and unknown codes."""
        x, y = sine
        curfit = _fitpack.curfit

        def failing(*args):
            n, c, fp, ier = curfit(*args)
            return n, c, fp, code

        monkeypatch.setattr(_fitpack, "curfit", failing)

        with pytest.raises(FitFailure) as info:
            spline_1d_fit(x, y, s=0.1)

        assert info.value.status.code == code


class TestSpline1DValidation:
    """Tests that malformed input never reaches FITPACK."""

    def test_non_positive_weight(self, forbid_fitpack, sine):
        """Should reject zero and negative weights."""
        x, y = sine
        w = np.ones_like(x)
        w[3] = 0.0

        with pytest.raises(ValidationError):
            spline_1d_fit(x, y, w=w)

        w[3] = -1.0
        with pytest.raises(ValidationError):
            spline_1d_fit(x, y, w=w)

    def test_non_monotonic_x(self, forbid_fitpack):
        """Should reject x that is not strictly increasing."""
        with pytest.raises(ValidationError):
            spline_1d_fit([0.0, 2.0, 1.0, 3.0, 4.0], [0.0, 1.0, 2.0, 3.0, 4.0])

        with pytest.raises(ValidationError):
            spline_1d_fit([0.0, 1.0, 1.0, 3.0, 4.0], [0.0, 1.0, 2.0, 3.0, 4.0])

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"k": 0},
            {"k": 6},
            {"k": 2.5},
            {"s": -1.0},
            {"boundary": "clamp"},
            {"w": np.ones(4)},
        ],
    )
    def test_bad_arguments(self, forbid_fitpack, sine, kwargs):
        """Should reject out-of-range arguments."""
        x, y = sine

        with pytest.raises(ValidationError):
            spline_1d_fit(x, y, **kwargs)

    def test_too_few_points(self, forbid_fitpack):
        """Should require more samples than the degree."""
        with pytest.raises(ValidationError):
            spline_1d_fit([0.0, 1.0, 2.0], [0.0, 1.0, 0.0], k=3)

    def test_length_mismatch(self, forbid_fitpack):
        """Should require x and y of equal length."""
        with pytest.raises(ValidationError):
            spline_1d_fit(np.arange(6.0), np.arange(5.0))

    def test_non_finite(self, forbid_fitpack, sine):
        """Should reject NaN and infinity."""
        x, y = sine
        y = y.copy()
        y[2] = np.nan

        with pytest.raises(ValidationError):
            spline_1d_fit(x, y)

    def test_periodic_end_values(self, forbid_fitpack, sine):
        """Should require y[0] == y[-1] for periodic fits."""
        x, y = sine

        with pytest.raises(ValidationError):
            spline_1d_fit(x, y + x, periodic=True)


class TestSpline1DEvaluate:
    """Tests for spline_1d_evaluate."""

    def test_scalar(self, sine):
        """Should return a float for a scalar query."""
        x, y = sine
        spline = spline_1d_fit(x, y)

        value = spline_1d_evaluate(spline, 1.0)

        assert isinstance(value, float)
        assert value == pytest.approx(np.sin(1.0), abs=1e-3)

    def test_shape(self, sine):
        """Should keep the shape of the query."""
        x, y = sine
        spline = spline_1d_fit(x, y)
        xq = np.linspace(0.0, 6.0, 12).reshape(3, 4)

        assert spline_1d_evaluate(spline, xq).shape == (3, 4)

    def test_call(self, sine):
        """Should evaluate when called."""
        x, y = sine
        spline = spline_1d_fit(x, y)
        xq = np.array([0.5, 1.5])

        assert_allclose(spline(xq), spline_1d_evaluate(spline, xq))

    def test_zero_outside(self, sine):
        """Should give zero outside the domain in zero mode."""
        x, y = sine
        spline = spline_1d_fit(x, y + 2.0, boundary="zero")

        assert spline(-1.0) == 0.0
        assert spline(10.0) == 0.0

    def test_nearest_outside(self, sine):
        """Should clamp to the domain in nearest mode."""
        x, y = sine
        spline = spline_1d_fit(x, y + 2.0)

        assert spline(-1.0) == pytest.approx(spline(x[0]))
        assert spline(10.0) == pytest.approx(spline(x[-1]))

    def test_extrapolate_outside(self):
        """Should continue the end polynomial in extrapolate mode."""
        x = np.array([0.0, 1.0, 2.0])
        spline = spline_1d_fit(x, 2.0 * x, k=1, boundary="extrapolate")

        assert spline(3.0) == pytest.approx(6.0)
        assert spline(-1.0) == pytest.approx(-2.0)

    def test_error_outside(self, sine):
        """Should raise ExtrapolationError in error mode."""
        x, y = sine
        spline = spline_1d_fit(x, y, boundary=Boundary.ERROR)

        with pytest.raises(ExtrapolationError) as info:
            spline(np.array([1.0, 7.0]))

        assert info.value.status.diagnostic is Diagnostic.OUT_OF_RANGE
        assert spline(1.0) == pytest.approx(np.sin(1.0), abs=1e-3)


class TestSpline1DDerivative:
    """Tests for spline_1d_derivative."""

    @pytest.mark.parametrize("order", [1, 2, 3])
    def test_matches_scipy(self, sine, order):
        """Should agree with splev(der=order)."""
        x, y = sine
        tck = splrep(x, y, k=3, s=0.0)
        spline = spline_1d_fit(x, y, k=3)
        xq = np.linspace(0.1, 6.1, 13)

        assert_allclose(
            spline_1d_derivative(spline, xq, order), splev(xq, tck, der=order), atol=1e-10
        )

    @pytest.mark.parametrize("k", [1, 2, 3, 4, 5])
    def test_order_bounds(self, sine, k):
        """Should accept orders 1..k and reject the rest."""
        x, y = sine
        spline = spline_1d_fit(x, y, k=k)

        for order in range(1, k + 1):
            spline_1d_derivative(spline, 1.0, order)

        with pytest.raises(DegreeError):
            spline_1d_derivative(spline, 1.0, 0)

        with pytest.raises(DegreeError):
            spline_1d_derivative(spline, 1.0, k + 1)

    def test_non_integer_order(self, sine):
        """Should reject boolean and fractional orders."""
        x, y = sine
        spline = spline_1d_fit(x, y)

        with pytest.raises(DegreeError):
            spline_1d_derivative(spline, 1.0, True)

        with pytest.raises(DegreeError):
            spline_1d_derivative(spline, 1.0, 1.5)

    def test_caller_buffer(self, sine):
        """Should accept a caller-owned scratch buffer."""
        x, y = sine
        spline = spline_1d_fit(x, y)
        work = np.zeros(spline.knots.shape[0])

        assert spline_1d_derivative(spline, 1.0, work=work) == pytest.approx(
            spline_1d_derivative(spline, 1.0)
        )

    @pytest.mark.parametrize(
        "work",
        [
            np.zeros(3),
            np.zeros(40, dtype=np.int64),
            np.zeros((40, 2)),
        ],
    )
    def test_bad_buffer(self, sine, work):
        """Should reject short or mistyped buffers."""
        x, y = sine
        spline = spline_1d_fit(x, y)

        with pytest.raises(ValidationError):
            spline_1d_derivative(spline, 1.0, work=work)

    def test_buffer_only_checked(self, sine):
        """Should accept a sized buffer without writing to it."""
        x, y = sine
        spline = spline_1d_fit(x, y)
        work = np.zeros(spline.knots.shape[0])

        value = spline_1d_derivative(spline, 1.0, work=work)

        assert value == pytest.approx(spline_1d_derivative(spline, 1.0))
        assert np.all(work == 0.0)


class TestSpline1DIntegral:
    """Tests for spline_1d_integral."""

    def test_exact_for_polynomial(self):
        """Should integrate a reproduced polynomial exactly."""
        x = np.linspace(0.0, 1.0, 10)
        spline = spline_1d_fit(x, x**2)

        assert spline_1d_integral(spline, 0.0, 1.0) == pytest.approx(1.0 / 3.0)
        assert spline_1d_integral(spline, 1.0, 0.0) == pytest.approx(-1.0 / 3.0)

    def test_matches_scipy(self, sine):
        """Should agree with splint."""
        x, y = sine
        tck = splrep(x, y, s=0.3)
        spline = spline_1d_fit(x, y, s=0.3)

        assert spline_1d_integral(spline, 0.5, 4.0) == pytest.approx(
            splint(0.5, 4.0, tck)
        )

    def test_buffer_receives_integrals(self, sine):
        """Should leave the B-spline integrals in the scratch buffer."""
        x, y = sine
        spline = spline_1d_fit(x, y)
        work = np.zeros(spline.knots.shape[0])

        spline_1d_integral(spline, 0.0, 2.0 * np.pi, work=work)

        assert np.any(work != 0.0)


class TestSpline1DRoots:
    """Tests for spline_1d_roots."""

    @pytest.fixture
    def crossing(self):
        x = np.linspace(0.5, 3.0 * np.pi - 0.5, 60)
        return spline_1d_fit(x, np.sin(x))

    def test_roots(self, crossing):
        """Should find the crossings in ascending order."""
        roots = spline_1d_roots(crossing)

        assert_allclose(roots, [np.pi, 2.0 * np.pi], atol=1e-4)
        assert np.all(np.diff(roots) > 0)

    def test_cap(self, crossing):
        """Should warn and return exactly max_count roots."""
        with pytest.warns(RootTruncationWarning):
            roots = spline_1d_roots(crossing, max_count=1)

        assert roots.shape == (1,)

    def test_non_cubic(self):
        """Should require a cubic spline."""
        x = np.linspace(0.0, 1.0, 10)
        spline = spline_1d_fit(x, x - 0.5, k=2)

        with pytest.raises(DegreeError):
            spline_1d_roots(spline)

    @pytest.mark.parametrize("max_count", [0, -3, 2.5, True, "4"])
    def test_invalid_cap(self, crossing, max_count):
        """Should require an integer max_count >= 1."""
        with pytest.raises(ValidationError):
            spline_1d_roots(crossing, max_count=max_count)

    def test_numpy_integer_cap(self, crossing):
        """Should accept a numpy integer max_count."""
        roots = spline_1d_roots(crossing, max_count=np.int64(4))

        assert_allclose(roots, [np.pi, 2.0 * np.pi], atol=1e-4)


class TestSpline1D:
    """Tests for the Spline1D value object."""

    def test_read_only(self, sine):
        """Should not allow mutation."""
        x, y = sine
        spline = spline_1d_fit(x, y)

        assert not spline.knots.flags.writeable
        assert not spline.coefficients.flags.writeable

        with pytest.raises(dataclasses.FrozenInstanceError):
            spline.degree = 2

    def test_equality_ignores_status(self, sine):
        """Should compare the logical value only."""
        x, y = sine
        spline = spline_1d_fit(x, y)
        copy = Spline1D(
            knots=spline.knots,
            coefficients=spline.coefficients,
            degree=spline.degree,
            boundary=spline.boundary,
            residual=spline.residual,
        )

        assert copy == spline
        assert copy != spline_1d_fit(x, y, boundary="zero")

    def test_from_scipy(self, sine):
        """Should evaluate a spline built from splrep output."""
        x, y = sine
        t, c, k = splrep(x, y, s=0.1)
        spline = Spline1D(knots=t, coefficients=c[: t.shape[0] - k - 1], degree=k)
        xq = np.linspace(0.0, 6.0, 11)

        assert_allclose(spline(xq), splev(xq, (t, c, k)), atol=1e-12)

    def test_accessors(self, sine):
        """Should return copies of the stored arrays."""
        x, y = sine
        spline = spline_1d_fit(x, y)

        coeffs = spline.get_coeffs()
        coeffs[0] = 99.0

        assert spline.coefficients[0] != 99.0
        assert spline.get_knots()[0] == x[0]
        assert spline.get_knots()[-1] == x[-1]
