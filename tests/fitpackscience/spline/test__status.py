"""Tests for status code translation."""

import warnings

import pytest

from fitpackscience.spline import (
    Diagnostic,
    EvaluationError,
    ExtrapolationError,
    FitFailure,
    FitWarning,
    RootTruncationWarning,
    RoutineFamily,
    StatusKind,
)
from fitpackscience.spline._status import check_status, translate_status


class TestTranslateStatus:
    """Tests for translate_status."""

    @pytest.mark.parametrize(
        "code,diagnostic",
        [
            (0, Diagnostic.CONVERGED),
            (-1, Diagnostic.INTERPOLATING),
            (-2, Diagnostic.POLYNOMIAL),
            (1, Diagnostic.STORAGE_EXCEEDED),
            (2, Diagnostic.IMPOSSIBLE_RESULT),
            (3, Diagnostic.ITERATION_LIMIT),
            (10, Diagnostic.INVALID_INPUT),
        ],
    )
    def test_curve_fit_table(self, code, diagnostic):
        """Should map every documented curfit code."""
        status = translate_status(RoutineFamily.CURVE_FIT, code)

        assert status.diagnostic is diagnostic
        assert status.code == code

    @pytest.mark.parametrize("code", [4, 5, 11, 99, -3])
    def test_curve_fit_unknown(self, code):
        """Should treat undocumented curve codes as failures."""
        status = translate_status(RoutineFamily.CURVE_FIT, code)

        assert status.diagnostic is Diagnostic.UNKNOWN
        assert status.kind is StatusKind.FAILURE

    def test_curve_fit_kinds(self):
        """Should split usable and fatal positive codes."""
        kinds = {
            code: translate_status(RoutineFamily.CURVE_FIT, code).kind
            for code in (0, -1, -2, 1, 2, 3, 10)
        }

        assert kinds == {
            0: StatusKind.SUCCESS,
            -1: StatusKind.SUCCESS,
            -2: StatusKind.SUCCESS,
            1: StatusKind.FAILURE,
            2: StatusKind.WARNING,
            3: StatusKind.WARNING,
            10: StatusKind.FAILURE,
        }

    @pytest.mark.parametrize(
        "code,diagnostic",
        [
            (4, Diagnostic.TOO_MANY_COEFFICIENTS),
            (5, Diagnostic.COINCIDENT_KNOT),
            (2, Diagnostic.IMPOSSIBLE_RESULT),
        ],
    )
    def test_surface_fit_table(self, code, diagnostic):
        """Should map the surface-only codes."""
        assert translate_status(RoutineFamily.SURFACE_FIT, code).diagnostic is diagnostic

    def test_rank_deficiency(self):
        """Should report rank and rank deficiency for codes below -2."""
        status = translate_status(RoutineFamily.SURFACE_FIT, -5, 16)

        assert status.diagnostic is Diagnostic.RANK_DEFICIENT
        assert status.kind is StatusKind.WARNING
        assert "The rank is 5." in status.message
        assert "The rank deficiency is 11." in status.message

    def test_workspace_request(self):
        """Should report codes above 10 as a workspace failure."""
        status = translate_status(RoutineFamily.SURFACE_FIT, 4321)

        assert status.diagnostic is Diagnostic.WORKSPACE_TOO_SMALL
        assert status.kind is StatusKind.FAILURE
        assert "4321" in status.message

    def test_evaluation_tables(self):
        """Should map evaluation and root-finding codes."""
        assert translate_status(RoutineFamily.CURVE_EVALUATION, 0).diagnostic is Diagnostic.OK
        assert (
            translate_status(RoutineFamily.CURVE_EVALUATION, 1).diagnostic
            is Diagnostic.OUT_OF_RANGE
        )
        assert (
            translate_status(RoutineFamily.SURFACE_EVALUATION, 10).diagnostic
            is Diagnostic.INVALID_SURFACE_QUERY
        )
        assert (
            translate_status(RoutineFamily.ROOT_FINDING, 1).diagnostic
            is Diagnostic.ROOTS_TRUNCATED
        )

    def test_every_diagnostic_has_message(self):
        """Should carry a kind and a non-empty message on every member."""
        for diagnostic in Diagnostic:
            assert isinstance(diagnostic.kind, StatusKind)
            assert diagnostic.message

    def test_ok_property(self):
        """Should be true for successes and warnings only."""
        assert translate_status(RoutineFamily.CURVE_FIT, -1).ok
        assert translate_status(RoutineFamily.CURVE_FIT, 3).ok
        assert not translate_status(RoutineFamily.CURVE_FIT, 10).ok


class TestCheckStatus:
    """Tests for check_status."""

    def test_success_is_silent(self):
        """Should neither warn nor raise on success."""
        status = translate_status(RoutineFamily.CURVE_FIT, 0)

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert check_status(status) is status

    def test_fit_warning(self):
        """Should warn with the status attached."""
        status = translate_status(RoutineFamily.CURVE_FIT, 2)

        with pytest.warns(FitWarning) as record:
            assert check_status(status) is status

        assert record[0].message.status is status

    def test_root_truncation_warning(self):
        """Should warn about truncated root lists."""
        with pytest.warns(RootTruncationWarning):
            check_status(translate_status(RoutineFamily.ROOT_FINDING, 1))

    @pytest.mark.parametrize(
        "family", [RoutineFamily.CURVE_FIT, RoutineFamily.SURFACE_FIT]
    )
    def test_fit_failure(self, family):
        """Should raise FitFailure carrying the status."""
        status = translate_status(family, 10)

        with pytest.raises(FitFailure) as info:
            check_status(status)

        assert info.value.status is status

    def test_extrapolation_error(self):
        """Should raise ExtrapolationError for out-of-range points."""
        with pytest.raises(ExtrapolationError):
            check_status(translate_status(RoutineFamily.CURVE_EVALUATION, 1))

    def test_evaluation_error(self):
        """Should raise EvaluationError for invalid queries."""
        with pytest.raises(EvaluationError) as info:
            check_status(translate_status(RoutineFamily.SURFACE_EVALUATION, 10))

        assert not isinstance(info.value, ExtrapolationError)
