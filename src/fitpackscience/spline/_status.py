"""Translation of FITPACK status codes (``ier``) into outcomes.

Each routine family has its own table from integer code to a member of the
closed :class:`Diagnostic` enumeration. A diagnostic knows whether it is a
success, a usable-but-degraded result (warning) or a failure, and carries
the explanation shown to the user.
"""

from __future__ import annotations

import enum
import warnings
from dataclasses import dataclass
from typing import Dict, Optional

from ._evaluation_error import EvaluationError
from ._extrapolation_error import ExtrapolationError
from ._fit_failure import FitFailure
from ._fit_warning import FitWarning
from ._root_truncation_warning import RootTruncationWarning


class StatusKind(enum.Enum):
    SUCCESS = "success"
    WARNING = "warning"
    FAILURE = "failure"


class RoutineFamily(enum.Enum):
    CURVE_FIT = "curve fit"
    SURFACE_FIT = "surface fit"
    CURVE_EVALUATION = "curve evaluation"
    SURFACE_EVALUATION = "surface evaluation"
    ROOT_FINDING = "root finding"


class Diagnostic(enum.Enum):
    """Every outcome a FITPACK routine can report, with its severity."""

    OK = (
        StatusKind.SUCCESS,
        "Success.",
    )
    CONVERGED = (
        StatusKind.SUCCESS,
        "The spline satisfies the smoothing condition fp = s.",
    )
    INTERPOLATING = (
        StatusKind.SUCCESS,
        "The spline is an interpolating spline (fp = 0).",
    )
    POLYNOMIAL = (
        StatusKind.SUCCESS,
        "The spline is the weighted least-squares polynomial (fp <= s).",
    )
    STORAGE_EXCEEDED = (
        StatusKind.FAILURE,
        "The required storage space exceeds the available storage space "
        "given by the knot capacity: the capacity is too small, or s is "
        "too small. Try increasing s.",
    )
    IMPOSSIBLE_RESULT = (
        StatusKind.WARNING,
        "A theoretically impossible result was found during the iteration "
        "process for finding a smoothing spline with fp = s: s too small. "
        "There is an approximation returned but the corresponding weighted "
        "sum of squared residuals does not satisfy abs(fp-s)/s < tol.",
    )
    ITERATION_LIMIT = (
        StatusKind.WARNING,
        "The maximal number of iterations (20) allowed for finding a "
        "smoothing spline with fp = s has been reached: s too small. There "
        "is an approximation returned but the corresponding weighted sum "
        "of squared residuals does not satisfy abs(fp-s)/s < tol.",
    )
    TOO_MANY_COEFFICIENTS = (
        StatusKind.FAILURE,
        "No more knots can be added because the number of B-spline "
        "coefficients (nx-kx-1)*(ny-ky-1) already exceeds the number of "
        "data points m: either s or m too small.",
    )
    COINCIDENT_KNOT = (
        StatusKind.FAILURE,
        "No more knots can be added because the additional knot would "
        "(quasi) coincide with an old one: s too small or too large a "
        "weight to an inaccurate data point.",
    )
    INVALID_INPUT = (
        StatusKind.FAILURE,
        "Error on entry, no approximation returned. The following "
        "conditions must hold: 1 <= k <= 5, x[0] < x[1] < ... < x[m-1], "
        "w[i] > 0 for all i, m > k. If knots are given: "
        "len(knots) <= m + k + 1, x[0] < knots[0] < ... < knots[-1] < "
        "x[m-1], and the Schoenberg-Whitney conditions: there must be a "
        "subset of data points xx[j] with t[j] < xx[j] < t[j+k+1] for "
        "j = 0, 1, ..., n-k-2.",
    )
    RANK_DEFICIENT = (
        StatusKind.WARNING,
        "The coefficients of the spline returned have been computed as "
        "the minimal norm least-squares solution of a (numerically) rank "
        "deficient system. If the rank deficiency is large the results "
        "may be inaccurate; they may also depend strongly on eps.",
    )
    WORKSPACE_TOO_SMALL = (
        StatusKind.FAILURE,
        "The secondary workspace could not be enlarged to the size "
        "requested by the routine.",
    )
    OUT_OF_RANGE = (
        StatusKind.FAILURE,
        "Input point out of range.",
    )
    INVALID_CURVE_QUERY = (
        StatusKind.FAILURE,
        "Invalid input data. The following conditions must hold: "
        "len(x) != 0 and xb <= x[0] <= x[1] <= ... <= x[-1] <= xe.",
    )
    INVALID_SURFACE_QUERY = (
        StatusKind.FAILURE,
        "Invalid input data. Restrictions: len(x) != 0, len(y) != 0, "
        "x[i-1] <= x[i] for i = 1, ..., len(x)-1, "
        "y[j-1] <= y[j] for j = 1, ..., len(y)-1.",
    )
    ROOTS_TRUNCATED = (
        StatusKind.WARNING,
        "Number of zeros exceeded the requested maximum; only the first "
        "zeros are returned.",
    )
    INVALID_ROOT_QUERY = (
        StatusKind.FAILURE,
        "Invalid input data: the spline must be cubic with at least 8 knots.",
    )
    UNKNOWN = (
        StatusKind.FAILURE,
        "Unknown status code.",
    )

    def __init__(self, kind: StatusKind, message: str):
        self.kind = kind
        self.message = message


_SUCCESS_CODES: Dict[int, Diagnostic] = {
    0: Diagnostic.CONVERGED,
    -1: Diagnostic.INTERPOLATING,
    -2: Diagnostic.POLYNOMIAL,
}

_CODE_TABLES: Dict[RoutineFamily, Dict[int, Diagnostic]] = {
    RoutineFamily.CURVE_FIT: {
        **_SUCCESS_CODES,
        1: Diagnostic.STORAGE_EXCEEDED,
        2: Diagnostic.IMPOSSIBLE_RESULT,
        3: Diagnostic.ITERATION_LIMIT,
        10: Diagnostic.INVALID_INPUT,
    },
    RoutineFamily.SURFACE_FIT: {
        **_SUCCESS_CODES,
        1: Diagnostic.STORAGE_EXCEEDED,
        2: Diagnostic.IMPOSSIBLE_RESULT,
        3: Diagnostic.ITERATION_LIMIT,
        4: Diagnostic.TOO_MANY_COEFFICIENTS,
        5: Diagnostic.COINCIDENT_KNOT,
        10: Diagnostic.INVALID_INPUT,
    },
    RoutineFamily.CURVE_EVALUATION: {
        0: Diagnostic.OK,
        1: Diagnostic.OUT_OF_RANGE,
        10: Diagnostic.INVALID_CURVE_QUERY,
    },
    RoutineFamily.SURFACE_EVALUATION: {
        0: Diagnostic.OK,
        10: Diagnostic.INVALID_SURFACE_QUERY,
    },
    RoutineFamily.ROOT_FINDING: {
        0: Diagnostic.OK,
        1: Diagnostic.ROOTS_TRUNCATED,
        10: Diagnostic.INVALID_ROOT_QUERY,
    },
}


@dataclass(frozen=True)
class Status:
    """A translated status code.

    Attributes
    ----------
    family : RoutineFamily
        Which kind of routine produced the code.
    code : int
        The raw ``ier`` value.
    diagnostic : Diagnostic
        The outcome the code stands for.
    detail : str
        Extra context appended to the diagnostic message (rank deficiency,
        requested workspace size).
    """

    family: RoutineFamily
    code: int
    diagnostic: Diagnostic
    detail: str = ""

    @property
    def kind(self) -> StatusKind:
        return self.diagnostic.kind

    @property
    def ok(self) -> bool:
        """True unless the status is a failure."""
        return self.diagnostic.kind is not StatusKind.FAILURE

    @property
    def message(self) -> str:
        if self.detail:
            return f"{self.diagnostic.message} {self.detail}"

        return self.diagnostic.message


def translate_status(
    family: RoutineFamily,
    code: int,
    coefficient_count: Optional[int] = None,
) -> Status:
    """Look up the outcome of status ``code`` returned by a ``family`` routine.

    Parameters
    ----------
    family : RoutineFamily
        The routine family whose table applies.
    code : int
        The ``ier`` value returned by the routine.
    coefficient_count : int, optional
        Number of surface coefficients, (nx-kx-1)*(ny-ky-1). Used to report
        the rank deficiency of a surface fit.

    Returns
    -------
    status : Status
    """
    code = int(code)

    if family is RoutineFamily.SURFACE_FIT and code < -2:
        detail = f"The rank is {-code}."
        if coefficient_count is not None:
            detail += f" The rank deficiency is {coefficient_count + code}."
        return Status(family, code, Diagnostic.RANK_DEFICIENT, detail)

    if family is RoutineFamily.SURFACE_FIT and code > 10:
        return Status(
            family,
            code,
            Diagnostic.WORKSPACE_TOO_SMALL,
            f"The routine asked for lwrk2 = {code}.",
        )

    diagnostic = _CODE_TABLES[family].get(code)
    if diagnostic is None:
        return Status(
            family, code, Diagnostic.UNKNOWN, f"{family.value}: ier = {code}."
        )

    return Status(family, code, diagnostic)


def check_status(status: Status, stacklevel: int = 3) -> Status:
    """Raise or warn according to ``status`` and return it.

    Failures of fitting routines raise :class:`FitFailure`; failures of
    evaluation and root-finding routines raise :class:`EvaluationError`
    (:class:`ExtrapolationError` for out-of-range points). Degraded fits
    emit :class:`FitWarning`; truncated root lists emit
    :class:`RootTruncationWarning`.
    """
    kind = status.kind

    if kind is StatusKind.SUCCESS:
        return status

    if kind is StatusKind.WARNING:
        if status.family is RoutineFamily.ROOT_FINDING:
            warnings.warn(status.message, RootTruncationWarning, stacklevel=stacklevel)
        else:
            warnings.warn(FitWarning(status.message, status), stacklevel=stacklevel)
        return status

    if status.family in (RoutineFamily.CURVE_FIT, RoutineFamily.SURFACE_FIT):
        raise FitFailure(status.message, status)

    if status.diagnostic is Diagnostic.OUT_OF_RANGE:
        raise ExtrapolationError(status.message, status)

    raise EvaluationError(status.message, status)
