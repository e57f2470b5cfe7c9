"""Smoothing B-splines for curves, parametric curves and surfaces.

The numerical work is done by Dierckx's FITPACK routines as shipped with
SciPy; this module sizes their buffers, lays out their data and turns their
status codes into exceptions and warnings.

Curves
------
spline_1d_fit
    Fit a smoothing (or periodic, or fixed-knot) spline y = s(x).
spline_1d_evaluate
    Evaluate a curve at query points.
spline_1d_derivative
    Compute derivatives of a curve.
spline_1d_integral
    Compute the definite integral of a curve.
spline_1d_roots
    Find the zeros of a cubic curve.

Parametric Curves
-----------------
parametric_spline_fit
    Fit an open or closed curve through points in 1 to 10 dimensions.
parametric_spline_evaluate
    Evaluate a parametric curve at parameter values.
parametric_spline_derivative
    Compute derivatives with respect to the parameter.
parametric_spline_integral
    Integrate each coordinate over a parameter interval.

Surfaces
--------
spline_2d_fit
    Fit a smoothing surface to scattered data.
spline_2d_grid_fit
    Fit a smoothing surface to values on a rectangular grid.
spline_2d_evaluate
    Evaluate a surface at scattered points.
spline_2d_evaluate_into
    Evaluate a surface at one point with an explicitly sized workspace.
spline_2d_evaluate_grid
    Evaluate a surface on a grid.
spline_2d_derivative
    Compute partial derivatives on a grid.
spline_2d_integral
    Integrate a surface over a rectangle.

Data Types
----------
Spline1D
    Curve y = s(x).
ParametricSpline
    Vector-valued curve x(u).
Spline2D
    Tensor-product surface z = s(x, y).
Boundary
    Out-of-domain policy for curve evaluation.
Status
    Translated status of a FITPACK call.

Exceptions
----------
SplineError
    Base exception for spline operations.
ValidationError
    Malformed input, detected before FITPACK is called.
KnotError
    Invalid explicit knots.
FitFailure
    A fitting routine failed.
EvaluationError
    An evaluation routine failed.
ExtrapolationError
    Query point outside the domain under ``Boundary.ERROR``.
DegreeError
    Derivative order or degree out of range.

Warnings
--------
FitWarning
    A fit was returned but did not meet its targets.
RootTruncationWarning
    More zeros exist than were requested.
"""

from ._boundary import Boundary
from ._degree_error import DegreeError
from ._evaluation_error import EvaluationError
from ._extrapolation_error import ExtrapolationError
from ._fit_failure import FitFailure
from ._fit_warning import FitWarning
from ._knot_error import KnotError
from ._parametric_spline import (
    ParametricSpline,
    parametric_spline_derivative,
    parametric_spline_evaluate,
    parametric_spline_fit,
    parametric_spline_integral,
)
from ._root_truncation_warning import RootTruncationWarning
from ._spline_1d import (
    Spline1D,
    spline_1d_derivative,
    spline_1d_evaluate,
    spline_1d_fit,
    spline_1d_integral,
    spline_1d_roots,
)
from ._spline_2d import (
    Spline2D,
    spline_2d_derivative,
    spline_2d_evaluate,
    spline_2d_evaluate_grid,
    spline_2d_evaluate_into,
    spline_2d_fit,
    spline_2d_grid_fit,
    spline_2d_integral,
)
from ._spline_error import SplineError
from ._status import Diagnostic, RoutineFamily, Status, StatusKind
from ._validation_error import ValidationError

__all__ = [
    "Boundary",
    "DegreeError",
    "Diagnostic",
    "EvaluationError",
    "ExtrapolationError",
    "FitFailure",
    "FitWarning",
    "KnotError",
    "ParametricSpline",
    "RootTruncationWarning",
    "RoutineFamily",
    "Spline1D",
    "Spline2D",
    "SplineError",
    "Status",
    "StatusKind",
    "ValidationError",
    "parametric_spline_derivative",
    "parametric_spline_evaluate",
    "parametric_spline_fit",
    "parametric_spline_integral",
    "spline_1d_derivative",
    "spline_1d_evaluate",
    "spline_1d_fit",
    "spline_1d_integral",
    "spline_1d_roots",
    "spline_2d_derivative",
    "spline_2d_evaluate",
    "spline_2d_evaluate_grid",
    "spline_2d_evaluate_into",
    "spline_2d_fit",
    "spline_2d_grid_fit",
    "spline_2d_integral",
]
