from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

import numpy as np
from numpy.typing import ArrayLike

from .. import _fitpack, _workspace
from .._boundary import Boundary, BoundaryName
from .._status import RoutineFamily, check_status, translate_status
from .._validation import (
    as_vector,
    as_weights,
    check_degree,
    check_interior_knots,
    check_sample_count,
    check_schoenberg_whitney,
    check_smoothing,
    check_strictly_increasing,
    chord_length_parameters,
)
from .._validation_error import ValidationError

if TYPE_CHECKING:
    from ._parametric_spline import ParametricSpline


def _as_points(x: ArrayLike) -> np.ndarray:
    points = np.asarray(x, dtype=np.float64)
    if points.ndim != 2:
        raise ValidationError(
            f"x must have shape (idim, m), got shape {points.shape}"
        )

    if not 1 <= points.shape[0] <= 10:
        raise ValidationError(
            f"0 < idim = {points.shape[0]} < 11 must hold"
        )

    if not np.all(np.isfinite(points)):
        raise ValidationError("x must contain only finite values")

    return points


def parametric_spline_fit(
    x: ArrayLike,
    u: Optional[ArrayLike] = None,
    w: Optional[ArrayLike] = None,
    k: int = 3,
    s: float = 0.0,
    boundary: Union[Boundary, BoundaryName] = "nearest",
    periodic: bool = False,
    knots: Optional[ArrayLike] = None,
) -> ParametricSpline:
    """
    Fit a smoothing parametric spline curve through points in idim dimensions.

    Parameters
    ----------
    x : array_like
        Points, shape (idim, m) with 1 <= idim <= 10. Column i is the i-th
        point of the curve.
    u : array_like, optional
        Strictly increasing parameter values, shape (m,). By default the
        cumulative chord length normalised to [0, 1] is used, in which case
        consecutive points must be distinct.
    w : array_like, optional
        Strictly positive weights, shape (m,).
    k : int
        Spline degree, 1 <= k <= 5. Default is 3.
    s : float
        Smoothing factor. ``s = 0`` (default) interpolates the points.
    boundary : {"nearest", "extrapolate", "zero", "error"}
        How the returned spline handles parameter values outside the domain.
    periodic : bool
        Fit a closed curve. Requires ``x[:, 0] == x[:, -1]``.
    knots : array_like, optional
        Interior knots in the parameter domain for a fixed-knot fit.

    Returns
    -------
    spline : ParametricSpline

    Raises
    ------
    ValidationError
        If the input is malformed.
    KnotError
        If explicit knots are misplaced.
    FitFailure
        If the fitting routine reports a non-recoverable status.

    Warns
    -----
    FitWarning
        If the returned curve does not meet the smoothing condition.

    Notes
    -----
    Uses FITPACK's ``parcur`` for open curves and ``clocur`` for closed ones.

    Examples
    --------
    >>> theta = np.linspace(0, 2 * np.pi, 17)
    >>> circle = np.stack([np.cos(theta), np.sin(theta)])
    >>> spline = parametric_spline_fit(circle, u=theta, periodic=True)
    >>> spline(np.pi / 2)  # doctest: +SKIP
    array([0., 1.])
    """
    x = _as_points(x)
    idim, m = x.shape

    w = as_weights(w, m)
    k = check_degree(k)
    s = check_smoothing(s)
    boundary = Boundary.coerce(boundary)
    check_sample_count(m, k)

    if periodic and not np.array_equal(x[:, 0], x[:, -1]):
        raise ValidationError(
            "For closed curves x[:, 0] and x[:, -1] must be equal"
        )

    if u is None:
        if np.any(np.all(x[:, 1:] == x[:, :-1], axis=0)):
            raise ValidationError(
                "Consecutive points must be distinct when u is not given"
            )

        ipar = 0
        parameters = chord_length_parameters(x)
        ub, ue = 0.0, 1.0
    else:
        ipar = 1
        parameters = as_vector(u, "u")
        if parameters.shape[0] != m:
            raise ValidationError(
                f"Length of u ({parameters.shape[0]}) must match number of points ({m})"
            )

        check_strictly_increasing(parameters, "u")
        ub, ue = float(parameters[0]), float(parameters[-1])

    if knots is None:
        sizes = _workspace.parametric_workspace(m, k, idim, s, periodic)
        iopt = 0
        t = np.zeros(sizes.nest)
    else:
        interior = as_vector(knots, "knots")
        check_interior_knots(interior, ub, ue, m, k)
        sizes = _workspace.parametric_workspace(
            m, k, idim, s, periodic, interior.shape[0]
        )
        iopt = -1
        t = np.zeros(sizes.nest)
        t[: k + 1] = ub
        t[k + 1 : sizes.nest - k - 1] = interior
        t[sizes.nest - k - 1 :] = ue
        if not periodic:
            check_schoenberg_whitney(parameters, t, k)

    wrk = _fitpack.real_workspace(sizes.lwrk)
    iwrk = _fitpack.integer_workspace(sizes.kwrk)
    u_buffer = parameters.copy() if ipar else np.zeros(m)

    n, c, fp, ier = _fitpack.parcur(
        iopt,
        ipar,
        idim,
        u_buffer,
        np.ascontiguousarray(x.T).ravel(),
        w,
        ub,
        ue,
        k,
        s,
        t,
        wrk,
        iwrk,
        periodic=periodic,
    )

    status = check_status(translate_status(RoutineFamily.CURVE_FIT, ier))

    from ._parametric_spline import ParametricSpline

    return ParametricSpline(
        knots=t[:n],
        coefficients=c,
        degree=k,
        boundary=boundary,
        residual=fp,
        status=status,
    )
