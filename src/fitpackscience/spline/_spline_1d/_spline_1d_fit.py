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
)
from .._validation_error import ValidationError

if TYPE_CHECKING:
    from ._spline_1d import Spline1D


def spline_1d_fit(
    x: ArrayLike,
    y: ArrayLike,
    w: Optional[ArrayLike] = None,
    k: int = 3,
    s: float = 0.0,
    boundary: Union[Boundary, BoundaryName] = "nearest",
    periodic: bool = False,
    knots: Optional[ArrayLike] = None,
) -> Spline1D:
    """
    Fit a smoothing spline of degree ``k`` to the samples ``(x, y)``.

    Parameters
    ----------
    x : array_like
        Sample abscissae, shape (m,). Must be strictly increasing.
    y : array_like
        Sample values, shape (m,).
    w : array_like, optional
        Strictly positive weights, shape (m,). Default is uniform weights.
    k : int
        Spline degree, 1 <= k <= 5. Default is 3 (cubic).
    s : float
        Smoothing factor, an upper bound on the weighted sum of squared
        residuals. ``s = 0`` (default) interpolates every sample. Ignored
        when ``knots`` is given.
    boundary : {"nearest", "extrapolate", "zero", "error"}
        How the returned spline handles out-of-domain queries.
    periodic : bool
        Fit a periodic spline with period ``x[-1] - x[0]``. Requires
        ``y[0] == y[-1]``.
    knots : array_like, optional
        Interior knots. When given, a single weighted least-squares fit on
        these knots is performed instead of the automatic knot search.

    Returns
    -------
    spline : Spline1D
        Fitted spline. Its ``status`` holds the routine's diagnostic.

    Raises
    ------
    ValidationError
        If the input is malformed; raised before FITPACK is called.
    KnotError
        If explicit knots are misplaced or violate the Schoenberg-Whitney
        conditions.
    FitFailure
        If the fitting routine reports a non-recoverable status.

    Warns
    -----
    FitWarning
        If the routine returned a spline that does not meet the smoothing
        condition (s too small). The spline is still returned.

    Notes
    -----
    Uses FITPACK's ``curfit`` (open) or ``percur`` (periodic), with
    ``iopt = 0`` for the automatic knot search and ``iopt = -1`` for
    explicit knots. The knot capacity is only a ceiling; the knot and
    coefficient arrays are trimmed to the count the routine reports.

    Examples
    --------
    >>> x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    >>> y = np.array([0.0, 1.0, 0.0, 1.0, 0.0])
    >>> spline = spline_1d_fit(x, y, k=3)
    >>> spline(2.0)  # doctest: +SKIP
    0.0
    """
    x = as_vector(x, "x")
    y = as_vector(y, "y")
    m = x.shape[0]

    if y.shape[0] != m:
        raise ValidationError(
            f"Length of x ({m}) and y ({y.shape[0]}) must match"
        )

    w = as_weights(w, m)
    k = check_degree(k)
    s = check_smoothing(s)
    boundary = Boundary.coerce(boundary)
    check_sample_count(m, k)
    check_strictly_increasing(x, "x")

    if periodic and y[0] != y[-1]:
        raise ValidationError(
            "For periodic splines y[0] and y[-1] must be equal"
        )

    if knots is None:
        sizes = _workspace.curve_workspace(m, k, periodic)
        iopt = 0
        t = np.zeros(sizes.nest)
    else:
        interior = as_vector(knots, "knots")
        check_interior_knots(interior, x[0], x[-1], m, k)
        sizes = _workspace.curve_workspace(m, k, periodic, interior.shape[0])
        iopt = -1
        s = 0.0
        t = np.zeros(sizes.nest)
        t[: k + 1] = x[0]
        t[k + 1 : sizes.nest - k - 1] = interior
        t[sizes.nest - k - 1 :] = x[-1]
        if not periodic:
            check_schoenberg_whitney(x, t, k)

    wrk = _fitpack.real_workspace(sizes.lwrk)
    iwrk = _fitpack.integer_workspace(sizes.kwrk)

    if periodic:
        n, c, fp, ier = _fitpack.percur(iopt, x, y, w, k, s, t, wrk, iwrk)
    else:
        n, c, fp, ier = _fitpack.curfit(
            iopt, x, y, w, x[0], x[-1], k, s, t, wrk, iwrk
        )

    status = check_status(translate_status(RoutineFamily.CURVE_FIT, ier))

    from ._spline_1d import Spline1D

    return Spline1D(
        knots=t[:n],
        coefficients=c[: n - k - 1],
        degree=k,
        boundary=boundary,
        residual=fp,
        status=status,
    )
