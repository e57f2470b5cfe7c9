from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np
from numpy.typing import ArrayLike

from .. import _fitpack, _workspace
from .._status import RoutineFamily, check_status, translate_status
from .._validation import (
    as_vector,
    as_weights,
    check_degree,
    check_sample_count,
    check_smoothing,
)
from .._validation_error import ValidationError

if TYPE_CHECKING:
    from ._spline_2d import Spline2D


def spline_2d_fit(
    x: ArrayLike,
    y: ArrayLike,
    z: ArrayLike,
    w: Optional[ArrayLike] = None,
    kx: int = 3,
    ky: int = 3,
    s: float = 0.0,
    eps: float = 1e-16,
) -> Spline2D:
    """
    Fit a smoothing spline surface to scattered data.

    Parameters
    ----------
    x, y, z : array_like
        Sample coordinates and values, each of shape (m,).
    w : array_like, optional
        Strictly positive weights, shape (m,).
    kx, ky : int
        Degrees along x and y, each in [1, 5]. Default is 3.
    s : float
        Smoothing factor. Default is 0.
    eps : float
        Threshold, 0 < eps < 1, below which the routine treats the
        observation matrix as rank deficient. Default is 1e-16.

    Returns
    -------
    spline : Spline2D
        Surface over the bounding box of the data.

    Raises
    ------
    ValidationError
        If the input is malformed.
    FitFailure
        If the routine fails, including when it keeps requesting secondary
        workspace it already has.

    Warns
    -----
    FitWarning
        If the smoothing condition was not met or the system was rank
        deficient. The message states the rank and the rank deficiency.

    Notes
    -----
    Uses FITPACK's ``surfit``. When the secondary workspace is too small
    the routine returns the length it needs as its status (any value above
    10); the workspace is then reallocated to exactly that length and the
    fit resumed with ``iopt = 1`` from the knots of the previous call.

    The routine is called with the axes exchanged (y first, then x), so the
    returned coefficients run fastest along x.
    """
    x = as_vector(x, "x")
    y = as_vector(y, "y")
    z = as_vector(z, "z")
    m = x.shape[0]

    if y.shape[0] != m or z.shape[0] != m:
        raise ValidationError(
            f"Lengths of x ({m}), y ({y.shape[0]}) and z ({z.shape[0]}) must match"
        )

    w = as_weights(w, m)
    kx = check_degree(kx, "kx")
    ky = check_degree(ky, "ky")
    s = check_smoothing(s)
    check_sample_count(m, kx, "kx")
    check_sample_count(m, ky, "ky")

    if m < (kx + 1) * (ky + 1):
        raise ValidationError(
            f"len(x) = {m} >= (kx+1)*(ky+1) = {(kx + 1) * (ky + 1)} must hold"
        )

    eps = float(eps)
    if not 0.0 < eps < 1.0:
        raise ValidationError(f"0 < eps = {eps} < 1 must hold")

    xb, xe = float(x.min()), float(x.max())
    yb, ye = float(y.min()), float(y.max())
    if xb == xe or yb == ye:
        raise ValidationError("x and y must each take at least two distinct values")

    sizes = _workspace.surface_workspace(m, ky, kx)
    ty = np.zeros(sizes.nest)
    tx = np.zeros(sizes.nest2)
    wrk1 = _fitpack.real_workspace(sizes.lwrk)
    wrk2 = _fitpack.real_workspace(sizes.lwrk2)
    iwrk = _fitpack.integer_workspace(sizes.kwrk)

    ny, nx, c, fp, ier = _fitpack.surfit(
        0, y, x, z, w, yb, ye, xb, xe, ky, kx, s, eps, ty, tx, wrk1, wrk2, iwrk
    )

    while ier > 10:
        if ier <= wrk2.shape[0]:
            break

        wrk2 = _fitpack.real_workspace(ier)
        ny, nx, c, fp, ier = _fitpack.surfit(
            1,
            y,
            x,
            z,
            w,
            yb,
            ye,
            xb,
            xe,
            ky,
            kx,
            s,
            eps,
            ty,
            tx,
            wrk1,
            wrk2,
            iwrk,
            nx=ny,
            ny=nx,
        )

    status = check_status(
        translate_status(
            RoutineFamily.SURFACE_FIT, ier, (nx - kx - 1) * (ny - ky - 1)
        )
    )

    from ._spline_2d import Spline2D

    return Spline2D(
        x_knots=tx[:nx],
        y_knots=ty[:ny],
        coefficients=c,
        x_degree=kx,
        y_degree=ky,
        residual=fp,
        status=status,
    )
