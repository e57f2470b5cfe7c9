from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from .. import _fitpack, _workspace
from .._status import RoutineFamily, check_status, translate_status
from .._validation import (
    as_vector,
    check_degree,
    check_sample_count,
    check_smoothing,
    check_strictly_increasing,
)
from .._validation_error import ValidationError

if TYPE_CHECKING:
    from ._spline_2d import Spline2D


def spline_2d_grid_fit(
    x: ArrayLike,
    y: ArrayLike,
    z: ArrayLike,
    kx: int = 3,
    ky: int = 3,
    s: float = 0.0,
) -> Spline2D:
    """
    Fit a smoothing spline surface to values on a rectangular grid.

    Parameters
    ----------
    x : array_like
        Strictly increasing grid coordinates along x, shape (mx,).
    y : array_like
        Strictly increasing grid coordinates along y, shape (my,).
    z : array_like
        Grid values, shape (mx, my); ``z[i, j]`` is the value at
        ``(x[i], y[j])``.
    kx, ky : int
        Degrees along x and y, each in [1, 5]. Default is 3.
    s : float
        Smoothing factor. Default is 0 (interpolation).

    Returns
    -------
    spline : Spline2D

    Raises
    ------
    ValidationError
        If the input is malformed.
    FitFailure
        If ``regrid`` reports a non-recoverable status.
    """
    x = as_vector(x, "x")
    y = as_vector(y, "y")
    z = np.asarray(z, dtype=np.float64)
    mx = x.shape[0]
    my = y.shape[0]

    if z.shape != (mx, my):
        raise ValidationError(
            f"z must have shape (len(x), len(y)) = {(mx, my)}, got {z.shape}"
        )

    if not np.all(np.isfinite(z)):
        raise ValidationError("z must contain only finite values")

    kx = check_degree(kx, "kx")
    ky = check_degree(ky, "ky")
    s = check_smoothing(s)
    check_sample_count(mx, kx, "kx")
    check_sample_count(my, ky, "ky")
    check_strictly_increasing(x, "x")
    check_strictly_increasing(y, "y")

    sizes = _workspace.grid_workspace(my, mx, ky, kx)
    ty = np.zeros(sizes.nest)
    tx = np.zeros(sizes.nest2)
    wrk = _fitpack.real_workspace(sizes.lwrk)
    iwrk = _fitpack.integer_workspace(sizes.kwrk)

    # with y as the routine's first axis, x varies fastest in the values
    ny, nx, c, fp, ier = _fitpack.regrid(
        y,
        x,
        np.ascontiguousarray(z.T).ravel(),
        y[0],
        y[-1],
        x[0],
        x[-1],
        ky,
        kx,
        s,
        ty,
        tx,
        wrk,
        iwrk,
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
