from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

import numpy as np
from numpy.typing import ArrayLike

from .._degree_error import DegreeError
from .._univariate import as_query, derivative_row, reshape_result, scratch_buffer

if TYPE_CHECKING:
    from ._spline_1d import Spline1D


def spline_1d_derivative(
    spline: Spline1D,
    x: ArrayLike,
    order: int = 1,
    work: Optional[np.ndarray] = None,
) -> Union[float, np.ndarray]:
    """
    Compute the derivative of a spline at query points.

    Parameters
    ----------
    spline : Spline1D
        Fitted spline.
    x : float or array_like
        Query points.
    order : int
        Order of the derivative, 1 <= order <= spline.degree. Default is 1.
    work : ndarray, optional
        Float64 buffer of at least ``len(spline.knots)`` entries. It is
        validated against the minimum size of FITPACK's ``splder`` but not
        written to, since SciPy allocates the scratch space itself. Defaults
        to the spline's own buffer.

    Returns
    -------
    derivative : float or ndarray
        Derivative values, shaped like ``x``.

    Raises
    ------
    DegreeError
        If order < 1 or order > spline.degree.
    ExtrapolationError
        If a query point lies outside the domain under ``Boundary.ERROR``.
    """
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise DegreeError(f"Derivative order must be an integer, got {order!r}")

    if not 1 <= order <= spline.degree:
        raise DegreeError(
            f"Derivative order must satisfy 1 <= order <= {spline.degree}, got {order}"
        )

    wrk = scratch_buffer(spline._work, work, spline.knots.shape[0])
    points, is_scalar = as_query(x)
    values = derivative_row(
        spline.knots,
        spline.coefficients,
        spline.degree,
        points,
        order,
        int(spline.boundary),
        wrk,
    )

    return reshape_result(values, x, is_scalar)
