from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np
from numpy.typing import ArrayLike

from .._degree_error import DegreeError
from .._univariate import as_query, derivative_row, scratch_buffer

if TYPE_CHECKING:
    from ._parametric_spline import ParametricSpline


def parametric_spline_derivative(
    spline: ParametricSpline,
    u: ArrayLike,
    order: int = 1,
    work: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Compute the derivative of a parametric spline with respect to u.

    Parameters
    ----------
    spline : ParametricSpline
        Fitted curve.
    u : float or array_like
        Parameter values.
    order : int
        Order of the derivative, 1 <= order <= spline.degree.
    work : ndarray, optional
        Float64 buffer of at least ``len(spline.knots)`` entries, checked
        against the minimum size of ``splder`` and shared by all rows.

    Returns
    -------
    derivative : ndarray
        Shape (idim,) for a scalar ``u``, otherwise (idim, *u.shape).
    """
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise DegreeError(f"Derivative order must be an integer, got {order!r}")

    if not 1 <= order <= spline.degree:
        raise DegreeError(
            f"Derivative order must satisfy 1 <= order <= {spline.degree}, got {order}"
        )

    wrk = scratch_buffer(spline._work, work, spline.knots.shape[0])
    points, is_scalar = as_query(u)
    values = np.stack(
        [
            derivative_row(
                spline.knots,
                row,
                spline.degree,
                points,
                order,
                int(spline.boundary),
                wrk,
            )
            for row in spline.coefficients
        ]
    )

    if is_scalar:
        return values[:, 0]

    return values.reshape((spline.dimension,) + np.shape(u))
