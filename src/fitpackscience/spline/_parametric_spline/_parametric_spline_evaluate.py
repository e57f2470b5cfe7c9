from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from .._univariate import as_query, evaluate_row

if TYPE_CHECKING:
    from ._parametric_spline import ParametricSpline


def parametric_spline_evaluate(
    spline: ParametricSpline,
    u: ArrayLike,
) -> np.ndarray:
    """
    Evaluate a parametric spline at parameter values.

    Parameters
    ----------
    spline : ParametricSpline
        Fitted curve.
    u : float or array_like
        Parameter values.

    Returns
    -------
    points : ndarray
        Shape (idim,) for a scalar ``u``, otherwise (idim, *u.shape).
    """
    points, is_scalar = as_query(u)
    values = np.stack(
        [
            evaluate_row(
                spline.knots, row, spline.degree, points, int(spline.boundary)
            )
            for row in spline.coefficients
        ]
    )

    if is_scalar:
        return values[:, 0]

    return values.reshape((spline.dimension,) + np.shape(u))
