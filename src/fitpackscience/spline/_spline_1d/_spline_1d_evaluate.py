from __future__ import annotations

from typing import TYPE_CHECKING, Union

import numpy as np
from numpy.typing import ArrayLike

from .._univariate import as_query, evaluate_row, reshape_result

if TYPE_CHECKING:
    from ._spline_1d import Spline1D


def spline_1d_evaluate(
    spline: Spline1D,
    x: ArrayLike,
) -> Union[float, np.ndarray]:
    """
    Evaluate a spline at query points.

    Parameters
    ----------
    spline : Spline1D
        Fitted spline.
    x : float or array_like
        Query points, any shape.

    Returns
    -------
    y : float or ndarray
        A float for a scalar query, otherwise an array shaped like ``x``.

    Raises
    ------
    ExtrapolationError
        If a query point lies outside the spline domain and
        ``spline.boundary`` is ``Boundary.ERROR``.
    """
    points, is_scalar = as_query(x)
    values = evaluate_row(
        spline.knots,
        spline.coefficients,
        spline.degree,
        points,
        int(spline.boundary),
    )

    return reshape_result(values, x, is_scalar)
