from __future__ import annotations

from typing import TYPE_CHECKING, Union

import numpy as np
from numpy.typing import ArrayLike

from .. import _fitpack, _workspace
from .._status import RoutineFamily, check_status, translate_status
from .._univariate import as_query
from .._validation_error import ValidationError

if TYPE_CHECKING:
    from ._spline_2d import Spline2D


def spline_2d_evaluate(
    spline: Spline2D,
    x: ArrayLike,
    y: ArrayLike,
) -> Union[float, np.ndarray]:
    """
    Evaluate a surface at the points ``(x[i], y[i])``.

    Parameters
    ----------
    spline : Spline2D
        Fitted surface.
    x, y : float or array_like
        Query coordinates of the same shape.

    Returns
    -------
    z : float or ndarray
        A float for scalar coordinates, otherwise an array shaped like ``x``.

    Raises
    ------
    ValidationError
        If ``x`` and ``y`` differ in shape.
    """
    if np.shape(x) != np.shape(y):
        raise ValidationError(
            f"x and y must have the same shape, got {np.shape(x)} and {np.shape(y)}"
        )

    xs, is_scalar = as_query(x)
    ys, _ = as_query(y)
    wrk = _fitpack.real_workspace(
        _workspace.point_workspace_size(spline.y_degree, spline.x_degree)
    )

    z, ier = _fitpack.bispeu(
        spline.y_knots,
        spline.x_knots,
        spline.coefficients,
        spline.y_degree,
        spline.x_degree,
        ys,
        xs,
        wrk,
    )
    check_status(translate_status(RoutineFamily.SURFACE_EVALUATION, ier))

    z = np.asarray(z, dtype=np.float64)
    if is_scalar:
        return float(z[0])

    return z.reshape(np.shape(x))
