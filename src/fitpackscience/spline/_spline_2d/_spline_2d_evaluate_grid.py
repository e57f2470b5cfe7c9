from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import numpy as np
from numpy.typing import ArrayLike

from .. import _fitpack, _workspace
from .._status import RoutineFamily, check_status, translate_status
from .._validation_error import ValidationError

if TYPE_CHECKING:
    from ._spline_2d import Spline2D


def grid_axis(values: ArrayLike, name: str) -> Tuple[np.ndarray, bool]:
    """Grid coordinates as a float64 vector, and whether they were a scalar."""
    array = np.asarray(values, dtype=np.float64)
    if array.ndim == 0:
        return array.reshape(1), True

    if array.ndim != 1:
        raise ValidationError(f"{name} must be a scalar or one-dimensional")

    return np.ascontiguousarray(array), False


def spline_2d_evaluate_grid(
    spline: Spline2D,
    x: ArrayLike,
    y: ArrayLike,
) -> np.ndarray:
    """
    Evaluate a surface on the grid ``x`` by ``y``.

    Parameters
    ----------
    spline : Spline2D
        Fitted surface.
    x : array_like
        Non-decreasing coordinates along x, shape (mx,).
    y : array_like
        Non-decreasing coordinates along y, shape (my,).

    Returns
    -------
    z : ndarray
        Shape (mx, my); ``z[i, j]`` is the surface at ``(x[i], y[j])``.

    Raises
    ------
    EvaluationError
        If a coordinate array is empty or decreasing.
    """
    xs, _ = grid_axis(x, "x")
    ys, _ = grid_axis(y, "y")
    lwrk, kwrk = _workspace.grid_evaluation_workspace_size(
        ys.shape[0], xs.shape[0], spline.y_degree, spline.x_degree
    )

    z, ier = _fitpack.bispev(
        spline.y_knots,
        spline.x_knots,
        spline.coefficients,
        spline.y_degree,
        spline.x_degree,
        ys,
        xs,
        _fitpack.real_workspace(lwrk),
        _fitpack.integer_workspace(kwrk),
    )
    check_status(translate_status(RoutineFamily.SURFACE_EVALUATION, ier))

    return np.ascontiguousarray(z.T)
