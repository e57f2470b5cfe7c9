from __future__ import annotations

from typing import TYPE_CHECKING, Union

import numpy as np
from numpy.typing import ArrayLike

from .. import _fitpack, _workspace
from .._degree_error import DegreeError
from .._status import RoutineFamily, check_status, translate_status
from ._spline_2d_evaluate_grid import grid_axis

if TYPE_CHECKING:
    from ._spline_2d import Spline2D


def _check_order(order: int, degree: int, name: str) -> int:
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise DegreeError(f"{name} must be an integer, got {order!r}")

    if not 0 <= order < degree:
        raise DegreeError(f"0 <= {name} = {order} < {degree} must hold")

    return int(order)


def spline_2d_derivative(
    spline: Spline2D,
    x: ArrayLike,
    y: ArrayLike,
    order_x: int = 1,
    order_y: int = 1,
) -> Union[float, np.ndarray]:
    """
    Compute a partial derivative of a surface on the grid ``x`` by ``y``.

    Parameters
    ----------
    spline : Spline2D
        Fitted surface.
    x, y : float or array_like
        Non-decreasing grid coordinates. A scalar drops its axis from the
        result.
    order_x : int
        Derivative order along x, 0 <= order_x < kx. Default is 1.
    order_y : int
        Derivative order along y, 0 <= order_y < ky. Default is 1.

    Returns
    -------
    derivative : float or ndarray
        Shape (mx, my), (mx,), (my,) or a float, depending on which of
        ``x`` and ``y`` are scalars.

    Raises
    ------
    DegreeError
        If an order is outside its range.
    """
    nux = _check_order(order_x, spline.x_degree, "order_x")
    nuy = _check_order(order_y, spline.y_degree, "order_y")

    xs, x_scalar = grid_axis(x, "x")
    ys, y_scalar = grid_axis(y, "y")
    lwrk, kwrk = _workspace.partial_derivative_workspace_size(
        ys.shape[0],
        xs.shape[0],
        spline.y_degree,
        spline.x_degree,
        nuy,
        nux,
        spline.y_knots.shape[0],
        spline.x_knots.shape[0],
    )

    z, ier = _fitpack.parder(
        spline.y_knots,
        spline.x_knots,
        spline.coefficients,
        spline.y_degree,
        spline.x_degree,
        nuy,
        nux,
        ys,
        xs,
        _fitpack.real_workspace(lwrk),
        _fitpack.integer_workspace(kwrk),
    )
    check_status(translate_status(RoutineFamily.SURFACE_EVALUATION, ier))

    z = np.ascontiguousarray(z.T)
    if x_scalar and y_scalar:
        return float(z[0, 0])

    if x_scalar:
        return z[0]

    if y_scalar:
        return z[:, 0]

    return z
