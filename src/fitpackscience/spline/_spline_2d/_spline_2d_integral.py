from __future__ import annotations

from typing import TYPE_CHECKING

from .. import _fitpack, _workspace

if TYPE_CHECKING:
    from ._spline_2d import Spline2D


def spline_2d_integral(
    spline: Spline2D,
    xb: float,
    xe: float,
    yb: float,
    ye: float,
) -> float:
    """
    Integrate a surface over the rectangle ``[xb, xe] x [yb, ye]``.

    The parts of the rectangle outside the surface domain contribute
    nothing.

    Returns
    -------
    integral : float
    """
    wrk = _fitpack.real_workspace(
        _workspace.double_integral_workspace_size(
            spline.y_knots.shape[0],
            spline.x_knots.shape[0],
            spline.y_degree,
            spline.x_degree,
        )
    )

    return _fitpack.dblint(
        spline.y_knots,
        spline.x_knots,
        spline.coefficients,
        spline.y_degree,
        spline.x_degree,
        float(yb),
        float(ye),
        float(xb),
        float(xe),
        wrk,
    )
