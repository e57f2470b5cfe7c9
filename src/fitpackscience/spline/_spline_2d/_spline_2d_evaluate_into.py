from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .. import _fitpack, _workspace
from .._status import RoutineFamily, check_status, translate_status
from .._validation_error import ValidationError

if TYPE_CHECKING:
    from ._spline_2d import Spline2D


def spline_2d_evaluate_into(
    work: np.ndarray,
    spline: Spline2D,
    x: float,
    y: float,
) -> float:
    """
    Evaluate a surface at one point with an explicitly sized workspace.

    Parameters
    ----------
    work : ndarray
        Writeable float64 buffer of exactly ``kx + ky + 2`` entries, the
        minimum FITPACK's ``bispeu`` documents. It is validated but not
        written to, since SciPy allocates the scratch space itself.
    spline : Spline2D
        Fitted surface.
    x, y : float
        Query point.

    Returns
    -------
    z : float

    Raises
    ------
    ValidationError
        If ``work`` does not have the required length.
    """
    size = _workspace.point_workspace_size(spline.y_degree, spline.x_degree)
    if not (
        isinstance(work, np.ndarray)
        and work.dtype == np.float64
        and work.ndim == 1
        and work.flags.writeable
    ):
        raise ValidationError("work must be a writeable 1-D float64 array")

    if work.shape[0] != size:
        raise ValidationError(
            f"work must hold exactly kx + ky + 2 = {size} values, got {work.shape[0]}"
        )

    z, ier = _fitpack.bispeu(
        spline.y_knots,
        spline.x_knots,
        spline.coefficients,
        spline.y_degree,
        spline.x_degree,
        np.array([y], dtype=np.float64),
        np.array([x], dtype=np.float64),
        work,
    )
    check_status(translate_status(RoutineFamily.SURFACE_EVALUATION, ier))

    return float(z[0])
