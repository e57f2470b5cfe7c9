from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np

from .._univariate import integral_row, scratch_buffer

if TYPE_CHECKING:
    from ._parametric_spline import ParametricSpline


def parametric_spline_integral(
    spline: ParametricSpline,
    a: float,
    b: float,
    work: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Integrate each coordinate of a parametric spline over u in [a, b].

    Returns
    -------
    integral : ndarray
        Shape (idim,).
    """
    wrk = scratch_buffer(spline._work, work, spline.knots.shape[0])

    return np.array(
        [
            integral_row(spline.knots, row, spline.degree, a, b, wrk)
            for row in spline.coefficients
        ]
    )
