from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np

from .._univariate import integral_row, scratch_buffer

if TYPE_CHECKING:
    from ._spline_1d import Spline1D


def spline_1d_integral(
    spline: Spline1D,
    a: float,
    b: float,
    work: Optional[np.ndarray] = None,
) -> float:
    """
    Compute the definite integral of a spline from a to b.

    Parameters
    ----------
    spline : Spline1D
        Fitted spline.
    a, b : float
        Integration bounds. Any order and extent is accepted; outside the
        domain the spline is taken to be zero.
    work : ndarray, optional
        Float64 buffer of at least ``len(spline.knots)`` entries that
        receives the integrals of the B-splines. Defaults to the spline's
        own buffer.

    Returns
    -------
    integral : float
    """
    wrk = scratch_buffer(spline._work, work, spline.knots.shape[0])

    return integral_row(
        spline.knots, spline.coefficients, spline.degree, a, b, wrk
    )
