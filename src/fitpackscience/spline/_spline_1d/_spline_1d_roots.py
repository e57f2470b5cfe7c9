"""Zeros of cubic splines."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .. import _fitpack
from .._degree_error import DegreeError
from .._status import RoutineFamily, check_status, translate_status
from .._validation_error import ValidationError

if TYPE_CHECKING:
    from ._spline_1d import Spline1D


def spline_1d_roots(spline: Spline1D, max_count: int = 8) -> np.ndarray:
    """
    Find the zeros of a cubic spline.

    Parameters
    ----------
    spline : Spline1D
        Fitted spline of degree 3.
    max_count : int
        Maximum number of zeros to return. Default is 8.

    Returns
    -------
    roots : ndarray
        Zeros in ascending order, at most ``max_count`` of them.

    Raises
    ------
    DegreeError
        If the spline is not cubic.
    ValidationError
        If ``max_count`` is not an integer or is less than 1.

    Warns
    -----
    RootTruncationWarning
        If the spline has more than ``max_count`` zeros; the first
        ``max_count`` are returned.
    """
    if spline.degree != 3:
        raise DegreeError(
            f"Root finding only supported for cubic splines (k=3), got k={spline.degree}"
        )

    if isinstance(max_count, bool) or not isinstance(max_count, (int, np.integer)):
        raise ValidationError(f"max_count must be an integer, got {max_count!r}")

    max_count = int(max_count)
    if max_count < 1:
        raise ValidationError(f"max_count must be at least 1, got {max_count}")

    zeros, m, ier = _fitpack.sproot(spline.knots, spline.coefficients, max_count)
    status = check_status(translate_status(RoutineFamily.ROOT_FINDING, ier))

    if status.code == 1:
        return np.array(zeros[:max_count], dtype=np.float64)

    return np.array(zeros[:m], dtype=np.float64)
