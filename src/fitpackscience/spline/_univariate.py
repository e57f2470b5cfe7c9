"""Single coefficient-row operations shared by curves and parametric curves."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike

from . import _fitpack
from ._status import RoutineFamily, check_status, translate_status
from ._validation_error import ValidationError


def as_query(x: ArrayLike) -> Tuple[np.ndarray, bool]:
    """Flatten query points to a float64 vector.

    Returns
    -------
    points, is_scalar
        The points as a contiguous 1-D array and whether ``x`` was a scalar.
    """
    array = np.asarray(x, dtype=np.float64)
    if array.ndim == 0:
        return array.reshape(1), True

    return np.ascontiguousarray(array.ravel()), False


def scratch_buffer(
    default: np.ndarray, work: Optional[np.ndarray], n: int
) -> np.ndarray:
    """The scratch buffer to use for one call.

    ``work`` is a caller-owned float64 buffer of at least ``n`` entries; when
    it is None the spline's own buffer ``default`` is used.
    """
    if work is None:
        return default

    if not (
        isinstance(work, np.ndarray)
        and work.dtype == np.float64
        and work.ndim == 1
        and work.flags.writeable
    ):
        raise ValidationError("work must be a writeable 1-D float64 array")

    if work.shape[0] < n:
        raise ValidationError(
            f"work must hold at least {n} values, got {work.shape[0]}"
        )

    return work


def evaluate_row(
    t: np.ndarray, c: np.ndarray, k: int, x: np.ndarray, boundary: int
) -> np.ndarray:
    y, ier = _fitpack.splev(t, c, k, x, boundary)
    check_status(translate_status(RoutineFamily.CURVE_EVALUATION, ier), stacklevel=4)

    return np.asarray(y, dtype=np.float64)


def derivative_row(
    t: np.ndarray,
    c: np.ndarray,
    k: int,
    x: np.ndarray,
    order: int,
    boundary: int,
    wrk: np.ndarray,
) -> np.ndarray:
    y, ier = _fitpack.splder(t, c, k, x, order, boundary, wrk)
    check_status(translate_status(RoutineFamily.CURVE_EVALUATION, ier), stacklevel=4)

    return np.asarray(y, dtype=np.float64)


def integral_row(
    t: np.ndarray, c: np.ndarray, k: int, a: float, b: float, wrk: np.ndarray
) -> float:
    return _fitpack.splint(t, c, k, float(a), float(b), wrk)


def reshape_result(values: np.ndarray, x: ArrayLike, is_scalar: bool):
    """Give ``values`` the shape of the query ``x`` (a float for scalars)."""
    if is_scalar:
        return float(values[0])

    return values.reshape(np.shape(x))
