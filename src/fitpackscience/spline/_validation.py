"""Input checks shared by the fitting functions.

Everything here raises :class:`ValidationError` (or :class:`KnotError`) so
that malformed input never reaches a FITPACK routine.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from ._knot_error import KnotError
from ._validation_error import ValidationError


def as_vector(values: ArrayLike, name: str) -> np.ndarray:
    """Return ``values`` as a contiguous 1-D float64 array."""
    array = np.ascontiguousarray(values, dtype=np.float64)
    if array.ndim != 1:
        raise ValidationError(f"{name} must be one-dimensional, got shape {array.shape}")

    if not np.all(np.isfinite(array)):
        raise ValidationError(f"{name} must contain only finite values")

    return array


def check_degree(k: int, name: str = "k") -> int:
    if isinstance(k, bool) or int(k) != k:
        raise ValidationError(f"{name} must be an integer, got {k!r}")

    k = int(k)
    if not 1 <= k <= 5:
        raise ValidationError(f"1 <= {name} = {k} <= 5 must hold")

    return k


def check_smoothing(s: float) -> float:
    s = float(s)
    if not s >= 0.0:
        raise ValidationError(f"Smoothing factor must be non-negative, got {s}")

    return s


def check_strictly_increasing(values: np.ndarray, name: str) -> None:
    if values.shape[0] > 1 and np.any(values[1:] <= values[:-1]):
        raise ValidationError(f"{name} must be strictly increasing")


def check_sample_count(m: int, k: int, name: str = "k") -> None:
    if m <= k:
        raise ValidationError(
            f"Number of data points ({m}) must be greater than {name} = {k}"
        )


def as_weights(w: Optional[ArrayLike], m: int) -> np.ndarray:
    """Uniform weights when ``w`` is None, otherwise validated positive weights."""
    if w is None:
        return np.ones(m, dtype=np.float64)

    weights = as_vector(w, "w")
    if weights.shape[0] != m:
        raise ValidationError(
            f"Length of w ({weights.shape[0]}) must match number of data points ({m})"
        )

    if np.any(weights <= 0.0):
        raise ValidationError("All weights must be strictly positive")

    return weights


def check_interior_knots(
    knots: np.ndarray,
    lower: float,
    upper: float,
    m: int,
    k: int,
) -> None:
    """Placement rules for explicit interior knots.

    ``len(knots) <= m + k + 1``, strictly increasing, and strictly inside
    ``(lower, upper)``.
    """
    if knots.shape[0] > m + k + 1:
        raise KnotError(
            f"len(knots) = {knots.shape[0]} <= len(x) + k + 1 = {m + k + 1} must hold"
        )

    if knots.shape[0] == 0:
        return

    if np.any(knots[1:] <= knots[:-1]):
        raise KnotError("Interior knots must be strictly increasing")

    if not (lower < knots[0] and knots[-1] < upper):
        raise KnotError(
            f"Interior knots must lie strictly inside ({lower}, {upper}), "
            f"got [{knots[0]}, {knots[-1]}]"
        )


def check_schoenberg_whitney(x: np.ndarray, t: np.ndarray, k: int) -> None:
    """Raise :class:`KnotError` unless the data points support every B-spline.

    ``t`` is the full knot vector of an open curve (boundary knots repeated
    at ``x[0]`` and ``x[-1]``). The end B-splines are supported by the end
    samples; each interior B-spline j needs its own sample strictly inside
    ``(t[j], t[j+k+1])``, taken in increasing order.
    """
    m = x.shape[0]
    n_coefficients = t.shape[0] - k - 1
    if n_coefficients > m:
        raise KnotError(
            f"{n_coefficients} coefficients need at least as many data points, got {m}"
        )

    i = 0
    for j in range(1, n_coefficients - 1):
        left = t[j]
        right = t[j + k + 1]
        i += 1
        while i < m - 1 and x[i] <= left:
            i += 1

        if i >= m - 1 or x[i] >= right:
            raise KnotError(
                "Knots violate the Schoenberg-Whitney conditions: no data point "
                f"strictly inside ({left}, {right}) for B-spline {j}"
            )


def chord_length_parameters(x: np.ndarray) -> np.ndarray:
    """Cumulative chord length of the columns of ``x``, normalised to [0, 1].

    These are the parameter values ``parcur`` derives when none are given.
    """
    distances = np.sqrt(np.sum(np.diff(x, axis=1) ** 2, axis=0))
    u = np.concatenate([[0.0], np.cumsum(distances)])
    if u[-1] > 0.0:
        u = u / u[-1]

    return u
