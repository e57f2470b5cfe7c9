from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

import numpy as np
from numpy.typing import ArrayLike

from .._boundary import Boundary
from .._status import Status


@dataclass(frozen=True, eq=False)
class Spline1D:
    """Smoothing B-spline curve y = s(x).

    Instances are produced by :func:`spline_1d_fit` and never change
    afterwards; the knot and coefficient arrays are read-only.

    Attributes
    ----------
    knots : ndarray
        Full knot vector t, shape (n,). Non-decreasing, with the boundary
        knots repeated.
    coefficients : ndarray
        B-spline coefficients, shape (n - degree - 1,).
    degree : int
        Polynomial degree k, 1 <= k <= 5.
    boundary : Boundary
        How to handle out-of-domain queries.
    residual : float
        Weighted sum of squared residuals fp of the fit.
    status : Status, optional
        Status reported by the fitting routine. Not part of the value of
        the spline.

    Notes
    -----
    Each instance owns a scratch buffer of length n, the minimum FITPACK
    documents for ``splder`` and ``splint``. :func:`spline_1d_derivative`
    only checks a buffer against that size, since SciPy allocates the
    derivative scratch itself. :func:`spline_1d_integral` writes the
    integrals of the B-splines into it, so integral calls on the same
    instance must not run concurrently; pass an explicit ``work`` buffer to
    share an instance between threads.
    """

    knots: np.ndarray
    coefficients: np.ndarray
    degree: int
    boundary: Boundary = Boundary.NEAREST
    residual: float = 0.0
    status: Optional[Status] = field(default=None, repr=False)
    _work: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        knots = np.array(self.knots, dtype=np.float64)
        coefficients = np.array(self.coefficients, dtype=np.float64)
        knots.setflags(write=False)
        coefficients.setflags(write=False)

        object.__setattr__(self, "knots", knots)
        object.__setattr__(self, "coefficients", coefficients)
        object.__setattr__(self, "degree", int(self.degree))
        object.__setattr__(self, "boundary", Boundary.coerce(self.boundary))
        object.__setattr__(self, "residual", float(self.residual))
        object.__setattr__(self, "_work", np.zeros(knots.shape[0]))

    def __eq__(self, other):
        if not isinstance(other, Spline1D):
            return NotImplemented

        return (
            np.array_equal(self.knots, other.knots)
            and np.array_equal(self.coefficients, other.coefficients)
            and self.degree == other.degree
            and self.boundary == other.boundary
            and self.residual == other.residual
        )

    def __call__(self, x: ArrayLike) -> Union[float, np.ndarray]:
        from ._spline_1d_evaluate import spline_1d_evaluate

        return spline_1d_evaluate(self, x)

    def get_knots(self) -> np.ndarray:
        """Interior knots together with the two domain end points."""
        return self.knots[self.degree : self.knots.shape[0] - self.degree].copy()

    def get_coeffs(self) -> np.ndarray:
        return self.coefficients.copy()

    def get_residual(self) -> float:
        return self.residual
