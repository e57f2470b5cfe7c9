from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from .._boundary import Boundary
from .._status import Status


@dataclass(frozen=True, eq=False)
class ParametricSpline:
    """Smoothing B-spline curve x(u) with values in idim dimensions.

    All dimensions share one knot vector; ``coefficients`` holds one row of
    B-spline coefficients per dimension.

    Attributes
    ----------
    knots : ndarray
        Full knot vector over the parameter domain, shape (n,).
    coefficients : ndarray
        Coefficient table, shape (idim, n - degree - 1).
    degree : int
        Polynomial degree k, 1 <= k <= 5.
    boundary : Boundary
        How to handle parameter values outside the domain.
    residual : float
        Weighted sum of squared distances fp of the fit.
    status : Status, optional
        Status reported by the fitting routine.
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
        coefficients = np.atleast_2d(np.array(self.coefficients, dtype=np.float64))
        knots.setflags(write=False)
        coefficients.setflags(write=False)

        object.__setattr__(self, "knots", knots)
        object.__setattr__(self, "coefficients", coefficients)
        object.__setattr__(self, "degree", int(self.degree))
        object.__setattr__(self, "boundary", Boundary.coerce(self.boundary))
        object.__setattr__(self, "residual", float(self.residual))
        object.__setattr__(self, "_work", np.zeros(knots.shape[0]))

    @property
    def dimension(self) -> int:
        """Number of output dimensions idim."""
        return self.coefficients.shape[0]

    def __eq__(self, other):
        if not isinstance(other, ParametricSpline):
            return NotImplemented

        return (
            np.array_equal(self.knots, other.knots)
            and np.array_equal(self.coefficients, other.coefficients)
            and self.degree == other.degree
            and self.boundary == other.boundary
            and self.residual == other.residual
        )

    def __call__(self, u: ArrayLike) -> np.ndarray:
        from ._parametric_spline_evaluate import parametric_spline_evaluate

        return parametric_spline_evaluate(self, u)

    def get_knots(self) -> np.ndarray:
        return self.knots[self.degree : self.knots.shape[0] - self.degree].copy()

    def get_coeffs(self) -> np.ndarray:
        return self.coefficients.copy()

    def get_residual(self) -> float:
        return self.residual
