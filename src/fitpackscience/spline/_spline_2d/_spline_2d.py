from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

import numpy as np
from numpy.typing import ArrayLike

from .._status import Status


@dataclass(frozen=True, eq=False)
class Spline2D:
    """Tensor-product smoothing B-spline surface z = s(x, y).

    Attributes
    ----------
    x_knots : ndarray
        Knot vector along x, shape (nx,).
    y_knots : ndarray
        Knot vector along y, shape (ny,).
    coefficients : ndarray
        B-spline coefficients, shape ((nx - kx - 1) * (ny - ky - 1),), with
        the x index varying fastest.
    x_degree, y_degree : int
        Polynomial degrees kx and ky, each in [1, 5].
    residual : float
        Weighted sum of squared residuals fp of the fit.
    status : Status, optional
        Status reported by the fitting routine.

    Notes
    -----
    Surfaces carry no scratch state and may be evaluated from several
    threads at once.
    """

    x_knots: np.ndarray
    y_knots: np.ndarray
    coefficients: np.ndarray
    x_degree: int
    y_degree: int
    residual: float = 0.0
    status: Optional[Status] = field(default=None, repr=False)

    def __post_init__(self):
        for name in ("x_knots", "y_knots", "coefficients"):
            array = np.array(getattr(self, name), dtype=np.float64)
            array.setflags(write=False)
            object.__setattr__(self, name, array)

        object.__setattr__(self, "x_degree", int(self.x_degree))
        object.__setattr__(self, "y_degree", int(self.y_degree))
        object.__setattr__(self, "residual", float(self.residual))

    def __eq__(self, other):
        if not isinstance(other, Spline2D):
            return NotImplemented

        return (
            np.array_equal(self.x_knots, other.x_knots)
            and np.array_equal(self.y_knots, other.y_knots)
            and np.array_equal(self.coefficients, other.coefficients)
            and self.x_degree == other.x_degree
            and self.y_degree == other.y_degree
            and self.residual == other.residual
        )

    def __call__(self, x: ArrayLike, y: ArrayLike) -> Union[float, np.ndarray]:
        from ._spline_2d_evaluate import spline_2d_evaluate

        return spline_2d_evaluate(self, x, y)

    def get_knots(self) -> Tuple[np.ndarray, np.ndarray]:
        """Interior knots plus domain end points, one array per axis."""
        kx = self.x_degree
        ky = self.y_degree

        return (
            self.x_knots[kx : self.x_knots.shape[0] - kx].copy(),
            self.y_knots[ky : self.y_knots.shape[0] - ky].copy(),
        )

    def get_coeffs(self) -> np.ndarray:
        return self.coefficients.copy()

    def get_residual(self) -> float:
        return self.residual
