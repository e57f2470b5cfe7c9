from ._spline_2d import Spline2D
from ._spline_2d_derivative import spline_2d_derivative
from ._spline_2d_evaluate import spline_2d_evaluate
from ._spline_2d_evaluate_grid import spline_2d_evaluate_grid
from ._spline_2d_evaluate_into import spline_2d_evaluate_into
from ._spline_2d_fit import spline_2d_fit
from ._spline_2d_grid_fit import spline_2d_grid_fit
from ._spline_2d_integral import spline_2d_integral

__all__ = [
    "Spline2D",
    "spline_2d_derivative",
    "spline_2d_evaluate",
    "spline_2d_evaluate_grid",
    "spline_2d_evaluate_into",
    "spline_2d_fit",
    "spline_2d_grid_fit",
    "spline_2d_integral",
]
