from ._spline_1d import Spline1D
from ._spline_1d_derivative import spline_1d_derivative
from ._spline_1d_evaluate import spline_1d_evaluate
from ._spline_1d_fit import spline_1d_fit
from ._spline_1d_integral import spline_1d_integral
from ._spline_1d_roots import spline_1d_roots

__all__ = [
    "Spline1D",
    "spline_1d_derivative",
    "spline_1d_evaluate",
    "spline_1d_fit",
    "spline_1d_integral",
    "spline_1d_roots",
]
