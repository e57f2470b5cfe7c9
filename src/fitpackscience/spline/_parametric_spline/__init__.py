from ._parametric_spline import ParametricSpline
from ._parametric_spline_derivative import parametric_spline_derivative
from ._parametric_spline_evaluate import parametric_spline_evaluate
from ._parametric_spline_fit import parametric_spline_fit
from ._parametric_spline_integral import parametric_spline_integral

__all__ = [
    "ParametricSpline",
    "parametric_spline_derivative",
    "parametric_spline_evaluate",
    "parametric_spline_fit",
    "parametric_spline_integral",
]
