"""fitpackscience: smoothing splines on top of the FITPACK routines."""

from . import spline

__all__ = [
    "spline",
]

__version__ = "0.1.0"
