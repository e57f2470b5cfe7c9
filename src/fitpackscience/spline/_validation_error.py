from ._spline_error import SplineError


class ValidationError(SplineError, ValueError):
    """Raised for malformed input, before any FITPACK routine is called."""

    pass
