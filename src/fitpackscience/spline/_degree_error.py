from ._evaluation_error import EvaluationError


class DegreeError(EvaluationError):
    """Raised when a derivative order or root query does not fit the spline degree."""

    pass
