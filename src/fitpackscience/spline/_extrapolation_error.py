from ._evaluation_error import EvaluationError


class ExtrapolationError(EvaluationError):
    """Raised when query point is outside spline domain with boundary='error'."""

    pass
