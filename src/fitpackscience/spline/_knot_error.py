from ._validation_error import ValidationError


class KnotError(ValidationError):
    """Raised for explicit knots that are misplaced or violate Schoenberg-Whitney."""

    pass
