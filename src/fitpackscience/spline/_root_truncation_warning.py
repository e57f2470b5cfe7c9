class RootTruncationWarning(UserWarning):
    """Warning when a spline has more roots than were requested."""

    pass
