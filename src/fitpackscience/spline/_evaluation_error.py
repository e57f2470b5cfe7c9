from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ._spline_error import SplineError

if TYPE_CHECKING:
    from ._status import Status


class EvaluationError(SplineError):
    """Raised when a query cannot be answered by a fitted spline."""

    def __init__(self, message: str, status: Optional[Status] = None):
        super().__init__(message)
        self.status = status
