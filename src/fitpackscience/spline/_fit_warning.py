from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ._status import Status


class FitWarning(UserWarning):
    """Warning for a fit that was returned but is degraded (s too small, rank deficient)."""

    def __init__(self, message: str, status: Optional[Status] = None):
        super().__init__(message)
        self.status = status
