"""Boundary (extrapolation) modes understood by the curve evaluators."""

from __future__ import annotations

import enum
from typing import Literal, Union

from ._validation_error import ValidationError

BoundaryName = Literal["extrapolate", "zero", "error", "nearest"]


class Boundary(enum.IntEnum):
    """Policy for evaluating a curve outside of its domain.

    The integer values are the ``e`` codes of FITPACK's ``splev`` and
    ``splder``.

    Attributes
    ----------
    EXTRAPOLATE
        Evaluate the boundary polynomial piece beyond the domain.
    ZERO
        Return 0 outside of the domain.
    ERROR
        Raise :class:`ExtrapolationError` for any point outside the domain.
    NEAREST
        Clamp the query point to the domain before evaluating.
    """

    EXTRAPOLATE = 0
    ZERO = 1
    ERROR = 2
    NEAREST = 3

    @classmethod
    def coerce(cls, value: Union[Boundary, BoundaryName, str, int]) -> Boundary:
        """Convert a mode name, integer code or member to a ``Boundary``.

        Raises
        ------
        ValidationError
            If ``value`` names no boundary mode.
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass

        names = ", ".join(f'"{member.label}"' for member in cls)
        raise ValidationError(
            f"Unknown boundary condition {value!r}, expected one of {names}"
        )

    @property
    def label(self) -> str:
        """Lowercase mode name, accepted back by :meth:`coerce`."""
        return self.name.lower()
