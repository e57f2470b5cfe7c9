"""Minimum buffer sizes for the FITPACK fitting and evaluation routines.

Every function here is pure integer arithmetic reproducing the lower bounds
documented in the FITPACK sources. Surface functions use the routine's own
axis order (``x`` is the routine's first, slow axis); the surface model
passes its y-axis quantities in the ``x`` position.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class WorkspaceSizes:
    """Buffer lengths for one fitting call.

    Attributes
    ----------
    nest : int
        Knot capacity (length of the knot and coefficient output buffers).
        For surfaces, the capacity of the routine's first axis.
    lwrk : int
        Length of the (primary) real workspace.
    kwrk : int
        Length of the integer workspace.
    lwrk2 : int
        Length of the secondary real workspace (scattered surfaces only).
    nest2 : int
        Knot capacity of the routine's second axis (surfaces only).
    """

    nest: int
    lwrk: int
    kwrk: int
    lwrk2: int = 0
    nest2: int = 0


def curve_knot_capacity(m: int, k: int, periodic: bool = False) -> int:
    """Knot capacity ``nest`` for ``curfit`` / ``percur`` in automatic mode.

    This is a ceiling; the routine reports how many knots it used.
    """
    if periodic:
        return max(m + 2 * k, 2 * k + 3)

    return max(m + k + 1, 2 * k + 3)


def explicit_knot_count(n_interior: int, k: int) -> int:
    """Total knot count when ``n_interior`` knots are given explicitly."""
    return n_interior + 2 * (k + 1)


def curve_workspace_size(m: int, k: int, nest: int, periodic: bool = False) -> int:
    """Length of ``wrk`` for ``curfit`` (open) or ``percur`` (periodic)."""
    if periodic:
        return m * (k + 1) + nest * (8 + 5 * k)

    return m * (k + 1) + nest * (7 + 3 * k)


def curve_workspace(
    m: int,
    k: int,
    periodic: bool = False,
    n_interior: Optional[int] = None,
) -> WorkspaceSizes:
    """All buffer sizes for a curve fit.

    Parameters
    ----------
    m : int
        Number of samples.
    k : int
        Spline degree.
    periodic : bool
        Size for ``percur`` instead of ``curfit``.
    n_interior : int, optional
        Number of explicit interior knots. When given, ``nest`` is the exact
        knot count of the fixed-knot fit.
    """
    if n_interior is None:
        nest = curve_knot_capacity(m, k, periodic)
    else:
        nest = explicit_knot_count(n_interior, k)

    return WorkspaceSizes(
        nest=nest,
        lwrk=curve_workspace_size(m, k, nest, periodic),
        kwrk=nest,
    )


def parametric_knot_capacity(
    m: int, k: int, s: float, periodic: bool = False
) -> int:
    """Knot capacity for ``parcur`` / ``clocur`` in automatic mode."""
    nest = m + 2 * k
    if s == 0 and not periodic:
        nest = m + k + 1

    return max(nest, 2 * k + 3)


def parametric_workspace_size(
    m: int, k: int, nest: int, idim: int, periodic: bool = False
) -> int:
    """Length of ``wrk`` for ``parcur`` (open) or ``clocur`` (closed)."""
    if periodic:
        return m * (k + 1) + nest * (7 + idim + 5 * k)

    return m * (k + 1) + nest * (6 + idim + 3 * k)


def parametric_workspace(
    m: int,
    k: int,
    idim: int,
    s: float = 0.0,
    periodic: bool = False,
    n_interior: Optional[int] = None,
) -> WorkspaceSizes:
    """All buffer sizes for a parametric curve fit."""
    if n_interior is None:
        nest = parametric_knot_capacity(m, k, s, periodic)
    else:
        nest = explicit_knot_count(n_interior, k)

    return WorkspaceSizes(
        nest=nest,
        lwrk=parametric_workspace_size(m, k, nest, idim, periodic),
        kwrk=nest,
    )


def surface_knot_capacity(m: int, k: int) -> int:
    """Per-axis knot capacity for ``surfit`` from the sample count."""
    return max(k + 1 + math.ceil(math.sqrt(m / 2)), 2 * (k + 1))


def _surface_bandwidths(kx: int, ky: int, nxest: int, nyest: int):
    u = nxest - kx - 1
    v = nyest - ky - 1
    bx = kx * v + ky + 1
    by = ky * u + kx + 1
    if bx <= by:
        b1, b2 = bx, bx + v - ky
    else:
        b1, b2 = by, by + u - kx

    return u, v, b1, b2


def surface_primary_workspace_size(
    m: int, kx: int, ky: int, nxest: int, nyest: int
) -> int:
    """Length of ``wrk1`` (``lwrk1``) for ``surfit``."""
    u, v, b1, b2 = _surface_bandwidths(kx, ky, nxest, nyest)
    km = max(kx, ky) + 1
    ne = max(nxest, nyest)

    return (
        u * v * (2 + b1 + b2)
        + 2 * (u + v + km * (m + ne) + ne - kx - ky)
        + b2
        + 1
    )


def surface_secondary_workspace_size(
    m: int, kx: int, ky: int, nxest: int, nyest: int
) -> int:
    """Length of ``wrk2`` (``lwrk2``) for ``surfit``.

    ``surfit`` may still ask for more (status > 10) when the system turns
    out to be rank deficient.
    """
    u, v, _, b2 = _surface_bandwidths(kx, ky, nxest, nyest)

    return u * v * (b2 + 1) + b2


def surface_integer_workspace_size(
    m: int, kx: int, ky: int, nxest: int, nyest: int
) -> int:
    """Length of ``iwrk`` (``kwrk``) for ``surfit``."""
    return m + (nxest - 2 * kx - 1) * (nyest - 2 * ky - 1)


def surface_workspace(m: int, kx: int, ky: int) -> WorkspaceSizes:
    """All buffer sizes for a scattered surface fit (routine axis order)."""
    nxest = surface_knot_capacity(m, kx)
    nyest = surface_knot_capacity(m, ky)

    return WorkspaceSizes(
        nest=nxest,
        lwrk=surface_primary_workspace_size(m, kx, ky, nxest, nyest),
        kwrk=surface_integer_workspace_size(m, kx, ky, nxest, nyest),
        lwrk2=surface_secondary_workspace_size(m, kx, ky, nxest, nyest),
        nest2=nyest,
    )


def grid_knot_capacity(mx: int, kx: int) -> int:
    """Per-axis knot capacity for ``regrid``."""
    return mx + kx + 1


def grid_workspace_size(
    mx: int, my: int, kx: int, ky: int, nxest: int, nyest: int
) -> int:
    """Length of ``wrk`` for ``regrid``."""
    return (
        4
        + nxest * (my + 2 * kx + 5)
        + nyest * (2 * ky + 5)
        + mx * (kx + 1)
        + my * (ky + 1)
        + max(my, nxest)
    )


def grid_integer_workspace_size(mx: int, my: int, nxest: int, nyest: int) -> int:
    """Length of ``iwrk`` for ``regrid``."""
    return 3 + mx + my + nxest + nyest


def grid_workspace(mx: int, my: int, kx: int, ky: int) -> WorkspaceSizes:
    """All buffer sizes for a gridded surface fit (routine axis order)."""
    nxest = grid_knot_capacity(mx, kx)
    nyest = grid_knot_capacity(my, ky)

    return WorkspaceSizes(
        nest=nxest,
        lwrk=grid_workspace_size(mx, my, kx, ky, nxest, nyest),
        kwrk=grid_integer_workspace_size(mx, my, nxest, nyest),
        nest2=nyest,
    )


def point_workspace_size(kx: int, ky: int) -> int:
    """Length of ``wrk`` for point-wise surface evaluation (``bispeu``)."""
    return kx + ky + 2


def grid_evaluation_workspace_size(mx: int, my: int, kx: int, ky: int):
    """``(lwrk, kwrk)`` for grid evaluation of a surface (``bispev``)."""
    return mx * (kx + 1) + my * (ky + 1), mx + my


def partial_derivative_workspace_size(
    mx: int, my: int, kx: int, ky: int, nux: int, nuy: int, nx: int, ny: int
):
    """``(lwrk, kwrk)`` for partial derivatives on a grid (``parder``)."""
    lwrk = mx * (kx + 1 - nux) + my * (ky + 1 - nuy) + (nx - kx - 1) * (ny - ky - 1)

    return lwrk, mx + my


def double_integral_workspace_size(nx: int, ny: int, kx: int, ky: int) -> int:
    """Length of ``wrk`` for the double integral of a surface (``dblint``)."""
    return nx + ny - kx - ky - 2


def curve_scratch_size(n: int) -> int:
    """Length of the scratch buffer for ``splder`` / ``splint``."""
    return n
