"""Calls into the FITPACK routines bundled with SciPy.

Each function mirrors the argument list of the Fortran routine it wraps.
Callers size and own the buffers (see ``_workspace``) and get the raw status
code ``ier`` back; translating it is the caller's job.

SciPy's wrappers allocate part of the scratch space themselves. For those
routines the caller's buffer is checked against the documented minimum and
a short buffer is reported as ``ier = 10``, the same way FITPACK reports
undersized workspace. Routines that hand workspace contents back (``splint``,
``surfit``, ``parcur``) copy them into the caller's buffer.

FITPACK keeps no state between calls, but the wrappers are not reentrant,
so every call is made while holding one module lock.
"""

from __future__ import annotations

import threading
from typing import Tuple

import numpy as np
from scipy.interpolate import _dfitpack, _fitpack

from . import _workspace

FITPACK_INT = _dfitpack.types.intvar.dtype

INVALID_INPUT = 10

_LOCK = threading.Lock()


def integer_workspace(length: int) -> np.ndarray:
    """Integer workspace of ``length`` entries in the routines' integer type."""
    return np.zeros(length, dtype=FITPACK_INT)


def real_workspace(length: int) -> np.ndarray:
    return np.zeros(length, dtype=np.float64)


def _copy_into(target: np.ndarray, source: np.ndarray) -> None:
    size = min(target.shape[0], source.shape[0])
    target[:size] = source[:size]


# ---------------------------------------------------------------------------
# Curve fitting
# ---------------------------------------------------------------------------


def curfit(
    iopt: int,
    x: np.ndarray,
    y: np.ndarray,
    w: np.ndarray,
    xb: float,
    xe: float,
    k: int,
    s: float,
    t: np.ndarray,
    wrk: np.ndarray,
    iwrk: np.ndarray,
) -> Tuple[int, np.ndarray, float, int]:
    """Smoothing spline through ``(x, y)`` on ``[xb, xe]``.

    ``t`` (length nest), ``wrk`` and ``iwrk`` are updated in place. With
    ``iopt = -1``, ``t[k+1:n-k-1]`` holds the interior knots on entry.

    Returns
    -------
    n, c, fp, ier
        Knot count, coefficients (length nest), residual, status.
    """
    with _LOCK:
        n, c, fp, ier = _dfitpack.curfit(iopt, x, y, w, t, wrk, iwrk, xb, xe, k, s)

    return int(n), c, float(fp), int(ier)


def percur(
    iopt: int,
    x: np.ndarray,
    y: np.ndarray,
    w: np.ndarray,
    k: int,
    s: float,
    t: np.ndarray,
    wrk: np.ndarray,
    iwrk: np.ndarray,
) -> Tuple[int, np.ndarray, float, int]:
    """Periodic smoothing spline with period ``x[-1] - x[0]``; see :func:`curfit`."""
    with _LOCK:
        n, c, fp, ier = _dfitpack.percur(iopt, x, y, w, t, wrk, iwrk, k, s)

    return int(n), c, float(fp), int(ier)


def parcur(
    iopt: int,
    ipar: int,
    idim: int,
    u: np.ndarray,
    x: np.ndarray,
    w: np.ndarray,
    ub: float,
    ue: float,
    k: int,
    s: float,
    t: np.ndarray,
    wrk: np.ndarray,
    iwrk: np.ndarray,
    periodic: bool = False,
) -> Tuple[int, np.ndarray, float, int]:
    """Parametric smoothing spline (``parcur``) or closed curve (``clocur``).

    ``x`` holds the m points of dimension ``idim`` point by point
    (``x[i*idim + j]``). With ``ipar = 0`` the parameter values are derived
    from chord lengths and written to ``u``; with ``ipar = 1`` they are read
    from ``u``. ``t`` has length nest; with ``iopt = -1`` it holds the
    interior knots at ``t[k+1:nest-k-1]``.

    Returns
    -------
    n, c, fp, ier
        Knot count, coefficients as an ``(idim, n-k-1)`` table, residual,
        status.
    """
    m = w.shape[0]
    nest = t.shape[0]
    lwrk = _workspace.parametric_workspace_size(m, k, nest, idim, periodic)
    if wrk.shape[0] < lwrk or iwrk.shape[0] < nest:
        return 0, np.empty((idim, 0)), 0.0, INVALID_INPUT

    with _LOCK:
        try:
            t_out, c, info = _fitpack._parcur(
                x, w, u, ub, ue, k, iopt, ipar, s, t, nest, wrk, iwrk, int(periodic)
            )
        except ValueError:
            # the wrapper raises instead of returning ier = 10
            return 0, np.empty((idim, 0)), 0.0, INVALID_INPUT

    n = t_out.shape[0]
    t[:n] = t_out
    _copy_into(u, np.asarray(info["u"]))
    _copy_into(wrk, np.asarray(info["wrk"]))
    _copy_into(iwrk, np.asarray(info["iwrk"]))

    return n, np.asarray(c).reshape(idim, n - k - 1), float(info["fp"]), int(info["ier"])


# ---------------------------------------------------------------------------
# Surface fitting
# ---------------------------------------------------------------------------


def surfit(
    iopt: int,
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    w: np.ndarray,
    xb: float,
    xe: float,
    yb: float,
    ye: float,
    kx: int,
    ky: int,
    s: float,
    eps: float,
    tx: np.ndarray,
    ty: np.ndarray,
    wrk1: np.ndarray,
    wrk2: np.ndarray,
    iwrk: np.ndarray,
    nx: int = 0,
    ny: int = 0,
) -> Tuple[int, int, np.ndarray, float, int]:
    """Smoothing surface through scattered ``(x, y, z)``.

    ``iopt = 0`` starts a fresh fit. ``iopt = 1`` continues from the knot
    state the previous call left in ``tx[:nx]``, ``ty[:ny]`` and ``wrk1``.
    The length of ``wrk2`` is passed as ``lwrk2``; when it is too small the
    routine returns the required length as ``ier`` (> 10).

    Returns
    -------
    nx, ny, c, fp, ier
        Knot counts, coefficients (length (nx-kx-1)*(ny-ky-1)), residual,
        status. ``tx``, ``ty`` and ``wrk1`` are updated in place.
    """
    m = x.shape[0]
    nxest = tx.shape[0]
    nyest = ty.shape[0]
    lwrk1 = _workspace.surface_primary_workspace_size(m, kx, ky, nxest, nyest)
    kwrk = _workspace.surface_integer_workspace_size(m, kx, ky, nxest, nyest)
    if wrk1.shape[0] < lwrk1 or iwrk.shape[0] < kwrk:
        return nx, ny, np.empty(0), 0.0, INVALID_INPUT

    lwrk2 = wrk2.shape[0]

    with _LOCK:
        if iopt == 0:
            nx, tx_out, ny, ty_out, c, fp, state, ier = _dfitpack.surfit_smth(
                x,
                y,
                z,
                w,
                xb,
                xe,
                yb,
                ye,
                kx,
                ky,
                s=s,
                nxest=nxest,
                nyest=nyest,
                eps=eps,
                lwrk2=lwrk2,
            )
        else:
            try:
                tx_out, ty_out, c, info = _fitpack._surfit(
                    x,
                    y,
                    z,
                    w,
                    xb,
                    xe,
                    yb,
                    ye,
                    kx,
                    ky,
                    iopt,
                    s,
                    eps,
                    tx[:nx].copy(),
                    ty[:ny].copy(),
                    nxest,
                    nyest,
                    wrk1,
                    wrk1.shape[0],
                    lwrk2,
                )
            except ValueError:
                return nx, ny, np.empty(0), 0.0, INVALID_INPUT

            nx = tx_out.shape[0]
            ny = ty_out.shape[0]
            fp, state, ier = info["fp"], info["wrk"], info["ier"]

    nx, ny = int(nx), int(ny)
    tx[:nx] = tx_out[:nx]
    ty[:ny] = ty_out[:ny]
    _copy_into(wrk1, np.asarray(state))

    return nx, ny, np.asarray(c)[: (nx - kx - 1) * (ny - ky - 1)], float(fp), int(ier)


def regrid(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    xb: float,
    xe: float,
    yb: float,
    ye: float,
    kx: int,
    ky: int,
    s: float,
    tx: np.ndarray,
    ty: np.ndarray,
    wrk: np.ndarray,
    iwrk: np.ndarray,
) -> Tuple[int, int, np.ndarray, float, int]:
    """Smoothing surface over the rectangular grid ``x`` by ``y``.

    ``z`` holds the grid values with the ``y`` index varying fastest
    (``z[i*my + j]`` at ``(x[i], y[j])``).

    Returns
    -------
    nx, ny, c, fp, ier
        As for :func:`surfit`; ``tx`` and ``ty`` are updated in place.
    """
    mx = x.shape[0]
    my = y.shape[0]
    nxest = tx.shape[0]
    nyest = ty.shape[0]
    lwrk = _workspace.grid_workspace_size(mx, my, kx, ky, nxest, nyest)
    kwrk = _workspace.grid_integer_workspace_size(mx, my, nxest, nyest)
    if (
        wrk.shape[0] < lwrk
        or iwrk.shape[0] < kwrk
        or nxest < _workspace.grid_knot_capacity(mx, kx)
        or nyest < _workspace.grid_knot_capacity(my, ky)
    ):
        return 0, 0, np.empty(0), 0.0, INVALID_INPUT

    with _LOCK:
        nx, tx_out, ny, ty_out, c, fp, ier = _dfitpack.regrid_smth(
            x, y, z, xb, xe, yb, ye, kx, ky, s
        )

    nx, ny = int(nx), int(ny)
    tx[:nx] = tx_out[:nx]
    ty[:ny] = ty_out[:ny]

    return nx, ny, np.asarray(c)[: (nx - kx - 1) * (ny - ky - 1)], float(fp), int(ier)


# ---------------------------------------------------------------------------
# Curve evaluation
# ---------------------------------------------------------------------------


def splev(
    t: np.ndarray, c: np.ndarray, k: int, x: np.ndarray, e: int
) -> Tuple[np.ndarray, int]:
    """Values of the spline ``(t, c, k)`` at ``x`` with boundary code ``e``."""
    with _LOCK:
        y, ier = _dfitpack.splev(t, c, k, x, e)

    return y, int(ier)


def splder(
    t: np.ndarray,
    c: np.ndarray,
    k: int,
    x: np.ndarray,
    nu: int,
    e: int,
    wrk: np.ndarray,
) -> Tuple[np.ndarray, int]:
    """Derivative of order ``nu`` at ``x``; ``wrk`` needs ``len(t)`` entries."""
    if wrk.shape[0] < _workspace.curve_scratch_size(t.shape[0]):
        return np.empty(0), INVALID_INPUT

    with _LOCK:
        y, ier = _dfitpack.splder(t, c, k, x, nu, e)

    return y, int(ier)


def splint(
    t: np.ndarray, c: np.ndarray, k: int, a: float, b: float, wrk: np.ndarray
) -> float:
    """Integral over ``[a, b]``; ``wrk`` receives the B-spline integrals."""
    if wrk.shape[0] < _workspace.curve_scratch_size(t.shape[0]):
        raise ValueError(f"wrk must hold at least {t.shape[0]} values")

    with _LOCK:
        value, integrals = _dfitpack.splint(t, c, k, a, b)

    _copy_into(wrk, np.asarray(integrals))

    return float(value)


def sproot(t: np.ndarray, c: np.ndarray, mest: int) -> Tuple[np.ndarray, int, int]:
    """Zeros of a cubic spline; at most ``mest`` are stored."""
    with _LOCK:
        zeros, m, ier = _dfitpack.sproot(t, c, mest)

    return zeros, int(m), int(ier)


# ---------------------------------------------------------------------------
# Surface evaluation
# ---------------------------------------------------------------------------


def bispeu(
    tx: np.ndarray,
    ty: np.ndarray,
    c: np.ndarray,
    kx: int,
    ky: int,
    x: np.ndarray,
    y: np.ndarray,
    wrk: np.ndarray,
) -> Tuple[np.ndarray, int]:
    """Surface values at the points ``(x[i], y[i])``."""
    if x.shape[0] == 0:
        return np.empty(0), 0

    if wrk.shape[0] < _workspace.point_workspace_size(kx, ky):
        return np.empty(0), INVALID_INPUT

    with _LOCK:
        z, ier = _dfitpack.bispeu(tx, ty, c, kx, ky, x, y)

    return z, int(ier)


def bispev(
    tx: np.ndarray,
    ty: np.ndarray,
    c: np.ndarray,
    kx: int,
    ky: int,
    x: np.ndarray,
    y: np.ndarray,
    wrk: np.ndarray,
    iwrk: np.ndarray,
) -> Tuple[np.ndarray, int]:
    """Surface values on the grid ``x`` by ``y``, shape ``(len(x), len(y))``."""
    mx = x.shape[0]
    my = y.shape[0]
    lwrk, kwrk = _workspace.grid_evaluation_workspace_size(mx, my, kx, ky)
    if mx == 0 or my == 0 or wrk.shape[0] < lwrk or iwrk.shape[0] < kwrk:
        return np.empty((mx, my)), INVALID_INPUT

    with _LOCK:
        z, ier = _dfitpack.bispev(tx, ty, c, kx, ky, x, y)

    return np.asarray(z).reshape(mx, my), int(ier)


def parder(
    tx: np.ndarray,
    ty: np.ndarray,
    c: np.ndarray,
    kx: int,
    ky: int,
    nux: int,
    nuy: int,
    x: np.ndarray,
    y: np.ndarray,
    wrk: np.ndarray,
    iwrk: np.ndarray,
) -> Tuple[np.ndarray, int]:
    """Partial derivative of order ``(nux, nuy)`` on the grid ``x`` by ``y``."""
    mx = x.shape[0]
    my = y.shape[0]
    nx = tx.shape[0]
    ny = ty.shape[0]
    lwrk, kwrk = _workspace.partial_derivative_workspace_size(
        mx, my, kx, ky, nux, nuy, nx, ny
    )
    if mx == 0 or my == 0 or wrk.shape[0] < lwrk or iwrk.shape[0] < kwrk:
        return np.empty((mx, my)), INVALID_INPUT

    with _LOCK:
        if nux < ky:
            z, ier = _dfitpack.parder(tx, ty, c, kx, ky, nux, nuy, x, y)
            z = np.asarray(z).reshape(mx, my)
        else:
            # SciPy's wrapper checks nux < ky in place of nuy < ky; the
            # transposed problem passes that check whenever this one fails.
            transposed = np.ascontiguousarray(
                np.asarray(c).reshape(nx - kx - 1, ny - ky - 1).T
            ).ravel()
            z, ier = _dfitpack.parder(ty, tx, transposed, ky, kx, nuy, nux, y, x)
            z = np.asarray(z).reshape(my, mx).T

    return z, int(ier)


def dblint(
    tx: np.ndarray,
    ty: np.ndarray,
    c: np.ndarray,
    kx: int,
    ky: int,
    xb: float,
    xe: float,
    yb: float,
    ye: float,
    wrk: np.ndarray,
) -> float:
    """Double integral of the surface over ``[xb, xe] x [yb, ye]``."""
    needed = _workspace.double_integral_workspace_size(tx.shape[0], ty.shape[0], kx, ky)
    if wrk.shape[0] < needed:
        raise ValueError(f"wrk must hold at least {needed} values")

    with _LOCK:
        value = _dfitpack.dblint(tx, ty, c, kx, ky, xb, xe, yb, ye)

    return float(value)
