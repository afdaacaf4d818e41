# Kepler's equation E = M + e sin(E), angles in degrees

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass

from kepler_eq.core.angles import to_degrees, to_radians
from kepler_eq.core.constants import FIXED_POINT_MAX_ITER, NEWTON_MAX_ITER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeplerSolution:
    """
    Result of one solver run.

    Units:
        E_deg: eccentric anomaly (deg), not reduced to [0, 360)
        residual_deg: |E - M - e_deg sin(E)| at the returned E
        elapsed_ms: wall time spent in the iteration loop
    """
    method: str
    E_deg: float
    iterations: int
    residual_deg: float
    elapsed_ms: float

    def converged(self, tol_deg: float = 1e-8) -> bool:
        return self.residual_deg <= tol_deg


def kepler_residual(e: float, M_deg: float, E_deg: float) -> float:
    """|E - M - e sin E| with the sine term scaled to degrees."""
    return abs(E_deg - M_deg - to_degrees(e) * math.sin(to_radians(E_deg)))


def _check_inputs(e: float, M_deg: float, max_iter: int, tol: float) -> None:
    if not math.isfinite(e):
        raise ValueError(f"Eccentricity must be finite. Got: {e}")
    if not (0.0 <= e < 1.0):
        raise ValueError(f"Elliptic Kepler solver requires 0 <= e < 1. Got: {e}")
    if not math.isfinite(M_deg):
        raise ValueError(f"Mean anomaly must be finite. Got: {M_deg}")
    if isinstance(max_iter, bool) or not isinstance(max_iter, int):
        raise ValueError(f"max_iter must be an integer. Got: {max_iter!r}")
    if max_iter < 1:
        raise ValueError(f"max_iter must be at least 1. Got: {max_iter}")
    if not (tol >= 0.0):
        raise ValueError(f"Tolerance must be non-negative. Got: {tol}")


def solve_fixed_point(
    e: float,
    M_deg: float,
    max_iter: int = FIXED_POINT_MAX_ITER,
    tol: float = 0.0,
) -> KeplerSolution:
    """
    Meeus first method: iterate E <- M + e sin(E).

    M and E are in degrees, so e enters the update as e * 180/pi.
    The loop runs at most `max_iter` times and stops early once an update
    moves E by no more than `tol` degrees. Convergence is linear with
    ratio ~e; for e close to 1 the budget may not be enough, which shows
    up in `residual_deg` rather than as an exception.

    Args:
        e: eccentricity (0 <= e < 1)
        M_deg: mean anomaly (deg)
        max_iter: iteration cap
        tol: step size (deg) below which iteration stops

    Returns:
        KeplerSolution
    """
    _check_inputs(e, M_deg, max_iter, tol)

    e_deg = to_degrees(e)
    E = M_deg
    n = 0

    start = time.perf_counter()
    for n in range(1, max_iter + 1):
        E_next = M_deg + e_deg * math.sin(to_radians(E))
        step = abs(E_next - E)
        E = E_next
        if step <= tol:
            break
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    residual = kepler_residual(e, M_deg, E)
    logger.debug("fixed point: %d iterations, residual %.3e deg", n, residual)
    return KeplerSolution("fixed_point", E, n, residual, elapsed_ms)


def solve_newton_raphson(
    e: float,
    M_deg: float,
    max_iter: int = NEWTON_MAX_ITER,
    tol: float = 0.0,
) -> KeplerSolution:
    """
    Meeus second method: Newton-Raphson on f(E) = M + e sin(E) - E.

        E1 = E0 + (M + e_deg sin(E0) - E0) / (1 - e cos(E0))

    The denominator uses the plain eccentricity: it is df/dE with E in
    degrees, where the 180/pi of e_deg cancels the pi/180 of the chain rule.

    Raises:
        ValueError: bad e, M, max_iter or tol
        FloatingPointError: the Newton step is not finite. For 0 <= e < 1 and
            finite M the derivative stays >= 1 - e > 0, so this is a guard
            that valid input never reaches.
    """
    _check_inputs(e, M_deg, max_iter, tol)

    e_deg = to_degrees(e)
    E0 = M_deg
    n = 0

    start = time.perf_counter()
    for n in range(1, max_iter + 1):
        E0_rad = to_radians(E0)
        fp = 1.0 - e * math.cos(E0_rad)
        if fp <= 0.0:
            raise FloatingPointError(f"Newton-Raphson derivative vanished at E={E0} deg (e={e}).")

        E1 = E0 + (M_deg + e_deg * math.sin(E0_rad) - E0) / fp
        if not math.isfinite(E1):
            raise FloatingPointError(f"Newton-Raphson step is not finite at E={E0} deg (e={e}).")

        step = abs(E1 - E0)
        E0 = E1
        if step <= tol:
            break
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    residual = kepler_residual(e, M_deg, E0)
    logger.debug("newton-raphson: %d iterations, residual %.3e deg", n, residual)
    return KeplerSolution("newton_raphson", E0, n, residual, elapsed_ms)
