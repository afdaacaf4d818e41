# Earth mean orbital elements as cubic polynomials in T

from __future__ import annotations

import math
from dataclasses import dataclass

from kepler_eq.core.constants import (
    Coefficients,
    ECCENTRICITY_COEFFS,
    MEAN_LONGITUDE_COEFFS,
    PERIHELION_LONGITUDE_COEFFS,
    SEMI_MAJOR_AXIS_AU,
)


def evaluate_polynomial(coeffs: Coefficients, T: float) -> float:
    """a0 + a1*T + a2*T^2 + a3*T^3."""
    a0, a1, a2, a3 = coeffs
    return a0 + (a1 * T) + (a2 * T * T) + (a3 * T * T * T)


def mean_longitude(T: float) -> float:
    """Mean longitude L (deg), unreduced."""
    return evaluate_polynomial(MEAN_LONGITUDE_COEFFS, T)


def perihelion_longitude(T: float) -> float:
    """Longitude of the perihelion (deg)."""
    return evaluate_polynomial(PERIHELION_LONGITUDE_COEFFS, T)


def eccentricity(T: float) -> float:
    return evaluate_polynomial(ECCENTRICITY_COEFFS, T)


def mean_anomaly(T: float) -> float:
    """
    M = L - perihelion longitude, in degrees.
    Not reduced: for large |T| the value can sit far outside [0, 360).
    """
    return mean_longitude(T) - perihelion_longitude(T)


def semi_major_axis() -> float:
    return SEMI_MAJOR_AXIS_AU


def semi_minor_axis(a: float, e: float) -> float:
    """
    b = a * sqrt(1 - e^2) for an ellipse.

    Raises:
        ValueError: if the orbit is not an ellipse (e outside [0, 1)) or a <= 0.
    """
    if not math.isfinite(a) or a <= 0:
        raise ValueError(f"Semi-major axis must be positive and finite. Got: {a}")
    if not (0.0 <= e < 1.0):
        raise ValueError(f"Semi-minor axis requires an elliptic orbit (0 <= e < 1). Got: {e}")
    return a * math.sqrt(1.0 - (e * e))


@dataclass(frozen=True)
class EarthElements:
    """
    Snapshot of Earth's orbital elements at T.

    Units:
        T: Julian centuries from J2000.0
        L_deg, perihelion_deg, M_deg: degrees (unreduced)
        e: eccentricity
        a_au, b_au: semi-axes in AU
    """
    T: float
    L_deg: float
    perihelion_deg: float
    e: float
    M_deg: float
    a_au: float
    b_au: float

    @classmethod
    def at(cls, T: float) -> "EarthElements":
        if not math.isfinite(T):
            raise ValueError(f"Time T must be finite. Got: {T}")

        L = mean_longitude(T)
        P = perihelion_longitude(T)
        e = eccentricity(T)
        a = semi_major_axis()
        return cls(
            T=T,
            L_deg=L,
            perihelion_deg=P,
            e=e,
            M_deg=L - P,
            a_au=a,
            b_au=semi_minor_axis(a, e),
        )
