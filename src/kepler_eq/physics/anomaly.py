from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from kepler_eq.core.angles import to_degrees, to_radians
from kepler_eq.core.constants import SEMI_MAJOR_AXIS_AU


class EccentricityOffset(Enum):
    """
    How the eccentricity is subtracted from E inside the x coordinate,
    x = a cos(E - offset).

    DEGREES: e is taken as an angle in degrees and converted (historic formula)
    RADIANS: e is subtracted as a raw number from E in radians
    NONE:    no offset, x = a cos(E)
    """
    DEGREES = "degrees"
    RADIANS = "radians"
    NONE = "none"


@dataclass(frozen=True)
class Coordinates:
    """Position in the orbital plane (AU)."""
    x: float
    y: float

    def distance(self) -> float:
        return math.hypot(self.x, self.y)


def true_anomaly_from_mean(e: float, M_deg: float, scale_to_degrees: bool = False) -> float:
    """
    Fourier expansion of the true anomaly in M, truncated at e^3.
    Returns degrees (unreduced). Accuracy falls off as e grows.

    The series terms are in radians. By default they are added to M as
    they stand (historic output); scale_to_degrees=True converts them first.
    """
    M = to_radians(M_deg)
    terms = (
        (2.0 * e - 0.25 * e ** 3) * math.sin(M)
        + 1.25 * e ** 2 * math.sin(2.0 * M)
        + 1.08333 * e ** 3 * math.sin(3.0 * M)
    )
    if scale_to_degrees:
        terms = to_degrees(terms)
    return M_deg + terms


def true_anomaly_from_eccentric(e: float, E_deg: float, scale_to_degrees: bool = False) -> float:
    """True anomaly as a series in e and E (Smart, pp. 118-119). Degrees."""
    E = to_radians(E_deg)
    terms = (
        (e + 0.25 * e ** 3) * math.sin(E)
        + 0.25 * e ** 2 * math.sin(2.0 * E)
        + 0.083333 * e ** 3 * math.sin(3.0 * E)
    )
    if scale_to_degrees:
        terms = to_degrees(terms)
    return E_deg + terms


def radius_vector(e: float, v_deg: float, a: float = SEMI_MAJOR_AXIS_AU) -> float:
    """
    Radius vector as historically evaluated:

        r = a (1 - e^2) / 1 + e cos(v)

    Only the first term is divided; see radius_vector_conic for the
    textbook form.
    """
    return a * (1.0 - e ** 2) / 1.0 + e * math.cos(to_radians(v_deg))


def radius_vector_conic(e: float, v_deg: float, a: float = SEMI_MAJOR_AXIS_AU) -> float:
    """r = a (1 - e^2) / (1 + e cos(v)), Meeus (30.3)."""
    if not (0.0 <= e < 1.0):
        raise ValueError(f"Radius vector requires an elliptic orbit (0 <= e < 1). Got: {e}")
    return a * (1.0 - e ** 2) / (1.0 + e * math.cos(to_radians(v_deg)))


def coordinates(
    a: float,
    b: float,
    e: float,
    E_deg: float,
    offset: EccentricityOffset = EccentricityOffset.DEGREES,
) -> Coordinates:
    """
    Planar coordinates from the semi-axes and the eccentric anomaly:

        x = a cos(E - offset)
        y = b sin(E)

    The default offset reproduces the historic formula where e goes
    through the degree-to-radian conversion. Whether e belongs there at
    all is unsettled, hence the `offset` switch.
    """
    E = to_radians(E_deg)
    if offset is EccentricityOffset.DEGREES:
        delta = to_radians(e)
    elif offset is EccentricityOffset.RADIANS:
        delta = e
    else:
        delta = 0.0

    x = a * math.cos(E - delta)
    y = b * math.sin(E)
    return Coordinates(x, y)
