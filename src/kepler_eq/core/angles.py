from __future__ import annotations

import math
from dataclasses import dataclass, field


def to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


def to_coterminal(degrees: float) -> float:
    """Reduce an angle to [0, 360) degrees. Non-finite input gives NaN."""
    if not math.isfinite(degrees):
        return math.nan
    d = math.fmod(degrees, 360.0)
    if d < 0:
        d += 360.0
    # -1e-15 + 360 rounds to 360.0
    if d >= 360.0:
        d = 0.0
    return d


@dataclass(frozen=True)
class Angle:
    """
    An angle held in both degrees and radians.

    Build it from decimal degrees, e.g. Angle(28.5793), or from an
    h/m/s triple with Angle.from_hms(13, 7, 31). The triple is read as
    decimal h + m/60 + s/3600 and stored as the degree value.
    """
    degrees: float
    radians: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "radians", to_radians(self.degrees))

    @classmethod
    def from_hms(cls, hours: float, minutes: float, seconds: float) -> "Angle":
        return cls(hours + (minutes / 60.0) + (seconds / 3600.0))

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(to_degrees(radians))

    def coterminal(self) -> "Angle":
        return Angle(to_coterminal(self.degrees))
