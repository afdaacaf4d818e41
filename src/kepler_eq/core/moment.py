from __future__ import annotations

import calendar
import math
from dataclasses import dataclass
from datetime import datetime, timezone

from kepler_eq.core.constants import DAYS_PER_JULIAN_CENTURY, JD_J2000


def calendar_to_jd(year: int, month: int, day: float) -> float:
    """
    Julian Day for a Gregorian calendar date (Meeus ch. 7).
    `day` may carry the fraction of day, e.g. 4.81 for 4th at 19:26 UT.
    """
    if not (1 <= month <= 12):
        raise ValueError(f"Month must be in range [1, 12]. Got: {month}")

    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12

    A = math.floor(y / 100)
    B = 2 - A + math.floor(A / 4)
    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + B - 1524.5


def jd_to_time_t(jd: float) -> float:
    """Julian centuries from J2000.0."""
    if not math.isfinite(jd):
        raise ValueError(f"Julian Day must be finite. Got: {jd}")
    return (jd - JD_J2000) / DAYS_PER_JULIAN_CENTURY


@dataclass(frozen=True)
class Moment:
    """
    An instant on the UTC time scale, the input to every orbit query.

    Only two scalars leave this object: `julian_day` and `time_t`.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0

    def __post_init__(self):
        if not (1 <= self.month <= 12):
            raise ValueError(f"Month must be in range [1, 12]. Got: {self.month}")
        days_in_month = calendar.monthrange(self.year, self.month)[1]
        if not (1 <= self.day <= days_in_month):
            raise ValueError(
                f"Day must be in range [1, {days_in_month}] for {self.year:04d}-{self.month:02d}. Got: {self.day}"
            )
        if not (0 <= self.hour <= 23):
            raise ValueError(f"Hour must be in range [0, 23]. Got: {self.hour}")
        if not (0 <= self.minute <= 59):
            raise ValueError(f"Minute must be in range [0, 59]. Got: {self.minute}")
        if not (0.0 <= self.second < 61.0):
            raise ValueError(f"Second must be in range [0, 61). Got: {self.second}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Moment":
        """Naive datetimes are taken as UTC."""
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second + dt.microsecond * 1e-6,
        )

    @classmethod
    def now(cls) -> "Moment":
        return cls.from_datetime(datetime.now(timezone.utc))

    @property
    def day_fraction(self) -> float:
        return (self.hour + (self.minute + self.second / 60.0) / 60.0) / 24.0

    @property
    def julian_day(self) -> float:
        return calendar_to_jd(self.year, self.month, self.day + self.day_fraction)

    @property
    def time_t(self) -> float:
        return jd_to_time_t(self.julian_day)

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:06.3f} UTC"
        )
