from __future__ import annotations

from typing import Tuple

Coefficients = Tuple[float, float, float, float]

# Earth orbital elements, mean equinox of date (Meeus Table 31.A)
# Each tuple is (a0, a1, a2, a3) for a0 + a1*T + a2*T^2 + a3*T^3
MEAN_LONGITUDE_COEFFS: Coefficients = (100.466457, 36000.7698278, 0.00030322, 0.000000020)
PERIHELION_LONGITUDE_COEFFS: Coefficients = (102.937348, 1.7195366, 0.00045688, -0.000000018)
ECCENTRICITY_COEFFS: Coefficients = (0.01670863, -0.000042037, -0.0000001267, -0.00000000014)

# Semi-major axis of Earth's orbit in AU (constant over T)
SEMI_MAJOR_AXIS_AU: float = 1.000001018

# Time scale
JD_J2000: float = 2451545.0
DAYS_PER_JULIAN_CENTURY: float = 36525.0

# Iteration budgets (Meeus first and second methods)
FIXED_POINT_MAX_ITER: int = 120
NEWTON_MAX_ITER: int = 5
