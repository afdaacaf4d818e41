from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kepler_eq.core.constants import FIXED_POINT_MAX_ITER, NEWTON_MAX_ITER
from kepler_eq.physics.anomaly import EccentricityOffset


class RadiusFormula(Enum):
    LITERAL = "literal"  # a(1-e^2)/1 + e cos v
    CONIC = "conic"      # a(1-e^2)/(1 + e cos v)


@dataclass(frozen=True)
class SolverConfig:
    """
    Knobs for one run of the pipeline. Defaults reproduce the historic
    program: 120 fixed-point iterations, 5 Newton iterations, no early
    stop, literal radius formula, e subtracted as degrees in x, true
    anomaly series terms added without degree scaling.
    """
    fixed_point_max_iter: int = FIXED_POINT_MAX_ITER
    fixed_point_tol_deg: float = 0.0
    newton_max_iter: int = NEWTON_MAX_ITER
    newton_tol_deg: float = 0.0
    coordinate_offset: EccentricityOffset = EccentricityOffset.DEGREES
    radius_formula: RadiusFormula = RadiusFormula.LITERAL
    anomaly_series_in_degrees: bool = False

    def __post_init__(self):
        for name in ("fixed_point_max_iter", "newton_max_iter"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer. Got: {value!r}")
        if self.fixed_point_max_iter < 1:
            raise ValueError(f"fixed_point_max_iter must be at least 1. Got: {self.fixed_point_max_iter}")
        if self.newton_max_iter < 1:
            raise ValueError(f"newton_max_iter must be at least 1. Got: {self.newton_max_iter}")
        if not (self.fixed_point_tol_deg >= 0.0):
            raise ValueError(f"fixed_point_tol_deg must be non-negative. Got: {self.fixed_point_tol_deg}")
        if not (self.newton_tol_deg >= 0.0):
            raise ValueError(f"newton_tol_deg must be non-negative. Got: {self.newton_tol_deg}")
        if not isinstance(self.coordinate_offset, EccentricityOffset):
            raise ValueError(f"Unknown coordinate offset: {self.coordinate_offset!r}")
        if not isinstance(self.radius_formula, RadiusFormula):
            raise ValueError(f"Unknown radius formula: {self.radius_formula!r}")
