from __future__ import annotations

import logging
import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from kepler_eq.core.angles import to_coterminal
from kepler_eq.core.moment import Moment
from kepler_eq.physics.anomaly import (
    Coordinates,
    coordinates,
    radius_vector,
    radius_vector_conic,
    true_anomaly_from_eccentric,
    true_anomaly_from_mean,
)
from kepler_eq.physics.elements import EarthElements
from kepler_eq.physics.kepler import KeplerSolution, solve_fixed_point, solve_newton_raphson
from kepler_eq.simulation.config import RadiusFormula, SolverConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeplerReport:
    """
    Everything computed for one instant, in reporting order.
    Angles ending in _deg are reduced to [0, 360); raw values stay on
    `elements` and on the two solutions.
    """
    time_t: float
    julian_day: Optional[float]
    elements: EarthElements
    M_deg: float
    fixed_point: KeplerSolution
    newton: KeplerSolution
    E_fixed_point_deg: float
    E_newton_deg: float
    v_from_M_deg: float
    v_from_E_deg: float
    r_au: float
    position: Coordinates

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def compute_report(
    time_t: float,
    config: Optional[SolverConfig] = None,
    julian_day: Optional[float] = None,
) -> KeplerReport:
    """
    Run the full chain for Julian centuries `time_t` from J2000.0:
    elements -> E (both methods) -> v from M and from E -> r -> (x, y).

    The Newton E drives everything downstream of the solvers.
    """
    if config is None:
        config = SolverConfig()
    if not math.isfinite(time_t):
        raise ValueError(f"Time T must be finite. Got: {time_t}")

    el = EarthElements.at(time_t)
    e, M = el.e, el.M_deg

    fp = solve_fixed_point(e, M, config.fixed_point_max_iter, config.fixed_point_tol_deg)
    nr = solve_newton_raphson(e, M, config.newton_max_iter, config.newton_tol_deg)
    if abs(fp.E_deg - nr.E_deg) > 1e-6:
        logger.warning(
            "Solvers disagree at T=%.9f: fixed point %.9f deg, newton %.9f deg",
            time_t, fp.E_deg, nr.E_deg,
        )

    v_M = true_anomaly_from_mean(e, M, config.anomaly_series_in_degrees)
    v_E = true_anomaly_from_eccentric(e, nr.E_deg, config.anomaly_series_in_degrees)

    if config.radius_formula is RadiusFormula.CONIC:
        r = radius_vector_conic(e, v_E, el.a_au)
    else:
        r = radius_vector(e, v_E, el.a_au)

    xy = coordinates(el.a_au, el.b_au, e, nr.E_deg, config.coordinate_offset)

    return KeplerReport(
        time_t=time_t,
        julian_day=julian_day,
        elements=el,
        M_deg=to_coterminal(M),
        fixed_point=fp,
        newton=nr,
        E_fixed_point_deg=to_coterminal(fp.E_deg),
        E_newton_deg=to_coterminal(nr.E_deg),
        v_from_M_deg=to_coterminal(v_M),
        v_from_E_deg=to_coterminal(v_E),
        r_au=r,
        position=xy,
    )


def report_for_moment(moment: Moment, config: Optional[SolverConfig] = None) -> KeplerReport:
    return compute_report(moment.time_t, config, julian_day=moment.julian_day)
