from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from kepler_eq.core.moment import jd_to_time_t
from kepler_eq.simulation.config import SolverConfig
from kepler_eq.simulation.pipeline import KeplerReport, compute_report


@dataclass
class OrbitTrack:
    """
    Reports sampled over an interval.
    samples: list of (julian_day, report)
    """
    samples: List[Tuple[float, KeplerReport]] = field(default_factory=list)

    def record(self, jd: float, report: KeplerReport) -> None:
        self.samples.append((jd, report))

    def julian_days(self) -> List[float]:
        return [jd for (jd, _r) in self.samples]

    def positions(self) -> List[Tuple[float, float]]:
        return [(r.position.x, r.position.y) for (_jd, r) in self.samples]

    def __len__(self) -> int:
        return len(self.samples)


@dataclass
class Engine:
    """
    Fixed-step sampler over Julian Days.
    Every instant is computed on its own; same inputs => same track.
    """
    dt_days: float
    config: SolverConfig = field(default_factory=SolverConfig)

    def run(self, jd_start: float, jd_end: float) -> OrbitTrack:
        if self.dt_days <= 0:
            raise ValueError("dt_days must be positive.")
        if jd_end < jd_start:
            raise ValueError("jd_end must be >= jd_start.")

        track = OrbitTrack()
        n_steps = int((jd_end - jd_start) / self.dt_days + 1e-9)

        # Inclusive end if it lands exactly on a step
        for i in range(n_steps + 1):
            jd = jd_start + i * self.dt_days
            report = compute_report(jd_to_time_t(jd), self.config, julian_day=jd)
            track.record(jd, report)

        return track
