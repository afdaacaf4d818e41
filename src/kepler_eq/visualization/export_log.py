from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from kepler_eq.simulation.engine import OrbitTrack
from kepler_eq.simulation.pipeline import KeplerReport


def export_report_to_json(report: KeplerReport, out_path: str = "out/kepler_report.json") -> str:
    """
    Dump one report, nested as in KeplerReport:
      {"time_t": ..., "elements": {...}, "newton": {...}, "position": {"x":..,"y":..}, ...}
    """
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(report.to_dict(), f, indent=2)

    return out_path


def export_track_to_json(track: OrbitTrack, out_path: str = "out/orbit_track.json") -> str:
    """
    Export minimal playback data:
      {
        "julian_days": [jd0, jd1, ...],
        "samples": [{"jd":..., "time_t":..., "E_deg":..., "v_deg":..., "r_au":..., "xy":[x,y]}, ...]
      }
    """
    if len(track) == 0:
        raise ValueError("No samples found in track.")

    samples: List[Dict[str, Any]] = []
    for jd, r in track.samples:
        samples.append({
            "jd": jd,
            "time_t": r.time_t,
            "M_deg": r.M_deg,
            "E_deg": r.E_newton_deg,
            "v_deg": r.v_from_E_deg,
            "r_au": r.r_au,
            "xy": [r.position.x, r.position.y],
        })

    data: Dict[str, Any] = {"julian_days": track.julian_days(), "samples": samples}

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path
