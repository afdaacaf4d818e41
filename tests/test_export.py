"""
Tests for JSON export and the plotly orbit view.
"""
import json
import pytest

from kepler_eq.simulation.engine import Engine, OrbitTrack
from kepler_eq.simulation.pipeline import compute_report
from kepler_eq.visualization.export_log import export_report_to_json, export_track_to_json
from kepler_eq.visualization.plotly_viewer import render_orbit_track

JD_J2000 = 2451545.0


@pytest.fixture
def short_track():
    return Engine(dt_days=30.0).run(JD_J2000, JD_J2000 + 90.0)


def test_export_report(tmp_path):
    report = compute_report(0.0, julian_day=JD_J2000)
    out = export_report_to_json(report, str(tmp_path / "nested" / "report.json"))

    with open(out, encoding="utf-8") as f:
        data = json.load(f)

    assert data["julian_day"] == JD_J2000
    assert data["elements"]["a_au"] == report.elements.a_au
    assert data["E_newton_deg"] == report.E_newton_deg
    assert data["position"] == {"x": report.position.x, "y": report.position.y}


def test_export_track(tmp_path, short_track):
    out = export_track_to_json(short_track, str(tmp_path / "track.json"))

    with open(out, encoding="utf-8") as f:
        data = json.load(f)

    assert data["julian_days"] == short_track.julian_days()
    assert len(data["samples"]) == 4
    assert data["samples"][0]["xy"] == list(short_track.positions()[0])


def test_export_empty_track_rejected(tmp_path):
    with pytest.raises(ValueError, match="No samples"):
        export_track_to_json(OrbitTrack(), str(tmp_path / "empty.json"))


def test_render_orbit_track(tmp_path, short_track):
    out = render_orbit_track(short_track, out_html=str(tmp_path / "orbit.html"))
    html = (tmp_path / "orbit.html").read_text(encoding="utf-8")
    assert out.endswith("orbit.html")
    assert "Earth track" in html


def test_render_empty_track_rejected(tmp_path):
    with pytest.raises(ValueError, match="No samples"):
        render_orbit_track(OrbitTrack(), out_html=str(tmp_path / "orbit.html"))
