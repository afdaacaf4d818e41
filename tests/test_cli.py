"""
Tests for the solve_kepler command line driver.
"""
import json

from typer.testing import CliRunner

from kepler_eq.scripts.solve_kepler import app

runner = CliRunner()


def test_fixed_instant_prints_every_stage():
    result = runner.invoke(app, ["--when", "2019-04-07T21:00:00"])
    assert result.exit_code == 0
    for line in [
        "Reference epoch: J2000.0",
        "Earth eccentricity e:",
        "E for first method:",
        "E for second method:",
        "True anomaly v from M:",
        "True anomaly v from E:",
        "Radius vector r from e and v:",
        "Earth coordinates x:",
    ]:
        assert line in result.output


def test_now_by_default():
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "Solving Kepler's Equation for moment" in result.output


def test_writes_json_and_plot(tmp_path):
    json_path = tmp_path / "report.json"
    plot_path = tmp_path / "orbit.html"
    result = runner.invoke(app, [
        "--when", "2000-01-01T12:00:00",
        "--json", str(json_path),
        "--plot", str(plot_path),
        "--radius", "conic",
        "--offset", "none",
    ])
    assert result.exit_code == 0
    data = json.loads(json_path.read_text(encoding="utf-8"))
    assert data["time_t"] == 0.0
    assert plot_path.exists()


def test_when_with_utc_offset():
    result = runner.invoke(app, ["--when", "2019-04-07T23:00:00+02:00"])
    assert result.exit_code == 0
    assert "2019-04-07 21:00:00.000 UTC" in result.output


def test_when_rejects_unparseable_value():
    result = runner.invoke(app, ["--when", "07/04/2019"])
    assert result.exit_code != 0
