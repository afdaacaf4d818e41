"""Solve Kepler's equation for the Earth at a given instant and print each stage.

Usage:
    python -m kepler_eq.scripts.solve_kepler
    python -m kepler_eq.scripts.solve_kepler --when 2019-04-07T21:00:00
    python -m kepler_eq.scripts.solve_kepler --json out/report.json --plot out/orbit.html
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Annotated, Optional

import typer

from kepler_eq.core.moment import Moment
from kepler_eq.physics.anomaly import EccentricityOffset
from kepler_eq.simulation.config import RadiusFormula, SolverConfig
from kepler_eq.simulation.engine import Engine
from kepler_eq.simulation.pipeline import KeplerReport, report_for_moment
from kepler_eq.visualization.export_log import export_report_to_json
from kepler_eq.visualization.plotly_viewer import render_orbit_track

app = typer.Typer(add_completion=False)


def print_report(moment: Moment, report: KeplerReport) -> None:
    el = report.elements
    typer.echo(f"Solving Kepler's Equation for moment {moment}")
    typer.echo("Reference epoch: J2000.0")
    typer.echo(f"Julian Day Number: {report.julian_day}")
    typer.echo(f"Time T: {report.time_t}")
    typer.echo()

    typer.echo(f"Earth eccentricity e: {el.e}")
    typer.echo(f"Earth semi-major axis a: {el.a_au}")
    typer.echo(f"Earth semi-minor axis b: {el.b_au}")
    typer.echo(f"Earth mean anomaly M: {report.M_deg}")
    typer.echo()

    for label, sol, E in (
        ("first", report.fixed_point, report.E_fixed_point_deg),
        ("second", report.newton, report.E_newton_deg),
    ):
        typer.echo(f"After {sol.iterations} iterations ({sol.elapsed_ms:.4f}ms), residual {sol.residual_deg:.3e} deg")
        typer.echo(f"E for {label} method: {E}")
        typer.echo()

    typer.echo(f"True anomaly v from M: {report.v_from_M_deg}")
    typer.echo(f"True anomaly v from E: {report.v_from_E_deg}")
    typer.echo(f"Radius vector r from e and v: {report.r_au}")
    typer.echo(f"Earth coordinates x: {report.position.x} and y: {report.position.y}")


@app.command()
def main(
    when: Annotated[
        Optional[datetime],
        typer.Option(
            formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M:%S%z"],
            help="Instant as YYYY-MM-DD[THH:MM:SS[+HH:MM]]; no offset means UTC; defaults to now",
        ),
    ] = None,
    json_path: Annotated[Optional[str], typer.Option("--json", help="Write the report as JSON")] = None,
    plot_path: Annotated[
        Optional[str], typer.Option("--plot", help="Write a one-year orbit plot (HTML)")
    ] = None,
    offset: Annotated[
        EccentricityOffset, typer.Option(help="Eccentricity offset in the x coordinate")
    ] = EccentricityOffset.DEGREES,
    radius: Annotated[RadiusFormula, typer.Option(help="Radius vector formula")] = RadiusFormula.LITERAL,
    scale_series: Annotated[
        bool, typer.Option(help="Scale true anomaly series terms to degrees")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    moment = Moment.now() if when is None else Moment.from_datetime(when)
    config = SolverConfig(
        coordinate_offset=offset,
        radius_formula=radius,
        anomaly_series_in_degrees=scale_series,
    )

    try:
        report = report_for_moment(moment, config)
    except (ValueError, FloatingPointError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    print_report(moment, report)

    if json_path:
        typer.echo(f"Wrote: {export_report_to_json(report, json_path)}")
    if plot_path:
        jd = moment.julian_day
        track = Engine(dt_days=5.0, config=config).run(jd, jd + 365.25)
        typer.echo(f"Wrote: {render_orbit_track(track, plot_path)}")


if __name__ == "__main__":
    app()
