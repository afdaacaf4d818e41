from __future__ import annotations

import math
from pathlib import Path
from typing import List, Tuple

import plotly.graph_objects as go

from kepler_eq.simulation.engine import OrbitTrack


def _ellipse_outline(a: float, b: float, n: int = 361) -> Tuple[List[float], List[float]]:
    # Auxiliary ellipse x = a cos E, y = b sin E
    xs = [a * math.cos(2 * math.pi * i / (n - 1)) for i in range(n)]
    ys = [b * math.sin(2 * math.pi * i / (n - 1)) for i in range(n)]
    return xs, ys


def render_orbit_track(
    track: OrbitTrack,
    out_html: str = "out/orbit_track.html",
    show_ellipse: bool = True,
) -> str:
    """
    Renders the orbital plane:
      - reference ellipse from the first sample's a, b
      - sampled positions
      - the Sun at the focus (a e, 0)
      - last position marker
    """
    if len(track) == 0:
        raise ValueError("No samples found in track.")

    pts = track.positions()
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    first = track.samples[0][1].elements

    fig = go.Figure()

    if show_ellipse:
        ex, ey = _ellipse_outline(first.a_au, first.b_au)
        fig.add_trace(go.Scatter(x=ex, y=ey, mode="lines", name="Ellipse", line=dict(dash="dot")))

    fig.add_trace(go.Scatter(x=xs, y=ys, mode="lines+markers", name="Earth track", marker=dict(size=3)))

    fig.add_trace(go.Scatter(
        x=[first.a_au * first.e], y=[0.0],
        mode="markers",
        name="Sun",
        marker=dict(size=12, color="orange"),
    ))

    fig.add_trace(go.Scatter(
        x=[xs[-1]], y=[ys[-1]],
        mode="markers",
        name="Earth now",
        marker=dict(size=8),
    ))

    fig.update_layout(
        title="Earth orbit from Kepler's equation",
        xaxis_title="x (AU)",
        yaxis_title="y (AU)",
        yaxis=dict(scaleanchor="x", scaleratio=1),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h"),
    )

    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html
