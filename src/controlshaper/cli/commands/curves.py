"""Response curve commands."""

from typing import Optional

import click

from controlshaper.curves import PRESET_POINTS, sample_response
from controlshaper.models import Curve, CurvePreset, format_number

UNIT_RANGE = click.FloatRange(0.0, 1.0)


@click.command(name="presets")
def presets():
    """List the built-in response curve presets."""
    for preset, points in PRESET_POINTS.items():
        click.echo(f"{preset.value}:")
        if not points:
            click.echo("  (no points, identity response)")
            continue
        for in_, out in points:
            click.echo(f"  in={format_number(in_)} out={format_number(out)}")


@click.command(name="evaluate")
@click.option(
    "--preset",
    "-p",
    type=click.Choice([p.value for p in CurvePreset], case_sensitive=False),
    default=None,
    help="Start from a preset curve",
)
@click.option(
    "--point",
    "points",
    type=(UNIT_RANGE, UNIT_RANGE),
    multiple=True,
    help="Curve point as IN OUT (repeatable, replaces preset points with the same IN)",
)
@click.option(
    "--exponent",
    "-e",
    type=click.FloatRange(min=0.0, min_open=True),
    default=None,
    help="Exponent applied when the curve has no points",
)
@click.option(
    "--steps",
    "-n",
    type=click.IntRange(min=1),
    default=10,
    help="Number of sampling intervals (default: 10)",
)
def evaluate(preset: Optional[str], points: tuple[tuple[float, float], ...],
             exponent: Optional[float], steps: int):
    """
    Print the sampled response of a curve or exponent.

    \b
    Examples:
      controlshaper evaluate --preset smooth
      controlshaper evaluate --point 0.5 0.2 --steps 4
      controlshaper evaluate --exponent 2
    """
    pairs = list(PRESET_POINTS[CurvePreset(preset.lower())]) if preset else []
    pairs.extend(points)
    curve = Curve.from_pairs(pairs) if pairs else None

    for value, output in sample_response(curve, exponent, steps):
        click.echo(f"{value:.4f}\t{output:.4f}")
