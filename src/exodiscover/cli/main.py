"""`exodiscover` command-line interface.

Commands emit JSON (or a PNG for `render`) so the generators can be used
from scripts and notebooks without writing Python.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click

from exodiscover.catalog import DEMO_PLANETS, classify, get_planet, run_mock_analysis
from exodiscover.cli.common_cli import (
    EXIT_INPUT_ERROR,
    EXIT_MISSING_DEPENDENCY,
    EXIT_RUNTIME_ERROR,
    ExoCliError,
    configure_logging,
    dump_json_output,
    invalid_parameter,
)
from exodiscover.compute.flux import TransitScenario, generate_scenario
from exodiscover.compute.spectrum import generate_spectrum
from exodiscover.compute.transit import summarize_transit
from exodiscover.config import load_config
from exodiscover.domain.planet import ExoplanetRecord
from exodiscover.errors import InvalidParameterError, MissingOptionalDependencyError
from exodiscover.plotting._core import require_matplotlib
from exodiscover.simulation import (
    FrameCompositor,
    ManualScheduler,
    RecordingSurface,
    SimulationSession,
)


def _resolve_planet(key: str) -> ExoplanetRecord:
    try:
        return get_planet(key)
    except KeyError as exc:
        names = ", ".join(p.name for p in DEMO_PLANETS)
        raise ExoCliError(f"Unknown planet {key!r}. Known: {names}") from exc


def _record_payload(record: ExoplanetRecord) -> dict[str, Any]:
    payload = record.model_dump(mode="json")
    payload.update(
        {
            "confidence_class": record.confidence_class.value,
            "mass_earth": round(record.mass_earth, 4),
            "surface_gravity": round(record.surface_gravity, 4),
            "escape_velocity": round(record.escape_velocity, 4),
        }
    )
    return payload


@click.group()
@click.version_option(package_name="exodiscover")
@click.option(
    "--log-level",
    type=str,
    default=None,
    help="Logging level (defaults to EXODISCOVER_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """exodiscover CLI for orbit and transit simulations."""
    config = load_config()
    configure_logging(log_level or config.log_level)
    ctx.obj = config


@cli.command("lightcurve")
@click.option("--samples", type=int, default=1000, show_default=True)
@click.option("--cadence", type=float, default=0.02, show_default=True, help="Days per sample.")
@click.option("--depth", type=float, default=0.01, show_default=True)
@click.option("--duration", type=int, default=30, show_default=True, help="Transit width in samples.")
@click.option("--noise", type=float, default=0.001, show_default=True)
@click.option("--transit/--no-transit", default=True, show_default=True)
@click.option("--seed", type=int, default=None, help="Seed for reproducible noise.")
@click.option(
    "--out",
    "-o",
    "out_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write JSON here instead of stdout.",
)
def lightcurve_command(
    samples: int,
    cadence: float,
    depth: float,
    duration: int,
    noise: float,
    transit: bool,
    seed: int | None,
    out_path: Path | None,
) -> None:
    """Generate a synthetic light curve."""
    scenario = TransitScenario(
        sample_count=samples,
        cadence=cadence,
        transit_depth=depth,
        transit_duration_samples=duration,
        noise_amplitude=noise,
        inject_transit=transit,
    )
    try:
        series = generate_scenario(scenario, rng=seed)
    except InvalidParameterError as exc:
        raise invalid_parameter(exc) from exc

    payload: dict[str, Any] = {
        "scenario": scenario.model_dump(mode="json"),
        "seed": seed,
        "samples": series.to_records(),
    }
    if transit and duration > 0:
        summary = summarize_transit(series, duration)
        payload["summary"] = {
            **summary.model_dump(mode="json"),
            "depth_percent": summary.depth_percent,
        }
    dump_json_output(payload, out_path)


@cli.command("orbit")
@click.argument("planet")
@click.option("--ticks", type=int, default=100, show_default=True)
@click.option("--speed", type=float, default=None, help="Speed multiplier (0.1-5.0).")
@click.option("--axis", type=float, default=100.0, show_default=True, help="Semi-major axis.")
@click.option("--every", type=int, default=1, show_default=True, help="Keep every Nth frame.")
@click.option(
    "--out",
    "-o",
    "out_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
)
@click.pass_obj
def orbit_command(
    config: Any,
    planet: str,
    ticks: int,
    speed: float | None,
    axis: float,
    every: int,
    out_path: Path | None,
) -> None:
    """Step an orbit simulation and print the planet's positions."""
    if ticks < 0:
        raise ExoCliError(f"--ticks must be >= 0, got {ticks}")
    if every < 1:
        raise ExoCliError(f"--every must be >= 1, got {every}")

    record = _resolve_planet(planet)
    scheduler = ManualScheduler()
    surface = RecordingSurface()
    try:
        session = SimulationSession(
            scheduler,
            record,
            semi_major_axis=axis,
            speed=speed,
            compositor=FrameCompositor(surface, config=config),
            config=config,
        )
    except InvalidParameterError as exc:
        raise invalid_parameter(exc) from exc

    session.play()
    scheduler.advance(ticks)
    session.pause()

    frames = [
        {
            "tick": i + 1,
            "time": frame.time,
            "phase": frame.phase_fraction,
            "phase_percent": round(frame.phase_percent, 3),
            "x": frame.x,
            "y": frame.y,
        }
        for i, frame in enumerate(surface.frames)
        if (i + 1) % every == 0
    ]
    payload = {
        "planet": record.name,
        "speed": session.speed,
        "semi_major_axis": session.orbit.semi_major_axis,
        "semi_minor_axis": session.orbit.semi_minor_axis,
        "eccentricity": session.orbit.eccentricity,
        "period_ticks": session.orbit.period,
        "frames": frames,
    }
    dump_json_output(payload, out_path)


@cli.command("spectrum")
@click.option("--noise", type=float, default=0.02, show_default=True)
@click.option("--seed", type=int, default=None)
@click.option(
    "--out",
    "-o",
    "out_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
)
def spectrum_command(noise: float, seed: int | None, out_path: Path | None) -> None:
    """Generate the mock transmission spectrum."""
    try:
        spectrum = generate_spectrum(noise=noise, rng=seed)
    except InvalidParameterError as exc:
        raise invalid_parameter(exc) from exc
    dump_json_output({"seed": seed, "points": spectrum.to_records()}, out_path)


@cli.command("planets")
@click.option(
    "--out",
    "-o",
    "out_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
)
def planets_command(out_path: Path | None) -> None:
    """List the demo planet catalog with confidence classes."""
    groups = classify(DEMO_PLANETS)
    payload = {
        "planets": [_record_payload(p) for p in DEMO_PLANETS],
        "counts": {cls.value: len(members) for cls, members in groups.items()},
    }
    dump_json_output(payload, out_path)


@cli.command("analyze")
@click.option("--delay", type=float, default=0.0, show_default=True, help="Seconds per stage.")
def analyze_command(delay: float) -> None:
    """Run the staged mock analysis and print the candidates found."""
    if delay < 0:
        raise ExoCliError(f"--delay must be >= 0, got {delay}")
    records = run_mock_analysis(
        lambda pct: click.echo(f"Analysis {pct:3d}%", err=True),
        delay=delay,
    )
    click.echo(f"Found {len(records)} exoplanet candidates", err=True)
    dump_json_output([_record_payload(r) for r in records], None)


@cli.command("render")
@click.argument("planet")
@click.option(
    "--out",
    "-o",
    "out_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="PNG output path.",
)
@click.option("--ticks", type=int, default=150, show_default=True)
@click.option("--speed", type=float, default=None)
@click.option("--seed", type=int, default=None)
@click.pass_obj
def render_command(
    config: Any,
    planet: str,
    out_path: Path,
    ticks: int,
    speed: float | None,
    seed: int | None,
) -> None:
    """Render an orbit frame and light curve to a PNG."""
    try:
        require_matplotlib()
    except MissingOptionalDependencyError as exc:
        raise ExoCliError(str(exc), exit_code=EXIT_MISSING_DEPENDENCY) from exc

    import matplotlib

    matplotlib.use("Agg")
    from exodiscover.plotting import save_overview

    if ticks < 0:
        raise ExoCliError(f"--ticks must be >= 0, got {ticks}", exit_code=EXIT_INPUT_ERROR)

    record = _resolve_planet(planet)
    scheduler = ManualScheduler()
    surface = RecordingSurface()
    compositor = FrameCompositor(surface, surface, config=config)
    try:
        session = SimulationSession.for_canvas(
            scheduler, 800, 384, record, speed=speed, compositor=compositor, config=config
        )
    except InvalidParameterError as exc:
        raise invalid_parameter(exc) from exc

    session.play()
    scheduler.advance(ticks)
    session.pause()
    if surface.last_frame is None:
        compositor.on_tick(session)

    scenario = TransitScenario()
    compositor.publish_series(generate_scenario(scenario, rng=seed))

    frame = surface.last_frame
    if frame is None:
        raise ExoCliError("No frame was drawn", exit_code=EXIT_RUNTIME_ERROR)
    fig = save_overview(
        frame,
        surface.series[-1],
        out_path,
        reference_flux=1.0 - scenario.transit_depth,
    )
    import matplotlib.pyplot as plt

    plt.close(fig)
    click.echo(f"Wrote {out_path}")


def main() -> int:
    """Main entry point for the CLI."""
    try:
        cli(standalone_mode=False)
        return 0
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as e:
        e.show()
        return int(getattr(e, "exit_code", 1))
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
