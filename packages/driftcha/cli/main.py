"""Command-line interface for driftcha.

Generates challenges, prints sampled character positions and checks
answers. Rendering is left to real front ends; this is a text view of the
engine's output.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import random
import sys

from rich.console import Console
from rich.table import Table

from driftcha.core.config.loader import load_challenge_config
from driftcha.core.config.models import ChallengeConfig
from driftcha.core.config.presets import PRESETS, PresetNotFoundError, apply_preset
from driftcha.core.config.query import config_from_query, config_to_query
from driftcha.core.errors import DriftchaError
from driftcha.core.layout.engine import compute_content_box
from driftcha.core.paths.library import available_shapes
from driftcha.core.session import Challenge, start_challenge
from driftcha.core.utils.json import write_json
from driftcha.core.utils.logging import LOG_FORMATS, configure_logging, get_logger
from driftcha.core.validation.validator import check_answer, normalize_input

console = Console()
logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 400.0
DEFAULT_HEIGHT = 300.0


def _resolve_config(args: argparse.Namespace) -> ChallengeConfig:
    """Build the challenge config: file (or defaults), then preset, then query."""
    config = load_challenge_config(Path(args.config) if args.config else None)
    if args.preset is not None:
        config = apply_preset(args.preset, base=config)
    if args.query:
        config = config_from_query(args.query, base=config)
    return config


def _build_challenge(args: argparse.Namespace) -> Challenge:
    config = _resolve_config(args)
    box = compute_content_box(args.width, args.height, args.padding)
    rng = random.Random(args.seed) if args.seed is not None else None
    return start_challenge(config, box, rng=rng)


def _challenge_to_dict(challenge: Challenge, reveal: bool) -> dict:
    positions = challenge.initial_positions()
    return {
        "challenge_id": challenge.challenge_id,
        "query": config_to_query(challenge.config),
        "box": challenge.box.model_dump(),
        "solution": challenge.solution if reveal else None,
        "length": len(challenge.solution),
        "global_center": (
            challenge.global_center.model_dump() if challenge.global_center else None
        ),
        "placements": [
            {
                **p.model_dump(),
                "initial": {"x": float(pos[0]), "y": float(pos[1])},
            }
            for p, pos in zip(challenge.placements, positions, strict=True)
        ],
    }


def _positions_table(challenge: Challenge, elapsed: float, reveal: bool) -> Table:
    sampler = challenge.sampler()
    positions = sampler.sample(elapsed)
    t_solution, t_noise = sampler.times(elapsed)
    table = Table(
        title=f"t={elapsed:.2f}s (solution t={t_solution:.3f}, noise t={t_noise:.3f})"
    )
    table.add_column("#", justify="right")
    table.add_column("char")
    table.add_column("group")
    table.add_column("index", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for i, (p, pos) in enumerate(zip(challenge.placements, positions, strict=True)):
        group = ("solution" if p.is_solution else "noise") if reveal else "?"
        table.add_row(str(i), p.char, group, str(p.index), f"{pos[0]:.1f}", f"{pos[1]:.1f}")
    return table


def cmd_new(args: argparse.Namespace) -> int:
    """Generate a challenge and show its initial layout."""
    challenge = _build_challenge(args)
    if args.output:
        write_json(args.output, _challenge_to_dict(challenge, args.reveal))
        get_logger(__name__, challenge_id=challenge.challenge_id).info(
            f"Wrote challenge to {args.output}"
        )
    if args.json:
        console.print_json(json.dumps(_challenge_to_dict(challenge, args.reveal)))
        return 0

    console.print(f"[bold]Challenge[/bold] {challenge.challenge_id}")
    console.print(f"   Query: {config_to_query(challenge.config)}")
    console.print(
        f"   Box: {challenge.box.width:.0f}x{challenge.box.height:.0f} "
        f"(padding {challenge.box.padding:.0f})"
    )
    console.print(f"   Solution length: {len(challenge.solution)}")
    if args.reveal:
        console.print(f"   Solution: [green]{challenge.solution}[/green]")
    console.print(_positions_table(challenge, 0.0, args.reveal))
    return 0


def cmd_frames(args: argparse.Namespace) -> int:
    """Sample a challenge at several elapsed times."""
    challenge = _build_challenge(args)
    if args.reveal:
        console.print(f"Solution: [green]{challenge.solution}[/green]")
    for elapsed in args.times:
        console.print(_positions_table(challenge, elapsed, args.reveal))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Check an answer against a solution."""
    result = check_answer(args.answer, args.solution)
    if result.valid:
        console.print("[green]✓ valid[/green]")
        return 0

    marks = "".join("^" if bad else " " for bad in result.invalid_slots)
    console.print("[red]✗ invalid[/red]")
    console.print(f"   {normalize_input(args.answer)}")
    console.print(f"   [red]{marks}[/red]")
    return 1


def cmd_presets(args: argparse.Namespace) -> int:
    """List presets with their query strings."""
    table = Table(title="Presets")
    table.add_column("#", justify="right")
    table.add_column("name")
    table.add_column("query")
    for i, preset in enumerate(PRESETS):
        table.add_row(str(i), preset.name, config_to_query(apply_preset(i)))
    console.print(table)
    return 0


def cmd_shapes(args: argparse.Namespace) -> int:
    """List shape and movement tags."""
    table = Table(title="Shapes")
    table.add_column("tag")
    table.add_column("kind")
    for shape in available_shapes():
        table.add_row(shape.value, "special" if shape.is_special else "closed")
    console.print(table)
    return 0


def _add_challenge_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--config", help="Path to challenge config (.json/.yaml)")
    p.add_argument("--preset", help="Preset index or name, merged over the config")
    p.add_argument("--query", help="Query string of parameters, merged last")
    p.add_argument("--width", type=float, default=DEFAULT_WIDTH, help="Container width")
    p.add_argument("--height", type=float, default=DEFAULT_HEIGHT, help="Container height")
    p.add_argument("--padding", type=float, default=12.0, help="Container padding")
    p.add_argument("--seed", type=int, help="Random seed for a reproducible challenge")
    p.add_argument("--reveal", action="store_true", help="Show the solution and groups")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="driftcha",
        description="driftcha - moving-character visual challenges",
    )
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    p.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default="text",
        help="Log line format: text or JSON lines (default: text)",
    )
    p.add_argument("--log-file", help="Write logs to this file instead of stdout")
    sub = p.add_subparsers(dest="cmd", required=True)

    new = sub.add_parser("new", help="Generate a challenge")
    _add_challenge_args(new)
    new.add_argument("--json", action="store_true", help="Print the challenge as JSON")
    new.add_argument("--output", help="Also write the challenge JSON to this file")
    new.set_defaults(func=cmd_new)

    frames = sub.add_parser("frames", help="Sample character positions over time")
    _add_challenge_args(frames)
    frames.add_argument(
        "--times",
        type=float,
        nargs="+",
        default=[0.0, 1.0, 2.0],
        help="Elapsed seconds to sample at",
    )
    frames.set_defaults(func=cmd_frames)

    check = sub.add_parser("check", help="Check an answer against a solution")
    check.add_argument("--solution", required=True, help="Expected solution")
    check.add_argument("--answer", required=True, help="Submitted answer")
    check.set_defaults(func=cmd_check)

    presets = sub.add_parser("presets", help="List presets")
    presets.set_defaults(func=cmd_presets)

    shapes = sub.add_parser("shapes", help="List shape and movement tags")
    shapes.set_defaults(func=cmd_shapes)

    return p


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, dispatch the subcommand and return its exit code."""
    args = build_arg_parser().parse_args(argv)
    try:
        configure_logging(
            level=args.log_level, log_format=args.log_format, filename=args.log_file
        )
        return args.func(args)
    except (DriftchaError, ValueError, FileNotFoundError, PresetNotFoundError) as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]ERROR: {e}[/red]")
        return 1


def main() -> None:
    """Main entry point for CLI."""
    sys.exit(run())
