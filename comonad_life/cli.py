"""CLI entrypoint: seed a grid, step it repeatedly, report the run.

CLI arguments override values from an optional JSON config file, which in
turn override built-in defaults. The run summary is printed as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from random import Random
from typing import Any, TextIO

from comonad_life.config.constants import (
    ANSI_CLEAR,
    GRID_HEIGHT,
    GRID_WIDTH,
    LIVE_PROBABILITY,
    NUM_STEPS,
    RANDOM_PATTERN,
)
from comonad_life.config.types import RunConfig
from comonad_life.domain.life import make_grid, population, run
from comonad_life.patterns import PATTERNS, seed_cells
from comonad_life.viz.render import render_snapshot
from comonad_life.viz.text import render_frame

logger = logging.getLogger(__name__)


class RateTimer:
    """Wall-clock timer reporting generations per second since construction."""

    def __init__(self) -> None:
        self.start_time = time.perf_counter()

    def elapsed(self) -> float:
        return time.perf_counter() - self.start_time

    def rate(self, generations: int) -> float:
        elapsed = self.elapsed()
        if elapsed <= 0.0:
            return 0.0
        return generations / elapsed


@dataclass(frozen=True)
class RunSummary:
    """Outcome of one driver run."""

    width: int
    height: int
    pattern: str
    generations: int
    initial_population: int
    final_population: int
    elapsed_seconds: float
    generations_per_second: float


def run_life(config: RunConfig, out: TextIO | None = None) -> RunSummary:
    """Seed, step ``config.steps`` generations, and optionally draw each frame."""
    out = out if out is not None else sys.stdout
    bound = config.bound
    grid = make_grid(seed_cells(config, Random(config.seed)), bound.width, bound.height)
    initial_population = population(grid)

    if config.render:
        out.write(ANSI_CLEAR)
        out.write(render_frame(grid) + "\n")

    timer = RateTimer()
    generations = 0
    for grid in run(grid, config.steps):
        generations += 1
        if config.render:
            out.write(render_frame(grid) + "\n")
            out.write(f"Rate: {timer.rate(generations)}\n")
    elapsed = timer.elapsed()

    if config.snapshot_path is not None:
        render_snapshot(grid, config.snapshot_path, title=f"generation {generations}")
        logger.info("wrote snapshot to %s", config.snapshot_path)

    summary = RunSummary(
        width=bound.width,
        height=bound.height,
        pattern=config.pattern,
        generations=generations,
        initial_population=initial_population,
        final_population=population(grid),
        elapsed_seconds=elapsed,
        generations_per_second=generations / elapsed if elapsed > 0.0 else 0.0,
    )
    logger.info(
        "ran %d generations on %dx%d in %.3fs",
        generations,
        bound.width,
        bound.height,
        elapsed,
    )
    return summary


# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_origin(raw_origin: str) -> tuple[int, int]:
    """Parse a pattern origin formatted as ``X,Y``."""
    tokens = [token.strip() for token in raw_origin.split(",")]
    if len(tokens) != 2:
        raise ValueError("origin must use X,Y format")
    try:
        return (int(tokens[0]), int(tokens[1]))
    except ValueError as exc:
        raise ValueError("origin must use integer X,Y values") from exc


_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off"})

_SETTINGS: dict[str, tuple[type, object]] = {
    "width": (int, GRID_WIDTH),
    "height": (int, GRID_HEIGHT),
    "steps": (int, NUM_STEPS),
    "pattern": (str, RANDOM_PATTERN),
    "origin": (str, "0,0"),
    "seed": (int, 0),
    "live_probability": (float, LIVE_PROBABILITY),
    "render": (bool, False),
    "snapshot": (Path, None),
}
"""Config key -> (value type, built-in default); keys match argparse dests."""


def _coerce(raw: object, kind: type, key: str) -> Any:
    """Convert a CLI or JSON value to ``kind``.

    Booleans are only accepted for boolean settings, and floats only convert
    to integers when they have no fractional part.
    """
    if raw is None:
        return None
    if kind is bool:
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str) and raw.strip().lower() in _TRUE_STRINGS | _FALSE_STRINGS:
            return raw.strip().lower() in _TRUE_STRINGS
        raise ValueError(f"{key} must be a boolean value")
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a {kind.__name__} value")
    if kind is int and isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"{key} must be an integer value, got {raw!r}")
    if kind in (str, Path) and not isinstance(raw, (str, Path, int, float)):
        raise ValueError(f"{key} must be a {kind.__name__} value")
    try:
        return kind(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be a {kind.__name__} value") from exc


def _setting(args: argparse.Namespace, file_cfg: dict[str, object], key: str) -> Any:
    """Resolve one setting: CLI flag, then config file, then built-in default."""
    kind, default = _SETTINGS[key]
    cli_val = getattr(args, key)
    raw = cli_val if cli_val is not None else file_cfg.get(key, default)
    return _coerce(raw, kind, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run Conway's Game of Life on a torus")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument(
        "--pattern",
        type=str,
        choices=[RANDOM_PATTERN, *sorted(PATTERNS)],
        default=None,
    )
    parser.add_argument("--origin", type=str, default=None, help="Pattern offset as X,Y")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--live-probability", type=float, default=None)
    parser.add_argument(
        "--render",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Redraw every generation in the terminal",
    )
    parser.add_argument("--snapshot", type=Path, default=None, help="PNG of the final generation")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


def _build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> RunConfig:
    """Resolve parsed CLI args and file values into a validated RunConfig."""
    return RunConfig(
        width=_setting(args, file_cfg, "width"),
        height=_setting(args, file_cfg, "height"),
        steps=_setting(args, file_cfg, "steps"),
        pattern=_setting(args, file_cfg, "pattern"),
        origin=_parse_origin(_setting(args, file_cfg, "origin")),
        seed=_setting(args, file_cfg, "seed"),
        live_probability=_setting(args, file_cfg, "live_probability"),
        render=_setting(args, file_cfg, "render"),
        snapshot_path=_setting(args, file_cfg, "snapshot"),
    )


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a Life run.

    Supports ``--config path/to/config.json``; CLI arguments override
    config-file values, which override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        config = _build_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    summary = run_life(config)
    print(json.dumps(asdict(summary), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
