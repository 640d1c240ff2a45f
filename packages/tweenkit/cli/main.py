"""Command-line interface for tweenkit.

Lists, evaluates, samples and bakes easing curves.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from rich.console import Console
from rich.table import Table

from tweenkit.core.config.loader import configure_logging
from tweenkit.core.config.models import AppConfig
from tweenkit.core.curves.easing import (
    EASING_FUNCTIONS,
    InvalidCurveKindError,
    evaluate_normalized,
    evaluate_range,
    resolve_kind,
)
from tweenkit.core.curves.models import CurveKind
from tweenkit.core.curves.sampling import bake_curve
from tweenkit.core.utils.json import write_json

console = Console()
logger = logging.getLogger(__name__)


def _resolve_kind_arg(value: str | None, config: AppConfig) -> CurveKind:
    """Resolve a CLI curve argument, falling back to the configured default."""
    if value is None:
        return config.default_curve
    return resolve_kind(value)


def cmd_list(args: argparse.Namespace, config: AppConfig) -> int:
    """Print every curve kind."""
    table = Table(title="Easing curves")
    table.add_column("Kind")
    table.add_column("Formula")
    table.add_column("v(0.5)", justify="right")

    for kind, easing in EASING_FUNCTIONS.items():
        table.add_row(kind.value, easing.__name__, f"{easing(0.5):.6f}")

    console.print(table)
    return 0


def cmd_eval(args: argparse.Namespace, config: AppConfig) -> int:
    """Evaluate a curve at one point in time."""
    kind = _resolve_kind_arg(args.kind, config)

    if args.start is None and args.end is None:
        value = evaluate_normalized(args.time, args.total, kind)
    else:
        start = 0.0 if args.start is None else args.start
        end = 1.0 if args.end is None else args.end
        value = evaluate_range(args.time, args.total, start, end, kind)

    console.print(f"{kind.value}: {value:.6f}")
    return 0


def cmd_sample(args: argparse.Namespace, config: AppConfig) -> int:
    """Print a baked curve as a table."""
    kind = _resolve_kind_arg(args.kind, config)
    samples = config.bake_samples if args.samples is None else args.samples

    table = Table(title=f"{kind.value} ({samples} samples)")
    table.add_column("t", justify="right")
    table.add_column("v", justify="right")
    for point in bake_curve(kind, samples):
        table.add_row(f"{point.t:.4f}", f"{point.v:.6f}")

    console.print(table)
    return 0


def cmd_bake(args: argparse.Namespace, config: AppConfig) -> int:
    """Write a baked curve to a JSON file."""
    kind = _resolve_kind_arg(args.kind, config)
    samples = config.bake_samples if args.samples is None else args.samples
    out_path = Path(args.out).resolve()

    points = bake_curve(kind, samples)
    write_json(
        out_path,
        {
            "kind": kind.value,
            "samples": samples,
            "points": [p.model_dump() for p in points],
        },
    )
    logger.info(f"Baked {kind.value} ({samples} samples) to {out_path}")
    console.print(f"[green]Baked {kind.value} to {out_path}[/green]")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="tweenkit",
        description="tweenkit - easing curves for UI transitions",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config (.json/.yaml, default: tweenkit.yaml)",
    )
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="List curve kinds")

    ev = sub.add_parser("eval", help="Evaluate a curve at a point in time")
    ev.add_argument("kind", nargs="?", default=None, help="Curve kind (default from config)")
    ev.add_argument("--time", type=float, required=True, help="Elapsed time")
    ev.add_argument("--total", type=float, default=1.0, help="Total duration (default: 1.0)")
    ev.add_argument("--start", type=float, default=None, help="Range start")
    ev.add_argument("--end", type=float, default=None, help="Range end")

    sample = sub.add_parser("sample", help="Print a sampled curve")
    sample.add_argument("kind", nargs="?", default=None, help="Curve kind (default from config)")
    sample.add_argument("--samples", type=int, default=None, help="Sample count")

    bake = sub.add_parser("bake", help="Write a sampled curve to JSON")
    bake.add_argument("kind", nargs="?", default=None, help="Curve kind (default from config)")
    bake.add_argument("--out", required=True, help="Output JSON path")
    bake.add_argument("--samples", type=int, default=None, help="Sample count")

    return p


_COMMANDS = {
    "list": cmd_list,
    "eval": cmd_eval,
    "sample": cmd_sample,
    "bake": cmd_bake,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    args = build_arg_parser().parse_args(argv)

    try:
        config = AppConfig.load_or_default(args.config)
    except Exception as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    if args.log_level:
        config.logging.level = args.log_level
    configure_logging(config)

    try:
        return _COMMANDS[args.cmd](args, config)
    except InvalidCurveKindError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        console.print(f"Available: {', '.join(k.value for k in CurveKind)}")
        return 1
    except ValueError as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
