"""Command-line options for the game window."""
from __future__ import annotations

import argparse
from typing import Sequence, Tuple

from columns.config import GameConfig


def build_parser() -> argparse.ArgumentParser:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(description="Columns falling-blocks puzzle")
    parser.add_argument("--columns", type=int, default=defaults.columns)
    parser.add_argument("--rows", type=int, default=defaults.rows)
    parser.add_argument("--fall-seconds", type=float, default=defaults.fall_seconds)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="info")
    parser.add_argument("--plain-log", action="store_true", help="log without rich formatting")
    return parser


def parse_config(argv: Sequence[str] | None = None) -> Tuple[argparse.Namespace, GameConfig]:
    """Parse ``argv`` into options plus a validated ``GameConfig``.

    Invalid sizes or intervals exit through ``parser.error`` with a usage
    message.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = GameConfig(
            columns=args.columns,
            rows=args.rows,
            # Narrow pits still spawn inside the grid.
            starting_x=min(GameConfig().starting_x, max(args.columns - 1, 0)),
            fall_seconds=args.fall_seconds,
        )
    except ValueError as exc:
        parser.error(str(exc))
    return args, config
