"""Command-line parsing helpers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_NAME = "human_input.json"


@dataclass
class DemoOptions:
    """Parsed CLI options used by the sample program."""

    config_path: Path | None
    log_level: str | None


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the sample program.

    Args:
        argv: Optional argument list.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        prog="human_input",
        description="Ask for a person's name, age and gender, then print the record.",
    )
    parser.add_argument("--config", help=f"Path to a JSON config file (default: ./{DEFAULT_CONFIG_NAME} if present)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARN", "ERROR"],
        help="Override the configured diagnostic log level",
    )
    return parser.parse_args(argv)


def resolve_config_path(args: argparse.Namespace) -> Path | None:
    """Resolve the config path from CLI arguments.

    Args:
        args: Parsed argparse namespace.

    Returns:
        Resolved config path, or None when no config applies.
    """
    if args.config:
        return Path(args.config).expanduser().resolve()
    default_file = Path.cwd() / DEFAULT_CONFIG_NAME
    if default_file.exists():
        return default_file.resolve()
    return None


def parse_cli(argv: list[str] | None = None) -> DemoOptions:
    """Parse command-line arguments into DemoOptions."""
    args = _parse_args(argv)
    return DemoOptions(
        config_path=resolve_config_path(args),
        log_level=args.log_level,
    )
