#!/usr/bin/env python3
"""CLI entrypoint for the interactive person sample."""

from __future__ import annotations

from cli import parse_cli
from config import load_config
from core.errors import EndOfInputError
from core.person import read_person
from core.prompter import Prompter
from logger import configure_logging


def main(argv: list[str] | None = None) -> int:
    """Run the sample program.

    Args:
        argv: Optional argument list; ``sys.argv[1:]`` when None.

    Returns:
        Process exit code.
    """
    options = parse_cli(argv)
    if options.config_path:
        if not options.config_path.exists():
            print(f"Config path not found: {options.config_path}")
            return 2
        if options.config_path.is_dir():
            print(f"Config path must be a file: {options.config_path}")
            return 2

    try:
        cfg = load_config(options.config_path)
    except ValueError as exc:
        print(f"Invalid config file {options.config_path}: {exc}")
        return 2
    log = configure_logging(options.log_level or cfg.logging.level, cfg.logging.stream)
    log.debug(f"loaded config from {options.config_path or 'defaults'}")

    prompter = Prompter(config=cfg.prompts, logger=log)
    try:
        person = read_person(prompter)
    except EndOfInputError as exc:
        print()
        print(f"Aborted: {exc}")
        return 1
    print(person.describe())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
