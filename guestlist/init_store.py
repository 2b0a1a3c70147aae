"""Create an empty guest list file.

Run once at setup time; an existing list is kept unless --force is given.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config_loader import load_config, resolve_data_file
from .guest_store import GuestStore

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write an empty JSON guest list.")
    parser.add_argument("--data-file", type=Path, default=None, help="Guest list file to create.")
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file.")
    parser.add_argument("--force", action="store_true", help="Replace an existing guest list with [].")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    config = load_config(args.config)
    path = args.data_file or resolve_data_file(config, args.config)
    store = GuestStore(path, indent=config.indent)
    if not store.initialize(overwrite=args.force):
        LOGGER.warning("Left existing guest list at %s unchanged (use --force to reset)", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
