"""Command-line interface for reading and extending the guest list."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from .config_loader import load_config, resolve_data_file
from .guest_store import GuestStore

LOGGER = logging.getLogger(__name__)

COMMANDS = ("read", "create")


def build_parser() -> argparse.ArgumentParser:
    """Options only; the subcommand and guest name are taken from the leftovers.

    Keeping positionals out of the parser lets options appear anywhere and lets
    a name such as `-Mary` through. Use `--` before names argparse would still
    read as an option, e.g. `create -- -h`.
    """
    parser = argparse.ArgumentParser(
        description="Read or append entries in a JSON guest list.",
        usage="%(prog)s [options] [read | create GUEST]",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Path to the guest list JSON file (overrides the config file).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML settings file (default: the guestlist.config.yaml bundled with the package).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity (default taken from the config file).",
    )
    return parser


def split_tokens(tokens: list[str]) -> tuple[str | None, list[str]]:
    """Return the subcommand and the arguments that follow it."""
    if "--" in tokens:
        tokens = list(tokens)
        tokens.remove("--")
    if not tokens:
        return None, []
    return tokens[0], tokens[1:]


def _usage_error(message: str) -> NoReturn:
    print(message, file=sys.stderr)
    raise SystemExit(1)


def open_store(args: argparse.Namespace) -> GuestStore:
    config = load_config(args.config)
    level = args.log_level or config.log_level
    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(name)s: %(message)s")
    path = args.data_file or resolve_data_file(config, args.config)
    return GuestStore(path, indent=config.indent)


def read_guests(store: GuestStore) -> None:
    print(store.load())


def create_guest(store: GuestStore, name: str) -> None:
    store.add(name)
    print(name)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args, tokens = parser.parse_known_args(argv)
    command, rest = split_tokens(tokens)

    if command not in COMMANDS:
        _usage_error(f"Usage: {parser.prog} [{' | '.join(COMMANDS)}]")
    if command == "create" and not rest:
        _usage_error(f"Usage: {parser.prog} create GUEST")

    store = open_store(args)

    if command == "read":
        if rest:
            LOGGER.warning("Ignoring extra arguments: %s", " ".join(rest))
        read_guests(store)
    else:
        name, extras = rest[0], rest[1:]
        if extras:
            LOGGER.warning("Ignoring extra arguments: %s", " ".join(extras))
        create_guest(store, name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
