"""Persistence helper for the guest list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import orjson

LOGGER = logging.getLogger(__name__)


class GuestStore:
    """Stores guest names as a JSON array of strings in a single file.

    Every call goes back to disk: `load` reads the whole file and `save`
    replaces it in full. Read and write errors propagate to the caller.
    """

    def __init__(self, path: Path, *, indent: bool = False) -> None:
        self.path = path
        self.indent = indent

    def load(self) -> List[str]:
        guests = orjson.loads(self.path.read_bytes())
        if not isinstance(guests, list):
            raise ValueError(f"{self.path} must contain a JSON array of guest names.")
        LOGGER.debug("Loaded %s guests from %s", len(guests), self.path)
        return guests

    def save(self, guests: List[str]) -> None:
        option = orjson.OPT_INDENT_2 if self.indent else 0
        self.path.write_bytes(orjson.dumps(guests, option=option))
        LOGGER.debug("Wrote %s guests to %s", len(guests), self.path)

    def add(self, name: str) -> List[str]:
        guests = self.load()
        guests.append(name)
        self.save(guests)
        return guests

    def initialize(self, *, overwrite: bool = False) -> bool:
        """Write an empty list unless the file already exists.

        Returns True when the file was written.
        """
        if self.path.exists() and not overwrite:
            LOGGER.info("Guest list already present at %s", self.path)
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.save([])
        LOGGER.info("Initialized empty guest list at %s", self.path)
        return True
