"""Command-line guest list backed by a single JSON file."""

from __future__ import annotations

from .config_loader import GuestListConfig, load_config, resolve_data_file
from .guest_store import GuestStore

__all__ = [
    "GuestListConfig",
    "GuestStore",
    "load_config",
    "resolve_data_file",
]
