"""Utilities for loading the guest list configuration file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field


DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_CONFIG_PATH = DATA_DIR / "guestlist.config.yaml"


class GuestListConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data_file: str = Field(alias="data-file", default="guests.json")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(alias="log-level", default="WARNING")
    indent: bool = False


def _load_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def load_config(path: Path | None = None) -> GuestListConfig:
    """Return settings from `guestlist.config.yaml`.

    The bundled file is optional; a path passed explicitly must exist.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return GuestListConfig()
        path = DEFAULT_CONFIG_PATH
    data = _load_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a mapping of settings.")
    return GuestListConfig.model_validate(data)


def resolve_data_file(config: GuestListConfig, config_path: Path | None = None) -> Path:
    """Resolve `data-file` relative to the directory holding the config."""
    target = Path(config.data_file).expanduser()
    if target.is_absolute():
        return target
    base = config_path.resolve().parent if config_path is not None else DATA_DIR
    return (base / target).resolve()
