from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

import guestlist
from guestlist.config_loader import DATA_DIR, GuestListConfig, load_config, resolve_data_file


def _write_config(path: Path, body: str) -> Path:
    path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_bundled_config_points_next_to_program() -> None:
    config = load_config()
    assert config.data_file == "guests.json"
    assert config.log_level == "WARNING"
    assert resolve_data_file(config) == (DATA_DIR / "guests.json").resolve()


def test_default_data_file_ships_inside_package() -> None:
    package_dir = Path(guestlist.__file__).resolve().parent
    target = resolve_data_file(load_config())

    assert target.is_relative_to(package_dir)
    assert target.read_text(encoding="utf-8") == "[]"


def test_load_config_reads_aliases(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path / "settings.yaml",
        """
        data-file: lists/party.json
        log-level: DEBUG
        indent: true
        """,
    )

    config = load_config(path)

    assert config.data_file == "lists/party.json"
    assert config.log_level == "DEBUG"
    assert config.indent is True
    assert resolve_data_file(config, path) == (tmp_path / "lists" / "party.json").resolve()


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "settings.yaml", "")
    assert load_config(path) == GuestListConfig()


def test_absolute_data_file_is_kept(tmp_path: Path) -> None:
    target = tmp_path / "elsewhere" / "guests.json"
    config = GuestListConfig(data_file=str(target))
    assert resolve_data_file(config, tmp_path / "settings.yaml") == target


def test_missing_explicit_config_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_non_mapping_config_raises(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "settings.yaml", "- guests.json")
    with pytest.raises(ValueError, match="mapping"):
        load_config(path)


def test_invalid_setting_type_raises(tmp_path: Path) -> None:
    path = _write_config(tmp_path / "settings.yaml", "indent: [1, 2]")
    with pytest.raises(ValidationError):
        load_config(path)
