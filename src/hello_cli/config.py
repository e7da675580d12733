"""Settings loader for the notes configuration file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from hello_cli.errors import ConfigError
from hello_cli.models.settings import Settings


logger = logging.getLogger(__name__)

CONFIG_SUFFIXES = (".yaml", ".yml", ".json")


def find_config_file(name: str, search_dir: Path | None = None) -> Path:
    base = search_dir if search_dir is not None else Path.cwd()
    candidate = Path(name)
    if not candidate.is_absolute():
        candidate = base / candidate
    if candidate.suffix and candidate.is_file():
        return candidate
    for suffix in CONFIG_SUFFIXES:
        path = candidate.with_name(candidate.name + suffix)
        if path.is_file():
            return path
    raise ConfigError(f"Configuration file not found: {name} (searched: {base})")


def load_settings(name: str = "config", search_dir: Path | None = None) -> Settings:
    """
    Load settings from the first file matching name.
    A bare name is tried with each of CONFIG_SUFFIXES; YAML parsing also accepts JSON files.
    """
    path = find_config_file(name, search_dir)
    logger.debug("Loading settings from %s", path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration in {path} must be a mapping.")
    try:
        return Settings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc}") from exc
