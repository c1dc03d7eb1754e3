"""Locate and parse the Clawdbot configuration.

The loader never fails a run: missing, unreadable or corrupt files are logged
and skipped, and when nothing usable is found an empty document is returned.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import yaml

from .core.document import ConfigDocument

logger = logging.getLogger(__name__)

CONFIG_ENV = "CLAWDBOT_CONFIG"


def _search_paths() -> list[Path]:
    home = Path.home() / ".clawdbot"
    return [
        home / "config.json",
        home / "config.yaml",
        home / ".clawdbotrc",
        Path.cwd() / ".clawdbotrc",
    ]


class ConfigLocator:
    """Read-only resolution of candidate Clawdbot config files."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._explicit_path = config_path

    def candidates(self) -> list[Path]:
        """Existing config files, in the order they should be tried."""
        found: list[Path] = []
        for p in self._ordered_paths():
            if p.is_file() and p not in found:
                found.append(p)
        return found

    def searched_locations(self) -> list[str]:
        """Return the list of paths that would be checked, in order."""
        locations: list[str] = []
        if self._explicit_path:
            locations.append(str(self._explicit_path))
        env_path = os.environ.get(CONFIG_ENV)
        if env_path:
            locations.append(f"${CONFIG_ENV} ({env_path})")
        locations.extend(str(p) for p in _search_paths())
        return locations

    def _ordered_paths(self) -> list[Path]:
        paths: list[Path] = []
        if self._explicit_path:
            paths.append(self._explicit_path)
        env_path = os.environ.get(CONFIG_ENV)
        if env_path:
            paths.append(Path(env_path))
        paths.extend(_search_paths())
        return paths


def read_config(path: Path) -> dict | None:
    """Load a config file as a dict, auto-detecting JSON vs YAML.

    Returns None when the file cannot be read or is not a mapping.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("cannot read %s: %s", path, e)
        return None

    if path.suffix == ".json":
        try:
            result = json.loads(text) if text.strip() else {}
        except json.JSONDecodeError as e:
            logger.warning("invalid JSON in %s: %s", path, e)
            return None
    else:
        result = _parse_json_or_yaml(path, text)
        if result is None:
            return None

    if not isinstance(result, dict):
        logger.warning("%s: expected a mapping at top level, got %s", path, type(result).__name__)
        return None
    return result


def _parse_json_or_yaml(path: Path, text: str) -> object | None:
    # Try JSON first (rc files are sometimes JSON)
    try:
        result = json.loads(text)
        if isinstance(result, dict):
            return result
    except ValueError:
        pass

    try:
        return yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        logger.warning("invalid YAML in %s: %s", path, e)
        return None


def load_document(config_path: Path | None = None) -> ConfigDocument:
    """Return the first config that parses, or an empty document."""
    locator = ConfigLocator(config_path=config_path)

    if config_path is not None and not config_path.is_file():
        logger.warning("config file not found: %s", config_path)

    for path in locator.candidates():
        data = read_config(path)
        if data is None:
            continue
        try:
            document = ConfigDocument(data, source=path)
        except RecursionError:
            logger.warning("%s: self-referencing structure, skipping", path)
            continue
        logger.debug("loaded configuration from %s", path)
        return document

    logger.info("no configuration found (searched: %s)", ", ".join(locator.searched_locations()))
    return ConfigDocument()
