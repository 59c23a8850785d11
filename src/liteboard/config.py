"""User settings loaded from ~/.config/liteboard/config.yaml."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from liteboard.document import EXPORT_FILENAME

logger = logging.getLogger(__name__)

CONFIG_ENV = "LITEBOARD_CONFIG"
STORE_ENV = "LITEBOARD_STORE"
SEED_ENV = "LITEBOARD_SEED"


def default_config_path() -> Path:
    return Path.home() / ".config" / "liteboard" / "config.yaml"


def default_store_path() -> Path:
    return Path.home() / ".local" / "share" / "liteboard" / "board.json"


@dataclass
class Settings:
    """Where the board lives and where to seed it from."""

    store_path: Path
    seed_url: str | None = None
    export_filename: str = EXPORT_FILENAME


def _read_yaml(path: Path) -> dict:
    """Read a YAML mapping, or {} if the file is missing or unreadable."""
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning("ignoring config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config file %s: not a mapping", path)
        return {}
    return data


def load_settings(
    config_path: Path | None = None,
    store: str | None = None,
    seed: str | None = None,
) -> Settings:
    """Build settings from file, then environment, then explicit arguments.

    Later sources win.
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV)
        config_path = Path(env_path) if env_path else default_config_path()
    data = _read_yaml(config_path)

    store_path = data.get("store_path")
    if os.environ.get(STORE_ENV):
        store_path = os.environ[STORE_ENV]
    if store:
        store_path = store

    seed_url = data.get("seed_url")
    if os.environ.get(SEED_ENV):
        seed_url = os.environ[SEED_ENV]
    if seed:
        seed_url = seed

    return Settings(
        store_path=Path(store_path).expanduser() if store_path else default_store_path(),
        seed_url=seed_url or None,
        export_filename=data.get("export_filename") or EXPORT_FILENAME,
    )
