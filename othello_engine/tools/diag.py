from __future__ import annotations

import logging
import os
import pathlib
import shutil
import sys
import time
from typing import Any, Dict

import orjson

DEFAULTS_PATH = pathlib.Path(__file__).resolve().parents[1] / "config" / "defaults.toml"


def config_home() -> pathlib.Path:
    return pathlib.Path(os.environ.get("OTHELLO_ENGINE_HOME", os.path.expanduser("~/.othello_engine")))


def config_path() -> pathlib.Path:
    return config_home() / "config.toml"


def ensure_config() -> bool:
    """Copy packaged defaults into the config home; True if a file was created."""
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists():
        return False
    shutil.copyfile(DEFAULTS_PATH, path)
    logging.getLogger(__name__).info("Created default configuration at %s", path)
    return True


def _read_toml(path: pathlib.Path) -> Dict[str, Any]:
    # Prefer stdlib tomllib (3.11+), else tomli
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_config() -> Dict[str, Any]:
    """Packaged defaults overlaid with the user's config.toml, section by section."""
    config = _read_toml(DEFAULTS_PATH)
    path = config_path()
    if path.exists():
        user = _read_toml(path)
        for section, values in user.items():
            if isinstance(values, dict):
                config.setdefault(section, {}).update(values)
            else:
                config[section] = values
    return config


def log_event(module: str, event: str, **kwargs: Any) -> None:
    """Structured event logging through the central logger.

    Emits a single JSON line via the Python logging system so it reaches the
    log file configured by logging_setup.setup_logging().
    """
    payload = {"ts": time.time(), "module": module, "event": event}
    payload.update(kwargs)
    try:
        line = orjson.dumps(payload).decode("utf-8")
        logging.getLogger(f"event.{module}").info(line)
    except TypeError:
        logging.getLogger("event").exception("failed to log event: %s", {"module": module, "event": event})


def load_config_or_exit() -> Dict[str, Any]:
    try:
        ensure_config()
        return load_config()
    except (OSError, ValueError) as e:
        # tomllib.TOMLDecodeError subclasses ValueError
        logging.getLogger(__name__).error("Error loading config %s: %s", config_path(), e)
        sys.exit(1)
