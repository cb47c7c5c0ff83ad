"""
Configuration loader for the tracker.

Settings come from an optional tracker.env file; environment variables of
the same name take precedence over the file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from . import envparse

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tracker.env"
DEFAULT_DB_PATH = Path("data") / "db.json"
DEFAULT_LOG_LEVEL = "WARNING"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENV_KEYS = ("TRACKER_DB_PATH", "TRACKER_CREATE_IF_MISSING", "TRACKER_LOG_LEVEL")


@dataclass
class TrackerConfig:
    """Tracker settings from tracker.env and the environment."""
    db_path: Path
    create_if_missing: bool
    log_level: str


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(config_path: Path | None = None, environ: dict | None = None) -> TrackerConfig:
    """Load TrackerConfig.

    Args:
        config_path: Env file to read. When None, ./tracker.env is used if
            present. An explicit path that does not exist is an error.
        environ: Environment mapping (defaults to os.environ)

    Raises:
        FileNotFoundError: if an explicit config_path is missing
        ValueError: if the env file is malformed
    """
    environ = os.environ if environ is None else environ

    env = {}
    if config_path is not None:
        env = envparse.load_env(config_path)
    elif Path(CONFIG_FILENAME).exists():
        env = envparse.load_env(CONFIG_FILENAME)

    for key in ENV_KEYS:
        if key in environ:
            env[key] = environ[key]

    log_level = env.get("TRACKER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if log_level not in VALID_LOG_LEVELS:
        logger.warning(
            f"Unknown TRACKER_LOG_LEVEL '{log_level}', using {DEFAULT_LOG_LEVEL}. "
            f"Valid levels: {', '.join(VALID_LOG_LEVELS)}"
        )
        log_level = DEFAULT_LOG_LEVEL

    return TrackerConfig(
        db_path=Path(env.get("TRACKER_DB_PATH", str(DEFAULT_DB_PATH))),
        create_if_missing=_parse_bool(env.get("TRACKER_CREATE_IF_MISSING", "true")),
        log_level=log_level,
    )
