"""Runtime settings read from the environment (and an optional ``.env`` file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULT_ATTEMPTS, MAX_SCATTER_POINTS

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Ignoring non-integer %s=%r, using %d", name, raw, default
        )
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    default_attempts: int = DEFAULT_ATTEMPTS
    max_scatter_points: int = MAX_SCATTER_POINTS


def load_env_file(dotenv_path: Optional[str] = None) -> bool:
    """Merge a ``.env`` file into the process environment.

    Without ``dotenv_path`` the file is searched upwards from the current
    working directory. Variables already set in the environment are kept.
    Only entry points call this; library code just reads ``os.environ``.
    """
    path = dotenv_path or find_dotenv(usecwd=True)
    if not path:
        return False
    return load_dotenv(path, override=False)


def load_settings() -> Settings:
    """Build :class:`Settings` from ``SCATTERSEED_*`` environment variables."""
    return Settings(
        log_level=os.getenv("SCATTERSEED_LOG_LEVEL", "INFO").upper(),
        default_attempts=_int_env("SCATTERSEED_DEFAULT_ATTEMPTS", DEFAULT_ATTEMPTS),
        max_scatter_points=_int_env("SCATTERSEED_MAX_SCATTER_POINTS", MAX_SCATTER_POINTS),
    )


def configure_logging(level: Optional[str] = None, dotenv_path: Optional[str] = None) -> int:
    """Configure the root logger for applications embedding the samplers.

    Library modules never configure logging on import; call this from the
    entry point instead. The ``.env`` file is loaded here, once, before the
    level is read. Returns the numeric level that was applied.
    """
    load_env_file(dotenv_path)
    level_name = (level or load_settings().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level)
    return log_level
