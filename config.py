"""
Settings for the to-do API, loaded from a .env file.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_ENV_FILE = ".env"
DEFAULT_HOST = "127.0.0.1"


class ConfigError(Exception):
    """Raised when the server can't be configured. Fatal at startup."""


@dataclass(frozen=True)
class Settings:
    port: int
    host: str = DEFAULT_HOST
    debug: bool = False


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_settings(env_file: str = DEFAULT_ENV_FILE) -> Settings:
    """Load `env_file` into the environment and build Settings from it.

    A missing env file or a missing/invalid PORT raises ConfigError.
    """
    if not os.path.isfile(env_file):
        raise ConfigError("error loading .env file")
    try:
        load_dotenv(env_file)
    except OSError as e:
        raise ConfigError(f"error loading .env file: {e}") from e

    raw_port = os.getenv("PORT", "").strip()
    if not raw_port:
        raise ConfigError("PORT is not set")
    try:
        port = int(raw_port)
    except ValueError as e:
        raise ConfigError(f"PORT must be an integer, got {raw_port!r}") from e
    if not 0 < port < 65536:
        raise ConfigError(f"PORT out of range: {port}")

    return Settings(
        port=port,
        host=os.getenv("HOST", DEFAULT_HOST).strip() or DEFAULT_HOST,
        debug=_env_bool("FLASK_DEBUG"),
    )
