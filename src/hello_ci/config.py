"""
Environment configuration for the demo service.
"""
import logging
import os
from typing import Mapping, Optional

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigurationError(RuntimeError):
    """Raised when an environment variable holds an unusable value."""


def _read(environ: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    env = os.environ if environ is None else environ
    value = env.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def get_port(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Port to listen on, taken from PORT.

    Args:
        environ: Mapping to read from. Defaults to the process environment.

    Returns:
        The port number, or 3000 when PORT is unset or empty.
    """
    raw = _read(environ, "PORT")
    if raw is None:
        return DEFAULT_PORT

    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got {raw!r}")

    if not 1 <= port <= 65535:
        raise ConfigurationError(f"PORT must be between 1 and 65535, got {port}")
    return port


def get_host(environ: Optional[Mapping[str, str]] = None) -> str:
    return _read(environ, "HOST") or DEFAULT_HOST


def get_log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    level = (_read(environ, "LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {level!r}"
        )
    return level


def log_level_number(level: str) -> int:
    return logging.getLevelName(level)
