"""Library configuration: log output and which exceptions the adapters capture."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

from resultkit._logging import configure_logging

__all__ = [
    'Config',
    'LogFormat',
    'get_config',
    'init',
    'reset_config',
]

LOG_LEVEL_ENV = 'RESULTKIT_LOG_LEVEL'
LOG_FORMAT_ENV = 'RESULTKIT_LOG_FORMAT'

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class LogFormat(Enum):
    """Rendering used by ``configure_logging``."""

    JSON = 'json'
    CONSOLE = 'console'


@dataclass(frozen=True)
class Config:
    """Configuration read by ``try_``, ``try_sync`` and ``option_of``.

    Attributes:
        log_level: Logging level (e.g. "DEBUG"). None = leave logging alone.
        log_format: JSON or console rendering when logging is configured.
        capture: Exception types converted into Err / Nothing. Anything else
            (for example ``asyncio.CancelledError``) propagates.
    """

    log_level: str | None = None
    log_format: LogFormat = LogFormat.JSON
    capture: tuple[type[BaseException], ...] = (Exception,)


# Process-wide configuration (set by init())
_config: Config | None = None


def _detect_log_level() -> str | None:
    """Read the log level from RESULTKIT_LOG_LEVEL, if set and valid."""
    env_level = os.environ.get(LOG_LEVEL_ENV, '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown %s value '%s', logging stays unconfigured", LOG_LEVEL_ENV, env_level)
        return None
    return env_level


def _detect_log_format() -> LogFormat:
    """Read the log format from RESULTKIT_LOG_FORMAT, defaulting to JSON."""
    env_format = os.environ.get(LOG_FORMAT_ENV, '').lower()
    if not env_format:
        return LogFormat.JSON
    try:
        return LogFormat(env_format)
    except ValueError:
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, env_format)
        return LogFormat.JSON


def init(
    log_level: str | None = None,
    log_format: LogFormat | str | None = None,
    capture: tuple[type[BaseException], ...] | None = None,
) -> Config:
    """Set the process-wide configuration.

    Arguments left as None fall back to the environment (log level and
    format) or to the defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = environment.
        log_format: LogFormat or its string value ("json", "console").
        capture: Exception types the adapters convert into values.

    Returns:
        The Config that was set.

    Raises:
        ValueError: If log_format is an unknown string.
        TypeError: If capture is empty or holds something that is not an
            exception type.

    Example:
        ```python
        import resultkit

        resultkit.init(log_level='DEBUG', log_format='console')
        ```
    """
    global _config  # noqa: PLW0603

    if log_format is None:
        resolved_format = _detect_log_format()
    elif isinstance(log_format, str):
        resolved_format = LogFormat(log_format.lower())
    else:
        resolved_format = log_format

    if capture is None:
        resolved_capture: tuple[type[BaseException], ...] = (Exception,)
    else:
        resolved_capture = tuple(capture)
        if not resolved_capture or not all(
            isinstance(exc, type) and issubclass(exc, BaseException) for exc in resolved_capture
        ):
            msg = f'capture must be a non-empty tuple of exception types, got {capture!r}'
            raise TypeError(msg)

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    _config = Config(
        log_level=resolved_level,
        log_format=resolved_format,
        capture=resolved_capture,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_format is LogFormat.JSON)

    return _config


def get_config() -> Config:
    """Get the current configuration, or the defaults if init() was never called."""
    if _config is None:
        return Config()
    return _config


def reset_config() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
