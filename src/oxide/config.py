"""Library configuration: OxideConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from oxide._logging import configure_logging, reset_logging

__all__ = [
    'OxideConfig',
    'get_config',
    'init',
    'logging_enabled',
    'reset',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_TRUTHY = ('1', 'true', 'yes', 'on')
_FALSY = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class OxideConfig:
    """Configuration for oxide.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or for the console (False).
        trace_guards: Emit a debug event every time a guard short-circuits.
    """

    log_level: str | None = None
    json_logs: bool = True
    trace_guards: bool = False


# Global configuration (set by init())
_config: OxideConfig | None = None

# Configuration read from the environment while init() has not been called
_env_config: OxideConfig | None = None


def _env_level() -> str | None:
    raw = os.environ.get('OXIDE_LOG_LEVEL', '').strip().upper()
    if not raw:
        return None
    if raw not in _LEVELS:
        logging.warning("Unknown OXIDE_LOG_LEVEL value '%s', ignoring", raw)
        return None
    return raw


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name, '').strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    if raw:
        logging.warning("Unknown %s value '%s', defaulting to %s", name, raw, default)
    return default


def _from_env() -> OxideConfig:
    return OxideConfig(
        log_level=_env_level(),
        json_logs=_env_flag('OXIDE_LOG_JSON', True),
        trace_guards=_env_flag('OXIDE_TRACE_GUARDS', False),
    )


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    trace_guards: bool | None = None,
) -> OxideConfig:
    """Initialize oxide with the given configuration.

    Arguments left as None are read from the environment
    (`OXIDE_LOG_LEVEL`, `OXIDE_LOG_JSON`, `OXIDE_TRACE_GUARDS`).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Render logs as JSON.
        trace_guards: Log every guard short-circuit at debug level.

    Returns:
        The OxideConfig that was set.

    Example:
        ```python
        from oxide.config import init

        init(log_level='DEBUG', json_logs=False, trace_guards=True)
        ```
    """
    global _config  # noqa: PLW0603

    env = _from_env()
    _config = OxideConfig(
        log_level=log_level.upper() if log_level is not None else env.log_level,
        json_logs=env.json_logs if json_logs is None else json_logs,
        trace_guards=env.trace_guards if trace_guards is None else trace_guards,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> OxideConfig:
    """Get the active configuration.

    Before `init()` is called the configuration is read from the environment
    once and kept until `reset()`. When the environment supplies a log level,
    logging is configured at that point, as `init()` would have done.
    """
    global _env_config  # noqa: PLW0603

    if _config is not None:
        return _config
    if _env_config is None:
        _env_config = _from_env()
        if _env_config.log_level is not None:
            configure_logging(_env_config.log_level, json_output=_env_config.json_logs)
    return _env_config


def reset() -> None:
    """Forget the active configuration and undo the logging setup it made."""
    global _config, _env_config  # noqa: PLW0603
    _config = None
    _env_config = None
    reset_logging()


def logging_enabled() -> bool:
    """Return True when a log level is configured, by `init()` or the environment."""
    return get_config().log_level is not None
