"""Structured logging for oxide.

The library only emits debug events: guard short-circuits, exceptions absorbed
by `safe` and exhausted matches. They are written to the `oxide` stdlib logger
namespace, which `configure_logging` gives its own handler and level. The host
application's root logger is never touched.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'LOGGER_NAME',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'configured_level',
    'get_logger',
    'remove_log_hook',
    'reset_logging',
]

LOGGER_NAME = 'oxide'

# Handler installed on the `oxide` logger and the level it was installed with
_handler: logging.Handler | None = None
_level: str | None = None


def _get_shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _hook_processor,
    ]


def _get_renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route oxide's structlog events to stderr at the given level.

    Events below `level` are dropped before any processor or hook runs.
    Calling this again replaces the previous handler.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
            Unknown names fall back to INFO.
        json_output: If True, emit JSON logs. If False, use console output.
    """
    global _handler, _level  # noqa: PLW0603

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_get_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_get_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _get_renderer(json_output),
            ],
        )
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False

    _handler = handler
    _level = level.upper()


def configured_level() -> str | None:
    """Level passed to the last `configure_logging` call, or None."""
    return _level


def reset_logging() -> None:
    """Undo `configure_logging` and restore structlog's defaults."""
    global _handler, _level  # noqa: PLW0603

    package_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    structlog.reset_defaults()
    _handler = None
    _level = None


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Get a structlog logger under the `oxide` namespace.

    Args:
        name: Logger name, usually the calling module's `__name__`.
            Names outside the namespace are nested under it.
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + '.'):
        name = f'{LOGGER_NAME}.{name}'
    return structlog.get_logger(name)


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook called with a copy of each emitted event dict."""
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _hook_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: BLE001, S112
            continue
    return event_dict
