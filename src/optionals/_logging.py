"""structlog setup shared by optionals and the applications that use it.

The library only logs anomalies (for example a MarkerPair recovering from an
end marker without a start). ``configure_logging`` routes both structlog and
plain ``logging`` records through one ProcessorFormatter so those anomalies
land in the host application's log stream in the same shape as its own
records.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_hooks: list[LogHook] = []


def _call_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor handing each hook its own copy of the event."""
    for hook in _hooks:
        try:
            hook(dict(event_dict))
        except Exception:
            pass  # a failing hook must not break logging
    return event_dict


def _processors(*, foreign: bool) -> list[Any]:
    """Processor chain; ``foreign`` selects the pre-chain for stdlib records."""
    chain: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _call_hooks,
    ]
    if foreign:
        return chain
    return [
        *chain,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Install structlog and a root handler rendering every record the same way.

    Replaces any handlers already on the root logger.

    Args:
        level: Root logging level name; unknown names fall back to INFO.
        json_output: Render JSON lines (True) or human-readable console output.
        stream: Where to write; defaults to stderr.
    """
    structlog.configure(
        processors=_processors(foreign=False),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    out = stream if stream is not None else sys.stderr
    if json_output:
        renderer: Any = structlog.processors.JSONRenderer(default=repr)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_processors(foreign=True),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every event dict once logging is configured.

    Useful for counting anomalies or forwarding them to an alerting system.
    """
    _hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister a hook; unknown hooks are ignored."""
    if hook in _hooks:
        _hooks.remove(hook)


def clear_log_hooks() -> None:
    """Unregister every hook."""
    _hooks.clear()
