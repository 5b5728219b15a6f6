"""structlog + stdlib logging setup.

``configure_logging`` routes both structlog loggers (service layer) and plain
``logging.getLogger`` loggers (HTTP error mapping) through one stdlib handler,
so every line comes out in the same format: JSON in production, coloured
key/value pairs on a developer console.
"""

import logging
import sys
from typing import Optional

import structlog

_configured = False
_handler: Optional[logging.Handler] = None
_static: dict = {}


def _add_static_fields(logger, method_name, event_dict):
    """Stamp the fixed fields (service, environment) on every event."""
    for key, value in _static.items():
        event_dict.setdefault(key, value)
    return event_dict


_SHARED = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    _add_static_fields,
]


def configure_logging(
    level: str = "info",
    json: bool = True,
    static_fields: Optional[dict] = None,
) -> None:
    """Configure structlog and the root handler.

    structlog itself is configured once. Level, renderer and static fields
    are applied on every call, so the last call wins.
    """
    global _configured, _handler

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    _static.clear()
    _static.update(static_fields or {})

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    _handler = handler

    if _configured:
        return

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # SQL echo is controlled by Settings.debug, not by the root level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    _configured = True
