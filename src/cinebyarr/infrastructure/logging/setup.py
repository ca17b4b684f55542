"""structlog + stdlib logging wiring.

structlog events and foreign records (uvicorn, httpx) share one
ProcessorFormatter. Emission runs on a QueueListener thread so the event
loop never blocks on stream I/O: DEBUG..WARNING go to stdout,
ERROR and above to stderr.
"""

from __future__ import annotations

import atexit
import copy
import logging
import logging.config
import queue
import sys
from datetime import datetime, timezone
from logging.handlers import QueueHandler, QueueListener
from typing import Any, Optional

import structlog

from cinebyarr.infrastructure.config.schema import AppConfig

log = structlog.get_logger(__name__)

_QUEUE_LISTENER: Optional[QueueListener] = None

# uvicorn's default loggers; their formatters are swapped for structlog below.
BASE_LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "default": {
            "formatter": "structlog",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
        "access": {
            "formatter": "structlog",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "uvicorn": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "uvicorn.error": {"level": "INFO"},
        "uvicorn.access": {"handlers": ["access"], "level": "INFO", "propagate": False},
    },
}


def _drop_color_message(_: Any, __: Any, event_dict: dict[str, Any]) -> dict[str, Any]:
    # uvicorn duplicates the message as "color_message".
    event_dict.pop("color_message", None)
    return event_dict


def _add_record_created_timestamp_utc(
    _: Any, __: Any, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Stamp foreign records with their creation time, not the listener's."""
    record = event_dict.get("_record")
    if isinstance(record, logging.LogRecord):
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        event_dict["timestamp"] = dt.isoformat().replace("+00:00", "Z")
    return event_dict


def _renderer(config: AppConfig) -> structlog.typing.Processor:
    if config.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _foreign_pre_chain() -> list[structlog.typing.Processor]:
    return [
        _drop_color_message,
        structlog.contextvars.merge_contextvars,
        _add_record_created_timestamp_utc,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]


def _processor_formatter(config: AppConfig) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_foreign_pre_chain(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(config),
        ],
    )


def build_logging_config(config: AppConfig) -> dict[str, Any]:
    """uvicorn-compatible dictConfig rendered through structlog.

    ``config.log_level`` applies to every preconfigured logger and the root.
    """
    cfg = copy.deepcopy(BASE_LOGGING_CONFIG)
    cfg["formatters"] = {
        "structlog": {
            "()": structlog.stdlib.ProcessorFormatter,
            "foreign_pre_chain": _foreign_pre_chain(),
            "processors": [
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(config),
            ],
        }
    }
    for logger_cfg in cfg["loggers"].values():
        logger_cfg["level"] = config.log_level
    cfg["root"] = {"handlers": ["default"], "level": config.log_level}
    return cfg


class _LevelRangeFilter(logging.Filter):
    def __init__(
        self, min_level: int = logging.NOTSET, max_level: int = logging.CRITICAL
    ) -> None:
        super().__init__()
        self._min = min_level
        self._max = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return self._min <= record.levelno <= self._max


class _StructlogPreservingQueueHandler(QueueHandler):
    """QueueHandler that keeps structlog's dict ``record.msg`` intact."""

    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        # The base implementation stringifies record.msg.
        return copy.copy(record)


def _stop_async_listener() -> None:
    global _QUEUE_LISTENER
    if _QUEUE_LISTENER is not None:
        try:
            _QUEUE_LISTENER.stop()
        finally:
            _QUEUE_LISTENER = None


def _enable_async_logging(config: AppConfig) -> None:
    """Route all stdlib logging through a queue drained on a background thread."""
    global _QUEUE_LISTENER

    _stop_async_listener()

    formatter = _processor_formatter(config)

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setFormatter(formatter)
    stdout_handler.addFilter(_LevelRangeFilter(max_level=logging.WARNING))

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.addFilter(_LevelRangeFilter(min_level=logging.ERROR))

    q: queue.Queue[logging.LogRecord] = queue.Queue()

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_StructlogPreservingQueueHandler(q))
    root.setLevel(config.log_level)

    for name in list(logging.root.manager.loggerDict.keys()):
        existing = logging.getLogger(name)
        existing.handlers.clear()
        existing.propagate = True
        existing.setLevel(config.log_level)

    _QUEUE_LISTENER = QueueListener(
        q, stdout_handler, stderr_handler, respect_handler_level=True
    )
    _QUEUE_LISTENER.start()
    atexit.register(_stop_async_listener)


def configure_logging(config: AppConfig) -> dict[str, Any]:
    """
    Configure structlog + stdlib logging.

    Returns the uvicorn-compatible dictConfig for ``uvicorn.run(log_config=...)``;
    actual emission is wired through QueueHandler/QueueListener.
    """
    structlog.configure(
        processors=[
            _drop_color_message,
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    cfg = build_logging_config(config)
    logging.config.dictConfig(cfg)
    _enable_async_logging(config)

    log.info(
        "logging_configured", log_format=config.log_format, log_level=config.log_level
    )
    return cfg
