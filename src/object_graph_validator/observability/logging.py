"""Queue-backed logging for validation failures.

Records are formatted as JSON lines or plain text on a listener thread. The
fields a failure record carries (``error_code``, ``error_path`` and
``input_value``) are rendered in a fixed order; ``input_value`` is reduced to
a bounded string, or to its value kind alone when ``redact_values`` is set,
before the record leaves the logging thread.
"""

from __future__ import annotations

import atexit
import json
import logging
import logging.handlers
import queue
import reprlib
import threading
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, Literal

from object_graph_validator.constants import LOGGER_NAME
from object_graph_validator.domain.values import kind_of

if TYPE_CHECKING:
    from object_graph_validator.config.schema import ValidatorSettings

LogFormat = Literal["json", "text"]

VALIDATION_FIELDS: Final[tuple[str, ...]] = ("error_code", "error_path", "input_value")
_LOG_FORMATS: Final[frozenset[str]] = frozenset({"json", "text"})

_DEFAULT_QUEUE_SIZE: Final[int] = 4096

_INPUT_REPR = reprlib.Repr()
_INPUT_REPR.maxlevel = 3
_INPUT_REPR.maxstring = 80
_INPUT_REPR.maxother = 80


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Where and how validator log records are written.

    ``level`` accepts a level number or name; names are resolved to numbers
    on construction.
    """

    level: int | str = "INFO"
    log_format: LogFormat = "json"
    log_file: Path | str | None = None
    log_to_stderr: bool = True
    logger_name: str = LOGGER_NAME
    queue_size: int = _DEFAULT_QUEUE_SIZE
    redact_values: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", _level_number(self.level))
        if self.log_format not in _LOG_FORMATS:
            raise ValueError(f"unsupported log format {self.log_format!r}")
        if isinstance(self.queue_size, bool) or not isinstance(self.queue_size, int):
            raise ValueError(f"queue_size must be an integer, got {type(self.queue_size).__name__}")
        if self.queue_size <= 0:
            raise ValueError("queue_size must be > 0")
        if not isinstance(self.logger_name, str) or not self.logger_name.strip():
            raise ValueError("logger_name must be a non-empty string")


def describe_input_value(value: Any, *, redact: bool) -> str:
    """Render an offending input value for a log record.

    Redacted values keep only their kind, e.g. ``<redacted string>``.
    """

    if redact:
        return f"<redacted {kind_of(value).value}>"
    return _INPUT_REPR.repr(value)


class _InputValueFilter(logging.Filter):
    """Replaces ``input_value`` with its rendered form in the emitting thread.

    The caller's object graph may change after the call returns, so it is
    never handed to the listener thread.
    """

    def __init__(self, *, redact: bool) -> None:
        super().__init__()
        self._redact = redact

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "input_value"):
            record.input_value = describe_input_value(record.input_value, redact=self._redact)
        return True


class _DroppingQueueHandler(logging.handlers.QueueHandler):
    """Counts records instead of blocking when the queue is full."""

    def __init__(self, log_queue: queue.Queue[Any]) -> None:
        super().__init__(log_queue)
        self.dropped = 0

    def enqueue(self, record: logging.LogRecord) -> None:
        try:
            self.queue.put_nowait(record)
        except queue.Full:
            # Handler.handle holds self.lock around emit.
            self.dropped += 1


def _validation_fields(record: logging.LogRecord) -> dict[str, str]:
    return {
        name: str(getattr(record, name)) for name in VALIDATION_FIELDS if hasattr(record, name)
    }


def _timestamp(record: logging.LogRecord) -> str:
    created = datetime.fromtimestamp(record.created, tz=UTC)
    return created.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class _JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, str] = {
            "timestamp": _timestamp(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_validation_fields(record),
        }
        if record.exc_info is not None:
            event["exception"] = self.formatException(record.exc_info)
        return json.dumps(event, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


class _TextLineFormatter(logging.Formatter):
    """``<timestamp> <LEVEL> <logger> <message> key=value ...``"""

    def format(self, record: logging.LogRecord) -> str:
        parts = [_timestamp(record), record.levelname, record.name, record.getMessage()]
        parts.extend(f"{key}={value}" for key, value in _validation_fields(record).items())
        line = " ".join(parts)
        if record.exc_info is not None:
            line += "\n" + self.formatException(record.exc_info)
        return line


class LoggingHandle:
    """An installed logging setup; ``close`` drains the queue and releases sinks."""

    def __init__(
        self,
        *,
        logger: logging.Logger,
        log_path: Path | None,
        queue_handler: _DroppingQueueHandler,
        listener: logging.handlers.QueueListener,
        sinks: tuple[logging.Handler, ...],
    ) -> None:
        self.logger = logger
        self.log_path = log_path
        self._queue_handler = queue_handler
        self._listener = listener
        self._sinks = sinks
        self._close_lock = threading.Lock()
        self._closed = False

    @property
    def dropped_records(self) -> int:
        return self._queue_handler.dropped

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        with self._close_lock:
            if self._closed:
                return
            self.logger.removeHandler(self._queue_handler)
            # stop() processes every record queued before it returns.
            self._listener.stop()
            self._queue_handler.close()
            for sink in self._sinks:
                sink.flush()
                sink.close()
            self._closed = True


_ACTIVE_LOCK = threading.Lock()
_active_handle: LoggingHandle | None = None


def setup_structured_logging(config: LoggingConfig) -> LoggingHandle:
    """Install queue-backed logging on ``config.logger_name``.

    Any previously installed setup is closed first.
    """

    global _active_handle

    formatter: logging.Formatter = (
        _JsonLineFormatter() if config.log_format == "json" else _TextLineFormatter()
    )
    sinks: list[logging.Handler] = []
    log_path: Path | None = None
    if config.log_file is not None:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        sinks.append(logging.FileHandler(log_path, encoding="utf-8"))
    if config.log_to_stderr:
        sinks.append(logging.StreamHandler())
    for sink in sinks:
        sink.setFormatter(formatter)

    log_queue: queue.Queue[Any] = queue.Queue(maxsize=config.queue_size)
    queue_handler = _DroppingQueueHandler(log_queue)
    queue_handler.addFilter(_InputValueFilter(redact=config.redact_values))
    listener = logging.handlers.QueueListener(log_queue, *sinks)

    with _ACTIVE_LOCK:
        if _active_handle is not None:
            _active_handle.close()

        logger = logging.getLogger(config.logger_name.strip())
        for existing in list(logger.handlers):
            logger.removeHandler(existing)
            existing.close()
        logger.setLevel(config.level)
        logger.propagate = False

        listener.start()
        logger.addHandler(queue_handler)
        _active_handle = LoggingHandle(
            logger=logger,
            log_path=log_path,
            queue_handler=queue_handler,
            listener=listener,
            sinks=tuple(sinks),
        )
        return _active_handle


def setup_logging(settings: ValidatorSettings | None = None) -> logging.Logger:
    """Configure the package logger from validated settings and return it."""

    if settings is None:
        config = LoggingConfig()
    else:
        config = LoggingConfig(
            level=settings.log_level,
            log_format="text" if settings.log_format == "text" else "json",
            log_file=settings.log_file,
            redact_values=settings.redact_values,
        )
    return setup_structured_logging(config).logger


def shutdown_logging(handle: LoggingHandle | None = None) -> None:
    """Close ``handle``, or the active setup when no handle is given."""

    global _active_handle

    with _ACTIVE_LOCK:
        target = _active_handle if handle is None else handle
        if target is _active_handle:
            _active_handle = None
    if target is not None:
        target.close()


def get_active_logging_handle() -> LoggingHandle | None:
    with _ACTIVE_LOCK:
        return _active_handle


def _level_number(level: int | str) -> int:
    if isinstance(level, bool):
        raise ValueError("level must be a level number or name")
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        number = logging.getLevelNamesMapping().get(level.strip().upper())
        if number is not None:
            return number
    raise ValueError(f"unsupported logging level {level!r}")


atexit.register(shutdown_logging)

__all__ = [
    "LogFormat",
    "LoggingConfig",
    "LoggingHandle",
    "VALIDATION_FIELDS",
    "describe_input_value",
    "get_active_logging_handle",
    "setup_logging",
    "setup_structured_logging",
    "shutdown_logging",
]
