"""Logging of validation failures."""

from object_graph_validator.observability.logging import (
    VALIDATION_FIELDS,
    LogFormat,
    LoggingConfig,
    LoggingHandle,
    describe_input_value,
    get_active_logging_handle,
    setup_logging,
    setup_structured_logging,
    shutdown_logging,
)

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
