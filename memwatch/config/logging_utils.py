"""
Standardized logging utilities for consistent log message formatting.
"""
from typing import Any
from memwatch.config.logging_config import logger


def _pad_scope(scope: str) -> str:
    return scope.ljust(16)


def _format_fields(fields: dict) -> str:
    return " ".join(f"{key}={value}" for key, value in fields.items())


def log_application_event(event: str, details: str = "") -> None:
    """Log application-level events (startup, shutdown, etc.) with standardized format."""
    if details:
        logger.info(f"[{_pad_scope('application')}] {event} - {details}")
    else:
        logger.info(f"[{_pad_scope('application')}] {event}")


def log_config_updated(max_memory_limit: int, debug_enabled: bool) -> None:
    """Log a configuration replacement."""
    logger.info(
        f"[{_pad_scope('config')}] Config updated "
        f"max_memory_mb={max_memory_limit} debug_mode={debug_enabled}"
    )


def log_memory_event(event: str, **fields: Any) -> None:
    """Log an allocate/release event on the simulated buffer."""
    message = f"[{_pad_scope('memory')}] {event}"
    if fields:
        message += f" {_format_fields(fields)}"
    logger.info(message)


def log_background_stats(request_count: int, memory_allocated_mb: int, debug_mode: bool) -> None:
    """Log one background reporter tick."""
    logger.info(
        f"[{_pad_scope('background')}] Background stats "
        f"request_count={request_count} memory_allocated_mb={memory_allocated_mb} debug_mode={debug_mode}"
    )


def log_operation_error(scope: str, error_message: str) -> None:
    """Log operation error with standardized format."""
    logger.error(f"[{_pad_scope(scope)}] Failed - {error_message}")
