"""
Logging utilities for DI_COLLECTION.

Provides structured logging with composition context, so records emitted
while building a collection carry the collection name and any extra
fields the caller attached.
"""

import contextvars
import logging
from datetime import datetime
from typing import Any

# Context variable for composition context
_composition_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "composition_context", default=None
)


def set_composition_context(collection_name: str | None = None, **kwargs: Any) -> None:
    """
    Set composition context for logging.

    Args:
        collection_name: Name of the collection being built
        **kwargs: Additional context (module, bootstrap step, etc.)
    """
    context = {"collection_name": collection_name, **kwargs}
    _composition_context.set(context)


def clear_composition_context() -> None:
    """Clear composition context."""
    _composition_context.set(None)


def get_logging_context() -> dict[str, Any]:
    """
    Get current logging context.

    Returns:
        Dictionary with context information
    """
    context: dict[str, Any] = {
        "timestamp": datetime.now().isoformat(),
    }

    composition_context = _composition_context.get()
    if composition_context:
        context.update(composition_context)

    return context


class ContextualLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that automatically adds context to log records.
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Add context to log records."""
        context = get_logging_context()

        extra = kwargs.get("extra", {})
        if extra:
            context.update(extra)

        kwargs["extra"] = context
        return msg, kwargs


def get_logger(name: str) -> ContextualLoggerAdapter:
    """
    Get a contextual logger that automatically adds composition context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        ContextualLoggerAdapter instance
    """
    base_logger = logging.getLogger(name)
    return ContextualLoggerAdapter(base_logger, {})


def log_operation(
    logger: logging.Logger | logging.LoggerAdapter,
    operation: str,
    level: int = logging.DEBUG,
    success: bool = True,
    **context: Any,
) -> None:
    """
    Log a registration operation with structured context.

    Args:
        logger: Logger instance
        operation: Operation name
        level: Log level
        success: Whether the operation changed the collection
        **context: Additional context (service_type, lifetime, ...)
    """
    if not logger.isEnabledFor(level):
        return

    log_context = get_logging_context()
    log_context.update(
        {
            "operation": operation,
            "success": success,
        }
    )

    if context:
        log_context.update(context)

    message = f"Operation: {operation}"
    if not success:
        message = f"Operation skipped: {operation}"
    service_type = context.get("service_type")
    if service_type:
        message += f" ({service_type})"

    logger.log(level, message, extra=log_context)
