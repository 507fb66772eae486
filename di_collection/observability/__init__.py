"""
Observability components.

Provides structured logging for collection composition.
"""

from .logging import (
    ContextualLoggerAdapter,
    clear_composition_context,
    get_logger,
    get_logging_context,
    log_operation,
    set_composition_context,
)

__all__ = [
    "set_composition_context",
    "clear_composition_context",
    "get_logging_context",
    "ContextualLoggerAdapter",
    "get_logger",
    "log_operation",
]
