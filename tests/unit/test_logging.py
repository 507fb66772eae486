"""
Unit tests for the observability logging helpers.

Tests composition context, the contextual adapter and log_operation.
"""

import logging

from di_collection.observability.logging import (ContextualLoggerAdapter,
                                                 clear_composition_context,
                                                 get_logger,
                                                 get_logging_context,
                                                 log_operation,
                                                 set_composition_context)

LOGGER_NAME = "di_collection.tests.logging"


class TestCompositionContext:
    """Tests for the contextvars-backed composition context."""

    def test_context_has_timestamp(self):
        """Test that a timestamp is always present."""
        context = get_logging_context()
        assert "timestamp" in context
        assert "collection_name" not in context

    def test_set_and_clear_context(self):
        """Test setting and clearing the composition context."""
        set_composition_context(collection_name="api", module="billing")

        context = get_logging_context()
        assert context["collection_name"] == "api"
        assert context["module"] == "billing"

        clear_composition_context()
        assert "module" not in get_logging_context()


class TestContextualLogger:
    """Tests for ContextualLoggerAdapter."""

    def test_get_logger_returns_adapter(self):
        """Test get_logger wraps the named logger."""
        adapter = get_logger(LOGGER_NAME)

        assert isinstance(adapter, ContextualLoggerAdapter)
        assert adapter.logger.name == LOGGER_NAME

    def test_adapter_adds_context(self, caplog):
        """Test that records carry the composition context and extra fields."""
        set_composition_context(collection_name="api")
        adapter = get_logger(LOGGER_NAME)

        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            adapter.info("hello", extra={"step": "bootstrap"})

        record = caplog.records[-1]
        assert record.collection_name == "api"
        assert record.step == "bootstrap"


class TestLogOperation:
    """Tests for log_operation."""

    def test_logs_success(self, caplog):
        """Test a successful operation message and fields."""
        logger = logging.getLogger(LOGGER_NAME)

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            log_operation(logger, "add", service_type="IFoo", lifetime="scoped")

        record = caplog.records[-1]
        assert record.getMessage() == "Operation: add (IFoo)"
        assert record.operation == "add"
        assert record.success is True
        assert record.lifetime == "scoped"

    def test_logs_skipped(self, caplog):
        """Test an operation that did not change the collection."""
        logger = logging.getLogger(LOGGER_NAME)

        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            log_operation(logger, "try_add", success=False)

        record = caplog.records[-1]
        assert record.getMessage() == "Operation skipped: try_add"
        assert record.success is False

    def test_disabled_level_emits_nothing(self, caplog):
        """Test that nothing is logged below the logger's level."""
        logger = logging.getLogger(LOGGER_NAME)

        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            log_operation(logger, "add", service_type="IFoo")

        assert not [r for r in caplog.records if r.name == LOGGER_NAME]
