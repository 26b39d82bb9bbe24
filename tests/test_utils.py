"""Tests for logging and error handling utilities."""
import json
import logging
import pytest
from utils import (
    BuildError,
    CapacityExceededError,
    ConstructionError,
    CreationalPatternsError,
    ErrorContext,
    LogContext,
    handle_errors
)
from utils.logging_config import StructuredFormatter


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(BuildError, ConstructionError)
        assert issubclass(CapacityExceededError, CreationalPatternsError)

    def test_to_dict(self):
        error = CapacityExceededError("full", details={'capacity': 10})
        assert error.to_dict() == {
            'error_type': 'CapacityExceededError',
            'error_code': 'CapacityExceededError',
            'message': 'full',
            'details': {'capacity': 10},
        }


class TestErrorHandlers:
    """Tests for error handling helpers."""

    def test_handle_errors_returns_default(self):
        @handle_errors(default_return=1)
        def fails():
            raise BuildError("no pizza")

        assert fails() == 1

    def test_handle_errors_reraises(self):
        @handle_errors(raise_on_error=True)
        def fails():
            raise ValueError("boom")

        with pytest.raises(ValueError):
            fails()

    def test_error_context_reraises_and_cleans_up(self):
        cleaned = []
        with pytest.raises(BuildError):
            with ErrorContext("demo", cleanup_func=lambda: cleaned.append(True)):
                raise BuildError("no pizza")
        assert cleaned == [True]

    def test_error_context_suppresses(self):
        with ErrorContext("demo", raise_on_error=False):
            raise BuildError("no pizza")

    def test_error_context_without_error_log(self, caplog):
        with caplog.at_level(logging.INFO):
            with pytest.raises(BuildError):
                with ErrorContext("demo", log_errors=False):
                    raise BuildError("no pizza")

        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert any("Aborted operation: demo" in r.getMessage() for r in caplog.records)


class TestLogging:
    """Tests for logging helpers."""

    def test_log_context_adds_fields(self):
        logger = logging.getLogger("test_log_context")
        with LogContext(logger, demo='builder'):
            record = logger.makeRecord("test_log_context", logging.INFO, __file__, 1, "hello", (), None)

        data = json.loads(StructuredFormatter().format(record))
        assert data['demo'] == 'builder'
        assert data['message'] == 'hello'

    def test_log_context_restores_factory(self):
        factory = logging.getLogRecordFactory()
        with LogContext(logging.getLogger("x"), demo='builder'):
            pass
        assert logging.getLogRecordFactory() is factory
