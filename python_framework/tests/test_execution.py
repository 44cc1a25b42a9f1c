"""Tests for ExecutionContext implementations."""

import logging

from railway import (
    ErrorCode,
    ExecutionContext,
    LoggingExecutionContext,
    NoOpExecutionContext,
    Result,
)


class TestNoOpExecutionContext:
    def test_passthrough(self):
        ctx = NoOpExecutionContext()
        result = ctx.execute(lambda: Result.success(42))
        assert result.value() == 42

    def test_passthrough_failure(self):
        ctx = NoOpExecutionContext()
        result = ctx.execute(lambda: Result.failure(ErrorCode.FETCH_ERROR, "gone"))
        assert result.is_failure()

    def test_satisfies_protocol(self):
        assert isinstance(NoOpExecutionContext(), ExecutionContext)


class TestLoggingExecutionContext:
    def test_logs_success(self, caplog):
        ctx = LoggingExecutionContext(operation="TestOp")
        with caplog.at_level(logging.INFO, logger="railway.execution"):
            result = ctx.execute(lambda: Result.success("ok"))
        assert result.value() == "ok"
        assert "TestOp" in caplog.text
        assert "SUCCESS" in caplog.text

    def test_logs_failure_with_code(self, caplog):
        ctx = LoggingExecutionContext(operation="TestOp")
        with caplog.at_level(logging.INFO, logger="railway.execution"):
            result = ctx.execute(lambda: Result.failure(ErrorCode.UNKNOWN_FIELD, "bad field"))
        assert result.is_failure()
        assert "FAILURE (UNKNOWN_FIELD)" in caplog.text

    def test_catches_exception(self, caplog):
        ctx = LoggingExecutionContext(operation="Boom")

        def failing():
            raise RuntimeError("exploded")

        with caplog.at_level(logging.ERROR, logger="railway.execution"):
            result = ctx.execute(failing)
        assert result.is_failure()
        assert result.error().code == ErrorCode.TECHNICAL_ERROR
        assert "exploded" in result.error().message
        assert "Boom" in caplog.text

    def test_wraps_inner_context(self):
        inner = NoOpExecutionContext()
        ctx = LoggingExecutionContext(inner=inner, operation="Wrapped")
        result = ctx.execute(lambda: Result.success(99))
        assert result.value() == 99
