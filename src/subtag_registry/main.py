"""
Application entry point — wires dependencies and runs one conversion.

Composition root: creates concrete adapters, injects them into the
pipeline, writes the rendered document to stdout.

This is the ONLY place where concrete classes are instantiated and the
ONLY place that decides the process exit status.

Responsibilities:
  1. Load and validate configuration from environment
  2. Configure structlog (stderr, so stdout carries only YAML)
  3. Create the registry source and YAML serializer
  4. Run the pipeline inside a logging execution context
  5. Print the document, or report the failure and exit non-zero
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog
from pydantic import ValidationError
from railway import LoggingExecutionContext, ResultFailures
from railway.result import Result

from subtag_registry import __version__
from subtag_registry.adapters.registry_source import CachedRegistrySource
from subtag_registry.adapters.yaml_serializer import YamlDocumentSerializer
from subtag_registry.config import AppSettings
from subtag_registry.pipeline import run_pipeline


def configure_structlog(log_level: str = "INFO", stream: TextIO | None = None) -> None:
    """
    Configure structlog for structured console logging on stderr.

    stdout is reserved for the rendered document.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, stream=stream or sys.stderr, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )


def _create_adapters(settings: AppSettings) -> tuple[CachedRegistrySource, YamlDocumentSerializer]:
    source = CachedRegistrySource(
        url=settings.registry.url,
        cache_path=settings.registry.cache_path,
        timeout=settings.http_timeout_seconds,
    )
    return source, YamlDocumentSerializer()


def convert(settings: AppSettings) -> Result[str]:
    """Run one conversion with adapters built from ``settings``."""
    source, serializer = _create_adapters(settings)
    ctx = LoggingExecutionContext(operation="RegistryConversion")
    return ctx.execute(lambda: run_pipeline(source, serializer))


def load_settings() -> Result[AppSettings]:
    """Load settings from the environment and .env, failing with CONFIGURATION_ERROR."""
    try:
        return Result.success(AppSettings())
    except ValidationError as e:
        return ResultFailures.configuration_error(f"Invalid settings: {e}", e)


def main() -> None:
    """Load settings, convert the registry and print it as YAML."""
    loaded = load_settings()
    if loaded.is_failure():
        print(f"FATAL: {loaded.error()}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    settings = loaded.value()
    configure_structlog(settings.log_level)
    log = structlog.get_logger()

    log.info(
        "app.starting",
        version=__version__,
        log_level=settings.log_level,
        url=settings.registry.url,
        cache_path=str(settings.registry.cache_path),
    )

    result = convert(settings)
    if result.is_failure():
        error = result.error()
        log.error("app.failed", code=error.code.value, error=error.message)
        sys.exit(1)

    sys.stdout.write(result.value())
    sys.stdout.flush()
    log.info("app.finished")


if __name__ == "__main__":
    main()
