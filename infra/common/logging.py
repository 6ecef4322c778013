"""Structured JSON logging for the CDK app."""

import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager

import structlog


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Send structlog JSON records to stdout.

    ``service_name`` is bound once so every record carries it; the stack
    being built is added later with :func:`bind_stack_context`.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)


def bind_stack_context(stack: str, region: str, stage: str) -> None:
    """Tag subsequent records with the stack being synthesized."""
    structlog.contextvars.bind_contextvars(stack=stack, region=region, stage=stage)


@contextmanager
def log_duration(logger, event: str, **fields) -> Iterator[None]:
    """Log ``event`` with ``duration_ms`` once the block finishes successfully."""
    start = time.perf_counter()
    yield
    logger.info(event, duration_ms=round((time.perf_counter() - start) * 1000, 2), **fields)
