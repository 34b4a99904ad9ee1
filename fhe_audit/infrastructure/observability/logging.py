"""Structured logging configuration with structlog.

Two rendering modes:
- production: one JSON object per line
- development: coloured console output

Log Entry Format (production):
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "upload_confirmed",
        "correlation_id": "uuid",
        "service": "UploadWorkflowService",
        ...additional context
    }

Plaintext scores and cleartext values must never reach a log line.
``redact_sensitive_processor`` masks the known sensitive keys in case a
caller binds one by mistake.

Usage:
    from fhe_audit.infrastructure.observability import configure_structlog

    configure_structlog(environment="development")
"""

import logging
import os
from typing import Any, cast

import structlog
from structlog.typing import Processor

from fhe_audit.infrastructure.observability.correlation import correlation_id_processor

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

REDACTED = "[redacted]"
SENSITIVE_KEYS = frozenset(
    {"score", "plaintext", "plaintext_score", "value", "clear_values", "decrypted_value"}
)


def _get_log_level(level: str | None = None) -> int:
    """Resolve a level name, falling back to LOG_LEVEL, then INFO."""
    level_name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    return getattr(logging, level_name, logging.INFO)


def _renderer_for(environment: str) -> Processor:
    if environment == "production":
        return structlog.processors.JSONRenderer()
    if environment == "development":
        return structlog.dev.ConsoleRenderer(colors=True)
    raise ValueError(f"Unknown log environment: {environment!r}")


def redact_sensitive_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor masking plaintext-bearing keys."""
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def configure_structlog(environment: str = "production", level: str | None = None) -> None:
    """Configure structlog for the client.

    Should be called once at startup, before any workflow runs.

    Args:
        environment: 'production' for JSON output, 'development' for
            console output. Defaults to 'production'.
        level: Log level name; LOG_LEVEL or INFO when None.

    Raises:
        ValueError: If the environment is not recognised.
    """
    renderer = _renderer_for(environment)
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        cast(Processor, redact_sensitive_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "audit"
) -> structlog.BoundLogger:
    """Logger pre-bound with service and component names.

    Args:
        service_name: Name of the service (typically the class name).
        component: Component category.

    Returns:
        BoundLogger with service and component bound.
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
