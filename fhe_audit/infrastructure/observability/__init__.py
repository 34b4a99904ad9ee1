"""Observability: structured logging and correlation ids.

Usage:
    from fhe_audit.infrastructure.observability import (
        configure_structlog,
        set_correlation_id,
    )

    configure_structlog(environment="production")
"""

from fhe_audit.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from fhe_audit.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
    redact_sensitive_processor,
)

__all__: list[str] = [
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
    "redact_sensitive_processor",
    "set_correlation_id",
]
