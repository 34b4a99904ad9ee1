"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from fhe_audit.config.audit_config import AuditClientConfig
from fhe_audit.infrastructure.observability import configure_structlog


def configure_logging(config: AuditClientConfig) -> None:
    """Configure structlog for the environment named in the config."""
    configure_structlog(environment=config.log_environment)


__all__ = ["configure_logging"]
