"""Composition root for wiring dependencies.

This package centralizes wiring so presentation code can obtain a
ready AuditClient without knowing how its services fit together.
"""

from fhe_audit.bootstrap.audit_client import (
    InMemoryAuditEnvironment,
    build_audit_client,
    build_in_memory_audit_client,
)
from fhe_audit.bootstrap.logging import configure_logging

__all__ = [
    "InMemoryAuditEnvironment",
    "build_audit_client",
    "build_in_memory_audit_client",
    "configure_logging",
]
