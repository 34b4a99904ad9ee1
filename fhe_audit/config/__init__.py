"""Configuration module for the FHE audit client.

Available Configurations:
- AuditClientConfig: Banner timings, history view size, form defaults
"""

from fhe_audit.config.audit_config import (
    DEFAULT_AUDIT_CLIENT_CONFIG,
    TEST_AUDIT_CLIENT_CONFIG,
    AuditClientConfig,
)

__all__ = [
    "AuditClientConfig",
    "DEFAULT_AUDIT_CLIENT_CONFIG",
    "TEST_AUDIT_CLIENT_CONFIG",
]
