"""
Domain layer - Pure business logic for the FHE audit client.

This layer contains:
- Domain models (audit records, statistics, history, session state)
- Session events and effects
- Pure services (stats, filtering, the session reducer)
- Domain exceptions

This layer must NOT import from application or infrastructure.
Only stdlib and typing imports are allowed.
"""

from fhe_audit.domain.exceptions import AuditClientError

__all__: list[str] = ["AuditClientError"]
