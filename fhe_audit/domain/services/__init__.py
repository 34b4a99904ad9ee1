"""Pure domain services: statistics, filtering, id generation, session reducer."""

from fhe_audit.domain.services.audit_ids import DEFAULT_ID_GENERATOR, AuditIdGenerator
from fhe_audit.domain.services.record_filter import filter_records
from fhe_audit.domain.services.risk_statistics import compute_stats, round_half_up
from fhe_audit.domain.services.session_reducer import Transition, reduce

__all__: list[str] = [
    "AuditIdGenerator",
    "DEFAULT_ID_GENERATOR",
    "Transition",
    "compute_stats",
    "filter_records",
    "reduce",
    "round_half_up",
]
