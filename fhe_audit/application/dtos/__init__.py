"""Application DTOs for data crossing the collaborator boundary."""

from fhe_audit.application.dtos.ledger_record import LedgerRecordFields

__all__: list[str] = ["LedgerRecordFields"]
