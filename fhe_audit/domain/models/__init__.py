"""Domain models for the FHE audit client."""

from fhe_audit.domain.models.audit_record import MAX_SCORE, MIN_SCORE, AuditRecord
from fhe_audit.domain.models.crypto import (
    DecryptionResponse,
    EncryptedScore,
    VerificationResult,
)
from fhe_audit.domain.models.history import HistoryEntry, HistoryLog
from fhe_audit.domain.models.ledger import TransactionReceipt
from fhe_audit.domain.models.risk import RiskBand, RiskFilter, risk_band_for
from fhe_audit.domain.models.risk_statistics import EMPTY_STATISTICS, RiskStatistics
from fhe_audit.domain.models.session_state import SessionSettings, SessionState
from fhe_audit.domain.models.upload import (
    HIDDEN_STATUS,
    StatusKind,
    TransactionStatus,
    UploadForm,
    UploadPhase,
)

__all__: list[str] = [
    "AuditRecord",
    "DecryptionResponse",
    "EMPTY_STATISTICS",
    "EncryptedScore",
    "HIDDEN_STATUS",
    "HistoryEntry",
    "HistoryLog",
    "MAX_SCORE",
    "MIN_SCORE",
    "RiskBand",
    "RiskFilter",
    "RiskStatistics",
    "SessionSettings",
    "SessionState",
    "StatusKind",
    "TransactionReceipt",
    "TransactionStatus",
    "UploadForm",
    "UploadPhase",
    "risk_band_for",
]
