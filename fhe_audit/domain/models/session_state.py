"""Client session state container.

Everything the presentation layer renders lives here as one immutable
value. The session reducer derives the next state from the current
one and an event; nothing else writes to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fhe_audit.domain.models.audit_record import AuditRecord
from fhe_audit.domain.models.history import HistoryLog
from fhe_audit.domain.models.risk import RiskFilter
from fhe_audit.domain.models.upload import (
    HIDDEN_STATUS,
    TransactionStatus,
    UploadForm,
    UploadPhase,
)

DEFAULT_SUCCESS_CLEAR_SECONDS = 2.0
DEFAULT_ERROR_CLEAR_SECONDS = 3.0


@dataclass(frozen=True)
class SessionSettings:
    """Reducer tunables.

    Attributes:
        success_clear_seconds: Delay before a success banner clears.
        error_clear_seconds: Delay before an error banner clears.
        default_form: Form contents after a successful upload.
    """

    success_clear_seconds: float = DEFAULT_SUCCESS_CLEAR_SECONDS
    error_clear_seconds: float = DEFAULT_ERROR_CLEAR_SECONDS
    default_form: UploadForm = field(default_factory=UploadForm)


@dataclass(frozen=True)
class SessionState:
    """Immutable snapshot of the client session.

    Attributes:
        records: Record set from the last authoritative read.
        search_term: Current search text.
        risk_filter: Current risk filter.
        upload_form: Current upload form contents.
        form_open: Whether the upload form is shown.
        upload_phase: Upload workflow phase.
        uploading: In-flight guard, at most one upload per session.
        pending_record_id: Id of the upload in flight.
        pending_form: Form snapshot taken when the upload was requested.
        status: Status banner.
        status_token: Bumped on every banner change so stale clear
            timers are ignored.
        history: Session history log.
        selected_record_id: Record shown in the detail view.
    """

    records: tuple[AuditRecord, ...] = ()
    search_term: str = ""
    risk_filter: RiskFilter = RiskFilter.ALL
    upload_form: UploadForm = field(default_factory=UploadForm)
    form_open: bool = False
    upload_phase: UploadPhase = UploadPhase.IDLE
    uploading: bool = False
    pending_record_id: str | None = None
    pending_form: UploadForm | None = None
    status: TransactionStatus = HIDDEN_STATUS
    status_token: int = 0
    history: HistoryLog = field(default_factory=HistoryLog)
    selected_record_id: str | None = None

    @property
    def selected_record(self) -> AuditRecord | None:
        """Selected record resolved against the current record set."""
        if self.selected_record_id is None:
            return None
        return self.find_record(self.selected_record_id)

    def find_record(self, record_id: str) -> AuditRecord | None:
        for record in self.records:
            if record.id == record_id:
                return record
        return None
