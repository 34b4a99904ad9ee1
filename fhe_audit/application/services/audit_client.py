"""Audit client facade.

The one object a presentation layer talks to. It exposes the current
session state plus derived views (visible records, statistics, recent
history) and forwards user actions to the session store and workflows.

Usage:
    client = build_audit_client(reader, writer, fhe, fhe, identity)
    await client.connect()
    client.open_upload_form()
    client.edit_upload_form(name="demo", vulnerability_score=8)
    outcome = await client.upload()
    stats = client.statistics()
"""

from __future__ import annotations

from fhe_audit.application.ports.identity_provider import IdentityProviderProtocol
from fhe_audit.application.ports.ledger_reader import LedgerReaderProtocol
from fhe_audit.application.services.base import LoggingMixin
from fhe_audit.application.services.decrypt_workflow_service import (
    DecryptWorkflowService,
)
from fhe_audit.application.services.effect_runner import EffectRunner
from fhe_audit.application.services.encryption_gateway import EncryptionGateway
from fhe_audit.application.services.session_store import SessionStore
from fhe_audit.application.services.upload_workflow_service import (
    UploadOutcome,
    UploadWorkflowService,
)
from fhe_audit.config.audit_config import DEFAULT_AUDIT_CLIENT_CONFIG, AuditClientConfig
from fhe_audit.domain.events.effects import RefreshRecords
from fhe_audit.domain.events.session import (
    AvailabilityConfirmed,
    RecordSelected,
    RiskFilterChanged,
    SearchTermChanged,
    SessionEvent,
    UploadFormClosed,
    UploadFormEdited,
    UploadFormOpened,
)
from fhe_audit.domain.models.audit_record import AuditRecord
from fhe_audit.domain.models.history import HistoryEntry
from fhe_audit.domain.models.risk import RiskFilter
from fhe_audit.domain.models.risk_statistics import RiskStatistics
from fhe_audit.domain.models.session_state import SessionState
from fhe_audit.domain.models.upload import TransactionStatus, UploadForm
from fhe_audit.domain.services.record_filter import filter_records
from fhe_audit.domain.services.risk_statistics import compute_stats


class AuditClient(LoggingMixin):
    """Session-level entry point for the audit client core."""

    def __init__(
        self,
        store: SessionStore,
        runner: EffectRunner,
        reader: LedgerReaderProtocol,
        encryption: EncryptionGateway,
        upload_workflow: UploadWorkflowService,
        decrypt_workflow: DecryptWorkflowService,
        identity: IdentityProviderProtocol,
        config: AuditClientConfig = DEFAULT_AUDIT_CLIENT_CONFIG,
    ) -> None:
        self._store = store
        self._runner = runner
        self._reader = reader
        self._encryption = encryption
        self._upload_workflow = upload_workflow
        self._decrypt_workflow = decrypt_workflow
        self._identity = identity
        self._config = config
        self._init_logger(component="client")

    # Views

    @property
    def state(self) -> SessionState:
        return self._store.state

    @property
    def store(self) -> SessionStore:
        return self._store

    @property
    def status(self) -> TransactionStatus:
        return self._store.state.status

    @property
    def fhe_ready(self) -> bool:
        """Whether FHE encryption has been initialised."""
        return self._encryption.is_ready

    @property
    def is_connected(self) -> bool:
        return self._identity.is_connected

    def records(self) -> tuple[AuditRecord, ...]:
        return self._store.state.records

    def visible_records(self) -> tuple[AuditRecord, ...]:
        """Records passing the current search term and risk filter."""
        state = self._store.state
        return filter_records(state.records, state.search_term, state.risk_filter)

    def statistics(self) -> RiskStatistics:
        """Risk statistics over the full record set."""
        return compute_stats(self._store.state.records)

    def recent_history(self) -> tuple[HistoryEntry, ...]:
        """Most recent history entries, oldest first."""
        return self._store.state.history.recent(self._config.history_display_limit)

    def selected_record(self) -> AuditRecord | None:
        return self._store.state.selected_record

    # Session lifecycle

    async def connect(self) -> bool:
        """Initialise FHE and load records for a connected wallet.

        Returns:
            True if FHE is ready. False when not connected or when
            initialisation failed.
        """
        log = self._log_operation("connect", connected=self._identity.is_connected)
        if not self._identity.is_connected:
            log.info("connect_skipped_not_connected")
            return False

        ready = await self._encryption.initialize()
        await self.refresh()
        log.info("session_connected", fhe_ready=ready, record_count=len(self.records()))
        return ready

    async def refresh(self) -> None:
        """Re-read every record from the ledger."""
        await self._runner.run((RefreshRecords(),))

    async def check_availability(self) -> bool:
        """Ask the contract whether the FHE system is available.

        Shows a short success banner when it is. Failures are only
        logged.

        Returns:
            True if the contract reported itself available.
        """
        log = self._log_operation("check_availability")
        try:
            available = await self._reader.is_available()
        except Exception as e:
            self._log_failure(log, "availability_check_failed", e)
            return False

        if not available:
            log.info("system_unavailable")
            return False

        await self._runner.run(self._store.dispatch(AvailabilityConfirmed()))
        return True

    async def wait_for_status_timers(self) -> None:
        """Wait for every pending banner clear to fire."""
        await self._runner.drain()

    # User actions

    def search(self, term: str) -> None:
        self._apply(SearchTermChanged(term=term))

    def set_risk_filter(self, risk_filter: RiskFilter | str) -> None:
        """Select a risk filter by enum or value ("all", "high", ...).

        Raises:
            ValueError: If the value is not a known filter.
        """
        if not isinstance(risk_filter, RiskFilter):
            risk_filter = RiskFilter(risk_filter)
        self._apply(RiskFilterChanged(risk_filter=risk_filter))

    def open_upload_form(self) -> None:
        self._apply(UploadFormOpened())

    def close_upload_form(self) -> None:
        self._apply(UploadFormClosed())

    def edit_upload_form(self, **changes: object) -> UploadForm:
        """Edit upload form fields; scores are clamped to 1-10.

        Returns:
            The updated form.
        """
        form = self._store.state.upload_form.with_changes(**changes)
        self._apply(UploadFormEdited(form=form))
        return form

    def select_record(self, record_id: str | None) -> None:
        self._apply(RecordSelected(record_id=record_id))

    async def upload(self) -> UploadOutcome:
        return await self._upload_workflow.upload()

    async def decrypt(self, record_id: str) -> int | None:
        return await self._decrypt_workflow.decrypt(record_id)

    def _apply(self, event: SessionEvent) -> None:
        # UI-only events never request effects
        self._store.dispatch(event)
