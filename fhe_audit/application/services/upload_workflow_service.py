"""Upload workflow service.

Orchestrates one upload: validate the form, encrypt the declared score,
send the creation transaction, wait for confirmation, refresh the
record store and log it in the session history.

The steps themselves are transitions of the session reducer; this
service starts a run and drives the effect runner until the upload
settles in IDLE, SUCCEEDED or FAILED.

Rules:
1. ONE IN FLIGHT - a request while ``uploading`` is set is ignored
2. NO THROW - every failure ends as a status message
3. CONFIRM BEFORE HISTORY - history is written only after finality
"""

from __future__ import annotations

from dataclasses import dataclass

from fhe_audit.application.ports.identity_provider import IdentityProviderProtocol
from fhe_audit.application.services.base import LoggingMixin
from fhe_audit.application.services.effect_runner import EffectRunner
from fhe_audit.application.services.session_store import SessionStore
from fhe_audit.domain.events.session import UploadRequested
from fhe_audit.domain.models.upload import UploadPhase
from fhe_audit.domain.services.audit_ids import DEFAULT_ID_GENERATOR, AuditIdGenerator
from fhe_audit.infrastructure.observability.correlation import start_workflow_run


@dataclass(frozen=True)
class UploadOutcome:
    """Where an upload run ended.

    Attributes:
        record_id: Id assigned to the upload, None if it was ignored.
        phase: Upload phase when the run settled.
        message: Status message shown to the user.
    """

    record_id: str | None
    phase: UploadPhase
    message: str

    @property
    def succeeded(self) -> bool:
        return self.phase is UploadPhase.SUCCEEDED


class UploadWorkflowService(LoggingMixin):
    """Runs the encrypt-submit-confirm upload workflow."""

    def __init__(
        self,
        store: SessionStore,
        runner: EffectRunner,
        identity: IdentityProviderProtocol,
        id_generator: AuditIdGenerator = DEFAULT_ID_GENERATOR,
    ) -> None:
        """Initialize the upload workflow.

        Args:
            store: Session state container.
            runner: Effect runner bound to the same store.
            identity: Wallet connection state.
            id_generator: Source of new record ids.
        """
        self._store = store
        self._runner = runner
        self._identity = identity
        self._ids = id_generator
        self._init_logger(component="upload")

    async def upload(self) -> UploadOutcome:
        """Upload the current form contents.

        Returns:
            UploadOutcome describing where the run settled. A request
            made while another upload is in flight is ignored and
            reported with ``record_id=None``, as is one made without a
            connected wallet.
        """
        state = self._store.state
        if state.uploading:
            self._log_operation(
                "upload", pending_record_id=state.pending_record_id
            ).warning("upload_ignored_in_flight")
            return UploadOutcome(
                record_id=None, phase=state.upload_phase, message=state.status.message
            )

        connected = self._identity.is_connected and bool(self._identity.address)
        record_id = self._ids.next_id() if connected else None
        start_workflow_run("upload")
        log = self._log_operation("upload", record_id=record_id)
        log.info("upload_requested", connected=connected)

        effects = self._store.dispatch(
            UploadRequested(
                record_id=record_id,
                connected=connected,
                submitter_address=self._identity.address,
            )
        )
        await self._runner.run(effects)

        settled = self._store.state
        log.info(
            "upload_settled",
            phase=settled.upload_phase.value,
            status_message=settled.status.message,
        )
        return UploadOutcome(
            record_id=record_id,
            phase=settled.upload_phase,
            message=settled.status.message,
        )
