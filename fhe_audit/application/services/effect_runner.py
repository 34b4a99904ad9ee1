"""Effect runner.

Executes the effects returned by the session reducer against the real
collaborators and feeds each outcome back into the SessionStore as an
event, until no effects remain.

Every collaborator call is awaited before the next effect runs.
Collaborator exceptions never escape: upload steps turn them into
UploadFailed, refresh failures are logged and the old record set kept.
Banner clear timers run as background tasks; ``drain`` waits for them.
"""

from __future__ import annotations

import asyncio
from collections import deque
from collections.abc import Iterable

from fhe_audit.application.ports.ledger_writer import (
    LedgerTransactionProtocol,
    LedgerWriterProtocol,
)
from fhe_audit.application.services.base import LoggingMixin
from fhe_audit.application.services.encryption_gateway import EncryptionGateway
from fhe_audit.application.services.record_store_service import RecordStoreService
from fhe_audit.application.services.session_store import SessionStore
from fhe_audit.domain.errors.audit import ReadError
from fhe_audit.domain.errors.ledger import is_user_rejection
from fhe_audit.domain.events.effects import (
    AwaitConfirmation,
    ClearStatusAfter,
    Effect,
    EncryptScore,
    RefreshRecords,
    SubmitRecord,
)
from fhe_audit.domain.events.session import (
    RecordsLoaded,
    RecordSubmitted,
    ScoreEncrypted,
    SessionEvent,
    StatusCleared,
    UploadConfirmed,
    UploadFailed,
)


class EffectRunner(LoggingMixin):
    """Runs reducer effects and reports their outcomes as events.

    Attributes:
        _transactions: Broadcast creation transactions awaiting
            confirmation, keyed by record id.
        _timers: Pending banner clear tasks.
    """

    def __init__(
        self,
        store: SessionStore,
        record_store: RecordStoreService,
        encryption: EncryptionGateway,
        writer: LedgerWriterProtocol,
    ) -> None:
        self._store = store
        self._record_store = record_store
        self._encryption = encryption
        self._writer = writer
        self._transactions: dict[str, LedgerTransactionProtocol] = {}
        self._timers: set[asyncio.Task[None]] = set()
        self._init_logger(component="session")

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    async def run(self, effects: Iterable[Effect]) -> None:
        """Execute effects, and any effects their outcomes lead to.

        Args:
            effects: Effects returned by ``SessionStore.dispatch``.
        """
        queue: deque[Effect] = deque(effects)
        while queue:
            effect = queue.popleft()
            event = await self._execute(effect)
            if event is not None:
                queue.extend(self._store.dispatch(event))

    async def drain(self) -> None:
        """Wait until every scheduled banner clear has fired."""
        while self._timers:
            pending = list(self._timers)
            await asyncio.gather(*pending)
            self._timers.difference_update(pending)

    async def _execute(self, effect: Effect) -> SessionEvent | None:
        if isinstance(effect, EncryptScore):
            return await self._encrypt(effect)
        if isinstance(effect, SubmitRecord):
            return await self._submit(effect)
        if isinstance(effect, AwaitConfirmation):
            return await self._confirm(effect)
        if isinstance(effect, RefreshRecords):
            return await self._refresh()
        if isinstance(effect, ClearStatusAfter):
            self._schedule_clear(effect)
            return None
        raise TypeError(f"Unknown effect: {type(effect).__name__}")

    def _failed(self, record_id: str, step: str, error: Exception) -> UploadFailed:
        user_rejected = is_user_rejection(error)
        self._log_failure(
            self._log_operation("upload", record_id=record_id),
            "upload_step_failed",
            error,
            include_message=False,
            step=step,
            user_rejected=user_rejected,
        )
        return UploadFailed(
            record_id=record_id,
            user_rejected=user_rejected,
            reason=type(error).__name__,
        )

    async def _encrypt(self, effect: EncryptScore) -> SessionEvent:
        try:
            contract_address = await self._writer.get_contract_address()
            encrypted = await self._encryption.encrypt_score(
                contract_address, effect.submitter_address, effect.score
            )
        except Exception as e:
            return self._failed(effect.record_id, "encrypt", e)
        return ScoreEncrypted(record_id=effect.record_id, encrypted=encrypted)

    async def _submit(self, effect: SubmitRecord) -> SessionEvent:
        form = effect.form
        try:
            transaction = await self._writer.create_record(
                effect.record_id,
                form.name,
                effect.encrypted.ciphertext,
                effect.encrypted.proof,
                form.vulnerability_score,
                form.complexity,
                form.description,
            )
        except Exception as e:
            return self._failed(effect.record_id, "submit", e)

        self._transactions[effect.record_id] = transaction
        self._log_operation("upload", record_id=effect.record_id).info(
            "record_submitted", transaction_hash=transaction.transaction_hash
        )
        return RecordSubmitted(
            record_id=effect.record_id, transaction_hash=transaction.transaction_hash
        )

    async def _confirm(self, effect: AwaitConfirmation) -> SessionEvent:
        transaction = self._transactions.pop(effect.record_id, None)
        if transaction is None:
            return self._failed(
                effect.record_id, "confirm", LookupError("No pending transaction")
            )
        try:
            receipt = await transaction.await_confirmation()
        except Exception as e:
            return self._failed(effect.record_id, "confirm", e)

        if not receipt.succeeded:
            return self._failed(
                effect.record_id, "confirm", RuntimeError("Creation transaction reverted")
            )

        self._log_operation("upload", record_id=effect.record_id).info(
            "upload_confirmed",
            transaction_hash=receipt.transaction_hash,
            block_number=receipt.block_number,
        )
        return UploadConfirmed(record_id=effect.record_id, receipt=receipt)

    async def _refresh(self) -> SessionEvent | None:
        try:
            records = await self._record_store.load_all()
        except ReadError as e:
            self._log_operation("refresh").warning("refresh_failed", error=str(e))
            return None
        return RecordsLoaded(records=records)

    def _schedule_clear(self, effect: ClearStatusAfter) -> None:
        task = asyncio.create_task(self._clear_later(effect))
        self._timers.add(task)
        task.add_done_callback(self._timers.discard)

    async def _clear_later(self, effect: ClearStatusAfter) -> None:
        await asyncio.sleep(effect.delay_seconds)
        await self.run(
            self._store.dispatch(
                StatusCleared(token=effect.token, reset_form=effect.reset_form)
            )
        )
