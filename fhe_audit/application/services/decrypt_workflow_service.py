"""Decrypt workflow service.

Resolves the protected score of one record:

1. Not connected -> None, nothing else happens
2. Re-read the record from the ledger; if already verified return its
   stored value without any cryptographic work
3. Otherwise fetch its ciphertext handle and run the verification
   gateway with a proof callback bound to this record id
4. On success log it in the session history and return the value

Any failure in steps 2-4 is logged and gives None. Several decrypts can
run at once; they touch different handles and share no state besides
the append-only history.
"""

from __future__ import annotations

from collections.abc import Mapping

from fhe_audit.application.ports.identity_provider import IdentityProviderProtocol
from fhe_audit.application.ports.ledger_reader import LedgerReaderProtocol
from fhe_audit.application.ports.ledger_writer import LedgerWriterProtocol
from fhe_audit.application.services.base import LoggingMixin
from fhe_audit.application.services.effect_runner import EffectRunner
from fhe_audit.application.services.record_store_service import RecordStoreService
from fhe_audit.application.services.session_store import SessionStore
from fhe_audit.application.services.verification_gateway import (
    SubmitProof,
    VerificationGateway,
)
from fhe_audit.domain.events.session import RecordDecrypted
from fhe_audit.domain.models.ledger import TransactionReceipt
from fhe_audit.infrastructure.observability.correlation import start_workflow_run


class DecryptWorkflowService(LoggingMixin):
    """Runs verified decryption for a single record."""

    def __init__(
        self,
        store: SessionStore,
        runner: EffectRunner,
        record_store: RecordStoreService,
        reader: LedgerReaderProtocol,
        writer: LedgerWriterProtocol,
        verification: VerificationGateway,
        identity: IdentityProviderProtocol,
    ) -> None:
        self._store = store
        self._runner = runner
        self._record_store = record_store
        self._reader = reader
        self._writer = writer
        self._verification = verification
        self._identity = identity
        self._init_logger(component="decrypt")

    async def decrypt(self, record_id: str) -> int | None:
        """Return the verified cleartext score of a record.

        Args:
            record_id: The record to decrypt.

        Returns:
            The cleartext score, or None if it could not be obtained.
        """
        start_workflow_run("decrypt")
        log = self._log_operation("decrypt", record_id=record_id)

        if not self._identity.is_connected or not self._identity.address:
            log.info("decrypt_skipped_not_connected")
            return None

        try:
            record = await self._record_store.load_record(record_id)
            if record.is_verified:
                log.info("decrypt_already_verified")
                return record.decrypted_value

            handle = await self._reader.get_ciphertext_handle(record_id)
            contract_address = await self._reader.get_contract_address()
            result = await self._verification.verify(
                [handle], contract_address, self._proof_submitter(record_id)
            )
        except Exception as e:
            self._log_failure(log, "decrypt_failed", e, level="error")
            return None

        value = result.value_for(handle)
        if value is None:
            log.warning("decrypt_handle_unresolved", transaction_hash=result.receipt.transaction_hash)
            return None

        await self._runner.run(self._store.dispatch(RecordDecrypted(record_id=record_id)))
        log.info("decrypt_completed", transaction_hash=result.receipt.transaction_hash)
        return value

    def _proof_submitter(self, record_id: str) -> SubmitProof:
        """Proof callback that targets one record."""

        async def submit(clear_values: Mapping[str, int], proof: bytes) -> TransactionReceipt:
            transaction = await self._writer.submit_verification_proof(
                record_id, clear_values, proof
            )
            return await transaction.await_confirmation()

        return submit
