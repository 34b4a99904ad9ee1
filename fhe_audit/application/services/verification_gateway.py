"""Verification gateway.

Wraps the FHE decryption oracle. The oracle returns cleartext plus a
decryption proof; the gateway then hands both to a caller-supplied
callback that puts the proof on the ledger, so each call site decides
which transaction (and which record) carries it.

Failure kinds stay distinct:
- VerificationError: the oracle could not decrypt or prove
- SubmissionError: the ledger (or the user) rejected the proof
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence

from fhe_audit.application.ports.decryption_oracle import DecryptionOracleProtocol
from fhe_audit.application.services.base import LoggingMixin
from fhe_audit.domain.errors.crypto import VerificationError
from fhe_audit.domain.errors.ledger import SubmissionError, is_user_rejection
from fhe_audit.domain.models.crypto import VerificationResult
from fhe_audit.domain.models.ledger import TransactionReceipt

SubmitProof = Callable[[Mapping[str, int], bytes], Awaitable[TransactionReceipt]]


class VerificationGateway(LoggingMixin):
    """Decrypts ciphertext handles and gets the proof accepted on-ledger."""

    def __init__(self, oracle: DecryptionOracleProtocol) -> None:
        self._oracle = oracle
        self._init_logger(component="fhe")

    async def verify(
        self,
        handles: Sequence[str],
        contract_address: str,
        submit_proof: SubmitProof,
    ) -> VerificationResult:
        """Decrypt handles and submit the proof.

        Args:
            handles: One or more ciphertext handles.
            contract_address: Contract the handles belong to.
            submit_proof: Async callback sending ``(clear_values, proof)``
                to the ledger and returning the confirmed receipt.

        Returns:
            VerificationResult keyed by handle. Handles the oracle could
            not resolve are absent.

        Raises:
            ValueError: If no handles are given.
            VerificationError: If the oracle fails.
            SubmissionError: If the proof transaction is rejected or
                reverts; ``user_rejected`` tells a wallet cancel apart.
        """
        if not handles:
            raise ValueError("At least one ciphertext handle is required")

        log = self._log_operation(
            "verify",
            handle_count=len(handles),
            contract_address=contract_address,
        )

        try:
            response = await self._oracle.request_decryption(list(handles), contract_address)
        except Exception as e:
            self._log_failure(log, "decryption_oracle_failed", e)
            raise VerificationError(handles=handles) from e

        log.debug("decryption_proof_received", resolved_count=len(response.clear_values))

        try:
            receipt = await submit_proof(response.clear_values, response.proof)
        except Exception as e:
            user_rejected = is_user_rejection(e)
            self._log_failure(log, "proof_submission_failed", e, user_rejected=user_rejected)
            raise SubmissionError(
                "Verification proof rejected", user_rejected=user_rejected
            ) from e

        if not receipt.succeeded:
            log.warning("proof_transaction_reverted", transaction_hash=receipt.transaction_hash)
            raise SubmissionError("Verification proof transaction reverted")

        unresolved = [h for h in handles if h not in response.clear_values]
        if unresolved:
            log.warning("handles_unresolved", unresolved_count=len(unresolved))

        log.info("verification_completed", transaction_hash=receipt.transaction_hash)
        return VerificationResult(clear_values=dict(response.clear_values), receipt=receipt)
