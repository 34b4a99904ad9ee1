"""Encryption gateway.

Wraps the FHE encryption oracle. The oracle binds the ciphertext to the
contract and submitter addresses; the gateway passes them through,
initialises the oracle once per session and reports every failure as
EncryptionError.

The plaintext score is never logged, put in an error message or kept
after ``encrypt_score`` returns.
"""

from __future__ import annotations

from fhe_audit.application.ports.encryption_oracle import EncryptionOracleProtocol
from fhe_audit.application.services.base import LoggingMixin
from fhe_audit.domain.errors.crypto import EncryptionError
from fhe_audit.domain.models.crypto import EncryptedScore


class EncryptionGateway(LoggingMixin):
    """Turns a plaintext score into a bound (ciphertext, proof) pair."""

    def __init__(self, oracle: EncryptionOracleProtocol) -> None:
        """Initialize the gateway.

        Args:
            oracle: FHE encryption oracle.
        """
        self._oracle = oracle
        self._init_logger(component="fhe")

    @property
    def is_ready(self) -> bool:
        """Whether the oracle has been initialised."""
        return self._oracle.is_initialized

    async def initialize(self) -> bool:
        """Initialise the oracle if needed.

        Failures are logged, not raised; the next call tries again.

        Returns:
            True if the oracle is ready.
        """
        if self._oracle.is_initialized:
            return True

        log = self._log_operation("initialize")
        try:
            await self._oracle.initialize()
        except Exception as e:
            self._log_failure(log, "fhe_init_failed", e, level="error")
            return False

        log.info("fhe_initialized")
        return True

    async def encrypt_score(
        self,
        contract_address: str,
        submitter_address: str,
        plaintext_score: int,
    ) -> EncryptedScore:
        """Encrypt a score for one contract and one submitter.

        Args:
            contract_address: Contract the ciphertext will be sent to.
            submitter_address: Identity that will submit it.
            plaintext_score: Score to protect.

        Returns:
            Ciphertext and input proof.

        Raises:
            EncryptionError: If the oracle is unavailable or fails. The
                oracle's exception is chained as the cause.
        """
        log = self._log_operation(
            "encrypt_score",
            contract_address=contract_address,
            submitter_address=submitter_address,
        )

        if not await self.initialize():
            raise EncryptionError("FHE encryption is not initialized")

        try:
            encrypted = await self._oracle.encrypt(
                contract_address, submitter_address, plaintext_score
            )
        except Exception as e:
            # Oracle messages can contain the input value
            self._log_failure(log, "encryption_failed", e, include_message=False)
            raise EncryptionError() from e

        log.info(
            "score_encrypted",
            ciphertext_bytes=len(encrypted.ciphertext),
            proof_bytes=len(encrypted.proof),
        )
        return encrypted
