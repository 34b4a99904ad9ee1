"""Ledger write port.

Write methods return as soon as the transaction is broadcast; finality
is awaited separately through the returned transaction.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from fhe_audit.domain.models.ledger import TransactionReceipt


class LedgerTransactionProtocol(Protocol):
    """A broadcast ledger transaction."""

    @property
    def transaction_hash(self) -> str:
        """Hash of the transaction."""
        ...

    async def await_confirmation(self) -> TransactionReceipt:
        """Wait until the transaction is final.

        Raises:
            Exception: Whatever the provider raises when the transaction
                reverts or is dropped.
        """
        ...


class LedgerWriterProtocol(Protocol):
    """Signed write access to the audit contract.

    Calls go through the connected wallet, so any of them can fail
    because the user declined to sign.
    """

    async def get_contract_address(self) -> str:
        """Address of the audit contract."""
        ...

    async def create_record(
        self,
        record_id: str,
        name: str,
        ciphertext: bytes,
        proof: bytes,
        public_score: int,
        public_complexity: int,
        description: str,
    ) -> LedgerTransactionProtocol:
        """Send the record creation transaction.

        Args:
            record_id: Id for the new record.
            name: Project name.
            ciphertext: Encrypted vulnerability score.
            proof: Input proof for the ciphertext.
            public_score: Declared vulnerability score.
            public_complexity: Declared complexity.
            description: Project description.

        Returns:
            The broadcast transaction.
        """
        ...

    async def submit_verification_proof(
        self,
        record_id: str,
        clear_values: Mapping[str, int],
        proof: bytes,
    ) -> LedgerTransactionProtocol:
        """Send a decryption proof for one record's encrypted score.

        Args:
            record_id: Record the proof is for.
            clear_values: Cleartext per ciphertext handle.
            proof: Decryption proof from the oracle.

        Returns:
            The broadcast transaction.
        """
        ...
