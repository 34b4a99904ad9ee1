"""In-memory ledger stub.

Implements both LedgerReaderProtocol and LedgerWriterProtocol over a
dict of raw, ABI-shaped record fields. Writes take effect only when
their transaction is confirmed, like on a real chain.

Failure switches let tests simulate transport errors, corrupt records,
wallet rejections and reverts.

WARNING: This stub is for development/testing only.
"""

from __future__ import annotations

import itertools
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from fhe_audit.domain.models.ledger import TransactionReceipt
from fhe_audit.infrastructure.stubs.fhe_oracle_stub import FheOracleStub, ciphertext_handle

DEFAULT_CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
DEFAULT_SIGNER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


class WalletRejectedError(Exception):
    """What a wallet raises when the user declines to sign (EIP-1193 4001)."""

    code = 4001

    def __init__(self, message: str = "user rejected transaction") -> None:
        super().__init__(message)


class LedgerRevertError(Exception):
    """A transaction reverted on-chain."""


class StubTransaction:
    """Broadcast transaction whose effect is applied on confirmation."""

    def __init__(
        self,
        transaction_hash: str,
        apply: Callable[[], None],
        block_number: int,
        error: Exception | None = None,
    ) -> None:
        self._transaction_hash = transaction_hash
        self._apply = apply
        self._block_number = block_number
        self._error = error
        self._receipt: TransactionReceipt | None = None

    @property
    def transaction_hash(self) -> str:
        return self._transaction_hash

    async def await_confirmation(self) -> TransactionReceipt:
        if self._receipt is not None:
            return self._receipt
        if self._error is not None:
            raise self._error
        self._apply()
        self._receipt = TransactionReceipt(
            transaction_hash=self._transaction_hash,
            block_number=self._block_number,
        )
        return self._receipt


class LedgerStub:
    """Stub implementation of the ledger read and write ports.

    Attributes:
        create_calls: Record ids of every create_record call.
        proof_submissions: Record ids of every submit_verification_proof call.
    """

    def __init__(
        self,
        fhe: FheOracleStub | None = None,
        contract_address: str = DEFAULT_CONTRACT_ADDRESS,
        signer_address: str = DEFAULT_SIGNER_ADDRESS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize an empty ledger.

        Args:
            fhe: Oracle whose proofs are accepted; any proof is accepted
                if None.
            contract_address: Address reported for the audit contract.
            signer_address: Address recorded as creator of new records.
            clock: Source of block timestamps.
        """
        self._fhe = fhe
        self._contract_address = contract_address
        self.signer_address = signer_address
        self._clock = clock
        self._records: dict[str, dict[str, Any]] = {}
        self._handles: dict[str, str] = {}
        self._blocks = itertools.count(1)
        self._tx_counter = itertools.count(1)
        self._available = True
        self._listing_error: Exception | None = None
        self._read_errors: dict[str, Exception] = {}
        self._next_write_error: Exception | None = None
        self._next_revert: Exception | None = None
        self.create_calls: list[str] = []
        self.proof_submissions: list[str] = []

    # Test configuration

    def add_record(
        self,
        record_id: str,
        name: str,
        vulnerability_score: int,
        complexity: int = 5,
        description: str = "",
        creator: str = DEFAULT_SIGNER_ADDRESS,
        timestamp: int | None = None,
        handle: str | None = None,
        is_verified: bool = False,
        decrypted_value: int = 0,
    ) -> None:
        """Seed a confirmed record."""
        self._records[record_id] = {
            "name": name,
            "description": description,
            "creator": creator,
            "timestamp": int(self._clock()) if timestamp is None else timestamp,
            "publicValue1": vulnerability_score,
            "publicValue2": complexity,
            "isVerified": is_verified,
            "decryptedValue": decrypted_value,
        }
        if handle is not None:
            self._handles[record_id] = handle

    def put_raw_record(self, record_id: str, fields: Mapping[str, Any]) -> None:
        """Store arbitrary raw fields, e.g. an undecodable record."""
        self._records[record_id] = dict(fields)

    def raw_record(self, record_id: str) -> dict[str, Any]:
        return dict(self._records[record_id])

    def set_available(self, available: bool) -> None:
        self._available = available

    def fail_listing(self, error: Exception | None = None) -> None:
        self._listing_error = error or ConnectionError("RPC endpoint unreachable")

    def fail_read(self, record_id: str, error: Exception | None = None) -> None:
        self._read_errors[record_id] = error or ConnectionError("RPC call timed out")

    def reject_next_write(self, error: Exception | None = None) -> None:
        """Make the next write call raise (default: user rejection)."""
        self._next_write_error = error or WalletRejectedError()

    def revert_next_transaction(self, error: Exception | None = None) -> None:
        """Make the next write's confirmation raise."""
        self._next_revert = error or LedgerRevertError("execution reverted")

    # LedgerReaderProtocol

    async def get_contract_address(self) -> str:
        return self._contract_address

    async def get_all_record_ids(self) -> Sequence[str]:
        if self._listing_error is not None:
            raise self._listing_error
        return list(self._records)

    async def get_record(self, record_id: str) -> Mapping[str, Any]:
        if record_id in self._read_errors:
            raise self._read_errors[record_id]
        if record_id not in self._records:
            raise KeyError(f"Unknown audit record: {record_id}")
        return dict(self._records[record_id])

    async def get_ciphertext_handle(self, record_id: str) -> str:
        if record_id not in self._handles:
            raise KeyError(f"No encrypted value for: {record_id}")
        return self._handles[record_id]

    async def is_available(self) -> bool:
        if self._listing_error is not None:
            raise self._listing_error
        return self._available

    # LedgerWriterProtocol

    async def create_record(
        self,
        record_id: str,
        name: str,
        ciphertext: bytes,
        proof: bytes,
        public_score: int,
        public_complexity: int,
        description: str,
    ) -> StubTransaction:
        self.create_calls.append(record_id)
        self._raise_write_error()
        if record_id in self._records:
            raise LedgerRevertError(f"Audit record already exists: {record_id}")

        def apply() -> None:
            self._records[record_id] = {
                "name": name,
                "description": description,
                "creator": self.signer_address,
                "timestamp": int(self._clock()),
                "publicValue1": public_score,
                "publicValue2": public_complexity,
                "isVerified": False,
                "decryptedValue": 0,
            }
            self._handles[record_id] = ciphertext_handle(ciphertext)

        return self._transaction(apply)

    async def submit_verification_proof(
        self,
        record_id: str,
        clear_values: Mapping[str, int],
        proof: bytes,
    ) -> StubTransaction:
        self.proof_submissions.append(record_id)
        self._raise_write_error()
        if record_id not in self._records:
            raise LedgerRevertError(f"Unknown audit record: {record_id}")
        handle = self._handles.get(record_id)
        if handle is None or handle not in clear_values:
            raise LedgerRevertError("Proof does not cover the record's handle")
        if self._fhe is not None and not self._fhe.verify_proof(clear_values, proof):
            raise LedgerRevertError("Invalid decryption proof")

        value = clear_values[handle]

        def apply() -> None:
            self._records[record_id]["isVerified"] = True
            self._records[record_id]["decryptedValue"] = value

        return self._transaction(apply)

    def _raise_write_error(self) -> None:
        if self._next_write_error is not None:
            error, self._next_write_error = self._next_write_error, None
            raise error

    def _transaction(self, apply: Callable[[], None]) -> StubTransaction:
        error, self._next_revert = self._next_revert, None
        return StubTransaction(
            transaction_hash=f"0x{next(self._tx_counter):064x}",
            apply=apply,
            block_number=next(self._blocks),
            error=error,
        )
