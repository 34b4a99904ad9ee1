"""Ledger read port.

Read-only view of the audit contract. Implementations talk to a node
through a read-only provider; every method may fail with any transport
exception, which the record store turns into ReadError.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol


class LedgerReaderProtocol(Protocol):
    """Read access to audit records held by the ledger."""

    async def get_contract_address(self) -> str:
        """Address of the audit contract."""
        ...

    async def get_all_record_ids(self) -> Sequence[str]:
        """Ids of every audit record, in ledger order."""
        ...

    async def get_record(self, record_id: str) -> Mapping[str, Any]:
        """Raw public fields of one record.

        Keys follow the contract ABI (``name``, ``description``,
        ``creator``, ``timestamp``, ``publicValue1``, ``publicValue2``,
        ``isVerified``, ``decryptedValue``).

        Args:
            record_id: The record to fetch.

        Returns:
            Mapping of field name to value as decoded by the provider.
        """
        ...

    async def get_ciphertext_handle(self, record_id: str) -> str:
        """Handle of the encrypted score stored for a record."""
        ...

    async def is_available(self) -> bool:
        """Whether the contract responds."""
        ...
