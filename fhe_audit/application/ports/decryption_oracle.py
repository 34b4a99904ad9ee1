"""FHE decryption oracle port."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from fhe_audit.domain.models.crypto import DecryptionResponse


class DecryptionOracleProtocol(Protocol):
    """Public decryption with proof."""

    async def request_decryption(
        self, handles: Sequence[str], contract_address: str
    ) -> DecryptionResponse:
        """Decrypt ciphertext handles and prove the result.

        Args:
            handles: Ciphertext handles to decrypt.
            contract_address: Contract the handles belong to.

        Returns:
            Cleartext values keyed by handle and the decryption proof.
            Handles that could not be resolved are left out.
        """
        ...
