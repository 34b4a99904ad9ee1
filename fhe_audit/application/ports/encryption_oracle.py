"""FHE encryption oracle port."""

from __future__ import annotations

from typing import Protocol

from fhe_audit.domain.models.crypto import EncryptedScore


class EncryptionOracleProtocol(Protocol):
    """Client-side FHE encryption.

    The oracle binds each ciphertext to the contract and user addresses
    so it cannot be replayed against another contract or by another
    identity.
    """

    @property
    def is_initialized(self) -> bool:
        """Whether ``initialize`` has completed."""
        ...

    async def initialize(self) -> None:
        """Load public keys and parameters. Safe to call more than once."""
        ...

    async def encrypt(
        self, contract_address: str, user_address: str, value: int
    ) -> EncryptedScore:
        """Encrypt an integer for the given contract and user."""
        ...
