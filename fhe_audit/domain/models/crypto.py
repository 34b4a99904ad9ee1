"""FHE value objects exchanged with the encryption and decryption oracles."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from fhe_audit.domain.models.ledger import TransactionReceipt


@dataclass(frozen=True)
class EncryptedScore:
    """Ciphertext and input proof for one encrypted score.

    Both are bound by the oracle to a contract address and a submitter
    address.
    """

    ciphertext: bytes = field(repr=False)
    proof: bytes = field(repr=False)


@dataclass(frozen=True)
class DecryptionResponse:
    """Cleartext values and decryption proof from the decryption oracle.

    Attributes:
        clear_values: Cleartext per ciphertext handle. Handles the oracle
            could not resolve are absent.
        proof: Proof that the values are the correct decryptions.
    """

    clear_values: Mapping[str, int] = field(repr=False)
    proof: bytes = field(repr=False)


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a verified decryption.

    The map is keyed by ciphertext handle, not by record id.
    """

    clear_values: Mapping[str, int] = field(repr=False)
    receipt: TransactionReceipt

    def value_for(self, handle: str) -> int | None:
        """Cleartext for a handle, or None if it was not resolved."""
        return self.clear_values.get(handle)
