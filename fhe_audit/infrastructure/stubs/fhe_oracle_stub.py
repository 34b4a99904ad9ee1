"""FHE oracle stub.

In-memory stand-in for both the encryption and the decryption oracle.
No real FHE happens: the "ciphertext" is a BLAKE3 digest bound to the
contract address, the user address and a nonce, and the plaintext is
kept in a vault keyed by the resulting handle. Proofs are BLAKE3 MACs
under a per-instance key so the ledger stub can check them.

WARNING: This stub is for development/testing only.
"""

from __future__ import annotations

import secrets
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import blake3

from fhe_audit.domain.models.crypto import DecryptionResponse, EncryptedScore


def ciphertext_handle(ciphertext: bytes) -> str:
    """Ledger handle for a stub ciphertext (``0x`` + hex digest)."""
    return "0x" + ciphertext.hex()


@dataclass(frozen=True)
class _VaultEntry:
    value: int
    contract_address: str


class FheOracleStub:
    """Stub implementation of EncryptionOracleProtocol and DecryptionOracleProtocol.

    Attributes:
        encrypt_calls: Number of encrypt calls made.
        decryption_requests: Handles of every decryption request, in order.
    """

    def __init__(self) -> None:
        """Initialize with an empty vault and a fresh proof key."""
        self._key = secrets.token_bytes(32)
        self._vault: dict[str, _VaultEntry] = {}
        self._nonce = 0
        self._initialized = False
        self._init_error: Exception | None = None
        self._encrypt_error: Exception | None = None
        self._decrypt_error: Exception | None = None
        self._withheld: set[str] = set()
        self.encrypt_calls = 0
        self.decryption_requests: list[tuple[str, ...]] = []

    # Test configuration

    def fail_initialize(self, error: Exception | None = None) -> None:
        self._init_error = error or RuntimeError("FHE public key unavailable")

    def fail_encryption(self, error: Exception | None = None) -> None:
        self._encrypt_error = error or RuntimeError("encryption oracle unavailable")

    def fail_decryption(self, error: Exception | None = None) -> None:
        self._decrypt_error = error or RuntimeError("decryption oracle unavailable")

    def withhold(self, handle: str) -> None:
        """Leave a handle out of future decryption results."""
        self._withheld.add(handle)

    def reset_failures(self) -> None:
        self._init_error = None
        self._encrypt_error = None
        self._decrypt_error = None
        self._withheld.clear()

    def seal(self, contract_address: str, value: int) -> str:
        """Put a value in the vault directly and return its handle.

        Used to seed ledger records that were "encrypted" elsewhere.
        """
        ciphertext = self._next_ciphertext(contract_address, "seed")
        handle = ciphertext_handle(ciphertext)
        self._vault[handle] = _VaultEntry(value=value, contract_address=contract_address)
        return handle

    # EncryptionOracleProtocol

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        if self._init_error is not None:
            raise self._init_error
        self._initialized = True

    async def encrypt(
        self, contract_address: str, user_address: str, value: int
    ) -> EncryptedScore:
        self.encrypt_calls += 1
        if not self._initialized:
            raise RuntimeError("FHE instance not initialized")
        if self._encrypt_error is not None:
            raise self._encrypt_error

        ciphertext = self._next_ciphertext(contract_address, user_address)
        self._vault[ciphertext_handle(ciphertext)] = _VaultEntry(
            value=value, contract_address=contract_address
        )
        proof = blake3.blake3(
            ciphertext + contract_address.encode() + user_address.encode(), key=self._key
        ).digest()
        return EncryptedScore(ciphertext=ciphertext, proof=proof)

    # DecryptionOracleProtocol

    async def request_decryption(
        self, handles: Sequence[str], contract_address: str
    ) -> DecryptionResponse:
        self.decryption_requests.append(tuple(handles))
        if self._decrypt_error is not None:
            raise self._decrypt_error

        clear_values: dict[str, int] = {}
        for handle in handles:
            entry = self._vault.get(handle)
            if entry is None or handle in self._withheld:
                continue
            if entry.contract_address != contract_address:
                continue
            clear_values[handle] = entry.value
        return DecryptionResponse(clear_values=clear_values, proof=self.sign(clear_values))

    # Proof checking, used by the ledger stub

    def sign(self, clear_values: Mapping[str, int]) -> bytes:
        hasher = blake3.blake3(key=self._key)
        for handle in sorted(clear_values):
            hasher.update(f"{handle}={clear_values[handle]};".encode())
        return hasher.digest()

    def verify_proof(self, clear_values: Mapping[str, int], proof: bytes) -> bool:
        return secrets.compare_digest(self.sign(clear_values), proof)

    def _next_ciphertext(self, contract_address: str, user_address: str) -> bytes:
        self._nonce += 1
        material = f"{contract_address}|{user_address}|{self._nonce}".encode()
        return blake3.blake3(material, key=self._key).digest()
