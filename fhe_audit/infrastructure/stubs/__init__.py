"""Infrastructure stubs for development and testing.

Available stubs:
- LedgerStub: In-memory audit contract (read and write ports), with
  switches for transport errors, corrupt records, wallet rejections
  and reverts
- FheOracleStub: Encryption and decryption oracle with a plaintext
  vault and BLAKE3-keyed proofs
- IdentityProviderStub: Connectable wallet session

WARNING: These stubs are NOT for production use.
"""

from fhe_audit.infrastructure.stubs.fhe_oracle_stub import FheOracleStub, ciphertext_handle
from fhe_audit.infrastructure.stubs.identity_provider_stub import IdentityProviderStub
from fhe_audit.infrastructure.stubs.ledger_stub import (
    DEFAULT_CONTRACT_ADDRESS,
    DEFAULT_SIGNER_ADDRESS,
    LedgerRevertError,
    LedgerStub,
    StubTransaction,
    WalletRejectedError,
)

__all__: list[str] = [
    "DEFAULT_CONTRACT_ADDRESS",
    "DEFAULT_SIGNER_ADDRESS",
    "FheOracleStub",
    "IdentityProviderStub",
    "LedgerRevertError",
    "LedgerStub",
    "StubTransaction",
    "WalletRejectedError",
    "ciphertext_handle",
]
