"""Application ports - Abstract interfaces for external collaborators.

Available ports:
- LedgerReaderProtocol: Read-only audit contract access
- LedgerWriterProtocol / LedgerTransactionProtocol: Signed writes
- EncryptionOracleProtocol: FHE encryption
- DecryptionOracleProtocol: FHE public decryption with proof
- IdentityProviderProtocol: Wallet connection state
"""

from fhe_audit.application.ports.decryption_oracle import DecryptionOracleProtocol
from fhe_audit.application.ports.encryption_oracle import EncryptionOracleProtocol
from fhe_audit.application.ports.identity_provider import IdentityProviderProtocol
from fhe_audit.application.ports.ledger_reader import LedgerReaderProtocol
from fhe_audit.application.ports.ledger_writer import (
    LedgerTransactionProtocol,
    LedgerWriterProtocol,
)

__all__: list[str] = [
    "DecryptionOracleProtocol",
    "EncryptionOracleProtocol",
    "IdentityProviderProtocol",
    "LedgerReaderProtocol",
    "LedgerTransactionProtocol",
    "LedgerWriterProtocol",
]
