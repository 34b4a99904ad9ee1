"""FHE oracle errors.

Kept apart from ledger errors so callers can tell "crypto failed" from
"chain rejected".
"""

from __future__ import annotations

from collections.abc import Sequence

from fhe_audit.domain.exceptions import AuditClientError


class EncryptionError(AuditClientError):
    """Raised when the encryption oracle cannot produce a ciphertext.

    The message never contains the plaintext value.
    """

    def __init__(self, message: str = "Encryption failed") -> None:
        super().__init__(message)


class VerificationError(AuditClientError):
    """Raised when the decryption oracle cannot decrypt or prove.

    Attributes:
        handles: The ciphertext handles the request was for.
    """

    def __init__(
        self, message: str = "Decryption oracle failed", handles: Sequence[str] = ()
    ) -> None:
        super().__init__(message)
        self.handles = tuple(handles)
