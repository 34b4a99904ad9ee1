"""Domain errors for the FHE audit client.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from AuditClientError.
"""

from fhe_audit.domain.errors.audit import AuditValidationError, ReadError
from fhe_audit.domain.errors.crypto import EncryptionError, VerificationError
from fhe_audit.domain.errors.ledger import SubmissionError, is_user_rejection
from fhe_audit.domain.errors.upload import InvalidUploadTransitionError

__all__: list[str] = [
    "AuditValidationError",
    "EncryptionError",
    "InvalidUploadTransitionError",
    "ReadError",
    "SubmissionError",
    "VerificationError",
    "is_user_rejection",
]
