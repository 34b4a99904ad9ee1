"""Audit record errors: bad user input and failed ledger reads."""

from __future__ import annotations

from fhe_audit.domain.exceptions import AuditClientError


class AuditValidationError(AuditClientError):
    """Raised when user-supplied upload input is rejected.

    Recoverable. Nothing has been sent to any collaborator when this
    is raised.

    Attributes:
        field: Name of the offending input field.
    """

    def __init__(self, field: str, message: str = "") -> None:
        """Initialize with the offending field.

        Args:
            field: Name of the rejected field.
            message: Optional override for the default message.
        """
        super().__init__(message or f"Invalid value for {field}")
        self.field = field


class ReadError(AuditClientError):
    """Raised when the ledger read collaborator cannot be queried.

    When record_id is set the failure concerns a single record and the
    record store omits it; without one the whole listing failed.
    """

    def __init__(self, message: str = "Ledger read failed", record_id: str | None = None) -> None:
        if record_id:
            message = f"{message}: {record_id}"
        super().__init__(message)
        self.record_id = record_id
