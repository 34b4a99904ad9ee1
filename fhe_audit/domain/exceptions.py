"""Base exception classes for the FHE audit domain layer."""


class AuditClientError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class so the
    workflow boundaries can catch one type and turn it into a status
    message.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
