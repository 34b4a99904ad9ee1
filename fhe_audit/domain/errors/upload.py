"""Upload state machine errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fhe_audit.domain.exceptions import AuditClientError

if TYPE_CHECKING:
    from fhe_audit.domain.models.upload import UploadPhase


class InvalidUploadTransitionError(AuditClientError):
    """Raised when the reducer is asked for a transition the matrix forbids.

    This signals a programming error in the event sequence, not a user
    or collaborator failure.
    """

    def __init__(self, current: UploadPhase, target: UploadPhase) -> None:
        super().__init__(
            f"Invalid upload transition: {current.value} -> {target.value}"
        )
        self.current = current
        self.target = target
