"""Upload workflow domain model.

State Machine:
    IDLE -> VALIDATING (upload requested)
    VALIDATING -> IDLE (validation failed)
    VALIDATING -> ENCRYPTING (input accepted)
    ENCRYPTING -> SUBMITTING | FAILED
    SUBMITTING -> CONFIRMING | FAILED
    CONFIRMING -> SUCCEEDED | FAILED
    SUCCEEDED, FAILED -> IDLE (status cleared)

SUCCEEDED and FAILED are display states. A new request made before
their status clears starts validating straight away.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from fhe_audit.domain.errors.audit import AuditValidationError
from fhe_audit.domain.models.audit_record import MAX_SCORE, MIN_SCORE

DEFAULT_COMPLEXITY = 5
DEFAULT_VULNERABILITY_SCORE = 5

MSG_ENCRYPTING = "Encrypting code with FHE..."
MSG_UPLOADING = "Uploading encrypted audit..."
MSG_UPLOAD_SUCCEEDED = "Audit uploaded successfully!"
MSG_UPLOAD_FAILED = "Upload failed"
MSG_TRANSACTION_REJECTED = "Transaction rejected"
MSG_CONNECT_WALLET = "Please connect wallet first"
MSG_NAME_REQUIRED = "Project name is required"
MSG_SYSTEM_AVAILABLE = "FHE system available!"


class UploadPhase(Enum):
    """Phase of the upload workflow."""

    IDLE = "idle"
    VALIDATING = "validating"
    ENCRYPTING = "encrypting"
    SUBMITTING = "submitting"
    CONFIRMING = "confirming"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    def is_in_flight(self) -> bool:
        """True while collaborator calls are outstanding."""
        return self in IN_FLIGHT_PHASES

    def is_terminal(self) -> bool:
        """True for the transient SUCCEEDED/FAILED display states."""
        return self in TERMINAL_PHASES

    def valid_transitions(self) -> frozenset[UploadPhase]:
        """Phases reachable from this one."""
        return UPLOAD_TRANSITION_MATRIX.get(self, frozenset())


IN_FLIGHT_PHASES: frozenset[UploadPhase] = frozenset(
    {UploadPhase.ENCRYPTING, UploadPhase.SUBMITTING, UploadPhase.CONFIRMING}
)

TERMINAL_PHASES: frozenset[UploadPhase] = frozenset(
    {UploadPhase.SUCCEEDED, UploadPhase.FAILED}
)

UPLOAD_TRANSITION_MATRIX: dict[UploadPhase, frozenset[UploadPhase]] = {
    UploadPhase.IDLE: frozenset({UploadPhase.VALIDATING}),
    UploadPhase.VALIDATING: frozenset({UploadPhase.IDLE, UploadPhase.ENCRYPTING}),
    UploadPhase.ENCRYPTING: frozenset({UploadPhase.SUBMITTING, UploadPhase.FAILED}),
    UploadPhase.SUBMITTING: frozenset({UploadPhase.CONFIRMING, UploadPhase.FAILED}),
    UploadPhase.CONFIRMING: frozenset({UploadPhase.SUCCEEDED, UploadPhase.FAILED}),
    UploadPhase.SUCCEEDED: frozenset({UploadPhase.IDLE, UploadPhase.VALIDATING}),
    UploadPhase.FAILED: frozenset({UploadPhase.IDLE, UploadPhase.VALIDATING}),
}


def clamp_score(value: int) -> int:
    """Clamp a slider value into the 1-10 score range."""
    return max(MIN_SCORE, min(MAX_SCORE, int(value)))


@dataclass(frozen=True)
class UploadForm:
    """Contents of the upload form.

    Scores are always within range; use ``create`` or ``with_changes``
    to build a form from raw input so values are clamped first.
    """

    name: str = ""
    description: str = ""
    complexity: int = DEFAULT_COMPLEXITY
    vulnerability_score: int = DEFAULT_VULNERABILITY_SCORE

    def __post_init__(self) -> None:
        if not MIN_SCORE <= self.complexity <= MAX_SCORE:
            raise ValueError(f"complexity out of range: {self.complexity}")
        if not MIN_SCORE <= self.vulnerability_score <= MAX_SCORE:
            raise ValueError(
                f"vulnerability_score out of range: {self.vulnerability_score}"
            )

    @classmethod
    def create(
        cls,
        name: str = "",
        description: str = "",
        complexity: int = DEFAULT_COMPLEXITY,
        vulnerability_score: int = DEFAULT_VULNERABILITY_SCORE,
    ) -> UploadForm:
        """Build a form from raw input, clamping both scores."""
        return cls(
            name=name,
            description=description,
            complexity=clamp_score(complexity),
            vulnerability_score=clamp_score(vulnerability_score),
        )

    def with_changes(self, **changes: object) -> UploadForm:
        """Return a copy with some fields edited, scores clamped."""
        for key in ("complexity", "vulnerability_score"):
            if key in changes:
                changes[key] = clamp_score(changes[key])  # type: ignore[arg-type]
        return replace(self, **changes)  # type: ignore[arg-type]

    def validate(self) -> None:
        """Check the form can be submitted.

        Raises:
            AuditValidationError: If the project name is blank.
        """
        if not self.name.strip():
            raise AuditValidationError("name", MSG_NAME_REQUIRED)


class StatusKind(Enum):
    """Kind of status banner shown to the user."""

    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class TransactionStatus:
    """Status banner.

    Attributes:
        visible: Whether the banner is shown.
        kind: Pending, success or error styling.
        message: Text shown to the user.
    """

    visible: bool = False
    kind: StatusKind = field(default=StatusKind.PENDING)
    message: str = ""

    @classmethod
    def pending(cls, message: str) -> TransactionStatus:
        return cls(visible=True, kind=StatusKind.PENDING, message=message)

    @classmethod
    def success(cls, message: str) -> TransactionStatus:
        return cls(visible=True, kind=StatusKind.SUCCESS, message=message)

    @classmethod
    def error(cls, message: str) -> TransactionStatus:
        return cls(visible=True, kind=StatusKind.ERROR, message=message)


HIDDEN_STATUS = TransactionStatus()
