"""Effects requested by the session reducer.

An effect describes a call into a collaborator (or a timer). The
reducer only returns them; the effect runner executes them and reports
back with session events.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fhe_audit.domain.models.crypto import EncryptedScore
from fhe_audit.domain.models.upload import UploadForm


@dataclass(frozen=True)
class EncryptScore:
    """Encrypt the protected score for a pending upload."""

    record_id: str
    submitter_address: str
    score: int = field(repr=False)


@dataclass(frozen=True)
class SubmitRecord:
    """Send the record creation transaction."""

    record_id: str
    form: UploadForm
    encrypted: EncryptedScore


@dataclass(frozen=True)
class AwaitConfirmation:
    """Wait for finality of the pending creation transaction."""

    record_id: str


@dataclass(frozen=True)
class RefreshRecords:
    """Re-read the full record set from the ledger."""


@dataclass(frozen=True)
class ClearStatusAfter:
    """Hide the status banner after a delay.

    Attributes:
        delay_seconds: Delay before clearing.
        token: Status token the banner had when scheduled.
        reset_form: Also close and reset the upload form.
    """

    delay_seconds: float
    token: int
    reset_form: bool = False


Effect = EncryptScore | SubmitRecord | AwaitConfirmation | RefreshRecords | ClearStatusAfter
