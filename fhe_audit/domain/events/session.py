"""Session events fed to the session reducer.

Events are facts: user actions, or results reported back by the effect
runner after it has talked to a collaborator. They carry plain data
only; transaction objects stay with the runner.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fhe_audit.domain.models.audit_record import AuditRecord
from fhe_audit.domain.models.crypto import EncryptedScore
from fhe_audit.domain.models.ledger import TransactionReceipt
from fhe_audit.domain.models.risk import RiskFilter
from fhe_audit.domain.models.upload import UploadForm


@dataclass(frozen=True)
class UploadFormOpened:
    """The user opened the upload form."""


@dataclass(frozen=True)
class UploadFormClosed:
    """The user dismissed the upload form without submitting."""


@dataclass(frozen=True)
class UploadFormEdited:
    """The user changed the upload form."""

    form: UploadForm


@dataclass(frozen=True)
class SearchTermChanged:
    term: str


@dataclass(frozen=True)
class RiskFilterChanged:
    risk_filter: RiskFilter


@dataclass(frozen=True)
class RecordSelected:
    """A record was opened in (or, with None, closed from) the detail view."""

    record_id: str | None


@dataclass(frozen=True)
class RecordsLoaded:
    """A full refresh of the record set completed."""

    records: tuple[AuditRecord, ...]


@dataclass(frozen=True)
class UploadRequested:
    """The user pressed upload.

    The id and identity are resolved by the caller so the reducer stays
    pure.

    Attributes:
        record_id: Freshly generated id for the new record, None when
            no wallet is connected.
        connected: Whether a wallet session is connected.
        submitter_address: Connected address, if any.
    """

    record_id: str | None
    connected: bool
    submitter_address: str | None = field(default=None)


@dataclass(frozen=True)
class ScoreEncrypted:
    record_id: str
    encrypted: EncryptedScore


@dataclass(frozen=True)
class RecordSubmitted:
    """The creation transaction was accepted for broadcast."""

    record_id: str
    transaction_hash: str


@dataclass(frozen=True)
class UploadConfirmed:
    record_id: str
    receipt: TransactionReceipt


@dataclass(frozen=True)
class UploadFailed:
    """Encryption, submission or confirmation failed.

    Attributes:
        record_id: Upload that failed.
        user_rejected: True when the user cancelled in the wallet.
        reason: Error description for logs.
    """

    record_id: str
    user_rejected: bool = False
    reason: str = ""


@dataclass(frozen=True)
class StatusCleared:
    """A banner clear timer fired.

    Attributes:
        token: Status token the timer was started for.
        reset_form: Close and reset the upload form as well.
    """

    token: int
    reset_form: bool = False


@dataclass(frozen=True)
class AvailabilityConfirmed:
    """The ledger contract answered an availability check."""


@dataclass(frozen=True)
class RecordDecrypted:
    """A verified decryption for a record was accepted by the ledger."""

    record_id: str


SessionEvent = (
    UploadFormOpened
    | UploadFormClosed
    | UploadFormEdited
    | SearchTermChanged
    | RiskFilterChanged
    | RecordSelected
    | RecordsLoaded
    | UploadRequested
    | ScoreEncrypted
    | RecordSubmitted
    | UploadConfirmed
    | UploadFailed
    | StatusCleared
    | AvailabilityConfirmed
    | RecordDecrypted
)
