"""Session events and effects."""

from fhe_audit.domain.events.effects import (
    AwaitConfirmation,
    ClearStatusAfter,
    EncryptScore,
    Effect,
    RefreshRecords,
    SubmitRecord,
)
from fhe_audit.domain.events.session import (
    AvailabilityConfirmed,
    RecordDecrypted,
    RecordsLoaded,
    RecordSelected,
    RecordSubmitted,
    RiskFilterChanged,
    ScoreEncrypted,
    SearchTermChanged,
    SessionEvent,
    StatusCleared,
    UploadConfirmed,
    UploadFailed,
    UploadFormClosed,
    UploadFormEdited,
    UploadFormOpened,
    UploadRequested,
)

__all__: list[str] = [
    "AvailabilityConfirmed",
    "AwaitConfirmation",
    "ClearStatusAfter",
    "Effect",
    "EncryptScore",
    "RecordDecrypted",
    "RecordSelected",
    "RecordSubmitted",
    "RecordsLoaded",
    "RefreshRecords",
    "RiskFilterChanged",
    "ScoreEncrypted",
    "SearchTermChanged",
    "SessionEvent",
    "StatusCleared",
    "SubmitRecord",
    "UploadConfirmed",
    "UploadFailed",
    "UploadFormClosed",
    "UploadFormEdited",
    "UploadFormOpened",
    "UploadRequested",
]
