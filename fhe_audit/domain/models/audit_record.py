"""Audit record domain model.

An audit record describes one audited project as the ledger reports it.
The public vulnerability score is plain metadata; the protected score
lives on the ledger as a ciphertext and is only known to the client once
the ledger has accepted a verification proof for it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from fhe_audit.domain.models.risk import RiskBand, risk_band_for

MIN_SCORE = 1
MAX_SCORE = 10

# Leading/trailing characters kept when shortening a creator address
_SHORT_ADDRESS_HEAD = 8
_SHORT_ADDRESS_TAIL_START = 34


@dataclass(frozen=True, eq=True)
class AuditRecord:
    """One audited project.

    Records are immutable. A refreshed record set replaces the previous
    one wholesale; verification status is never flipped locally.

    Attributes:
        id: Opaque unique identifier assigned at creation.
        name: Project name.
        description: Free-text description.
        creator_address: Address of the submitter.
        created_at: Creation time in seconds since epoch.
        public_complexity: Declared complexity, 1-10.
        public_vulnerability_score: Declared vulnerability score, 1-10.
        is_verified: True once the ledger accepted a decryption proof.
        decrypted_value: Verified cleartext score, None while unverified.
    """

    id: str
    name: str
    description: str
    creator_address: str
    created_at: int
    public_complexity: int
    public_vulnerability_score: int
    is_verified: bool = field(default=False)
    decrypted_value: int | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate score ranges and the verification invariant."""
        if not self.id:
            raise ValueError("Audit record id cannot be empty")
        for label, value in (
            ("public_complexity", self.public_complexity),
            ("public_vulnerability_score", self.public_vulnerability_score),
        ):
            if not MIN_SCORE <= value <= MAX_SCORE:
                raise ValueError(
                    f"{label} must be between {MIN_SCORE} and {MAX_SCORE}, got {value}"
                )
        if not self.is_verified and self.decrypted_value is not None:
            raise ValueError("decrypted_value is only set on verified records")

    @property
    def risk_band(self) -> RiskBand:
        """Risk band derived from the public vulnerability score."""
        return risk_band_for(self.public_vulnerability_score)

    @property
    def short_creator(self) -> str:
        """Creator address shortened for display (``0x1234ab...cdef``)."""
        head = self.creator_address[:_SHORT_ADDRESS_HEAD]
        tail = self.creator_address[_SHORT_ADDRESS_TAIL_START:]
        return f"{head}...{tail}"

    @property
    def created_at_datetime(self) -> datetime:
        """Creation time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.created_at, tz=timezone.utc)

    def matches_text(self, needle: str) -> bool:
        """Case-insensitive substring match on name or description."""
        needle = needle.lower()
        return needle in self.name.lower() or needle in self.description.lower()
