"""Ledger record DTO.

Pydantic model for the raw public fields returned by the audit contract.
Accepts the ABI field names and maps them onto the domain record.

Decoding rules:
- publicValue1 is the declared vulnerability score, publicValue2 the
  declared complexity; unset (missing, empty or 0) means 5
- decryptedValue is kept only on verified records
- scores outside 1-10 fail validation
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fhe_audit.domain.models.audit_record import MAX_SCORE, MIN_SCORE, AuditRecord

UNSET_SCORE_DEFAULT = 5


class LedgerRecordFields(BaseModel):
    """Public fields of one audit record as stored on the ledger."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: str
    description: str = ""
    creator: str
    timestamp: int = Field(ge=0)
    public_vulnerability_score: int = Field(
        default=UNSET_SCORE_DEFAULT, alias="publicValue1", ge=MIN_SCORE, le=MAX_SCORE
    )
    public_complexity: int = Field(
        default=UNSET_SCORE_DEFAULT, alias="publicValue2", ge=MIN_SCORE, le=MAX_SCORE
    )
    is_verified: bool = Field(default=False, alias="isVerified")
    decrypted_value: int | None = Field(default=None, alias="decryptedValue")

    @field_validator("public_vulnerability_score", "public_complexity", mode="before")
    @classmethod
    def default_unset_score(cls, v: Any) -> Any:
        """Treat a missing or zero score as the default score."""
        if v is None or v == "" or v == 0 or v == "0":
            return UNSET_SCORE_DEFAULT
        return v

    @field_validator("decrypted_value", mode="before")
    @classmethod
    def empty_decrypted_value(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

    def to_record(self, record_id: str) -> AuditRecord:
        """Build the domain record.

        Args:
            record_id: Id the fields were fetched under.

        Returns:
            AuditRecord with decrypted_value cleared unless verified.
        """
        return AuditRecord(
            id=record_id,
            name=self.name,
            description=self.description,
            creator_address=self.creator,
            created_at=self.timestamp,
            public_complexity=self.public_complexity,
            public_vulnerability_score=self.public_vulnerability_score,
            is_verified=self.is_verified,
            decrypted_value=self.decrypted_value if self.is_verified else None,
        )
