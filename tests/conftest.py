"""
Pytest configuration and shared fixtures for fhe_audit tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async collaborator mocking, stubs for workflows
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import tomllib
from collections.abc import Callable
from pathlib import Path

import pytest

from fhe_audit.domain.models.audit_record import AuditRecord

CREATOR = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

RecordFactory = Callable[..., AuditRecord]
PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


@pytest.fixture
def project_version() -> str:
    """Version declared in pyproject.toml."""
    with PYPROJECT.open("rb") as f:
        return tomllib.load(f)["project"]["version"]


@pytest.fixture
def make_record() -> RecordFactory:
    """Factory for audit records with sensible defaults."""

    def _make(
        record_id: str = "audit-1",
        name: str = "demo",
        description: str = "",
        score: int = 5,
        complexity: int = 5,
        is_verified: bool = False,
        decrypted_value: int | None = None,
        created_at: int = 1_700_000_000,
    ) -> AuditRecord:
        return AuditRecord(
            id=record_id,
            name=name,
            description=description,
            creator_address=CREATOR,
            created_at=created_at,
            public_complexity=complexity,
            public_vulnerability_score=score,
            is_verified=is_verified,
            decrypted_value=decrypted_value,
        )

    return _make
