"""Unit tests for RecordStoreService."""

from unittest.mock import AsyncMock

import pytest

from fhe_audit.application.services.record_store_service import RecordStoreService
from fhe_audit.domain.errors.audit import ReadError
from fhe_audit.infrastructure.stubs.ledger_stub import LedgerStub


@pytest.fixture
def ledger() -> LedgerStub:
    """Ledger seeded with two records."""
    ledger = LedgerStub()
    ledger.add_record("audit-1", "Token Vault", vulnerability_score=9, timestamp=100)
    ledger.add_record("audit-2", "Bridge", vulnerability_score=3, complexity=7, timestamp=200)
    return ledger


@pytest.fixture
def service(ledger: LedgerStub) -> RecordStoreService:
    return RecordStoreService(ledger)


class TestLoadAll:
    """Tests for load_all."""

    @pytest.mark.asyncio
    async def test_loads_every_record_in_ledger_order(
        self, service: RecordStoreService
    ) -> None:
        records = await service.load_all()

        assert [r.id for r in records] == ["audit-1", "audit-2"]
        assert records[1].public_vulnerability_score == 3
        assert records[1].public_complexity == 7
        assert service.records == records

    @pytest.mark.asyncio
    async def test_listing_failure_raises_read_error(
        self, service: RecordStoreService, ledger: LedgerStub
    ) -> None:
        ledger.fail_listing()

        with pytest.raises(ReadError):
            await service.load_all()

    @pytest.mark.asyncio
    async def test_listing_failure_keeps_previous_records(
        self, service: RecordStoreService, ledger: LedgerStub
    ) -> None:
        previous = await service.load_all()
        ledger.fail_listing()

        with pytest.raises(ReadError):
            await service.load_all()

        assert service.records == previous

    @pytest.mark.asyncio
    async def test_unreadable_record_is_omitted(
        self, service: RecordStoreService, ledger: LedgerStub
    ) -> None:
        """Test that one failing fetch does not hide the others."""
        ledger.fail_read("audit-1")

        records = await service.load_all()

        assert [r.id for r in records] == ["audit-2"]

    @pytest.mark.asyncio
    async def test_undecodable_record_is_omitted(
        self, service: RecordStoreService, ledger: LedgerStub
    ) -> None:
        ledger.put_raw_record("audit-3", {"name": "broken", "publicValue1": 42})

        records = await service.load_all()

        assert [r.id for r in records] == ["audit-1", "audit-2"]

    @pytest.mark.asyncio
    async def test_empty_ledger(self) -> None:
        assert await RecordStoreService(LedgerStub()).load_all() == ()


class TestDecoding:
    """Tests for raw field decoding."""

    @pytest.mark.asyncio
    async def test_zero_scores_default_to_five(self, ledger: LedgerStub) -> None:
        ledger.put_raw_record(
            "audit-9",
            {
                "name": "legacy",
                "creator": "0xabc",
                "timestamp": 1,
                "publicValue1": 0,
                "isVerified": False,
                "decryptedValue": 0,
            },
        )

        record = await RecordStoreService(ledger).load_record("audit-9")

        assert record.public_vulnerability_score == 5
        assert record.public_complexity == 5
        assert record.decrypted_value is None

    @pytest.mark.asyncio
    async def test_verified_record_keeps_value(self, ledger: LedgerStub) -> None:
        ledger.add_record("audit-5", "v", 4, is_verified=True, decrypted_value=6)

        record = await RecordStoreService(ledger).load_record("audit-5")

        assert record.is_verified is True
        assert record.decrypted_value == 6

    @pytest.mark.asyncio
    async def test_verified_zero_value_is_kept(self, ledger: LedgerStub) -> None:
        ledger.add_record("audit-6", "v", 4, is_verified=True, decrypted_value=0)

        record = await RecordStoreService(ledger).load_record("audit-6")

        assert record.decrypted_value == 0

    @pytest.mark.asyncio
    async def test_unknown_record_raises_read_error(self, service: RecordStoreService) -> None:
        with pytest.raises(ReadError) as exc_info:
            await service.load_record("audit-404")

        assert exc_info.value.record_id == "audit-404"

    @pytest.mark.asyncio
    async def test_reader_mapping_is_decoded(self) -> None:
        """Test decoding from a plain mocked reader."""
        reader = AsyncMock()
        reader.get_record.return_value = {
            "name": "mocked",
            "description": "from mock",
            "creator": "0xabc",
            "timestamp": 5,
            "publicValue1": 8,
            "publicValue2": 2,
            "isVerified": False,
            "decryptedValue": 0,
        }

        record = await RecordStoreService(reader).load_record("audit-1")

        reader.get_record.assert_awaited_once_with("audit-1")
        assert record.name == "mocked"
        assert record.created_at == 5
