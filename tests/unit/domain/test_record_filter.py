"""Unit tests for the filter engine."""

import pytest

from fhe_audit.domain.models.risk import RiskFilter
from fhe_audit.domain.services.record_filter import filter_records


@pytest.fixture
def records(make_record):
    """Three records, one per risk band."""
    return [
        make_record(record_id="audit-1", name="Token Vault", description="escrow", score=9),
        make_record(record_id="audit-2", name="Bridge", description="Cross-chain VAULT", score=6),
        make_record(record_id="audit-3", name="Oracle", description="price feed", score=2),
    ]


class TestFilterRecords:
    """Tests for filter_records."""

    def test_empty_search_and_all_returns_everything_in_order(self, records) -> None:
        result = filter_records(records, "", RiskFilter.ALL)

        assert [r.id for r in result] == ["audit-1", "audit-2", "audit-3"]

    def test_search_matches_name_or_description(self, records) -> None:
        """Test that 'vault' matches a name and a description, any case."""
        result = filter_records(records, "vault")

        assert [r.id for r in result] == ["audit-1", "audit-2"]

    def test_description_only_match(self, records) -> None:
        result = filter_records(records, "price")

        assert [r.id for r in result] == ["audit-3"]

    def test_risk_filter(self, records) -> None:
        assert [r.id for r in filter_records(records, "", RiskFilter.HIGH)] == ["audit-1"]
        assert [r.id for r in filter_records(records, "", RiskFilter.MEDIUM)] == ["audit-2"]
        assert [r.id for r in filter_records(records, "", RiskFilter.LOW)] == ["audit-3"]

    def test_search_and_filter_combine(self, records) -> None:
        result = filter_records(records, "vault", RiskFilter.MEDIUM)

        assert [r.id for r in result] == ["audit-2"]

    def test_filter_by_value_string(self, records) -> None:
        assert [r.id for r in filter_records(records, "", "low")] == ["audit-3"]

    def test_unknown_filter_value_raises(self, records) -> None:
        with pytest.raises(ValueError):
            filter_records(records, "", "critical")

    def test_no_match(self, records) -> None:
        assert filter_records(records, "lending") == ()
