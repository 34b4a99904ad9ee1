"""Filter engine: visible subset of the record list."""

from __future__ import annotations

from collections.abc import Iterable

from fhe_audit.domain.models.audit_record import AuditRecord
from fhe_audit.domain.models.risk import RiskFilter


def filter_records(
    records: Iterable[AuditRecord],
    search_term: str = "",
    risk_filter: RiskFilter | str = RiskFilter.ALL,
) -> tuple[AuditRecord, ...]:
    """Select the records matching a search term and a risk filter.

    The search is a case-insensitive substring match against the name
    or the description; an empty term matches everything. Input order
    is preserved.

    Args:
        records: Records to filter.
        search_term: Text to look for.
        risk_filter: A RiskFilter or its value ("all", "high", ...).

    Returns:
        Matching records in their original order.

    Raises:
        ValueError: If risk_filter is not a known filter value.
    """
    if not isinstance(risk_filter, RiskFilter):
        risk_filter = RiskFilter(risk_filter)
    return tuple(
        record
        for record in records
        if record.matches_text(search_term) and risk_filter.admits(record.risk_band)
    )
