"""Stats engine: aggregate risk statistics over a record set."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from fhe_audit.domain.models.audit_record import AuditRecord
from fhe_audit.domain.models.risk import RiskBand
from fhe_audit.domain.models.risk_statistics import EMPTY_STATISTICS, RiskStatistics

_ONE_DECIMAL = Decimal("0.1")


def round_half_up(value: Decimal, quantum: Decimal = _ONE_DECIMAL) -> float:
    """Round to the given quantum, halves away from zero (2.25 -> 2.3)."""
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def compute_stats(records: Iterable[AuditRecord]) -> RiskStatistics:
    """Compute risk statistics for a record set.

    Every record lands in exactly one band, so the band counts always
    sum to the total.

    Args:
        records: Records to aggregate.

    Returns:
        RiskStatistics with band counts and the mean public score
        rounded half-up to one decimal, or 0 for an empty set.
    """
    counts = {band: 0 for band in RiskBand}
    score_sum = 0
    total = 0
    for record in records:
        counts[record.risk_band] += 1
        score_sum += record.public_vulnerability_score
        total += 1

    if total == 0:
        return EMPTY_STATISTICS

    return RiskStatistics(
        total=total,
        high_risk=counts[RiskBand.HIGH],
        medium_risk=counts[RiskBand.MEDIUM],
        low_risk=counts[RiskBand.LOW],
        avg_vulnerability=round_half_up(Decimal(score_sum) / Decimal(total)),
    )
