"""Risk statistics value object.

Derived from a record set and recomputed on every change. Never stored.
"""

from __future__ import annotations

from dataclasses import dataclass

from fhe_audit.domain.models.risk import RiskBand


@dataclass(frozen=True)
class RiskStatistics:
    """Aggregate risk figures for a record set.

    Attributes:
        total: Number of records.
        high_risk: Records with score >= 8.
        medium_risk: Records with 5 <= score < 8.
        low_risk: Records with score < 5.
        avg_vulnerability: Mean public score, one decimal place.
    """

    total: int = 0
    high_risk: int = 0
    medium_risk: int = 0
    low_risk: int = 0
    avg_vulnerability: float = 0.0

    def count(self, band: RiskBand) -> int:
        """Number of records in a band."""
        if band is RiskBand.HIGH:
            return self.high_risk
        if band is RiskBand.MEDIUM:
            return self.medium_risk
        return self.low_risk

    def share(self, band: RiskBand) -> float:
        """Percentage of records in a band.

        The denominator is at least 1 so an empty set yields 0.0 for
        every band.
        """
        return self.count(band) / max(self.total, 1) * 100


EMPTY_STATISTICS = RiskStatistics()
