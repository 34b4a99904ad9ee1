"""Risk bands and risk filters.

A record's risk band is derived from its public vulnerability score:

    score >= 8      -> HIGH
    5 <= score < 8  -> MEDIUM
    score < 5       -> LOW
"""

from __future__ import annotations

from enum import Enum

HIGH_RISK_THRESHOLD = 8
MEDIUM_RISK_THRESHOLD = 5


class RiskBand(Enum):
    """Risk band of an audited project."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskFilter(Enum):
    """Risk filter selectable in the record list.

    ALL passes every record; the others pass only their band.
    """

    ALL = "all"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    def admits(self, band: RiskBand) -> bool:
        """Check whether a record in the given band passes this filter.

        Args:
            band: Risk band of the record.

        Returns:
            True if the record is visible under this filter.
        """
        if self is RiskFilter.ALL:
            return True
        return self.value == band.value


def risk_band_for(score: int) -> RiskBand:
    """Map a public vulnerability score to its risk band.

    Args:
        score: Public vulnerability score.

    Returns:
        HIGH for 8 and above, MEDIUM for 5 to 7, LOW below 5.
    """
    if score >= HIGH_RISK_THRESHOLD:
        return RiskBand.HIGH
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskBand.MEDIUM
    return RiskBand.LOW
