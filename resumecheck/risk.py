"""
Risk classification for resume resubmissions.

Removing employers is the strongest signal, followed by several shifted date
ranges. Title changes alone are weak evidence and pure additions are normal.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .snapshot import ChangeRecord, ComparisonResult, RiskLevel

SUSPICIOUS_REASON = "Significant resume discrepancies detected"


def evaluate_risk_level(
    new_employers: Sequence[str],
    removed_employers: Sequence[str],
    changed_dates: Sequence[ChangeRecord],
    changed_titles: Sequence[ChangeRecord],
) -> RiskLevel:
    """Apply the risk rules in priority order; the first match wins."""
    if len(removed_employers) > 1:
        return RiskLevel.HIGH

    if len(changed_dates) > 1:
        return RiskLevel.HIGH if len(changed_dates) > 2 else RiskLevel.MEDIUM

    if len(removed_employers) == 1 and (changed_dates or changed_titles):
        return RiskLevel.MEDIUM

    if changed_titles:
        return RiskLevel.MEDIUM if len(changed_titles) > 2 else RiskLevel.LOW

    if new_employers and not removed_employers and not changed_dates and not changed_titles:
        return RiskLevel.LOW

    if removed_employers or changed_dates:
        return RiskLevel.LOW
    return RiskLevel.NONE


@dataclass(frozen=True)
class SuspiciousFlags:
    is_suspicious: bool = False
    reason: Optional[str] = None
    severity: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "isSuspicious": self.is_suspicious,
            "suspiciousReason": self.reason,
            "suspiciousSeverity": self.severity,
        }


def suspicious_flags(result: ComparisonResult) -> SuspiciousFlags:
    """
    Decide whether a resubmission should be flagged for recruiter review.

    A result is flagged when it has changes with a non-none risk, and either
    the risk is high or at least one employer was removed.
    """
    if not result.has_changes or result.overall_risk == RiskLevel.NONE:
        return SuspiciousFlags()
    if result.overall_risk != RiskLevel.HIGH and not result.removed_employers:
        return SuspiciousFlags()
    severity = "HIGH" if result.overall_risk == RiskLevel.HIGH else "MEDIUM"
    return SuspiciousFlags(is_suspicious=True, reason=SUSPICIOUS_REASON, severity=severity)
