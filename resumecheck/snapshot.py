"""
Employment history value types.

An EmploymentSnapshot is three parallel sequences (employers, titles, dates)
extracted from one resume submission. Index i across the three sequences
describes one employment entry. Sequences may be missing (None) or have
unequal lengths.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence


class RiskLevel(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _as_list(values: Optional[Sequence[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    return list(values)


@dataclass(frozen=True)
class EmploymentSnapshot:
    client_names: Optional[List[str]] = None
    job_titles: Optional[List[str]] = None
    relevant_dates: Optional[List[str]] = None

    @classmethod
    def of(
        cls,
        client_names: Optional[Sequence[str]] = None,
        job_titles: Optional[Sequence[str]] = None,
        relevant_dates: Optional[Sequence[str]] = None,
    ) -> "EmploymentSnapshot":
        """Build a snapshot from any sequences, copying them into lists."""
        return cls(
            client_names=_as_list(client_names),
            job_titles=_as_list(job_titles),
            relevant_dates=_as_list(relevant_dates),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "clientNames": self.client_names,
            "jobTitles": self.job_titles,
            "relevantDates": self.relevant_dates,
        }

    def is_empty(self) -> bool:
        return not (self.client_names or self.job_titles or self.relevant_dates)


@dataclass(frozen=True)
class ChangeRecord:
    """A field that changed for an employer present in both snapshots."""

    employer: str
    old: str
    new: str

    def to_dict(self) -> Dict[str, str]:
        return {"employer": self.employer, "old": self.old, "new": self.new}


@dataclass(frozen=True)
class ComparisonResult:
    new_employers: List[str] = field(default_factory=list)
    removed_employers: List[str] = field(default_factory=list)
    changed_titles: List[ChangeRecord] = field(default_factory=list)
    changed_dates: List[ChangeRecord] = field(default_factory=list)
    has_changes: bool = False
    overall_risk: RiskLevel = RiskLevel.NONE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase shape consumed by the recruiter UI."""
        return {
            "hasChanges": self.has_changes,
            "newEmployers": list(self.new_employers),
            "removedEmployers": list(self.removed_employers),
            "changedDates": [c.to_dict() for c in self.changed_dates],
            "changedTitles": [c.to_dict() for c in self.changed_titles],
            "overallRisk": self.overall_risk.value,
        }
