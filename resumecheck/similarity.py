"""
Cross-candidate employment history similarity.

Two different candidates presenting the same employers with the same dates is
a common resume-fraud pattern (shared templates, fabricated histories). These
functions score a candidate's history against histories the caller already
loaded; nothing here touches storage.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Mapping, Optional, Sequence

from .constants import DEFAULT_SIMILARITY_THRESHOLD
from .normalize import date_parts, employer_key, normalize_date, normalize_employer
from .schema import SnapshotValidationError
from .snapshot import EmploymentSnapshot

COMPANY_MATCH_THRESHOLD = 90.0
DATE_PART_MATCH_RATIO = 0.8
DATE_MATCH_THRESHOLD = 80.0


@dataclass(frozen=True)
class HistoryMatch:
    candidate_id: Hashable
    similarity_score: int
    client_names: List[str]
    relevant_dates: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "candidateId": self.candidate_id,
            "similarityScore": self.similarity_score,
            "clientNames": list(self.client_names),
            "relevantDates": list(self.relevant_dates),
        }


@dataclass(frozen=True)
class SuspiciousPattern:
    type: str
    severity: str
    message: str
    detail: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "type": self.type,
            "severity": self.severity,
            "message": self.message,
            "detail": self.detail,
        }


@dataclass(frozen=True)
class EmploymentCheck:
    message: str
    high_similarity_matches: List[HistoryMatch] = field(default_factory=list)
    identical_chronology_matches: List[HistoryMatch] = field(default_factory=list)
    total_checked: int = 0
    suspicious_patterns: List[SuspiciousPattern] = field(default_factory=list)

    @property
    def has_similar_histories(self) -> bool:
        return len(self.high_similarity_matches) > 0

    @property
    def has_identical_chronology(self) -> bool:
        return len(self.identical_chronology_matches) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "hasSimilarHistories": self.has_similar_histories,
            "hasIdenticalChronology": self.has_identical_chronology,
            "highSimilarityMatches": [m.to_dict() for m in self.high_similarity_matches],
            "identicalChronologyMatches": [m.to_dict() for m in self.identical_chronology_matches],
            "totalCandidatesChecked": self.total_checked,
            "suspiciousPatterns": [p.to_dict() for p in self.suspicious_patterns],
        }


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _dates_match(date: str, other: str) -> bool:
    if normalize_date(date) == normalize_date(other):
        return True
    parts = date_parts(date)
    other_parts = date_parts(other)
    return len(parts) > 0 and all(p in other_parts for p in parts)


def similarity_score(
    client_names: Sequence[str],
    relevant_dates: Sequence[str],
    other: EmploymentSnapshot,
) -> int:
    """
    Percentage (0-100) of the input employers and dates found in `other`.

    Employers compare on the part before the first comma, case-insensitive.
    Dates match exactly or when every month/year token of the input date
    appears in the other date.
    """
    other_names = {normalize_employer(n) for n in other.client_names or []}
    other_dates = other.relevant_dates or []

    name_matches = [n for n in client_names if normalize_employer(n) in other_names]
    date_matches = [
        d for d in relevant_dates if any(_dates_match(d, od) for od in other_dates)
    ]

    total = len(client_names) + len(relevant_dates)
    if total == 0:
        return 0
    return _round_half_up((len(name_matches) + len(date_matches)) / total * 100)


def has_identical_chronology(snapshot: EmploymentSnapshot, other: EmploymentSnapshot) -> bool:
    """True when `other` lists essentially the same companies and dates."""
    input_keys = [employer_key(n) for n in snapshot.client_names or []]
    other_keys = {employer_key(n) for n in other.client_names or []}

    matching = [k for k in input_keys if k in other_keys]
    company_pct = len(matching) / max(len(input_keys), 1) * 100
    if company_pct < COMPANY_MATCH_THRESHOLD:
        return False

    dates = snapshot.relevant_dates or []
    other_dates = other.relevant_dates or []
    if not dates or not other_dates:
        return True

    other_parts = [date_parts(d) for d in other_dates]
    matching_dates = 0
    for parts in (date_parts(d) for d in dates):
        best = max(sum(1 for p in parts if p in op) for op in other_parts)
        score = best / len(parts) if parts else 0
        if score >= DATE_PART_MATCH_RATIO:
            matching_dates += 1

    return matching_dates / len(dates) * 100 >= DATE_MATCH_THRESHOLD


def find_similar_histories(
    snapshot: EmploymentSnapshot,
    others: Mapping[Hashable, EmploymentSnapshot],
    exclude: Optional[Hashable] = None,
) -> List[HistoryMatch]:
    """Score every other history, keep non-zero scores, best first."""
    names = snapshot.client_names or []
    dates = snapshot.relevant_dates or []

    matches = []
    for candidate_id, other in others.items():
        if exclude is not None and candidate_id == exclude:
            continue
        score = similarity_score(names, dates, other)
        if score > 0:
            matches.append(
                HistoryMatch(
                    candidate_id=candidate_id,
                    similarity_score=score,
                    client_names=list(other.client_names or []),
                    relevant_dates=list(other.relevant_dates or []),
                )
            )
    # sorted() is stable, so equal scores keep input order
    return sorted(matches, key=lambda m: m.similarity_score, reverse=True)


def check_employment_history(
    snapshot: EmploymentSnapshot,
    others: Mapping[Hashable, EmploymentSnapshot],
    exclude: Optional[Hashable] = None,
    threshold: int = DEFAULT_SIMILARITY_THRESHOLD,
) -> EmploymentCheck:
    """
    Compare one candidate's history against other candidates' histories.

    Args:
        snapshot: History of the candidate being validated
        others: Candidate id -> history for everyone else on file
        exclude: Candidate id to skip (usually the candidate's own record)
        threshold: Minimum similarity score for a high-similarity match

    Returns:
        EmploymentCheck with matches and suspicious patterns

    Raises:
        SnapshotValidationError: If the snapshot lists no employers
    """
    if not snapshot.client_names:
        raise SnapshotValidationError(["clientNames must be a non-empty list"])

    similar = find_similar_histories(snapshot, others, exclude=exclude)
    high = [m for m in similar if m.similarity_score >= threshold]
    identical = [
        m
        for m in similar
        if has_identical_chronology(snapshot, others[m.candidate_id])
    ]

    patterns: List[SuspiciousPattern] = []
    if identical:
        patterns.append(
            SuspiciousPattern(
                type="IDENTICAL_CHRONOLOGY",
                severity="HIGH",
                message=f"{len(identical)} other candidate(s) have identical employer sequence and dates",
                detail=(
                    "Same companies in same order with matching employment dates strongly "
                    "suggests resume fraud. Consider rejecting this candidate or requiring "
                    "additional verification."
                ),
            )
        )
    if high:
        patterns.append(
            SuspiciousPattern(
                type="HIGH_SIMILARITY",
                severity="MEDIUM",
                message=f"{len(high)} other candidate(s) have >{threshold}% matching employment histories",
                detail=(
                    "Extremely similar work histories may indicate resume fraud, template "
                    "usage, or legitimate similar career paths. Review carefully and compare "
                    "specific details."
                ),
            )
        )

    if identical:
        message = (
            f"CRITICAL: Found {len(identical)} candidates with identical job chronology. "
            "This is a high fraud risk pattern."
        )
    elif high:
        message = (
            f"WARNING: Found {len(high)} candidates with >{threshold}% similar "
            "employment history. Review carefully."
        )
    else:
        message = "Employment history validation complete"

    return EmploymentCheck(
        message=message,
        high_similarity_matches=high,
        identical_chronology_matches=identical,
        total_checked=len(similar),
        suspicious_patterns=patterns,
    )
