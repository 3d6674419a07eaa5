"""
Resume Version Comparison.

Responsibilities:
- Diff the employer lists of two submissions from the same candidate.
- Detect title and date changes for employers present in both submissions.
- Combine the diff with a risk level into a ComparisonResult.

Non-Responsibilities:
- No parsing of resume files or raw records (see adapters).
- No logging, storage or caching.

Invariant:
Every function here is total: absent (None) inputs produce empty results,
never exceptions.
"""

from typing import List, Optional, Sequence

from .risk import evaluate_risk_level
from .snapshot import ChangeRecord, ComparisonResult, EmploymentSnapshot


def _at(values: Sequence[str], index: int) -> str:
    if index < len(values) and values[index] is not None:
        return values[index]
    return ""


def find_new_items(
    original: Optional[Sequence[str]], updated: Optional[Sequence[str]]
) -> List[str]:
    """Items of `updated` that do not appear anywhere in `original`."""
    if original is None or updated is None:
        return []
    return [item for item in updated if item not in original]


def find_removed_items(
    original: Optional[Sequence[str]], updated: Optional[Sequence[str]]
) -> List[str]:
    """Items of `original` that do not appear anywhere in `updated`."""
    if original is None or updated is None:
        return []
    return [item for item in original if item not in updated]


def _find_changed_values(
    original_clients: Optional[Sequence[str]],
    original_values: Optional[Sequence[str]],
    updated_clients: Optional[Sequence[str]],
    updated_values: Optional[Sequence[str]],
) -> List[ChangeRecord]:
    if (
        original_clients is None
        or original_values is None
        or updated_clients is None
        or updated_values is None
    ):
        return []

    updated_clients = list(updated_clients)
    changes: List[ChangeRecord] = []
    for index, employer in enumerate(original_clients):
        if employer not in updated_clients:
            continue
        # Repeated employer names always pair with the first current stint.
        updated_index = updated_clients.index(employer)
        old = _at(original_values, index)
        new = _at(updated_values, updated_index)
        if old != new:
            changes.append(ChangeRecord(employer=employer, old=old, new=new))
    return changes


def find_changed_titles(
    original_clients: Optional[Sequence[str]],
    original_titles: Optional[Sequence[str]],
    updated_clients: Optional[Sequence[str]],
    updated_titles: Optional[Sequence[str]],
) -> List[ChangeRecord]:
    """Job titles that differ for employers listed in both submissions."""
    return _find_changed_values(
        original_clients, original_titles, updated_clients, updated_titles
    )


def find_changed_dates(
    original_clients: Optional[Sequence[str]],
    original_dates: Optional[Sequence[str]],
    updated_clients: Optional[Sequence[str]],
    updated_dates: Optional[Sequence[str]],
) -> List[ChangeRecord]:
    """Date ranges that differ for employers listed in both submissions."""
    return _find_changed_values(
        original_clients, original_dates, updated_clients, updated_dates
    )


def compare_resume_versions(
    previous: EmploymentSnapshot, current: EmploymentSnapshot
) -> ComparisonResult:
    """
    Compare a candidate's previous submission against a new one.

    Args:
        previous: Snapshot stored from the earlier submission
        current: Snapshot extracted from the resubmitted resume

    Returns:
        ComparisonResult with the employer diff, per-employer title/date
        changes and the overall risk level
    """
    new_employers = find_new_items(previous.client_names, current.client_names)
    removed_employers = find_removed_items(previous.client_names, current.client_names)

    changed_dates = find_changed_dates(
        previous.client_names,
        previous.relevant_dates,
        current.client_names,
        current.relevant_dates,
    )
    changed_titles = find_changed_titles(
        previous.client_names,
        previous.job_titles,
        current.client_names,
        current.job_titles,
    )

    has_changes = bool(new_employers or removed_employers or changed_dates or changed_titles)

    return ComparisonResult(
        new_employers=new_employers,
        removed_employers=removed_employers,
        changed_titles=changed_titles,
        changed_dates=changed_dates,
        has_changes=has_changes,
        overall_risk=evaluate_risk_level(
            new_employers, removed_employers, changed_dates, changed_titles
        ),
    )
