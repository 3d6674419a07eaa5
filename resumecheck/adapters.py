"""
Boundary adapters producing EmploymentSnapshot values.

Upstream code hands us employment data in several shapes: the camelCase
parallel arrays stored per submission, snake_case dicts from Python callers,
and per-job experience records whose field names vary (title/position,
dates/startDate+endDate). All of them are mapped here so the comparator only
ever sees one shape.
"""

from typing import Any, Dict, Iterable, List, Optional

from .schema import SnapshotValidationError, validate_snapshot_payload
from .snapshot import EmploymentSnapshot

_KEY_ALIASES = {
    "clientNames": ("clientNames", "client_names"),
    "jobTitles": ("jobTitles", "job_titles"),
    "relevantDates": ("relevantDates", "relevant_dates"),
}


def _pick(data: Dict[str, Any], keys: Iterable[str]) -> Optional[List[str]]:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def snapshot_from_payload(data: Dict[str, Any]) -> EmploymentSnapshot:
    """
    Build a snapshot from a stored resume-data payload.

    Args:
        data: Dict with clientNames/jobTitles/relevantDates (or snake_case)

    Returns:
        EmploymentSnapshot; missing or null fields become None

    Raises:
        SnapshotValidationError: If a field is present but not a list of strings
    """
    if not isinstance(data, dict):
        raise SnapshotValidationError(["Snapshot must be a JSON object"])

    canonical = {field: _pick(data, aliases) for field, aliases in _KEY_ALIASES.items()}
    errors = validate_snapshot_payload(canonical)
    if errors:
        raise SnapshotValidationError(errors)
    return EmploymentSnapshot.of(
        client_names=canonical["clientNames"],
        job_titles=canonical["jobTitles"],
        relevant_dates=canonical["relevantDates"],
    )


_EXPERIENCE_STR_FIELDS = [
    "company",
    "employer",
    "title",
    "position",
    "dates",
    "startDate",
    "start_date",
    "endDate",
    "end_date",
]


def validate_experience_record(record: Any) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Every known field is optional but must be a string when present.
    """
    if not isinstance(record, dict):
        return ["Experience record must be a JSON object"]

    errors: List[str] = []
    for f in _EXPERIENCE_STR_FIELDS:
        if record.get(f) is not None and not isinstance(record[f], str):
            errors.append(f"Field '{f}' must be a string if provided")
    return errors


def experience_title(record: Dict[str, Any]) -> str:
    return record.get("title") or record.get("position") or ""


def experience_dates(record: Dict[str, Any]) -> str:
    if record.get("dates"):
        return record["dates"]
    start = record.get("startDate") or record.get("start_date")
    end = record.get("endDate") or record.get("end_date")
    if start and end:
        return f"{start} - {end}"
    if start:
        return f"{start} - Present"
    return ""


def snapshot_from_experiences(records: Optional[Iterable[Dict[str, Any]]]) -> EmploymentSnapshot:
    """
    Flatten experience records into parallel employer/title/date lists.

    Raises:
        SnapshotValidationError: If a record is not a dict or holds a
            non-string value in a known field
    """
    if records is None:
        return EmploymentSnapshot()

    clients: List[str] = []
    titles: List[str] = []
    dates: List[str] = []
    errors: List[str] = []
    for index, record in enumerate(records):
        record_errors = validate_experience_record(record)
        if record_errors:
            errors.extend(f"Record {index}: {e}" for e in record_errors)
            continue
        clients.append(record.get("company") or record.get("employer") or "")
        titles.append(experience_title(record))
        dates.append(experience_dates(record))

    if errors:
        raise SnapshotValidationError(errors)
    return EmploymentSnapshot(client_names=clients, job_titles=titles, relevant_dates=dates)
