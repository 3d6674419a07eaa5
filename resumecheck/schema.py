from typing import Any, Dict, List, Tuple

SNAPSHOT_FIELDS = ["clientNames", "jobTitles", "relevantDates"]


class SnapshotValidationError(ValueError):
    """Raised when an employment snapshot payload cannot be used."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid snapshot")


def _is_str_list(v: Any) -> bool:
    return isinstance(v, list) and all(isinstance(item, str) for item in v)


def validate_snapshot_payload(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Every field is optional; null and missing both mean "no information".
    """
    if not isinstance(data, dict):
        return ["Snapshot must be a JSON object"]

    errors: List[str] = []
    for f in SNAPSHOT_FIELDS:
        value = data.get(f)
        if value is None:
            continue
        if not _is_str_list(value):
            errors.append(f"Field '{f}' must be a list of strings if provided")
    return errors


def validate_snapshot_strict(data: Dict[str, Any]) -> Tuple[bool, List[str]]:
    """
    Stricter checks for snapshots fed to cross-candidate checks.
    Requires employers and no orphan titles/dates past the employer list.
    """
    errors = validate_snapshot_payload(data)
    if errors:
        return False, errors

    clients = data.get("clientNames")
    if not clients:
        errors.append("Field 'clientNames' must be a non-empty list")
    elif any(not c.strip() for c in clients):
        errors.append("Field 'clientNames' must not contain empty names")
    else:
        for f in ("jobTitles", "relevantDates"):
            values = data.get(f) or []
            if len(values) > len(clients):
                errors.append(
                    f"Field '{f}' has {len(values)} entries but only {len(clients)} employers"
                )

    return len(errors) == 0, errors
