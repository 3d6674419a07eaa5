import argparse
import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from . import __version__
from .adapters import snapshot_from_payload
from .comparison import compare_resume_versions
from .constants import LOG_LEVELS
from .env import load_env, load_settings
from .logger import StructuredLogger, get_logger
from .risk import suspicious_flags
from .schema import SnapshotValidationError, validate_snapshot_payload, validate_snapshot_strict
from .snapshot import ComparisonResult
from .similarity import check_employment_history


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise SystemExit(f"Input file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise SystemExit(f"Invalid JSON in {path}: {e}")


def _load_snapshot(path: Path):
    try:
        return snapshot_from_payload(_read_json(path))
    except SnapshotValidationError as e:
        print(f"Invalid snapshot {path}:")
        for err in e.errors:
            print(f" - {err}")
        raise SystemExit(2)


def _print_comparison(result: ComparisonResult) -> None:
    print(f"Risk: {result.overall_risk.value}")
    if not result.has_changes:
        print("No changes in employment history.")
        return
    if result.new_employers:
        print(f"New employers ({len(result.new_employers)}): {', '.join(result.new_employers)}")
    if result.removed_employers:
        print(
            f"Removed employers ({len(result.removed_employers)}): "
            f"{', '.join(result.removed_employers)}"
        )
    for change in result.changed_titles:
        print(f"Title changed at {change.employer}: {change.old!r} -> {change.new!r}")
    for change in result.changed_dates:
        print(f"Dates changed at {change.employer}: {change.old!r} -> {change.new!r}")


def cmd_compare(args: argparse.Namespace, log: StructuredLogger) -> None:
    previous = _load_snapshot(Path(args.previous))
    current = _load_snapshot(Path(args.current))
    log.debug("Loaded snapshots", previous=previous.to_dict(), current=current.to_dict())
    for label, snapshot in (("previous", previous), ("current", current)):
        if snapshot.is_empty():
            log.warning("Snapshot has no employment data", snapshot=label)

    result = compare_resume_versions(previous, current)
    flags = suspicious_flags(result)

    log.record_comparison(result.overall_risk.value, result.has_changes)
    log.info(
        "Compared resume versions",
        previous=args.previous,
        current=args.current,
        risk=result.overall_risk.value,
        new=len(result.new_employers),
        removed=len(result.removed_employers),
    )
    if flags.is_suspicious:
        log.record_suspicious_flag()
        log.warning("Resubmission flagged as suspicious", severity=flags.severity)

    if args.json:
        print(json.dumps({**result.to_dict(), "flags": flags.to_dict()}, indent=2))
        return
    _print_comparison(result)
    if flags.is_suspicious:
        print(f"Flagged [{flags.severity}]: {flags.reason}")


def cmd_validate(args: argparse.Namespace, log: StructuredLogger) -> None:
    payload = _read_json(Path(args.input))
    if args.strict:
        _, errors = validate_snapshot_strict(payload)
    else:
        errors = validate_snapshot_payload(payload)
    if errors:
        log.debug("Snapshot failed validation", input=args.input, errors=errors)
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    print("Valid")


def cmd_similar(args: argparse.Namespace, log: StructuredLogger) -> None:
    snapshot = _load_snapshot(Path(args.input))
    raw_others = _read_json(Path(args.others))
    if not isinstance(raw_others, dict):
        raise SystemExit("Others file must map candidate ids to snapshots")

    others: Dict[str, Any] = {}
    for candidate_id, payload in raw_others.items():
        try:
            others[candidate_id] = snapshot_from_payload(payload)
        except SnapshotValidationError as e:
            log.warning("Skipping invalid snapshot", candidate_id=candidate_id, errors=e.errors)

    try:
        check = check_employment_history(
            snapshot, others, exclude=args.exclude, threshold=args.threshold
        )
    except SnapshotValidationError as e:
        print(f"Invalid input: {e}")
        raise SystemExit(2)

    log.record_similarity_check()
    log.info(
        "Checked employment history similarity",
        checked=check.total_checked,
        high_similarity=len(check.high_similarity_matches),
        identical=len(check.identical_chronology_matches),
    )

    if args.json:
        print(json.dumps(check.to_dict(), indent=2))
        return
    print(check.message)
    print(f"Candidates with any overlap: {check.total_checked}")
    for match in check.high_similarity_matches:
        print(f" - {match.candidate_id}: {match.similarity_score}%")
    for pattern in check.suspicious_patterns:
        print(f"[{pattern.severity}] {pattern.type}: {pattern.message}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    # Load .env if present (RESUMECHECK_LOG_LEVEL, RESUMECHECK_LOG_DIR, etc.)
    load_env()
    settings = load_settings()

    parser = argparse.ArgumentParser(
        prog="resumecheck",
        description="Compare resume submissions and flag suspicious employment history changes",
    )
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Log level (default from RESUMECHECK_LOG_LEVEL)",
    )

    subparsers = parser.add_subparsers(dest="command")
    cmp = subparsers.add_parser("compare", help="Compare two snapshots of one candidate's employment history")
    cmp.add_argument("--previous", required=True, help="Path to the earlier snapshot JSON")
    cmp.add_argument("--current", required=True, help="Path to the resubmitted snapshot JSON")
    cmp.add_argument("--json", action="store_true", help="Print the result as JSON")
    cmp.set_defaults(func=cmd_compare)

    val = subparsers.add_parser("validate", help="Validate a snapshot JSON file")
    val.add_argument("--input", required=True, help="Path to snapshot JSON input")
    val.add_argument("--strict", action="store_true", help="Require employers and aligned titles/dates")
    val.set_defaults(func=cmd_validate)

    sim = subparsers.add_parser("similar", help="Check a history against other candidates' histories")
    sim.add_argument("--input", required=True, help="Path to the candidate's snapshot JSON")
    sim.add_argument("--others", required=True, help="JSON object mapping candidate id to snapshot")
    sim.add_argument("--exclude", help="Candidate id to leave out of the comparison")
    sim.add_argument("--threshold", type=int, default=settings.similarity_threshold, help="High-similarity score threshold (default 80)")
    sim.add_argument("--json", action="store_true", help="Print the result as JSON")
    sim.set_defaults(func=cmd_similar)

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        log = get_logger(
            level=args.log_level,
            log_dir=settings.log_dir,
            enable_file=settings.log_to_file,
        )
        args.func(args, log)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
