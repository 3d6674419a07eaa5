"""
Pytest configuration and shared fixtures.
"""

import pytest
import json
from pathlib import Path
from typing import Dict, Any, Callable

from resumecheck.snapshot import EmploymentSnapshot


@pytest.fixture
def previous_payload() -> Dict[str, Any]:
    """Resume data stored from a candidate's first submission."""
    return {
        "clientNames": ["Velocity", "HMS", "FIS, Irving, TX"],
        "jobTitles": ["Senior Developer", "Developer", "Junior Developer"],
        "relevantDates": ["Feb 2023- Present", "Sep 2022– Feb 2023", "July 2020 – Aug 2022"],
    }


@pytest.fixture
def previous_snapshot(previous_payload) -> EmploymentSnapshot:
    return EmploymentSnapshot.of(
        client_names=previous_payload["clientNames"],
        job_titles=previous_payload["jobTitles"],
        relevant_dates=previous_payload["relevantDates"],
    )


@pytest.fixture
def experience_records():
    """Experience records in the mixed shapes produced by resume extraction."""
    return [
        {"company": "Velocity", "title": "Senior Developer", "dates": "Feb 2023- Present"},
        {"company": "HMS", "position": "Developer", "startDate": "Sep 2022", "endDate": "Feb 2023"},
        {"company": "FIS, Irving, TX", "position": "Junior Developer", "startDate": "July 2020"},
    ]


@pytest.fixture
def write_json(tmp_path) -> Callable[[str, Any], Path]:
    """Write a JSON document into tmp_path and return its path."""
    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2))
        return path
    return _write
