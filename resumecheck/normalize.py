import re
from typing import List


def normalize_employer(name: str) -> str:
    # "FIS, Irving, TX" -> "fis"
    return name.split(",")[0].strip().lower()


def employer_key(name: str) -> str:
    """Main company word, used for loose chronology matching."""
    parts = normalize_employer(name).split()
    return parts[0] if parts else ""


def normalize_date(date: str) -> str:
    return date.strip().lower()


_NON_ALNUM = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def date_parts(date: str) -> List[str]:
    # "Sep 2022– Feb 2023" -> ["sep", "2022", "feb", "2023"]
    return [p for p in _NON_ALNUM.sub(" ", normalize_date(date)).split() if p]
