import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .constants import DEFAULT_SIMILARITY_THRESHOLD, LOG_LEVELS


def load_env() -> None:
    """Load .env from the working directory if present.
    Variables already set in the environment win.
    """
    env_path = Path.cwd() / ".env"
    if not env_path.exists():
        return
    load_dotenv(dotenv_path=env_path, override=False)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    log_to_file: bool = True
    similarity_threshold: int = DEFAULT_SIMILARITY_THRESHOLD


def load_settings() -> Settings:
    """Read RESUMECHECK_* variables, falling back to defaults."""
    threshold = os.getenv("RESUMECHECK_SIMILARITY_THRESHOLD")
    try:
        similarity_threshold = int(threshold) if threshold else DEFAULT_SIMILARITY_THRESHOLD
    except ValueError:
        raise SystemExit(f"RESUMECHECK_SIMILARITY_THRESHOLD must be an integer, got {threshold!r}")

    log_level = (os.getenv("RESUMECHECK_LOG_LEVEL") or "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise SystemExit(
            f"RESUMECHECK_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
        )

    return Settings(
        log_level=log_level,
        log_dir=Path(os.getenv("RESUMECHECK_LOG_DIR", "logs")),
        log_to_file=_env_bool("RESUMECHECK_LOG_TO_FILE", True),
        similarity_threshold=similarity_threshold,
    )
