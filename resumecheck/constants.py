"""
Shared constants for resumecheck.
"""

# Minimum score (0-100) for a high-similarity history match
DEFAULT_SIMILARITY_THRESHOLD = 80

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
