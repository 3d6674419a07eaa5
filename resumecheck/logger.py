"""
Structured logging system for resumecheck.

Provides centralized logging with console and file outputs, plus
metrics tracking for comparison and fraud-check activity.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks how many comparisons ran and which risk levels they produced.
    """

    def __init__(
        self,
        name: str = "resumecheck",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console (stderr)
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()
        self.logger.propagate = False

        self.metrics = {
            "comparisons_run": 0,
            "changes_detected": 0,
            "risk_levels": {},
            "similarity_checks": 0,
            "suspicious_flags": 0,
        }

        # stdout is reserved for command output
        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"resumecheck_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional context."""
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_comparison(self, risk_level: str, has_changes: bool):
        """Record one resume version comparison and its outcome."""
        self.metrics["comparisons_run"] += 1
        if has_changes:
            self.metrics["changes_detected"] += 1
        levels = self.metrics["risk_levels"]
        levels[risk_level] = levels.get(risk_level, 0) + 1

    def record_similarity_check(self):
        self.metrics["similarity_checks"] += 1

    def record_suspicious_flag(self):
        self.metrics["suspicious_flags"] += 1

    def get_metrics(self) -> dict:
        """Return current metrics, including the change rate."""
        metrics_copy = dict(self.metrics)
        metrics_copy["risk_levels"] = dict(self.metrics["risk_levels"])
        runs = metrics_copy["comparisons_run"]
        if runs > 0:
            metrics_copy["change_rate"] = round(metrics_copy["changes_detected"] / runs, 3)
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Resume Check Session Metrics ===")
        self.info(
            f"Comparisons: {metrics['comparisons_run']} "
            f"({metrics['changes_detected']} with changes)"
        )
        self.info(f"Similarity checks: {metrics['similarity_checks']}")
        self.info(f"Suspicious flags raised: {metrics['suspicious_flags']}")

        if metrics["risk_levels"]:
            self.info("Risk Levels:")
            for level, count in metrics["risk_levels"].items():
                self.info(f"  {level}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "resumecheck",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
