"""Employment history comparison and resume fraud-risk checks."""

__version__ = "0.1.0"
