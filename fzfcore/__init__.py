"""Scoring schemes, Latin normalization, ANSI color extraction, item storage and history."""

__version__ = "0.62.0"