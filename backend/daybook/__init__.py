"""Daybook — journaling backend: one entry per day, moods, tags, streaks, analytics."""

__version__ = "1.0.0"
