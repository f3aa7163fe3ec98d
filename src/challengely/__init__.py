"""challengely: daily challenges, streaks, and a pocket assistant."""

__version__ = "0.1.0"
