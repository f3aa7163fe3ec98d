"""Read-only analytics derived from the stored profile."""

from collections import Counter
from dataclasses import dataclass, field

from ..db.storage import Storage
from ..models.challenge import Category, Challenge, get_challenge
from ..models.user_profile import UserProfile

HISTORY_DAYS = 7


def streak_history(current_streak: int, days: int = HISTORY_DAYS) -> list[int]:
    """Approximate the streak value for each of the last ``days`` days.

    Only the current streak is stored, so the series is reconstructed by
    counting back from today. Index 0 is the oldest day, the last index is
    today.
    """
    history = []
    for distance in range(days - 1, -1, -1):
        if distance <= current_streak:
            history.append(current_streak - distance)
        else:
            history.append(0)
    return history


def category_breakdown(challenges: list[Challenge]) -> list[tuple[Category, int]]:
    """Count completions per category, most frequent first."""
    return Counter(c.category for c in challenges).most_common()


@dataclass
class AnalyticsSnapshot:
    completed_challenges: list[Challenge] = field(default_factory=list)
    streak_history: list[int] = field(default_factory=lambda: [0] * HISTORY_DAYS)
    category_breakdown: list[tuple[Category, int]] = field(default_factory=list)

    @property
    def current_streak(self) -> int:
        return self.streak_history[-1] if self.streak_history else 0

    @property
    def total_completed(self) -> int:
        return len(self.completed_challenges)

    def to_dict(self) -> dict:
        return {
            "current_streak": self.current_streak,
            "total_completed": self.total_completed,
            "streak_history": self.streak_history,
            "category_breakdown": [
                {"category": category.value, "count": count}
                for category, count in self.category_breakdown
            ],
            "completed_challenges": [c.to_dict() for c in self.completed_challenges],
        }


def compute_analytics(profile: UserProfile) -> AnalyticsSnapshot:
    """Project a profile into chart data.

    Completed ids that are not in the catalog are skipped.
    """
    completed = [
        challenge
        for challenge in map(get_challenge, profile.completed_challenges)
        if challenge is not None
    ]
    return AnalyticsSnapshot(
        completed_challenges=completed,
        streak_history=streak_history(profile.streak_count),
        category_breakdown=category_breakdown(completed),
    )


class AnalyticsEngine:
    """Holds the latest snapshot for the analytics tab."""

    def __init__(self, storage: Storage):
        self.storage = storage
        self.state = AnalyticsSnapshot()

    async def reload(self) -> AnalyticsSnapshot:
        profile = await self.storage.load_profile()
        self.state = compute_analytics(profile) if profile is not None else AnalyticsSnapshot()
        return self.state
