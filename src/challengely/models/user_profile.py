"""User profile data model."""

from dataclasses import dataclass, field
from datetime import date, datetime

from .challenge import Category, Difficulty


@dataclass
class UserProfile:
    """Preferences and challenge history of the single local user."""

    interests: set[Category] = field(default_factory=set)
    difficulty: Difficulty = Difficulty.MEDIUM
    streak_count: int = 0
    completed_challenges: list[str] = field(default_factory=list)
    last_completion_date: datetime | None = None  # local time

    def is_completed_on(self, day: date) -> bool:
        """Check whether a challenge was completed on the given day."""
        if self.last_completion_date is None:
            return False
        return self.last_completion_date.date() == day

    def days_since_last_completion(self, today: date) -> int | None:
        """Whole calendar days between the last completion and today."""
        if self.last_completion_date is None:
            return None
        return (today - self.last_completion_date.date()).days

    def record_completion(self, challenge_id: str, now: datetime) -> bool:
        """Apply a completion to the streak and history.

        Completions are counted at most once per calendar day.

        Args:
            challenge_id: Catalog id of the completed challenge
            now: Current local time

        Returns:
            True if the completion was recorded, False if one already
            happened on the same day
        """
        today = now.date()
        if self.is_completed_on(today):
            return False

        delta = self.days_since_last_completion(today)
        if delta is None:
            self.streak_count = 1
        elif delta == 1:
            self.streak_count += 1
        elif delta > 1:
            self.streak_count = 1
        # delta <= 0 leaves the streak alone (clock moved backwards)

        self.completed_challenges.append(challenge_id)
        self.last_completion_date = now
        return True

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "interests": sorted(c.value for c in self.interests),
            "difficulty": self.difficulty.value,
            "streak_count": self.streak_count,
            "completed_challenges": list(self.completed_challenges),
            "last_completion_date": (
                self.last_completion_date.isoformat()
                if self.last_completion_date
                else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Create from dictionary."""
        last_completion = None
        if data.get("last_completion_date"):
            last_completion = datetime.fromisoformat(data["last_completion_date"])

        return cls(
            interests={Category(c) for c in data.get("interests", [])},
            difficulty=Difficulty(data.get("difficulty", "medium")),
            streak_count=int(data.get("streak_count", 0)),
            completed_challenges=list(data.get("completed_challenges", [])),
            last_completion_date=last_completion,
        )

    def get_summary(self) -> str:
        """Generate a short human-readable summary."""
        interests = ", ".join(sorted(c.display_name for c in self.interests))
        summary = f"Interests: {interests or 'all categories'}\n"
        summary += f"Difficulty: {self.difficulty.display_name}\n"
        summary += f"Streak: {self.streak_count} day(s)\n"
        summary += f"Completed challenges: {len(self.completed_challenges)}\n"
        if self.last_completion_date:
            summary += (
                f"Last completion: {self.last_completion_date.strftime('%Y-%m-%d %H:%M')}\n"
            )
        return summary
