"""Challenge catalog models."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from types import MappingProxyType

DEFAULT_CHALLENGE_SECONDS = 600


class Category(str, Enum):
    """Challenge categories a user can be interested in."""

    FITNESS = "fitness"
    CREATIVITY = "creativity"
    MINDFULNESS = "mindfulness"
    LEARNING = "learning"
    SOCIAL = "social"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def emoji(self) -> str:
        return _CATEGORY_EMOJI[self]


_CATEGORY_EMOJI = {
    Category.FITNESS: "💪",
    Category.CREATIVITY: "🎨",
    Category.MINDFULNESS: "🧘",
    Category.LEARNING: "📚",
    Category.SOCIAL: "👥",
}


class Difficulty(str, Enum):
    """How demanding a challenge is."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Challenge:
    """A single entry of the fixed challenge catalog."""

    id: str
    title: str
    description: str
    category: Category
    difficulty: Difficulty
    estimated_time: int | None = None  # seconds

    @property
    def duration_seconds(self) -> int:
        """Countdown length, falling back to the default when unset."""
        return self.estimated_time or DEFAULT_CHALLENGE_SECONDS

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "difficulty": self.difficulty.value,
            "estimated_time": self.estimated_time,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Challenge":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            category=Category(data["category"]),
            difficulty=Difficulty(data["difficulty"]),
            estimated_time=data.get("estimated_time"),
        )


CHALLENGE_CATALOG: tuple[Challenge, ...] = (
    Challenge(
        id="morning-meditation",
        title="Morning Meditation",
        description=(
            "Start your day with a 10-minute mindfulness session to center "
            "yourself and set positive intentions."
        ),
        category=Category.MINDFULNESS,
        difficulty=Difficulty.EASY,
        estimated_time=600,
    ),
    Challenge(
        id="creative-writing-sprint",
        title="Creative Writing Sprint",
        description=(
            "Write continuously for 15 minutes about anything that comes to "
            "mind. Let your creativity flow without judgment."
        ),
        category=Category.CREATIVITY,
        difficulty=Difficulty.MEDIUM,
        estimated_time=900,
    ),
    Challenge(
        id="hiit-workout",
        title="HIIT Workout",
        description=(
            "Complete a 20-minute high-intensity interval training session to "
            "boost your energy and strengthen your body."
        ),
        category=Category.FITNESS,
        difficulty=Difficulty.HARD,
        estimated_time=1200,
    ),
    Challenge(
        id="learn-something-new",
        title="Learn Something New",
        description=(
            "Spend 25 minutes learning about a topic that interests you "
            "through videos, articles, or podcasts."
        ),
        category=Category.LEARNING,
        difficulty=Difficulty.MEDIUM,
        estimated_time=1500,
    ),
    Challenge(
        id="connect-with-someone",
        title="Connect with Someone",
        description=(
            "Reach out to a friend or family member you haven't spoken to in a "
            "while. Have a meaningful conversation."
        ),
        category=Category.SOCIAL,
        difficulty=Difficulty.EASY,
        estimated_time=900,
    ),
    Challenge(
        id="digital-art-creation",
        title="Digital Art Creation",
        description=(
            "Create a digital artwork or design using your favorite app. "
            "Express yourself through colors and shapes."
        ),
        category=Category.CREATIVITY,
        difficulty=Difficulty.HARD,
        estimated_time=1800,
    ),
)

CATALOG_BY_ID = MappingProxyType({c.id: c for c in CHALLENGE_CATALOG})


def get_challenge(challenge_id: str) -> Challenge | None:
    """Look up a catalog entry, returning None for unknown ids."""
    return CATALOG_BY_ID.get(challenge_id)


def select_todays_challenge(
    interests: set[Category] | frozenset[Category],
    day: date,
    catalog: tuple[Challenge, ...] = CHALLENGE_CATALOG,
) -> Challenge:
    """Pick the challenge for a calendar day.

    The catalog is filtered by the user's interests (no filtering when the
    set is empty) and indexed by day of year. If no entry matches the
    interests the full catalog is used instead.

    Args:
        interests: Categories the user selected during onboarding
        day: The local calendar day to select for
        catalog: Catalog to select from

    Returns:
        A member of the catalog
    """
    candidates = [c for c in catalog if not interests or c.category in interests]
    if not candidates:
        candidates = list(catalog)

    day_of_year = day.timetuple().tm_yday
    return candidates[day_of_year % len(candidates)]
