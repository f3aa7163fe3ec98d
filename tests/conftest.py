"""Pytest configuration and fixtures."""

import random
import tempfile
from datetime import datetime, time, timedelta
from pathlib import Path

import pytest

from challengely.clients.base import FeedbackOutcome, ImpactIntensity
from challengely.db import Storage, init_db
from challengely.models.challenge import Category, Difficulty
from challengely.models.user_profile import UserProfile


class RecordingHaptics:
    """Haptics double that remembers every cue."""

    def __init__(self):
        self.impacts: list[ImpactIntensity] = []
        self.notifications: list[FeedbackOutcome] = []

    def impact(self, intensity: ImpactIntensity) -> None:
        self.impacts.append(intensity)

    def notify(self, outcome: FeedbackOutcome) -> None:
        self.notifications.append(outcome)


class FakeNotificationScheduler:
    """Scheduler double with a switchable permission answer."""

    def __init__(self, granted: bool = True):
        self.granted = granted
        self.permission_requests = 0
        self.daily: list[tuple[time, str]] = []
        self.weekly: list[tuple[time, str, int | None]] = []
        self.once: list[tuple[datetime, str]] = []

    async def request_permission(self) -> bool:
        self.permission_requests += 1
        return self.granted

    async def schedule_daily(self, at: time, body: str) -> None:
        self.daily.append((at, body))

    async def schedule_weekly(self, at: time, body: str, weekday: int | None = None) -> None:
        self.weekly.append((at, body, weekday))

    async def schedule_once(self, fire_at: datetime, body: str) -> None:
        self.once.append((fire_at, body))


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.current = now

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


async def _no_sleep(delay: float) -> None:
    return None


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
async def storage(temp_db_path):
    """Storage over a freshly initialized database."""
    await init_db(temp_db_path)
    return Storage(temp_db_path)


@pytest.fixture
def haptics():
    return RecordingHaptics()


@pytest.fixture
def notifications():
    return FakeNotificationScheduler()


@pytest.fixture
def clock():
    """Clock fixed at 2024-03-15 09:30 (a Friday)."""
    return FixedClock(datetime(2024, 3, 15, 9, 30))


@pytest.fixture
def no_sleep():
    """Stand-in for asyncio.sleep that returns at once."""
    return _no_sleep


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def sample_user_profile():
    """Create a sample user profile for testing."""
    return UserProfile(
        interests={Category.FITNESS, Category.MINDFULNESS},
        difficulty=Difficulty.HARD,
        streak_count=3,
        completed_challenges=["morning-meditation", "hiit-workout", "hiit-workout"],
        last_completion_date=datetime(2024, 3, 14, 18, 0),
    )
