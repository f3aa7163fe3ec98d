"""Tests for data models."""

from datetime import date, datetime, time

import pytest

from challengely.models.challenge import (
    CHALLENGE_CATALOG,
    DEFAULT_CHALLENGE_SECONDS,
    Category,
    Challenge,
    Difficulty,
    get_challenge,
    select_todays_challenge,
)
from challengely.models.message import Message
from challengely.models.notifications import (
    NotificationFrequency,
    NotificationSettings,
    ScheduledNotification,
    parse_time,
)
from challengely.models.share import ShareCard
from challengely.models.user_profile import UserProfile

# 2024-03-15 is day 75 of the year
DAY = date(2024, 3, 15)


class TestChallengeCatalog:
    """Tests for the challenge catalog and daily selection."""

    def test_catalog_ids_are_unique(self):
        ids = [c.id for c in CHALLENGE_CATALOG]
        assert len(ids) == len(set(ids)) == 6

    def test_get_challenge(self):
        challenge = get_challenge("hiit-workout")
        assert challenge.category == Category.FITNESS
        assert challenge.difficulty == Difficulty.HARD
        assert challenge.duration_seconds == 1200
        assert get_challenge("no-such-challenge") is None

    def test_duration_falls_back_to_default(self):
        challenge = Challenge(
            id="x",
            title="X",
            description="",
            category=Category.SOCIAL,
            difficulty=Difficulty.EASY,
        )
        assert challenge.duration_seconds == DEFAULT_CHALLENGE_SECONDS

    def test_select_filters_by_interest(self):
        """Only creativity challenges qualify; day 75 picks the second."""
        challenge = select_todays_challenge({Category.CREATIVITY}, DAY)
        assert challenge.id == "digital-art-creation"

    def test_select_single_candidate(self):
        for offset in range(3):
            day = date(2024, 1, 1 + offset)
            assert select_todays_challenge({Category.FITNESS}, day).id == "hiit-workout"

    def test_select_without_interests_uses_full_catalog(self):
        challenge = select_todays_challenge(set(), DAY)
        assert challenge == CHALLENGE_CATALOG[75 % 6]

    def test_select_falls_back_when_nothing_matches(self):
        catalog = tuple(c for c in CHALLENGE_CATALOG if c.category != Category.SOCIAL)
        challenge = select_todays_challenge({Category.SOCIAL}, DAY, catalog)
        assert challenge in catalog

    def test_select_is_deterministic(self):
        interests = {Category.LEARNING, Category.MINDFULNESS}
        assert select_todays_challenge(interests, DAY) == select_todays_challenge(
            interests, DAY
        )

    def test_challenge_round_trip(self):
        challenge = CHALLENGE_CATALOG[0]
        assert Challenge.from_dict(challenge.to_dict()) == challenge


class TestUserProfile:
    """Tests for UserProfile model."""

    def test_first_completion_starts_streak(self):
        profile = UserProfile()
        assert profile.record_completion("hiit-workout", datetime(2024, 3, 15, 9, 0))
        assert profile.streak_count == 1
        assert profile.completed_challenges == ["hiit-workout"]
        assert profile.is_completed_on(date(2024, 3, 15))

    def test_consecutive_day_extends_streak(self, sample_user_profile):
        assert sample_user_profile.record_completion("hiit-workout", datetime(2024, 3, 15, 7, 0))
        assert sample_user_profile.streak_count == 4

    def test_gap_resets_streak(self, sample_user_profile):
        assert sample_user_profile.record_completion("hiit-workout", datetime(2024, 3, 17, 7, 0))
        assert sample_user_profile.streak_count == 1

    def test_second_completion_same_day_ignored(self, sample_user_profile):
        before = list(sample_user_profile.completed_challenges)
        assert not sample_user_profile.record_completion(
            "hiit-workout", datetime(2024, 3, 14, 23, 0)
        )
        assert sample_user_profile.streak_count == 3
        assert sample_user_profile.completed_challenges == before

    def test_clock_moved_backwards_keeps_streak(self, sample_user_profile):
        assert sample_user_profile.record_completion("hiit-workout", datetime(2024, 3, 10, 7, 0))
        assert sample_user_profile.streak_count == 3

    def test_to_dict_and_back(self, sample_user_profile):
        data = sample_user_profile.to_dict()
        assert data["interests"] == ["fitness", "mindfulness"]
        assert data["last_completion_date"] == "2024-03-14T18:00:00"

        restored = UserProfile.from_dict(data)
        assert restored == sample_user_profile

    def test_from_dict_defaults(self):
        profile = UserProfile.from_dict({})
        assert profile.interests == set()
        assert profile.difficulty == Difficulty.MEDIUM
        assert profile.last_completion_date is None

    def test_get_summary(self, sample_user_profile):
        summary = sample_user_profile.get_summary()
        assert "Fitness, Mindfulness" in summary
        assert "Hard" in summary
        assert "Streak: 3 day(s)" in summary


class TestNotificationModels:
    """Tests for reminder settings and scheduled notifications."""

    def test_parse_time(self):
        assert parse_time("08:00") == time(8, 0)
        assert parse_time("21:45") == time(21, 45)
        with pytest.raises(ValueError):
            parse_time("25:00")
        with pytest.raises(ValueError):
            parse_time("soon")

    def test_defaults(self):
        settings = NotificationSettings()
        assert settings.enabled
        assert settings.reminder_time == time(8, 0)
        assert settings.frequency == NotificationFrequency.DAILY
        assert settings.display == "Daily at 8:00 AM"

    def test_display_afternoon(self):
        settings = NotificationSettings(
            reminder_time=time(18, 5), frequency=NotificationFrequency.WEEKLY
        )
        assert settings.display == "Weekly at 6:05 PM"

    def test_settings_round_trip(self):
        settings = NotificationSettings(
            enabled=False,
            reminder_time=time(7, 30),
            frequency=NotificationFrequency.WEEKLY,
            weekday=3,
        )
        data = settings.to_dict()
        assert data["time"] == "07:30"
        assert NotificationSettings.from_dict(data) == settings

    def test_scheduled_notification_describe(self):
        weekly = ScheduledNotification(
            kind="weekly", title="t", body="b", reminder_time=time(9, 0), weekday=1
        )
        assert weekly.describe() == "weekly on ISO day 1 at 09:00"

        once = ScheduledNotification(
            kind="once", title="t", body="b", fire_at=datetime(2024, 3, 15, 9, 31)
        )
        assert once.describe() == "once at 2024-03-15 09:31"
        assert ScheduledNotification.from_dict(once.to_dict()) == once


class TestMessage:
    """Tests for chat messages."""

    def test_ids_are_unique(self):
        assert Message("hi", True).id != Message("hi", True).id

    def test_from_dict(self):
        message = Message.from_dict(
            {
                "id": "abc",
                "text": "Hello",
                "is_from_user": False,
                "timestamp": "2024-03-15T09:30:00",
            }
        )
        assert message.id == "abc"
        assert not message.is_from_user
        assert message.timestamp == datetime(2024, 3, 15, 9, 30)


class TestShareCard:
    """Tests for the share card."""

    def test_for_challenge(self):
        card = ShareCard.for_challenge(get_challenge("morning-meditation"), 5)
        assert card.headline == "🔥 Day 5 Streak!"
        assert card.title == "Morning Meditation"
        assert card.footer == "Challengely"

    def test_render_is_boxed(self):
        card = ShareCard.for_challenge(get_challenge("hiit-workout"), 2)
        lines = card.render(width=40).splitlines()
        assert lines[0] == lines[-1] == "+" + "-" * 38 + "+"
        assert all(line.startswith("| ") and line.endswith(" |") for line in lines[1:-1])
        assert any("HIIT Workout" in line for line in lines)
