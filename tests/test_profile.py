"""Tests for the profile engine."""

from datetime import datetime, time

import pytest

from challengely.clients.base import FeedbackOutcome
from challengely.engines.profile import (
    DAILY_BODY,
    PERMISSION_DENIED_MESSAGE,
    TEST_BODY,
    TEST_FAILED_MESSAGE,
    WEEKLY_BODY,
    ProfileEngine,
)
from challengely.models.challenge import Category, Difficulty
from challengely.models.notifications import NotificationFrequency, NotificationSettings


@pytest.fixture
async def engine(storage, notifications, haptics, clock, sample_user_profile):
    await storage.save_profile(sample_user_profile)
    engine = ProfileEngine(storage, notifications, haptics, now=clock)
    await engine.load()
    return engine


class TestLoad:
    """Tests for loading stored values."""

    async def test_load(self, engine, sample_user_profile):
        assert engine.state.user_profile == sample_user_profile
        assert engine.state.notifications == NotificationSettings()
        assert not engine.state.is_loading

    async def test_load_empty_storage(self, storage, notifications, haptics):
        engine = ProfileEngine(storage, notifications, haptics)
        state = await engine.load()
        assert state.user_profile.streak_count == 0
        assert state.notifications.enabled

    async def test_to_dict(self, engine):
        data = engine.state.to_dict()
        assert data["next_notification"] == "Daily at 8:00 AM"
        assert data["profile"]["streak_count"] == 3


class TestEditing:
    """Tests for profile edits."""

    async def test_update_preferences_keeps_history(self, engine, storage):
        await engine.update_preferences(interests={Category.SOCIAL})

        stored = await storage.load_profile()
        assert stored.interests == {Category.SOCIAL}
        assert stored.difficulty == Difficulty.HARD
        assert stored.streak_count == 3

    async def test_update_profile_overwrites(self, engine, storage, sample_user_profile):
        sample_user_profile.streak_count = 0
        sample_user_profile.difficulty = Difficulty.EASY
        await engine.update_profile(sample_user_profile)

        stored = await storage.load_profile()
        assert stored.streak_count == 0
        assert stored.difficulty == Difficulty.EASY


class TestScheduling:
    """Tests for reminder scheduling."""

    async def test_set_time_reschedules_daily(self, engine, storage, notifications, haptics):
        assert await engine.set_time(time(20, 30))

        assert notifications.daily == [(time(20, 30), DAILY_BODY)]
        assert haptics.notifications == [FeedbackOutcome.SUCCESS]
        stored = await storage.load_notification_settings()
        assert stored.reminder_time == time(20, 30)

    async def test_weekly_frequency(self, engine, notifications):
        await engine.set_weekday(3)
        await engine.set_frequency(NotificationFrequency.WEEKLY)

        assert notifications.weekly[-1] == (time(8, 0), WEEKLY_BODY, 3)

    async def test_invalid_weekday(self, engine):
        with pytest.raises(ValueError):
            await engine.set_weekday(8)

    async def test_disable_does_not_schedule(self, engine, storage, notifications):
        assert await engine.toggle_notifications(False)
        assert notifications.permission_requests == 0

        stored = await storage.load_notification_settings()
        assert not stored.enabled

        await engine.set_time(time(6, 0))
        assert notifications.daily == []

    async def test_permission_denied(self, engine, notifications, haptics):
        notifications.granted = False
        assert not await engine.schedule()

        assert engine.state.error_message == PERMISSION_DENIED_MESSAGE
        assert haptics.notifications == [FeedbackOutcome.WARNING]
        assert notifications.daily == []


class TestTestNotification:
    """Tests for the one-minute test notification."""

    async def test_send_test(self, engine, notifications, haptics):
        engine.state.error_message = "stale"
        assert await engine.send_test()

        assert notifications.once == [(datetime(2024, 3, 15, 9, 31), TEST_BODY)]
        assert engine.state.error_message is None
        assert not engine.state.is_testing_notification
        assert haptics.notifications == [FeedbackOutcome.SUCCESS]

    async def test_send_test_denied(self, engine, notifications, haptics):
        notifications.granted = False
        assert not await engine.send_test()

        assert notifications.once == []
        assert engine.state.error_message == TEST_FAILED_MESSAGE
        assert haptics.notifications == [FeedbackOutcome.ERROR]

    async def test_send_test_requires_enabled(self, engine, notifications):
        await engine.toggle_notifications(False)
        assert not await engine.send_test()
        assert notifications.permission_requests == 0
