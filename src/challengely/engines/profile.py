"""Profile screen: stored preferences and reminder scheduling."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from typing import Callable

from ..clients.base import FeedbackOutcome, HapticFeedback, NotificationScheduler
from ..db.storage import Storage
from ..models.challenge import Category, Difficulty
from ..models.notifications import NotificationFrequency, NotificationSettings
from ..models.user_profile import UserProfile

logger = logging.getLogger(__name__)

PERMISSION_DENIED_MESSAGE = (
    "Notification permission denied. Please enable notifications in Settings."
)
TEST_FAILED_MESSAGE = (
    "Unable to send test notification. Please check your notification settings."
)

DAILY_BODY = "Tap to see your daily challenge!"
WEEKLY_BODY = "Tap to see your weekly challenge!"
TEST_BODY = (
    "🎯 Test notification from Challengely! Your notifications are working perfectly."
)
TEST_DELAY = timedelta(seconds=60)


@dataclass
class ProfileState:
    user_profile: UserProfile = field(default_factory=UserProfile)
    is_loading: bool = False
    error_message: str | None = None
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    is_testing_notification: bool = False

    def to_dict(self) -> dict:
        return {
            "profile": self.user_profile.to_dict(),
            "is_loading": self.is_loading,
            "error_message": self.error_message,
            "notifications": self.notifications.to_dict(),
            "next_notification": self.notifications.display,
            "is_testing_notification": self.is_testing_notification,
        }


class ProfileEngine:
    """Loads and edits the profile and manages the reminder schedule."""

    def __init__(
        self,
        storage: Storage,
        notifications: NotificationScheduler,
        haptics: HapticFeedback,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.storage = storage
        self.notifications = notifications
        self.haptics = haptics
        self.now = now
        self.state = ProfileState()

    async def load(self) -> ProfileState:
        """Load stored values; anything missing keeps its default."""
        self.state.is_loading = True
        self.state.error_message = None

        profile = await self.storage.load_profile()
        if profile is not None:
            self.state.user_profile = profile

        settings = await self.storage.load_notification_settings()
        if settings is not None:
            self.state.notifications = settings

        self.state.is_loading = False
        return self.state

    async def update_profile(self, profile: UserProfile) -> None:
        """Overwrite the stored profile."""

        def replace(stored: UserProfile) -> None:
            stored.interests = set(profile.interests)
            stored.difficulty = profile.difficulty
            stored.streak_count = profile.streak_count
            stored.completed_challenges = list(profile.completed_challenges)
            stored.last_completion_date = profile.last_completion_date

        self.state.user_profile = await self.storage.update_profile(replace)

    async def update_preferences(
        self,
        interests: set[Category] | None = None,
        difficulty: Difficulty | None = None,
    ) -> UserProfile:
        """Change interests or difficulty, leaving streak history untouched."""

        def apply(stored: UserProfile) -> None:
            if interests is not None:
                stored.interests = set(interests)
            if difficulty is not None:
                stored.difficulty = difficulty

        self.state.user_profile = await self.storage.update_profile(apply)
        return self.state.user_profile

    async def toggle_notifications(self, enabled: bool) -> bool:
        self.state.notifications.enabled = enabled
        await self._save_settings()
        if enabled:
            return await self.schedule()
        return True

    async def set_time(self, value: time) -> bool:
        self.state.notifications.reminder_time = value
        return await self._settings_changed()

    async def set_frequency(self, frequency: NotificationFrequency) -> bool:
        self.state.notifications.frequency = frequency
        return await self._settings_changed()

    async def set_weekday(self, weekday: int | None) -> bool:
        """Set the ISO weekday used by weekly reminders."""
        if weekday is not None and not 1 <= weekday <= 7:
            raise ValueError(f"weekday must be between 1 and 7, got {weekday}")
        self.state.notifications.weekday = weekday
        return await self._settings_changed()

    async def schedule(self) -> bool:
        """(Re)schedule the recurring reminder.

        Returns:
            True if the reminder was scheduled (or notifications are off),
            False if permission was denied
        """
        settings = self.state.notifications
        if not settings.enabled:
            return True

        granted = await self.notifications.request_permission()
        if not granted:
            self.state.error_message = PERMISSION_DENIED_MESSAGE
            self.haptics.notify(FeedbackOutcome.WARNING)
            return False

        if settings.frequency == NotificationFrequency.WEEKLY:
            await self.notifications.schedule_weekly(
                settings.reminder_time, WEEKLY_BODY, settings.weekday
            )
        else:
            await self.notifications.schedule_daily(settings.reminder_time, DAILY_BODY)

        self.haptics.notify(FeedbackOutcome.SUCCESS)
        return True

    async def send_test(self) -> bool:
        """Schedule a one-shot notification a minute from now."""
        if not self.state.notifications.enabled:
            return False

        self.state.is_testing_notification = True
        try:
            granted = await self.notifications.request_permission()
            if granted:
                await self.notifications.schedule_once(self.now() + TEST_DELAY, TEST_BODY)
        finally:
            self.state.is_testing_notification = False

        if granted:
            self.state.error_message = None
            self.haptics.notify(FeedbackOutcome.SUCCESS)
        else:
            self.state.error_message = TEST_FAILED_MESSAGE
            self.haptics.notify(FeedbackOutcome.ERROR)
        return granted

    async def _settings_changed(self) -> bool:
        await self._save_settings()
        if self.state.notifications.enabled:
            return await self.schedule()
        return True

    async def _save_settings(self) -> None:
        await self.storage.save_notification_settings(self.state.notifications)
