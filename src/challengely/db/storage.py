"""Persistence facade used by the engines.

Every entity lives under a fixed key of the key-value store. Missing keys and
payloads that fail to decode are both treated as "not stored": callers get
``None`` (or an empty list) and fall back to defaults.
"""

import asyncio
import logging
from pathlib import Path
from typing import Callable

from ..models.message import Message
from ..models.notifications import NotificationSettings, ScheduledNotification
from ..models.user_profile import UserProfile
from .repositories import KeyValueRepository

logger = logging.getLogger(__name__)

PROFILE_KEY = "profile"
MESSAGES_KEY = "messages"
NOTIFICATION_SETTINGS_KEY = "notification_settings"
SCHEDULED_NOTIFICATIONS_KEY = "scheduled_notifications"
ONBOARDING_COMPLETE_KEY = "onboarding_complete"

# Decode failures of a stored payload, including valid JSON of the wrong shape
_DECODE_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


class Storage:
    """Load and save profile, chat log, and settings."""

    def __init__(self, db_path: Path | None = None):
        self.repo = KeyValueRepository(db_path)
        self._profile_lock = asyncio.Lock()

    @property
    def db_path(self) -> Path:
        return self.repo.db_path

    async def _load(self, key: str, decode: Callable):
        try:
            data = await self.repo.get_json(key)
            if data is None:
                return None
            return decode(data)
        except _DECODE_ERRORS as e:
            # JSONDecodeError is a ValueError
            logger.warning("Ignoring malformed %s payload: %s", key, e)
            return None

    # Profile ---------------------------------------------------------

    async def save_profile(self, profile: UserProfile) -> None:
        await self.repo.set_json(PROFILE_KEY, profile.to_dict())

    async def load_profile(self) -> UserProfile | None:
        return await self._load(PROFILE_KEY, UserProfile.from_dict)

    async def update_profile(
        self, mutate: Callable[[UserProfile], bool | None]
    ) -> UserProfile:
        """Read-modify-write the profile under a lock.

        Args:
            mutate: Called with the freshly loaded profile (default profile if
                none is stored). Returning False skips the save.

        Returns:
            The profile after mutation
        """
        async with self._profile_lock:
            profile = await self.load_profile() or UserProfile()
            if mutate(profile) is not False:
                await self.save_profile(profile)
            return profile

    # Chat ------------------------------------------------------------

    async def save_messages(self, messages: list[Message]) -> None:
        await self.repo.set_json(MESSAGES_KEY, [m.to_dict() for m in messages])

    async def load_messages(self) -> list[Message]:
        messages = await self._load(
            MESSAGES_KEY, lambda data: [Message.from_dict(m) for m in data]
        )
        return messages or []

    # Notifications ---------------------------------------------------

    async def save_notification_settings(self, settings: NotificationSettings) -> None:
        await self.repo.set_json(NOTIFICATION_SETTINGS_KEY, settings.to_dict())

    async def load_notification_settings(self) -> NotificationSettings | None:
        return await self._load(NOTIFICATION_SETTINGS_KEY, NotificationSettings.from_dict)

    async def save_scheduled_notifications(
        self, notifications: list[ScheduledNotification]
    ) -> None:
        await self.repo.set_json(
            SCHEDULED_NOTIFICATIONS_KEY, [n.to_dict() for n in notifications]
        )

    async def load_scheduled_notifications(self) -> list[ScheduledNotification]:
        scheduled = await self._load(
            SCHEDULED_NOTIFICATIONS_KEY,
            lambda data: [ScheduledNotification.from_dict(n) for n in data],
        )
        return scheduled or []

    # App flags -------------------------------------------------------

    async def is_onboarding_complete(self) -> bool:
        value = await self._load(ONBOARDING_COMPLETE_KEY, bool)
        return bool(value)

    async def set_onboarding_complete(self, complete: bool = True) -> None:
        await self.repo.set_json(ONBOARDING_COMPLETE_KEY, complete)
