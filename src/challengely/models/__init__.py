"""Data models for challengely."""

from .challenge import (
    CATALOG_BY_ID,
    CHALLENGE_CATALOG,
    Category,
    Challenge,
    Difficulty,
    get_challenge,
    select_todays_challenge,
)
from .message import Message
from .notifications import NotificationFrequency, NotificationSettings, ScheduledNotification
from .share import ShareCard
from .user_profile import UserProfile

__all__ = [
    "CATALOG_BY_ID",
    "CHALLENGE_CATALOG",
    "Category",
    "Challenge",
    "Difficulty",
    "get_challenge",
    "Message",
    "NotificationFrequency",
    "NotificationSettings",
    "ScheduledNotification",
    "select_todays_challenge",
    "ShareCard",
    "UserProfile",
]
