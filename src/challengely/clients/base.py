"""Protocols for the device services the engines depend on."""

from datetime import datetime, time
from enum import Enum
from typing import Protocol, runtime_checkable


class ImpactIntensity(str, Enum):
    """Strength of an impact haptic."""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class FeedbackOutcome(str, Enum):
    """Outcome signalled by a notification haptic."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@runtime_checkable
class NotificationScheduler(Protocol):
    """Protocol for scheduling local reminders."""

    async def request_permission(self) -> bool:
        """Ask for permission to post notifications.

        Returns:
            True if notifications may be scheduled
        """
        ...

    async def schedule_daily(self, at: time, body: str) -> None:
        """Schedule a daily repeating reminder, replacing any previous one."""
        ...

    async def schedule_weekly(self, at: time, body: str, weekday: int | None = None) -> None:
        """Schedule a weekly repeating reminder, replacing any previous one.

        Args:
            at: Local time of day
            body: Notification body text
            weekday: ISO weekday (1 = Monday); Monday when omitted
        """
        ...

    async def schedule_once(self, fire_at: datetime, body: str) -> None:
        """Schedule a one-shot notification."""
        ...


@runtime_checkable
class HapticFeedback(Protocol):
    """Protocol for fire-and-forget feedback cues."""

    def impact(self, intensity: ImpactIntensity) -> None:
        ...

    def notify(self, outcome: FeedbackOutcome) -> None:
        ...
