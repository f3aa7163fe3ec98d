"""Local notification scheduler backed by the key-value store."""

import logging
from datetime import datetime, time
from typing import Callable

from ..db.storage import Storage
from ..models.notifications import MONDAY, ScheduledNotification

logger = logging.getLogger(__name__)

DAILY_TITLE = "Your daily challenge is ready!"
WEEKLY_TITLE = "Your weekly challenge is ready!"
RECURRING_KINDS = ("daily", "weekly")


class LocalNotificationScheduler:
    """Records reminders in storage instead of handing them to an OS service.

    Only one recurring reminder exists at a time: scheduling a daily or
    weekly reminder replaces the previous one of either kind. One-shot
    reminders accumulate until their fire time has passed.
    """

    def __init__(
        self,
        storage: Storage,
        permission_granted: bool = True,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.storage = storage
        self.permission_granted = permission_granted
        self.now = now

    async def request_permission(self) -> bool:
        logger.info(
            "Notification permission %s",
            "granted" if self.permission_granted else "denied",
        )
        return self.permission_granted

    async def schedule_daily(self, at: time, body: str) -> None:
        await self._replace(
            ScheduledNotification(kind="daily", title=DAILY_TITLE, body=body, reminder_time=at)
        )

    async def schedule_weekly(self, at: time, body: str, weekday: int | None = None) -> None:
        await self._replace(
            ScheduledNotification(
                kind="weekly",
                title=WEEKLY_TITLE,
                body=body,
                reminder_time=at,
                weekday=weekday or MONDAY,
            )
        )

    async def schedule_once(self, fire_at: datetime, body: str) -> None:
        now = self.now()
        scheduled = [
            n
            for n in await self.storage.load_scheduled_notifications()
            if n.kind != "once" or n.fire_at is None or n.fire_at > now
        ]
        scheduled.append(
            ScheduledNotification(
                kind="once",
                title=DAILY_TITLE,
                body=body,
                reminder_time=fire_at.time().replace(second=0, microsecond=0),
                fire_at=fire_at,
            )
        )
        await self.storage.save_scheduled_notifications(scheduled)
        logger.info("Scheduled one-shot notification for %s", fire_at.isoformat())

    async def _replace(self, notification: ScheduledNotification) -> None:
        scheduled = [
            n
            for n in await self.storage.load_scheduled_notifications()
            if n.kind not in RECURRING_KINDS
        ]
        scheduled.append(notification)
        await self.storage.save_scheduled_notifications(scheduled)
        logger.info("Scheduled %s reminder", notification.describe())
