"""Notification preference and schedule models."""

from dataclasses import dataclass, field
from datetime import datetime, time
from enum import Enum

DEFAULT_REMINDER_TIME = time(8, 0)
MONDAY = 1  # ISO weekday


class NotificationFrequency(str, Enum):
    """How often the reminder repeats."""

    DAILY = "daily"
    WEEKLY = "weekly"

    @property
    def description(self) -> str:
        return self.value.capitalize()


def parse_time(value: str) -> time:
    """Parse an ``HH:MM`` string."""
    hour, _, minute = value.partition(":")
    return time(int(hour), int(minute or 0))


def format_time(value: time) -> str:
    """Format a time as ``HH:MM``."""
    return value.strftime("%H:%M")


@dataclass
class NotificationSettings:
    """Reminder preferences shown on the profile screen."""

    enabled: bool = True
    reminder_time: time = DEFAULT_REMINDER_TIME
    frequency: NotificationFrequency = NotificationFrequency.DAILY
    weekday: int | None = None  # ISO weekday, weekly reminders only

    @property
    def display(self) -> str:
        """Human-readable schedule, e.g. ``Daily at 8:00 AM``."""
        hour = self.reminder_time.hour % 12 or 12
        suffix = "AM" if self.reminder_time.hour < 12 else "PM"
        return f"{self.frequency.description} at {hour}:{self.reminder_time.minute:02d} {suffix}"

    def to_dict(self) -> dict:
        return {
            "enabled": self.enabled,
            "time": format_time(self.reminder_time),
            "frequency": self.frequency.value,
            "weekday": self.weekday,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "NotificationSettings":
        return cls(
            enabled=bool(data.get("enabled", True)),
            reminder_time=parse_time(data["time"]) if data.get("time") else DEFAULT_REMINDER_TIME,
            frequency=NotificationFrequency(data.get("frequency", "daily")),
            weekday=data.get("weekday"),
        )


@dataclass
class ScheduledNotification:
    """A reminder handed to the notification scheduler."""

    kind: str  # daily, weekly, once
    title: str
    body: str
    reminder_time: time | None = None
    weekday: int | None = None
    fire_at: datetime | None = None
    created_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "title": self.title,
            "body": self.body,
            "time": format_time(self.reminder_time) if self.reminder_time else None,
            "weekday": self.weekday,
            "fire_at": self.fire_at.isoformat() if self.fire_at else None,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScheduledNotification":
        return cls(
            kind=data["kind"],
            title=data["title"],
            body=data["body"],
            reminder_time=parse_time(data["time"]) if data.get("time") else None,
            weekday=data.get("weekday"),
            fire_at=datetime.fromisoformat(data["fire_at"]) if data.get("fire_at") else None,
            created_at=datetime.fromisoformat(data["created_at"]),
        )

    def describe(self) -> str:
        """One-line description for listings."""
        if self.kind == "once" and self.fire_at:
            return f"once at {self.fire_at.strftime('%Y-%m-%d %H:%M')}"
        if self.kind == "weekly":
            return f"weekly on ISO day {self.weekday} at {format_time(self.reminder_time)}"
        return f"{self.kind} at {format_time(self.reminder_time)}"
