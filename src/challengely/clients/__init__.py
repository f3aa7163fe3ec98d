"""Device service clients: notifications and haptics."""

from .base import FeedbackOutcome, HapticFeedback, ImpactIntensity, NotificationScheduler
from .haptics import LoggingHaptics
from .notifications import LocalNotificationScheduler

__all__ = [
    "FeedbackOutcome",
    "HapticFeedback",
    "ImpactIntensity",
    "LocalNotificationScheduler",
    "LoggingHaptics",
    "NotificationScheduler",
]
