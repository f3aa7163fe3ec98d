"""Haptic feedback for environments without a vibration motor."""

import logging

from .base import FeedbackOutcome, ImpactIntensity

logger = logging.getLogger(__name__)


class LoggingHaptics:
    """Writes each cue to the debug log."""

    def impact(self, intensity: ImpactIntensity) -> None:
        logger.debug("haptic impact: %s", intensity.value)

    def notify(self, outcome: FeedbackOutcome) -> None:
        logger.debug("haptic notification: %s", outcome.value)
