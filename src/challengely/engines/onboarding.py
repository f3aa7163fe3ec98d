"""Onboarding wizard: welcome, intro, interests, difficulty."""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Awaitable, Callable

from ..clients.base import HapticFeedback, ImpactIntensity, NotificationScheduler
from ..db.storage import Storage
from ..models.challenge import Category, Difficulty
from ..models.notifications import DEFAULT_REMINDER_TIME, NotificationSettings
from ..models.user_profile import UserProfile
from .profile import DAILY_BODY

logger = logging.getLogger(__name__)


class OnboardingStep(IntEnum):
    WELCOME = 0
    INTRO = 1
    INTERESTS = 2
    DIFFICULTY = 3


LAST_STEP = OnboardingStep.DIFFICULTY


@dataclass
class OnboardingState:
    """In-progress wizard selections."""

    current_step: int = OnboardingStep.WELCOME
    selected_interests: set[Category] = field(default_factory=set)
    selected_difficulty: Difficulty = Difficulty.MEDIUM
    is_complete: bool = False

    @property
    def can_proceed(self) -> bool:
        """Whether the current step allows moving forward.

        Only the interests step is gated; every difficulty is accepted.
        """
        if self.current_step == OnboardingStep.INTERESTS:
            return bool(self.selected_interests)
        return True

    def to_dict(self) -> dict:
        return {
            "current_step": int(self.current_step),
            "step_name": OnboardingStep(self.current_step).name.lower(),
            "selected_interests": sorted(c.value for c in self.selected_interests),
            "selected_difficulty": self.selected_difficulty.value,
            "is_complete": self.is_complete,
            "can_proceed": self.can_proceed,
        }


class OnboardingEngine:
    """Collects interests and difficulty, then hands over a profile."""

    def __init__(
        self,
        storage: Storage,
        notifications: NotificationScheduler,
        haptics: HapticFeedback,
        on_completed: Callable[[UserProfile], Awaitable[None]] | None = None,
    ):
        self.storage = storage
        self.notifications = notifications
        self.haptics = haptics
        self.on_completed = on_completed
        self.state = OnboardingState()

    async def next(self) -> bool:
        """Advance one step, finishing from the last one."""
        if self.state.is_complete:
            return False

        self.haptics.impact(ImpactIntensity.LIGHT)
        if not self.state.can_proceed:
            logger.debug("Step %d blocked: no interests selected", self.state.current_step)
            return False

        if self.state.current_step < LAST_STEP:
            self.state.current_step += 1
            return True

        await self.finish()
        return True

    def restart(self) -> None:
        """Start the wizard over, e.g. to redo a finished onboarding."""
        self.state = OnboardingState()

    async def previous(self) -> bool:
        if self.state.is_complete or self.state.current_step == OnboardingStep.WELCOME:
            return False
        self.state.current_step -= 1
        return True

    async def skip(self) -> None:
        """Select every category and finish immediately."""
        self.state.selected_interests = set(Category)
        await self.finish()

    async def toggle_interest(self, category: Category) -> None:
        self.haptics.impact(ImpactIntensity.LIGHT)
        if category in self.state.selected_interests:
            self.state.selected_interests.remove(category)
        else:
            self.state.selected_interests.add(category)

    async def set_difficulty(self, difficulty: Difficulty) -> None:
        self.haptics.impact(ImpactIntensity.LIGHT)
        self.state.selected_difficulty = difficulty

    async def finish(self) -> UserProfile | None:
        """Persist the selections and request the daily reminder.

        Notification permission is requested after the profile is saved; a
        denial is logged and does not undo completion.

        Returns:
            The stored profile, or None if onboarding was already complete
        """
        if self.state.is_complete:
            return None

        self.state.is_complete = True
        profile = UserProfile(
            interests=set(self.state.selected_interests),
            difficulty=self.state.selected_difficulty,
        )
        await self.storage.save_profile(profile)
        logger.info(
            "Onboarding finished with %d interest(s), %s difficulty",
            len(profile.interests),
            profile.difficulty.value,
        )

        granted = await self.notifications.request_permission()
        await self.storage.save_notification_settings(
            NotificationSettings(enabled=granted, reminder_time=DEFAULT_REMINDER_TIME)
        )
        if granted:
            await self.notifications.schedule_daily(DEFAULT_REMINDER_TIME, DAILY_BODY)
        else:
            logger.info("Daily reminder not scheduled: permission denied")

        if self.on_completed is not None:
            await self.on_completed(profile)
        return profile
