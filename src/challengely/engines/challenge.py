"""Daily challenge state machine.

locked -> revealed -> in_progress -> completed. A session is rebuilt on
every activation from the stored profile and the fixed catalog.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable

from ..clients.base import FeedbackOutcome, HapticFeedback, ImpactIntensity
from ..db.storage import Storage
from ..models.challenge import DEFAULT_CHALLENGE_SECONDS, Challenge, select_todays_challenge
from ..models.share import ShareCard
from ..models.user_profile import UserProfile

logger = logging.getLogger(__name__)


class ChallengeState(str, Enum):
    """Lifecycle of today's challenge."""

    LOCKED = "locked"
    REVEALED = "revealed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @property
    def display_name(self) -> str:
        return _STATE_DISPLAY[self]


_STATE_DISPLAY = {
    ChallengeState.LOCKED: "Locked",
    ChallengeState.REVEALED: "Ready",
    ChallengeState.IN_PROGRESS: "In Progress",
    ChallengeState.COMPLETED: "Completed",
}


@dataclass
class ChallengeSession:
    """Transient state of the challenge screen."""

    profile: UserProfile = field(default_factory=UserProfile)
    todays_challenge: Challenge | None = None
    status: ChallengeState = ChallengeState.LOCKED
    time_remaining: int = 0
    is_timer_running: bool = False
    confetti: int = 0
    now: Callable[[], datetime] = field(default=datetime.now, repr=False)

    @property
    def formatted_time(self) -> str:
        minutes, seconds = divmod(max(self.time_remaining, 0), 60)
        return f"{minutes:02d}:{seconds:02d}"

    @property
    def is_completed_today(self) -> bool:
        return self.profile.is_completed_on(self.now().date())

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "status_display": self.status.display_name,
            "challenge": self.todays_challenge.to_dict() if self.todays_challenge else None,
            "time_remaining": self.time_remaining,
            "formatted_time": self.formatted_time,
            "is_timer_running": self.is_timer_running,
            "is_completed_today": self.is_completed_today,
            "streak_count": self.profile.streak_count,
            "confetti": self.confetti,
        }


class ChallengeEngine:
    """Drives today's challenge from reveal through completion."""

    def __init__(
        self,
        storage: Storage,
        haptics: HapticFeedback,
        now: Callable[[], datetime] = datetime.now,
        tick_interval: float = 1.0,
    ):
        self.storage = storage
        self.haptics = haptics
        self.now = now
        self.tick_interval = tick_interval
        self.state = ChallengeSession(now=now)
        self._timer_task: asyncio.Task | None = None

    async def activate(self) -> ChallengeSession:
        """Load the profile and select today's challenge."""
        self._stop_timer()

        profile = await self.storage.load_profile()
        if profile is None:
            profile = UserProfile()

        session = ChallengeSession(profile=profile, confetti=self.state.confetti, now=self.now)
        session.todays_challenge = select_todays_challenge(profile.interests, self.now().date())
        session.status = (
            ChallengeState.COMPLETED if session.is_completed_today else ChallengeState.LOCKED
        )
        self.state = session

        logger.debug(
            "Activated challenge %s (%s)",
            session.todays_challenge.id,
            session.status.value,
        )
        return session

    async def refresh(self) -> ChallengeSession:
        """Re-run activation (pull to refresh)."""
        return await self.activate()

    async def reveal(self) -> bool:
        if self.state.status != ChallengeState.LOCKED:
            logger.debug("Ignoring reveal in state %s", self.state.status.value)
            return False

        self.haptics.impact(ImpactIntensity.LIGHT)
        self.state.status = ChallengeState.REVEALED
        return True

    async def accept(self) -> bool:
        """Start the countdown for the revealed challenge."""
        if self.state.status != ChallengeState.REVEALED:
            logger.debug("Ignoring accept in state %s", self.state.status.value)
            return False

        self.haptics.notify(FeedbackOutcome.SUCCESS)
        self.state.status = ChallengeState.IN_PROGRESS
        challenge = self.state.todays_challenge
        self.state.time_remaining = challenge.duration_seconds if challenge else DEFAULT_CHALLENGE_SECONDS
        self._start_timer()
        return True

    async def tick(self) -> None:
        """Advance the countdown by one second."""
        if self.state.status != ChallengeState.IN_PROGRESS:
            return

        if not self.state.is_timer_running or self.state.time_remaining <= 0:
            self.state.is_timer_running = False
            await self.complete()
            return

        self.state.time_remaining -= 1
        if self.state.time_remaining == 0:
            await self.complete()

    async def complete(self) -> bool:
        """Finish today's challenge and update the streak.

        Returns:
            True if a completion was recorded
        """
        if self.state.status != ChallengeState.IN_PROGRESS:
            logger.debug("Ignoring complete in state %s", self.state.status.value)
            return False
        if self.state.is_completed_today:
            return False

        challenge = self.state.todays_challenge
        now = self.now()
        recorded = False

        def apply(profile: UserProfile) -> bool:
            nonlocal recorded
            recorded = profile.record_completion(challenge.id, now)
            return recorded

        # Reload inside the lock so concurrent writers are not overwritten
        self.state.profile = await self.storage.update_profile(apply)

        self._stop_timer()
        self.state.status = ChallengeState.COMPLETED
        if not recorded:
            # Another writer already completed today
            return False

        self.haptics.notify(FeedbackOutcome.SUCCESS)
        self.state.confetti += 1
        logger.info(
            "Completed %s, streak is now %d",
            challenge.id,
            self.state.profile.streak_count,
        )
        return True

    async def share(self) -> ShareCard | None:
        """Build the share card for today's challenge.

        Sharing an in-progress challenge completes it first.
        """
        if self.state.todays_challenge is None:
            return None
        if self.state.status == ChallengeState.IN_PROGRESS:
            await self.complete()
        return ShareCard.for_challenge(self.state.todays_challenge, self.state.profile.streak_count)

    async def wait_for_timer(self) -> None:
        """Wait until the running countdown finishes."""
        if self._timer_task is not None:
            await asyncio.gather(self._timer_task, return_exceptions=True)

    async def close(self) -> None:
        task = self._timer_task
        self._stop_timer()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    def _start_timer(self) -> None:
        self._stop_timer()
        self.state.is_timer_running = True
        self._timer_task = asyncio.create_task(self._run_timer())

    async def _run_timer(self) -> None:
        while self.state.status == ChallengeState.IN_PROGRESS:
            await asyncio.sleep(self.tick_interval)
            await self.tick()

    def _stop_timer(self) -> None:
        self.state.is_timer_running = False
        task = self._timer_task
        self._timer_task = None
        # complete() may run inside the timer task itself
        if task is not None and task is not asyncio.current_task():
            task.cancel()
