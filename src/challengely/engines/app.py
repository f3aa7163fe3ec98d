"""Application root composing the feature engines."""

import logging
from datetime import datetime
from enum import Enum
from typing import Callable

from ..clients.base import HapticFeedback, NotificationScheduler
from ..clients.haptics import LoggingHaptics
from ..clients.notifications import LocalNotificationScheduler
from ..config import Settings, get_settings
from ..db.engine import get_db_path, init_db
from ..db.storage import Storage
from ..models.user_profile import UserProfile
from .analytics import AnalyticsEngine
from .challenge import ChallengeEngine
from .chat import ChatEngine
from .onboarding import OnboardingEngine
from .profile import ProfileEngine

logger = logging.getLogger(__name__)


class Tab(str, Enum):
    CHALLENGE = "challenge"
    CHAT = "chat"
    PROFILE = "profile"
    ANALYTICS = "analytics"

    @property
    def title(self) -> str:
        return self.value.capitalize()


class AppRoot:
    """Owns the onboarding gate and routes the main app into tabs.

    The onboarding flag is read once in :meth:`start` and only written
    through this object when the onboarding engine reports completion.
    """

    def __init__(
        self,
        storage: Storage,
        notifications: NotificationScheduler,
        haptics: HapticFeedback,
        now: Callable[[], datetime] = datetime.now,
        tick_interval: float = 1.0,
        reply_delay: tuple[float, float] = (1.5, 3.0),
    ):
        self.storage = storage
        self.is_onboarding_complete = False
        self.selected_tab = Tab.CHALLENGE

        self.onboarding = OnboardingEngine(
            storage, notifications, haptics, on_completed=self._onboarding_completed
        )
        self.challenge = ChallengeEngine(storage, haptics, now=now, tick_interval=tick_interval)
        self.chat = ChatEngine(storage, haptics, reply_delay=reply_delay)
        self.profile = ProfileEngine(storage, notifications, haptics, now=now)
        self.analytics = AnalyticsEngine(storage)

    @classmethod
    async def create(cls, settings: Settings | None = None) -> "AppRoot":
        """Wire the live collaborators and load the startup state."""
        settings = settings or get_settings()
        db_path = get_db_path(settings.data_dir)
        await init_db(db_path)

        storage = Storage(db_path)
        app = cls(
            storage,
            LocalNotificationScheduler(storage, settings.notifications_allowed),
            LoggingHaptics(),
            tick_interval=settings.tick_interval,
            reply_delay=(settings.reply_delay_min, settings.reply_delay_max),
        )
        await app.start()
        return app

    async def start(self) -> None:
        self.is_onboarding_complete = await self.storage.is_onboarding_complete()
        # A finished wizard stays finished across restarts
        self.onboarding.state.is_complete = self.is_onboarding_complete
        logger.debug("Startup: onboarding complete=%s", self.is_onboarding_complete)

    async def select_tab(self, tab: Tab) -> bool:
        """Switch tabs and activate the tab's engine.

        Returns:
            False while onboarding is incomplete
        """
        if not self.is_onboarding_complete:
            logger.debug("Tab %s unavailable before onboarding", tab.value)
            return False

        self.selected_tab = tab
        if tab == Tab.CHALLENGE:
            await self.challenge.activate()
        elif tab == Tab.CHAT:
            await self.chat.activate()
        elif tab == Tab.PROFILE:
            await self.profile.load()
        elif tab == Tab.ANALYTICS:
            await self.analytics.reload()
        return True

    async def close(self) -> None:
        """Cancel timers and pending replies."""
        await self.challenge.close()
        await self.chat.close()

    async def _onboarding_completed(self, profile: UserProfile) -> None:
        self.is_onboarding_complete = True
        await self.storage.set_onboarding_complete(True)
        await self.select_tab(Tab.CHALLENGE)
