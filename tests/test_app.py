"""Tests for the application root."""

import pytest

from challengely.config import Settings
from challengely.engines.app import AppRoot, Tab
from challengely.engines.challenge import ChallengeState
from challengely.engines.chat import GREETING


@pytest.fixture
async def app(storage, notifications, haptics, clock):
    app = AppRoot(storage, notifications, haptics, now=clock, tick_interval=3600)
    await app.start()
    yield app
    await app.close()


class TestAppRoot:
    """Tests for the onboarding gate and tab routing."""

    async def test_fresh_start_shows_onboarding(self, app):
        assert not app.is_onboarding_complete
        assert not await app.select_tab(Tab.CHAT)

    async def test_onboarding_unlocks_tabs(self, app, storage):
        await app.onboarding.skip()

        assert app.is_onboarding_complete
        assert await storage.is_onboarding_complete()
        assert app.selected_tab == Tab.CHALLENGE
        assert app.challenge.state.status == ChallengeState.LOCKED

    async def test_flag_survives_restart(self, app, storage, notifications, haptics):
        await app.onboarding.skip()

        restarted = AppRoot(storage, notifications, haptics)
        await restarted.start()
        assert restarted.is_onboarding_complete

    async def test_restart_keeps_profile(self, app, storage, notifications, haptics):
        """The wizard of a restarted app cannot finish again and reset the streak."""
        await app.onboarding.skip()
        await app.challenge.reveal()
        await app.challenge.accept()
        await app.challenge.complete()

        restarted = AppRoot(storage, notifications, haptics)
        await restarted.start()
        assert restarted.onboarding.state.is_complete

        await restarted.onboarding.skip()
        assert not await restarted.onboarding.next()

        profile = await storage.load_profile()
        assert profile.streak_count == 1
        assert notifications.permission_requests == 1

    async def test_select_tab_activates_engines(self, app):
        await app.onboarding.skip()

        assert await app.select_tab(Tab.CHAT)
        assert app.chat.state.messages[0].text == GREETING

        assert await app.select_tab(Tab.PROFILE)
        assert app.profile.state.user_profile.interests

        assert await app.select_tab(Tab.ANALYTICS)
        assert app.analytics.state.total_completed == 0
        assert app.selected_tab == Tab.ANALYTICS

    async def test_completion_shows_in_analytics(self, app):
        await app.onboarding.skip()
        await app.challenge.reveal()
        await app.challenge.accept()
        await app.challenge.complete()

        await app.select_tab(Tab.ANALYTICS)
        assert app.analytics.state.current_streak == 1
        assert app.analytics.state.total_completed == 1

    async def test_create_from_settings(self, tmp_path):
        app = await AppRoot.create(
            Settings(data_dir=tmp_path, notifications_allowed=False, tick_interval=3600)
        )
        try:
            assert (tmp_path / "challengely.db").exists()
            await app.onboarding.skip()
            settings = await app.storage.load_notification_settings()
            assert not settings.enabled
        finally:
            await app.close()

    def test_tab_titles(self):
        assert [tab.title for tab in Tab] == ["Challenge", "Chat", "Profile", "Analytics"]
