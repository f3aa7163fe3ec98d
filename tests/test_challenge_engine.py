"""Tests for the daily challenge engine."""

import pytest

from challengely.clients.base import FeedbackOutcome, ImpactIntensity
from challengely.engines.challenge import ChallengeEngine, ChallengeState
from challengely.models.challenge import Category
from challengely.models.user_profile import UserProfile


@pytest.fixture
async def engine(storage, haptics, clock):
    await storage.save_profile(UserProfile(interests={Category.FITNESS}))
    engine = ChallengeEngine(storage, haptics, now=clock, tick_interval=3600)
    await engine.activate()
    yield engine
    await engine.close()


async def start(engine: ChallengeEngine) -> None:
    assert await engine.reveal()
    assert await engine.accept()


class TestActivation:
    """Tests for loading today's challenge."""

    async def test_activate_selects_challenge(self, engine):
        assert engine.state.todays_challenge.id == "hiit-workout"
        assert engine.state.status == ChallengeState.LOCKED
        assert engine.state.time_remaining == 0

    async def test_activate_without_profile(self, storage, haptics, clock):
        engine = ChallengeEngine(storage, haptics, now=clock)
        session = await engine.activate()
        assert session.todays_challenge is not None
        assert session.profile.streak_count == 0

    async def test_completed_today_activates_as_completed(self, engine, clock):
        await start(engine)
        await engine.complete()

        session = await engine.activate()
        assert session.status == ChallengeState.COMPLETED

        clock.advance(days=1)
        session = await engine.refresh()
        assert session.status == ChallengeState.LOCKED


class TestTransitions:
    """Tests for reveal, accept, and complete."""

    async def test_reveal(self, engine, haptics):
        assert await engine.reveal()
        assert engine.state.status == ChallengeState.REVEALED
        assert engine.state.status.display_name == "Ready"
        assert haptics.impacts == [ImpactIntensity.LIGHT]

        assert not await engine.reveal()

    async def test_accept_requires_reveal(self, engine):
        assert not await engine.accept()
        assert engine.state.status == ChallengeState.LOCKED

    async def test_accept_starts_countdown(self, engine, haptics):
        await start(engine)
        assert engine.state.status == ChallengeState.IN_PROGRESS
        assert engine.state.time_remaining == 1200
        assert engine.state.formatted_time == "20:00"
        assert engine.state.is_timer_running
        assert haptics.notifications == [FeedbackOutcome.SUCCESS]

    async def test_complete_requires_in_progress(self, engine):
        assert not await engine.complete()
        await engine.reveal()
        assert not await engine.complete()

    async def test_complete_updates_streak(self, engine, storage, haptics, clock):
        await start(engine)
        assert await engine.complete()

        assert engine.state.status == ChallengeState.COMPLETED
        assert not engine.state.is_timer_running
        assert engine.state.confetti == 1
        assert haptics.notifications == [FeedbackOutcome.SUCCESS, FeedbackOutcome.SUCCESS]

        stored = await storage.load_profile()
        assert stored.streak_count == 1
        assert stored.completed_challenges == ["hiit-workout"]
        assert stored.last_completion_date == clock()

    async def test_complete_only_once_per_day(self, engine):
        await start(engine)
        assert await engine.complete()
        assert not await engine.complete()
        assert not await engine.reveal()
        assert engine.state.profile.streak_count == 1

    async def test_complete_keeps_concurrent_profile_edits(self, engine, storage):
        """Completion reloads the profile instead of writing a stale copy."""
        await start(engine)

        def edit(profile: UserProfile) -> None:
            profile.interests = {Category.SOCIAL}

        await storage.update_profile(edit)
        await engine.complete()

        stored = await storage.load_profile()
        assert stored.interests == {Category.SOCIAL}
        assert stored.streak_count == 1

    async def test_consecutive_days_extend_streak(self, engine, clock):
        await start(engine)
        await engine.complete()

        clock.advance(days=1)
        await engine.activate()
        await start(engine)
        await engine.complete()

        assert engine.state.profile.streak_count == 2
        assert engine.state.confetti == 2


class TestCountdown:
    """Tests for the countdown timer."""

    async def test_tick_outside_progress_is_noop(self, engine):
        await engine.tick()
        assert engine.state.status == ChallengeState.LOCKED

    async def test_tick_decrements(self, engine):
        await start(engine)
        await engine.tick()
        assert engine.state.time_remaining == 1199
        assert engine.state.formatted_time == "19:59"

    async def test_countdown_completes_at_zero(self, engine):
        await start(engine)
        for _ in range(1200):
            await engine.tick()

        assert engine.state.time_remaining == 0
        assert engine.state.status == ChallengeState.COMPLETED
        assert engine.state.profile.streak_count == 1

    async def test_stopped_timer_completes_on_tick(self, engine):
        await start(engine)
        engine.state.is_timer_running = False
        await engine.tick()
        assert engine.state.status == ChallengeState.COMPLETED

    async def test_background_timer_runs_to_completion(self, storage, haptics, clock):
        engine = ChallengeEngine(storage, haptics, now=clock, tick_interval=0)
        await engine.activate()
        await start(engine)
        engine.state.time_remaining = 3

        await engine.wait_for_timer()

        assert engine.state.status == ChallengeState.COMPLETED
        assert engine.state.time_remaining == 0
        await engine.close()

    async def test_close_cancels_timer(self, engine):
        await start(engine)
        await engine.close()
        assert not engine.state.is_timer_running
        assert engine.state.status == ChallengeState.IN_PROGRESS


class TestShare:
    """Tests for the share card."""

    async def test_share_completes_running_challenge(self, engine):
        await start(engine)
        card = await engine.share()

        assert engine.state.status == ChallengeState.COMPLETED
        assert card.headline == "🔥 Day 1 Streak!"
        assert card.title == "HIIT Workout"

    async def test_share_after_completion(self, engine):
        await start(engine)
        await engine.complete()
        card = await engine.share()
        assert card.headline == "🔥 Day 1 Streak!"
        assert engine.state.confetti == 1
