"""Daily challenge commands."""

import asyncio

import click

from ..engines.app import Tab
from ..engines.challenge import ChallengeState
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    ensure_onboarded,
    open_app,
)


@click.group()
def challenge():
    """See and complete today's challenge.

    One challenge is picked per day from your interests. Reveal it, start
    the timer, and finish it to keep your streak going.
    """
    pass


@challenge.command("today")
@click.option("--reveal", is_flag=True, help="Show the challenge details")
@click.pass_context
@async_command
async def today(ctx: click.Context, reveal: bool):
    """Show today's challenge status."""
    ensure_initialized(ctx)

    async with open_app() as app:
        ensure_onboarded(ctx, app)
        await app.select_tab(Tab.CHALLENGE)
        if reveal:
            await app.challenge.reveal()
        session = app.challenge.state

    click.echo()
    click.echo(click.style("Today's Challenge", bold=True))
    click.echo("=" * 50)
    click.echo(f"Status: {session.status.display_name}")
    click.echo(f"Streak: {session.profile.streak_count} day(s)")

    todays = session.todays_challenge
    if session.status == ChallengeState.LOCKED:
        click.echo()
        echo_info("Run 'challengely challenge today --reveal' to see it.")
        return

    click.echo()
    click.echo(f"{todays.category.emoji} {todays.title} ({todays.difficulty.display_name})")
    click.echo(f"  {todays.description}")
    click.echo(f"  Time: {todays.duration_seconds // 60} min")

    if session.status == ChallengeState.COMPLETED:
        click.echo()
        echo_success("Completed today. See you tomorrow!")


@challenge.command("start")
@click.pass_context
@async_command
async def start(ctx: click.Context):
    """Accept today's challenge and run the countdown.

    Press Ctrl+C to stop the timer without completing.
    """
    ensure_initialized(ctx)

    async with open_app() as app:
        ensure_onboarded(ctx, app)
        await app.select_tab(Tab.CHALLENGE)
        engine = app.challenge

        if engine.state.status == ChallengeState.COMPLETED:
            echo_info("Today's challenge is already completed.")
            return

        await engine.reveal()
        await engine.accept()
        title = engine.state.todays_challenge.title
        echo_info(f"Started: {title} ({engine.state.formatted_time})")

        try:
            last_minute = None
            while engine.state.status == ChallengeState.IN_PROGRESS:
                minute = engine.state.time_remaining // 60
                if minute != last_minute:
                    click.echo(f"  {engine.state.formatted_time} remaining")
                    last_minute = minute
                await asyncio.sleep(0.5)
        except (KeyboardInterrupt, asyncio.CancelledError):
            echo_warning("Timer stopped. The challenge was not completed.")
            return

        echo_success(f"Challenge complete! Streak: {engine.state.profile.streak_count} day(s)")


@challenge.command("done")
@click.pass_context
@async_command
async def done(ctx: click.Context):
    """Mark today's challenge as completed without the timer."""
    ensure_initialized(ctx)

    async with open_app() as app:
        ensure_onboarded(ctx, app)
        await app.select_tab(Tab.CHALLENGE)
        engine = app.challenge

        if engine.state.status == ChallengeState.COMPLETED:
            echo_info("Today's challenge is already completed.")
            return

        await engine.reveal()
        await engine.accept()
        if not await engine.complete():
            echo_error("Could not complete today's challenge.")
            ctx.exit(1)

        streak = engine.state.profile.streak_count

    echo_success(f"Challenge complete! Streak: {streak} day(s)")


@challenge.command("share")
@click.pass_context
@async_command
async def share(ctx: click.Context):
    """Print a share card for today's challenge."""
    ensure_initialized(ctx)

    async with open_app() as app:
        ensure_onboarded(ctx, app)
        await app.select_tab(Tab.CHALLENGE)
        if app.challenge.state.status != ChallengeState.COMPLETED:
            echo_warning("Finish today's challenge before sharing it.")
            ctx.exit(1)
        card = await app.challenge.share()

    click.echo(card.render())
