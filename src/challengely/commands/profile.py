"""Profile and reminder settings commands."""

import click

from ..engines.app import Tab
from ..models.challenge import Category, Difficulty
from ..models.notifications import NotificationFrequency, parse_time
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    ensure_onboarded,
    open_app,
)

WEEKDAYS = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]


@click.group()
def profile():
    """View your profile and manage reminders."""
    pass


@profile.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Show profile and reminder settings."""
    ensure_initialized(ctx)

    async with open_app() as app:
        ensure_onboarded(ctx, app)
        await app.select_tab(Tab.PROFILE)
        state = app.profile.state
        scheduled = await app.storage.load_scheduled_notifications()

    click.echo()
    click.echo(click.style("Profile", bold=True))
    click.echo("=" * 50)
    click.echo(state.user_profile.get_summary())

    click.echo(click.style("Reminders", bold=True))
    if state.notifications.enabled:
        click.echo(f"  {state.notifications.display}")
    else:
        click.echo("  Off")
    for notification in scheduled:
        click.echo(f"  - {notification.describe()}: {notification.body}")


@profile.command("edit")
@click.option(
    "--interest",
    "-i",
    "interests",
    multiple=True,
    type=click.Choice([c.value for c in Category]),
    help="Interest category (repeat for several)",
)
@click.option(
    "--difficulty",
    "-d",
    type=click.Choice([d.value for d in Difficulty]),
    help="Preferred difficulty",
)
@click.pass_context
@async_command
async def edit(ctx: click.Context, interests: tuple[str, ...], difficulty: str | None):
    """Change interests or difficulty."""
    ensure_initialized(ctx)

    async with open_app() as app:
        ensure_onboarded(ctx, app)
        await app.select_tab(Tab.PROFILE)
        updated = await app.profile.update_preferences(
            interests={Category(i) for i in interests} if interests else None,
            difficulty=Difficulty(difficulty) if difficulty else None,
        )

    echo_success("Profile updated")
    click.echo(updated.get_summary())


@profile.command("notifications")
@click.option("--on/--off", "enabled", default=None, help="Turn reminders on or off")
@click.option("--time", "time_", help="Reminder time as HH:MM")
@click.option(
    "--frequency",
    type=click.Choice([f.value for f in NotificationFrequency]),
    help="Reminder frequency",
)
@click.option("--weekday", type=click.Choice(WEEKDAYS), help="Day for weekly reminders")
@click.pass_context
@async_command
async def notifications(
    ctx: click.Context,
    enabled: bool | None,
    time_: str | None,
    frequency: str | None,
    weekday: str | None,
):
    """Configure the reminder schedule."""
    ensure_initialized(ctx)

    reminder_time = None
    if time_:
        try:
            reminder_time = parse_time(time_)
        except ValueError:
            echo_error(f"Invalid time '{time_}', expected HH:MM.")
            ctx.exit(1)

    async with open_app() as app:
        ensure_onboarded(ctx, app)
        await app.select_tab(Tab.PROFILE)
        engine = app.profile

        ok = True
        if weekday is not None:
            ok = await engine.set_weekday(WEEKDAYS.index(weekday) + 1) and ok
        if frequency is not None:
            ok = await engine.set_frequency(NotificationFrequency(frequency)) and ok
        if reminder_time is not None:
            ok = await engine.set_time(reminder_time) and ok
        if enabled is not None:
            ok = await engine.toggle_notifications(enabled) and ok

        state = engine.state

    if not ok:
        echo_error(state.error_message or "Could not schedule the reminder.")
        ctx.exit(1)

    if state.notifications.enabled:
        echo_success(f"Reminder: {state.notifications.display}")
    else:
        echo_info("Reminders are off.")


@profile.command("test")
@click.pass_context
@async_command
async def send_test(ctx: click.Context):
    """Send a test notification in one minute."""
    ensure_initialized(ctx)

    async with open_app() as app:
        ensure_onboarded(ctx, app)
        await app.select_tab(Tab.PROFILE)
        if not app.profile.state.notifications.enabled:
            echo_error("Reminders are off. Turn them on with 'challengely profile notifications --on'.")
            ctx.exit(1)
        sent = await app.profile.send_test()
        error = app.profile.state.error_message

    if not sent:
        echo_error(error)
        ctx.exit(1)
    echo_success("Test notification scheduled for one minute from now.")
