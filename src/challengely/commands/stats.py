"""Analytics dashboard command."""

from datetime import date, timedelta

import click

from ..engines.app import Tab
from .base import (
    async_command,
    echo_info,
    ensure_initialized,
    ensure_onboarded,
    format_table,
    open_app,
)


@click.command()
@click.pass_context
@async_command
async def stats(ctx: click.Context):
    """Show streak history and completed challenges by category."""
    ensure_initialized(ctx)

    async with open_app() as app:
        ensure_onboarded(ctx, app)
        await app.select_tab(Tab.ANALYTICS)
        snapshot = app.analytics.state

    click.echo()
    click.echo(click.style("Analytics", bold=True))
    click.echo("=" * 50)
    click.echo(f"Current streak:  {snapshot.current_streak} day(s)")
    click.echo(f"Completed:       {snapshot.total_completed} challenge(s)")

    click.echo()
    click.echo(click.style("7-Day Streak Progress", bold=True))
    today = date.today()
    peak = max(snapshot.streak_history) or 1
    days = len(snapshot.streak_history)
    for i, value in enumerate(snapshot.streak_history):
        day = today - timedelta(days=days - 1 - i)
        bar = "#" * round(20 * value / peak)
        click.echo(f"  {day.strftime('%a'):<4}{bar} {value}")

    click.echo()
    click.echo(click.style("By Category", bold=True))
    if not snapshot.category_breakdown:
        echo_info("No completed challenges yet.")
        return

    rows = [
        [f"{category.emoji} {category.display_name}", str(count)]
        for category, count in snapshot.category_breakdown
    ]
    click.echo(format_table(["Category", "Completed"], rows))
