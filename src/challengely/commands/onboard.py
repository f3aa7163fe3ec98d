"""Onboarding command."""

import click

from ..clients.questionnaire import OnboardingQuestionnaire
from .base import (
    async_command,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    open_app,
)


@click.command()
@click.option("--skip", is_flag=True, help="Skip the questions and select every interest")
@click.option("--force", is_flag=True, help="Run again even if already onboarded")
@click.pass_context
@async_command
async def onboard(ctx: click.Context, skip: bool, force: bool):
    """Set up your interests and difficulty.

    Walks through the welcome, intro, interests, and difficulty steps, then
    saves your profile and schedules a daily 8:00 reminder.
    """
    ensure_initialized(ctx)

    async with open_app() as app:
        if app.is_onboarding_complete and not force:
            echo_info("Onboarding already completed. Use --force to redo it.")
            return

        if force:
            app.onboarding.restart()

        if skip:
            await app.onboarding.skip()
        else:
            questionnaire = OnboardingQuestionnaire(app.onboarding)
            if await questionnaire.run() is None:
                echo_warning("Onboarding cancelled.")
                ctx.exit(1)

        profile = await app.storage.load_profile()
        settings = await app.storage.load_notification_settings()

    echo_success("You're all set!")
    click.echo()
    click.echo("Profile Summary:")
    click.echo(profile.get_summary())
    if settings is not None and settings.enabled:
        echo_info(f"Reminder: {settings.display}")
    else:
        echo_warning("Notifications are off; no reminder was scheduled.")
