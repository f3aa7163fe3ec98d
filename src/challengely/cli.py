"""CLI entry point for challengely."""

import click

from . import __version__
from .commands import challenge, chat, init, onboard, profile, serve, stats
from .config import get_settings
from .log import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="challengely")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """challengely: one small challenge a day.

    Pick your interests once, then get a daily challenge matched to them,
    run its countdown, and keep your streak alive.

    Example usage:

        # Initialize the data directory
        challengely init

        # Choose interests and difficulty
        challengely onboard

        # Today's challenge
        challengely challenge today --reveal
        challengely challenge start

        # Check your progress
        challengely stats
    """
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level, settings.log_format)


# Register commands
main.add_command(init)
main.add_command(onboard)
main.add_command(challenge)
main.add_command(chat)
main.add_command(profile)
main.add_command(stats)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
