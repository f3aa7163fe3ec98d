"""Initialize project command."""

import click

from ..config import get_settings
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Initialize the challengely data directory and database.

    This creates the data directory and the SQLite key-value store that
    holds your profile, chat history, and reminder settings.
    """
    data_dir = get_settings().data_dir
    echo_info(f"Initializing challengely in {data_dir}")

    db_path = get_db_path(data_dir)
    await init_db(db_path)
    echo_success("Database initialized")

    click.echo()
    click.echo("challengely is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Tell us what you're into:")
    click.echo("     challengely onboard")
    click.echo()
    click.echo("  2. See today's challenge:")
    click.echo("     challengely challenge today")
