"""Chat assistant commands."""

import click

from ..engines.app import Tab
from ..engines.chat import MAX_CHARACTERS, QUICK_REPLIES
from ..models.message import Message
from .base import (
    async_command,
    echo_error,
    echo_warning,
    ensure_initialized,
    ensure_onboarded,
    open_app,
)


def _format_message(message: Message) -> str:
    who = click.style("You", fg="cyan") if message.is_from_user else click.style("Coach", fg="magenta")
    stamp = message.timestamp.strftime("%H:%M")
    return f"[{stamp}] {who}: {message.text}"


@click.group()
def chat():
    """Talk to your challenge assistant."""
    pass


@chat.command("history")
@click.option(
    "--limit", "-n", default=20, type=click.IntRange(min=1), help="Number of messages to show"
)
@click.pass_context
@async_command
async def history(ctx: click.Context, limit: int):
    """Show recent messages."""
    ensure_initialized(ctx)

    async with open_app() as app:
        ensure_onboarded(ctx, app)
        await app.select_tab(Tab.CHAT)
        messages = app.chat.state.messages[-limit:]

    for message in messages:
        click.echo(_format_message(message))


@chat.command("send")
@click.argument("text", required=False)
@click.option(
    "--quick",
    "-q",
    type=click.IntRange(1, len(QUICK_REPLIES)),
    help="Send a quick reply by number: "
    + ", ".join(f"{i}) {r}" for i, r in enumerate(QUICK_REPLIES, 1)),
)
@click.pass_context
@async_command
async def send(ctx: click.Context, text: str | None, quick: int | None):
    """Send a message and wait for the reply."""
    ensure_initialized(ctx)

    async with open_app() as app:
        ensure_onboarded(ctx, app)
        await app.select_tab(Tab.CHAT)
        engine = app.chat

        if quick is not None:
            sent = await engine.quick_reply(QUICK_REPLIES[quick - 1])
        else:
            engine.input_changed(text or "")
            if text and len(text) > MAX_CHARACTERS:
                echo_warning(f"Message truncated to {MAX_CHARACTERS} characters.")
            sent = await engine.send()

        if not sent:
            echo_error("Nothing to send.")
            ctx.exit(1)

        click.echo(click.style("Coach is typing...", dim=True))
        await engine.wait_for_reply()
        reply = engine.state.messages[-1]

    click.echo(_format_message(reply))
