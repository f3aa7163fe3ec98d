"""Canned-response chat assistant."""

import asyncio
import logging
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Awaitable, Callable

from ..clients.base import HapticFeedback, ImpactIntensity
from ..db.storage import Storage
from ..models.message import Message

logger = logging.getLogger(__name__)

MAX_CHARACTERS = 500

GREETING = "Hi! 👋 I'm your challenge assistant. How can I help you today?"

# Checked in order, first match wins
REPLY_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("challenge", "what"),
        "Today's challenge is designed just for you! Check the Challenge tab "
        "to see what awaits. 🎯",
    ),
    (
        ("nervous", "scared"),
        "It's totally normal to feel nervous! Remember, every expert was once "
        "a beginner. Start small and you've got this! 💪",
    ),
    (
        ("motivation", "help"),
        "You're already taking the first step by being here! That's amazing. "
        "What specific area would you like motivation for? 🌟",
    ),
    (
        ("streak",),
        "Streaks are powerful! 🔥 Every day you complete a challenge, you're "
        "building a better version of yourself. Keep going!",
    ),
    (
        ("thank",),
        "You're so welcome! I'm here whenever you need encouragement or "
        "guidance. You're doing great! ✨",
    ),
)

DEFAULT_REPLIES = (
    "That's a great point! How are you feeling about today's challenge? 🤔",
    "I understand! Remember, progress over perfection. What's one small step you can take? 🚀",
    "You're doing amazing by just showing up! What would be most helpful right now? 💚",
    "Interesting! Tell me more about how you're feeling about your goals. 🎯",
    "I'm here to support you! Is there anything specific about challenges you'd like to know? 🤝",
)

QUICK_REPLIES = (
    "What's today's challenge?",
    "I'm feeling nervous",
    "I need motivation",
    "How's my streak?",
)


def generate_reply(text: str, rng: random.Random | None = None) -> str:
    """Pick the assistant's answer to a user message."""
    lowered = text.lower()
    for keywords, reply in REPLY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return reply
    return (rng or random).choice(DEFAULT_REPLIES)


@dataclass
class ChatState:
    messages: list[Message] = field(default_factory=list)
    current_input: str = ""
    is_typing: bool = False
    character_count: int = 0

    @property
    def can_send(self) -> bool:
        return (
            bool(self.current_input.strip())
            and self.character_count <= MAX_CHARACTERS
            and not self.is_typing
        )

    def to_dict(self) -> dict:
        return {
            "messages": [m.to_dict() for m in self.messages],
            "current_input": self.current_input,
            "character_count": self.character_count,
            "max_characters": MAX_CHARACTERS,
            "is_typing": self.is_typing,
            "can_send": self.can_send,
        }


class ChatEngine:
    """Message log plus a delayed, keyword-driven assistant.

    Replies are produced one at a time, in the order the user messages were
    sent, by a single worker task.
    """

    def __init__(
        self,
        storage: Storage,
        haptics: HapticFeedback,
        reply_delay: tuple[float, float] = (1.5, 3.0),
        rng: random.Random | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.storage = storage
        self.haptics = haptics
        self.reply_delay = reply_delay
        self.rng = rng or random.Random()
        self.sleep = sleep
        self.state = ChatState()
        self._pending: deque[str] = deque()
        self._worker: asyncio.Task | None = None

    async def activate(self) -> ChatState:
        """Load the stored log, seeding the greeting on first use."""
        self.state.messages = await self.storage.load_messages()
        if not self.state.messages:
            self.state.messages = [Message(text=GREETING, is_from_user=False)]
            await self.storage.save_messages(self.state.messages)
        return self.state

    def input_changed(self, text: str) -> None:
        limited = text[:MAX_CHARACTERS]
        self.state.current_input = limited
        self.state.character_count = len(limited)

    async def send(self) -> bool:
        """Send the current input."""
        return await self.quick_reply(self.state.current_input)

    async def quick_reply(self, text: str) -> bool:
        """Append a user message and queue the assistant's reply.

        Returns:
            False if the text was blank and nothing was sent
        """
        if not text.strip():
            return False

        self.haptics.impact(ImpactIntensity.LIGHT)
        self.state.messages.append(Message(text=text[:MAX_CHARACTERS], is_from_user=True))
        self.state.current_input = ""
        self.state.character_count = 0
        await self.storage.save_messages(self.state.messages)

        self._pending.append(text)
        self._start_typing()
        return True

    async def stop_typing(self) -> None:
        """Cancel any outstanding reply."""
        self._pending.clear()
        worker = self._worker
        self._worker = None
        if worker is not None and not worker.done():
            worker.cancel()
            await asyncio.gather(worker, return_exceptions=True)
            # A reply appended before its save was cancelled is written here
            await self.storage.save_messages(self.state.messages)
        self.state.is_typing = False

    async def wait_for_reply(self) -> None:
        """Wait until every queued reply has been delivered."""
        if self._worker is not None:
            await asyncio.gather(self._worker, return_exceptions=True)

    async def close(self) -> None:
        await self.stop_typing()

    def _start_typing(self) -> None:
        self.state.is_typing = True
        if self._worker is None or self._worker.done():
            self._worker = asyncio.create_task(self._typing_sequence())

    async def _typing_sequence(self) -> None:
        try:
            while self._pending:
                low, high = self.reply_delay
                await self.sleep(self.rng.uniform(low, high))
                text = self._pending.popleft()
                await self._deliver(generate_reply(text, self.rng))
        finally:
            self.state.is_typing = False

    async def _deliver(self, reply: str) -> None:
        self.state.messages.append(Message(text=reply, is_from_user=False))
        await self.storage.save_messages(self.state.messages)
        logger.debug("Assistant replied (%d messages)", len(self.state.messages))

