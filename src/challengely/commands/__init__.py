"""CLI commands for challengely."""

from .challenge import challenge
from .chat import chat
from .init import init
from .onboard import onboard
from .profile import profile
from .serve import serve
from .stats import stats

__all__ = [
    "challenge",
    "chat",
    "init",
    "onboard",
    "profile",
    "serve",
    "stats",
]
