"""State engines driving each feature of challengely."""

from .analytics import AnalyticsEngine, AnalyticsSnapshot, compute_analytics, streak_history
from .app import AppRoot, Tab
from .challenge import ChallengeEngine, ChallengeSession, ChallengeState
from .chat import ChatEngine, ChatState, generate_reply
from .onboarding import OnboardingEngine, OnboardingState, OnboardingStep
from .profile import ProfileEngine, ProfileState

__all__ = [
    "AnalyticsEngine",
    "AnalyticsSnapshot",
    "AppRoot",
    "ChallengeEngine",
    "ChallengeSession",
    "ChallengeState",
    "ChatEngine",
    "ChatState",
    "compute_analytics",
    "generate_reply",
    "OnboardingEngine",
    "OnboardingState",
    "OnboardingStep",
    "ProfileEngine",
    "ProfileState",
    "streak_history",
    "Tab",
]
