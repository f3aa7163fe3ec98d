"""Interactive onboarding via terminal prompts."""

import questionary
from questionary import Style

from ..engines.onboarding import OnboardingEngine, OnboardingStep
from ..models.challenge import Category, Difficulty
from ..models.user_profile import UserProfile

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)

DIFFICULTY_CHOICES = {
    Difficulty.EASY: "Easy - gentle, 10-15 minute challenges",
    Difficulty.MEDIUM: "Medium - a bit of a stretch",
    Difficulty.HARD: "Hard - push yourself",
}


class OnboardingQuestionnaire:
    """Walks the onboarding engine through its steps with prompts."""

    def __init__(self, engine: OnboardingEngine):
        self.engine = engine

    async def run(self) -> UserProfile | None:
        """Run the wizard until it finishes.

        Returns:
            The stored profile, or None if the user aborted
        """
        print("\n=== Welcome to Challengely ===\n")
        print("One small challenge a day. Build a streak, grow a habit.\n")

        while not self.engine.state.is_complete:
            step = self.engine.state.current_step
            if step in (OnboardingStep.WELCOME, OnboardingStep.INTRO):
                if not await self._confirm_step(step):
                    return None
            elif step == OnboardingStep.INTERESTS:
                if not await self._collect_interests():
                    return None
            else:
                if not await self._collect_difficulty():
                    return None

            if not await self.engine.next():
                print("Pick at least one interest to continue.\n")

        return await self.engine.storage.load_profile()

    async def _confirm_step(self, step: int) -> bool:
        question = (
            "Ready to get started?"
            if step == OnboardingStep.WELCOME
            else "Each day you'll unlock one challenge, start a timer, and grow your streak. Continue?"
        )
        answer = await questionary.confirm(
            question, default=True, style=custom_style
        ).ask_async()
        return bool(answer)

    async def _collect_interests(self) -> bool:
        selected = self.engine.state.selected_interests
        interests = await questionary.checkbox(
            "What are you interested in? (Select all that apply)",
            choices=[
                questionary.Choice(
                    f"{c.emoji} {c.display_name}", c, checked=c in selected
                )
                for c in Category
            ],
            style=custom_style,
        ).ask_async()
        if interests is None:
            return False

        for category in Category:
            if (category in interests) != (category in selected):
                await self.engine.toggle_interest(category)
        return True

    async def _collect_difficulty(self) -> bool:
        difficulty = await questionary.select(
            "How challenging should your daily challenges be?",
            choices=[
                questionary.Choice(label, value)
                for value, label in DIFFICULTY_CHOICES.items()
            ],
            default=self.engine.state.selected_difficulty,
            style=custom_style,
        ).ask_async()
        if difficulty is None:
            return False

        await self.engine.set_difficulty(difficulty)
        return True
