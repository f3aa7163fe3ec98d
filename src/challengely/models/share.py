"""Shareable completion card."""

from dataclasses import dataclass

from .challenge import Challenge


@dataclass
class ShareCard:
    """Text rendition of the card users share after finishing a challenge."""

    headline: str
    title: str
    description: str
    footer: str = "Challengely"

    @classmethod
    def for_challenge(cls, challenge: Challenge, streak: int) -> "ShareCard":
        return cls(
            headline=f"🔥 Day {streak} Streak!",
            title=challenge.title,
            description=challenge.description,
        )

    def render(self, width: int = 48) -> str:
        """Render the card as boxed plain text."""
        lines = [self.headline, "", self.title, ""]
        lines.extend(_wrap(self.description, width - 4))
        lines.extend(["", self.footer])

        border = "+" + "-" * (width - 2) + "+"
        body = [f"| {line.center(width - 4)} |" for line in lines]
        return "\n".join([border, *body, border])

    def to_dict(self) -> dict:
        return {
            "headline": self.headline,
            "title": self.title,
            "description": self.description,
            "footer": self.footer,
        }


def _wrap(text: str, width: int) -> list[str]:
    lines: list[str] = []
    current = ""
    for word in text.split():
        if current and len(current) + 1 + len(word) > width:
            lines.append(current)
            current = word
        else:
            current = f"{current} {word}" if current else word
    if current:
        lines.append(current)
    return lines
