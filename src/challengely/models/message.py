"""Chat message model."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


@dataclass(frozen=True)
class Message:
    """A single entry of the chat log."""

    text: str
    is_from_user: bool
    id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "text": self.text,
            "is_from_user": self.is_from_user,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Message":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            text=data["text"],
            is_from_user=bool(data["is_from_user"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )
