"""
Doubt-resolver chat messages.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal, Optional, Sequence
from uuid import uuid4

Rating = Literal["up", "down"]


@dataclass
class ChatMessage:
    content: str
    is_user: bool
    subject: str = "General"
    rating: Optional[Rating] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def speaker(self) -> str:
        return "Student" if self.is_user else "Tutor"


def build_conversation_context(messages: Sequence[ChatMessage], limit: int = 3) -> str:
    """Render the last ``limit`` messages as ``Speaker: content`` lines."""
    if limit <= 0:
        return ""
    recent = messages[-limit:]
    return "\n".join(f"{m.speaker}: {m.content}" for m in recent)
