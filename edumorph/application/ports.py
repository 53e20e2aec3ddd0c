"""
Ports the application layer depends on: the generative model and the learning
history store. Adapters live under ``edumorph.infra``.
"""

import inspect
from abc import ABC, abstractmethod
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Union

from edumorph.domain.entities import (
    ChatMessage,
    ConceptSession,
    QuizResult,
    Rating,
    RoadmapProgress,
)

FragmentCallback = Callable[[str], Union[None, Awaitable[None]]]


class LLMServicePort(ABC):
    """Abstract interface for the generative-AI backend."""

    @abstractmethod
    async def invoke_text(self, prompt: str) -> str:
        """Send one prompt and return the complete text response."""
        pass

    @abstractmethod
    def stream_text(self, prompt: str) -> AsyncIterator[str]:
        """Yield text fragments in arrival order until end-of-stream."""
        pass

    async def invoke_streaming(
        self, prompt: str, on_fragment: Optional[FragmentCallback] = None
    ) -> str:
        """
        Deliver each fragment to ``on_fragment`` and return the accumulated text.

        A coroutine callback is awaited before the next fragment is pulled, so
        fragments reach the caller strictly in arrival order. Fragments already
        delivered stay delivered if the stream later fails.
        """
        parts: List[str] = []
        async for fragment in self.stream_text(prompt):
            parts.append(fragment)
            if on_fragment is not None:
                result = on_fragment(fragment)
                if inspect.isawaitable(result):
                    await result
        return "".join(parts)


class HistoryRepositoryPort(ABC):
    """Abstract per-user store for learning history."""

    @abstractmethod
    async def append_messages(self, user_id: str, messages: List[ChatMessage]) -> None:
        pass

    @abstractmethod
    async def get_messages(self, user_id: str) -> List[ChatMessage]:
        pass

    @abstractmethod
    async def rate_message(
        self, user_id: str, message_id: str, rating: Optional[Rating]
    ) -> ChatMessage:
        """Set or clear the rating of one stored message."""
        pass

    @abstractmethod
    async def add_quiz_result(self, user_id: str, result: QuizResult) -> None:
        pass

    @abstractmethod
    async def get_quiz_results(self, user_id: str) -> List[QuizResult]:
        pass

    @abstractmethod
    async def save_concept_session(self, user_id: str, session: ConceptSession) -> None:
        pass

    @abstractmethod
    async def get_concept_session(self, user_id: str) -> Optional[ConceptSession]:
        pass

    @abstractmethod
    async def save_roadmap(self, user_id: str, roadmap: RoadmapProgress) -> None:
        pass

    @abstractmethod
    async def get_roadmap(self, user_id: str) -> Optional[RoadmapProgress]:
        pass
