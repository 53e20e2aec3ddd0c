"""In-memory learning history store, keyed by user id."""

from collections import defaultdict
from typing import Dict, List, Optional

from edumorph.application.ports import HistoryRepositoryPort
from edumorph.domain.entities import (
    ChatMessage,
    ConceptSession,
    QuizResult,
    Rating,
    RoadmapProgress,
)
from edumorph.domain.exceptions import NotFoundError


class MemoryHistoryRepository(HistoryRepositoryPort):
    """In-memory implementation of HistoryRepositoryPort.

    Contents live for the lifetime of the process only.
    """

    def __init__(self) -> None:
        self._messages: Dict[str, List[ChatMessage]] = defaultdict(list)
        self._quiz_results: Dict[str, List[QuizResult]] = defaultdict(list)
        self._concepts: Dict[str, ConceptSession] = {}
        self._roadmaps: Dict[str, RoadmapProgress] = {}

    async def append_messages(self, user_id: str, messages: List[ChatMessage]) -> None:
        self._messages[user_id].extend(messages)

    async def get_messages(self, user_id: str) -> List[ChatMessage]:
        return list(self._messages.get(user_id, []))

    async def rate_message(
        self, user_id: str, message_id: str, rating: Optional[Rating]
    ) -> ChatMessage:
        for message in self._messages.get(user_id, []):
            if message.id == message_id:
                message.rating = rating
                return message
        raise NotFoundError(f"message {message_id}", user_id)

    async def add_quiz_result(self, user_id: str, result: QuizResult) -> None:
        self._quiz_results[user_id].append(result)

    async def get_quiz_results(self, user_id: str) -> List[QuizResult]:
        return list(self._quiz_results.get(user_id, []))

    async def save_concept_session(self, user_id: str, session: ConceptSession) -> None:
        self._concepts[user_id] = session

    async def get_concept_session(self, user_id: str) -> Optional[ConceptSession]:
        return self._concepts.get(user_id)

    async def save_roadmap(self, user_id: str, roadmap: RoadmapProgress) -> None:
        self._roadmaps[user_id] = roadmap

    async def get_roadmap(self, user_id: str) -> Optional[RoadmapProgress]:
        return self._roadmaps.get(user_id)
