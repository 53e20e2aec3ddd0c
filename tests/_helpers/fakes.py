"""Fake LLM client implementations for testing."""

import asyncio
from typing import AsyncIterator, Callable, List, Optional

from edumorph.application.ports import LLMServicePort
from edumorph.domain.exceptions import BackendError


class FakeLLMClient(LLMServicePort):
    """Scripted LLM port: fixed text for invoke, fixed fragments for streams."""

    def __init__(
        self,
        text: str = "",
        fragments: Optional[List[str]] = None,
        fragments_for: Optional[Callable[[str], List[str]]] = None,
        fail_after: Optional[int] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.text = text
        self.fragments = fragments or []
        self.fragments_for = fragments_for
        self.fail_after = fail_after
        self.error = error
        self.prompts: List[str] = []

    async def invoke_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text

    async def stream_text(self, prompt: str) -> AsyncIterator[str]:
        self.prompts.append(prompt)
        fragments = self.fragments_for(prompt) if self.fragments_for else self.fragments
        for index, fragment in enumerate(fragments):
            if self.fail_after is not None and index == self.fail_after:
                raise BackendError("stream interrupted")
            # let concurrent streams interleave
            await asyncio.sleep(0)
            yield fragment
