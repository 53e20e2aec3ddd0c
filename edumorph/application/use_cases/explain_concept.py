"""
Use Case: Explain Concept

Streams explanations at one or more depths (TL;DR, ELI5, deep dive) in a chosen
narration tone.
"""

import asyncio
from typing import Awaitable, Callable, Dict, Iterable, Optional, Union

from edumorph.application.ports import FragmentCallback
from edumorph.application.prompts import PromptBuilder, PromptTemplateId
from edumorph.application.use_cases.base import FeatureUseCase
from edumorph.domain.value_objects import ExplanationDepth

DepthFragmentCallback = Callable[[str, str], Union[None, Awaitable[None]]]

ALL_DEPTHS = tuple(depth.value for depth in ExplanationDepth)


class ExplainConceptUseCase(FeatureUseCase):
    feature = "concept explanation"
    log_name = "concept_explainer"

    async def execute(
        self,
        topic: str,
        depth: str = "deepdive",
        mode: str = "default",
        on_fragment: Optional[FragmentCallback] = None,
    ) -> str:
        """
        Stream one explanation, handing each fragment to ``on_fragment``.

        Returns the accumulated explanation once the stream ends. If the stream
        fails midway, fragments already delivered are not retracted.

        Raises:
            GenerationFailed: If the backend stream fails
        """
        self._log.info("usecase.start", depth=depth, mode=mode)
        prompt = PromptBuilder.build(
            PromptTemplateId.CONCEPT_EXPLAINER,
            {"topic": topic, "depth": depth, "mode": mode},
        )

        try:
            explanation = await self.llm_client.invoke_streaming(prompt, on_fragment)
        except Exception as e:
            raise self._failed(e) from e

        self._log.info("usecase.success", depth=depth, chars=len(explanation))
        return explanation

    async def explain_all(
        self,
        topic: str,
        mode: str = "default",
        depths: Iterable[str] = ALL_DEPTHS,
        on_fragment: Optional[DepthFragmentCallback] = None,
    ) -> Dict[str, str]:
        """
        Stream every depth concurrently into its own accumulator.

        Fragments of different depths interleave freely; within one depth they
        keep arrival order. Repeated depths are streamed once. All streams run
        to completion before the first failure, if any, is raised.
        """
        depths = list(dict.fromkeys(depths))
        responses: Dict[str, str] = {depth: "" for depth in depths}

        async def run(depth: str) -> None:
            def collect(fragment: str):
                responses[depth] += fragment
                if on_fragment is not None:
                    return on_fragment(depth, fragment)
                return None

            await self.execute(topic, depth, mode, on_fragment=collect)

        results = await asyncio.gather(
            *(run(depth) for depth in depths), return_exceptions=True
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return responses

    async def explain_for_question(
        self, concept: str, question: str, mode: str = "default"
    ) -> str:
        """Deep-dive explanation of a concept in the context of a quiz question."""
        return await self.execute(
            f"Concept: {concept}\nQuestion Context: {question}",
            ExplanationDepth.DEEPDIVE.value,
            mode,
        )
