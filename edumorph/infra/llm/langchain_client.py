"""
Pure infrastructure LLM client for LangChain integration.

This client sends a single user-role prompt to a chat model and returns its text,
either whole or as a stream of fragments. It carries no feature knowledge: prompts
and response parsing live in the application layer.
"""

from typing import AsyncIterator, List

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from edumorph.application.ports import LLMServicePort
from edumorph.domain.exceptions import BackendError, EmptyResponse
from edumorph.infra.config.logging_config import get_logger
from edumorph.infra.config.settings import Settings


class LangChainClient(LLMServicePort):
    """
    Infrastructure-layer LLM client providing invoke and stream functionality.

    Failures are not classified or retried: anything the backend raises becomes
    a ``BackendError``.
    """

    def __init__(self, llm: BaseChatModel, model_name: str = ""):
        self.llm = llm
        self.model_name = model_name
        self._text_parser = StrOutputParser()
        self._log = get_logger("infra.llm")

    @classmethod
    def from_settings(cls, settings: Settings) -> "LangChainClient":
        """Build the chat model for the configured provider."""
        provider = settings.llm_provider.lower()

        if provider == "openai":
            llm = ChatOpenAI(
                model=settings.openai_model,
                api_key=settings.openai_api_key,
                temperature=settings.llm_temperature,
                max_tokens=settings.llm_max_tokens,
                max_retries=0,
            )
            return cls(llm, model_name=settings.openai_model)

        if provider in ("google", "gemini"):
            llm = ChatGoogleGenerativeAI(
                model=settings.gemini_model,
                google_api_key=settings.google_api_key,
                temperature=settings.llm_temperature,
                max_output_tokens=settings.llm_max_tokens,
                max_retries=0,
            )
            return cls(llm, model_name=settings.gemini_model)

        raise ValueError(
            f"Unsupported LLM provider: {settings.llm_provider}. Use 'google' or 'openai'."
        )

    def create_messages(self, prompt: str) -> List[BaseMessage]:
        """The backend always receives exactly one user-role text part."""
        return [HumanMessage(content=prompt)]

    async def invoke_text(self, prompt: str) -> str:
        """
        Invoke LLM with a prompt and return the text response.

        Raises:
            BackendError: If the backend call fails
            EmptyResponse: If the backend returned no text
        """
        messages = self.create_messages(prompt)
        try:
            response = await self.llm.ainvoke(messages)
        except Exception as e:
            self._log.error("llm.invoke.failed", model=self.model_name, error=str(e))
            raise BackendError(str(e), cause=e) from e

        text = self._text_parser.invoke(response)
        if not text or not text.strip():
            self._log.warning("llm.invoke.empty", model=self.model_name)
            raise EmptyResponse()

        self._log.info("llm.invoke.text", model=self.model_name, chars=len(text))
        return text

    async def stream_text(self, prompt: str) -> AsyncIterator[str]:
        """
        Stream text response from LLM.

        Yields:
            Non-empty text fragments in arrival order
        """
        messages = self.create_messages(prompt)
        fragments = 0
        try:
            async for chunk in self.llm.astream(messages):
                text = self._text_parser.invoke(chunk)
                if text:
                    fragments += 1
                    yield text
        except Exception as e:
            self._log.error(
                "llm.stream.failed",
                model=self.model_name,
                fragments=fragments,
                error=str(e),
            )
            raise BackendError(str(e), cause=e) from e

        self._log.info("llm.stream.end", model=self.model_name, fragments=fragments)

    def get_model_info(self) -> dict:
        """Get information about the current LLM configuration."""
        return {
            "model_name": self.model_name,
            "provider": type(self.llm).__name__,
        }
