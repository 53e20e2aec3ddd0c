"""LLM infrastructure package."""

from .langchain_client import LangChainClient
from .mock_client import MockLLMClient

__all__ = ["LangChainClient", "MockLLMClient"]
