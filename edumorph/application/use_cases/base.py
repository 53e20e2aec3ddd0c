"""
Shared plumbing for the feature use cases.
"""

from edumorph.application.ports import LLMServicePort
from edumorph.domain.exceptions import GenerationFailed
from edumorph.infra.config.logging_config import get_logger


class FeatureUseCase:
    """
    One product feature composed from prompt building, model invocation and
    response normalization.

    The LLM client is injected so tests and local development can substitute
    their own. Nothing is retried or cached.
    """

    feature: str = "content"
    log_name: str = "feature"

    def __init__(self, llm_client: LLMServicePort):
        self.llm_client = llm_client
        self._log = get_logger(f"usecase.{self.log_name}")

    def _failed(self, error: Exception) -> GenerationFailed:
        self._log.error(
            "usecase.failed",
            feature=self.feature,
            error_type=type(error).__name__,
            error=str(error),
        )
        return GenerationFailed(self.feature, error)
