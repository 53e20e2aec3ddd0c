"""
Domain exceptions for the generation pipeline and learning entities.

Pipeline errors describe which stage of prompt -> model -> normalization failed.
Feature use cases wrap any of them in ``GenerationFailed`` before surfacing.
"""

from typing import Optional


class EduMorphError(Exception):
    pass


class PipelineError(EduMorphError):
    """Base class for failures inside the prompt/invoke/normalize pipeline."""


class EmptyResponse(PipelineError):
    def __init__(self, message: str = "Received empty response from AI model") -> None:
        super().__init__(message)


class BackendError(PipelineError):
    """The call to the generative-AI backend itself failed (network, auth, quota)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"LLM backend error: {message}")
        self.cause = cause


class ExtractionError(PipelineError):
    def __init__(self, expected: str, text: str) -> None:
        super().__init__(f"No JSON {expected} delimiters found in model response")
        self.expected = expected
        self.text = text


class ParseError(PipelineError):
    def __init__(self, message: str, fragment: str) -> None:
        super().__init__(f"Failed to parse model JSON: {message}")
        self.fragment = fragment


class SchemaError(PipelineError):
    def __init__(self, model_name: str, details: str) -> None:
        super().__init__(f"Model response does not match {model_name}: {details}")
        self.model_name = model_name
        self.details = details


class GenerationFailed(EduMorphError):
    def __init__(self, feature: str, cause: BaseException) -> None:
        super().__init__(f"Failed to generate {feature}: {cause}")
        self.feature = feature
        self.cause = cause


class NotFoundError(EduMorphError):
    def __init__(self, resource: str, user_id: str) -> None:
        super().__init__(f"No {resource} found for user {user_id}")
        self.resource = resource
        self.user_id = user_id


class MilestoneNotFound(EduMorphError):
    def __init__(self, milestone_id: str) -> None:
        super().__init__(f"Milestone {milestone_id} not found")
        self.milestone_id = milestone_id
