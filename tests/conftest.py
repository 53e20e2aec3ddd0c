"""Global test configuration and fixtures."""

import os

import pytest
from unittest.mock import AsyncMock, Mock

# Set test environment before settings are first read
os.environ["ENVIRONMENT"] = "testing"
os.environ["LLM_PROVIDER"] = "google"
os.environ["GOOGLE_API_KEY"] = ""
os.environ["DISABLE_AUTH"] = "false"
os.environ["LOG_FORMAT"] = "console"

from edumorph.application.prompts.application_vision import APPLICATION_VISION_PROMPT
from tests._helpers.fakes import FakeLLMClient


@pytest.fixture
def vision_example_json() -> str:
    """The example output embedded in the application-vision template."""
    return APPLICATION_VISION_PROMPT.split("Example Output:", 1)[1].strip()


@pytest.fixture
def quiz_payload() -> list:
    return [
        {
            "question": "What is the time complexity of binary search?",
            "options": ["O(n)", "O(log n)", "O(n log n)", "O(1)"],
            "correctAnswer": 1,
            "explanation": "Each step halves the search interval.",
            "difficulty": "medium",
        },
        {
            "question": "Which structure is LIFO?",
            "options": ["Queue", "Stack", "Heap", "Graph"],
            "correctAnswer": 1,
            "explanation": "A stack removes the most recently added item first.",
            "difficulty": "easy",
        },
    ]


@pytest.fixture
def roadmap_payload() -> dict:
    return {
        "title": "Customized Learning Path for Python",
        "description": "Comprehensive roadmap to master Python",
        "totalDays": 30,
        "totalMilestones": 2,
        "category": "Programming",
        "milestones": [
            {
                "title": "Fundamentals & Setup",
                "description": "Syntax, tooling and the REPL",
                "estimatedDays": 14,
                "topics": ["Variables", "Control flow", "Functions"],
                "difficulty": "Beginner",
                "icon": "BookOpen",
            },
            {
                "title": "Projects",
                "description": "Build small programs",
                "estimatedDays": 16,
                "topics": ["CLI tools", "Testing"],
                "difficulty": "Intermediate",
                "icon": "Code",
            },
        ],
    }


# Mock fixtures
@pytest.fixture
def mock_llm_client():
    """Mock LLM client for testing."""
    mock = Mock()
    mock.invoke_text = AsyncMock()
    mock.invoke_streaming = AsyncMock()
    return mock


@pytest.fixture
def fake_llm_client() -> FakeLLMClient:
    return FakeLLMClient()


@pytest.fixture
def llm_error():
    """LLM error for testing error handling."""
    return Exception("Gemini API quota exceeded")
