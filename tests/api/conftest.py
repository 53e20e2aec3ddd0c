"""Fixtures for API tests: the app with the LLM client and history store overridden."""

import pytest
from fastapi.testclient import TestClient

from edumorph.infra.config.dependencies import get_history_repository, get_llm_client
from edumorph.infra.llm import MockLLMClient
from edumorph.infra.repositories import MemoryHistoryRepository
from edumorph.main import app


@pytest.fixture
def llm_client():
    return MockLLMClient()


@pytest.fixture
def history():
    return MemoryHistoryRepository()


@pytest.fixture
def client(llm_client, history):
    app.dependency_overrides[get_llm_client] = lambda: llm_client
    app.dependency_overrides[get_history_repository] = lambda: history
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"X-User-Id": "learner-42"}
