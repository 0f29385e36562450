"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
Gemini is never contacted: gateways are built around FakeGenaiClient, which
records every generate_content call and replays queued responses.
"""
import itertools
import json
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from bca_assistant.gateway import GeminiGateway  # noqa: E402
from bca_assistant.session import initial_state  # noqa: E402
from bca_assistant.study import StudyService  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (HTTP API with a fake model)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


# ========================================
# Fake Gemini client
# ========================================


def make_response(text=None, uris=()):
    """Build an object shaped like a genai GenerateContentResponse."""
    chunks = [SimpleNamespace(web=SimpleNamespace(uri=uri)) for uri in uris]
    candidate = SimpleNamespace(grounding_metadata=SimpleNamespace(grounding_chunks=chunks))
    return SimpleNamespace(text=text, candidates=[candidate])


class FakeModels:
    def __init__(self, client):
        self._client = client

    def generate_content(self, model, contents, config=None):
        self._client.calls.append({"model": model, "contents": contents, "config": config})
        if self._client.on_call is not None:
            self._client.on_call()
        if not self._client.responses:
            return make_response("")
        result = self._client.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class FakeGenaiClient:
    """Stands in for genai.Client; queue responses or exceptions in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.on_call = None
        self.models = FakeModels(self)

    def queue(self, *responses):
        self.responses.extend(responses)

    @property
    def last_config(self):
        return self.calls[-1]["config"]


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def response():
    """Factory for fake generate_content responses."""
    return make_response


@pytest.fixture
def fake_client():
    return FakeGenaiClient()


@pytest.fixture
def gateway(fake_client):
    """Gateway with a credential, wired to the fake client."""
    return GeminiGateway(api_key="test-key", client=fake_client)


@pytest.fixture
def keyless_gateway(fake_client):
    """Gateway without a credential; the fake client must never be called."""
    return GeminiGateway(api_key=None, client=fake_client)


@pytest.fixture
def clock():
    """Deterministic millisecond clock starting at 1_000."""
    counter = itertools.count(1_000)
    return lambda: next(counter)


@pytest.fixture
def service(gateway, clock):
    """Study service with Semester I loaded and no subject selected."""
    svc = StudyService(gateway=gateway, state=initial_state(), clock=clock)
    svc.select_semester(1)
    return svc


@pytest.fixture
def ppa_service(service):
    """Study service with the C programming subject active."""
    service.select_subject("PPA")
    return service


# ========================================
# Sample model payloads
# ========================================


@pytest.fixture
def flashcard_payload():
    return json.dumps([
        {"front": "What does getchar() read?", "back": "A single character from stdin", "topic": "I/O"},
        {"front": "Format specifier for int", "back": "%d", "topic": "I/O"},
    ])


@pytest.fixture
def quiz_payload():
    return json.dumps([
        {
            "question": "Which loop always runs at least once?",
            "options": ["for", "while", "do-while", "goto"],
            "correctAnswerIndex": 2,
            "explanation": "do-while tests its condition after the body.",
        },
        {
            "question": "Size of char in C?",
            "options": ["1 byte", "2 bytes", "4 bytes", "8 bytes"],
            "correctAnswerIndex": 0,
            "explanation": "sizeof(char) is 1 by definition.",
        },
    ])
