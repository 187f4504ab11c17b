"""
Pytest configuration and shared fixtures.
Upstream AI gateway calls and MongoDB are replaced with in-memory fakes.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import httpx
import openai
import pytest
from fastapi.testclient import TestClient
from openai.types.chat import ChatCompletion

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from app import config
from app.main import app
from app.routes.chat import chat_recipe
from app.routes.dish import healthy_dish
from app.utils import settings_store

ACCESS_TOKEN = "test-token"
AUTH_HEADERS = {"Authorization": f"Bearer {ACCESS_TOKEN}"}


def make_completion(content=None, image_url=None, images=None) -> ChatCompletion:
    """Build a completion shaped like the gateway's, images included."""
    message = {"role": "assistant", "content": content}
    if image_url:
        images = [{"type": "image_url", "image_url": {"url": image_url}}]
    if images is not None:
        message["images"] = images
    return ChatCompletion.model_validate({
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "test-model",
        "choices": [{"index": 0, "finish_reason": "stop", "message": message}],
    })


def make_status_error(status_code: int, body: str = "upstream failure") -> openai.APIStatusError:
    request = httpx.Request("POST", "https://gateway.test/v1/chat/completions")
    response = httpx.Response(status_code, request=request, text=body)
    return openai.APIStatusError(f"Error code: {status_code}", response=response, body=None)


class FakeCompletions:
    """Plays back queued completions or errors, recording each call."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeAIClient:
    """Stands in for openai.OpenAI, including its context-manager close."""

    def __init__(self, completions):
        self.chat = SimpleNamespace(completions=completions)
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True


class FakeCollection:
    def __init__(self):
        self.documents = {}

    async def find_one(self, query):
        document = self.documents.get(query["client_id"])
        return dict(document) if document else None

    async def update_one(self, query, update, upsert=False):
        client_id = query["client_id"]
        if client_id not in self.documents and not upsert:
            return
        document = self.documents.setdefault(client_id, {"client_id": client_id})
        document.update(update["$set"])


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(config, "ACCESS_TOKEN", ACCESS_TOKEN)
    monkeypatch.setenv("AI_GATEWAY_API_KEY", "test-key")
    with TestClient(app) as client:
        yield client


@pytest.fixture
def fake_gateway(monkeypatch):
    """Install a fake AI client; returns its completions recorder with `.clients` attached."""

    def install(*outcomes):
        completions = FakeCompletions(outcomes)
        completions.clients = []

        def make_client():
            fake_client = FakeAIClient(completions)
            completions.clients.append(fake_client)
            return fake_client

        monkeypatch.setattr(healthy_dish, "get_ai_client", make_client)
        monkeypatch.setattr(chat_recipe, "get_ai_client", make_client)
        return completions

    return install


@pytest.fixture
def settings_collection(monkeypatch):
    collection = FakeCollection()
    monkeypatch.setattr(settings_store, "accessibility_settings_collection", collection)
    return collection
