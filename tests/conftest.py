from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from scholarhub.dependencies import AppState, build_state, get_gemini_client
from scholarhub.main import create_app


class FakeGeminiModels:
    def __init__(self, text: str | None = "A short summary.", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[dict] = []

    async def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeGemini:
    """Stands in for google.genai.Client; only the async models API is used."""

    def __init__(self, text: str | None = "A short summary.", error: Exception | None = None) -> None:
        self.models = FakeGeminiModels(text=text, error=error)
        self.aio = SimpleNamespace(models=self.models)


@pytest.fixture
def state() -> AppState:
    return build_state("memory")


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini(text="  Great scholarship for engineers.  ")


@pytest.fixture
def client(state: AppState, fake_gemini: FakeGemini) -> TestClient:
    app = create_app(state)
    app.dependency_overrides[get_gemini_client] = lambda: fake_gemini
    return TestClient(app)


def login(client: TestClient, email: str, password: str = "password") -> dict[str, str]:
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def student_headers(client: TestClient) -> dict[str, str]:
    return login(client, "student@example.com")


@pytest.fixture
def admin_headers(client: TestClient) -> dict[str, str]:
    return login(client, "admin@example.com")
