import os

os.environ.setdefault("GEMINI_API_KEY", "test-key")

import pytest
from fastapi.testclient import TestClient

import main
from core.ai import get_provider
from core.config import settings
from core.store import dataset


class FakeProvider:
    def __init__(self, answer="Revenue peaked in March.", error=None):
        self.answer = answer
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "upload_dir", str(path))
    return path


@pytest.fixture
def client(provider, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "require_csv_extension", True)
    monkeypatch.setattr(settings, "max_upload_bytes", 5 * 1024 * 1024)
    monkeypatch.setattr(settings, "preview_style", "pairs")
    monkeypatch.setattr(settings, "preview_rows", 10)
    dataset.clear()
    main.app.dependency_overrides[get_provider] = lambda: provider
    with TestClient(main.app) as c:
        yield c
    main.app.dependency_overrides.clear()
    dataset.clear()
