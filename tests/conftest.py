import os

import pytest

# Ensure the credential exists so Settings.from_env() succeeds in CI
os.environ.setdefault("OPENAI_API_KEY", "test-api-key")

from app.config import Settings
from app.services.openai_client import ChatCompleter


class StubCompleter(ChatCompleter):
    def __init__(self, answer="Use 'an' before vowel sounds.", error=None):
        self.answer = answer
        self.error = error
        self.calls = []

    def complete(self, messages, model):
        self.calls.append((messages, model))
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def settings(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>Grammar Tutor</h1>", encoding="utf-8")
    (public / "app.js").write_text("console.log('hi');", encoding="utf-8")
    return Settings(api_key="test-api-key", model="test-model", public_dir=public)


@pytest.fixture
def stub():
    return StubCompleter()
