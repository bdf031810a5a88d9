from types import SimpleNamespace

import httpx
import pytest
from fastapi.testclient import TestClient

from src.main import app
from src.services import tts_service

FAKE_MP3 = b"ID3\x04\x00\x00\x00\x00\x00\x00" + b"\xff\xfb\x90\x00" * 64


class FakeSpeech:
    """Stands in for AsyncOpenAI().audio.speech."""

    def __init__(self, audio: bytes = FAKE_MP3, error: Exception | None = None):
        self.audio = audio
        self.error = error
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(content=self.audio)


def openai_error(cls, status_code: int, message: str = "upstream said no"):
    request = httpx.Request("POST", "https://api.openai.com/v1/audio/speech")
    response = httpx.Response(status_code, request=request)
    return cls(message, response=response, body=None)


@pytest.fixture
def speech(monkeypatch):
    fake = FakeSpeech()
    client = SimpleNamespace(audio=SimpleNamespace(speech=fake))
    monkeypatch.setattr(tts_service, "get_client", lambda: client)
    return fake


@pytest.fixture
def client():
    return TestClient(app)
