import logging

import openai
import pytest

from src import errors
from src.config import Settings
from src.services import tts_service

from .conftest import openai_error


@pytest.mark.parametrize("failure", list(errors.UpstreamFailure))
def test_every_failure_has_an_error(failure):
    error_cls, message = errors._FAILURES[failure]
    assert issubclass(error_cls, errors.TTSError)
    assert message


def test_server_errors_other_than_500_are_unavailable():
    exc = openai_error(openai.InternalServerError, 502)
    assert errors.classify(exc) is errors.UpstreamFailure.UNAVAILABLE
    assert errors.to_tts_error(exc).status_code == 503


def test_details_only_for_unknown_failures():
    auth = errors.to_tts_error(openai_error(openai.AuthenticationError, 401), include_details=True)
    assert auth.details is None

    unknown = errors.to_tts_error(ValueError("boom"), include_details=True)
    assert isinstance(unknown, errors.UnknownError)
    assert unknown.details == "boom"


def test_unsupported_voices_are_reported(caplog):
    assert tts_service.unsupported_voices(["nova", "fiona", "onyx"]) == ["fiona"]

    with caplog.at_level(logging.WARNING, logger=tts_service.__name__):
        tts_service.check_voices()
    assert "fiona" in caplog.text


def test_default_voice_must_be_allowed(monkeypatch):
    monkeypatch.setenv("TTS_ALLOWED_VOICES", '["alloy", "echo"]')
    monkeypatch.setenv("TTS_DEFAULT_VOICE", "nova")
    with pytest.raises(ValueError):
        Settings()


def test_failure_table_covers_every_kind():
    assert set(errors._FAILURES) == set(errors.UpstreamFailure)
