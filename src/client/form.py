from __future__ import annotations

import errno
import logging
import socket
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

import requests
from urllib3.exceptions import NameResolutionError

from ..config import settings
from ..models.tts import DEFAULT_VOICE, VOICE_OPTIONS, VoiceOption

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "Request timeout. The server took too long to respond. Please try again."
OFFLINE_MESSAGE = "No internet connection. Please check your network."
GENERIC_MESSAGE = "Failed to generate audio. Please try again."


# ── States ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success:
    audio: bytes
    filename: str


@dataclass(frozen=True)
class Error:
    message: str


FormState = Union[Idle, Loading, Success, Error]


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def audio_filename(day: date) -> str:
    return f"tts-audio-{day.isoformat()}.mp3"


OFFLINE_ERRNOS = frozenset({errno.ENETUNREACH, errno.ENETDOWN, errno.EHOSTUNREACH})


def _causes(exc: BaseException) -> Iterator[BaseException]:
    """Walk the chain requests builds: ConnectionError -> MaxRetryError -> NewConnectionError -> OSError."""
    seen: set[int] = set()
    stack: list[object] = [exc]
    while stack:
        current = stack.pop()
        if not isinstance(current, BaseException) or id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        stack.extend([current.__cause__, current.__context__, getattr(current, "reason", None)])
        stack.extend(current.args)


def is_offline(exc: requests.ConnectionError) -> bool:
    """True when the host could not be resolved or the network is unreachable."""
    for cause in _causes(exc):
        if isinstance(cause, (NameResolutionError, socket.gaierror)):
            return True
        if isinstance(cause, OSError) and cause.errno in OFFLINE_ERRNOS:
            return True
    return False


def error_message(exc: requests.RequestException) -> str:
    """Turn a failed request into the message shown to the user."""
    response = exc.response
    if response is not None:
        if not response.content:
            return GENERIC_MESSAGE
        try:
            data = response.json()
        except ValueError:
            return response.text
        if isinstance(data, dict):
            error = data.get("error")
            return str(error) if error else "Failed to generate audio"
        return response.text

    # ConnectTimeout is both a Timeout and a ConnectionError; timeout wins.
    if isinstance(exc, requests.Timeout):
        return TIMEOUT_MESSAGE
    if isinstance(exc, requests.ConnectionError) and is_offline(exc):
        return OFFLINE_MESSAGE
    return str(exc) or GENERIC_MESSAGE


# ── Controller ────────────────────────────────────────────────────────────────

class FormController:
    """
    Text-to-speech form: holds the input fields and a single state value.

    Transitions are Idle -> Loading -> Success | Error, and any -> Idle on
    reset(). Only one request is in flight at a time.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_chars: Optional[int] = None,
        today: Callable[[], date] = _utc_today,
        on_change: Optional[Callable[[FormState], None]] = None,
    ):
        self.base_url = (base_url or settings.tts_api_url).rstrip("/")
        self.timeout = timeout or settings.tts_client_timeout
        self.max_chars = max_chars or settings.tts_max_chars
        self.today = today
        self.on_change = on_change
        self.text = ""
        self.voice = DEFAULT_VOICE.value
        self.state: FormState = Idle()

    @property
    def voices(self) -> list[VoiceOption]:
        return VOICE_OPTIONS

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def controls_disabled(self) -> bool:
        return self.loading

    @property
    def can_generate(self) -> bool:
        return not self.loading and bool(self.text.strip())

    @property
    def char_count(self) -> str:
        return f"{len(self.text)} / {self.max_chars} characters"

    def _set_state(self, state: FormState) -> None:
        self.state = state
        if self.on_change is not None:
            self.on_change(state)

    def _local_error(self) -> Optional[str]:
        if not self.text.strip():
            return "Please enter some text before generating audio"
        if len(self.text) > self.max_chars:
            return f"Text must be {self.max_chars} characters or less"
        return None

    def generate(self) -> FormState:
        if self.loading:
            raise RuntimeError("A request is already in flight")

        problem = self._local_error()
        if problem:
            self._set_state(Error(problem))
            return self.state

        self._set_state(Loading())
        try:
            response = requests.post(
                f"{self.base_url}/api/tts",
                json={"text": self.text.strip(), "voice": self.voice},
                timeout=self.timeout,
            )
            response.raise_for_status()
            self._set_state(Success(audio=response.content, filename=audio_filename(self.today())))
        except requests.RequestException as exc:
            logger.warning("TTS request failed: %s", exc)
            self._set_state(Error(error_message(exc)))
        finally:
            if self.loading:
                self._set_state(Error(GENERIC_MESSAGE))
        return self.state

    def download(self, directory: Union[str, Path] = ".") -> Optional[Path]:
        """Save the generated MP3 into directory. Returns None when there is nothing to save."""
        if not isinstance(self.state, Success):
            return None
        path = Path(directory) / self.state.filename
        path.write_bytes(self.state.audio)
        logger.info("Saved %s (%d bytes)", path, len(self.state.audio))
        return path

    def reset(self) -> None:
        self.text = ""
        self.voice = DEFAULT_VOICE.value
        self._set_state(Idle())
