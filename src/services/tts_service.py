import logging
from typing import Iterable

from openai import AsyncOpenAI

from ..config import settings
from ..errors import to_tts_error
from ..models.tts import PROVIDER_VOICES, SynthesisRequest

logger = logging.getLogger(__name__)


def get_client() -> AsyncOpenAI:
    return AsyncOpenAI(api_key=settings.openai_api_key or None)


def unsupported_voices(voices: Iterable[str]) -> list[str]:
    return [v for v in voices if v not in PROVIDER_VOICES]


def check_voices() -> None:
    """Warn about configured voices the provider does not list."""
    missing = unsupported_voices(settings.tts_allowed_voices)
    if missing:
        logger.warning(
            "Configured voices not offered by OpenAI: %s. Requests using them will fail upstream.",
            ", ".join(missing),
        )


async def synthesize(request: SynthesisRequest) -> bytes:
    """
    Send one synthesis request to OpenAI and return the MP3 bytes.
    Provider failures are raised as TTSError subclasses; nothing is retried.
    """
    try:
        client = get_client()
        response = await client.audio.speech.create(
            model=settings.tts_model,
            voice=request.voice,
            input=request.text,
            response_format="mp3",
        )
        audio_bytes = response.content
    except Exception as exc:
        logger.error("TTS Error: %s", exc)
        raise to_tts_error(exc, include_details=settings.is_development) from exc

    logger.info(
        "Generated %d bytes of audio (voice=%s, chars=%d)",
        len(audio_bytes),
        request.voice,
        len(request.text),
    )
    return audio_bytes
