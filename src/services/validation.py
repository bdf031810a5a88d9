from typing import Any, Optional, Sequence

from ..config import settings
from ..errors import ValidationError
from ..models.tts import SynthesisRequest, TTSPayload


def validate_text(text: Any, max_chars: int) -> str:
    """Return the trimmed text, or raise on the first rule it breaks."""
    if not text or not isinstance(text, str):
        raise ValidationError("Text is required and must be a string")

    if not text.strip():
        raise ValidationError("Please enter some text before generating audio")

    # Limit applies to the raw input, before trimming.
    if len(text) > max_chars:
        raise ValidationError(f"Text must be {max_chars} characters or less")

    return text.strip()


def resolve_voice(voice: Any, allowed: Sequence[str], default: str) -> str:
    selected = voice or default
    if selected not in allowed:
        raise ValidationError(f"Invalid voice. Must be one of: {', '.join(allowed)}")
    return selected


def validate_payload(
    payload: TTSPayload,
    *,
    allowed_voices: Optional[Sequence[str]] = None,
    default_voice: Optional[str] = None,
    max_chars: Optional[int] = None,
) -> SynthesisRequest:
    text = validate_text(
        payload.text, settings.tts_max_chars if max_chars is None else max_chars
    )
    voice = resolve_voice(
        payload.voice,
        settings.tts_allowed_voices if allowed_voices is None else allowed_voices,
        settings.tts_default_voice if default_voice is None else default_voice,
    )
    return SynthesisRequest(text=text, voice=voice)
