from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class Voice(str, Enum):
    ALLOY = "alloy"
    ECHO = "echo"
    FIONA = "fiona"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"


DEFAULT_VOICE = Voice.NOVA

# Voices currently published by the OpenAI speech endpoint.
PROVIDER_VOICES = frozenset(
    {"alloy", "ash", "ballad", "coral", "echo", "fable", "nova", "onyx", "sage", "shimmer", "verse"}
)


class VoiceOption(BaseModel):
    value: str
    label: str
    description: str

    def display(self) -> str:
        return f"{self.label} • {self.description}"


VOICE_OPTIONS: list[VoiceOption] = [
    VoiceOption(value="nova", label="Nova", description="warm, natural"),
    VoiceOption(value="alloy", label="Alloy", description="bright, clear"),
    VoiceOption(value="shimmer", label="Shimmer", description="smooth, soft"),
    VoiceOption(value="echo", label="Echo", description="deep, resonant"),
    VoiceOption(value="fiona", label="Fiona", description="professional"),
    VoiceOption(value="onyx", label="Onyx", description="rich, warm"),
]


class TTSPayload(BaseModel):
    """Raw POST /api/tts body. Fields stay untyped so bad values reach the ordered validator."""

    text: Optional[Any] = None
    voice: Optional[Any] = None


class SynthesisRequest(BaseModel):
    text: str = Field(..., min_length=1, description="Trimmed text sent to the provider.")
    voice: str = Field(default=DEFAULT_VOICE.value, description="Resolved voice name.")


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
