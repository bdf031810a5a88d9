from typing import Optional

from fastapi import APIRouter
from fastapi.responses import Response

from ..models.tts import ErrorResponse, TTSPayload
from ..services import tts_service
from ..services.validation import validate_payload

router = APIRouter(prefix="/api", tags=["TTS"])

SUGGESTED_FILENAME = "tts-audio.mp3"


# ─────────────────────────────────────────────
# POST /api/tts
# Validate → Synthesize via OpenAI → Return MP3 bytes
# ─────────────────────────────────────────────

@router.post(
    "/tts",
    response_class=Response,
    responses={
        200: {"content": {"audio/mpeg": {}}, "description": "MP3 audio."},
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def tts_route(payload: Optional[TTSPayload] = None) -> Response:
    request = validate_payload(payload or TTSPayload())
    audio_bytes = await tts_service.synthesize(request)

    return Response(
        content=audio_bytes,
        media_type="audio/mpeg",
        headers={
            "Content-Disposition": f'attachment; filename="{SUGGESTED_FILENAME}"',
            "Content-Length": str(len(audio_bytes)),
        },
    )
