from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.tts import DEFAULT_VOICE, Voice


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    openai_api_key: str = ""
    port: int = 5000
    app_env: str = "production"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    tts_model: str = "tts-1-hd"
    tts_allowed_voices: list[str] = [v.value for v in Voice]
    tts_default_voice: str = DEFAULT_VOICE.value
    tts_max_chars: int = 4000

    tts_api_url: str = "http://localhost:5000"
    tts_client_timeout: float = 30.0

    @model_validator(mode="after")
    def check_default_voice(self) -> "Settings":
        if self.tts_default_voice not in self.tts_allowed_voices:
            raise ValueError(
                f"TTS_DEFAULT_VOICE '{self.tts_default_voice}' is not in TTS_ALLOWED_VOICES"
            )
        return self

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"


settings = Settings()
