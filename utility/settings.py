import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MODEL = "google/gemini-flash-1.5-exp:free"
DEFAULT_ENDPOINT = "https://openrouter.ai/api/v1/chat/completions"


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return float(value)


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, read once at startup."""
    openrouter_api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    endpoint: str = DEFAULT_ENDPOINT
    temperature: float = 0.3
    max_tokens: int = 1000
    provider_timeout: Optional[float] = None  # None = transport default
    strict_languages: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        # Load variables from .env into the environment
        load_dotenv()

        return cls(
            openrouter_api_key=os.getenv("OPENROUTER_API_KEY"),
            model=os.getenv("OPENROUTER_MODEL", DEFAULT_MODEL),
            endpoint=os.getenv("OPENROUTER_ENDPOINT", DEFAULT_ENDPOINT),
            temperature=float(os.getenv("TRANSLATION_TEMPERATURE", "0.3")),
            max_tokens=int(os.getenv("TRANSLATION_MAX_TOKENS", "1000")),
            provider_timeout=_env_float("PROVIDER_TIMEOUT_SECONDS"),
            strict_languages=_env_bool("STRICT_LANGUAGES"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
        )
