import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_POKEAPI_BASE_URL = "https://pokeapi.co/api/v2/pokemon-species"
DEFAULT_TRANSLATION_BASE_URL = "https://api.funtranslations.com/translate"


@dataclass(frozen=True)
class Settings:
    pokeapi_base_url: str = DEFAULT_POKEAPI_BASE_URL
    translation_base_url: str = DEFAULT_TRANSLATION_BASE_URL
    http_timeout_seconds: float = 10.0
    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Reads settings from the environment, falling back to the public API defaults."""
    return Settings(
        pokeapi_base_url=os.getenv("POKEAPI_BASE_URL", DEFAULT_POKEAPI_BASE_URL).rstrip("/"),
        translation_base_url=os.getenv("TRANSLATION_BASE_URL", DEFAULT_TRANSLATION_BASE_URL).rstrip("/"),
        http_timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", "10")),
        host=os.getenv("API_HOST", "127.0.0.1"),
        port=int(os.getenv("API_PORT", "5000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
