import json
import os

from pydantic_settings import BaseSettings

from models.schemas.analysis_options import DEFAULT_LANGUAGE, Language


def _parse_cors_origins(raw: str | None = None) -> list[str] | None:
    """Origins from CORS_ORIGINS, given as a JSON list or comma-separated hosts."""
    if raw is None:
        raw = os.environ.get("CORS_ORIGINS", "")
    raw = raw.strip()
    if not raw:
        return None
    origins = json.loads(raw) if raw.startswith("[") else raw.split(",")
    return [str(origin).strip() for origin in origins if str(origin).strip()]


class Settings(BaseSettings):
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Analysis settings
    default_language: Language = DEFAULT_LANGUAGE  # used when detection is off or inconclusive
    auto_detect_language: bool = True
    max_text_length: int = 20000  # per free-text field in requests
    rate_limit: str = "60/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
