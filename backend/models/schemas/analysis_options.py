"""Options shared by every analysis call."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class Language(str, Enum):
    """Languages with a lexicon registry entry."""
    EN = "en"
    ES = "es"
    FR = "fr"
    DE = "de"


DEFAULT_LANGUAGE = Language.EN


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    EXECUTIVE = "executive"


class AnalysisOptions(BaseModel):
    """Immutable per-call options.

    ``language`` falls back to English when not given; there is no other
    implicit default.
    """
    model_config = ConfigDict(frozen=True)

    language: Language = DEFAULT_LANGUAGE
    industry: str | None = None

    @field_validator("industry", mode="before")
    @classmethod
    def _normalize_industry(cls, value: object) -> str | None:
        if value is None:
            return None
        cleaned = str(value).strip().lower()
        return cleaned or None
