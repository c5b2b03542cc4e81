"""Analysis context inferred from CV content."""

from pydantic import BaseModel

from models.schemas.analysis_options import ExperienceLevel, Language


class DetectedContext(BaseModel):
    language: Language
    industry: str | None = None
    level: ExperienceLevel = ExperienceLevel.ENTRY
