"""Analyzer outputs: per-rule outcomes, section results and the full-CV result."""

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.analysis_options import DEFAULT_LANGUAGE, Language
from models.schemas.feedback import FeedbackCode


class RuleOutcome(BaseModel):
    """Signed score delta plus at most one strength and one weakness."""
    model_config = ConfigDict(frozen=True)

    rule: str
    score_delta: int = 0
    strength: FeedbackCode | None = None
    weakness: FeedbackCode | None = None


class SectionAnalysisResult(BaseModel):
    """Bounded score and deduplicated feedback for one CV section.

    ``improved_content`` only carries suggested skill terms, and only when an
    industry was requested and some of its skills are missing.
    """
    score: int = Field(ge=0, le=100)
    strengths: list[str] = []
    weaknesses: list[str] = []
    suggestions: list[str] = []
    feedback_codes: list[FeedbackCode] = []
    improved_content: list[str] | None = None


class FullCVAnalysisResult(BaseModel):
    overall_score: int = Field(ge=0, le=100)
    section_analyses: dict[str, SectionAnalysisResult] = {}
    recommendations: list[str] = []
    language: Language = DEFAULT_LANGUAGE
    industry: str | None = None
