"""Pydantic contracts shared by the analyzers and the HTTP layer."""

from models.schemas.analysis_options import AnalysisOptions, ExperienceLevel, Language
from models.schemas.analysis_result import FullCVAnalysisResult, RuleOutcome, SectionAnalysisResult
from models.schemas.context import DetectedContext
from models.schemas.cv_content import CVContent, CVDocument, ExperienceEntry, SkillEntry, SkillLevel
from models.schemas.feedback import FeedbackCode

__all__ = [
    "AnalysisOptions",
    "ExperienceLevel",
    "Language",
    "RuleOutcome",
    "SectionAnalysisResult",
    "FullCVAnalysisResult",
    "DetectedContext",
    "CVContent",
    "CVDocument",
    "ExperienceEntry",
    "SkillEntry",
    "SkillLevel",
    "FeedbackCode",
]
