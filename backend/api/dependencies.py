"""Shared helpers for API routes."""

from config import settings
from models.schemas.analysis_options import AnalysisOptions, Language
from services.context_detector import detect_language


def build_options(language: Language | None, industry: str | None, sample_text: str = "") -> AnalysisOptions:
    """Explicit language wins; otherwise detect it from the request content."""
    if language is None:
        if settings.auto_detect_language and sample_text.strip():
            language = detect_language(sample_text)
        else:
            language = settings.default_language
    return AnalysisOptions(language=language, industry=industry)
