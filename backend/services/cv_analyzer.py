"""CV content analysis: per-section entry points and the full-CV aggregator.

Flow:
    CV content + AnalysisOptions
      ├─ SummaryAnalyzer     → SectionAnalysisResult   (weight 0.30)
      ├─ ExperienceAnalyzer  → SectionAnalysisResult   (weight 0.45)
      └─ SkillsAnalyzer      → SectionAnalysisResult   (weight 0.25)
                       ↓
      overall = round(Σ wᵢ·scoreᵢ / Σ wᵢ) over present sections, clamped
                       ↓
         FullCVAnalysisResult

A section whose data is absent (key missing or null) is skipped entirely and
its weight is left out of the denominator.
"""

import logging
from collections.abc import Mapping
from typing import Any

from models.schemas.analysis_options import AnalysisOptions
from models.schemas.analysis_result import FullCVAnalysisResult, SectionAnalysisResult
from models.schemas.cv_content import CVContent, CVDocument
from services.analysis.analyzer_registry import SECTION_NAMES, get_analyzer
from services.analysis.base import clamp_score
from services.lexicon_registry import resolve_language

logger = logging.getLogger(__name__)

SECTION_WEIGHTS: dict[str, float] = {
    "summary": 0.30,
    "experience": 0.45,
    "skills": 0.25,
}

LOW_SCORE_THRESHOLD = 60
GOOD_SCORE_THRESHOLD = 80

LOW_SCORE_RECOMMENDATIONS = (
    "Focus on adding quantifiable achievements and metrics",
    "Use stronger action verbs throughout your CV",
)
GOOD_SCORE_RECOMMENDATIONS = (
    "Tailor content more specifically to your target role",
    "Add more industry-relevant keywords",
)


def resolve_options(options: AnalysisOptions | Mapping[str, Any] | None) -> AnalysisOptions:
    if isinstance(options, AnalysisOptions):
        return options
    # Null values fall back to the model defaults
    raw = {key: value for key, value in dict(options or {}).items() if value is not None}
    if "language" in raw:
        raw["language"] = resolve_language(raw["language"])
    return AnalysisOptions.model_validate(raw)


def resolve_cv(cv: CVDocument | CVContent | Mapping[str, Any] | None) -> CVContent:
    """Extract CV content from a document, bare content or raw mapping."""
    if isinstance(cv, CVDocument):
        return cv.content
    if isinstance(cv, CVContent):
        return cv
    if isinstance(cv, Mapping):
        if "content" in cv:
            return CVDocument.model_validate(dict(cv)).content
        return CVContent.model_validate(dict(cv))
    return CVContent()


def analyze_summary(
    text: Any,
    options: AnalysisOptions | Mapping[str, Any] | None = None,
) -> SectionAnalysisResult:
    return get_analyzer("summary").analyze(text, resolve_options(options))


def analyze_experience(
    entries: Any,
    options: AnalysisOptions | Mapping[str, Any] | None = None,
) -> SectionAnalysisResult:
    return get_analyzer("experience").analyze(entries, resolve_options(options))


def analyze_skills(
    skills: Any,
    options: AnalysisOptions | Mapping[str, Any] | None = None,
) -> SectionAnalysisResult:
    return get_analyzer("skills").analyze(skills, resolve_options(options))


def compute_overall_score(section_scores: Mapping[str, int]) -> int:
    """Weighted mean of present section scores, weights renormalized to 1."""
    weights = {name: SECTION_WEIGHTS[name] for name in section_scores if name in SECTION_WEIGHTS}
    total_weight = sum(weights.values())
    if total_weight <= 0:
        return 0
    weighted = sum(section_scores[name] * weight for name, weight in weights.items())
    return clamp_score(weighted / total_weight)


def build_recommendations(overall_score: int) -> list[str]:
    recommendations: list[str] = []
    if overall_score < LOW_SCORE_THRESHOLD:
        recommendations.extend(LOW_SCORE_RECOMMENDATIONS)
    if overall_score < GOOD_SCORE_THRESHOLD:
        recommendations.extend(GOOD_SCORE_RECOMMENDATIONS)
    return recommendations


def analyze_full_cv(
    cv: CVDocument | CVContent | Mapping[str, Any] | None,
    options: AnalysisOptions | Mapping[str, Any] | None = None,
) -> FullCVAnalysisResult:
    """Analyze every present section and combine them into one score."""
    opts = resolve_options(options)
    content = resolve_cv(cv)

    section_data: dict[str, Any] = {
        "summary": content.summary,
        "experience": content.experience,
        "skills": content.skills,
    }

    section_analyses: dict[str, SectionAnalysisResult] = {}
    for name in SECTION_NAMES:
        data = section_data[name]
        if data is None:
            logger.debug("Section %s absent, skipped", name)
            continue
        section_analyses[name] = get_analyzer(name).analyze(data, opts)

    overall_score = compute_overall_score(
        {name: analysis.score for name, analysis in section_analyses.items()}
    )
    logger.debug(
        "CV analyzed (%s, industry=%s): sections=%s overall=%d",
        opts.language.value, opts.industry, list(section_analyses), overall_score,
    )
    return FullCVAnalysisResult(
        overall_score=overall_score,
        section_analyses=section_analyses,
        recommendations=build_recommendations(overall_score),
        language=opts.language,
        industry=opts.industry,
    )
