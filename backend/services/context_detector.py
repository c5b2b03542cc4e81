"""Automatic analysis context: language, industry and experience level.

All three are lexicon-driven: each counts registry terms in the CV text, so a
new language or industry is picked up without changes here.
"""

import logging
from collections.abc import Mapping
from typing import Any

from models.schemas.analysis_options import DEFAULT_LANGUAGE, ExperienceLevel, Language
from models.schemas.context import DetectedContext
from models.schemas.cv_content import CVContent, CVDocument
from services.cv_analyzer import resolve_cv
from services.lexicon_registry import (
    industry_skill_keys,
    lexicon_for,
    resolve_language,
    supported_industries,
    supported_languages,
)
from services.text_normalizer import find_terms, normalize, tokenize

logger = logging.getLogger(__name__)

YEARS_PER_ENTRY = 2
EXECUTIVE_MARKERS, EXECUTIVE_YEARS = 3, 10
SENIOR_MARKERS, SENIOR_YEARS = 2, 5
MID_YEARS = 2


def cv_text(content: CVContent) -> str:
    """All free text of a CV joined into one block."""
    chunks: list[str] = [content.summary or ""]
    for entry in content.experience or []:
        chunks.extend([entry.position, entry.company, entry.text])
    for skill in content.skills or []:
        chunks.append(skill.name)
    for project in content.projects or []:
        chunks.extend([project.name, project.description, *project.technologies])
    for education in content.education or []:
        chunks.extend([education.degree, education.field, education.description])
    return "\n".join(chunk for chunk in chunks if chunk)


def detect_language(text: str | None) -> Language:
    """Language whose detection words occur most often; EN on ties or no hits."""
    if not tokenize(text):
        return DEFAULT_LANGUAGE

    counts: dict[Language, int] = {}
    for language in supported_languages():
        lexicon = lexicon_for(language)
        # Elided clitics ("d'un", "c'est") count as their host word
        tokens = tokenize(text, lexicon.elisions)
        counts[language] = sum(1 for token in tokens if token in lexicon.detection_words)

    best = max(counts.values())
    winners = [language for language, count in counts.items() if count == best]
    if best == 0 or len(winners) > 1:
        return DEFAULT_LANGUAGE
    return winners[0]


def detect_industry(
    cv: CVDocument | CVContent | Mapping[str, Any] | None,
    language: Language | str = DEFAULT_LANGUAGE,
) -> str | None:
    """Industry whose skill terms appear most often, or None without hits."""
    tokens = normalize(cv_text(resolve_cv(cv)), language)
    best_industry: str | None = None
    best_hits = 0
    for industry in supported_industries(language):
        hits = len(find_terms(tokens, frozenset(industry_skill_keys(language, industry))))
        if hits > best_hits:
            best_industry, best_hits = industry, hits
    return best_industry


def detect_experience_level(
    cv: CVDocument | CVContent | Mapping[str, Any] | None,
    language: Language | str = DEFAULT_LANGUAGE,
) -> ExperienceLevel:
    """Rough seniority from the number of roles and leadership wording."""
    content = resolve_cv(cv)
    years = len(content.experience or []) * YEARS_PER_ENTRY
    tokens = normalize(cv_text(content), language)
    markers = len(find_terms(tokens, lexicon_for(language).seniority_markers))

    if markers >= EXECUTIVE_MARKERS or years >= EXECUTIVE_YEARS:
        return ExperienceLevel.EXECUTIVE
    if markers >= SENIOR_MARKERS or years >= SENIOR_YEARS:
        return ExperienceLevel.SENIOR
    if years >= MID_YEARS:
        return ExperienceLevel.MID
    return ExperienceLevel.ENTRY


def detect_context(
    cv: CVDocument | CVContent | Mapping[str, Any] | None,
    language: Language | str | None = None,
    industry: str | None = None,
) -> DetectedContext:
    """Fill in whatever the caller did not specify."""
    content = resolve_cv(cv)
    resolved = resolve_language(language) if language else detect_language(cv_text(content))
    context = DetectedContext(
        language=resolved,
        industry=industry.strip().lower() if industry and industry.strip() else detect_industry(content, resolved),
        level=detect_experience_level(content, resolved),
    )
    logger.debug("Detected context: %s", context.model_dump())
    return context
