"""Rule-based rewrites of summary and experience text.

Weak phrases from the language's rewrite table are replaced case-insensitively
on word boundaries. Experience descriptions without any number get the
language's metrics prompt appended as a new bullet.
"""

import logging
import re
from functools import lru_cache
from typing import Any

from models.schemas.analysis_options import AnalysisOptions, Language
from models.schemas.cv_content import ExperienceEntry, to_text
from services.analysis.experience_analyzer import coerce_experience
from services.cv_analyzer import resolve_options
from services.lexicon_registry import lexicon_for

logger = logging.getLogger(__name__)

_DIGIT_RE = re.compile(r"\d")


@lru_cache(maxsize=None)
def _rewrite_patterns(language: Language) -> tuple[tuple[re.Pattern, str], ...]:
    # Longest phrases first so "fui responsable de" wins over "responsable de"
    pairs = sorted(lexicon_for(language).rewrites, key=lambda pair: len(pair[0]), reverse=True)
    return tuple(
        (re.compile(rf"(?<!\w){re.escape(weak)}(?!\w)", re.IGNORECASE), strong)
        for weak, strong in pairs
    )


def _keep_case(strong: str):
    def _replace(match: re.Match) -> str:
        if match.group(0)[:1].isupper():
            return strong[:1].upper() + strong[1:]
        return strong
    return _replace


def rewrite_weak_phrases(text: str, language: Language) -> str:
    improved = text
    for pattern, strong in _rewrite_patterns(language):
        improved = pattern.sub(_keep_case(strong), improved)
    return improved


def improve_summary(text: Any, options: AnalysisOptions | dict | None = None) -> str:
    opts = resolve_options(options)
    return rewrite_weak_phrases(to_text(text), opts.language)


def improve_experience(entries: Any, options: AnalysisOptions | dict | None = None) -> list[ExperienceEntry]:
    opts = resolve_options(options)
    prompt = lexicon_for(opts.language).metrics_prompt
    improved: list[ExperienceEntry] = []
    for entry in coerce_experience(entries):
        description = entry.description
        if description.strip():
            description = rewrite_weak_phrases(description, opts.language)
            if not _DIGIT_RE.search(description):
                description = f"{description.rstrip()}\n{prompt}"
        improved.append(entry.model_copy(update={"description": description}))
    logger.debug("Improved %d experience entries (%s)", len(improved), opts.language.value)
    return improved
