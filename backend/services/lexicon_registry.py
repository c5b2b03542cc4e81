"""Per-language lexicon registry.

Built once at import from the data modules in ``services/lexicons`` and exposed
read-only. Every entry is normalized at registration with the same tokenizer
the analyzers use, so matching is a direct set lookup. Adding a language means
adding a data module, a ``Language`` member and a line in ``_LEXICON_MODULES``.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType, ModuleType

from models.schemas.analysis_options import Language
from services.lexicons import de, en, es, fr
from services.text_normalizer import fold, normalize_term

logger = logging.getLogger(__name__)

_LEXICON_MODULES: dict[Language, ModuleType] = {
    Language.EN: en,
    Language.ES: es,
    Language.FR: fr,
    Language.DE: de,
}


class UnsupportedLanguageError(ValueError):
    """Raised when a language has no registry entry."""


@dataclass(frozen=True)
class LexiconSet:
    language: Language
    display_name: str
    strong_verbs: frozenset[str]
    weak_markers: frozenset[str]
    filler_words: frozenset[str]
    # industry -> skill terms in display form, and their normalized match keys
    industry_skills: Mapping[str, tuple[str, ...]]
    industry_skill_keys: Mapping[str, tuple[str, ...]]
    detection_words: frozenset[str]
    seniority_markers: frozenset[str]
    elisions: tuple[str, ...]
    rewrites: tuple[tuple[str, str], ...]
    metrics_prompt: str


def _terms(raw: Iterable[str], elisions: tuple[str, ...]) -> frozenset[str]:
    return frozenset(term for term in (normalize_term(r, elisions) for r in raw) if term)


def _ordered_unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(value for value in values if value))


def build_lexicon(language: Language, module: ModuleType) -> LexiconSet:
    """Normalize one language's raw data module into a LexiconSet."""
    elisions = tuple(fold(prefix) for prefix in module.ELISIONS)

    display: dict[str, tuple[str, ...]] = {}
    keys: dict[str, tuple[str, ...]] = {}
    for industry, skills in module.INDUSTRY_SKILLS.items():
        name = industry.strip().lower()
        terms = _ordered_unique(fold(skill) for skill in skills)
        display[name] = terms
        keys[name] = tuple(normalize_term(term, elisions) for term in terms)

    lexicon = LexiconSet(
        language=language,
        display_name=module.DISPLAY_NAME,
        strong_verbs=_terms(module.STRONG_VERBS, elisions),
        weak_markers=_terms(module.WEAK_MARKERS, elisions),
        filler_words=_terms(module.FILLER_WORDS, elisions),
        industry_skills=MappingProxyType(display),
        industry_skill_keys=MappingProxyType(keys),
        detection_words=_terms(module.DETECTION_WORDS, elisions),
        seniority_markers=_terms(module.SENIORITY_MARKERS, elisions),
        elisions=elisions,
        rewrites=tuple((fold(weak), strong) for weak, strong in module.REWRITES),
        metrics_prompt=module.METRICS_PROMPT,
    )
    if not lexicon.strong_verbs or not lexicon.weak_markers:
        raise ValueError(f"Lexicon for '{language.value}' has empty verb or marker sets")
    return lexicon


def _build_registry() -> Mapping[Language, LexiconSet]:
    registry = {
        language: build_lexicon(language, module)
        for language, module in _LEXICON_MODULES.items()
    }
    logger.info("Lexicon registry built for %d languages", len(registry))
    return MappingProxyType(registry)


_REGISTRY: Mapping[Language, LexiconSet] = _build_registry()


def resolve_language(language: Language | str) -> Language:
    """Accept a Language or its code in any case ("es", "ES")."""
    if isinstance(language, str) and not isinstance(language, Language):
        language = language.strip().lower()
    try:
        resolved = Language(language)
    except ValueError:
        raise UnsupportedLanguageError(f"Unsupported language: {language!r}") from None
    if resolved not in _REGISTRY:
        raise UnsupportedLanguageError(f"No lexicon registered for language: {resolved.value!r}")
    return resolved


def lexicon_for(language: Language | str) -> LexiconSet:
    """Lexicon for a supported language; fails fast for anything else."""
    return _REGISTRY[resolve_language(language)]


def industry_skills(language: Language | str, industry: str | None) -> tuple[str, ...]:
    """Skill terms for an industry, or an empty tuple if it is unknown."""
    if not industry:
        return ()
    return lexicon_for(language).industry_skills.get(industry.strip().lower(), ())


def industry_skill_keys(language: Language | str, industry: str | None) -> tuple[str, ...]:
    """Normalized match keys parallel to ``industry_skills``."""
    if not industry:
        return ()
    return lexicon_for(language).industry_skill_keys.get(industry.strip().lower(), ())


def supported_languages() -> tuple[Language, ...]:
    return tuple(_REGISTRY)


def supported_industries(language: Language | str) -> tuple[str, ...]:
    return tuple(lexicon_for(language).industry_skills)


def display_name(language: Language | str) -> str:
    return lexicon_for(language).display_name
