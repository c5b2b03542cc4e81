"""Declared skills analyzer.

Scores the number of skills and their proficiency levels and, when an industry
is requested, compares declared names against the industry's skill terms for
the analysis language. Missing industry skills become ``improved_content``.
"""

import logging
import re
from typing import Any

from models.schemas.analysis_options import AnalysisOptions
from models.schemas.analysis_result import SectionAnalysisResult
from models.schemas.cv_content import SkillEntry, SkillLevel, coerce_entry
from models.schemas.feedback import FeedbackCode
from services.analysis.base import BASELINE_SCORE, BaseSectionAnalyzer, FeedbackCollector, clamp_score
from services.lexicon_registry import industry_skill_keys, industry_skills, lexicon_for
from services.text_normalizer import find_terms, tokenize

logger = logging.getLogger(__name__)

EMPTY_SKILLS_PENALTY = -25
VARIETY_THRESHOLD = 8
VARIETY_BONUS = 15
MODERATE_THRESHOLD = 4
MODERATE_BONUS = 5
FEW_SKILLS_THRESHOLD = 3
FEW_SKILLS_PENALTY = -10

LEVEL_WEIGHTS: dict[SkillLevel | None, float] = {
    SkillLevel.EXPERT: 1.0,
    SkillLevel.ADVANCED: 0.75,
    SkillLevel.INTERMEDIATE: 0.4,
    SkillLevel.BEGINNER: 0.1,
    None: 0.4,
}
NEUTRAL_LEVEL_WEIGHT = 0.4
LEVEL_SCALE = 25
ADVANCED_LEVEL_THRESHOLD = 0.7
LIMITED_LEVEL_THRESHOLD = 0.3

INDUSTRY_MATCH_THRESHOLD = 3
INDUSTRY_BONUS = 10

# Splits compound tokens such as "react.js" into "react" and "js"
_SUBWORD_RE = re.compile(r"[.\-']")


def declared_token_runs(names: list[str], elisions: tuple[str, ...] = ()) -> list[list[str]]:
    """Token runs a declared skill name can match against.

    Each name contributes its own tokens and, when it has compound tokens, the
    same tokens split at dots, hyphens and apostrophes.
    """
    runs: list[list[str]] = []
    for name in names:
        tokens = tokenize(name, elisions)
        if not tokens:
            continue
        runs.append(tokens)
        parts = [part for token in tokens for part in _SUBWORD_RE.split(token) if part]
        if parts != tokens:
            runs.append(parts)
    return runs


def is_declared(key: str, runs: list[list[str]]) -> bool:
    """Whether a skill term occurs as a whole-word run in any declared name."""
    return any(find_terms(run, (key,)) for run in runs)


def coerce_skills(skills: Any) -> list[SkillEntry]:
    """Accept a list of models, mappings or bare skill names."""
    if skills is None:
        return []
    if isinstance(skills, (SkillEntry, dict, str)):
        skills = [skills]
    if not isinstance(skills, (list, tuple)):
        logger.warning("Ignoring skills payload of type %s", type(skills).__name__)
        return []
    return [coerce_entry(SkillEntry, raw, "name") for raw in skills]


class SkillsAnalyzer(BaseSectionAnalyzer):
    section_name = "skills"

    def analyze(self, content: Any, options: AnalysisOptions) -> SectionAnalysisResult:
        skills = [skill for skill in coerce_skills(content) if skill.name.strip()]
        collector = FeedbackCollector(options.industry)
        lexicon = lexicon_for(options.language)
        declared = declared_token_runs([skill.name for skill in skills], lexicon.elisions)

        if skills:
            score = BASELINE_SCORE + self._count_delta(len(skills), collector)
            score += self._level_delta(skills, collector)
        else:
            collector.add_weakness(FeedbackCode.NO_SKILLS)
            score = BASELINE_SCORE + EMPTY_SKILLS_PENALTY

        missing: list[str] = []
        if options.industry:
            terms = industry_skills(options.language, options.industry)
            keys = industry_skill_keys(options.language, options.industry)
            if terms:
                matched = [key for key in keys if is_declared(key, declared)]
                missing = [term for term, key in zip(terms, keys) if not is_declared(key, declared)]
                if len(matched) >= INDUSTRY_MATCH_THRESHOLD:
                    score += INDUSTRY_BONUS
                    collector.add_strength(FeedbackCode.INDUSTRY_RELEVANT_SKILLS)
                else:
                    collector.add_weakness(FeedbackCode.MISSING_INDUSTRY_SKILLS)
            else:
                logger.debug("No skill terms for industry %r in %s", options.industry, options.language.value)

        score = clamp_score(score)
        logger.debug(
            "Skills analyzed (%s): %d declared, %d suggested, score=%d",
            options.language.value, len(skills), len(missing), score,
        )
        return collector.result(score, improved_content=list(dict.fromkeys(missing)))

    @staticmethod
    def _count_delta(count: int, collector: FeedbackCollector) -> int:
        if count >= VARIETY_THRESHOLD:
            collector.add_strength(FeedbackCode.SKILL_VARIETY)
            return VARIETY_BONUS
        if count >= MODERATE_THRESHOLD:
            return MODERATE_BONUS
        if count < FEW_SKILLS_THRESHOLD:
            collector.add_weakness(FeedbackCode.FEW_SKILLS)
            return FEW_SKILLS_PENALTY
        return 0

    @staticmethod
    def _level_delta(skills: list[SkillEntry], collector: FeedbackCollector) -> int:
        mean = sum(LEVEL_WEIGHTS[skill.level] for skill in skills) / len(skills)
        if mean >= ADVANCED_LEVEL_THRESHOLD:
            collector.add_strength(FeedbackCode.ADVANCED_PROFICIENCY)
        elif mean < LIMITED_LEVEL_THRESHOLD:
            collector.add_weakness(FeedbackCode.LIMITED_PROFICIENCY)
        return round((mean - NEUTRAL_LEVEL_WEIGHT) * LEVEL_SCALE)
