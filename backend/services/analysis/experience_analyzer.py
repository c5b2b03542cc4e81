"""Work experience analyzer.

Every entry is scored on its own (baseline 50 plus rule deltas, clamped) and
the section score is the rounded mean of the entry scores. Feedback is merged
across entries without duplicates.
"""

import logging
from typing import Any

from models.schemas.analysis_options import AnalysisOptions
from models.schemas.analysis_result import SectionAnalysisResult
from models.schemas.cv_content import ExperienceEntry, coerce_entry
from models.schemas.feedback import FeedbackCode
from services import rules
from services.analysis.base import (
    BASELINE_SCORE,
    BaseSectionAnalyzer,
    FeedbackCollector,
    clamp_score,
    fold_score,
)
from services.lexicon_registry import lexicon_for
from services.text_normalizer import normalize

logger = logging.getLogger(__name__)

ENTRY_MIN_TOKENS = 8
ENTRY_MAX_TOKENS = 120


def coerce_experience(entries: Any) -> list[ExperienceEntry]:
    """Accept a list of models, mappings or bare description strings."""
    if entries is None:
        return []
    if isinstance(entries, (ExperienceEntry, dict, str)):
        entries = [entries]
    if not isinstance(entries, (list, tuple)):
        logger.warning("Ignoring experience payload of type %s", type(entries).__name__)
        return []
    return [coerce_entry(ExperienceEntry, raw, "description") for raw in entries]


class ExperienceAnalyzer(BaseSectionAnalyzer):
    section_name = "experience"
    rules = (
        rules.action_verbs,
        rules.passive_language_as(FeedbackCode.PASSIVE_LANGUAGE),
        rules.quantifiable_achievements,
        rules.bounded_length(ENTRY_MIN_TOKENS, ENTRY_MAX_TOKENS),
    )

    def analyze(self, content: Any, options: AnalysisOptions) -> SectionAnalysisResult:
        entries = coerce_experience(content)
        collector = FeedbackCollector(options.industry)

        if not entries:
            collector.add_weakness(FeedbackCode.NO_EXPERIENCE)
            collector.add_weakness(FeedbackCode.TOO_BRIEF)
            return collector.result(BASELINE_SCORE + rules.TOO_BRIEF_PENALTY)

        lexicon = lexicon_for(options.language)
        entry_scores: list[int] = []
        for entry in entries:
            text = entry.text
            tokens = normalize(text, options.language)
            outcomes = rules.evaluate(self.rules, tokens, text, lexicon)
            entry_scores.append(fold_score(outcomes))
            collector.add_outcomes(outcomes)

        score = clamp_score(sum(entry_scores) / len(entry_scores))
        logger.debug(
            "Experience analyzed (%s): %d entries, entry scores=%s, score=%d",
            options.language.value, len(entries), entry_scores, score,
        )
        return collector.result(score)
