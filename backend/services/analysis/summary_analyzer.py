"""Professional summary analyzer."""

import logging
from typing import Any

from models.schemas.analysis_options import AnalysisOptions
from models.schemas.analysis_result import SectionAnalysisResult
from models.schemas.cv_content import to_text
from models.schemas.feedback import FeedbackCode
from services import rules
from services.analysis.base import BaseSectionAnalyzer, FeedbackCollector, fold_score
from services.lexicon_registry import lexicon_for
from services.text_normalizer import normalize

logger = logging.getLogger(__name__)

SUMMARY_MIN_TOKENS = 10
SUMMARY_MAX_TOKENS = 150


class SummaryAnalyzer(BaseSectionAnalyzer):
    section_name = "summary"
    rules = (
        rules.action_verbs,
        rules.passive_language_as(FeedbackCode.WEAK_LANGUAGE),
        rules.bounded_length(SUMMARY_MIN_TOKENS, SUMMARY_MAX_TOKENS),
        rules.filler_density,
    )

    def analyze(self, content: Any, options: AnalysisOptions) -> SectionAnalysisResult:
        text = to_text(content)
        lexicon = lexicon_for(options.language)
        tokens = normalize(text, options.language)

        outcomes = rules.evaluate(self.rules, tokens, text, lexicon)
        score = fold_score(outcomes)

        collector = FeedbackCollector(options.industry)
        collector.add_outcomes(outcomes)
        logger.debug("Summary analyzed (%s): %d tokens, score=%d", options.language.value, len(tokens), score)
        return collector.result(score)
