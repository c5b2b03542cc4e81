"""Language-agnostic scoring rules.

Each rule is a pure function ``(tokens, text, lexicon, **params)`` returning a
RuleOutcome or None when it has nothing to say. All language variance comes
from the LexiconSet argument. Rules never raise on empty input.
"""

import logging
import re
from collections.abc import Callable, Sequence
from functools import partial

from models.schemas.analysis_result import RuleOutcome
from models.schemas.feedback import FeedbackCode
from services.lexicon_registry import LexiconSet
from services.text_normalizer import count_term_tokens, find_terms

logger = logging.getLogger(__name__)

Rule = Callable[[list[str], str, LexiconSet], RuleOutcome | None]

ACTION_VERB_BONUS = 15
ACTION_VERB_PENALTY = -5
PASSIVE_LANGUAGE_PENALTY = -10
METRICS_BONUS = 15
METRICS_PENALTY = -5
TOO_BRIEF_PENALTY = -25
TOO_LONG_PENALTY = -5
FILLER_PENALTY = -10
FILLER_DENSITY_THRESHOLD = 0.08

# Digits, percentages and currency signs count as measurable results
_METRICS_RE = re.compile(r"\d|%|[$€£¥]")


def action_verbs(tokens: list[str], text: str, lexicon: LexiconSet) -> RuleOutcome | None:
    if not tokens:
        return None
    if find_terms(tokens, lexicon.strong_verbs):
        return RuleOutcome(
            rule="action_verbs",
            score_delta=ACTION_VERB_BONUS,
            strength=FeedbackCode.STRONG_ACTION_WORDS,
        )
    return RuleOutcome(
        rule="action_verbs",
        score_delta=ACTION_VERB_PENALTY,
        weakness=FeedbackCode.NEEDS_ACTION_WORDS,
    )


def passive_language(
    tokens: list[str],
    text: str,
    lexicon: LexiconSet,
    *,
    weakness: FeedbackCode = FeedbackCode.WEAK_LANGUAGE,
) -> RuleOutcome | None:
    markers = find_terms(tokens, lexicon.weak_markers)
    if not markers:
        return None
    logger.debug("Weak language markers: %s", markers)
    return RuleOutcome(
        rule="passive_language",
        score_delta=PASSIVE_LANGUAGE_PENALTY,
        weakness=weakness,
    )


def quantifiable_achievements(tokens: list[str], text: str, lexicon: LexiconSet) -> RuleOutcome | None:
    if not tokens:
        return None
    if _METRICS_RE.search(text or ""):
        return RuleOutcome(
            rule="quantifiable_achievements",
            score_delta=METRICS_BONUS,
            strength=FeedbackCode.MEASURABLE_ACHIEVEMENTS,
        )
    return RuleOutcome(
        rule="quantifiable_achievements",
        score_delta=METRICS_PENALTY,
        weakness=FeedbackCode.LACKS_QUANTIFIABLE_RESULTS,
    )


def length_check(
    tokens: list[str],
    text: str,
    lexicon: LexiconSet,
    *,
    min_tokens: int,
    max_tokens: int,
) -> RuleOutcome | None:
    if len(tokens) < min_tokens:
        return RuleOutcome(
            rule="length_check",
            score_delta=TOO_BRIEF_PENALTY,
            weakness=FeedbackCode.TOO_BRIEF,
        )
    if len(tokens) > max_tokens:
        return RuleOutcome(
            rule="length_check",
            score_delta=TOO_LONG_PENALTY,
            weakness=FeedbackCode.TOO_LONG,
        )
    return None


def filler_density(tokens: list[str], text: str, lexicon: LexiconSet) -> RuleOutcome | None:
    if not tokens:
        return None
    density = count_term_tokens(tokens, lexicon.filler_words) / len(tokens)
    if density <= FILLER_DENSITY_THRESHOLD:
        return None
    return RuleOutcome(
        rule="filler_density",
        score_delta=FILLER_PENALTY,
        weakness=FeedbackCode.FILLER_WORDS,
    )


def bounded_length(min_tokens: int, max_tokens: int) -> Rule:
    """length_check with section-specific thresholds bound in."""
    return partial(length_check, min_tokens=min_tokens, max_tokens=max_tokens)


def passive_language_as(weakness: FeedbackCode) -> Rule:
    """passive_language reporting a section-specific weakness."""
    return partial(passive_language, weakness=weakness)


def evaluate(
    rules: Sequence[Rule],
    tokens: list[str],
    text: str,
    lexicon: LexiconSet,
) -> list[RuleOutcome]:
    """Run rules in order and keep the outcomes that fired."""
    outcomes: list[RuleOutcome] = []
    for rule in rules:
        outcome = rule(tokens, text, lexicon)
        if outcome is not None:
            outcomes.append(outcome)
    return outcomes
