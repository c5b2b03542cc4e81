"""Tests for the language-agnostic scoring rules."""

import pytest

from models.schemas.analysis_options import Language
from models.schemas.feedback import FeedbackCode
from services import rules
from services.lexicon_registry import lexicon_for
from services.text_normalizer import normalize


def _run(rule, text, language=Language.EN):
    return rule(normalize(text, language), text, lexicon_for(language))


class TestActionVerbs:
    def test_strong_verb_found(self):
        outcome = _run(rules.action_verbs, "Led the migration to Kubernetes")
        assert outcome.score_delta == rules.ACTION_VERB_BONUS
        assert outcome.strength is FeedbackCode.STRONG_ACTION_WORDS
        assert outcome.weakness is None

    def test_no_strong_verb(self):
        outcome = _run(rules.action_verbs, "Member of the platform team")
        assert outcome.score_delta == rules.ACTION_VERB_PENALTY
        assert outcome.weakness is FeedbackCode.NEEDS_ACTION_WORDS

    def test_matching_uses_language_lexicon(self):
        # "logrado" is only a strong verb in Spanish
        assert _run(rules.action_verbs, "Logrado mejoras", Language.ES).strength is FeedbackCode.STRONG_ACTION_WORDS
        assert _run(rules.action_verbs, "Logrado mejoras", Language.EN).weakness is FeedbackCode.NEEDS_ACTION_WORDS

    def test_silent_on_empty_text(self):
        assert _run(rules.action_verbs, "") is None


class TestPassiveLanguage:
    def test_multi_word_marker(self):
        outcome = _run(rules.passive_language, "Responsible for the billing service")
        assert outcome.score_delta == rules.PASSIVE_LANGUAGE_PENALTY
        assert outcome.weakness is FeedbackCode.WEAK_LANGUAGE

    def test_section_specific_weakness(self):
        rule = rules.passive_language_as(FeedbackCode.PASSIVE_LANGUAGE)
        outcome = _run(rule, "Trabajé en proyectos de desarrollo web", Language.ES)
        assert outcome.weakness is FeedbackCode.PASSIVE_LANGUAGE

    def test_marker_must_be_contiguous(self):
        assert _run(rules.passive_language, "Worked hard on the service") is None

    def test_no_marker(self):
        assert _run(rules.passive_language, "Built the billing service") is None


class TestQuantifiableAchievements:
    @pytest.mark.parametrize("text", [
        "Cut costs by 30",
        "Grew revenue by half, a 50% increase",
        "Saved $ on hosting",
        "Ahorro de €",
    ])
    def test_metrics_detected(self, text):
        outcome = _run(rules.quantifiable_achievements, text)
        assert outcome.strength is FeedbackCode.MEASURABLE_ACHIEVEMENTS
        assert outcome.score_delta == rules.METRICS_BONUS

    def test_no_metrics(self):
        outcome = _run(rules.quantifiable_achievements, "Improved the onboarding flow")
        assert outcome.weakness is FeedbackCode.LACKS_QUANTIFIABLE_RESULTS
        assert outcome.score_delta == rules.METRICS_PENALTY

    def test_silent_on_empty_text(self):
        assert _run(rules.quantifiable_achievements, "   ") is None


class TestLengthCheck:
    rule = staticmethod(rules.bounded_length(3, 5))

    def test_too_brief(self):
        outcome = _run(self.rule, "Built APIs")
        assert outcome.weakness is FeedbackCode.TOO_BRIEF
        assert outcome.score_delta == rules.TOO_BRIEF_PENALTY

    def test_empty_text_is_too_brief(self):
        assert _run(self.rule, "").weakness is FeedbackCode.TOO_BRIEF

    def test_within_bounds(self):
        assert _run(self.rule, "Built three public APIs") is None

    def test_too_long(self):
        outcome = _run(self.rule, "Built and shipped three public APIs quickly")
        assert outcome.weakness is FeedbackCode.TOO_LONG
        assert outcome.score_delta == rules.TOO_LONG_PENALTY


class TestFillerDensity:
    def test_dense_filler(self):
        outcome = _run(rules.filler_density, "Really very good at basically everything")
        assert outcome.weakness is FeedbackCode.FILLER_WORDS
        assert outcome.score_delta == rules.FILLER_PENALTY

    def test_sparse_filler_ignored(self):
        text = "Designed and delivered a payments platform serving twelve countries with very low latency"
        assert _run(rules.filler_density, text) is None

    def test_multi_word_filler_counts_all_tokens(self):
        text = "Kind of a lead"
        assert _run(rules.filler_density, text) is not None

    def test_german_filler(self):
        outcome = _run(rules.filler_density, "Ich habe halt eigentlich sehr viel gemacht", Language.DE)
        assert outcome.weakness is FeedbackCode.FILLER_WORDS


def test_evaluate_keeps_rule_order_and_drops_silent_rules():
    lexicon = lexicon_for(Language.EN)
    text = "Led things"
    outcomes = rules.evaluate(
        (rules.action_verbs, rules.passive_language, rules.bounded_length(10, 20), rules.filler_density),
        normalize(text, Language.EN),
        text,
        lexicon,
    )
    assert [outcome.rule for outcome in outcomes] == ["action_verbs", "length_check", "filler_density"]
