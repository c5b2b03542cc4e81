"""Tests for automatic language, industry and seniority detection."""

import pytest

from conftest import PARITY_SUMMARIES
from models.schemas.analysis_options import ExperienceLevel, Language
from services.context_detector import (
    cv_text,
    detect_context,
    detect_experience_level,
    detect_industry,
    detect_language,
)
from services.cv_analyzer import resolve_cv
from services.lexicon_registry import UnsupportedLanguageError


class TestDetectLanguage:
    @pytest.mark.multilingual
    @pytest.mark.parametrize("language", list(Language))
    def test_parity_summaries(self, language):
        assert detect_language(PARITY_SUMMARIES[language]) is language

    @pytest.mark.parametrize("text", ["", "   ", "12345 !!", None])
    def test_falls_back_to_english(self, text):
        assert detect_language(text) is Language.EN

    def test_french_elisions_count_toward_detection(self):
        # "la" alone ties French with Spanish; "c'est" and "d'un" break the tie
        assert detect_language("C'est la refonte d'un site") is Language.FR

    def test_no_function_words(self):
        assert detect_language("Python Docker Kubernetes") is Language.EN


class TestDetectIndustry:
    def test_tech(self, sample_cv):
        assert detect_industry(sample_cv) == "tech"

    def test_marketing(self):
        cv = {"summary": "SEO and social media campaign specialist focused on brand content"}
        assert detect_industry(cv) == "marketing"

    def test_no_hits(self):
        assert detect_industry({"summary": "Gardener who loves plants"}) is None

    def test_uses_language_lexicon(self):
        cv = {"skills": ["Bases de datos", "Python", "Docker"]}
        assert detect_industry(cv, Language.ES) == "tech"


class TestDetectExperienceLevel:
    @staticmethod
    def _cv(entries: int) -> dict:
        return {"experience": [{"position": "Developer", "description": "Built internal tools"}] * entries}

    @pytest.mark.parametrize("entries, level", [
        (0, ExperienceLevel.ENTRY),
        (1, ExperienceLevel.MID),
        (3, ExperienceLevel.SENIOR),
        (5, ExperienceLevel.EXECUTIVE),
    ])
    def test_by_number_of_roles(self, entries, level):
        assert detect_experience_level(self._cv(entries)) is level

    def test_leadership_wording(self):
        cv = {"summary": "Senior director who led and managed teams"}
        assert detect_experience_level(cv) is ExperienceLevel.EXECUTIVE

    def test_german_markers(self):
        cv = {"summary": "Teamleiter, geleitet und geführt"}
        assert detect_experience_level(cv, Language.DE) is ExperienceLevel.EXECUTIVE


class TestDetectContext:
    def test_detects_everything(self, spanish_cv):
        context = detect_context(spanish_cv)
        assert context.language is Language.ES
        assert context.industry == "tech"

    def test_explicit_values_win(self, sample_cv):
        context = detect_context(sample_cv, language="de", industry=" Finance ")
        assert context.language is Language.DE
        assert context.industry == "finance"

    def test_unsupported_language(self, sample_cv):
        with pytest.raises(UnsupportedLanguageError):
            detect_context(sample_cv, language="it")


def test_cv_text_includes_all_sections(sample_cv):
    text = cv_text(resolve_cv(sample_cv))
    assert "TechCorp" in text
    assert "Docker" in text
    assert text.startswith("Experienced software engineer")
