"""Tests for lenient CV content models and analysis options."""

import pytest
from pydantic import ValidationError

from models.schemas.analysis_options import AnalysisOptions, Language
from models.schemas.cv_content import CVContent, CVDocument, ExperienceEntry, SkillEntry, SkillLevel
from models.schemas.feedback import FEEDBACK_LABELS, FeedbackCode


class TestCVContent:
    def test_camel_case_editor_payload(self, sample_cv):
        document = CVDocument.model_validate(sample_cv)
        assert document.content.personal_info.full_name == "Jane Doe"
        assert document.content.experience[0].company == "TechCorp"
        assert document.content.skills[0].level is SkillLevel.EXPERT

    def test_absent_sections_are_none(self):
        content = CVContent.model_validate({"summary": "Hello"})
        assert content.experience is None
        assert content.skills is None

    def test_empty_sections_are_kept(self):
        content = CVContent.model_validate({"summary": "", "experience": [], "skills": []})
        assert content.summary == ""
        assert content.experience == []
        assert content.skills == []

    def test_malformed_values_are_coerced(self):
        content = CVContent.model_validate({
            "summary": 42,
            "experience": [None, "Built APIs", {"description": None, "achievements": "Cut costs"}],
            "skills": "Python",
            "personalInfo": "not a mapping",
            "unknownField": {"x": 1},
        })
        assert content.summary == "42"
        assert [entry.description for entry in content.experience] == ["", "Built APIs", ""]
        assert content.experience[2].achievements == ["Cut costs"]
        assert [skill.name for skill in content.skills] == ["Python"]
        assert content.personal_info.full_name == ""

    def test_document_with_bad_content(self):
        assert CVDocument.model_validate({"content": "oops"}).content == CVContent()

    def test_experience_text_joins_achievements(self):
        entry = ExperienceEntry(description=" Built APIs ", achievements=["Cut costs 20%", "  "])
        assert entry.text == "Built APIs\nCut costs 20%"

    @pytest.mark.parametrize("raw, expected", [
        ("Expert", SkillLevel.EXPERT),
        (" beginner ", SkillLevel.BEGINNER),
        ("guru", None),
        (3, None),
        (None, None),
    ])
    def test_lenient_skill_level(self, raw, expected):
        assert SkillEntry(name="Go", level=raw).level is expected


class TestAnalysisOptions:
    def test_defaults(self):
        options = AnalysisOptions()
        assert options.language is Language.EN
        assert options.industry is None

    def test_industry_normalized(self):
        assert AnalysisOptions(industry="  Marketing ").industry == "marketing"
        assert AnalysisOptions(industry="   ").industry is None

    def test_frozen(self):
        options = AnalysisOptions()
        with pytest.raises(ValidationError):
            options.language = Language.ES

    def test_unknown_language_rejected(self):
        with pytest.raises(ValidationError):
            AnalysisOptions(language="it")


def test_every_feedback_code_has_a_label():
    assert set(FEEDBACK_LABELS) == set(FeedbackCode)
    assert FeedbackCode.TOO_BRIEF.label == "Too brief — add more detail"
    assert FeedbackCode.STRONG_ACTION_WORDS.suggestion is None
