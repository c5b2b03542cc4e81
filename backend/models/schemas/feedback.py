"""Tagged feedback conditions emitted by the scoring rules."""

from enum import Enum


class FeedbackCode(str, Enum):
    STRONG_ACTION_WORDS = "strong_action_words"
    NEEDS_ACTION_WORDS = "needs_action_words"
    PASSIVE_LANGUAGE = "passive_language"
    WEAK_LANGUAGE = "weak_language"
    MEASURABLE_ACHIEVEMENTS = "measurable_achievements"
    LACKS_QUANTIFIABLE_RESULTS = "lacks_quantifiable_results"
    TOO_BRIEF = "too_brief"
    TOO_LONG = "too_long"
    FILLER_WORDS = "filler_words"
    NO_EXPERIENCE = "no_experience"
    NO_SKILLS = "no_skills"
    SKILL_VARIETY = "skill_variety"
    FEW_SKILLS = "few_skills"
    ADVANCED_PROFICIENCY = "advanced_proficiency"
    LIMITED_PROFICIENCY = "limited_proficiency"
    INDUSTRY_RELEVANT_SKILLS = "industry_relevant_skills"
    MISSING_INDUSTRY_SKILLS = "missing_industry_skills"

    @property
    def label(self) -> str:
        return FEEDBACK_LABELS[self]

    @property
    def suggestion(self) -> str | None:
        return FEEDBACK_SUGGESTIONS.get(self)


# Canonical labels are identical for every analysis language.
FEEDBACK_LABELS: dict[FeedbackCode, str] = {
    FeedbackCode.STRONG_ACTION_WORDS: "Uses strong action words",
    FeedbackCode.NEEDS_ACTION_WORDS: "Could use more action-oriented language",
    FeedbackCode.PASSIVE_LANGUAGE: "Uses passive language in job descriptions",
    FeedbackCode.WEAK_LANGUAGE: "Uses weak or passive phrasing",
    FeedbackCode.MEASURABLE_ACHIEVEMENTS: "Includes measurable achievements",
    FeedbackCode.LACKS_QUANTIFIABLE_RESULTS: "Lacks quantifiable results",
    FeedbackCode.TOO_BRIEF: "Too brief — add more detail",
    FeedbackCode.TOO_LONG: "Consider being more concise",
    FeedbackCode.FILLER_WORDS: "Overuses filler words",
    FeedbackCode.NO_EXPERIENCE: "No work experience listed",
    FeedbackCode.NO_SKILLS: "No skills listed",
    FeedbackCode.SKILL_VARIETY: "Good variety of skills listed",
    FeedbackCode.FEW_SKILLS: "Lists too few skills",
    FeedbackCode.ADVANCED_PROFICIENCY: "Highlights advanced proficiency levels",
    FeedbackCode.LIMITED_PROFICIENCY: "Skill levels suggest limited expertise",
    FeedbackCode.INDUSTRY_RELEVANT_SKILLS: "Skills are relevant to target industry",
    FeedbackCode.MISSING_INDUSTRY_SKILLS: "Missing key skills for target industry",
}

# Only weaknesses carry a suggestion. "{industry}" is filled in by the caller.
FEEDBACK_SUGGESTIONS: dict[FeedbackCode, str] = {
    FeedbackCode.NEEDS_ACTION_WORDS: 'Include more power words like "achieved", "led", "improved"',
    FeedbackCode.PASSIVE_LANGUAGE: "Replace passive phrases with strong action verbs",
    FeedbackCode.WEAK_LANGUAGE: "Replace passive phrases with strong action verbs",
    FeedbackCode.LACKS_QUANTIFIABLE_RESULTS: "Add specific metrics and results to demonstrate impact",
    FeedbackCode.TOO_BRIEF: "Expand with specific achievements and context",
    FeedbackCode.TOO_LONG: "Keep the most relevant points and trim repetition",
    FeedbackCode.FILLER_WORDS: "Remove filler words to keep the text focused",
    FeedbackCode.NO_EXPERIENCE: "Add your work experience with specific achievements",
    FeedbackCode.NO_SKILLS: "Add relevant technical and soft skills",
    FeedbackCode.FEW_SKILLS: "Add more skills to demonstrate breadth of expertise",
    FeedbackCode.LIMITED_PROFICIENCY: "Highlight the skills you are most proficient in",
    FeedbackCode.MISSING_INDUSTRY_SKILLS: "Add more {industry}-specific skills",
}
