"""Abstract base class for the section analyzers."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from models.schemas.analysis_options import AnalysisOptions
from models.schemas.analysis_result import RuleOutcome, SectionAnalysisResult
from models.schemas.feedback import FeedbackCode
from services.rules import Rule

BASELINE_SCORE = 50


def clamp_score(value: float) -> int:
    return int(min(100, max(0, round(value))))


def fold_score(outcomes: Iterable[RuleOutcome], baseline: int = BASELINE_SCORE) -> int:
    """Baseline plus every delta, clamped to 0-100."""
    return clamp_score(baseline + sum(outcome.score_delta for outcome in outcomes))


class FeedbackCollector:
    """Accumulates feedback codes in first-seen order without duplicates."""

    def __init__(self, industry: str | None = None) -> None:
        self._industry = industry
        self._strengths: dict[FeedbackCode, None] = {}
        self._weaknesses: dict[FeedbackCode, None] = {}

    def add_strength(self, code: FeedbackCode) -> None:
        self._strengths.setdefault(code)

    def add_weakness(self, code: FeedbackCode) -> None:
        self._weaknesses.setdefault(code)

    def add_outcomes(self, outcomes: Iterable[RuleOutcome]) -> None:
        for outcome in outcomes:
            if outcome.strength is not None:
                self.add_strength(outcome.strength)
            if outcome.weakness is not None:
                self.add_weakness(outcome.weakness)

    def _suggestions(self) -> list[str]:
        suggestions: dict[str, None] = {}
        for code in self._weaknesses:
            if code.suggestion:
                suggestions.setdefault(code.suggestion.format(industry=self._industry or ""))
        return list(suggestions)

    def result(self, score: int, improved_content: list[str] | None = None) -> SectionAnalysisResult:
        return SectionAnalysisResult(
            score=clamp_score(score),
            strengths=list(dict.fromkeys(code.label for code in self._strengths)),
            weaknesses=list(dict.fromkeys(code.label for code in self._weaknesses)),
            suggestions=self._suggestions(),
            feedback_codes=[*self._strengths, *self._weaknesses],
            improved_content=improved_content or None,
        )


class BaseSectionAnalyzer(ABC):
    """Base class for section analyzers.

    Subclasses must implement:
        - section_name: key used in the full-CV result and analyzer registry
        - rules: fixed ordered rule sequence applied to the section's text
        - analyze(content, options): build a SectionAnalysisResult
    """

    section_name: str = ""
    rules: tuple[Rule, ...] = ()

    @abstractmethod
    def analyze(self, content: Any, options: AnalysisOptions) -> SectionAnalysisResult:
        """Score one section. Never raises for malformed content."""
