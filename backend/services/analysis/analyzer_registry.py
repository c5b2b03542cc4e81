"""Registry of section analyzers.

Analyzers are stateless, so one instance per section is shared by every call.
Follows the same pattern as the lexicon registry: created once, never mutated.
"""

import logging

from services.analysis.base import BaseSectionAnalyzer

logger = logging.getLogger(__name__)

SECTION_NAMES: tuple[str, ...] = ("summary", "experience", "skills")

_registry: dict[str, BaseSectionAnalyzer] = {}


def _create_analyzer(name: str) -> BaseSectionAnalyzer:
    """Factory: create a section analyzer by name with deferred imports."""
    if name == "summary":
        from services.analysis.summary_analyzer import SummaryAnalyzer
        return SummaryAnalyzer()
    elif name == "experience":
        from services.analysis.experience_analyzer import ExperienceAnalyzer
        return ExperienceAnalyzer()
    elif name == "skills":
        from services.analysis.skills_analyzer import SkillsAnalyzer
        return SkillsAnalyzer()
    else:
        raise ValueError(f"Unknown section analyzer: {name}")


def get_analyzer(name: str) -> BaseSectionAnalyzer:
    """Get a section analyzer by name, creating it on first access."""
    if name not in _registry:
        _registry.setdefault(name, _create_analyzer(name))
    return _registry[name]


def preload(*names: str) -> None:
    """Create analyzers ahead of the first request (e.g. at startup)."""
    for name in names or SECTION_NAMES:
        get_analyzer(name)
    logger.info("Section analyzers ready: %s", ", ".join(sorted(_registry)))


def clear() -> None:
    """Drop all analyzer instances. Useful for testing."""
    _registry.clear()
