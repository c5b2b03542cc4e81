"""Shared test configuration, markers and sample CV content."""

import pytest

from models.schemas.analysis_options import AnalysisOptions, Language
from services.analysis.analyzer_registry import clear as clear_analyzers


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "multilingual: checks behaviour across every supported language"
    )


# Equivalent summaries: one strong verb each, no weak or filler wording
PARITY_SUMMARIES: dict[Language, str] = {
    Language.EN: (
        "Experienced software engineer with expertise in React and Node.js. "
        "Achieved significant improvements in application performance."
    ),
    Language.ES: (
        "Ingeniero de software experimentado con experiencia en React y Node.js. "
        "Logrado mejoras significativas en el rendimiento de aplicaciones."
    ),
    Language.FR: (
        "Ingénieur logiciel expérimenté avec expertise en React et Node.js. "
        "Réalisé des améliorations significatives dans les performances des applications."
    ),
    Language.DE: (
        "Erfahrener Software-Ingenieur mit Expertise in React und Node.js. "
        "Erreicht signifikante Verbesserungen in der Anwendungsleistung."
    ),
}


@pytest.fixture(autouse=True)
def _reset_analyzers():
    """Start every test with a fresh analyzer registry."""
    clear_analyzers()
    yield
    clear_analyzers()


@pytest.fixture
def en_options() -> AnalysisOptions:
    return AnalysisOptions(language=Language.EN)


@pytest.fixture
def es_options() -> AnalysisOptions:
    return AnalysisOptions(language=Language.ES)


@pytest.fixture
def sample_cv() -> dict:
    return {
        "id": "cv-1",
        "title": "Backend Engineer",
        "content": {
            "personalInfo": {"fullName": "Jane Doe", "email": "jane@example.com"},
            "summary": PARITY_SUMMARIES[Language.EN],
            "experience": [
                {
                    "position": "Senior Engineer",
                    "company": "TechCorp",
                    "description": (
                        "Led a team of 6 engineers and increased deployment "
                        "frequency by 40% across 3 product lines"
                    ),
                },
            ],
            "skills": [
                {"name": "Python", "level": "expert"},
                {"name": "Docker", "level": "advanced"},
                {"name": "React", "level": "intermediate"},
            ],
        },
    }


@pytest.fixture
def spanish_cv() -> dict:
    return {
        "content": {
            "summary": "Desarrollador full-stack con experiencia en tecnologías modernas",
            "experience": [{
                "position": "Senior Developer",
                "company": "Tech Company",
                "description": "Lideré el desarrollo de aplicaciones web escalables",
            }],
            "skills": [{"name": "JavaScript", "level": "expert"}],
        }
    }
