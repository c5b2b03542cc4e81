from fastapi.testclient import TestClient

from conftest import PARITY_SUMMARIES
from main import app
from models.schemas.analysis_options import Language

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert set(data["languages"]) == {"en", "es", "fr", "de"}


def test_capabilities():
    response = client.get("/capabilities")
    assert response.status_code == 200
    data = response.json()
    assert {"code": "es", "name": "Español"} in data["languages"]
    assert "tech" in data["industries"]
    assert data["analysis_types"] == ["summary", "experience", "skills", "full"]
    assert "senior" in data["levels"]


def test_analyze_summary_explicit_language():
    response = client.post(
        "/analyze/summary",
        json={"summary": PARITY_SUMMARIES[Language.ES], "language": "es"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 65
    assert "Uses strong action words" in data["strengths"]
    assert data["feedback_codes"] == ["strong_action_words"]


def test_analyze_summary_detects_language():
    # "logrado" is only recognized through the Spanish lexicon
    response = client.post("/analyze/summary", json={"summary": PARITY_SUMMARIES[Language.ES]})
    assert response.status_code == 200
    assert "Uses strong action words" in response.json()["strengths"]


def test_analyze_summary_rejects_unsupported_language():
    response = client.post("/analyze/summary", json={"summary": "Testo", "language": "it"})
    assert response.status_code == 422


def test_analyze_summary_rejects_oversized_text():
    response = client.post("/analyze/summary", json={"summary": "a " * 20001, "language": "en"})
    assert response.status_code == 400


def test_analyze_empty_summary():
    response = client.post("/analyze/summary", json={"summary": ""})
    assert response.status_code == 200
    assert response.json()["score"] == 25


def test_analyze_experience():
    response = client.post(
        "/analyze/experience",
        json={
            "language": "es",
            "experience": [{"position": "Dev", "description": "Trabajé en proyectos de desarrollo web"}],
        },
    )
    assert response.status_code == 200
    assert "Uses passive language in job descriptions" in response.json()["weaknesses"]


def test_analyze_skills_with_industry():
    response = client.post(
        "/analyze/skills",
        json={"language": "es", "industry": "tech", "skills": [{"name": "JavaScript", "level": "expert"}]},
    )
    assert response.status_code == 200
    data = response.json()
    assert "react" in data["improved_content"]
    assert "javascript" not in data["improved_content"]


def test_analyze_cv_skips_missing_section(sample_cv):
    del sample_cv["content"]["skills"]
    response = client.post("/analyze/cv", json={"cv": sample_cv, "language": "en"})
    assert response.status_code == 200
    data = response.json()
    assert set(data["section_analyses"]) == {"summary", "experience"}
    assert 0 <= data["overall_score"] <= 100
    assert data["language"] == "en"


def test_analyze_cv_spanish(spanish_cv):
    response = client.post("/analyze/cv", json={"cv": spanish_cv})
    assert response.status_code == 200
    data = response.json()
    assert data["language"] == "es"
    assert data["overall_score"] > 0


def test_improve_rejects_unknown_section(sample_cv):
    response = client.post("/improve", json={"cv": sample_cv, "section": "hobbies"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid section specified"


def test_improve_summary(sample_cv):
    sample_cv["content"]["summary"] = "Responsible for the billing platform and worked on payments for many clients"
    response = client.post("/improve", json={"cv": sample_cv, "section": "summary"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["improvement"].startswith("Managed and delivered")
    assert "Score:" in data["message"]
    assert data["context"]["language"] == "en"


def test_improve_experience(spanish_cv):
    response = client.post("/improve", json={"cv": spanish_cv, "section": "experience"})
    assert response.status_code == 200
    data = response.json()
    assert data["context"]["language"] == "es"
    assert data["improvement"][0]["description"].endswith("superé los objetivos de rendimiento")


def test_improve_full(sample_cv):
    response = client.post("/improve", json={"cv": sample_cv, "section": "full", "target_role": "Staff Engineer"})
    assert response.status_code == 200
    data = response.json()
    assert data["message"].startswith("CV Analysis Complete!")
    assert data["analysis"]["overall_score"] >= 0
    assert data["context"]["target_role"] == "Staff Engineer"
    assert data["context"]["industry"] == "tech"
