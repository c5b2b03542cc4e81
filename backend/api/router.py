from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import build_options
from config import settings
from models.requests import (
    CVAnalyzeRequest,
    ExperienceAnalyzeRequest,
    ImproveRequest,
    SkillsAnalyzeRequest,
    SummaryAnalyzeRequest,
)
from models.responses import CapabilitiesResponse, ImprovementContext, ImprovementResponse, LanguageInfo
from models.schemas.analysis_options import ExperienceLevel
from models.schemas.analysis_result import FullCVAnalysisResult, SectionAnalysisResult
from services import content_improver, cv_analyzer
from services.analysis.analyzer_registry import SECTION_NAMES
from services.context_detector import cv_text, detect_context
from services.lexicon_registry import display_name, supported_industries, supported_languages

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

ANALYSIS_TYPES = [*SECTION_NAMES, "full"]
FEATURES = [
    "Industry-specific skill suggestions",
    "Power word detection",
    "Quantifiable achievement detection",
    "Weak language identification",
    "Filler word detection",
    "Weak phrase rewriting",
    "Skill gap analysis",
    "Overall CV scoring",
]


def _check_length(field: str, text: str | None) -> None:
    if text and len(text) > settings.max_text_length:
        raise HTTPException(
            status_code=400,
            detail=f"{field} too long (max {settings.max_text_length} chars)",
        )


def _score_message(section: str, score: int) -> str:
    if score >= 80:
        return f"Excellent {section}! Score: {score}/100. Minor enhancements applied."
    if score >= 60:
        return f"Good {section} with room for improvement! Score: {score}/100. Enhanced with stronger language and metrics."
    return f"Significant improvements made to your {section}! Score: {score}/100. Added impact-focused content."


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "languages": [language.value for language in supported_languages()],
    }


@router.get("/capabilities", response_model=CapabilitiesResponse)
async def capabilities():
    default = settings.default_language
    return CapabilitiesResponse(
        languages=[
            LanguageInfo(code=language.value, name=display_name(language))
            for language in supported_languages()
        ],
        industries=list(supported_industries(default)),
        levels=[level.value for level in ExperienceLevel],
        analysis_types=ANALYSIS_TYPES,
        features=FEATURES,
    )


@router.post("/analyze/summary", response_model=SectionAnalysisResult)
@limiter.limit(settings.rate_limit)
async def analyze_summary(request: Request, body: SummaryAnalyzeRequest):
    _check_length("Summary", body.summary)
    options = build_options(body.language, body.industry, body.summary or "")
    return cv_analyzer.analyze_summary(body.summary, options)


@router.post("/analyze/experience", response_model=SectionAnalysisResult)
@limiter.limit(settings.rate_limit)
async def analyze_experience(request: Request, body: ExperienceAnalyzeRequest):
    entries = body.experience or []
    for entry in entries:
        _check_length("Experience description", entry.text)
    options = build_options(body.language, body.industry, "\n".join(entry.text for entry in entries))
    return cv_analyzer.analyze_experience(entries, options)


@router.post("/analyze/skills", response_model=SectionAnalysisResult)
@limiter.limit(settings.rate_limit)
async def analyze_skills(request: Request, body: SkillsAnalyzeRequest):
    # Skill names are too short to detect a language from
    options = build_options(body.language or settings.default_language, body.industry)
    return cv_analyzer.analyze_skills(body.skills or [], options)


@router.post("/analyze/cv", response_model=FullCVAnalysisResult)
@limiter.limit(settings.rate_limit)
async def analyze_cv(request: Request, body: CVAnalyzeRequest):
    text = cv_text(body.cv.content)
    _check_length("CV content", text)
    options = build_options(body.language, body.industry, text)
    return cv_analyzer.analyze_full_cv(body.cv, options)


@router.post("/improve", response_model=ImprovementResponse)
@limiter.limit(settings.rate_limit)
async def improve(request: Request, body: ImproveRequest):
    section = body.section.strip().lower()
    if section not in ANALYSIS_TYPES:
        raise HTTPException(status_code=400, detail="Invalid section specified")

    content = body.cv.content
    detected = detect_context(content, language=body.language)
    options = build_options(detected.language, detected.industry)
    context = ImprovementContext(
        **detected.model_dump(),
        target_role=body.target_role or "",
    )

    if section == "full":
        analysis = cv_analyzer.analyze_full_cv(content, options)
        return ImprovementResponse(
            section=section,
            analysis=analysis,
            context=context,
            message=f"CV Analysis Complete! Overall Score: {analysis.overall_score}/100",
        )

    if section == "summary":
        analysis = cv_analyzer.analyze_summary(content.summary, options)
        improvement = content_improver.improve_summary(content.summary, options)
    elif section == "experience":
        analysis = cv_analyzer.analyze_experience(content.experience, options)
        improvement = content_improver.improve_experience(content.experience, options)
    else:
        analysis = cv_analyzer.analyze_skills(content.skills, options)
        improvement = analysis.improved_content

    return ImprovementResponse(
        section=section,
        improvement=improvement,
        analysis=analysis,
        context=context,
        message=_score_message(section, analysis.score),
    )
