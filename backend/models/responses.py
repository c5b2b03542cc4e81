from pydantic import BaseModel

from models.schemas.analysis_result import FullCVAnalysisResult, SectionAnalysisResult
from models.schemas.context import DetectedContext
from models.schemas.cv_content import ExperienceEntry


class LanguageInfo(BaseModel):
    code: str
    name: str


class CapabilitiesResponse(BaseModel):
    languages: list[LanguageInfo] = []
    industries: list[str] = []
    levels: list[str] = []
    analysis_types: list[str] = []
    features: list[str] = []


class ImprovementContext(DetectedContext):
    target_role: str = ""


class ImprovementResponse(BaseModel):
    success: bool = True
    section: str
    improvement: str | list[ExperienceEntry] | list[str] | None = None
    analysis: SectionAnalysisResult | FullCVAnalysisResult
    context: ImprovementContext
    message: str = ""
