from typing import Annotated

from pydantic import BaseModel, Field

from models.schemas.analysis_options import Language
from models.schemas.cv_content import CVDocument, ExperienceEntry, SkillEntry, entry_list


class AnalyzeRequestBase(BaseModel):
    language: Language | None = Field(None, description="Detected from the content when omitted")
    industry: str | None = Field(None, max_length=50, description="e.g. tech, marketing, finance")


class SummaryAnalyzeRequest(AnalyzeRequestBase):
    summary: str | None = Field("", description="Professional summary text")


class ExperienceAnalyzeRequest(AnalyzeRequestBase):
    experience: Annotated[list[ExperienceEntry] | None, entry_list(ExperienceEntry, "description")] = []


class SkillsAnalyzeRequest(AnalyzeRequestBase):
    skills: Annotated[list[SkillEntry] | None, entry_list(SkillEntry, "name")] = []


class CVAnalyzeRequest(AnalyzeRequestBase):
    cv: CVDocument


class ImproveRequest(BaseModel):
    cv: CVDocument
    section: str = Field(..., description="summary, experience, skills or full")
    target_role: str | None = Field(None, max_length=200)
    language: Language | None = None
