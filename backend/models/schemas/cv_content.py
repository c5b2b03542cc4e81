"""CV content records as sent by the editor.

Every field is lenient: missing or null text becomes an empty string, stray
scalar values are stringified and unknown keys are ignored, so that malformed
content reaches the analyzers as empty input instead of a validation error.
Keys are accepted in snake_case or in the editor's camelCase.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    return ""


def _to_optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return to_text(value)


def _to_text_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [item for item in value if item is not None]
    return []


Text = Annotated[str, BeforeValidator(to_text)]
OptionalText = Annotated[str | None, BeforeValidator(_to_optional_text)]
TextList = Annotated[list[Text], BeforeValidator(_to_text_list)]


class _ContentModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class PersonalInfo(_ContentModel):
    full_name: Text = ""
    email: Text = ""
    phone: Text = ""
    location: Text = ""
    website: Text = ""
    linkedin: Text = ""
    github: Text = ""


class ExperienceEntry(_ContentModel):
    """A single work experience entry."""
    id: Text = ""
    position: Text = ""
    company: Text = ""
    description: Text = ""
    start_date: Text = ""
    end_date: Text = ""
    current: bool = False
    location: Text = ""
    achievements: TextList = []

    @property
    def text(self) -> str:
        """Description followed by achievement lines, as analyzed."""
        parts = [self.description.strip()]
        parts.extend(line.strip() for line in self.achievements)
        return "\n".join(part for part in parts if part)


class SkillEntry(_ContentModel):
    id: Text = ""
    name: Text = ""
    level: SkillLevel | None = None
    category: Text = ""

    @field_validator("level", mode="before")
    @classmethod
    def _lenient_level(cls, value: Any) -> SkillLevel | None:
        if isinstance(value, SkillLevel):
            return value
        if isinstance(value, str):
            try:
                return SkillLevel(value.strip().lower())
            except ValueError:
                return None
        return None


class EducationEntry(_ContentModel):
    id: Text = ""
    institution: Text = ""
    degree: Text = ""
    field: Text = ""
    start_date: Text = ""
    end_date: Text = ""
    current: bool = False
    gpa: Text = ""
    honors: Text = ""
    description: Text = ""


class ProjectEntry(_ContentModel):
    id: Text = ""
    name: Text = ""
    description: Text = ""
    technologies: TextList = []
    url: Text = ""
    github: Text = ""


class CertificationEntry(_ContentModel):
    id: Text = ""
    name: Text = ""
    issuer: Text = ""
    date: Text = ""


class LanguageEntry(_ContentModel):
    id: Text = ""
    name: Text = ""
    proficiency: Text = ""


def coerce_entry(model: type[BaseModel], raw: Any, text_field: str) -> BaseModel:
    """Build ``model`` from whatever the editor sent for one list item.

    A bare string is taken as the entry's ``text_field``; anything that is not a
    mapping or a string becomes an empty entry.
    """
    if isinstance(raw, model):
        return raw
    if isinstance(raw, Mapping):
        return model.model_validate(dict(raw))
    if isinstance(raw, str):
        return model.model_validate({text_field: raw})
    return model()


def entry_list(model: type[BaseModel], text_field: str):
    def _coerce(value: Any) -> list[BaseModel] | None:
        if value is None:
            return None
        if isinstance(value, (Mapping, str, model)):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return []
        return [coerce_entry(model, item, text_field) for item in value]
    return BeforeValidator(_coerce)


class CVContent(_ContentModel):
    """Content of a CV.

    ``None`` for ``summary``, ``experience`` or ``skills`` means the section is
    absent and is skipped by the full-CV analysis; an empty string or list is
    present and gets scored.
    """
    personal_info: PersonalInfo = PersonalInfo()
    summary: OptionalText = None
    experience: Annotated[list[ExperienceEntry] | None, entry_list(ExperienceEntry, "description")] = None
    education: Annotated[list[EducationEntry] | None, entry_list(EducationEntry, "institution")] = None
    skills: Annotated[list[SkillEntry] | None, entry_list(SkillEntry, "name")] = None
    projects: Annotated[list[ProjectEntry] | None, entry_list(ProjectEntry, "name")] = None
    certifications: Annotated[list[CertificationEntry] | None, entry_list(CertificationEntry, "name")] = None
    languages: Annotated[list[LanguageEntry] | None, entry_list(LanguageEntry, "name")] = None

    @field_validator("personal_info", mode="before")
    @classmethod
    def _lenient_personal_info(cls, value: Any) -> Any:
        return value if isinstance(value, (Mapping, PersonalInfo)) else {}


class CVDocument(_ContentModel):
    id: Text = ""
    title: Text = ""
    content: CVContent = CVContent()

    @field_validator("content", mode="before")
    @classmethod
    def _lenient_content(cls, value: Any) -> Any:
        return value if isinstance(value, (Mapping, CVContent)) else {}
