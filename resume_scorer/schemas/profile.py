from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _string_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value if item is not None]


def _string(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"


class EducationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    degree: str = ""
    institution: str = ""
    specialization: str = ""
    year: str = ""

    @field_validator("degree", "institution", "specialization", "year", mode="before")
    @classmethod
    def _default_blank(cls, value):
        return _string(value)


class CandidateProfile(BaseModel):
    """
    Structured view of a resume. When no experience signals are supplied
    the skills list stands in for them.
    """
    model_config = ConfigDict(frozen=True)

    skills: List[str] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    experience_signals: List[str] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def _default_skills(cls, value):
        return _string_list(value)

    @field_validator("education", mode="before")
    @classmethod
    def _default_education(cls, value):
        if value is None:
            return []
        return [entry for entry in value if entry is not None]

    @field_validator("experience_signals", mode="before")
    @classmethod
    def _default_signals(cls, value):
        return _string_list(value)

    @model_validator(mode="before")
    @classmethod
    def _signals_from_skills(cls, data):
        if isinstance(data, dict) and data.get("experience_signals") is None:
            data = dict(data)
            data["experience_signals"] = data.get("skills")
        return data


class ExperienceRequirement(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_years: int = 0
    level: ExperienceLevel = ExperienceLevel.ENTRY
    areas: List[str] = Field(default_factory=list)

    @field_validator("min_years", mode="before")
    @classmethod
    def _default_years(cls, value):
        if value is None or value == "":
            return 0
        return value

    @field_validator("level", mode="before")
    @classmethod
    def _default_level(cls, value):
        if isinstance(value, ExperienceLevel):
            return value
        level = _string(value).strip().lower()
        if level in {member.value for member in ExperienceLevel}:
            return level
        return ExperienceLevel.ENTRY

    @field_validator("areas", mode="before")
    @classmethod
    def _default_areas(cls, value):
        return _string_list(value)


class EducationRequirement(BaseModel):
    model_config = ConfigDict(frozen=True)

    degree: str = ""
    fields: List[str] = Field(default_factory=list)
    qualifications: List[str] = Field(default_factory=list)

    @field_validator("degree", mode="before")
    @classmethod
    def _default_degree(cls, value):
        return _string(value)

    @field_validator("fields", "qualifications", mode="before")
    @classmethod
    def _default_lists(cls, value):
        return _string_list(value)


class JobRequirements(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills: List[str] = Field(default_factory=list)
    experience: ExperienceRequirement = Field(default_factory=ExperienceRequirement)
    education: EducationRequirement = Field(default_factory=EducationRequirement)
    responsibilities: List[str] = Field(default_factory=list)

    @field_validator("skills", "responsibilities", mode="before")
    @classmethod
    def _default_lists(cls, value):
        return _string_list(value)

    @field_validator("experience", "education", mode="before")
    @classmethod
    def _default_sections(cls, value):
        if value is None:
            return {}
        return value
