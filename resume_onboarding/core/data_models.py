from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .scored_value import ScoredValue

SECTION_NAMES = ("experience", "education", "projects", "skills", "summary")


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON-compatible camelCase structure"""
        return self.model_dump(by_alias=True, mode="json")


class SectionSpan(_Record):
    name: str
    start_line: int
    end_line: int
    match_score: float = Field(ge=0.0, le=1.0)

    @field_validator("name")
    def validate_name(cls, v):
        if v not in SECTION_NAMES:
            raise ValueError(f"unknown section name: {v}")
        return v

    @model_validator(mode="after")
    def validate_bounds(self):
        if self.start_line < 0 or self.start_line >= self.end_line:
            raise ValueError(
                f"invalid span [{self.start_line}, {self.end_line}) for section {self.name}"
            )
        return self


class Block(_Record):
    lines: List[str]

    @field_validator("lines")
    def validate_lines(cls, v):
        if not " ".join(v).strip():
            raise ValueError("block must contain non-blank text")
        return v

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class DateRange(_Record):
    start: Optional[str] = None
    end: Optional[str] = None
    is_current: bool = False
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class EducationItem(_Record):
    institution_raw: str = ""
    degree_raw: str = ""
    institution: ScoredValue = ScoredValue()
    degree: ScoredValue = ScoredValue()
    major: ScoredValue = ScoredValue()
    gpa: ScoredValue = ScoredValue()
    dates: DateRange = DateRange()


class ExperienceItem(_Record):
    title_raw: str = ""
    company_raw: str = ""
    location_raw: Optional[str] = None
    title: ScoredValue = ScoredValue()
    company: ScoredValue = ScoredValue()
    location: ScoredValue = ScoredValue()
    dates: DateRange = DateRange()
    bullets: ScoredValue = ScoredValue()


class ProjectItem(_Record):
    title_raw: Optional[str] = None
    description_raw: Optional[str] = None
    title: ScoredValue = ScoredValue()
    dates: DateRange = DateRange()
    bullets: ScoredValue = ScoredValue()
    links: ScoredValue = ScoredValue()


class ContactInfo(_Record):
    name: ScoredValue = ScoredValue()
    email: ScoredValue = ScoredValue()
    phone: ScoredValue = ScoredValue()
    links: ScoredValue = ScoredValue()
    location: ScoredValue = ScoredValue()


class SkillsResult(_Record):
    raw: ScoredValue = ScoredValue()
    categorized: ScoredValue = ScoredValue()


class ResumeMeta(_Record):
    file_type: str
    page_count: Optional[int] = None
    sha256: str
    ocr_used: bool = False


class ResumeParseResult(_Record):
    meta: ResumeMeta
    contact: ContactInfo = ContactInfo()
    sections: List[SectionSpan] = []
    experience: List[ExperienceItem] = []
    education: List[EducationItem] = []
    projects: List[ProjectItem] = []
    skills: SkillsResult = SkillsResult()
    summary: ScoredValue = ScoredValue()
    warnings: List[str] = []
    errors: List[str] = []

    @property
    def usable(self) -> bool:
        return not self.errors

    @property
    def complete(self) -> bool:
        return not self.errors and not self.warnings
