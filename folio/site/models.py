"""Pydantic models for the portfolio data documents.

Covers the four documents the page is built from: profile, education,
experience and projects. Text fields default to empty so a record with a
missing field still renders; only a document of the wrong shape fails.
"""

from typing import Optional, get_origin

from pydantic import BaseModel, ConfigDict, RootModel, ValidationInfo, field_validator


class Record(BaseModel):
    """Base for every record: unknown keys are ignored.

    A JSON null in a text or list field reads as empty rather than failing
    the document.
    """

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, value, info: ValidationInfo):
        if value is not None:
            return value
        annotation = cls.model_fields[info.field_name].annotation
        if annotation is str:
            return ""
        if get_origin(annotation) is list:
            return []
        return value


class SocialLink(Record):
    """Social media profile link."""

    platform: str = ""
    url: str = ""

    @property
    def icon_class(self) -> str:
        return f"fab fa-{self.platform.lower()}"


class Skill(Record):
    """Skill with an icon and an optional percentage fill."""

    name: str = ""
    icon: str = ""
    level: Optional[int] = None


class CvLink(Record):
    """Downloadable CV file."""

    file: str = ""
    icon: str = ""


class Profile(Record):
    """Owner of the portfolio."""

    name: str = ""
    description: str = ""
    email: str = ""
    phone: str = ""
    profileImage: str = ""
    socialMedia: list[SocialLink] = []
    skills: Optional[list[Skill]] = None
    cv: Optional[CvLink] = None


def _number_as_text(value):
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class Dated(Record):
    """Record with a free-form year or year range."""

    year: str = ""
    description: str = ""

    year_as_text = field_validator("year", mode="before")(_number_as_text)


class Education(Dated):
    """Education entry."""

    university: str = ""
    major: str = ""
    logo: Optional[str] = None


class Experience(Dated):
    """Work experience entry."""

    company: str = ""
    position: str = ""
    logo: Optional[str] = None


class Project(Dated):
    """Project card."""

    title: str = ""
    image: str = ""
    fund: Optional[str] = None
    partner: Optional[str] = None
    role: Optional[str] = None
    link: Optional[str] = None

    fund_as_text = field_validator("fund", mode="before")(_number_as_text)


class EducationList(RootModel[list[Education]]):
    pass


class ExperienceList(RootModel[list[Experience]]):
    pass


class ProjectList(RootModel[list[Project]]):
    pass
