"""Profile (JSON-Resume) and application option models.

Every field is optional: a missing or null value falls back to an empty
string, an empty list or the documented default, so the mappers can read any
attribute without guarding against absent data.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel


class ResumeModel(BaseModel):
    """Base for JSON-Resume sections.

    Accepts camelCase keys (``startDate``) as well as field names, ignores
    unknown keys and treats explicit ``null`` as "not provided".
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Location(ResumeModel):
    """Postal location of the candidate."""

    address: str = ""
    postal_code: str = ""
    city: str = ""
    country_code: str = ""
    region: str = ""


class SocialProfile(ResumeModel):
    """Entry of ``basics.profiles`` (LinkedIn, GitHub, ...)."""

    network: str = ""
    username: str = ""
    url: str = ""


class Basics(ResumeModel):
    """Personal and contact information."""

    name: str = ""
    label: str = ""
    email: str = ""
    phone: str = ""
    url: str = ""
    summary: str = ""
    location: Location = Location()
    profiles: list[SocialProfile] = []

    @field_validator("location", mode="before")
    @classmethod
    def _location_from_text(cls, value: Any) -> Any:
        # Some exporters write the location as a plain string
        if isinstance(value, str):
            return {"address": value}
        return value


class WorkEntry(ResumeModel):
    """Single position in the work history."""

    name: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    summary: str = ""
    highlights: list[str] = []


class EducationEntry(ResumeModel):
    """Single education entry."""

    institution: str = ""
    study_type: str = ""
    area: str = ""
    start_date: str = ""
    end_date: str = ""


class SkillGroup(ResumeModel):
    """Named group of skill keywords."""

    name: str = ""
    level: str = ""
    keywords: list[str] = []


class LanguageEntry(ResumeModel):
    """Spoken language and fluency."""

    language: str = ""
    fluency: str = ""


class Profile(ResumeModel):
    """Normalized résumé document (JSON-Resume schema).

    Usage:
        profile = Profile.model_validate(json.loads(path.read_text()))
        profile.basics.name
    """

    basics: Basics = Basics()
    work: list[WorkEntry] = []
    education: list[EducationEntry] = []
    skills: list[SkillGroup] = []
    languages: list[LanguageEntry] = []

    @property
    def display_name(self) -> str:
        """Name shown by the host shell once a profile is loaded."""
        return self.basics.name or "CV"


# Text options where an empty value means "use the default"
_DEFAULTED_TEXT_OPTIONS = (
    "employment_type",
    "salary_currency",
    "availability_date",
    "notice_period",
)


class ApplicationOptions(ResumeModel):
    """Per-submission overrides supplied by the user.

    Built fresh for every fill attempt. Consent flags default to ``True``
    and stay overridable.
    """

    employment_type: str = "B2B"
    expected_salary: str = ""
    salary_currency: str = "PLN netto"
    availability_date: str = "Natychmiast"
    notice_period: str = "1 miesiąc"
    remote_work: bool = True
    cover_letter: str = ""
    additional_info: str = ""
    accept_cookies_policy: bool = True
    agree_to_data_processing: bool = True
    agree_to_future_recruitment: bool = True

    @model_validator(mode="before")
    @classmethod
    def _blank_text_uses_default(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        for name in _DEFAULTED_TEXT_OPTIONS:
            for key in (name, to_camel(name)):
                if cleaned.get(key) == "":
                    del cleaned[key]
        return cleaned

    @field_validator("expected_salary", mode="before")
    @classmethod
    def _salary_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
