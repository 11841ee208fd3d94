"""Shared models for the autofill core.

This module is shared between:
- Platform adapters (platforms/) which produce LocatedFieldMap
- Field mappers (mappers/) which produce ValueMap
- FillOrchestrator and Dispatcher which consume both
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from cv_autofill.browser.base import ElementRef
from cv_autofill.profile.models import ApplicationOptions, Profile


class FormType(str, Enum):
    """Recruiting platform a page belongs to."""

    SOLID_JOBS = "SOLID.jobs"
    TRAFFIT = "Traffit"
    ERECRUITER = "eRecruiter"
    UNKNOWN = "unknown"


class FieldName(str, Enum):
    """Semantic field concepts a platform form may expose.

    Each platform declares its own subset.
    """

    FULL_NAME = "fullName"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PHONE = "phone"
    CITY = "city"
    LOCATION = "location"
    LINKEDIN_URL = "linkedInUrl"
    PORTFOLIO_URL = "portfolioUrl"
    EMPLOYMENT_TYPE = "employmentType"
    EXPECTED_SALARY = "expectedSalary"
    SALARY_CURRENCY = "salaryCurrency"
    SALARY_EXPECTATIONS = "salaryExpectations"
    AVAILABILITY = "availability"
    AVAILABILITY_DATE = "availabilityDate"
    NOTICE_PERIOD = "noticePeriod"
    REMOTE_WORK = "remoteWork"
    SKILLS = "skills"
    EXPERIENCE_YEARS = "experienceYears"
    CV_FILE = "cvFile"
    CV_TEXT = "cvText"
    COVER_LETTER = "coverLetter"
    ADDITIONAL_INFO = "additionalInfo"
    COOKIES_CONSENT = "cookiesConsent"
    DATA_PROCESSING_CONSENT = "dataProcessingConsent"
    FUTURE_RECRUITMENT_CONSENT = "futureRecruitmentConsent"


class FieldKind(str, Enum):
    """How a located element is written."""

    TEXT = "text"
    SELECT = "select"
    CHECKBOX = "checkbox"
    FILE = "file"


class FieldStatus(str, Enum):
    """Per-field result of a fill attempt."""

    FILLED = "filled"
    UNCHANGED = "unchanged"  # checkbox already in the desired state
    NOT_FOUND = "not_found"
    EMPTY_VALUE = "empty_value"
    WRITE_FAILED = "write_failed"
    MANUAL = "manual"  # file upload left to the user

    @property
    def counts_as_filled(self) -> bool:
        return self in (FieldStatus.FILLED, FieldStatus.UNCHANGED)


Value = str | bool

# Semantic field -> value to write (pure data, no DOM coupling)
ValueMap = dict[FieldName, Value]

# Semantic field -> element handle; absent key means "not found"
LocatedFieldMap = dict[FieldName, ElementRef]


class MessageModel(BaseModel):
    """Base for models that travel as camelCase control-message payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FieldResult(MessageModel):
    """Outcome for a single semantic field."""

    name: FieldName
    status: FieldStatus
    error: str | None = None


class FillOutcome(MessageModel):
    """Terminal result of one fill attempt."""

    success: bool
    filled_count: int = 0
    form_type: FormType = FormType.UNKNOWN
    message: str = ""
    fields: list[FieldResult] = []

    def status_of(self, name: FieldName) -> FieldStatus | None:
        for result in self.fields:
            if result.name == name:
                return result.status
        return None


class DetectOutcome(MessageModel):
    """Result of a detect-only request."""

    detected: bool
    form_type: FormType = FormType.UNKNOWN
    url: str = ""


class FillContext(BaseModel):
    """Explicit request context for one fill attempt."""

    model_config = ConfigDict(frozen=True)

    profile: Profile
    options: ApplicationOptions = ApplicationOptions()
