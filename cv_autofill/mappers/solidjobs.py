"""Field mapper for SOLID.jobs application forms."""

from datetime import datetime

from cv_autofill.automation.models import FieldName, ValueMap
from cv_autofill.mappers.base import (
    experience_years,
    linkedin_url,
    location_text,
    skill_names,
)
from cv_autofill.mappers.cv_text import format_cv_text
from cv_autofill.profile.models import ApplicationOptions, Profile


def map_solidjobs(
    profile: Profile,
    options: ApplicationOptions,
    now: datetime | None = None,
    locale: str | None = None,
) -> ValueMap:
    """Map CV data to SOLID.jobs form fields.

    SOLID.jobs asks for the full name in a single field and accepts the CV
    as text in addition to the (manual) file upload.
    """
    basics = profile.basics

    return {
        FieldName.FULL_NAME: basics.name,
        FieldName.EMAIL: basics.email,
        FieldName.PHONE: basics.phone,
        FieldName.EMPLOYMENT_TYPE: options.employment_type,
        FieldName.EXPECTED_SALARY: options.expected_salary,
        FieldName.SALARY_CURRENCY: options.salary_currency,
        FieldName.AVAILABILITY_DATE: options.availability_date,
        FieldName.NOTICE_PERIOD: options.notice_period,
        FieldName.LOCATION: location_text(basics),
        FieldName.REMOTE_WORK: options.remote_work,
        FieldName.CV_FILE: "",
        FieldName.CV_TEXT: format_cv_text(profile, locale=locale),
        FieldName.COVER_LETTER: options.cover_letter,
        FieldName.LINKEDIN_URL: linkedin_url(basics),
        FieldName.PORTFOLIO_URL: basics.url,
        FieldName.SKILLS: skill_names(profile),
        FieldName.EXPERIENCE_YEARS: str(experience_years(profile.work, now=now)),
        FieldName.ADDITIONAL_INFO: options.additional_info,
        FieldName.COOKIES_CONSENT: options.accept_cookies_policy,
        FieldName.DATA_PROCESSING_CONSENT: options.agree_to_data_processing,
        FieldName.FUTURE_RECRUITMENT_CONSENT: options.agree_to_future_recruitment,
    }
