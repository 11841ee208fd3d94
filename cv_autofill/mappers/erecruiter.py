"""Field mapper for eRecruiter application forms (*.erecruiter.pl)."""

from cv_autofill.automation.models import FieldName, ValueMap
from cv_autofill.mappers.base import linkedin_url, split_name
from cv_autofill.profile.models import ApplicationOptions, Profile


def map_erecruiter(profile: Profile, options: ApplicationOptions) -> ValueMap:
    """Map CV data to eRecruiter form fields.

    eRecruiter asks for the city separately and offers a free-text message
    box, which receives the cover letter.
    """
    basics = profile.basics
    first_name, last_name = split_name(basics.name)

    return {
        FieldName.FIRST_NAME: first_name,
        FieldName.LAST_NAME: last_name,
        FieldName.EMAIL: basics.email,
        FieldName.PHONE: basics.phone,
        FieldName.CITY: basics.location.city,
        FieldName.LINKEDIN_URL: linkedin_url(basics),
        FieldName.SALARY_EXPECTATIONS: options.expected_salary,
        FieldName.AVAILABILITY: options.availability_date,
        FieldName.COVER_LETTER: options.cover_letter,
        FieldName.CV_FILE: "",
        FieldName.DATA_PROCESSING_CONSENT: options.agree_to_data_processing,
        FieldName.FUTURE_RECRUITMENT_CONSENT: options.agree_to_future_recruitment,
    }
