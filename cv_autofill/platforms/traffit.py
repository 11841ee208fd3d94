"""Traffit platform adapter (e.g. billennium.traffit.com).

Traffit forms render labels next to the inputs, usually without ``for``
attributes, so most fields resolve through the label's container. The
consent texts are rendered in English even on Polish offers.
"""

from cv_autofill.automation.models import FieldKind, FieldName, FormType, ValueMap
from cv_autofill.browser.base import PageAdapter
from cv_autofill.mappers.traffit import map_traffit
from cv_autofill.platforms.base import FieldSpec, PlatformAdapter
from cv_autofill.platforms.registry import PlatformRegistry
from cv_autofill.profile.models import ApplicationOptions, Profile


@PlatformRegistry.register
class TraffitAdapter(PlatformAdapter):
    """Adapter for Traffit application forms."""

    priority = 20

    @property
    def form_type(self) -> FormType:
        return FormType.TRAFFIT

    @property
    def field_specs(self) -> list[FieldSpec]:
        return [
            FieldSpec(
                FieldName.FIRST_NAME,
                labels=("imię", "first name", "name"),
                selector='input[name*="first" i], input[name*="imie" i]',
            ),
            FieldSpec(
                FieldName.LAST_NAME,
                labels=("nazwisko", "last name", "surname"),
                selector='input[name*="last" i], input[name*="nazwisko" i]',
            ),
            FieldSpec(
                FieldName.EMAIL,
                labels=("email", "e-mail"),
                selector='input[type="email"], input[name*="email" i]',
            ),
            FieldSpec(
                FieldName.PHONE,
                labels=("telefon", "phone", "numer"),
                selector='input[type="tel"], input[name*="phone" i], input[name*="telefon" i]',
            ),
            FieldSpec(
                FieldName.LINKEDIN_URL,
                labels=("linkedin", "linked in", "profil"),
                selector='input[name*="linkedin" i], input[placeholder*="linkedin" i]',
            ),
            FieldSpec(
                FieldName.SALARY_EXPECTATIONS,
                labels=("salary", "wynagrodzeni", "expectations"),
                selector='input[name*="salary" i], input[name*="expectations" i]',
            ),
            FieldSpec(
                FieldName.AVAILABILITY,
                labels=("availability", "dostępn", "available"),
                selector='input[name*="availability" i], input[name*="available" i]',
            ),
            FieldSpec(
                FieldName.CV_FILE,
                kind=FieldKind.FILE,
                selector='input[type="file"]',
            ),
            FieldSpec(
                FieldName.DATA_PROCESSING_CONSENT,
                kind=FieldKind.CHECKBOX,
                phrases=("personal data", "danych osobowych"),
            ),
            FieldSpec(
                FieldName.FUTURE_RECRUITMENT_CONSENT,
                kind=FieldKind.CHECKBOX,
                phrases=("further recruitment", "kolejnych rekrutacj"),
            ),
        ]

    async def detect(self, page: PageAdapter) -> bool:
        """Detect Traffit by hostname; the page must also contain a form."""
        hostname = await page.get_hostname()
        if "traffit.com" not in hostname:
            return False
        return await page.query_selector("form") is not None

    def map_values(self, profile: Profile, options: ApplicationOptions) -> ValueMap:
        return map_traffit(profile, options)
