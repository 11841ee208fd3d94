"""eRecruiter platform adapter (*.erecruiter.pl).

eRecruiter application forms are also embedded on employer sites; there the
form still posts back to eRecruiter, so the form action is a second signal.
"""

from cv_autofill.automation.models import FieldKind, FieldName, FormType, ValueMap
from cv_autofill.browser.base import ElementRef, PageAdapter
from cv_autofill.mappers.erecruiter import map_erecruiter
from cv_autofill.platforms.base import FieldSpec, PlatformAdapter
from cv_autofill.platforms.registry import PlatformRegistry
from cv_autofill.profile.models import ApplicationOptions, Profile

EMBEDDED_FORM_SELECTOR = 'form[action*="erecruiter" i]'


@PlatformRegistry.register
class ERecruiterAdapter(PlatformAdapter):
    """Adapter for eRecruiter application forms."""

    priority = 30

    @property
    def form_type(self) -> FormType:
        return FormType.ERECRUITER

    @property
    def field_specs(self) -> list[FieldSpec]:
        return [
            FieldSpec(
                FieldName.FIRST_NAME,
                labels=("imię", "first name"),
                selector='input[name*="firstname" i], input[name*="imie" i]',
            ),
            FieldSpec(
                FieldName.LAST_NAME,
                labels=("nazwisko", "last name", "surname"),
                selector='input[name*="lastname" i], input[name*="surname" i], '
                'input[name*="nazwisko" i]',
            ),
            FieldSpec(
                FieldName.EMAIL,
                labels=("e-mail", "email"),
                selector='input[type="email"], input[name*="email" i]',
            ),
            FieldSpec(
                FieldName.PHONE,
                labels=("telefon", "phone"),
                selector='input[type="tel"], input[name*="phone" i], input[name*="telefon" i]',
            ),
            FieldSpec(
                FieldName.CITY,
                labels=("miejscowość", "miasto", "city"),
                selector='input[name*="city" i], input[name*="miasto" i]',
            ),
            FieldSpec(
                FieldName.LINKEDIN_URL,
                labels=("linkedin",),
                selector='input[name*="linkedin" i], input[placeholder*="linkedin" i]',
            ),
            FieldSpec(
                FieldName.SALARY_EXPECTATIONS,
                labels=("oczekiwania finansowe", "wynagrodzeni", "salary"),
                selector='input[name*="salary" i], input[name*="wynagrodzenie" i]',
            ),
            FieldSpec(
                FieldName.AVAILABILITY,
                labels=("termin rozpoczęcia", "dostępn", "availability"),
                selector='input[name*="availability" i], input[name*="dostepnosc" i]',
            ),
            FieldSpec(
                FieldName.COVER_LETTER,
                labels=("list motywacyjny", "wiadomość", "cover letter", "message"),
                selector='textarea[name*="letter" i], textarea[name*="message" i]',
            ),
            FieldSpec(
                FieldName.CV_FILE,
                kind=FieldKind.FILE,
                selector='input[type="file"]',
            ),
            FieldSpec(
                FieldName.DATA_PROCESSING_CONSENT,
                kind=FieldKind.CHECKBOX,
                phrases=("current recruitment", "bieżącej rekrutacji", "obecnej rekrutacji"),
            ),
            FieldSpec(
                FieldName.FUTURE_RECRUITMENT_CONSENT,
                kind=FieldKind.CHECKBOX,
                phrases=("future recruitment", "przyszłych rekrutacj"),
            ),
        ]

    async def find_form(self, page: PageAdapter) -> ElementRef | None:
        return await page.query_selector(EMBEDDED_FORM_SELECTOR) or await page.query_selector(
            "form"
        )

    async def detect(self, page: PageAdapter) -> bool:
        """Detect eRecruiter by hostname or by a form posting to eRecruiter."""
        hostname = await page.get_hostname()
        if "erecruiter.pl" in hostname:
            return await page.query_selector("form") is not None
        return await page.query_selector(EMBEDDED_FORM_SELECTOR) is not None

    def map_values(self, profile: Profile, options: ApplicationOptions) -> ValueMap:
        return map_erecruiter(profile, options)
