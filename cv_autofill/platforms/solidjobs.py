"""SOLID.jobs platform adapter.

SOLID.jobs renders its application form as ``#enrollForm`` on offer pages,
also when the offer is embedded on a company careers site, so the form id is
checked before the hostname.
"""

from cv_autofill.automation.models import FieldKind, FieldName, FormType, ValueMap
from cv_autofill.browser.base import ElementRef, PageAdapter
from cv_autofill.mappers.solidjobs import map_solidjobs
from cv_autofill.platforms.base import FieldSpec, PlatformAdapter
from cv_autofill.platforms.registry import PlatformRegistry
from cv_autofill.profile.models import ApplicationOptions, Profile

ENROLL_FORM_SELECTOR = "#enrollForm"


@PlatformRegistry.register
class SolidJobsAdapter(PlatformAdapter):
    """Adapter for SOLID.jobs application forms."""

    priority = 10

    @property
    def form_type(self) -> FormType:
        return FormType.SOLID_JOBS

    @property
    def field_specs(self) -> list[FieldSpec]:
        return [
            FieldSpec(
                FieldName.FULL_NAME,
                labels=("imię i nazwisko", "full name", "name and surname"),
                selector='input[name="fullName"], input[placeholder*="imię" i], '
                'input[placeholder*="nazwisko" i]',
            ),
            FieldSpec(
                FieldName.EMAIL,
                labels=("e-mail", "email"),
                selector='input[name="email"], input[type="email"], input[placeholder*="e-mail" i]',
            ),
            FieldSpec(
                FieldName.PHONE,
                labels=("telefon", "phone"),
                selector='input[name="phone"], input[type="tel"], input[placeholder*="telefon" i]',
            ),
            FieldSpec(
                FieldName.EMPLOYMENT_TYPE,
                kind=FieldKind.SELECT,
                labels=("forma zatrudnienia", "rodzaj umowy", "employment type", "contract type"),
                selector='select[name="employmentType"], input[name="employmentType"]',
            ),
            FieldSpec(
                FieldName.EXPECTED_SALARY,
                labels=("oczekiwania finansowe", "wynagrodzeni", "expected salary"),
                selector='input[name="expectedSalary"], input[name="salary"], '
                'input[placeholder*="wynagrodzeni" i]',
            ),
            FieldSpec(
                FieldName.SALARY_CURRENCY,
                kind=FieldKind.SELECT,
                labels=("waluta", "currency"),
                selector='select[name="currency"], select[name="salaryCurrency"]',
            ),
            FieldSpec(
                FieldName.AVAILABILITY_DATE,
                labels=("od kiedy", "kiedy możesz zacząć", "dostępność", "availability"),
                selector='input[name="availabilityDate"], input[name="startDate"], '
                'input[placeholder*="zacząć" i]',
            ),
            FieldSpec(
                FieldName.NOTICE_PERIOD,
                labels=("okres wypowiedzenia", "notice period"),
                selector='input[name*="notice" i], select[name*="notice" i]',
            ),
            FieldSpec(
                FieldName.LOCATION,
                labels=("lokalizacja", "miejsce zamieszkania", "location"),
                selector='input[name*="location" i], input[name*="city" i]',
            ),
            FieldSpec(
                FieldName.REMOTE_WORK,
                kind=FieldKind.CHECKBOX,
                phrases=("zdaln", "remote"),
                selector='input[type="checkbox"][name*="remote" i]',
            ),
            FieldSpec(
                FieldName.CV_FILE,
                kind=FieldKind.FILE,
                selector='input[type="file"][name*="cv" i], input[type="file"][accept*="pdf" i]',
            ),
            FieldSpec(
                FieldName.CV_TEXT,
                labels=("treść cv", "cv w formie tekstowej", "resume text"),
                selector='textarea[name="cv"], textarea[name="resume"]',
            ),
            FieldSpec(
                FieldName.COVER_LETTER,
                labels=("list motywacyjny", "cover letter", "motivation letter"),
                selector='textarea[name="coverLetter"], textarea[name="motivationLetter"], '
                'textarea[placeholder*="list motywacyjny" i]',
            ),
            FieldSpec(
                FieldName.LINKEDIN_URL,
                labels=("linkedin",),
                selector='input[name="linkedIn"], input[name="linkedin"], '
                'input[placeholder*="linkedin" i]',
            ),
            FieldSpec(
                FieldName.PORTFOLIO_URL,
                labels=("portfolio", "strona www", "website"),
                selector='input[name="portfolio"], input[name="website"], '
                'input[placeholder*="portfolio" i]',
            ),
            FieldSpec(
                FieldName.SKILLS,
                labels=("umiejętności", "technologie", "skills"),
                selector='input[name*="skills" i], textarea[name*="skills" i]',
            ),
            FieldSpec(
                FieldName.EXPERIENCE_YEARS,
                labels=("lat doświadczenia", "lata doświadczenia", "years of experience"),
                selector='input[name*="experience" i]',
            ),
            FieldSpec(
                FieldName.ADDITIONAL_INFO,
                labels=("dodatkowe informacje", "additional information"),
                selector='textarea[name*="additional" i]',
            ),
            FieldSpec(
                FieldName.COOKIES_CONSENT,
                kind=FieldKind.CHECKBOX,
                phrases=("cookie",),
                selector='input[type="checkbox"][name*="cookie" i]',
            ),
            FieldSpec(
                FieldName.DATA_PROCESSING_CONSENT,
                kind=FieldKind.CHECKBOX,
                phrases=("przetwarzanie moich danych", "personal data"),
                selector='input[type="checkbox"][name*="consent" i], '
                'input[type="checkbox"][name*="rodo" i]',
            ),
            FieldSpec(
                FieldName.FUTURE_RECRUITMENT_CONSENT,
                kind=FieldKind.CHECKBOX,
                phrases=("przyszłych rekrutacj", "future recruitment"),
                selector='input[type="checkbox"][name*="recruitment" i]',
            ),
        ]

    async def find_form(self, page: PageAdapter) -> ElementRef | None:
        return await page.query_selector(ENROLL_FORM_SELECTOR) or await page.query_selector("form")

    async def detect(self, page: PageAdapter) -> bool:
        """Detect SOLID.jobs by its enroll form id, or by hostname plus a form."""
        if await page.query_selector(ENROLL_FORM_SELECTOR) is not None:
            return True

        hostname = await page.get_hostname()
        if "solid.jobs" not in hostname:
            return False
        return await page.query_selector("form") is not None

    def map_values(self, profile: Profile, options: ApplicationOptions) -> ValueMap:
        return map_solidjobs(profile, options)
