"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment (before cv_autofill.config is imported)
os.environ["APP_ENV"] = "development"
os.environ["SETTLE_INTERVAL_MS"] = "0"
os.environ["CV_LOCALE"] = "pl"

from cv_autofill.automation.orchestrator import FillOrchestrator, FixedDelaySettle  # noqa: E402
from cv_autofill.browser.html_adapter import HtmlPage  # noqa: E402
from cv_autofill.profile.models import Profile  # noqa: E402

TRAFFIT_URL = "https://billennium.traffit.com/public/an/4a2b"
SOLIDJOBS_URL = "https://solid.jobs/offer/21534/python-developer"
ERECRUITER_EMBED_URL = "https://kariera.firma.pl/oferty/123"


TRAFFIT_FORM_HTML = """
<html><body>
<h1>Python Developer</h1>
<form action="/public/an/4a2b/apply" method="post">
  <div class="form-group"><label>Imię *</label><input type="text" name="f_1"></div>
  <div class="form-group"><label>Nazwisko *</label><input type="text" name="f_2"></div>
  <div class="form-group">
    <label for="contact-mail">E-mail *</label>
    <input id="contact-mail" type="text" name="f_3">
  </div>
  <div class="form-group"><label>Telefon</label><input type="text" name="f_4"></div>
  <div class="form-group"><label>LinkedIn profile</label><input type="text" name="f_5"></div>
  <div class="form-group"><label>Salary expectations</label><input type="text" name="f_6"></div>
  <div class="form-group"><label>Availability</label><input type="text" name="f_7"></div>
  <div class="form-group"><label>CV</label><input type="file" name="cv"></div>
  <label><input type="checkbox" name="c_1"> I agree to the processing of my personal data
    for the purposes of this recruitment.</label>
  <label><input type="checkbox" name="c_2"> I agree to be contacted about further recruitment
    processes.</label>
  <button type="submit">Apply</button>
</form>
</body></html>
"""

SOLIDJOBS_FORM_HTML = """
<html><body>
<form id="enrollForm">
  <div><label for="fullName">Imię i nazwisko</label><input id="fullName" name="fullName"></div>
  <div><label for="email">E-mail</label><input id="email" type="email" name="email"></div>
  <div><label>Telefon</label><input type="tel" name="phone"></div>
  <div>
    <label>Forma zatrudnienia</label>
    <select name="employmentType">
      <option value="">-- wybierz --</option>
      <option value="B2B">B2B</option>
      <option value="UoP">Umowa o pracę</option>
    </select>
  </div>
  <div><label>Oczekiwania finansowe</label><input name="expectedSalary"></div>
  <div>
    <label>Waluta</label>
    <select name="currency">
      <option value="PLN netto">PLN netto</option>
      <option value="EUR">EUR</option>
    </select>
  </div>
  <div><textarea name="coverLetter" placeholder="List motywacyjny"></textarea></div>
  <div><label>LinkedIn</label><input name="linkedIn"></div>
  <input type="file" name="cvFile" accept=".pdf">
  <label><input type="checkbox" name="cookies"> Akceptuję politykę cookie</label>
  <label><input type="checkbox" name="rodo" checked> Wyrażam zgodę na przetwarzanie moich
    danych osobowych</label>
</form>
</body></html>
"""

ERECRUITER_EMBEDDED_HTML = """
<html><body>
<form action="https://system.erecruiter.pl/FormTemplates/RecruitmentForm.aspx" method="post">
  <div><label for="fn">Imię</label><input id="fn" name="FirstName"></div>
  <div><label for="ln">Nazwisko</label><input id="ln" name="LastName"></div>
  <div><label for="em">E-mail</label><input id="em" name="Email"></div>
  <div><label for="ph">Telefon</label><input id="ph" name="Phone"></div>
  <div><label for="ct">Miejscowość</label><input id="ct" name="City"></div>
  <div>
    <label for="msg">Wiadomość do rekrutera</label>
    <textarea id="msg" name="Message"></textarea>
  </div>
  <input type="file" name="CvFile">
  <input type="checkbox" id="agr1"><label for="agr1">Wyrażam zgodę na przetwarzanie danych
    w celu bieżącej rekrutacji</label>
  <input type="checkbox" id="agr2"><label for="agr2">Wyrażam zgodę na udział w przyszłych
    rekrutacjach</label>
</form>
</body></html>
"""


@pytest.fixture
def sample_profile_data():
    """Sample JSON-Resume document as loaded from disk."""
    return {
        "basics": {
            "name": "Anna Maria Nowak",
            "label": "Senior Python Developer",
            "email": "anna.nowak@example.com",
            "phone": "+48 600 100 200",
            "url": "https://annanowak.dev",
            "summary": "Backend developer focused on data pipelines.",
            "location": {"city": "Kraków", "countryCode": "PL"},
            "profiles": [
                {"network": "GitHub", "url": "https://github.com/annanowak"},
                {"network": "LinkedIn", "url": "https://www.linkedin.com/in/annanowak"},
            ],
        },
        "work": [
            {
                "name": "Acme",
                "position": "Senior Python Developer",
                "startDate": "2021-02-01",
                "highlights": ["Moved batch jobs to asyncio workers"],
            },
            {
                "name": "DataSoft",
                "position": "Python Developer",
                "location": "Warszawa",
                "startDate": "2017-06-01",
                "endDate": "2021-01-31",
            },
        ],
        "education": [
            {
                "institution": "AGH",
                "studyType": "Master",
                "area": "Computer Science",
                "startDate": "2012-10-01",
                "endDate": "2017-06-30",
            }
        ],
        "skills": [
            {"name": "Python", "keywords": ["FastAPI", "asyncio"]},
            {"name": "SQL", "keywords": ["PostgreSQL"]},
        ],
        "languages": [
            {"language": "Polish", "fluency": "Native"},
            {"language": "English", "fluency": "C1"},
        ],
    }


@pytest.fixture
def sample_profile(sample_profile_data):
    """Validated sample profile."""
    return Profile.model_validate(sample_profile_data)


@pytest.fixture
def traffit_page():
    """Traffit application page."""
    return HtmlPage(TRAFFIT_FORM_HTML, url=TRAFFIT_URL)


@pytest.fixture
def solidjobs_page():
    """SOLID.jobs offer page with the enroll form."""
    return HtmlPage(SOLIDJOBS_FORM_HTML, url=SOLIDJOBS_URL)


@pytest.fixture
def erecruiter_page():
    """Employer careers page embedding an eRecruiter form."""
    return HtmlPage(ERECRUITER_EMBEDDED_HTML, url=ERECRUITER_EMBED_URL)


@pytest.fixture
def orchestrator():
    """Orchestrator without settle delays."""
    return FillOrchestrator(FixedDelaySettle(0))
