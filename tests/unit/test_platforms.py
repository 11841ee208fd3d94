"""Tests for platform adapters: detection and field location."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from cv_autofill.automation.models import FieldName, FormType
from cv_autofill.browser.html_adapter import HtmlPage
from cv_autofill.platforms import (
    ERecruiterAdapter,
    PlatformRegistry,
    SolidJobsAdapter,
    TraffitAdapter,
)


async def attr(element, name):
    return await element.get_attribute(name)


class TestDetection:
    """Tests for platform detectors."""

    @pytest.mark.asyncio
    async def test_traffit_hostname(self, traffit_page):
        assert await TraffitAdapter().detect(traffit_page) is True

    @pytest.mark.asyncio
    async def test_traffit_requires_form(self):
        page = HtmlPage("<html><body><p>Offer closed</p></body></html>",
                        url="https://acme.traffit.com/public/an/1")

        assert await TraffitAdapter().detect(page) is False

    @pytest.mark.asyncio
    async def test_solidjobs_enroll_form_anywhere(self):
        """Test that the enroll form id is enough, whatever the hostname."""
        page = HtmlPage('<form id="enrollForm"><input name="email"></form>',
                        url="https://careers.example.com/job/1")

        assert await SolidJobsAdapter().detect(page) is True

    @pytest.mark.asyncio
    async def test_solidjobs_hostname_with_form(self):
        page = HtmlPage("<form><input></form>", url="https://solid.jobs/offer/1")

        assert await SolidJobsAdapter().detect(page) is True

    @pytest.mark.asyncio
    async def test_erecruiter_embedded_form(self, erecruiter_page):
        assert await ERecruiterAdapter().detect(erecruiter_page) is True

    @pytest.mark.asyncio
    async def test_erecruiter_hostname(self):
        page = HtmlPage("<form><input></form>", url="https://skk.erecruiter.pl/Offer.aspx?oid=1")

        assert await ERecruiterAdapter().detect(page) is True

    @pytest.mark.asyncio
    async def test_unrelated_page(self):
        page = HtmlPage("<form><input name='q'></form>", url="https://example.com/search")

        for adapter in PlatformRegistry.adapters():
            assert await adapter.detect(page) is False


class TestRegistry:
    """Tests for PlatformRegistry."""

    def test_detection_order(self):
        assert PlatformRegistry.list_platforms() == ["SOLID.jobs", "Traffit", "eRecruiter"]

    def test_get_adapter_case_insensitive(self):
        assert isinstance(PlatformRegistry.get_adapter("traffit"), TraffitAdapter)
        assert isinstance(PlatformRegistry.get_adapter(FormType.ERECRUITER), ERecruiterAdapter)
        assert PlatformRegistry.get_adapter("workday") is None

    def test_register_is_idempotent(self):
        before = PlatformRegistry.list_platforms()

        PlatformRegistry.register(TraffitAdapter)

        assert PlatformRegistry.list_platforms() == before

    @pytest.mark.asyncio
    async def test_first_match_wins(self):
        """Test that a page matching two detectors goes to the higher priority one."""
        html = '<form id="enrollForm"><input name="email"></form>'
        page = HtmlPage(html, url="https://acme.traffit.com/public/an/1")

        adapter = await PlatformRegistry.detect(page)

        assert adapter.form_type == FormType.SOLID_JOBS

    @pytest.mark.asyncio
    async def test_failing_detector_is_no_match(self, traffit_page):
        broken = MagicMock()
        broken.form_type = FormType.SOLID_JOBS
        broken.detect = AsyncMock(side_effect=RuntimeError("detached"))

        adapter = await PlatformRegistry.detect(
            traffit_page, adapters=[broken, TraffitAdapter()]
        )

        assert adapter.form_type == FormType.TRAFFIT

    @pytest.mark.asyncio
    async def test_no_match(self):
        page = HtmlPage("<p>nothing</p>", url="https://example.com")

        assert await PlatformRegistry.detect(page) is None


class TestTraffitLocation:
    """Tests for locating Traffit fields."""

    @pytest.mark.asyncio
    async def test_locates_all_fields(self, traffit_page):
        located = await TraffitAdapter().locate(traffit_page)

        assert set(located) == set(TraffitAdapter().field_names)
        assert await attr(located[FieldName.FIRST_NAME], "name") == "f_1"
        assert await attr(located[FieldName.LAST_NAME], "name") == "f_2"
        assert await attr(located[FieldName.PHONE], "name") == "f_4"
        assert await attr(located[FieldName.LINKEDIN_URL], "name") == "f_5"
        assert await attr(located[FieldName.SALARY_EXPECTATIONS], "name") == "f_6"
        assert await attr(located[FieldName.AVAILABILITY], "name") == "f_7"
        assert await attr(located[FieldName.CV_FILE], "type") == "file"

    @pytest.mark.asyncio
    async def test_label_for_attribute(self, traffit_page):
        """Test that a label's for attribute wins over its container."""
        located = await TraffitAdapter().locate(traffit_page)

        assert await attr(located[FieldName.EMAIL], "id") == "contact-mail"

    @pytest.mark.asyncio
    async def test_consent_checkboxes_by_phrase(self, traffit_page):
        located = await TraffitAdapter().locate(traffit_page)

        assert await attr(located[FieldName.DATA_PROCESSING_CONSENT], "name") == "c_1"
        assert await attr(located[FieldName.FUTURE_RECRUITMENT_CONSENT], "name") == "c_2"

    @pytest.mark.asyncio
    async def test_structural_fallback(self):
        """Test that fields without labels are found by their attributes."""
        html = """
        <form>
          <input name="firstName" placeholder="First name">
          <input name="lastName">
          <input type="email" name="contact">
          <input type="tel" name="mobile">
        </form>
        """
        page = HtmlPage(html, url="https://acme.traffit.com/public/an/1")

        located = await TraffitAdapter().locate(page)

        assert await attr(located[FieldName.FIRST_NAME], "name") == "firstName"
        assert await attr(located[FieldName.LAST_NAME], "name") == "lastName"
        assert await attr(located[FieldName.EMAIL], "name") == "contact"
        assert await attr(located[FieldName.PHONE], "name") == "mobile"
        assert FieldName.LINKEDIN_URL not in located
        assert FieldName.DATA_PROCESSING_CONSENT not in located

    @pytest.mark.asyncio
    async def test_missing_label_target_uses_container(self):
        html = """
        <form>
          <div><label for="gone">Imię</label><input name="given"></div>
        </form>
        """
        page = HtmlPage(html, url="https://acme.traffit.com/public/an/1")

        located = await TraffitAdapter().locate(page)

        assert await attr(located[FieldName.FIRST_NAME], "name") == "given"

    @pytest.mark.asyncio
    async def test_locate_is_repeatable(self, traffit_page):
        adapter = TraffitAdapter()

        first = await adapter.locate(traffit_page)
        second = await adapter.locate(traffit_page)

        assert first == second

    @pytest.mark.asyncio
    async def test_locate_never_raises(self):
        page = MagicMock()
        page.query_selector = AsyncMock(side_effect=RuntimeError("context destroyed"))
        page.query_selector_all = AsyncMock(side_effect=RuntimeError("context destroyed"))

        assert await TraffitAdapter().locate(page) == {}


class TestSolidJobsLocation:
    """Tests for locating SOLID.jobs fields."""

    @pytest.mark.asyncio
    async def test_locates_present_fields(self, solidjobs_page):
        located = await SolidJobsAdapter().locate(solidjobs_page)

        assert set(located) == {
            FieldName.FULL_NAME,
            FieldName.EMAIL,
            FieldName.PHONE,
            FieldName.EMPLOYMENT_TYPE,
            FieldName.EXPECTED_SALARY,
            FieldName.SALARY_CURRENCY,
            FieldName.CV_FILE,
            FieldName.COVER_LETTER,
            FieldName.LINKEDIN_URL,
            FieldName.COOKIES_CONSENT,
            FieldName.DATA_PROCESSING_CONSENT,
        }
        assert await located[FieldName.EMPLOYMENT_TYPE].tag_name() == "select"
        assert await attr(located[FieldName.COVER_LETTER], "name") == "coverLetter"
        assert await attr(located[FieldName.DATA_PROCESSING_CONSENT], "name") == "rodo"


class TestERecruiterLocation:
    """Tests for locating eRecruiter fields."""

    @pytest.mark.asyncio
    async def test_locates_embedded_form(self, erecruiter_page):
        located = await ERecruiterAdapter().locate(erecruiter_page)

        assert await attr(located[FieldName.FIRST_NAME], "id") == "fn"
        assert await attr(located[FieldName.CITY], "id") == "ct"
        assert await attr(located[FieldName.COVER_LETTER], "id") == "msg"
        assert await attr(located[FieldName.DATA_PROCESSING_CONSENT], "id") == "agr1"
        assert await attr(located[FieldName.FUTURE_RECRUITMENT_CONSENT], "id") == "agr2"
        assert FieldName.LINKEDIN_URL not in located

    @pytest.mark.asyncio
    async def test_form_outside_erecruiter_is_found(self):
        page = HtmlPage(
            "<form action='/search'><input name='q'></form>"
            "<form action='https://system.eRecruiter.pl/Form.aspx'><input name='Email'></form>",
            url="https://kariera.firma.pl/oferty/123",
        )

        form = await ERecruiterAdapter().find_form(page)

        assert "erecruiter" in (await attr(form, "action")).lower()
