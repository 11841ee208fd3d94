"""Tests for control messages."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from cv_autofill.automation.dispatcher import Dispatcher
from cv_autofill.automation.messages import (
    DetectFormRequest,
    FillFormRequest,
    handle_message,
    parse_request,
)
from cv_autofill.browser.html_adapter import HtmlPage


@pytest.fixture
def dispatcher(orchestrator):
    return Dispatcher(orchestrator=orchestrator)


class TestParseRequest:
    """Tests for inbound message validation."""

    def test_detect_request(self):
        assert isinstance(parse_request({"action": "detectForm"}), DetectFormRequest)

    def test_fill_request(self, sample_profile_data):
        request = parse_request(
            {
                "action": "fillForm",
                "cvData": sample_profile_data,
                "options": {"expectedSalary": "1"},
            }
        )

        assert isinstance(request, FillFormRequest)
        assert request.cv_data.basics.name == "Anna Maria Nowak"
        assert request.options.expected_salary == "1"

    def test_missing_options_use_defaults(self, sample_profile_data):
        request = parse_request(
            {"action": "fillForm", "cvData": sample_profile_data, "options": None}
        )

        assert request.options.employment_type == "B2B"

    def test_unknown_action(self):
        with pytest.raises(ValidationError):
            parse_request({"action": "submitForm"})

    def test_fill_without_profile(self):
        with pytest.raises(ValidationError):
            parse_request({"action": "fillForm"})


class TestHandleMessage:
    """Tests for message replies."""

    @pytest.mark.asyncio
    async def test_detect_reply(self, dispatcher, traffit_page):
        reply = await handle_message(dispatcher, traffit_page, {"action": "detectForm"})

        assert reply == {
            "detected": True,
            "formType": "Traffit",
            "url": "https://billennium.traffit.com/public/an/4a2b",
        }

    @pytest.mark.asyncio
    async def test_fill_reply(self, dispatcher, traffit_page, sample_profile_data):
        reply = await handle_message(
            dispatcher,
            traffit_page,
            {"action": "fillForm", "cvData": sample_profile_data, "options": {}},
        )

        assert reply == {
            "success": True,
            "message": "Formularz Traffit wypełniony pomyślnie!",
            "formType": "Traffit",
            "filledCount": 8,
        }

    @pytest.mark.asyncio
    async def test_fill_on_unknown_page(self, dispatcher, sample_profile_data):
        page = HtmlPage("<form></form>", url="https://example.com")

        reply = await handle_message(
            dispatcher, page, {"action": "fillForm", "cvData": sample_profile_data}
        )

        assert reply["success"] is False
        assert reply["message"] == "Nie znaleziono wspieranego formularza na tej stronie."
        assert reply["formType"] == "unknown"
        assert reply["filledCount"] == 0

    @pytest.mark.asyncio
    async def test_malformed_message_gets_reply(self, dispatcher, traffit_page):
        reply = await handle_message(dispatcher, traffit_page, {"action": "fillForm"})

        assert reply["success"] is False
        assert reply["message"].startswith("Nieprawidłowa wiadomość:")
        assert "cvData" in reply["message"]
        assert reply["formType"] == "unknown"
        assert traffit_page.events == []

    @pytest.mark.asyncio
    async def test_internal_failure_gets_reply(self, traffit_page, sample_profile_data):
        dispatcher = MagicMock()
        dispatcher.fill = AsyncMock(side_effect=RuntimeError("boom"))

        reply = await handle_message(
            dispatcher, traffit_page, {"action": "fillForm", "cvData": sample_profile_data}
        )

        assert reply == {
            "success": False,
            "message": "Błąd podczas wypełniania: boom",
            "formType": "unknown",
        }
