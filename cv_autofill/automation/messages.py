"""Inbound control messages and their replies.

Two request/response messages reach the core from the host shell:

    {"action": "detectForm"}
        -> {"detected": bool, "formType": str, "url": str}
    {"action": "fillForm", "cvData": {...}, "options": {...}}
        -> {"success": bool, "message": str, "formType": str, "filledCount": int}

Every message gets exactly one reply, including malformed messages and
internal failures.
"""

import logging
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from cv_autofill.automation.dispatcher import ERROR_MESSAGE, Dispatcher
from cv_autofill.automation.models import FillContext, FormType
from cv_autofill.browser.base import PageAdapter
from cv_autofill.profile.models import ApplicationOptions, Profile

logger = logging.getLogger(__name__)

INVALID_MESSAGE = "Nieprawidłowa wiadomość: {error}"


class DetectFormRequest(BaseModel):
    """Detect-only request."""

    action: Literal["detectForm"]


class FillFormRequest(BaseModel):
    """Fill request carrying the profile and the user's options."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    action: Literal["fillForm"]
    cv_data: Profile
    options: ApplicationOptions = ApplicationOptions()

    @field_validator("options", mode="before")
    @classmethod
    def _missing_options(cls, value: Any) -> Any:
        return {} if value is None else value


ControlRequest = Annotated[
    Union[DetectFormRequest, FillFormRequest],
    Field(discriminator="action"),
]

_request_adapter: TypeAdapter[ControlRequest] = TypeAdapter(ControlRequest)


def parse_request(payload: dict[str, Any]) -> DetectFormRequest | FillFormRequest:
    """Validate an inbound message.

    Raises:
        ValidationError: If the message is malformed
    """
    return _request_adapter.validate_python(payload)


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]


async def handle_message(
    dispatcher: Dispatcher,
    page: PageAdapter,
    payload: dict[str, Any],
) -> dict[str, Any]:
    """Process one control message and build its reply.

    Args:
        dispatcher: Dispatcher to run the action
        page: Page the message targets
        payload: Raw message

    Returns:
        Reply dict (camelCase keys)
    """
    try:
        request = parse_request(payload)
    except ValidationError as e:
        logger.warning(f"Rejected control message: {e}")
        return {
            "success": False,
            "message": INVALID_MESSAGE.format(error=_describe_validation_error(e)),
            "formType": FormType.UNKNOWN.value,
        }

    try:
        if isinstance(request, DetectFormRequest):
            detected = await dispatcher.detect(page)
            return detected.model_dump(by_alias=True, mode="json")

        context = FillContext(profile=request.cv_data, options=request.options)
        outcome = await dispatcher.fill(page, context)
        return outcome.model_dump(
            by_alias=True,
            mode="json",
            include={"success", "message", "form_type", "filled_count"},
        )
    except Exception as e:
        logger.error(f"Control message failed: {e}")
        return {
            "success": False,
            "message": ERROR_MESSAGE.format(error=e),
            "formType": FormType.UNKNOWN.value,
        }
