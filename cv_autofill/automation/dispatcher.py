"""Dispatcher: routes a control action to the platform adapter for the page."""

import logging
from enum import Enum

from cv_autofill.automation.models import DetectOutcome, FillContext, FillOutcome, FormType
from cv_autofill.automation.orchestrator import FillOrchestrator
from cv_autofill.browser.base import PageAdapter
from cv_autofill.config import settings
from cv_autofill.platforms import PlatformAdapter, PlatformRegistry

logger = logging.getLogger(__name__)

# User-facing messages (the supported platforms are Polish-market sites)
SUCCESS_MESSAGE = "Formularz {form_type} wypełniony pomyślnie!"
NOTHING_FILLED_MESSAGE = "Nie udało się wypełnić formularza."
NO_FORM_MESSAGE = "Nie znaleziono wspieranego formularza na tej stronie."
NO_PROFILE_MESSAGE = "Błąd: Najpierw wczytaj CV"
ERROR_MESSAGE = "Błąd podczas wypełniania: {error}"
UNKNOWN_ACTION_MESSAGE = "Nieznana akcja: {action}"
BANNER_TEXT = "✓ Formularz {form_type} wykryty - użyj rozszerzenia CV AutoFill"


class Action(str, Enum):
    """Control actions accepted by the dispatcher."""

    DETECT_FORM = "detectForm"
    FILL_FORM = "fillForm"


class Dispatcher:
    """Top-level routine of a detect or fill request.

    Adapters are tried in priority order and the first whose detector
    matches handles the page exclusively. Every failure ends as an outcome
    value; the dispatcher never raises.

    Usage:
        dispatcher = Dispatcher()
        outcome = await dispatcher.run(page, Action.FILL_FORM, FillContext(profile=profile))
    """

    def __init__(
        self,
        adapters: list[PlatformAdapter] | None = None,
        orchestrator: FillOrchestrator | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            adapters: Adapters in detection order (defaults to the registry)
            orchestrator: Fill orchestrator (defaults to configured settle interval)
        """
        self.adapters = adapters if adapters is not None else PlatformRegistry.adapters()
        self.orchestrator = orchestrator or FillOrchestrator()

    async def run(
        self,
        page: PageAdapter,
        action: Action | str,
        context: FillContext | None = None,
    ) -> FillOutcome | DetectOutcome:
        """Run a control action against the page.

        Args:
            page: Current page
            action: detectForm or fillForm
            context: Profile and options (required for fillForm)

        Returns:
            DetectOutcome for detectForm, FillOutcome for fillForm
        """
        try:
            action = Action(action)
        except ValueError:
            return FillOutcome(success=False, message=UNKNOWN_ACTION_MESSAGE.format(action=action))

        if action == Action.DETECT_FORM:
            return await self.detect(page)

        if context is None:
            return FillOutcome(success=False, message=NO_PROFILE_MESSAGE)
        return await self.fill(page, context)

    async def find_adapter(self, page: PageAdapter) -> PlatformAdapter | None:
        """First adapter whose detector matches the page."""
        return await PlatformRegistry.detect(page, adapters=self.adapters)

    async def detect(self, page: PageAdapter) -> DetectOutcome:
        """Report the platform of the page without mapping or filling."""
        try:
            url = await page.get_current_url()
            adapter = await self.find_adapter(page)
        except Exception as e:
            logger.error(f"Form detection failed: {e}")
            return DetectOutcome(detected=False)

        if adapter is None:
            return DetectOutcome(detected=False, url=url)
        return DetectOutcome(detected=True, form_type=adapter.form_type, url=url)

    async def fill(self, page: PageAdapter, context: FillContext) -> FillOutcome:
        """Detect the platform, map the profile, locate fields and fill them."""
        form_type = FormType.UNKNOWN
        try:
            adapter = await self.find_adapter(page)
            if adapter is None:
                return FillOutcome(success=False, message=NO_FORM_MESSAGE)

            form_type = adapter.form_type
            values = adapter.map_values(context.profile, context.options)
            located = await adapter.locate(page)

            logger.info(
                f"[{form_type.value}] Filling {len(located)} located fields "
                f"(worst case {self.orchestrator.max_duration_ms(len(located))}ms)"
            )
            outcome = await self.orchestrator.fill(
                located,
                values,
                form_type=form_type,
                order=adapter.field_names,
            )
        except Exception as e:
            logger.error(f"Error filling {form_type.value} form: {e}")
            return FillOutcome(
                success=False,
                form_type=form_type,
                message=ERROR_MESSAGE.format(error=e),
            )

        if outcome.success:
            outcome.message = SUCCESS_MESSAGE.format(form_type=form_type.value)
        else:
            outcome.message = NOTHING_FILLED_MESSAGE
        return outcome

    async def announce(self, page: PageAdapter, duration_ms: int | None = None) -> FormType | None:
        """Show the detection banner when the page has a supported form.

        Purely cosmetic: failures are logged and ignored.
        """
        try:
            adapter = await self.find_adapter(page)
            if adapter is None:
                return None
            await page.show_banner(
                BANNER_TEXT.format(form_type=adapter.form_type.value),
                settings.banner_duration_ms if duration_ms is None else duration_ms,
            )
        except Exception as e:
            logger.warning(f"Could not show detection banner: {e}")
            return None
        return adapter.form_type
