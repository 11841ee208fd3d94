"""Fill orchestrator: writes a ValueMap into located elements.

Many of the target forms run client-side frameworks that only update their
internal model on specific DOM events. Assigning ``value`` alone leaves the
page's model out of sync with what is shown, so every text field goes
through the full write sequence:

    focus -> clear (+input) -> input (+input) -> commit (change) -> blur -> done

with a settle step after each event. Fields are written strictly one after
another; several forms validate on blur and interleaving writes would
validate against stale state.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from enum import Enum

from cv_autofill.automation.models import (
    FieldName,
    FieldResult,
    FieldStatus,
    FillOutcome,
    FormType,
    LocatedFieldMap,
    Value,
    ValueMap,
)
from cv_autofill.browser.base import ElementRef
from cv_autofill.config import settings

logger = logging.getLogger(__name__)


class WriteStep(str, Enum):
    """States of the per-element write sequence."""

    FOCUS = "focus"
    CLEAR = "clear"
    INPUT = "input"
    COMMIT = "commit"
    BLUR = "blur"
    DONE = "done"


# Settle steps of the longest write sequence (text fields)
TEXT_SETTLE_STEPS = 5


class SettleStrategy(ABC):
    """Wait applied after each synthetic event.

    Implementations may sleep, poll the page, or do nothing (tests).
    """

    @abstractmethod
    async def settle(self, element: ElementRef, step: WriteStep) -> None:
        """Wait for the page to react to ``step`` on ``element``."""
        ...

    @property
    @abstractmethod
    def max_wait_ms(self) -> int:
        """Upper bound of a single settle, in ms."""
        ...


class FixedDelaySettle(SettleStrategy):
    """Sleep for a fixed interval after every event."""

    def __init__(self, interval_ms: int | None = None) -> None:
        self.interval_ms = settings.settle_interval_ms if interval_ms is None else interval_ms

    async def settle(self, element: ElementRef, step: WriteStep) -> None:
        await asyncio.sleep(self.interval_ms / 1000)

    @property
    def max_wait_ms(self) -> int:
        return self.interval_ms


def _is_empty(value: Value | None) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    return value.strip() == ""


class FillOrchestrator:
    """Performs the ordered, event-driven writes of one fill attempt.

    Usage:
        orchestrator = FillOrchestrator()
        outcome = await orchestrator.fill(located, values, form_type=FormType.TRAFFIT)
    """

    def __init__(self, settle: SettleStrategy | None = None) -> None:
        """Initialize the orchestrator.

        Args:
            settle: Wait strategy between events (defaults to the configured
                fixed interval)
        """
        self.settle_strategy = settle or FixedDelaySettle()

    def max_duration_ms(self, field_count: int) -> int:
        """Worst-case duration of an attempt touching ``field_count`` fields."""
        return field_count * TEXT_SETTLE_STEPS * self.settle_strategy.max_wait_ms

    async def fill(
        self,
        located: LocatedFieldMap,
        values: ValueMap,
        form_type: FormType = FormType.UNKNOWN,
        order: list[FieldName] | None = None,
    ) -> FillOutcome:
        """Write every value that has a located element.

        Args:
            located: Semantic field -> element
            values: Semantic field -> value
            form_type: Platform identity for the outcome
            order: Field order (defaults to the order of ``values``, then any
                located-only fields)

        Returns:
            FillOutcome; success means at least one field was filled
        """
        names = list(order) if order is not None else list(values)
        names += [name for name in located if name not in names]

        results: list[FieldResult] = []
        for name in names:
            element = located.get(name)
            value = values.get(name)
            results.append(await self._fill_field(name, element, value))

        filled_count = sum(1 for r in results if r.status.counts_as_filled)

        for result in results:
            if result.status == FieldStatus.MANUAL:
                logger.info(f"Note: {result.name.value} upload field detected, fill it manually")

        logger.info(f"[{form_type.value}] Form filled - {filled_count} fields updated")

        return FillOutcome(
            success=filled_count > 0,
            filled_count=filled_count,
            form_type=form_type,
            fields=results,
        )

    async def _fill_field(
        self,
        name: FieldName,
        element: ElementRef | None,
        value: Value | None,
    ) -> FieldResult:
        if element is None:
            logger.debug(f"Field {name.value} not found")
            return FieldResult(name=name, status=FieldStatus.NOT_FOUND)

        try:
            control = await element.input_type()
            if control == "file":
                return FieldResult(name=name, status=FieldStatus.MANUAL)

            if _is_empty(value):
                logger.debug(f"No value for {name.value}")
                return FieldResult(name=name, status=FieldStatus.EMPTY_VALUE)

            if control in ("checkbox", "radio"):
                status = await self.set_checked(element, _as_bool(value), name)
            elif isinstance(value, bool):
                logger.warning(f"{name.value} is a flag but located a {control} control")
                return FieldResult(
                    name=name,
                    status=FieldStatus.WRITE_FAILED,
                    error=f"Boolean value for {control} control",
                )
            elif control == "select":
                status = await self.select_value(element, str(value), name)
            else:
                status = await self.write_text(element, str(value), name)
        except Exception as e:
            logger.warning(f"Writing {name.value} failed: {e}")
            return FieldResult(name=name, status=FieldStatus.WRITE_FAILED, error=str(e))

        return FieldResult(name=name, status=status)

    async def write_text(self, element: ElementRef, value: str, name: FieldName) -> FieldStatus:
        """Drive a text input or textarea through the full write sequence."""
        logger.info(f"Setting {name.value}")
        settle = self.settle_strategy.settle

        step = WriteStep.FOCUS
        while step != WriteStep.DONE:
            if step == WriteStep.FOCUS:
                await element.focus()
                await settle(element, step)
                step = WriteStep.CLEAR
            elif step == WriteStep.CLEAR:
                await element.set_value("")
                await element.dispatch_event("input")
                await settle(element, step)
                step = WriteStep.INPUT
            elif step == WriteStep.INPUT:
                await element.set_value(value)
                await element.dispatch_event("input")
                await settle(element, step)
                step = WriteStep.COMMIT
            elif step == WriteStep.COMMIT:
                await element.dispatch_event("change")
                await settle(element, step)
                step = WriteStep.BLUR
            elif step == WriteStep.BLUR:
                await element.dispatch_event("blur")
                await settle(element, step)
                step = WriteStep.DONE

        return FieldStatus.FILLED

    async def select_value(self, element: ElementRef, value: str, name: FieldName) -> FieldStatus:
        """Choose a select option by value or label, then commit and blur."""
        settle = self.settle_strategy.settle

        await element.focus()
        await settle(element, WriteStep.FOCUS)

        if not await element.select_option(value):
            logger.info(f"No option matching '{value}' for {name.value}")
            await element.dispatch_event("blur")
            await settle(element, WriteStep.BLUR)
            return FieldStatus.WRITE_FAILED

        logger.info(f"Selected {name.value}: {value}")
        await element.dispatch_event("change")
        await settle(element, WriteStep.COMMIT)
        await element.dispatch_event("blur")
        await settle(element, WriteStep.BLUR)
        return FieldStatus.FILLED

    async def set_checked(self, element: ElementRef, wanted: bool, name: FieldName) -> FieldStatus:
        """Toggle a checkbox with one synthetic click, only if its state differs.

        The state is read right before deciding; the host page may have
        changed it since the element was located.
        """
        if await element.is_checked() == wanted:
            logger.debug(f"{name.value} already {'checked' if wanted else 'unchecked'}")
            return FieldStatus.UNCHANGED

        await element.click()
        await self.settle_strategy.settle(element, WriteStep.COMMIT)
        logger.info(f"{'Checked' if wanted else 'Unchecked'} {name.value}")
        return FieldStatus.FILLED


def _as_bool(value: Value | None) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes", "tak", "on")
