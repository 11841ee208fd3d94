"""Base platform adapter interface."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from cv_autofill.automation.models import (
    FieldKind,
    FieldName,
    FormType,
    LocatedFieldMap,
    ValueMap,
)
from cv_autofill.browser.base import ElementRef, PageAdapter
from cv_autofill.profile.models import ApplicationOptions, Profile

logger = logging.getLogger(__name__)

INPUT_SELECTOR = "input, textarea, select"
LABEL_CONTAINER_SELECTOR = "div, fieldset"


@dataclass(frozen=True)
class FieldSpec:
    """How to find one semantic field on a platform's form.

    Attributes:
        name: Semantic field
        kind: How the field is written
        labels: Label keywords, best first (lower-case, Polish and English)
        selector: Structural fallback, queried inside the form
        phrases: Label phrases identifying a consent checkbox
    """

    name: FieldName
    kind: FieldKind = FieldKind.TEXT
    labels: tuple[str, ...] = ()
    selector: str | None = None
    phrases: tuple[str, ...] = ()


def _normalize(text: str) -> str:
    return " ".join(text.split()).lower()


def css_string(value: str) -> str:
    """Quote ``value`` for use inside a CSS attribute selector."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


class PlatformAdapter(ABC):
    """Detector + locator for one recruiting platform.

    Subclasses declare:
    - form_type: platform identity reported in outcomes
    - field_specs: the semantic fields the form may expose, in fill order
    - detect(): cheap, side-effect-free page check
    - map_values(): the platform's field mapper

    Location is shared: for every FieldSpec the label strategy runs first and the
    structural selector second. A field neither strategy finds is simply
    absent from the result.

    Usage:
        adapter = TraffitAdapter()
        if await adapter.detect(page):
            located = await adapter.locate(page)
            values = adapter.map_values(profile, options)
    """

    # Lower runs first; ties keep registration order
    priority: int = 100

    @property
    @abstractmethod
    def form_type(self) -> FormType:
        """Platform identity (e.g. FormType.TRAFFIT)."""
        ...

    @property
    @abstractmethod
    def field_specs(self) -> list[FieldSpec]:
        """Fields this platform's form may expose, in fill order."""
        ...

    @abstractmethod
    async def detect(self, page: PageAdapter) -> bool:
        """Detect if the page belongs to this platform.

        Args:
            page: Current page

        Returns:
            True if this adapter should handle the page
        """
        ...

    @abstractmethod
    def map_values(self, profile: Profile, options: ApplicationOptions) -> ValueMap:
        """Map profile and options to the values for this platform's fields."""
        ...

    @property
    def field_names(self) -> list[FieldName]:
        return [spec.name for spec in self.field_specs]

    async def find_form(self, page: PageAdapter) -> ElementRef | None:
        """Root form of the application. Override for platform-specific ids."""
        return await page.query_selector("form")

    async def locate(self, page: PageAdapter) -> LocatedFieldMap:
        """Locate every declared field on the page.

        Never raises: each field independently resolves to an element or is
        left out of the result.

        Args:
            page: Current page

        Returns:
            LocatedFieldMap with the fields that were found
        """
        located: LocatedFieldMap = {}

        try:
            form = await self.find_form(page)
            labels = await self._collect_labels(page)
        except Exception as e:
            logger.warning(f"[{self.form_type.value}] Could not scan page: {e}")
            return located

        for spec in self.field_specs:
            try:
                element = await self._locate_field(page, form, labels, spec)
            except Exception as e:
                logger.warning(f"[{self.form_type.value}] Locating {spec.name.value} failed: {e}")
                element = None

            if element is None:
                logger.debug(f"[{self.form_type.value}] Field {spec.name.value} not found")
                continue
            located[spec.name] = element

        logger.info(
            f"[{self.form_type.value}] Located {len(located)}/{len(self.field_specs)} fields"
        )
        return located

    async def _locate_field(
        self,
        page: PageAdapter,
        form: ElementRef | None,
        labels: list[tuple[ElementRef, str]],
        spec: FieldSpec,
    ) -> ElementRef | None:
        if spec.kind == FieldKind.CHECKBOX and spec.phrases:
            element = await self.find_checkbox_by_label(page, form, spec.phrases)
        elif spec.labels:
            element = await self.find_input_by_label(page, labels, spec.labels)
        else:
            element = None

        if element is None and spec.selector:
            scope = form or page
            element = await scope.query_selector(spec.selector)
        return element

    async def _collect_labels(self, page: PageAdapter) -> list[tuple[ElementRef, str]]:
        labels = []
        for label in await page.query_selector_all("label"):
            text = _normalize(await label.text_content())
            labels.append((label, text))
        return labels

    async def find_input_by_label(
        self,
        page: PageAdapter,
        labels: list[tuple[ElementRef, str]],
        candidates: tuple[str, ...],
    ) -> ElementRef | None:
        """Find an input through the first label containing a candidate keyword.

        Candidates are tried in rank order. The matching label resolves to the
        element named by its ``for`` attribute, else to the first input inside
        the nearest enclosing div/fieldset.

        Note:
            The container search can bind a neighbouring input when one
            container holds several fields.
        """
        for candidate in candidates:
            label = next((el for el, text in labels if candidate in text), None)
            if label is None:
                continue

            target = await self._label_target(page, label)
            if target is not None:
                return target
        return None

    async def _label_target(self, page: PageAdapter, label: ElementRef) -> ElementRef | None:
        for_attr = await label.get_attribute("for")
        if for_attr:
            target = await page.query_selector(f"[id={css_string(for_attr)}]")
            if target is not None:
                return target

        container = await label.closest(LABEL_CONTAINER_SELECTOR)
        if container is not None:
            return await container.query_selector(INPUT_SELECTOR)
        return None

    async def find_checkbox_by_label(
        self,
        page: PageAdapter,
        form: ElementRef | None,
        phrases: tuple[str, ...],
    ) -> ElementRef | None:
        """Find the checkbox whose associated label text contains a phrase."""
        scope = form or page
        for checkbox in await scope.query_selector_all('input[type="checkbox"]'):
            text = _normalize(await self._checkbox_label_text(page, checkbox))
            if text and any(phrase in text for phrase in phrases):
                return checkbox
        return None

    async def _checkbox_label_text(self, page: PageAdapter, checkbox: ElementRef) -> str:
        label = await checkbox.closest("label")
        if label is None:
            checkbox_id = await checkbox.get_attribute("id")
            if checkbox_id:
                label = await page.query_selector(f"label[for={css_string(checkbox_id)}]")
        if label is None:
            return ""
        return await label.text_content()
