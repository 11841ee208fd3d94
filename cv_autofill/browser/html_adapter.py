"""Static HTML page adapter.

Runs detection, location and filling against a saved HTML snapshot parsed
with BeautifulSoup. Writes update the parsed tree and every synthetic event
is appended to an event log, which makes the adapter suitable for offline
inspection of a form and for exercising the orchestrator without a browser.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from cv_autofill.browser.base import ElementRef, PageAdapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomEvent:
    """Synthetic event recorded by HtmlPage."""

    event_type: str
    target: str


class HtmlElement(ElementRef):
    """ElementRef backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag, page: "HtmlPage") -> None:
        self._tag = tag
        self._page = page

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HtmlElement) and other._tag is self._tag

    def __hash__(self) -> int:
        return id(self._tag)

    def __repr__(self) -> str:
        return f"<HtmlElement {self.describe()}>"

    @property
    def tag(self) -> Tag:
        return self._tag

    def describe(self) -> str:
        """Short CSS-like description used in event logs and reports."""
        if self._tag.get("id"):
            return f"{self._tag.name}#{self._tag['id']}"
        if self._tag.get("name"):
            return f'{self._tag.name}[name="{self._tag["name"]}"]'
        return self._tag.name

    @property
    def value(self) -> str:
        """Current value as the page would report it."""
        if self._tag.name == "textarea":
            return self._tag.get_text()
        if self._tag.name == "select":
            option = self._tag.find("option", selected=True) or self._tag.find("option")
            if option is None:
                return ""
            return option.get("value", option.get_text().strip())
        return self._tag.get("value", "")

    @property
    def is_attached(self) -> bool:
        return any(parent is self._page.soup for parent in self._tag.parents)

    def _ensure_attached(self) -> None:
        if not self.is_attached:
            raise RuntimeError(f"Element {self.describe()} is not attached to the DOM")

    def _record(self, event_type: str) -> None:
        self._page.events.append(DomEvent(event_type, self.describe()))

    async def tag_name(self) -> str:
        return self._tag.name.lower()

    async def get_attribute(self, name: str) -> str | None:
        value = self._tag.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    async def text_content(self) -> str:
        return self._tag.get_text()

    async def closest(self, selector: str) -> ElementRef | None:
        found = self._tag.css.closest(selector)
        return HtmlElement(found, self._page) if found else None

    async def query_selector(self, selector: str) -> ElementRef | None:
        found = self._tag.select_one(selector)
        return HtmlElement(found, self._page) if found else None

    async def query_selector_all(self, selector: str) -> list[ElementRef]:
        return [HtmlElement(tag, self._page) for tag in self._tag.select(selector)]

    async def focus(self) -> None:
        self._ensure_attached()
        self._page.active_element = self
        self._record("focus")

    async def set_value(self, value: str) -> None:
        self._ensure_attached()
        if self._tag.name == "textarea":
            self._tag.string = value
        else:
            self._tag["value"] = value

    async def dispatch_event(self, event_type: str) -> None:
        self._ensure_attached()
        if event_type == "blur" and self._page.active_element == self:
            self._page.active_element = None
        self._record(event_type)

    async def is_checked(self) -> bool:
        return self._tag.has_attr("checked")

    async def click(self) -> None:
        self._ensure_attached()
        self._record("click")
        if (self._tag.get("type") or "").lower() in ("checkbox", "radio"):
            if self._tag.has_attr("checked"):
                del self._tag["checked"]
            else:
                self._tag["checked"] = ""
            self._record("change")

    async def select_option(self, value: str) -> bool:
        self._ensure_attached()
        options = self._tag.find_all("option")
        match = next((o for o in options if o.get("value") == value), None)
        if match is None:
            wanted = value.strip().lower()
            match = next((o for o in options if o.get_text().strip().lower() == wanted), None)
        if match is None:
            return False
        for option in options:
            if option.has_attr("selected"):
                del option["selected"]
        match["selected"] = ""
        return True


class HtmlPage(PageAdapter):
    """Page adapter over a static HTML document.

    Usage:
        page = HtmlPage.from_file(Path("form.html"), url="https://x.traffit.com/a/1")
        located = await TraffitAdapter().locate(page)
    """

    def __init__(self, html: str, url: str = "about:blank") -> None:
        self.soup = BeautifulSoup(html, "html.parser")
        self.url = url
        self.events: list[DomEvent] = []
        self.banners: list[tuple[str, int]] = []
        self.active_element: HtmlElement | None = None

    @classmethod
    def from_file(cls, path: Path, url: str = "about:blank") -> "HtmlPage":
        """Load a saved page snapshot."""
        return cls(path.read_text(encoding="utf-8"), url=url)

    @property
    def adapter_name(self) -> str:
        return "html"

    def events_for(self, element: ElementRef) -> list[str]:
        """Event types dispatched on ``element``, in order."""
        if not isinstance(element, HtmlElement):
            return []
        target = element.describe()
        return [event.event_type for event in self.events if event.target == target]

    async def get_current_url(self) -> str:
        return self.url

    async def query_selector(self, selector: str) -> ElementRef | None:
        found = self.soup.select_one(selector)
        return HtmlElement(found, self) if found else None

    async def query_selector_all(self, selector: str) -> list[ElementRef]:
        return [HtmlElement(tag, self) for tag in self.soup.select(selector)]

    async def show_banner(self, text: str, duration_ms: int) -> None:
        previous = self.soup.find(id="cv-autofill-indicator")
        if previous:
            previous.decompose()
        indicator = self.soup.new_tag("div", id="cv-autofill-indicator")
        indicator.string = text
        (self.soup.body or self.soup).append(indicator)
        self.banners.append((text, duration_ms))
        logger.debug(f"Banner shown for {duration_ms}ms: {text}")
