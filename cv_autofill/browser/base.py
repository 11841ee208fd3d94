"""Base page adapter protocol.

A located element is a short-lived handle: valid for one fill attempt on one
page load, never cached across navigations.
"""

from abc import ABC, abstractmethod
from urllib.parse import urlparse


class ElementRef(ABC):
    """Handle to an interactive element of the page.

    Implementations:
    - PlaywrightElement: live element of a Playwright page
    - HtmlElement: element of a static HTML snapshot
    """

    @abstractmethod
    async def tag_name(self) -> str:
        """Lower-cased tag name (``input``, ``select``, ...)."""
        ...

    @abstractmethod
    async def get_attribute(self, name: str) -> str | None:
        """Return attribute value or None when absent."""
        ...

    @abstractmethod
    async def text_content(self) -> str:
        """Return the element's text content (may be empty)."""
        ...

    @abstractmethod
    async def closest(self, selector: str) -> "ElementRef | None":
        """Return the nearest ancestor-or-self matching ``selector``."""
        ...

    @abstractmethod
    async def query_selector(self, selector: str) -> "ElementRef | None":
        """Return the first descendant matching ``selector``."""
        ...

    @abstractmethod
    async def query_selector_all(self, selector: str) -> list["ElementRef"]:
        """Return all descendants matching ``selector`` in document order."""
        ...

    @abstractmethod
    async def focus(self) -> None:
        ...

    @abstractmethod
    async def set_value(self, value: str) -> None:
        """Assign the ``value`` property directly, without events."""
        ...

    @abstractmethod
    async def dispatch_event(self, event_type: str) -> None:
        """Dispatch a bubbling synthetic DOM event (input, change, blur)."""
        ...

    @abstractmethod
    async def is_checked(self) -> bool:
        """Current checked state, read from the live element."""
        ...

    @abstractmethod
    async def click(self) -> None:
        """Synthetic activation (toggles checkboxes)."""
        ...

    @abstractmethod
    async def select_option(self, value: str) -> bool:
        """Select the option whose value, or else label, equals ``value``.

        Returns:
            True if an option was selected
        """
        ...

    async def input_type(self) -> str:
        """Effective control type: the input ``type``, or the tag name."""
        tag = await self.tag_name()
        if tag != "input":
            return tag
        return (await self.get_attribute("type") or "text").lower()


class PageAdapter(ABC):
    """Abstract access to the page an autofill attempt runs against."""

    @property
    @abstractmethod
    def adapter_name(self) -> str:
        """Return the adapter name for logging."""
        ...

    @abstractmethod
    async def get_current_url(self) -> str:
        """Get the current page URL."""
        ...

    @abstractmethod
    async def query_selector(self, selector: str) -> ElementRef | None:
        """Return the first element matching ``selector`` or None."""
        ...

    @abstractmethod
    async def query_selector_all(self, selector: str) -> list[ElementRef]:
        """Return all elements matching ``selector`` in document order."""
        ...

    @abstractmethod
    async def show_banner(self, text: str, duration_ms: int) -> None:
        """Show a transient, auto-dismissing notice on the page."""
        ...

    async def get_hostname(self) -> str:
        """Lower-cased hostname of the current URL."""
        return (urlparse(await self.get_current_url()).hostname or "").lower()
