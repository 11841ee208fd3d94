"""Playwright page adapter for live recruiting pages."""

import logging
from typing import Any

from playwright.async_api import (
    Browser,
    BrowserContext,
    ElementHandle,
    Error as PlaywrightError,
    Page,
    async_playwright,
)

from cv_autofill.browser.base import ElementRef, PageAdapter
from cv_autofill.exceptions import PageNotReadyError

logger = logging.getLogger(__name__)


BANNER_SCRIPT = """
    ([text, durationMs]) => {
        const previous = document.getElementById('cv-autofill-indicator');
        if (previous) previous.remove();

        const indicator = document.createElement('div');
        indicator.id = 'cv-autofill-indicator';
        indicator.textContent = text;
        Object.assign(indicator.style, {
            position: 'fixed',
            top: '10px',
            right: '10px',
            background: '#4CAF50',
            color: 'white',
            padding: '10px 15px',
            borderRadius: '5px',
            boxShadow: '0 2px 5px rgba(0,0,0,0.2)',
            zIndex: '10000',
            fontFamily: 'Arial, sans-serif',
            fontSize: '14px',
        });
        document.body.appendChild(indicator);

        setTimeout(() => {
            indicator.style.transition = 'opacity 0.5s';
            indicator.style.opacity = '0';
            setTimeout(() => indicator.remove(), 500);
        }, durationMs);
    }
"""


class PlaywrightElement(ElementRef):
    """ElementRef backed by a Playwright ElementHandle."""

    def __init__(self, handle: ElementHandle) -> None:
        self._handle = handle

    @property
    def handle(self) -> ElementHandle:
        return self._handle

    async def tag_name(self) -> str:
        return await self._handle.evaluate("el => el.tagName.toLowerCase()")

    async def get_attribute(self, name: str) -> str | None:
        return await self._handle.get_attribute(name)

    async def text_content(self) -> str:
        return await self._handle.text_content() or ""

    async def closest(self, selector: str) -> ElementRef | None:
        result = await self._handle.evaluate_handle("(el, s) => el.closest(s)", selector)
        element = result.as_element()
        return PlaywrightElement(element) if element else None

    async def query_selector(self, selector: str) -> ElementRef | None:
        element = await self._handle.query_selector(selector)
        return PlaywrightElement(element) if element else None

    async def query_selector_all(self, selector: str) -> list[ElementRef]:
        return [PlaywrightElement(el) for el in await self._handle.query_selector_all(selector)]

    async def focus(self) -> None:
        await self._handle.focus()

    async def set_value(self, value: str) -> None:
        await self._handle.evaluate("(el, v) => { el.value = v; }", value)

    async def dispatch_event(self, event_type: str) -> None:
        # Playwright events bubble and are composed by default
        await self._handle.dispatch_event(event_type)

    async def is_checked(self) -> bool:
        return await self._handle.is_checked()

    async def click(self) -> None:
        # Script click: consent boxes are often hidden behind a styled label
        await self._handle.evaluate("el => el.click()")

    async def select_option(self, value: str) -> bool:
        try:
            selected = await self._handle.select_option(value=value, timeout=2000)
        except PlaywrightError:
            selected = []
        if not selected:
            try:
                selected = await self._handle.select_option(label=value, timeout=2000)
            except PlaywrightError:
                selected = []
        return bool(selected)


class PlaywrightPage(PageAdapter):
    """Page adapter driving a Chromium page through Playwright.

    The browser is headed by default: the autofill stops short of
    submitting, so the user reviews the form in the same window.

    Usage:
        async with PlaywrightPage(headless=False) as page:
            await page.navigate("https://billennium.traffit.com/public/an/123")
            outcome = await dispatcher.fill(page, context)
    """

    def __init__(
        self,
        headless: bool = False,
        slow_mo: int = 0,
        timeout: int = 30000,
    ) -> None:
        """Initialize adapter state.

        Args:
            headless: Run without a visible window
            slow_mo: Delay between Playwright operations in ms
            timeout: Default timeout in ms
        """
        self._headless = headless
        self._slow_mo = slow_mo
        self._default_timeout = timeout
        self._playwright: Any = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    @property
    def adapter_name(self) -> str:
        """Return adapter name."""
        return "playwright"

    @property
    def page(self) -> Page:
        """Get the current page, raising if not initialized."""
        if self._page is None:
            raise PageNotReadyError("Browser not initialized. Call initialize() first.")
        return self._page

    async def __aenter__(self) -> "PlaywrightPage":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def initialize(self) -> None:
        """Launch the browser and open a page."""
        logger.info(f"Initializing Playwright page (headless={self._headless})")

        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self._headless,
                slow_mo=self._slow_mo,
            )
            self._context = await self._browser.new_context()
            self._context.set_default_timeout(self._default_timeout)
            self._page = await self._context.new_page()
        except PlaywrightError as e:
            raise PageNotReadyError(f"Could not start browser: {e}") from e

        logger.info("Playwright browser initialized successfully")

    async def close(self) -> None:
        """Close browser and cleanup."""
        logger.info("Closing Playwright browser")

        if self._page:
            await self._page.close()
            self._page = None

        if self._context:
            await self._context.close()
            self._context = None

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    async def navigate(self, url: str, wait_until: str = "load") -> None:
        """Navigate to URL, raising PageNotReadyError if the page does not load."""
        try:
            response = await self.page.goto(
                url,
                wait_until=wait_until,  # type: ignore
                timeout=self._default_timeout,
            )
        except PlaywrightError as e:
            logger.error(f"Navigation failed: {e}")
            raise PageNotReadyError(str(e), url=url) from e

        if response is not None and not response.ok:
            raise PageNotReadyError(f"HTTP {response.status}: {response.status_text}", url=url)

        logger.info(f"Loaded {self.page.url}")

    async def wait_until_closed(self) -> None:
        """Block until the user closes the page."""
        await self.page.wait_for_event("close", timeout=0)

    async def get_current_url(self) -> str:
        return self.page.url

    async def query_selector(self, selector: str) -> ElementRef | None:
        element = await self.page.query_selector(selector)
        return PlaywrightElement(element) if element else None

    async def query_selector_all(self, selector: str) -> list[ElementRef]:
        return [PlaywrightElement(el) for el in await self.page.query_selector_all(selector)]

    async def show_banner(self, text: str, duration_ms: int) -> None:
        await self.page.evaluate(BANNER_SCRIPT, [text, duration_ms])
