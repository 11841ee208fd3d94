"""Page adapters for different DOM backends."""

from cv_autofill.browser.base import ElementRef, PageAdapter
from cv_autofill.browser.html_adapter import DomEvent, HtmlElement, HtmlPage

__all__ = [
    "DomEvent",
    "ElementRef",
    "HtmlElement",
    "HtmlPage",
    "PageAdapter",
]
