"""Exceptions raised by the host shell around the autofill core.

The core itself (adapters, mappers, orchestrator, dispatcher) converts its
failures into outcome values; these exceptions only cross the boundary
between the host shell and the page or the filesystem.
"""


class AutofillError(Exception):
    """Base class for autofill errors."""


class PageNotReadyError(AutofillError):
    """The page could not be reached or is not ready for messages."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class ProfileLoadError(AutofillError):
    """The profile document could not be read or is not valid JSON-Resume."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
