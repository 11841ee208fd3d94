"""Registry for platform adapters."""

import logging
from typing import TypeVar

from cv_autofill.automation.models import FormType
from cv_autofill.browser.base import PageAdapter
from cv_autofill.platforms.base import PlatformAdapter

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=PlatformAdapter)


class PlatformRegistry:
    """Ordered registry of platform adapters.

    Provides:
    - Registration of adapter classes via decorator
    - Priority-ordered adapter instances for the Dispatcher
    - Detection of the platform a page belongs to

    Usage:
        # Register an adapter
        @PlatformRegistry.register
        class TraffitAdapter(PlatformAdapter):
            ...

        # Detect the platform
        adapter = await PlatformRegistry.detect(page)
    """

    _adapters: list[type[PlatformAdapter]] = []

    @classmethod
    def register(cls, adapter_class: type[T]) -> type[T]:
        """Register an adapter class.

        Use as a decorator:
            @PlatformRegistry.register
            class MyAdapter(PlatformAdapter):
                ...

        Args:
            adapter_class: Adapter class to register

        Returns:
            The registered class (for decorator pattern)
        """
        if adapter_class in cls._adapters:
            return adapter_class

        cls._adapters.append(adapter_class)
        logger.debug(f"Registered platform adapter: {adapter_class.__name__}")
        return adapter_class

    @classmethod
    def adapters(cls) -> list[PlatformAdapter]:
        """Fresh adapter instances ordered by priority, then registration."""
        ordered = sorted(
            enumerate(cls._adapters),
            key=lambda item: (item[1].priority, item[0]),
        )
        return [adapter_class() for _, adapter_class in ordered]

    @classmethod
    def get_adapter(cls, form_type: FormType | str) -> PlatformAdapter | None:
        """Get adapter instance by platform identity.

        Args:
            form_type: FormType or its value (e.g. "Traffit"), case-insensitive

        Returns:
            PlatformAdapter instance or None if not registered
        """
        wanted = form_type.value if isinstance(form_type, FormType) else form_type
        for adapter in cls.adapters():
            if adapter.form_type.value.lower() == wanted.lower():
                return adapter
        return None

    @classmethod
    async def detect(
        cls,
        page: PageAdapter,
        adapters: list[PlatformAdapter] | None = None,
    ) -> PlatformAdapter | None:
        """Return the first adapter whose detector matches the page.

        A detector that raises counts as no match.

        Args:
            page: Current page
            adapters: Adapters to try in order (defaults to all registered)

        Returns:
            Matching PlatformAdapter or None
        """
        for adapter in cls.adapters() if adapters is None else adapters:
            try:
                if await adapter.detect(page):
                    logger.info(f"Detected platform: {adapter.form_type.value}")
                    return adapter
            except Exception as e:
                logger.warning(f"Error detecting {adapter.form_type.value}: {e}")

        logger.info("No supported application form detected")
        return None

    @classmethod
    def list_platforms(cls) -> list[str]:
        """List registered platform names in detection order."""
        return [adapter.form_type.value for adapter in cls.adapters()]

    @classmethod
    def clear(cls) -> None:
        """Clear all registered adapters (for testing)."""
        cls._adapters.clear()
