"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from patioroof.application.commands import QuoteCommand
    from patioroof.domain.services import AccessoryCatalog
    from patioroof.infrastructure.formatters import (
        CatalogFormatter,
        LayoutSummaryFormatter,
        PriceBreakdownFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Instances are created lazily and cached, so every caller of one factory
    shares a single quote command and its memoized results.
    """

    cache_size: int = 256

    _catalog: AccessoryCatalog | None = field(default=None, init=False, repr=False)
    _quote_command: QuoteCommand | None = field(default=None, init=False, repr=False)

    def get_catalog(self) -> AccessoryCatalog:
        """Get or create the accessory catalog."""
        if self._catalog is None:
            from patioroof.domain.services import AccessoryCatalog

            self._catalog = AccessoryCatalog()
        return self._catalog

    def get_quote_command(self) -> QuoteCommand:
        """Get or create the shared quote command."""
        if self._quote_command is None:
            from patioroof.application.commands import QuoteCommand

            self._quote_command = QuoteCommand(
                catalog=self.get_catalog(), cache_size=self.cache_size
            )
        return self._quote_command

    def get_price_formatter(self) -> PriceBreakdownFormatter:
        from patioroof.infrastructure.formatters import PriceBreakdownFormatter

        return PriceBreakdownFormatter()

    def get_layout_formatter(self) -> LayoutSummaryFormatter:
        from patioroof.infrastructure.formatters import LayoutSummaryFormatter

        return LayoutSummaryFormatter()

    def get_catalog_formatter(self) -> CatalogFormatter:
        from patioroof.infrastructure.formatters import CatalogFormatter

        return CatalogFormatter()


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
