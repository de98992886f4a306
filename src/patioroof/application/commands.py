"""Application commands (use cases) for patio roof quotes."""

from __future__ import annotations

import logging
from functools import lru_cache

from patioroof.domain.services import AccessoryCatalog, GeometryEngine, PricingEngine
from patioroof.domain.value_objects import (
    Configuration,
    GridPolicy,
    PinnedEdge,
    PriceBreakdown,
    StructureLayout,
)

from .dtos import QuoteOutput

logger = logging.getLogger(__name__)


class QuoteCommand:
    """Command to compute the layout and price of a configuration.

    Both engines are pure, so results are memoized per (configuration,
    policy, pinned edge). Configurations are frozen and hashable, which makes
    them usable as cache keys directly.
    """

    def __init__(
        self,
        catalog: AccessoryCatalog | None = None,
        cache_size: int = 256,
    ) -> None:
        self.catalog = catalog or AccessoryCatalog()
        self._layout = lru_cache(maxsize=cache_size)(self._compute_layout)
        self._price = lru_cache(maxsize=cache_size)(self._compute_price)

    def execute(
        self,
        config: Configuration,
        policy: GridPolicy = GridPolicy.SNAP,
        pinned_edge: PinnedEdge | None = None,
        include_accessories: bool = False,
    ) -> QuoteOutput:
        """Execute the quote command.

        Args:
            config: Configuration to quote.
            policy: Grid lookup policy for the price.
            pinned_edge: Edge kept fixed in the layout (right edge at x = 5.0
                by default).
            include_accessories: Also price the optional accessories.

        Returns:
            QuoteOutput with layout, price and billing size.

        Raises:
            PriceUnavailableError: If a price grid has no entry for the size.
            UnknownOptionError: If an option has no layout or price rule.
        """
        pinned_edge = pinned_edge or PinnedEdge()
        accessories = None
        if include_accessories:
            accessories = self.catalog.quote(
                config.width, config.depth, config.gutter_height
            )

        output = QuoteOutput(
            configuration=config,
            layout=self.layout(config, pinned_edge),
            price=self.price(config, policy),
            billing_size=PricingEngine(policy=policy).billing_size(config),
            grid_policy=policy,
            accessories=accessories,
        )
        logger.debug(f"Quoted {config.width:g}x{config.depth:g} mm: {output.price.total_price:.2f} EUR")
        return output

    def layout(
        self, config: Configuration, pinned_edge: PinnedEdge | None = None
    ) -> StructureLayout:
        """Structural layout of ``config`` (memoized)."""
        return self._layout(config, pinned_edge or PinnedEdge())

    def price(
        self, config: Configuration, policy: GridPolicy = GridPolicy.SNAP
    ) -> PriceBreakdown:
        """Itemized price of ``config`` (memoized)."""
        return self._price(config, policy)

    def cache_info(self) -> dict[str, int]:
        """Hit and miss counts of both caches."""
        layout, price = self._layout.cache_info(), self._price.cache_info()
        return {
            "layout_hits": layout.hits,
            "layout_misses": layout.misses,
            "price_hits": price.hits,
            "price_misses": price.misses,
        }

    def clear_cache(self) -> None:
        self._layout.cache_clear()
        self._price.cache_clear()

    @staticmethod
    def _compute_layout(config: Configuration, pinned_edge: PinnedEdge) -> StructureLayout:
        return GeometryEngine(pinned_edge=pinned_edge).compute_layout(config)

    @staticmethod
    def _compute_price(config: Configuration, policy: GridPolicy) -> PriceBreakdown:
        return PricingEngine(policy=policy).compute_price(config)
