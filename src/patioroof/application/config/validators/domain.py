"""Domain validation: the configuration can be built and priced."""

from __future__ import annotations

from typing import TYPE_CHECKING

from patioroof.application.config.adapter import config_to_domain
from patioroof.domain.services import PricingEngine
from patioroof.domain.value_objects import (
    ConfigurationError,
    PriceUnavailableError,
)

from .base import ValidationResult

if TYPE_CHECKING:
    from patioroof.application.config.schemas import PatioRoofConfiguration


class DomainValidator:
    """Builds the domain configuration and prices it.

    Reports an error when a domain invariant rejects the values or when a
    price grid has no entry for the size.
    """

    @property
    def name(self) -> str:
        return "domain"

    def validate(self, config: PatioRoofConfiguration) -> ValidationResult:
        result = ValidationResult()
        try:
            roof, policy, _ = config_to_domain(config)
        except ConfigurationError as e:
            result.add_error(f"configuration.{e.field}", e.message, e.value)
            return result

        try:
            PricingEngine(policy=policy).compute_price(roof)
        except PriceUnavailableError as e:
            result.add_error("configuration", str(e), e.width)
        return result
