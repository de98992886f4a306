"""Domain exceptions."""

from __future__ import annotations

from enum import Enum


class ConfigurationError(ValueError):
    """Raised when a configuration violates one of its invariants."""

    def __init__(self, field: str, message: str, value: object = None) -> None:
        self.field = field
        self.message = message
        self.value = value
        super().__init__(f"{field}: {message}")


class UnknownOptionError(ValueError):
    """Raised when an enumerated option has no handling at a decision point."""

    def __init__(self, option: object, context: str) -> None:
        self.option = option
        self.context = context
        label = option.value if isinstance(option, Enum) else option
        super().__init__(f"Unhandled {context} option: {label!r}")


class PriceUnavailableError(LookupError):
    """Raised when a price grid has no entry for the requested size.

    Attributes:
        table: Name of the grid that was queried.
        width: Billing width in mm that was looked up.
        depth: Billing depth in mm that was looked up (None for width-only tables).
    """

    def __init__(self, table: str, width: float, depth: float | None = None) -> None:
        self.table = table
        self.width = width
        self.depth = depth
        if depth is None:
            size = f"{width:g} mm"
        else:
            size = f"{width:g} x {depth:g} mm"
        super().__init__(f"No price in '{table}' for size {size}")
