"""Patio roof configurator: structural layout and pricing for lean-to and free-standing roofs."""

__version__ = "0.1.0"
