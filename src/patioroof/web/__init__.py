"""FastAPI REST API for patio roof quotes.

Quotes, price-only and layout-only requests, configuration validation,
accessory prices and exports.

Usage:
    uvicorn patioroof.web:app --reload
"""

from patioroof.web.app import app, create_app

__all__ = ["app", "create_app"]
