"""Pytest configuration and shared fixtures for patio roof tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from patioroof.application.commands import QuoteCommand
    from patioroof.domain.value_objects import Configuration


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def default_config() -> "Configuration":
    """The configurator's initial configuration (5000 x 3000 mm, wall mount)."""
    from patioroof.domain.value_objects import Configuration

    return Configuration()


@pytest.fixture
def quote_command() -> "QuoteCommand":
    """A fresh QuoteCommand with empty caches."""
    from patioroof.application.commands import QuoteCommand

    return QuoteCommand()


@pytest.fixture(autouse=True)
def reset_service_factory():
    """Give every test its own default ServiceFactory."""
    from patioroof.application.factory import reset_factory

    reset_factory()
    yield
    reset_factory()
