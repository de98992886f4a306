"""Request dependencies: the shared quote command and accessory catalog."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from patioroof.application.commands import QuoteCommand
from patioroof.application.factory import ServiceFactory, get_factory
from patioroof.domain.services import AccessoryCatalog


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """The process-wide factory; its quote command caches across requests."""
    return get_factory()


ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]


def get_quote_command(factory: ServiceFactoryDep) -> QuoteCommand:
    return factory.get_quote_command()


def get_catalog(factory: ServiceFactoryDep) -> AccessoryCatalog:
    return factory.get_catalog()


QuoteCommandDep = Annotated[QuoteCommand, Depends(get_quote_command)]
CatalogDep = Annotated[AccessoryCatalog, Depends(get_catalog)]
