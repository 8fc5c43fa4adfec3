"""Dependency injection module."""

from oer.util.di.application import ProdApplicationProvider
from oer.util.di.base import Component, ProviderBase
from oer.util.di.core import ProdConfigProvider
from oer.util.di.domain import ProdDomainProvider
from oer.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Container layout, in dependency order. Only PersistenceProvider is swappable.
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
]
