"""Dependency injection wiring.

``PROVIDERS`` lists one entry per concern. Concrete entries are used as-is;
mockable entries (those with ``__mock_component__`` set) are abstract bases
whose production and mock subclasses are chosen by ``get_provider``.
"""

from typing import Type

from quotevote.util.di.application import ProdApplicationProvider
from quotevote.util.di.base import Component, ProviderBase
from quotevote.util.di.core import ProdConfigProvider
from quotevote.util.di.domain import ProdDomainProvider
from quotevote.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components tests may swap for in-memory versions."""
    return {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Prefer the mock implementation of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = {impl.__is_mock__: impl for impl in base.__subclasses__()}
    if not implementations:
        return base

    if use_mock not in implementations:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")
    return implementations[use_mock]


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
]
