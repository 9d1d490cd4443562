"""Shared base for dishka providers."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider tagged with mock-selection metadata.

    Attributes:
        __mock_component__: Name of the swappable component this provider
            implements, or None when it has a single implementation
        __is_mock__: True for the in-memory test implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
