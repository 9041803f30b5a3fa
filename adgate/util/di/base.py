"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests may swap for mock implementations
Component = Literal["config", "persistence", "tiktok"]


class ProviderBase(Provider):
    """Common base for every provider in ``PROVIDERS``.

    A provider class that has subclasses is a swappable component: its
    subclasses set ``__is_mock__`` and the container picks one of them.
    A provider class without subclasses is used as is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
