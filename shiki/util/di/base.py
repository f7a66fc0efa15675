"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a swappable test implementation
Component = Literal["persistence", "visitor"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with subclasses is a mockable component: its subclasses
    are the production and mock implementations, told apart by ``__is_mock__``.

    Attributes:
        __mock_component__: Component name (None for concrete providers)
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        """Whether this class is a component base with implementations."""
        return bool(cls.__subclasses__())
