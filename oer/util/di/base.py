"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests may swap for in-memory implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in the container.

    A provider class with subclasses is a swappable component: exactly one
    subclass sets ``__is_mock__ = True`` and one leaves it False. A provider
    class without subclasses is used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_swappable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def select(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """Pick the implementation to instantiate for this provider.

        Raises:
            ValueError: If a swappable component lacks the requested implementation
        """
        if not cls.is_swappable():
            return cls

        for impl in cls.__subclasses__():
            if impl.__is_mock__ == use_mock:
                return impl

        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
