"""
Service container for fossilvc.

Services live in a dependency-injector DynamicContainer, one provider per
interface, named after the interface's dotted path. Next to it sits the
table of VCS provider classes that plugin discovery fills in.

Library code asks for collaborators through resolve_or_default(), so it
works the same whether or not bootstrap() has run.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from dependency_injector import containers, providers

from .interfaces.vcs import IVCSProvider

T = TypeVar("T")


def _slot(interface: type) -> str:
    """Provider name for interface in the DynamicContainer."""
    return f"{interface.__module__}.{interface.__qualname__}".replace(".", "__")


class ServiceContainer:
    """
    Interface -> provider mapping plus the VCS provider table.

    Usage:
        container = ServiceContainer()
        container.register_singleton(ILogger, factory=NullLogger)
        logger = container.resolve(ILogger)
    """

    _instance: ServiceContainer | None = None

    def __init__(self) -> None:
        self._services = containers.DynamicContainer()
        self._vcs_classes: dict[str, type[IVCSProvider]] = {}

    @classmethod
    def get_instance(cls) -> ServiceContainer:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the global container; the next get_instance() starts empty."""
        cls._instance = None

    def _set(self, interface: type, provider: providers.Provider) -> None:
        setattr(self._services, _slot(interface), provider)

    def _get(self, interface: type) -> providers.Provider | None:
        return self._services.providers.get(_slot(interface))

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register one shared instance of interface.

        Pass either a ready implementation or a factory called on first use.
        """
        if implementation is not None:
            self._set(interface, providers.Object(implementation))
        elif factory is not None:
            self._set(interface, providers.Singleton(factory))
        else:
            raise ValueError("register_singleton() needs an implementation or a factory")

    def register_transient(self, interface: type[T], factory: Callable[..., T]) -> None:
        """Register interface so that every resolve() calls factory anew."""
        self._set(interface, providers.Factory(factory))

    def override(self, interface: type[T], provider: providers.Provider) -> None:
        """Serve interface from provider until the container is reset."""
        current = self._get(interface)
        if current is None:
            self._set(interface, provider)
        else:
            current.override(provider)

    def try_resolve(self, interface: type[T]) -> T | None:
        provider = self._get(interface)
        return None if provider is None else provider()

    def resolve(self, interface: type[T]) -> T:
        """
        Raises:
            KeyError: If interface was never registered
        """
        provider = self._get(interface)
        if provider is None:
            raise KeyError(f"Nothing registered for {interface.__qualname__}")
        return provider()

    # -- VCS providers ----------------------------------------------------------

    def register_vcs_provider(self, name: str, provider_class: type[IVCSProvider]) -> None:
        self._vcs_classes[name] = provider_class

    def get_vcs_provider(self, name: str = "fossil") -> IVCSProvider:
        """
        New instance of the provider registered as name.

        Raises:
            KeyError: If no such provider was registered
        """
        try:
            provider_class = self._vcs_classes[name]
        except KeyError:
            raise KeyError(f"No VCS provider registered: {name}") from None
        return provider_class()

    def list_vcs_providers(self) -> list[str]:
        return sorted(self._vcs_classes)


def get_container() -> ServiceContainer:
    """The process-wide container."""
    return ServiceContainer.get_instance()


def resolve(interface: type[T]) -> T:
    return get_container().resolve(interface)


def try_resolve(interface: type[T]) -> T | None:
    return get_container().try_resolve(interface)


def resolve_or_default(interface: type[T], default_factory: Callable[[], T]) -> T:
    """
    The registered service for interface, else default_factory().

    Example:
        >>> from fossilvc.core.interfaces.logger import ILogger
        >>> from fossilvc.services.logging import NullLogger
        >>> logger = resolve_or_default(ILogger, NullLogger)
    """
    service = try_resolve(interface)
    return default_factory() if service is None else service
