"""
VCS provider discovery.

Providers are concrete IVCSProvider subclasses found in the modules of
fossilvc.plugins.vcs or through the ``fossilvc.plugins`` entry point group
of installed distributions.
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from collections.abc import Iterator
from importlib.metadata import entry_points

from .container import ServiceContainer, get_container, resolve_or_default
from .interfaces.logger import ILogger
from .interfaces.vcs import IVCSProvider

ENTRY_POINT_GROUP = "fossilvc.plugins"
BUILTIN_PACKAGE = "fossilvc.plugins.vcs"


def _get_logger() -> ILogger:
    from ..services.logging import NullLogger

    return resolve_or_default(ILogger, NullLogger)  # type: ignore[type-abstract]


def _implements(cls: object, interface: type) -> bool:
    """True for concrete classes deriving from interface (not interface itself)."""
    return (
        inspect.isclass(cls)
        and issubclass(cls, interface)
        and cls is not interface
        and not inspect.isabstract(cls)
    )


def _builtin_candidates(package_name: str) -> Iterator[type]:
    package = importlib.import_module(package_name)
    for module_info in pkgutil.iter_modules(package.__path__):
        if module_info.name.startswith("_") or module_info.name == "base":
            continue
        module = importlib.import_module(f"{package_name}.{module_info.name}")
        for _name, member in inspect.getmembers(module, inspect.isclass):
            # Only classes defined here, not ones the module imported
            if member.__module__ == module.__name__:
                yield member


def _entry_point_candidates() -> Iterator[type]:
    for ep in entry_points(group=ENTRY_POINT_GROUP):
        try:
            yield ep.load()
        except Exception as e:
            # A broken third-party plugin must not stop the CLI
            _get_logger().warning("Skipping plugin %s: %s", ep.name, e)


def _register(container: ServiceContainer, cls: type[IVCSProvider]) -> None:
    name = cls().name
    container.register_vcs_provider(name, cls)
    _get_logger().debug("Registered VCS provider %s (%s)", name, cls.__qualname__)


def discover_plugins(package_name: str = BUILTIN_PACKAGE) -> list[str]:
    """
    Register every provider found; returns the registered names.

    Built-in providers are registered first, so an entry point plugin
    using the same name replaces the built-in one.
    """
    container = get_container()
    for candidate in (*_builtin_candidates(package_name), *_entry_point_candidates()):
        if _implements(candidate, IVCSProvider):
            _register(container, candidate)
    return container.list_vcs_providers()
