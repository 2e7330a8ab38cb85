"""
One-time wiring of the global service container.

bootstrap() loads settings for a directory and registers:

    FossilVCSettings  the loaded settings
    ILogger           FossilVCLogger configured from [logging]
    IProcessInvoker   ProcessInvoker configured from [fossil]

then discovers VCS providers. Later calls return the same container until
reset() is called.
"""

from .container import ServiceContainer, get_container
from .interfaces.invoker import IProcessInvoker
from .interfaces.logger import ILogger
from .registry import discover_plugins
from .settings import FossilVCSettings, load_settings

_initialized = False


def bootstrap(start_dir: str | None = None) -> ServiceContainer:
    """
    Wire the container, looking for configuration from start_dir (default: cwd).
    """
    global _initialized

    container = get_container()
    if _initialized:
        return container

    settings = load_settings(start_dir=start_dir)
    _register_services(container, settings)
    discover_plugins()

    if settings.config_error:
        container.resolve(ILogger).warning(settings.config_error)  # type: ignore[type-abstract]

    _initialized = True
    return container


def _register_services(container: ServiceContainer, settings: FossilVCSettings) -> None:
    from ..services.logging import FossilVCLogger
    from ..services.process.invoker import ProcessInvoker

    container.register_singleton(FossilVCSettings, implementation=settings)
    container.register_singleton(
        ILogger,  # type: ignore[type-abstract]
        factory=lambda: FossilVCLogger(
            level=settings.logging.level,
            console_enabled=settings.logging.console,
            file_enabled=settings.logging.file,
        ),
    )
    container.register_singleton(
        IProcessInvoker,  # type: ignore[type-abstract]
        factory=lambda: ProcessInvoker(
            executable=settings.fossil.executable,
            timeout=settings.fossil.timeout,
            logger=container.resolve(ILogger),  # type: ignore[type-abstract]
        ),
    )


def reset() -> None:
    """Drop the global container and allow bootstrap() to run again."""
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    return _initialized
