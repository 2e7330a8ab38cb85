"""
Unit tests for the service container, plugin discovery and bootstrap.
"""

import pytest

from fossilvc.core.bootstrap import bootstrap, is_initialized
from fossilvc.core.container import ServiceContainer, get_container, resolve_or_default
from fossilvc.core.interfaces.invoker import IProcessInvoker
from fossilvc.core.interfaces.logger import ILogger
from fossilvc.core.registry import _implements, discover_plugins
from fossilvc.core.settings import FossilVCSettings
from fossilvc.plugins.vcs.base import BaseVCSProvider
from fossilvc.plugins.vcs.fossil import FossilVCSProvider
from fossilvc.services.logging import NullLogger
from fossilvc.services.process import ProcessInvoker


class TestServiceContainer:
    """Tests for ServiceContainer registration and resolution."""

    def test_singleton_factory_called_once(self):
        """A singleton factory yields the same instance every time."""
        container = ServiceContainer()
        container.register_singleton(ILogger, factory=NullLogger)

        assert container.resolve(ILogger) is container.resolve(ILogger)

    def test_transient_creates_new_instances(self):
        """A transient registration yields a fresh instance per resolve."""
        container = ServiceContainer()
        container.register_transient(ILogger, NullLogger)

        assert container.resolve(ILogger) is not container.resolve(ILogger)

    def test_register_needs_implementation_or_factory(self):
        """Registering nothing is an error."""
        with pytest.raises(ValueError):
            ServiceContainer().register_singleton(ILogger)

    def test_override_replaces_registration(self):
        """An override wins over the registered provider."""
        from dependency_injector import providers

        container = ServiceContainer()
        container.register_singleton(ILogger, factory=NullLogger)
        replacement = NullLogger()
        container.override(ILogger, providers.Object(replacement))

        assert container.resolve(ILogger) is replacement

    def test_override_unregistered(self):
        """Overriding an unknown interface registers it."""
        from dependency_injector import providers

        container = ServiceContainer()
        replacement = NullLogger()
        container.override(ILogger, providers.Object(replacement))

        assert container.resolve(ILogger) is replacement

    def test_resolve_unknown(self):
        """resolve raises, try_resolve returns None."""
        container = ServiceContainer()

        with pytest.raises(KeyError):
            container.resolve(ILogger)
        assert container.try_resolve(ILogger) is None

    def test_vcs_registry(self):
        """Providers are registered by name and instantiated on request."""
        container = ServiceContainer()
        container.register_vcs_provider("fossil", FossilVCSProvider)

        assert container.list_vcs_providers() == ["fossil"]
        assert isinstance(container.get_vcs_provider(), FossilVCSProvider)
        with pytest.raises(KeyError):
            container.get_vcs_provider("git")

    def test_global_instance_reset(self):
        """The global container is a singleton until reset."""
        first = get_container()
        assert get_container() is first

        ServiceContainer.reset()
        assert get_container() is not first


class TestPluginDiscovery:
    """Tests for discover_plugins()."""

    def test_builtin_fossil_provider(self):
        """The fossil provider is discovered from fossilvc.plugins.vcs."""
        discover_plugins()

        assert "fossil" in get_container().list_vcs_providers()

    def test_implements_skips_abstract(self):
        """Abstract bases are not providers."""
        assert _implements(FossilVCSProvider, BaseVCSProvider)
        assert not _implements(BaseVCSProvider, BaseVCSProvider)


class TestBootstrap:
    """Tests for bootstrap()."""

    @pytest.fixture(autouse=True)
    def quiet_logging(self, monkeypatch):
        monkeypatch.setenv("FOSSILVC_LOGGING__FILE", "false")
        monkeypatch.delenv("FOSSIL_EXECUTABLE", raising=False)

    def test_registers_core_services(self, tmp_path):
        """Settings, logger and invoker are resolvable after bootstrap."""
        container = bootstrap(start_dir=str(tmp_path))

        assert is_initialized()
        assert isinstance(container.resolve(FossilVCSettings), FossilVCSettings)
        assert isinstance(container.resolve(IProcessInvoker), ProcessInvoker)
        assert container.resolve(ILogger) is container.resolve(ILogger)

    def test_invoker_uses_settings(self, tmp_path):
        """The invoker is built from the [fossil] section."""
        config_dir = tmp_path / ".fossilvc"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text('[fossil]\nexecutable = "fossil2"\ntimeout = 9\n')

        invoker = bootstrap(start_dir=str(tmp_path)).resolve(IProcessInvoker)

        assert invoker.executable == "fossil2"
        assert invoker.timeout == 9.0

    def test_provider_resolves_from_container(self, tmp_path):
        """A provider without explicit collaborators uses the container's."""
        container = bootstrap(start_dir=str(tmp_path))
        provider = container.get_vcs_provider("fossil")

        assert provider.invoker is container.resolve(IProcessInvoker)

    def test_resolve_or_default_without_bootstrap(self):
        """Outside bootstrap the default factory is used."""
        assert isinstance(resolve_or_default(ILogger, NullLogger), NullLogger)
