"""Integration test fixtures: a real fossil checkout in a temp directory."""

from pathlib import Path

import pytest

from fossilvc.core.settings import load_settings
from fossilvc.plugins.vcs.fossil import FossilVCSProvider
from fossilvc.services.process import ProcessInvoker


@pytest.fixture
def fossil_env(tmp_path: Path, monkeypatch) -> Path:
    """Point fossil's home and user at the temp directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USER", "tester")
    monkeypatch.delenv("FOSSIL_EXECUTABLE", raising=False)
    return home


@pytest.fixture
def fossil(tmp_path: Path, fossil_env: Path) -> FossilVCSProvider:
    """Provider running the real fossil executable."""
    settings = load_settings(start_dir=str(tmp_path))
    return FossilVCSProvider(invoker=ProcessInvoker(timeout=30), settings=settings)


@pytest.fixture
def work(tmp_path: Path, fossil: FossilVCSProvider) -> Path:
    """A freshly created and opened checkout."""
    work = tmp_path / "work"
    work.mkdir()
    fossil.create_repo(work)
    return work.resolve()
