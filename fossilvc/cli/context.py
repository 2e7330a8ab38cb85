"""
State shared by fossilvc commands, handed down as Click's ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..plugins.vcs.fossil import FossilVCSProvider


@dataclass
class FossilVCContext:
    """
    Attributes:
        cwd: Directory commands operate in (-C/--directory or the cwd)
        repo_root: Fossil checkout root, None outside a checkout
        vcs: The fossil provider commands talk to
    """

    cwd: Path
    repo_root: Path | None
    vcs: FossilVCSProvider

    @classmethod
    def create(cls, cwd: Path | None = None) -> FossilVCContext:
        """
        Bootstrap the container with settings found from cwd (default:
        the process cwd) and locate the checkout around it.
        """
        from ..core.bootstrap import bootstrap
        from ..plugins.vcs.fossil import FossilVCSProvider

        cwd = (cwd or Path.cwd()).absolute()
        container = bootstrap(start_dir=str(cwd))

        try:
            vcs = container.get_vcs_provider("fossil")
        except KeyError:
            vcs = FossilVCSProvider()

        root = vcs.get_repo_root(cwd)
        return cls(
            cwd=cwd,
            repo_root=Path(root) if root else None,
            vcs=vcs,  # type: ignore[arg-type]
        )

    @property
    def has_checkout(self) -> bool:
        return self.repo_root is not None

    def resolve(self, path: str | Path) -> Path:
        """Interpret a command-line path relative to cwd."""
        p = Path(path)
        return p if p.is_absolute() else self.cwd / p
