"""Resolution of bundled asset identifiers to files on disk.

Assets (favicon, logo, fonts) ship inside the package under
``templates/assets/``. Callers can add extra search roots, e.g. a
project-specific ``--assets-dir``, which are consulted after the bundled
location.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from site_generator.core.errors import ValidationError
from site_generator.core.scaffold_spec import normalize_relative_path


class AssetResolver(Protocol):
    """Callable mapping an asset identifier to a readable file, or None."""

    def __call__(self, asset_id: str) -> Path | None:
        ...


def get_bundled_assets_dir() -> Path:
    """Return the directory holding the assets shipped with the package."""
    import site_generator

    return Path(site_generator.__file__).resolve().parent / "templates" / "assets"


class PackageAssetResolver:
    """Resolve identifiers against the bundled assets, then extra roots.

    Args:
        extra_dirs: Additional directories searched in order after the
            bundled assets directory. Missing directories are ignored.
    """

    def __init__(self, extra_dirs: Iterable[Path] = ()) -> None:
        self.extra_dirs = [Path(d) for d in extra_dirs]

    def search_dirs(self) -> list[Path]:
        """Return candidate asset roots that currently exist."""
        candidates = [get_bundled_assets_dir(), *self.extra_dirs]
        return [candidate for candidate in candidates if candidate.is_dir()]

    def __call__(self, asset_id: str) -> Path | None:
        try:
            relative = normalize_relative_path(asset_id)
        except ValidationError:
            return None

        for source_dir in self.search_dirs():
            candidate = source_dir / relative
            if candidate.is_file():
                return candidate
        return None


def list_bundled_assets() -> list[str]:
    """Return every bundled asset identifier, sorted."""
    root = get_bundled_assets_dir()
    if not root.is_dir():
        return []
    return sorted(
        p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()
    )
