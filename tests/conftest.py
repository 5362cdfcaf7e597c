"""Shared fixtures for the site generator test suite.

Provides an empty target directory, a fake asset store with a matching
resolver, and a small hand-built ``ScaffoldSpec`` that exercises every
kind of entry without depending on the bundled site catalog.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from site_generator.core.scaffold_spec import ScaffoldSpec, TemplatedFile
from site_generator.helpers.assets import PackageAssetResolver

FAVICON_BYTES = b"\x89PNG\r\n\x1a\nfake-favicon"
LOGO_BYTES = b"\xff\xd8\xff\xe0fake-logo"


@pytest.fixture()
def target_root(tmp_path: Path) -> Path:
    """Path to a not-yet-created site directory."""
    return tmp_path / "proj"


@pytest.fixture()
def asset_store(tmp_path: Path) -> Path:
    """Directory holding fake assets under their identifiers."""
    store = tmp_path / "assets"
    (store / "img").mkdir(parents=True)
    (store / "logos").mkdir(parents=True)
    (store / "img" / "favicon.png").write_bytes(FAVICON_BYTES)
    (store / "logos" / "brand.jpg").write_bytes(LOGO_BYTES)
    return store


@pytest.fixture()
def store_resolver(asset_store: Path) -> Callable[[str], Path | None]:
    """Resolver that only looks in ``asset_store`` (ignores bundled assets)."""

    def _resolve(asset_id: str) -> Path | None:
        candidate = asset_store / asset_id
        return candidate if candidate.is_file() else None

    return _resolve


@pytest.fixture()
def bundled_resolver() -> PackageAssetResolver:
    """Resolver backed by the assets shipped in the package."""
    return PackageAssetResolver()


@pytest.fixture()
def small_spec() -> ScaffoldSpec:
    """A spec with one of each entry kind."""
    return ScaffoldSpec(
        directories=("R", "img", "_site"),
        static_files={
            "styles.css": "body { margin: 0; }\n",
            "R/file1.R": "# starter\n",
        },
        templated_files={
            "index.qmd": TemplatedFile("Project Overview", ("## Introduction",)),
        },
        asset_copies={
            "img/favicon.png": "img/favicon.png",
            "img/brand.jpg": "logos/brand.jpg",
        },
    )


@pytest.fixture()
def always_yes() -> Callable[[str], bool]:
    """Confirmation callback that accepts without prompting."""
    return lambda _prompt: True
