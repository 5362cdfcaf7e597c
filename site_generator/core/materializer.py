"""Realize a ``ScaffoldSpec`` on the local filesystem.

The pass is create-if-absent throughout: anything that already exists under
the target root is reported as skipped and never rewritten.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from site_generator.core.errors import AssetNotFoundError, InvalidTargetError
from site_generator.core.report import EntryKind, EntryStatus, Report
from site_generator.core.scaffold_spec import ScaffoldSpec
from site_generator.helpers.assets import AssetResolver, PackageAssetResolver
from site_generator.helpers.helpers_logging import (
    print_error,
    print_skipped,
    print_success,
)


def materialize(
    spec: ScaffoldSpec,
    target_root: Path,
    resolver: AssetResolver | None = None,
) -> Report:
    """Create every missing directory and file declared by *spec*.

    Args:
        spec: Scaffold description.
        target_root: Directory the scaffold's relative paths are rooted at.
            Created recursively when absent.
        resolver: Asset lookup; defaults to the bundled package assets.

    Returns:
        Report listing each path as created or skipped.

    Raises:
        InvalidTargetError: If *target_root* or a declared directory exists
            as a non-directory, or lies under a regular file.
        AssetNotFoundError: If an asset identifier cannot be resolved. The
            remaining asset copies are abandoned, but directories and text
            files are still written before the error is raised.
    """
    if resolver is None:
        resolver = PackageAssetResolver()

    root = Path(target_root)
    if _exists(root) and not root.is_dir():
        raise InvalidTargetError(root)
    _make_dir(root, exist_ok=True)

    report = Report()

    _create_directories(spec, root, report)
    _copy_assets(spec, root, resolver, report)

    for rel_path, payload in spec.static_files.items():
        _write_if_absent(root, rel_path, payload, EntryKind.STATIC, report)

    for rel_path, document in spec.templated_files.items():
        dest = root / rel_path
        if _exists(dest):
            _skip(rel_path, EntryKind.TEMPLATED, report)
            continue
        dest.write_text(document.render(), encoding="utf-8")
        report.record(rel_path, EntryKind.TEMPLATED, EntryStatus.CREATED)
        print_success(f"Created document: {rel_path} ({document.title})")

    if report.asset_failures:
        raise AssetNotFoundError(report.asset_failures[0], report=report)

    return report


def _create_directories(spec: ScaffoldSpec, root: Path, report: Report) -> None:
    for rel_path in spec.directories:
        dir_path = root / rel_path
        if dir_path.is_dir():
            _skip(rel_path, EntryKind.DIRECTORY, report)
            continue
        if _exists(dir_path):
            raise InvalidTargetError(dir_path)
        _make_dir(dir_path)
        report.record(rel_path, EntryKind.DIRECTORY, EntryStatus.CREATED)
        print_success(f"Created directory: {rel_path}/")


def _copy_assets(
    spec: ScaffoldSpec,
    root: Path,
    resolver: AssetResolver,
    report: Report,
) -> None:
    for rel_path, asset_id in spec.asset_copies.items():
        dest = root / rel_path
        if _exists(dest):
            _skip(rel_path, EntryKind.ASSET, report)
            continue

        source = resolver(asset_id)
        if source is None:
            report.asset_failures.append(asset_id)
            print_error(f"Bundled asset not found: {asset_id}")
            return

        shutil.copy2(source, dest)
        report.record(rel_path, EntryKind.ASSET, EntryStatus.CREATED)
        print_success(f"Copied asset: {rel_path}")


def _write_if_absent(
    root: Path,
    rel_path: str,
    content: str,
    kind: EntryKind,
    report: Report,
) -> None:
    file_path = root / rel_path
    if _exists(file_path):
        _skip(rel_path, kind, report)
        return
    file_path.write_text(content, encoding="utf-8")
    report.record(rel_path, kind, EntryStatus.CREATED)
    print_success(f"Created file: {rel_path}")


def _exists(path: Path) -> bool:
    """True for anything at *path*, including a dangling symlink."""
    return path.is_symlink() or path.exists()


def _make_dir(path: Path, exist_ok: bool = False) -> None:
    try:
        path.mkdir(parents=True, exist_ok=exist_ok)
    except (FileExistsError, NotADirectoryError) as exc:
        # An ancestor (or the path itself) is a regular file
        raise InvalidTargetError(path) from exc


def _skip(rel_path: str, kind: EntryKind, report: Report) -> None:
    report.record(rel_path, kind, EntryStatus.SKIPPED_EXISTS)
    print_skipped(f"Skipped (exists): {rel_path}")
