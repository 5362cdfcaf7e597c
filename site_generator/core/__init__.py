"""Scaffold materialization core.

Public API:
    ScaffoldSpec, TemplatedFile: declarative scaffold description
    materialize: realize a spec under a target root
    Report: per-path outcome of a materialization pass
"""

from site_generator.core.errors import (
    AssetNotFoundError,
    InvalidTargetError,
    SiteGeneratorError,
    ValidationError,
)
from site_generator.core.report import EntryKind, EntryStatus, Report, ReportEntry
from site_generator.core.scaffold_spec import ScaffoldSpec, TemplatedFile
from site_generator.core.materializer import materialize

__all__ = [
    "AssetNotFoundError",
    "EntryKind",
    "EntryStatus",
    "InvalidTargetError",
    "Report",
    "ReportEntry",
    "ScaffoldSpec",
    "SiteGeneratorError",
    "TemplatedFile",
    "ValidationError",
    "materialize",
]
