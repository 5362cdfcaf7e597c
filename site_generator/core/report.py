"""Outcome of a scaffold materialization pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EntryKind(str, Enum):
    """What a report entry was materialized from."""

    DIRECTORY = "directory"
    ASSET = "asset"
    STATIC = "static"
    TEMPLATED = "templated"


class EntryStatus(str, Enum):
    """Per-path outcome."""

    CREATED = "created"
    SKIPPED_EXISTS = "skipped-exists"


@dataclass(frozen=True)
class ReportEntry:
    """A single path touched (or left alone) by a pass."""

    path: str
    kind: EntryKind
    status: EntryStatus


@dataclass
class Report:
    """Ordered record of every path a materialization pass visited.

    ``asset_failures`` holds asset identifiers that could not be resolved;
    an asset failure stops the remaining asset copies but the rest of the
    pass still runs.
    """

    entries: list[ReportEntry] = field(default_factory=list)
    asset_failures: list[str] = field(default_factory=list)

    def record(self, path: str, kind: EntryKind, status: EntryStatus) -> None:
        """Append an entry for *path*."""
        self.entries.append(ReportEntry(path, kind, status))

    @property
    def created(self) -> list[str]:
        """Paths written or created during the pass."""
        return [e.path for e in self.entries if e.status is EntryStatus.CREATED]

    @property
    def skipped(self) -> list[str]:
        """Paths that already existed and were left untouched."""
        return [
            e.path for e in self.entries
            if e.status is EntryStatus.SKIPPED_EXISTS
        ]

    @property
    def has_failures(self) -> bool:
        return bool(self.asset_failures)

    def status_of(self, path: str) -> EntryStatus | None:
        """Return the recorded status for *path*, or None if not visited."""
        for entry in self.entries:
            if entry.path == path:
                return entry.status
        return None
