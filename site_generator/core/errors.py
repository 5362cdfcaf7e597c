"""Exception types raised by the site generator."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from site_generator.core.report import Report


class SiteGeneratorError(Exception):
    """Base class for all site generator failures."""


class ValidationError(SiteGeneratorError, ValueError):
    """Raised for a bad site type, scaffold path or config value."""


class InvalidTargetError(SiteGeneratorError):
    """Raised when a target path exists but is not a directory."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"Target exists and is not a directory: {path}")


class AssetNotFoundError(SiteGeneratorError):
    """Raised when a bundled asset identifier cannot be resolved.

    The partial ``Report`` of the pass that failed is attached so callers
    can show what was already written.
    """

    def __init__(self, asset_id: str, report: Report | None = None) -> None:
        self.asset_id = asset_id
        self.report = report
        super().__init__(f"Bundled asset not found: {asset_id}")
