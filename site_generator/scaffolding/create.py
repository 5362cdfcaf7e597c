"""Create new Quarto site scaffolds."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from site_generator.core.materializer import materialize
from site_generator.core.report import Report
from site_generator.helpers.assets import AssetResolver, PackageAssetResolver
from site_generator.helpers.helpers_logging import print_header, print_info
from site_generator.helpers.prompts import CONFIRM_PROMPT, prompt_yes_no
from site_generator.helpers.site_config import SiteOptions

from .site_types import build_site_spec, validate_site_type


def create_site_structure(
    site_type: object,
    subfolder: str | Path | None = None,
    *,
    confirm: Callable[[str], bool] | None = None,
    options: SiteOptions | None = None,
    resolver: AssetResolver | None = None,
) -> Report | None:
    """Create the directory structure and starter files for a project site.

    Creates (for site type ``cfa``):
    - Directories R/, _site/, img/ (and fonts/ for the extended layout)
    - Favicon and logo copied into img/
    - styles.css, .gitignore and _quarto.yml
    - One Quarto document per site page (index.qmd, analysis.qmd, ...)
    - Starter R scripts under R/

    Existing files are never overwritten.

    Args:
        site_type: Site type selector; only 'cfa' is supported.
        subfolder: Directory to create the site in. Defaults to
            ``options.subfolder`` (the current directory).
        confirm: Called with a prompt before anything is written; returning
            False cancels. Defaults to an interactive yes/no prompt.
        options: Site title, GitHub link, layout variant.
        resolver: Bundled asset lookup override.

    Returns:
        The materialization report, or None if the user cancelled.

    Raises:
        ValidationError: If ``site_type`` is not supported. Nothing is
            written in that case.
        AssetNotFoundError: If a bundled asset is missing.
        InvalidTargetError: If the target path is an existing file.
    """
    validated_type = validate_site_type(site_type)
    options = options or SiteOptions()

    if confirm is None:
        confirm = prompt_yes_no
    if not confirm(CONFIRM_PROMPT):
        print("Operation cancelled by the user.")
        return None

    target_root = Path(subfolder) if subfolder is not None else options.subfolder
    if resolver is None:
        resolver = PackageAssetResolver(options.assets_dirs)

    spec = build_site_spec(validated_type, options)

    print_header(f"\n🚀 Creating '{validated_type}' site in {target_root}\n")
    report = materialize(spec, target_root, resolver=resolver)

    _print_next_steps(report, target_root)
    return report


def _print_next_steps(report: Report, target_root: Path) -> None:
    """Print a summary and next steps after scaffolding.

    Args:
        report: Result of the materialization pass
        target_root: Directory the site was created in
    """
    print(
        f"\n✅ Site scaffolding complete: {len(report.created)} created, "
        + f"{len(report.skipped)} skipped (already existed)"
    )
    print_info("\n📋 Next steps:")
    print_info(f"   1. cd {target_root}")
    print_info("   2. Edit _quarto.yml with your project name and links")
    print_info("   3. Fill in index.qmd and the other pages")
    print_info("   4. quarto preview")
