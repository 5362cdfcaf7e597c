"""Site type registry: selector validation and per-type scaffold layouts."""

from __future__ import annotations

from collections.abc import Callable

from site_generator.core.errors import ValidationError
from site_generator.core.scaffold_spec import ScaffoldSpec, TemplatedFile
from site_generator.helpers.site_config import SiteOptions

from .documents import get_documents
from .templates import (
    BRAND_FONT_FILE,
    get_gitignore_template,
    get_quarto_yml_template,
    get_r_script_template,
    get_styles_css_template,
)
from .types import AssetMap, DirectoryList, StaticFileMap

R_SCRIPT_FILES = ("file1.R", "file2.R")


def get_cfa_directories(extended: bool = False) -> DirectoryList:
    """Return directories for a Code for America research site."""
    directories = ["R", "_site", "img"]
    if extended:
        directories.append("fonts")
    return directories


def get_cfa_assets(extended: bool = False) -> AssetMap:
    """Return destination path -> bundled asset identifier."""
    assets = {
        "img/favicon.png": "img/favicon.png",
        "img/code_for_america_black.jpg": "logos/code_for_america_black.jpg",
    }
    if extended:
        assets[f"fonts/{BRAND_FONT_FILE}"] = f"fonts/{BRAND_FONT_FILE}"
    return assets


def build_cfa_spec(options: SiteOptions) -> ScaffoldSpec:
    """Build the scaffold for a Code for America research project site."""
    documents = get_documents(extended=options.extended)

    static_files: StaticFileMap = {
        "styles.css": get_styles_css_template(extended=options.extended),
        ".gitignore": get_gitignore_template(),
        "_quarto.yml": get_quarto_yml_template(
            documents,
            site_title=options.title,
            github_url=options.github_url,
        ),
    }
    for script in R_SCRIPT_FILES:
        static_files[f"R/{script}"] = get_r_script_template()

    return ScaffoldSpec(
        directories=tuple(get_cfa_directories(extended=options.extended)),
        static_files=static_files,
        templated_files={
            doc.filename: TemplatedFile(doc.title, doc.body) for doc in documents
        },
        asset_copies=get_cfa_assets(extended=options.extended),
    )


SITE_TYPES: dict[str, Callable[[SiteOptions], ScaffoldSpec]] = {
    "cfa": build_cfa_spec,
}

SITE_TYPE_DESCRIPTIONS: dict[str, str] = {
    "cfa": "Code for America research project site (Quarto website)",
}

SUPPORTED_SITE_TYPES: tuple[str, ...] = tuple(SITE_TYPES)


def validate_site_type(site_type: object) -> str:
    """Check a site type selector and return it.

    Raises:
        ValidationError: If the selector is not a single supported string.
    """
    if isinstance(site_type, (list, tuple)):
        raise ValidationError("'site_type' must be a single string.")
    if not isinstance(site_type, str):
        raise ValidationError("'site_type' must be a string.")
    if site_type not in SITE_TYPES:
        supported = ", ".join(SUPPORTED_SITE_TYPES)
        raise ValidationError(
            f"Site type '{site_type}' is not supported. Supported types: {supported}"
        )
    return site_type


def build_site_spec(site_type: str, options: SiteOptions | None = None) -> ScaffoldSpec:
    """Return the ``ScaffoldSpec`` for a validated site type."""
    builder = SITE_TYPES[validate_site_type(site_type)]
    return builder(options or SiteOptions())
