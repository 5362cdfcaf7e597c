#!/usr/bin/env python3
"""
Scaffold a new Quarto project site.

Creates the directory layout, copies the bundled favicon and logo, and writes
styles.css, .gitignore, _quarto.yml, starter R scripts and one Quarto
document per site page. Files that already exist are left untouched, so the
command is safe to re-run.

Usage:
    # Create a Code for America research site in the current directory
    qsite scaffold cfa

    # Create it in a subfolder, with the extended page set and brand font
    qsite scaffold cfa --subfolder site --extended --yes

    # Seed options from a YAML file (CLI flags win)
    qsite scaffold cfa --config site-config.yaml
"""

import argparse
import sys
from pathlib import Path

# When executed directly, ensure the project root is on sys.path
if __package__ in (None, ""):
    project_root = Path(__file__).resolve().parents[2]
    sys.path.insert(0, str(project_root))

from site_generator.core.errors import AssetNotFoundError, SiteGeneratorError
from site_generator.helpers.helpers_logging import (
    print_error,
    print_info,
    print_warning,
)
from site_generator.helpers.prompts import prompt_yes_no
from site_generator.helpers.site_config import SiteOptions, load_site_config
from site_generator.scaffolding import (
    SUPPORTED_SITE_TYPES,
    create_site_structure,
    validate_site_type,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``qsite scaffold``."""
    parser = argparse.ArgumentParser(
        prog="qsite scaffold",
        description="Scaffold a new Quarto project site",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Supported site types: {', '.join(SUPPORTED_SITE_TYPES)}

Examples:
  qsite scaffold cfa
  qsite scaffold cfa --subfolder site --extended --yes
  qsite scaffold cfa --title "Pretrial Outcomes" --github-url https://github.com/org/repo

Config file keys (YAML): title, github_url, extended, subfolder, assets_dir
        """,
    )

    parser.add_argument(
        "site_type",
        nargs="?",
        help="Type of site to create (e.g., 'cfa')",
    )
    parser.add_argument(
        "--subfolder",
        help="Directory to create the site in (default: current directory)",
    )
    parser.add_argument(
        "--extended",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add decision-making and data-diagram pages plus the bundled brand font "
        + "(--no-extended overrides 'extended: true' in a config file)",
    )
    parser.add_argument("--title", help="Website title shown in the navbar")
    parser.add_argument("--github-url", help="Link target for the navbar 'Github' entry")
    parser.add_argument("--config", help="YAML file with default options")
    parser.add_argument(
        "--assets-dir",
        help="Extra directory searched for assets after the bundled ones",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt",
    )
    return parser


def _resolve_options(args: argparse.Namespace) -> SiteOptions:
    """Merge config file values with CLI flags (flags take precedence)."""
    options = load_site_config(Path(args.config)) if args.config else SiteOptions()
    return options.with_overrides(
        title=args.title,
        github_url=args.github_url,
        extended=args.extended,
        subfolder=Path(args.subfolder) if args.subfolder else None,
        assets_dirs=(Path(args.assets_dir),) if args.assets_dir else None,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for scaffold command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.site_type is None:
        print_error("Missing required site type.")
        print_info(f"  Supported types: {', '.join(SUPPORTED_SITE_TYPES)}")
        print_info("  Example: qsite scaffold cfa")
        return 1

    try:
        site_type = validate_site_type(args.site_type)
        options = _resolve_options(args)
        create_site_structure(
            site_type,
            confirm=(lambda _prompt: True) if args.yes else prompt_yes_no,
            options=options,
        )
    except AssetNotFoundError as exc:
        print_error(str(exc))
        if exc.report is not None and exc.report.created:
            print_warning(
                f"{len(exc.report.created)} path(s) were created before the failure "
                + "and were kept; re-run after fixing the asset to finish."
            )
        return 1
    except SiteGeneratorError as exc:
        print_error(str(exc))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
