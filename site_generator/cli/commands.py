#!/usr/bin/env python3
"""Quarto Site Generator CLI - Main Entry Point.

Usage:
    qsite <command> [options]

Commands:
    scaffold     Scaffold a new Quarto project site (e.g. 'qsite scaffold cfa')
    list-types   List supported site types and bundled assets
    help         Show this help message
"""

from __future__ import annotations

import contextlib
import os
import sys

import click

from site_generator import __version__

# Minimum number of CLI args (program name + command)
_MIN_ARGS = 2

COMMANDS: dict[str, dict[str, str]] = {
    "scaffold": {
        "description": "Scaffold a new Quarto project site",
        "usage": "qsite scaffold <site_type> [--subfolder DIR] [--[no-]extended] [--yes]",
    },
    "list-types": {
        "description": "List supported site types and bundled assets",
        "usage": "qsite list-types",
    },
}


def print_help() -> None:
    """Print help message with all available commands."""
    print(__doc__)
    print(f"📦 Version: {__version__}")

    print("\n🧱 Commands:")
    for cmd, info in COMMANDS.items():
        desc = info["description"]
        usage = info.get("usage")
        if usage is not None:
            desc += f"\n  {' ' * 12}   Usage: {usage}"
        print(f"  {cmd:12} - {desc}")

    print("\n💡 Tip: Run 'qsite scaffold --help' for all scaffold options")


def list_types() -> int:
    """Print the supported site types and the assets shipped with the package."""
    from site_generator.helpers.assets import list_bundled_assets
    from site_generator.scaffolding import SITE_TYPE_DESCRIPTIONS

    print("\n🗂️  Site types:")
    for site_type, description in SITE_TYPE_DESCRIPTIONS.items():
        print(f"  {site_type:12} - {description}")

    print("\n🖼️  Bundled assets:")
    for asset_id in list_bundled_assets():
        print(f"  {asset_id}")
    return 0


def execute_command(command: str, extra_args: list[str]) -> int:
    """Execute a qsite command."""
    if command == "scaffold":
        from site_generator.cli.scaffold_command import main as scaffold_main

        return scaffold_main(extra_args)

    if command == "list-types":
        return list_types()

    print(f"❌ Unknown command: {command}")
    print("\nRun 'qsite help' to see available commands.")
    return 1


@click.group(invoke_without_command=True)
@click.pass_context
def _click_cli(ctx: click.Context) -> int:
    """Top-level qsite command group with passthrough command registration."""
    if ctx.invoked_subcommand is not None:
        return 0

    print_help()
    return 0


def _register_passthrough_command(
    command_name: str,
    description: str,
) -> None:
    """Register a click command that hands its raw args to the handler."""

    @click.command(
        name=command_name,
        help=description,
        context_settings={
            "allow_extra_args": True,
            "ignore_unknown_options": True,
        },
        add_help_option=False,
    )
    @click.pass_context
    def _cmd(ctx: click.Context) -> int:
        extra_args: list[str] = list(ctx.args)
        return execute_command(command_name, extra_args)

    _click_cli.add_command(_cmd)


def _register_commands() -> None:
    """Register all top-level commands in the click app."""
    for cmd, info in COMMANDS.items():
        _register_passthrough_command(cmd, info["description"])

    @click.command(name="help", help="Show help message")
    def _help_cmd() -> int:
        print_help()
        return 0

    _click_cli.add_command(_help_cmd)


_register_commands()


def main() -> int:
    """Main CLI entry point."""
    # Let Click handle shell completion protocol before anything else.
    if os.environ.get("_QSITE_COMPLETE"):
        with contextlib.suppress(SystemExit):
            _click_cli.main(
                args=sys.argv[1:],
                prog_name="qsite",
                standalone_mode=True,
            )
        return 0

    if len(sys.argv) < _MIN_ARGS or sys.argv[1] in ["help", "--help", "-h"]:
        print_help()
        return 0

    try:
        result = _click_cli.main(
            args=sys.argv[1:],
            prog_name="qsite",
            standalone_mode=False,
        )
    except click.Abort:
        print("\n⚠️  Cancelled by user")
        return 130
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    return 0 if result is None else int(result)


if __name__ == "__main__":
    sys.exit(main())
