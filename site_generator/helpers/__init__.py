"""Helper utilities shared by the scaffolding core and the CLI."""
