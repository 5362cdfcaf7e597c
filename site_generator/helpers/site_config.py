"""Site options and the optional YAML config file that seeds them.

Example ``site-config.yaml``::

    title: "Pretrial Outcomes Study"
    github_url: https://github.com/example/pretrial-site
    extended: true
    subfolder: site
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import cast

import yaml

from site_generator.core.errors import ValidationError

DEFAULT_TITLE = "Project Name"
DEFAULT_GITHUB_URL = "https://github.com/"

_CONFIG_KEYS = ("title", "github_url", "extended", "subfolder", "assets_dir")


@dataclass(frozen=True)
class SiteOptions:
    """User-tunable settings for a generated site."""

    title: str = DEFAULT_TITLE
    github_url: str = DEFAULT_GITHUB_URL
    extended: bool = False
    subfolder: Path = Path(".")
    assets_dirs: tuple[Path, ...] = field(default_factory=tuple)

    def with_overrides(self, **overrides: object) -> SiteOptions:
        """Return a copy with every non-None override applied."""
        known = {f.name for f in fields(self)}
        changes = {
            key: value for key, value in overrides.items()
            if value is not None and key in known
        }
        return replace(self, **changes)  # type: ignore[arg-type]


def load_site_config(config_path: Path) -> SiteOptions:
    """Load site options from a YAML mapping.

    Relative ``subfolder`` and ``assets_dir`` values are resolved against the
    config file's directory.

    Raises:
        ValidationError: If the file is missing, is not valid YAML, is not a
            mapping, or holds unknown keys or wrongly typed values.
    """
    if not config_path.is_file():
        raise ValidationError(f"Config file not found: {config_path}")

    try:
        raw_data: object = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValidationError(f"Invalid YAML in {config_path}: {exc}") from exc

    if raw_data is None:
        return SiteOptions()
    if not isinstance(raw_data, dict):
        raise ValidationError(f"Config file must contain a mapping: {config_path}")

    data = cast(dict[str, object], raw_data)
    unknown = sorted(str(key) for key in data if key not in _CONFIG_KEYS)
    if unknown:
        raise ValidationError(
            f"Unknown config keys in {config_path}: {', '.join(unknown)}"
        )

    base_dir = config_path.parent
    options = SiteOptions()

    for key in ("title", "github_url"):
        if key in data:
            value = data[key]
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"'{key}' must be a non-empty string.")
            options = replace(options, **{key: value})

    if "extended" in data:
        extended = data["extended"]
        if not isinstance(extended, bool):
            raise ValidationError("'extended' must be true or false.")
        options = replace(options, extended=extended)

    if "subfolder" in data:
        options = replace(options, subfolder=_config_path(base_dir, data, "subfolder"))

    if "assets_dir" in data:
        options = replace(
            options, assets_dirs=(_config_path(base_dir, data, "assets_dir"),),
        )

    return options


def _config_path(base_dir: Path, data: dict[str, object], key: str) -> Path:
    value = data[key]
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"'{key}' must be a non-empty string.")
    path = Path(value).expanduser()
    return path if path.is_absolute() else base_dir / path
