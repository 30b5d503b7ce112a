"""
krds.toml project configuration.

Example krds.toml:

    [tokens]
    namespace = "krds"

    [output]
    theme = "dark"
    utilities = true
    format = "css"
    directory = "build"

    [logging]
    level = "INFO"
"""

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from krds_forge.core.errors import ManifestError
from krds_forge.core.token_names import DEFAULT_NAMESPACE, Theme

MANIFEST_FILENAME = "krds.toml"
MANIFEST_ENV_VAR = "KRDS_MANIFEST"

# Mirrors krds_forge.themes.style_dictionary.ExportFormat
EXPORT_FORMATS = ("css", "json", "style-dictionary")


@dataclass
class TokensConfig:
    """Token catalog configuration."""

    namespace: str = DEFAULT_NAMESPACE


@dataclass
class OutputConfig:
    """Artifact output configuration."""

    theme: str = Theme.LIGHT.value  # "light" | "dark"
    utilities: bool = True  # Append utility classes to stylesheets
    format: str = "css"  # "css" | "json" | "style-dictionary"
    directory: str = "build"


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class KrdsManifest:
    """Parsed krds.toml. Every section is optional."""

    tokens: TokensConfig = field(default_factory=TokensConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    path: Path | None = None


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ManifestError(f"[{name}] must be a table")
    return section


def default_manifest_path() -> Path:
    """``$KRDS_MANIFEST`` if set, else ./krds.toml."""
    env_path = os.environ.get(MANIFEST_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.cwd() / MANIFEST_FILENAME


def parse_manifest(data: dict[str, Any], path: Path | None = None) -> KrdsManifest:
    tokens_data = _section(data, "tokens")
    output_data = _section(data, "output")
    logging_data = _section(data, "logging")

    tokens_config = TokensConfig(
        namespace=str(tokens_data.get("namespace", DEFAULT_NAMESPACE)),
    )

    theme = output_data.get("theme", Theme.LIGHT.value)
    if theme not in (Theme.LIGHT.value, Theme.DARK.value):
        raise ManifestError(f"[output] theme must be 'light' or 'dark', got {theme!r}")

    fmt = output_data.get("format", "css")
    if fmt not in EXPORT_FORMATS:
        raise ManifestError(
            f"[output] format must be one of {', '.join(EXPORT_FORMATS)}, got {fmt!r}"
        )

    utilities = output_data.get("utilities", True)
    if not isinstance(utilities, bool):
        raise ManifestError("[output] utilities must be true or false")

    output_config = OutputConfig(
        theme=theme,
        utilities=utilities,
        format=fmt,
        directory=str(output_data.get("directory", "build")),
    )

    level = str(logging_data.get("level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ManifestError(f"[logging] unknown level {level!r}")

    return KrdsManifest(
        tokens=tokens_config,
        output=output_config,
        logging=LoggingConfig(level=level),
        path=path,
    )


def load_manifest(path: Path | None = None) -> KrdsManifest:
    """
    Load krds.toml.

    Args:
        path: Explicit manifest path. When omitted, ``$KRDS_MANIFEST`` or
            ./krds.toml is used, and a missing file yields the defaults.

    Raises:
        ManifestError: If the file is missing (explicit path only), is not
            valid TOML, or holds invalid values
    """
    explicit = path is not None
    path = path if path is not None else default_manifest_path()

    if not path.exists():
        if explicit:
            raise ManifestError(f"Manifest not found: {path}")
        return KrdsManifest()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ManifestError(f"{path}: {exc}") from exc

    return parse_manifest(data, path)
