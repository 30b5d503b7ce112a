"""
krds-forge - KRDS design-token and component artifact generator.

Turns the Korean government design system (KRDS) token catalog into CSS
custom properties and Style Dictionary trees, and synthesizes HTML+CSS
templates for catalog components.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .core.errors import (
    InvalidThemeError,
    KrdsError,
    ManifestError,
    SynthesisError,
    UnknownComponentError,
    UnparsedTokenError,
)


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("krds-forge")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "KrdsError",
    "UnknownComponentError",
    "UnparsedTokenError",
    "SynthesisError",
    "InvalidThemeError",
    "ManifestError",
]
