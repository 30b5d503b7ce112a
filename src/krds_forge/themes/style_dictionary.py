"""
Style Dictionary export for KRDS tokens.

Converts the flat token catalog into the nested tree Style Dictionary
consumes, plus the JSON and build-config exports that sit next to it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from krds_forge.core.token_names import DEFAULT_NAMESPACE, Theme, parse_token_name, strip_namespace
from krds_forge.themes.resolver import coerce_theme

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    """Token export formats."""

    JSON = "json"
    CSS = "css"
    STYLE_DICTIONARY = "style-dictionary"


def to_tree(tokens: Mapping[str, str], namespace: str = DEFAULT_NAMESPACE) -> dict[str, Any]:
    """
    Nest tokens by name segment.

    The namespace segment is dropped and each remaining ``-`` segment
    becomes one level; the last segment holds ``{"value": <token value>}``.
    When two tokens resolve to the same leaf the later one in iteration
    order wins, so the result depends on catalog order.

    Example:
        to_tree({"krds-spacing-4": "16px"})
        -> {"spacing": {"4": {"value": "16px"}}}
    """
    tree: dict[str, Any] = {}
    for name, value in tokens.items():
        if parse_token_name(name, namespace) is None:
            logger.debug("Skipping unparsed token %s", name)
            continue

        path = strip_namespace(name, namespace).split("-")
        current = tree
        for part in path[:-1]:
            node = current.get(part)
            if not isinstance(node, dict):
                node = {}
                current[part] = node
            current = node
        current[path[-1]] = {"value": value}
    return tree


def to_json_export(
    tokens: Mapping[str, str],
    namespace: str = DEFAULT_NAMESPACE,
    meta: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """
    Plain JSON export: catalog metadata plus tokens grouped by category.

    Returns:
        ``{"meta": {...}, "tokens": {category: {name: value}}}``
    """
    grouped: dict[str, dict[str, str]] = {}
    for name, value in tokens.items():
        facets = parse_token_name(name, namespace)
        if facets is None:
            continue
        grouped.setdefault(facets.category.value, {})[name] = value

    return {
        "meta": {"namespace": namespace, **dict(meta or {})},
        "tokens": grouped,
    }


def style_dictionary_config(theme: Theme | str = Theme.LIGHT) -> dict[str, Any]:
    """Style Dictionary build configuration for one theme."""
    theme = coerce_theme(theme).value
    return {
        "source": [f"tokens/{theme}/**/*.json"],
        "platforms": {
            "css": {
                "transformGroup": "css",
                "buildPath": f"build/css/{theme}/",
                "files": [{"destination": "variables.css", "format": "css/variables"}],
            },
            "js": {
                "transformGroup": "js",
                "buildPath": f"build/js/{theme}/",
                "files": [{"destination": "tokens.js", "format": "javascript/es6"}],
            },
        },
    }


def export_tokens(
    tokens: Mapping[str, str],
    fmt: ExportFormat | str = ExportFormat.STYLE_DICTIONARY,
    theme: Theme | str = Theme.LIGHT,
    namespace: str = DEFAULT_NAMESPACE,
    include_utilities: bool = True,
    meta: Mapping[str, str] | None = None,
) -> dict[str, Any] | str:
    """
    Export tokens in the requested format.

    Args:
        tokens: Token name -> value mapping
        fmt: ``style-dictionary`` (nested tree), ``json`` (grouped dict) or
            ``css`` (stylesheet text)
        theme: Theme for the CSS export
        namespace: Namespace expected on token names
        include_utilities: Append utility classes to the CSS export
        meta: Extra metadata for the JSON export

    Returns:
        A dict for the JSON formats, a string for CSS
    """
    fmt = ExportFormat(fmt)
    if fmt is ExportFormat.STYLE_DICTIONARY:
        return to_tree(tokens, namespace)
    if fmt is ExportFormat.CSS:
        from krds_forge.themes.css_generator import emit_stylesheet

        return emit_stylesheet(tokens, theme, include_utilities, namespace)
    return to_json_export(tokens, namespace, meta)
