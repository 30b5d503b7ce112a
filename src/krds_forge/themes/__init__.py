"""
KRDS theme and token artifact generation.

Usage:
    from krds_forge.themes import emit_stylesheet, to_tree

    css = emit_stylesheet(tokens, theme="dark")
    tree = to_tree(tokens)
"""

from .css_generator import DARK_SELECTOR, ROOT_SELECTOR, emit_stylesheet, emit_variables
from .resolver import coerce_theme, filter_tokens, is_visible
from .style_dictionary import (
    ExportFormat,
    export_tokens,
    style_dictionary_config,
    to_json_export,
    to_tree,
)
from .utility_classes import (
    color_role_rules,
    component_base_rules,
    generate_utility_css,
    spacing_rules,
)

__all__ = [
    # Resolution
    "is_visible",
    "filter_tokens",
    "coerce_theme",
    # CSS
    "emit_variables",
    "emit_stylesheet",
    "ROOT_SELECTOR",
    "DARK_SELECTOR",
    # Utilities
    "color_role_rules",
    "spacing_rules",
    "component_base_rules",
    "generate_utility_css",
    # Export
    "ExportFormat",
    "to_tree",
    "to_json_export",
    "style_dictionary_config",
    "export_tokens",
]
