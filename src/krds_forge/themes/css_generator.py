"""
CSS generator for KRDS design tokens.

Generates CSS custom properties from a token catalog. ``:root`` always
carries every theme-neutral token plus the light-scoped tokens; a dark
stylesheet adds a ``[data-theme="dark"]`` block after it holding only the
dark-scoped tokens. Utility-class families may follow.
"""

from __future__ import annotations

from collections.abc import Mapping

from krds_forge.core.token_names import DEFAULT_NAMESPACE, Theme
from krds_forge.themes.css_blocks import css_var_name, render_block
from krds_forge.themes.resolver import coerce_theme, filter_tokens, is_theme_scoped
from krds_forge.themes.utility_classes import generate_utility_css

ROOT_SELECTOR = ":root"
DARK_SELECTOR = '[data-theme="dark"]'


def emit_variables(
    tokens: Mapping[str, str],
    theme: Theme | str = Theme.LIGHT,
    namespace: str = DEFAULT_NAMESPACE,
) -> dict[str, str]:
    """
    Map every token visible under the theme to its custom-property name.

    Args:
        tokens: Token name -> value mapping
        theme: ``light`` or ``dark``
        namespace: Namespace expected on token names

    Returns:
        Dictionary of ``--token-name`` -> value, in token order
    """
    visible = filter_tokens(tokens, theme, namespace)
    return {css_var_name(name): value for name, value in visible.items()}


def emit_stylesheet(
    tokens: Mapping[str, str],
    theme: Theme | str = Theme.LIGHT,
    include_utilities: bool = True,
    namespace: str = DEFAULT_NAMESPACE,
) -> str:
    """
    Generate the full stylesheet for a theme.

    ``:root`` defaults to light: it holds theme-neutral and light-scoped
    variables under either theme. For ``dark`` a ``[data-theme="dark"]``
    block re-declares only the dark-scoped variables, and is omitted when
    the catalog has none.

    Args:
        tokens: Token name -> value mapping
        theme: ``light`` or ``dark``
        include_utilities: Append color-role, spacing and component classes
        namespace: Namespace expected on token names

    Returns:
        CSS text, blocks separated by a blank line
    """
    theme = coerce_theme(theme)
    blocks = [render_block(ROOT_SELECTOR, emit_variables(tokens, Theme.LIGHT, namespace))]

    if theme is Theme.DARK:
        dark_only = {
            css_var_name(name): value
            for name, value in filter_tokens(tokens, Theme.DARK, namespace).items()
            if is_theme_scoped(name)
        }
        if dark_only:
            blocks.append(render_block(DARK_SELECTOR, dark_only))

    if include_utilities:
        utilities = generate_utility_css(tokens, theme, namespace)
        if utilities:
            blocks.append(utilities)

    return "\n\n".join(blocks)
