"""
Theme resolver for KRDS tokens.

Decides which tokens are visible under a theme. The rule is a literal
substring test on the token name:

1. ``-dark-`` in the name: visible only under ``dark``
2. ``-light-`` in the name: visible only under ``light``
3. neither: theme-neutral, visible under every theme

Each branch checks its own theme's marker first, so a name carrying both
markers is visible under both themes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from krds_forge.core.errors import InvalidThemeError
from krds_forge.core.token_names import DEFAULT_NAMESPACE, Theme, parse_token_name

logger = logging.getLogger(__name__)

DARK_MARKER = "-dark-"
LIGHT_MARKER = "-light-"

RENDERABLE_THEMES = (Theme.LIGHT, Theme.DARK)


def coerce_theme(theme: Theme | str) -> Theme:
    """
    Validate a theme argument.

    Raises:
        InvalidThemeError: If the theme is not ``light`` or ``dark``
    """
    message = f"Unsupported theme {theme!r}; expected 'light' or 'dark'"
    try:
        value = Theme(theme)
    except ValueError as exc:
        raise InvalidThemeError(message) from exc
    if value not in RENDERABLE_THEMES:
        raise InvalidThemeError(message)
    return value


def is_visible(token_name: str, theme: Theme | str) -> bool:
    """
    Return True if the token is visible under the theme.

    Args:
        token_name: Compound token name
        theme: ``light`` or ``dark``
    """
    theme = coerce_theme(theme)

    if theme is Theme.DARK:
        if DARK_MARKER in token_name:
            return True
        return LIGHT_MARKER not in token_name

    if LIGHT_MARKER in token_name:
        return True
    return DARK_MARKER not in token_name


def is_theme_scoped(token_name: str) -> bool:
    """True if the name carries a ``-light-`` or ``-dark-`` marker."""
    return DARK_MARKER in token_name or LIGHT_MARKER in token_name


def filter_tokens(
    tokens: Mapping[str, str],
    theme: Theme | str,
    namespace: str = DEFAULT_NAMESPACE,
) -> dict[str, str]:
    """
    Keep the tokens visible under a theme, in input order.

    Names that do not parse under the namespace/category grammar are
    dropped rather than reported.
    """
    theme = coerce_theme(theme)
    visible: dict[str, str] = {}
    for name, value in tokens.items():
        if parse_token_name(name, namespace) is None:
            logger.debug("Filtered unparsed token %s", name)
            continue
        if is_visible(name, theme):
            visible[name] = value
    return visible

