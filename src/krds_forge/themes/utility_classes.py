"""
Utility-class generation for KRDS stylesheets.

Three families, all referencing token custom properties by name:

- color roles: ``.krds-<theme>-<text|background|border>-<role>-<variant>``
  derived from theme-scoped color tokens
- spacing: eight directional margin/padding classes per spacing token
  (``.krds-mt-4`` ... ``.krds-pl-4``)
- component bases: fixed ``.krds-btn``, ``.krds-input`` and ``.krds-card``
  rules

Selector names are a compatibility contract with consuming stylesheets.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from krds_forge.core.token_names import DEFAULT_NAMESPACE, Theme, TokenCategory, parse_token_name
from krds_forge.themes.css_blocks import render_rules, var_ref
from krds_forge.themes.resolver import coerce_theme, filter_tokens

Rules = dict[str, dict[str, str]]

# Role property -> CSS property it drives
_ROLE_PROPERTIES = {
    "text": "color",
    "background": "background-color",
    "border": "border-color",
}

# Class infix -> CSS property
_SPACING_DIRECTIONS = {
    "mt": "margin-top",
    "mr": "margin-right",
    "mb": "margin-bottom",
    "ml": "margin-left",
    "pt": "padding-top",
    "pr": "padding-right",
    "pb": "padding-bottom",
    "pl": "padding-left",
}


def _color_role_pattern(namespace: str) -> re.Pattern[str]:
    return re.compile(
        rf"^{re.escape(namespace)}-(?P<theme>light|dark)-color-(?P<role>[a-z0-9]+)"
        r"-(?P<kind>text|background|border)(?P<variant>(?:-[a-z0-9]+)*)$"
    )


def color_role_rules(
    tokens: Mapping[str, str],
    theme: Theme | str,
    namespace: str = DEFAULT_NAMESPACE,
) -> Rules:
    """
    Build color-role classes from the theme's scoped color tokens.

    ``krds-light-color-primary-background-default`` becomes
    ``.krds-light-background-primary-default { background-color: var(...) }``.
    """
    pattern = _color_role_pattern(namespace)
    rules: Rules = {}
    for name in filter_tokens(tokens, theme, namespace):
        match = pattern.match(name)
        if match is None:
            continue
        selector = (
            f".{namespace}-{match['theme']}-{match['kind']}-{match['role']}{match['variant']}"
        )
        rules[selector] = {_ROLE_PROPERTIES[match["kind"]]: var_ref(name)}
    return rules


def spacing_rules(tokens: Mapping[str, str], namespace: str = DEFAULT_NAMESPACE) -> Rules:
    """Build the eight margin/padding classes for every spacing token."""
    rules: Rules = {}
    for name in tokens:
        facets = parse_token_name(name, namespace)
        if facets is None or facets.category is not TokenCategory.SPACING:
            continue
        if facets.theme is not None or not facets.segments:
            continue
        step = "-".join(facets.segments)
        for infix, prop in _SPACING_DIRECTIONS.items():
            rules[f".{namespace}-{infix}-{step}"] = {prop: var_ref(name)}
    return rules


def component_base_rules(theme: Theme | str, namespace: str = DEFAULT_NAMESPACE) -> Rules:
    """Fixed base classes for button, input and card."""
    theme = coerce_theme(theme).value
    ns = namespace

    return {
        f".{ns}-btn": {
            "display": "inline-flex",
            "align-items": "center",
            "justify-content": "center",
            "height": var_ref(f"{ns}-component-button-height-md"),
            "padding": f"0 {var_ref(f'{ns}-component-button-padding-x-md')}",
            "border": (
                f"{var_ref(f'{ns}-component-button-border-width')} solid "
                f"{var_ref(f'{ns}-{theme}-color-primary-border-default')}"
            ),
            "border-radius": var_ref(f"{ns}-component-button-border-radius"),
            "background-color": var_ref(f"{ns}-{theme}-color-primary-background-default"),
            "color": var_ref(f"{ns}-{theme}-color-primary-text-default"),
            "transition": var_ref(f"{ns}-motion-transition-colors"),
        },
        f".{ns}-input": {
            "width": "100%",
            "height": var_ref(f"{ns}-component-input-height-md"),
            "padding": f"0 {var_ref(f'{ns}-component-input-padding-x')}",
            "border": (
                f"{var_ref(f'{ns}-component-input-border-width')} solid "
                f"{var_ref(f'{ns}-{theme}-color-neutral-border-default')}"
            ),
            "border-radius": var_ref(f"{ns}-component-input-border-radius"),
            "background-color": var_ref(f"{ns}-{theme}-color-neutral-background-default"),
            "color": var_ref(f"{ns}-{theme}-color-neutral-text-primary"),
        },
        f".{ns}-card": {
            "padding": var_ref(f"{ns}-component-card-padding"),
            "border": (
                f"{var_ref(f'{ns}-component-card-border-width')} solid "
                f"{var_ref(f'{ns}-{theme}-color-neutral-border-default')}"
            ),
            "border-radius": var_ref(f"{ns}-component-card-border-radius"),
            "background-color": var_ref(f"{ns}-{theme}-color-neutral-background-default"),
            "box-shadow": var_ref(f"{ns}-shadow-sm"),
        },
    }


def generate_utility_css(
    tokens: Mapping[str, str],
    theme: Theme | str = Theme.LIGHT,
    namespace: str = DEFAULT_NAMESPACE,
) -> str:
    """
    Render all three utility families for a theme.

    Returns:
        CSS rule blocks separated by blank lines
    """
    rules: Rules = {}
    rules.update(color_role_rules(tokens, theme, namespace))
    rules.update(spacing_rules(tokens, namespace))
    rules.update(component_base_rules(theme, namespace))
    return render_rules(rules)
