"""
Token name grammar.

KRDS token names are lowercase, ``-`` delimited compounds::

    krds[-<theme>]-<category>-<subcategory>-<property>-<modifier>-<state>

e.g. ``krds-light-color-primary-background-default`` or ``krds-spacing-4``.
The namespace segment comes first, the theme segment is optional, and the
category must belong to a fixed enumeration. Everything after the category
is free-form and consumed positionally.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from krds_forge.core.errors import ErrorContext, UnparsedTokenError

DEFAULT_NAMESPACE = "krds"


class Theme(str, Enum):
    """Themes a token name may be scoped to."""

    LIGHT = "light"
    DARK = "dark"
    HIGH_CONTRAST = "high-contrast"


class TokenCategory(str, Enum):
    """Token categories recognised after the namespace/theme segments."""

    COLOR = "color"
    TYPOGRAPHY = "typography"
    SPACING = "spacing"
    SIZING = "sizing"
    BORDER = "border"
    SHADOW = "shadow"
    MOTION = "motion"
    LAYOUT = "layout"
    COMPONENT = "component"


_CATEGORY_VALUES = frozenset(c.value for c in TokenCategory)

_HEX_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")
_RGB_PATTERN = re.compile(r"^rgb\(\d+,\s*\d+,\s*\d+\)$")
_RGBA_PATTERN = re.compile(r"^rgba\(\d+,\s*\d+,\s*\d+,\s*[\d.]+\)$")
_COLOR_KEYWORDS = frozenset({"transparent", "currentcolor"})


class TokenFacets(BaseModel):
    """
    Facets of a parsed token name.

    Example:
        parse_token_name("krds-light-color-primary-background-default")
        -> TokenFacets(
               namespace="krds",
               theme=Theme.LIGHT,
               category=TokenCategory.COLOR,
               segments=("primary", "background", "default"),
           )
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Full compound token name")
    namespace: str = Field(description="Leading namespace segment")
    theme: Theme | None = Field(default=None, description="Theme scope, None if theme-neutral")
    category: TokenCategory = Field(description="Token category")
    segments: tuple[str, ...] = Field(
        default=(), description="Free-form segments after the category"
    )

    def _segment(self, index: int) -> str | None:
        return self.segments[index] if index < len(self.segments) else None

    @property
    def subcategory(self) -> str | None:
        return self._segment(0)

    @property
    def property_name(self) -> str | None:
        return self._segment(1)

    @property
    def modifier(self) -> str | None:
        return self._segment(2)

    @property
    def state(self) -> str | None:
        return self._segment(3)

    @property
    def is_theme_neutral(self) -> bool:
        return self.theme is None


def _split_theme(parts: list[str]) -> tuple[Theme | None, list[str]]:
    """Peel an optional theme off the segments following the namespace."""
    if not parts:
        return None, parts
    if parts[0] in (Theme.LIGHT.value, Theme.DARK.value):
        return Theme(parts[0]), parts[1:]
    # high-contrast spans two segments once split on "-"
    if parts[:2] == ["high", "contrast"]:
        return Theme.HIGH_CONTRAST, parts[2:]
    return None, parts


def parse_token_name(name: str, namespace: str = DEFAULT_NAMESPACE) -> TokenFacets | None:
    """
    Parse a compound token name into its facets.

    Args:
        name: Token name such as ``krds-spacing-4``
        namespace: Expected leading segment

    Returns:
        TokenFacets, or None when the namespace does not match or the
        category is not one of :class:`TokenCategory`.
    """
    parts = name.split("-")
    if len(parts) < 2 or parts[0] != namespace:
        return None

    theme, rest = _split_theme(parts[1:])
    if not rest or rest[0] not in _CATEGORY_VALUES:
        return None

    return TokenFacets(
        name=name,
        namespace=namespace,
        theme=theme,
        category=TokenCategory(rest[0]),
        segments=tuple(rest[1:]),
    )


def parse_token_name_strict(name: str, namespace: str = DEFAULT_NAMESPACE) -> TokenFacets:
    """Like :func:`parse_token_name` but raises UnparsedTokenError instead of returning None."""
    facets = parse_token_name(name, namespace)
    if facets is None:
        raise UnparsedTokenError(
            f"Token name does not match '{namespace}[-<theme>]-<category>-...'",
            ErrorContext(token=name),
        )
    return facets


def strip_namespace(name: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Drop the leading ``<namespace>-`` from a token name if present."""
    prefix = f"{namespace}-"
    return name[len(prefix) :] if name.startswith(prefix) else name


def describe_token(name: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    """
    Build a short human description of a token from its name segments.

    Tolerates any number of segments. Unparsed names are described from
    their raw segments.

    Example:
        describe_token("krds-light-color-primary-background-default")
        -> "color primary background (default)"
    """
    facets = parse_token_name(name, namespace)
    if facets is not None:
        head = facets.category.value
        rest = list(facets.segments)
    else:
        raw = strip_namespace(name, namespace).split("-")
        head, rest = raw[0], raw[1:]

    description = head
    if len(rest) > 0:
        description += f" {rest[0]}"
    if len(rest) > 1:
        description += f" {rest[1]}"
    if len(rest) > 2:
        description += f" ({rest[2]})"
    if len(rest) > 3:
        description += f" - {'-'.join(rest[3:])} state"
    return description


def validate_token_name(name: str, namespace: str = DEFAULT_NAMESPACE) -> bool:
    """
    Check that a name carries an explicit theme and a known category.

    Used for color tokens, which must always be theme-scoped.
    """
    facets = parse_token_name(name, namespace)
    return facets is not None and facets.theme is not None and bool(facets.segments)


def validate_color_value(value: str) -> bool:
    """Check a color value is hex (3 or 6 digits), ``rgb()``, ``rgba()`` or a color keyword."""
    if value.lower() in _COLOR_KEYWORDS:
        return True
    return bool(
        _HEX_PATTERN.match(value) or _RGB_PATTERN.match(value) or _RGBA_PATTERN.match(value)
    )


def validate_color_tokens(
    tokens: Mapping[str, str], namespace: str = DEFAULT_NAMESPACE
) -> list[str]:
    """
    Validate every color-category token in a catalog.

    Returns:
        One message per problem, empty when the colors are all valid
    """
    errors: list[str] = []
    for name, value in tokens.items():
        facets = parse_token_name(name, namespace)
        if facets is None or facets.category is not TokenCategory.COLOR:
            continue
        if not validate_token_name(name, namespace):
            errors.append(f"Invalid token name: {name}")
        if not validate_color_value(value):
            errors.append(f"Invalid color value for {name}: {value}")
    return errors
