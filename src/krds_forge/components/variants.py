"""
Variant identifier parsing.

Variant identifiers are free-form, filename-like strings such as
``button_size_small.html`` or ``alert_type_success.html``. Each facet
(size, state, type) is matched independently against a small fixed
vocabulary; an identifier that mentions none of them yields empty facets.
"""

from __future__ import annotations

import re

from krds_forge.components.specs import VariantFacets

SIZES = ("xsmall", "small", "medium", "large", "xlarge")
STATES = ("disabled", "hover", "focus", "active", "readonly", "error")
TYPES = ("success", "warning", "error", "info")

# Boolean HTML attributes, first match wins
STATE_ATTRIBUTES = ("disabled", "readonly", "checked")

_SIZE_PATTERN = re.compile(r"(xsmall|small|medium|large|xlarge)")
_STATE_PATTERN = re.compile(r"(disabled|hover|focus|active|readonly|error)")

_TYPE_ALTERNATION = "|".join(TYPES)
_COMPONENTS_WITH_TYPE = "alert|button|card|modal|table|list"

# Tried in order; the first captured group naming a type wins
_TYPE_PATTERNS = (
    # alert_type_success.html
    re.compile(rf"^({_COMPONENTS_WITH_TYPE})_type_({_TYPE_ALTERNATION})\.html$"),
    # anything_warning.html
    re.compile(rf"^[^_]+_({_TYPE_ALTERNATION})\.html$"),
    # alert_error.html
    re.compile(rf"^({_COMPONENTS_WITH_TYPE})_({_TYPE_ALTERNATION})\.html$"),
    # info_component.html
    re.compile(rf"^({_TYPE_ALTERNATION})_[^_]+\.html$"),
)


class VariantResolver:
    """
    Extracts size/state/type facets from variant identifiers.

    Stateless; the vocabulary lives in module-level patterns so it can be
    swapped without touching callers.
    """

    def extract_size(self, variant: str | None = None) -> str:
        """First size word in the identifier, or ``''``."""
        if not variant:
            return ""
        match = _SIZE_PATTERN.search(variant)
        return match.group(1) if match else ""

    def extract_state(self, variant: str | None = None) -> str:
        """First interaction-state word in the identifier, or ``''``."""
        if not variant:
            return ""
        match = _STATE_PATTERN.search(variant)
        return match.group(1) if match else ""

    def extract_type(self, variant: str | None = None) -> str:
        """
        Semantic type (success/warning/error/info), or ``''``.

        Recognises ``<component>_type_<type>.html``, ``<component>_<type>.html``
        and ``<type>_<component>.html``.
        """
        if not variant:
            return ""
        for pattern in _TYPE_PATTERNS:
            match = pattern.match(variant)
            if match is None:
                continue
            for group in match.groups():
                if group in TYPES:
                    return group
        return ""

    def state_attributes(self, variant: str | None = None) -> str:
        """HTML boolean attribute fragment such as ``' disabled'``, or ``''``."""
        if not variant:
            return ""
        for attribute in STATE_ATTRIBUTES:
            if attribute in variant:
                return f" {attribute}"
        return ""

    def facets(self, variant: str | None = None) -> VariantFacets:
        """All three facets at once."""
        return VariantFacets(
            size=self.extract_size(variant),
            state=self.extract_state(variant),
            type=self.extract_type(variant),
        )


default_resolver = VariantResolver()
