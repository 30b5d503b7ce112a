"""
Read-only catalogs of design tokens and component descriptors.

Both catalogs are loaded once and never mutated. Iteration follows catalog
insertion order, which keeps Style Dictionary leaf collisions reproducible.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from krds_forge.components.specs import ComponentDescriptor
from krds_forge.core.errors import make_unknown_component_error
from krds_forge.core.token_names import DEFAULT_NAMESPACE, TokenCategory, parse_token_name

logger = logging.getLogger(__name__)


class TokenCatalog(Mapping[str, str]):
    """Immutable mapping of compound token name -> value."""

    def __init__(self, tokens: Mapping[str, str], namespace: str = DEFAULT_NAMESPACE) -> None:
        self._tokens: Mapping[str, str] = MappingProxyType(dict(tokens))
        self.namespace = namespace

    def __getitem__(self, name: str) -> str:
        return self._tokens[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenCatalog({len(self)} tokens, namespace={self.namespace!r})"

    def get_token(self, name: str) -> str | None:
        """
        Look up a token through its category.

        Names whose category does not parse are treated as not found.
        """
        facets = parse_token_name(name, self.namespace)
        if facets is None:
            logger.debug("Token %s has no recognised category", name)
            return None
        return self._tokens.get(name)

    def by_category(self, category: TokenCategory | str) -> dict[str, str]:
        """Return the tokens of one category in catalog order."""
        try:
            wanted = TokenCategory(category)
        except ValueError:
            return {}

        result: dict[str, str] = {}
        for name, value in self._tokens.items():
            facets = parse_token_name(name, self.namespace)
            if facets is not None and facets.category is wanted:
                result[name] = value
        return result

    def grouped(self) -> dict[str, dict[str, str]]:
        """Group tokens by category; unparsed names are left out."""
        groups: dict[str, dict[str, str]] = {}
        for name, value in self._tokens.items():
            facets = parse_token_name(name, self.namespace)
            if facets is None:
                continue
            groups.setdefault(facets.category.value, {})[name] = value
        return groups

    def categories(self) -> list[str]:
        """Categories present in the catalog, in first-seen order."""
        return list(self.grouped())


class ComponentCatalog(Mapping[str, ComponentDescriptor]):
    """Immutable mapping of component id -> descriptor."""

    def __init__(self, descriptors: Mapping[str, ComponentDescriptor]) -> None:
        self._descriptors: Mapping[str, ComponentDescriptor] = MappingProxyType(
            dict(descriptors)
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Mapping[str, Any]]) -> ComponentCatalog:
        """Build a catalog from ``{id: {className, category, ...}}`` wire data."""
        return cls(
            {
                component_id: ComponentDescriptor.model_validate({"id": component_id, **raw})
                for component_id, raw in mapping.items()
            }
        )

    def __getitem__(self, component_id: str) -> ComponentDescriptor:
        return self._descriptors[component_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"ComponentCatalog({len(self)} components)"

    def has(self, component_id: str) -> bool:
        return component_id in self._descriptors

    def require(self, component_id: str) -> ComponentDescriptor:
        """Return the descriptor or raise UnknownComponentError."""
        descriptor = self._descriptors.get(component_id)
        if descriptor is None:
            raise make_unknown_component_error(component_id)
        return descriptor

    def by_category(self, category: str) -> list[ComponentDescriptor]:
        return [d for d in self._descriptors.values() if d.category == category]


def default_token_catalog() -> TokenCatalog:
    """Token catalog built from the bundled KRDS data."""
    from krds_forge.data import NAMESPACE, all_tokens

    return TokenCatalog(all_tokens(), namespace=NAMESPACE)


def default_component_catalog() -> ComponentCatalog:
    """Component catalog built from the bundled KRDS data."""
    from krds_forge.data import COMPONENT_MAPPING

    return ComponentCatalog.from_mapping(COMPONENT_MAPPING)
