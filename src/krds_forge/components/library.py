"""
Component library facade.

Bundles a component catalog with its template cache so callers can list
components and fetch their templates through one object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from krds_forge.components.cache import TemplateCache
from krds_forge.components.specs import ComponentDescriptor, GeneratedTemplate

if TYPE_CHECKING:
    from krds_forge.core.catalog import ComponentCatalog


class ComponentLibrary:
    """
    Catalog lookups plus cached template synthesis.

    Example:
        library = ComponentLibrary()
        template = library.fetch_template("button", "button_size_small.html")
    """

    def __init__(
        self,
        catalog: ComponentCatalog | None = None,
        cache: TemplateCache | None = None,
    ) -> None:
        if catalog is None:
            from krds_forge.core.catalog import default_component_catalog

            catalog = default_component_catalog()
        self.catalog = catalog
        self.cache = cache if cache is not None else TemplateCache(catalog)

    def get_component(self, component_id: str) -> ComponentDescriptor | None:
        return self.catalog.get(component_id)

    def has_component(self, component_id: str) -> bool:
        return self.catalog.has(component_id)

    def all_components(self) -> list[ComponentDescriptor]:
        return list(self.catalog.values())

    def components_by_category(self, category: str) -> list[ComponentDescriptor]:
        return self.catalog.by_category(category)

    def categories(self) -> list[str]:
        """Categories in first-seen catalog order."""
        seen: dict[str, None] = {}
        for descriptor in self.catalog.values():
            seen.setdefault(descriptor.category)
        return list(seen)

    def fetch_template(self, component_id: str, variant: str | None = None) -> GeneratedTemplate:
        """
        Cached template for a component.

        Raises:
            UnknownComponentError: If the id is not in the catalog
        """
        return self.cache.get(component_id, variant)


_default_library: ComponentLibrary | None = None


def get_default_library() -> ComponentLibrary:
    """Get the shared library over the bundled catalog (lazy singleton)."""
    global _default_library
    if _default_library is None:
        _default_library = ComponentLibrary()
    return _default_library
