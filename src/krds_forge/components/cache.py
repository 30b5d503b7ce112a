"""
Template cache.

Memoizes synthesized templates per ``(component_id, variant key)`` for the
lifetime of the cache object. There is no eviction: the key space is the
catalog's component ids times their variants.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from krds_forge.components.specs import GeneratedTemplate
from krds_forge.components.synthesizer import fallback_template, synthesize
from krds_forge.components.variants import VariantResolver, default_resolver
from krds_forge.core.errors import SynthesisError

if TYPE_CHECKING:
    from krds_forge.core.catalog import ComponentCatalog

logger = logging.getLogger(__name__)

CacheKey = tuple[str, str]


class TemplateCache:
    """
    Per-process cache of generated templates.

    Repeat calls with the same key return the identical
    :class:`GeneratedTemplate` object. Thread-safe: the check and the
    insert happen under one lock, so concurrent callers for a key never
    observe two different objects.

    Failures are not cached. When synthesis fails the descriptor-derived
    stub is returned and the next call retries.
    """

    def __init__(
        self,
        catalog: ComponentCatalog,
        resolver: VariantResolver = default_resolver,
    ) -> None:
        self._catalog = catalog
        self._resolver = resolver
        self._templates: dict[CacheKey, GeneratedTemplate] = {}
        self._lock = threading.Lock()

    def get(self, component_id: str, variant: str | None = None) -> GeneratedTemplate:
        """
        Return the template for a component, synthesizing it on first access.

        Args:
            component_id: Catalog id, e.g. ``"button"``
            variant: Variant identifier; ``None`` uses the component's
                default file as the key

        Raises:
            UnknownComponentError: If the id is not in the catalog
        """
        descriptor = self._catalog.require(component_id)
        key = (component_id, variant or descriptor.default_variant)

        with self._lock:
            cached = self._templates.get(key)
            if cached is not None:
                logger.debug("Template cache hit: %s", key)
                return cached

            logger.debug("Template cache miss: %s", key)
            try:
                template = synthesize(descriptor, variant, self._resolver)
            except SynthesisError as exc:
                logger.warning("Using fallback template for %s: %s", component_id, exc, exc_info=True)
                return fallback_template(descriptor)

            self._templates[key] = template
            return template

    def clear(self) -> None:
        with self._lock:
            self._templates.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._templates

    def __len__(self) -> int:
        with self._lock:
            return len(self._templates)
