"""Tests for the template cache and component library."""

from __future__ import annotations

import threading

import pytest

from krds_forge.components.cache import TemplateCache
from krds_forge.components.library import ComponentLibrary, get_default_library
from krds_forge.components.variants import VariantResolver
from krds_forge.core.catalog import ComponentCatalog
from krds_forge.core.errors import UnknownComponentError


class TestTemplateCache:
    """Tests for TemplateCache."""

    def test_repeat_calls_return_same_object(self, template_cache) -> None:
        first = template_cache.get("button")
        second = template_cache.get("button")
        assert first is second

    def test_default_variant_key(self, template_cache) -> None:
        """No variant keys on the descriptor's default file."""
        template_cache.get("button")
        assert ("button", "button.html") in template_cache

    def test_variants_cached_separately(self, template_cache) -> None:
        plain = template_cache.get("button")
        small = template_cache.get("button", "button_size_small.html")
        assert plain is not small
        assert small is template_cache.get("button", "button_size_small.html")
        assert len(template_cache) == 2

    def test_unknown_component(self, template_cache) -> None:
        with pytest.raises(UnknownComponentError) as exc_info:
            template_cache.get("spaceship")
        assert "spaceship" in str(exc_info.value)

    def test_clear(self, template_cache) -> None:
        first = template_cache.get("alert")
        template_cache.clear()
        assert len(template_cache) == 0
        assert template_cache.get("alert") is not first

    def test_failures_fall_back_and_are_not_cached(self, component_catalog) -> None:
        class ExplodingResolver(VariantResolver):
            def extract_type(self, variant=None) -> str:
                raise RuntimeError("boom")

        cache = TemplateCache(component_catalog, ExplodingResolver())
        template = cache.get("alert")
        assert "Default feedback component" in template.html
        assert len(cache) == 0

    def test_concurrent_access_yields_one_object(self, template_cache) -> None:
        results = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(template_cache.get("modal", "modal_large.html"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(result is results[0] for result in results)
        assert len(template_cache) == 1


class TestComponentLibrary:
    """Tests for ComponentLibrary."""

    def test_default_catalog(self) -> None:
        library = ComponentLibrary()
        assert library.has_component("button")
        assert len(library.all_components()) == len(library.catalog)

    def test_get_component(self, library) -> None:
        descriptor = library.get_component("text-input")
        assert descriptor is not None
        assert descriptor.structure == "fieldset"
        assert library.get_component("spaceship") is None

    def test_components_by_category(self, library) -> None:
        ids = [d.id for d in library.components_by_category("feedback")]
        assert ids == ["alert", "toast", "loading"]

    def test_categories(self, library) -> None:
        assert library.categories() == [
            "action",
            "input",
            "navigation",
            "feedback",
            "layout",
            "content",
        ]

    def test_fetch_template_uses_cache(self, library) -> None:
        assert library.fetch_template("card") is library.fetch_template("card")

    def test_default_library_is_shared(self) -> None:
        assert get_default_library() is get_default_library()
        assert get_default_library().fetch_template("card") is get_default_library().fetch_template("card")

    def test_custom_catalog(self) -> None:
        catalog = ComponentCatalog.from_mapping(
            {"chip": {"className": "krds-chip", "category": "content"}}
        )
        library = ComponentLibrary(catalog)
        assert library.fetch_template("chip").html.startswith('<div class="krds-chip">')
        with pytest.raises(UnknownComponentError):
            library.fetch_template("button")
