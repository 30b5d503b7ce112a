"""Tests for the token and component catalogs."""

import pytest

from krds_forge.core.catalog import ComponentCatalog, TokenCatalog
from krds_forge.core.errors import UnknownComponentError
from krds_forge.core.token_names import TokenCategory
from krds_forge.data import TOKEN_GROUPS


class TestTokenCatalog:
    def test_read_only(self, sample_tokens) -> None:
        catalog = TokenCatalog(sample_tokens)
        sample_tokens["krds-spacing-8"] = "32px"
        assert "krds-spacing-8" not in catalog
        with pytest.raises(TypeError):
            catalog._tokens["krds-spacing-8"] = "32px"

    def test_preserves_insertion_order(self, sample_tokens) -> None:
        assert list(TokenCatalog(sample_tokens)) == list(sample_tokens)

    def test_get_token(self, sample_tokens) -> None:
        catalog = TokenCatalog({**sample_tokens, "krds-gradient-primary": "red"})
        assert catalog.get_token("krds-spacing-4") == "16px"
        assert catalog.get_token("krds-spacing-99") is None
        # Unparsed category is treated as not found
        assert catalog.get_token("krds-gradient-primary") is None

    def test_by_category(self, sample_tokens) -> None:
        catalog = TokenCatalog(sample_tokens)
        assert catalog.by_category("spacing") == {"krds-spacing-4": "16px"}
        assert len(catalog.by_category(TokenCategory.COLOR)) == 4
        assert catalog.by_category("gradient") == {}

    def test_categories(self, sample_tokens) -> None:
        assert TokenCatalog(sample_tokens).categories() == ["color", "spacing", "typography"]

    def test_bundled_catalog(self, token_catalog) -> None:
        assert len(token_catalog) == sum(len(group) for group in TOKEN_GROUPS.values())
        assert token_catalog.categories() == list(TOKEN_GROUPS)
        assert token_catalog["krds-spacing-4"] == "16px"


class TestComponentCatalog:
    def test_from_mapping(self) -> None:
        catalog = ComponentCatalog.from_mapping(
            {"chip": {"className": "krds-chip", "category": "content", "variants": ["chip_small.html"]}}
        )
        descriptor = catalog["chip"]
        assert descriptor.id == "chip"
        assert descriptor.variants == ["chip_small.html"]

    def test_require(self, component_catalog) -> None:
        assert component_catalog.require("button").class_name == "krds-btn"
        with pytest.raises(UnknownComponentError):
            component_catalog.require("spaceship")

    def test_has(self, component_catalog) -> None:
        assert component_catalog.has("modal")
        assert not component_catalog.has("spaceship")

    def test_by_category(self, component_catalog) -> None:
        assert [d.id for d in component_catalog.by_category("action")] == ["button", "link"]
