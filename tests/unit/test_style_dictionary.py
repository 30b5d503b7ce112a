"""Tests for Style Dictionary conversion and token export."""

import copy

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from krds_forge.core.errors import InvalidThemeError
from krds_forge.themes.style_dictionary import (
    ExportFormat,
    export_tokens,
    style_dictionary_config,
    to_json_export,
    to_tree,
)

segment = st.text(alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz0123456789"), min_size=1, max_size=6)
catalogs = st.dictionaries(
    keys=st.lists(segment, min_size=0, max_size=3).map(
        lambda parts: "-".join(["krds", "spacing", *parts])
    ),
    values=st.text(min_size=0, max_size=10),
    max_size=10,
)


class TestToTree:
    """Tests for to_tree."""

    def test_single_token(self) -> None:
        assert to_tree({"krds-spacing-4": "16px"}) == {"spacing": {"4": {"value": "16px"}}}

    def test_themed_token_nests_under_theme(self) -> None:
        tree = to_tree({"krds-light-color-primary-background-default": "#004494"})
        assert tree == {
            "light": {"color": {"primary": {"background": {"default": {"value": "#004494"}}}}}
        }

    def test_siblings_share_branches(self) -> None:
        tree = to_tree({"krds-spacing-1": "4px", "krds-spacing-2": "8px"})
        assert tree == {"spacing": {"1": {"value": "4px"}, "2": {"value": "8px"}}}

    def test_branch_through_existing_leaf(self) -> None:
        """A longer name nests inside the node of a shorter one."""
        tree = to_tree({"krds-spacing-4": "16px", "krds-spacing-4-x": "1px"})
        assert tree == {"spacing": {"4": {"value": "16px", "x": {"value": "1px"}}}}

    def test_last_write_wins_on_collision(self) -> None:
        """A later leaf overwrites an earlier branch, following insertion order."""
        tree = to_tree({"krds-spacing-4-x": "1px", "krds-spacing-4": "16px"})
        assert tree == {"spacing": {"4": {"value": "16px"}}}

    def test_unparsed_tokens_skipped(self) -> None:
        assert to_tree({"krds-gradient-primary": "red"}) == {}

    @given(catalogs)
    @settings(max_examples=100)
    def test_pure(self, tokens: dict[str, str]) -> None:
        """Invariant: converting twice yields equal trees and leaves the input untouched."""
        before = copy.deepcopy(tokens)
        assert to_tree(tokens) == to_tree(tokens)
        assert tokens == before

    def test_bundled_catalog_is_reproducible(self, token_catalog) -> None:
        assert to_tree(token_catalog) == to_tree(token_catalog)


class TestJsonExport:
    def test_grouped_by_category(self, sample_tokens) -> None:
        export = to_json_export(sample_tokens, meta={"version": "1.0.0"})
        assert export["meta"] == {"namespace": "krds", "version": "1.0.0"}
        assert list(export["tokens"]) == ["color", "spacing", "typography"]
        assert export["tokens"]["spacing"] == {"krds-spacing-4": "16px"}


class TestStyleDictionaryConfig:
    def test_light_config(self) -> None:
        config = style_dictionary_config("light")
        assert config["source"] == ["tokens/light/**/*.json"]
        assert config["platforms"]["css"]["buildPath"] == "build/css/light/"
        assert config["platforms"]["js"]["files"][0]["format"] == "javascript/es6"

    def test_invalid_theme(self) -> None:
        with pytest.raises(InvalidThemeError):
            style_dictionary_config("sepia")


class TestExportTokens:
    def test_style_dictionary_format(self, sample_tokens) -> None:
        assert export_tokens(sample_tokens, "style-dictionary") == to_tree(sample_tokens)

    def test_json_format(self, sample_tokens) -> None:
        assert export_tokens(sample_tokens, ExportFormat.JSON)["tokens"]["spacing"]

    def test_css_format(self, sample_tokens) -> None:
        css = export_tokens(sample_tokens, "css", theme="dark", include_utilities=False)
        assert css.startswith(":root {")
        assert '[data-theme="dark"]' in css

    def test_unknown_format(self, sample_tokens) -> None:
        with pytest.raises(ValueError):
            export_tokens(sample_tokens, "yaml")
