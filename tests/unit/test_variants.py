"""Tests for variant identifier parsing."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from krds_forge.components.variants import SIZES, STATES, TYPES, VariantResolver


@pytest.fixture
def resolver() -> VariantResolver:
    return VariantResolver()


class TestExtractSize:
    def test_size_in_identifier(self, resolver) -> None:
        assert resolver.extract_size("button_size_small.html") == "small"

    def test_no_size(self, resolver) -> None:
        assert resolver.extract_size("button_state_disabled.html") == ""

    def test_none_and_empty(self, resolver) -> None:
        assert resolver.extract_size(None) == ""
        assert resolver.extract_size("") == ""

    def test_first_alternative_wins(self, resolver) -> None:
        """xsmall contains small; the leftmost match is reported whole."""
        assert resolver.extract_size("modal_xsmall.html") == "xsmall"


class TestExtractState:
    @pytest.mark.parametrize("state", STATES)
    def test_each_state(self, resolver, state: str) -> None:
        assert resolver.extract_state(f"input_state_{state}.html") == state

    def test_no_state(self, resolver) -> None:
        assert resolver.extract_state("button_size_small.html") == ""


class TestExtractType:
    @pytest.mark.parametrize(
        ("variant", "expected"),
        [
            ("alert_type_success.html", "success"),
            ("alert_error.html", "error"),
            ("badge_warning.html", "warning"),
            ("info_component.html", "info"),
            ("plain.html", ""),
            ("alert_type_success.htm", ""),
        ],
    )
    def test_patterns(self, resolver, variant: str, expected: str) -> None:
        assert resolver.extract_type(variant) == expected

    def test_none(self, resolver) -> None:
        assert resolver.extract_type(None) == ""


class TestStateAttributes:
    def test_disabled(self, resolver) -> None:
        assert resolver.state_attributes("text_input_disabled.html") == " disabled"

    def test_checked(self, resolver) -> None:
        assert resolver.state_attributes("checkbox_checked.html") == " checked"

    def test_first_attribute_wins(self, resolver) -> None:
        assert resolver.state_attributes("readonly_disabled.html") == " disabled"

    def test_no_attribute(self, resolver) -> None:
        assert resolver.state_attributes("button_hover.html") == ""
        assert resolver.state_attributes(None) == ""


class TestFacets:
    def test_all_facets(self, resolver) -> None:
        facets = resolver.facets("alert_large_disabled_error.html")
        assert facets.size == "large"
        assert facets.state == "disabled"
        assert not facets.is_empty

    def test_empty_facets(self, resolver) -> None:
        assert resolver.facets(None).is_empty


class TestExtractorProperties:
    """Extractors are total over arbitrary strings."""

    @given(st.one_of(st.none(), st.text(max_size=60)))
    @settings(max_examples=200)
    def test_never_raise_and_stay_in_vocabulary(self, variant: str | None) -> None:
        resolver = VariantResolver()
        assert resolver.extract_size(variant) in ("", *SIZES)
        assert resolver.extract_state(variant) in ("", *STATES)
        assert resolver.extract_type(variant) in ("", *TYPES)
        assert resolver.state_attributes(variant) in ("", " disabled", " readonly", " checked")
