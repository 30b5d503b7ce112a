"""Tests for the generate() entry point."""

import pytest
from pydantic import ValidationError

from krds_forge.api import ArtifactKind, GenerateRequest, generate
from krds_forge.components.specs import GeneratedTemplate
from krds_forge.core.errors import UnknownComponentError


class TestGenerateRequest:
    def test_component_kinds_need_an_id(self) -> None:
        with pytest.raises(ValidationError):
            GenerateRequest(kind="component")

    def test_high_contrast_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GenerateRequest(kind="css", theme="high-contrast")

    def test_camel_case_aliases(self) -> None:
        request = GenerateRequest.model_validate({"kind": "component", "componentId": "button"})
        assert request.component_id == "button"


class TestGenerate:
    def test_css(self, sample_tokens) -> None:
        css = generate({"kind": "css", "theme": "dark", "include_utilities": False}, tokens=sample_tokens)
        assert css.startswith(":root {")
        assert '[data-theme="dark"]' in css

    def test_style_dictionary(self) -> None:
        tree = generate(GenerateRequest(kind=ArtifactKind.STYLE_DICTIONARY), tokens={"krds-spacing-4": "16px"})
        assert tree == {"spacing": {"4": {"value": "16px"}}}

    def test_json(self, sample_tokens) -> None:
        export = generate({"kind": "json"}, tokens=sample_tokens)
        assert export["tokens"]["spacing"] == {"krds-spacing-4": "16px"}

    def test_config(self) -> None:
        config = generate({"kind": "config", "theme": "dark"})
        assert config["source"] == ["tokens/dark/**/*.json"]

    def test_component(self, library) -> None:
        template = generate(
            {"kind": "component", "component_id": "button", "variant": "button_size_small.html"},
            library=library,
        )
        assert isinstance(template, GeneratedTemplate)
        assert 'class="krds-btn small"' in template.html

    def test_component_is_cached(self, library) -> None:
        request = GenerateRequest(kind="component", component_id="modal")
        assert generate(request, library=library) is generate(request, library=library)

    def test_preview(self, library, sample_tokens) -> None:
        page = generate(
            {"kind": "preview", "component_id": "card", "viewport": "mobile"},
            library=library,
            tokens=sample_tokens,
        )
        assert "width: 360px;" in page

    def test_unknown_component(self, library) -> None:
        with pytest.raises(UnknownComponentError):
            generate({"kind": "component", "component_id": "spaceship"}, library=library)

    def test_component_is_cached_without_library(self) -> None:
        request = GenerateRequest(kind="component", component_id="button")
        assert generate(request) is generate(request)
