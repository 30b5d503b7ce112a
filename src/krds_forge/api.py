"""
Single entry point for artifact generation.

``generate`` takes a :class:`GenerateRequest` describing what to produce
and returns the artifact: CSS text, a token export dict, a component
template, or a preview page.

Example:
    from krds_forge.api import GenerateRequest, generate

    css = generate(GenerateRequest(kind="css", theme="dark"))
    template = generate(GenerateRequest(kind="component", component_id="button"))
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from krds_forge.components.library import ComponentLibrary, get_default_library
from krds_forge.components.specs import GeneratedTemplate
from krds_forge.core.catalog import default_token_catalog
from krds_forge.core.token_names import DEFAULT_NAMESPACE, Theme
from krds_forge.runtime.preview import Viewport, render_preview
from krds_forge.themes.css_generator import emit_stylesheet
from krds_forge.themes.resolver import coerce_theme
from krds_forge.themes.style_dictionary import (
    ExportFormat,
    export_tokens,
    style_dictionary_config,
)


class ArtifactKind(str, Enum):
    """Artifacts ``generate`` can produce."""

    CSS = "css"
    STYLE_DICTIONARY = "style-dictionary"
    JSON = "json"
    CONFIG = "config"
    COMPONENT = "component"
    PREVIEW = "preview"


_COMPONENT_KINDS = (ArtifactKind.COMPONENT, ArtifactKind.PREVIEW)


class GenerateRequest(BaseModel):
    """What to generate."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: ArtifactKind
    theme: Theme = Theme.LIGHT
    component_id: str | None = Field(default=None, alias="componentId")
    variant: str | None = None
    include_utilities: bool = Field(default=True, alias="includeUtilities")
    viewport: Viewport = Viewport.DESKTOP
    namespace: str = DEFAULT_NAMESPACE

    @model_validator(mode="after")
    def _check_component(self) -> GenerateRequest:
        if self.kind in _COMPONENT_KINDS and not self.component_id:
            raise ValueError(f"component_id is required for kind '{self.kind.value}'")
        # Only light and dark render
        coerce_theme(self.theme)
        return self


Artifact = str | dict[str, Any] | GeneratedTemplate


def generate(
    request: GenerateRequest | Mapping[str, Any],
    library: ComponentLibrary | None = None,
    tokens: Mapping[str, str] | None = None,
) -> Artifact:
    """
    Produce one artifact.

    Args:
        request: A GenerateRequest or its dict form
        library: Component library; defaults to the bundled catalog
        tokens: Token catalog; defaults to the bundled catalog

    Returns:
        ``css`` and ``preview`` give a string; ``style-dictionary``,
        ``json`` and ``config`` give a dict; ``component`` gives a
        GeneratedTemplate

    Raises:
        pydantic.ValidationError: If a dict request is invalid
        UnknownComponentError: If the component id is not in the library
    """
    if not isinstance(request, GenerateRequest):
        request = GenerateRequest.model_validate(request)

    if tokens is None:
        tokens = default_token_catalog()

    if request.kind is ArtifactKind.CSS:
        return emit_stylesheet(tokens, request.theme, request.include_utilities, request.namespace)
    if request.kind is ArtifactKind.STYLE_DICTIONARY:
        return export_tokens(tokens, ExportFormat.STYLE_DICTIONARY, namespace=request.namespace)
    if request.kind is ArtifactKind.JSON:
        return export_tokens(tokens, ExportFormat.JSON, namespace=request.namespace)
    if request.kind is ArtifactKind.CONFIG:
        return style_dictionary_config(request.theme)

    if library is None:
        library = get_default_library()
    assert request.component_id is not None

    if request.kind is ArtifactKind.COMPONENT:
        return library.fetch_template(request.component_id, request.variant)
    return render_preview(
        request.component_id,
        request.theme,
        request.viewport,
        variant=request.variant,
        library=library,
        tokens=tokens,
        namespace=request.namespace,
    )
