"""Shared pytest fixtures for krds-forge tests."""

import pytest

from krds_forge.components.cache import TemplateCache
from krds_forge.components.library import ComponentLibrary
from krds_forge.core.catalog import (
    ComponentCatalog,
    TokenCatalog,
    default_component_catalog,
    default_token_catalog,
)


@pytest.fixture
def sample_tokens() -> dict[str, str]:
    """Small catalog covering neutral, light and dark tokens."""
    return {
        "krds-light-color-primary-background-default": "#004494",
        "krds-light-color-primary-text-default": "#FFFFFF",
        "krds-dark-color-primary-background-default": "#4A90E2",
        "krds-dark-color-primary-text-default": "#000000",
        "krds-spacing-4": "16px",
        "krds-typography-font-size-base": "16px",
    }


@pytest.fixture
def token_catalog() -> TokenCatalog:
    """The bundled KRDS token catalog."""
    return default_token_catalog()


@pytest.fixture
def component_catalog() -> ComponentCatalog:
    """The bundled KRDS component catalog."""
    return default_component_catalog()


@pytest.fixture
def template_cache(component_catalog: ComponentCatalog) -> TemplateCache:
    """A fresh cache per test."""
    return TemplateCache(component_catalog)


@pytest.fixture
def library(component_catalog: ComponentCatalog, template_cache: TemplateCache) -> ComponentLibrary:
    return ComponentLibrary(component_catalog, template_cache)
