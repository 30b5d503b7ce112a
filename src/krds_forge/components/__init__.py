"""
KRDS component template synthesis.

Usage:
    from krds_forge.components import ComponentLibrary

    library = ComponentLibrary()
    template = library.fetch_template("alert", "alert_type_success.html")
    print(template.html)
"""

from .cache import TemplateCache
from .library import ComponentLibrary, get_default_library
from .specs import ComponentCategory, ComponentDescriptor, GeneratedTemplate, VariantFacets
from .synthesizer import (
    CATEGORY_BUILDERS,
    fallback_template,
    generic_template,
    synthesize,
    synthesize_or_fallback,
)
from .variants import VariantResolver, default_resolver

__all__ = [
    # Types
    "ComponentCategory",
    "ComponentDescriptor",
    "GeneratedTemplate",
    "VariantFacets",
    # Variants
    "VariantResolver",
    "default_resolver",
    # Synthesis
    "CATEGORY_BUILDERS",
    "synthesize",
    "synthesize_or_fallback",
    "generic_template",
    "fallback_template",
    # Caching
    "TemplateCache",
    "ComponentLibrary",
    "get_default_library",
]
