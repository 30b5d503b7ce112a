"""
Core types for krds-forge: errors, the token name grammar and catalogs.
"""

from .catalog import (
    ComponentCatalog,
    TokenCatalog,
    default_component_catalog,
    default_token_catalog,
)
from .errors import (
    ErrorContext,
    InvalidThemeError,
    KrdsError,
    ManifestError,
    SynthesisError,
    UnknownComponentError,
    UnparsedTokenError,
)
from .token_names import (
    DEFAULT_NAMESPACE,
    Theme,
    TokenCategory,
    TokenFacets,
    describe_token,
    parse_token_name,
    parse_token_name_strict,
    validate_color_tokens,
    validate_color_value,
    validate_token_name,
)

__all__ = [
    # Errors
    "KrdsError",
    "ErrorContext",
    "UnknownComponentError",
    "UnparsedTokenError",
    "SynthesisError",
    "InvalidThemeError",
    "ManifestError",
    # Grammar
    "DEFAULT_NAMESPACE",
    "Theme",
    "TokenCategory",
    "TokenFacets",
    "parse_token_name",
    "parse_token_name_strict",
    "describe_token",
    "validate_token_name",
    "validate_color_value",
    "validate_color_tokens",
    # Catalogs
    "TokenCatalog",
    "ComponentCatalog",
    "default_token_catalog",
    "default_component_catalog",
]
