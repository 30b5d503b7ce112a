"""Static KRDS catalogs (design tokens and component descriptors)."""

from .components import COMPONENT_MAPPING
from .design_tokens import CATALOG_META, NAMESPACE, TOKEN_GROUPS, all_tokens

__all__ = [
    "COMPONENT_MAPPING",
    "CATALOG_META",
    "NAMESPACE",
    "TOKEN_GROUPS",
    "all_tokens",
]
