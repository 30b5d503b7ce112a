"""
Component specification types.

Defines component descriptors (catalog input), variant facets and the
generated HTML+CSS template pair.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Categories
# =============================================================================


class ComponentCategory(str, Enum):
    """Component categories the synthesizer dispatches on."""

    ACTION = "action"
    INPUT = "input"
    NAVIGATION = "navigation"
    FEEDBACK = "feedback"
    LAYOUT = "layout"
    CONTENT = "content"


# =============================================================================
# Descriptor
# =============================================================================


class ComponentDescriptor(BaseModel):
    """
    Catalog entry for one component.

    Accepts the wire keys (``className``, ``htmlFile``) as well as the
    Python field names. ``category`` is a free string so that descriptors
    with categories outside :class:`ComponentCategory` still load and fall
    through to the generic template.

    Example:
        ComponentDescriptor(id="button", className="krds-btn", category="action")
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(description="Component id")
    class_name: str = Field(alias="className", description="CSS class root, e.g. krds-btn")
    category: str = Field(description="Component category")
    html_file: str | None = Field(
        default=None, alias="htmlFile", description="Reference HTML file name"
    )
    variants: list[str] = Field(default_factory=list, description="Variant identifiers")
    structure: str | None = Field(default=None, description="Markup structure, e.g. fieldset")

    @property
    def default_variant(self) -> str:
        """Variant key used when the caller asks for no variant."""
        return self.html_file or f"{self.id}.html"

    def to_wire(self) -> dict[str, object]:
        """Dump using the camelCase wire keys."""
        return self.model_dump(by_alias=True, exclude_none=True)


# =============================================================================
# Variant facets
# =============================================================================


class VariantFacets(BaseModel):
    """
    Facets extracted from one variant identifier.

    Each facet is the empty string when the identifier does not mention it.
    """

    model_config = ConfigDict(frozen=True)

    size: str = ""
    state: str = ""
    type: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.size or self.state or self.type)


# =============================================================================
# Generated template
# =============================================================================


class GeneratedTemplate(BaseModel):
    """
    HTML+CSS pair produced for a component.

    ``variants`` advertises the facet values the category understands, not
    the facets of the call that produced the template.
    """

    model_config = ConfigDict(frozen=True)

    html: str = Field(description="HTML markup")
    css: str = Field(description="CSS rules referencing design-token custom properties")
    variants: list[str] = Field(default_factory=list, description="Supported variant values")
