"""
Error types for KRDS artifact generation.
"""

from dataclasses import dataclass
from typing import Optional


class KrdsError(Exception):
    """Base exception for all krds-forge errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context and (location := self.context.format()):
            return f"{location}: {self.message}"
        return self.message


class UnknownComponentError(KrdsError):
    """
    Raised when a component id has no descriptor in the catalog.

    Fatal to the individual call; callers either check
    ``ComponentCatalog.has()`` first or catch this.
    """

    pass


class UnparsedTokenError(KrdsError):
    """
    Raised when a token name does not match the namespace/category grammar.

    Only the strict parser raises this. Emitters and converters treat an
    unparsed name as filtered out.
    """

    pass


class SynthesisError(KrdsError):
    """
    Raised when a category template builder fails.

    Always recovered at the cache/library boundary by substituting the
    minimal fallback template.
    """

    pass


class InvalidThemeError(KrdsError, ValueError):
    """Raised when a theme other than ``light`` or ``dark`` is requested."""

    pass


class ManifestError(KrdsError):
    """
    Raised when krds.toml cannot be loaded.

    Examples:
    - Malformed TOML
    - Unknown default theme or export format
    - A section that is not a table
    """

    pass


@dataclass
class ErrorContext:
    """
    What the failing call was operating on.

    Attributes:
        component_id: Component id being synthesized
        variant: Variant identifier of the call
        token: Token name being parsed
    """

    component_id: str | None = None
    variant: str | None = None
    token: str | None = None

    def format(self) -> str:
        """
        Format context as a short prefix.

        Returns:
            String like: "component 'button' (variant 'button_size.html')"
        """
        parts: list[str] = []
        if self.component_id:
            parts.append(f"component '{self.component_id}'")
        if self.variant:
            parts.append(f"(variant '{self.variant}')")
        if self.token:
            parts.append(f"token '{self.token}'")
        return " ".join(parts)


def make_unknown_component_error(component_id: str) -> UnknownComponentError:
    """Helper to create an UnknownComponentError for an id."""
    return UnknownComponentError(
        "Unknown component",
        ErrorContext(component_id=component_id),
    )
