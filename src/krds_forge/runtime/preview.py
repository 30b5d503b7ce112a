"""
Live component preview.

Renders a standalone HTML document showing one component under a theme
and viewport width, with the token stylesheet and the component CSS
inlined. The page is built from the ``preview.html`` Jinja2 template.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from krds_forge.core.token_names import DEFAULT_NAMESPACE, Theme
from krds_forge.themes.css_generator import emit_stylesheet
from krds_forge.themes.resolver import coerce_theme

if TYPE_CHECKING:
    from krds_forge.components.library import ComponentLibrary

logger = logging.getLogger(__name__)

# Template directory
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


class Viewport(str, Enum):
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


VIEWPORT_WIDTHS = {
    Viewport.MOBILE: "360px",
    Viewport.TABLET: "768px",
    Viewport.DESKTOP: "1200px",
}


def create_jinja_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


# Module-level singleton
_env: Environment | None = None


def get_jinja_env() -> Environment:
    """Get the shared Jinja2 environment (lazy singleton)."""
    global _env
    if _env is None:
        _env = create_jinja_env()
    return _env


def render_preview(
    component_id: str,
    theme: Theme | str = Theme.LIGHT,
    viewport: Viewport | str = Viewport.DESKTOP,
    variant: str | None = None,
    library: ComponentLibrary | None = None,
    tokens: Mapping[str, str] | None = None,
    namespace: str = DEFAULT_NAMESPACE,
) -> str:
    """
    Render a preview page for one component.

    Args:
        component_id: Catalog id of the component
        theme: ``light`` or ``dark``; sets ``data-theme`` on the page
        viewport: ``mobile`` (360px), ``tablet`` (768px) or ``desktop`` (1200px)
        variant: Optional variant identifier
        library: Component library; defaults to the bundled catalog
        tokens: Token catalog; defaults to the bundled catalog
        namespace: Namespace expected on token names

    Returns:
        Complete HTML document

    Raises:
        UnknownComponentError: If the component is not in the library
        InvalidThemeError: If the theme is not light or dark
        ValueError: If the viewport is unknown
    """
    theme = coerce_theme(theme)
    viewport = Viewport(viewport)

    if library is None:
        from krds_forge.components.library import get_default_library

        library = get_default_library()
    if tokens is None:
        from krds_forge.core.catalog import default_token_catalog

        tokens = default_token_catalog()

    template = library.fetch_template(component_id, variant)
    logger.debug("Rendering preview for %s (%s, %s)", component_id, theme.value, viewport.value)

    # Generated CSS and markup are trusted output of this package
    return get_jinja_env().get_template("preview.html").render(
        component_id=component_id,
        theme=theme.value,
        viewport=viewport.value,
        width=VIEWPORT_WIDTHS[viewport],
        variant=variant,
        token_css=Markup(emit_stylesheet(tokens, theme, include_utilities=True, namespace=namespace)),
        component_css=Markup(template.css),
        component_html=Markup(template.html),
    )
