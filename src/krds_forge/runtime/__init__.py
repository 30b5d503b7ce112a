"""Runtime rendering: live component previews."""

from .preview import VIEWPORT_WIDTHS, Viewport, render_preview

__all__ = ["Viewport", "VIEWPORT_WIDTHS", "render_preview"]
