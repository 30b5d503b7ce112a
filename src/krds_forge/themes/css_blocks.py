"""Small helpers shared by the CSS emitters."""

from __future__ import annotations

from collections.abc import Mapping


def css_var_name(token_name: str) -> str:
    """Custom-property name for a token (``krds-spacing-4`` -> ``--krds-spacing-4``)."""
    return f"--{token_name}"


def var_ref(token_name: str) -> str:
    """``var()`` reference to a token's custom property."""
    return f"var({css_var_name(token_name)})"


def render_block(selector: str, declarations: Mapping[str, str], indent: int = 2) -> str:
    """
    Render one rule block.

    Args:
        selector: CSS selector
        declarations: Property -> value, emitted in order
        indent: Number of spaces before each declaration

    Returns:
        CSS string like ``:root {\\n  --x: 1;\\n}``
    """
    prefix = " " * indent
    lines = [f"{selector} {{"]
    for prop, value in declarations.items():
        lines.append(f"{prefix}{prop}: {value};")
    lines.append("}")
    return "\n".join(lines)


def render_rules(rules: Mapping[str, Mapping[str, str]]) -> str:
    """Render ``{selector: {prop: value}}`` as blocks separated by blank lines."""
    return "\n\n".join(render_block(selector, decls) for selector, decls in rules.items())
