"""
krds command line.

Prints generated artifacts to stdout or writes them to disk:

    krds css --theme dark
    krds tokens --format style-dictionary
    krds component button --variant button_size_small.html
    krds components --category input
    krds preview modal --viewport mobile --output modal.html
    krds token krds-light-color-primary-text-default
    krds validate
    krds build --output build/
"""

from __future__ import annotations

import json
import logging
import platform
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.table import Table

from krds_forge.components.library import get_default_library
from krds_forge.core.catalog import TokenCatalog, default_token_catalog
from krds_forge.core.errors import KrdsError
from krds_forge.core.manifest import KrdsManifest, load_manifest
from krds_forge.core.token_names import describe_token, validate_color_tokens
from krds_forge.data import CATALOG_META
from krds_forge.runtime.preview import Viewport, render_preview
from krds_forge.themes.css_generator import emit_stylesheet
from krds_forge.themes.style_dictionary import ExportFormat, export_tokens

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

console = Console()
err_console = Console(stderr=True)


class ThemeOption(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class Part(str, Enum):
    HTML = "html"
    CSS = "css"
    ALL = "all"


# Manifest loaded by the callback
_manifest: KrdsManifest = KrdsManifest()


def get_version() -> str:
    """Get krds-forge version from package metadata or fallback to __version__."""
    try:
        from importlib.metadata import version

        return version("krds-forge")
    except Exception:
        from krds_forge import __version__

        return __version__


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"krds-forge {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def _tokens() -> TokenCatalog:
    catalog = default_token_catalog()
    if catalog.namespace == _manifest.tokens.namespace:
        return catalog
    return TokenCatalog(catalog, namespace=_manifest.tokens.namespace)


def _theme(theme: ThemeOption | None) -> str:
    return theme.value if theme is not None else _manifest.output.theme


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {message}", markup=True, highlight=False)
    raise typer.Exit(code=1)


def _write_or_echo(text: str, output: Path | None) -> None:
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    console.print(f"[green]Wrote[/green] {output}")


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="KRDS design-system artifact generator: token CSS, Style Dictionary exports and component templates.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    manifest: Annotated[
        Path | None,
        typer.Option("--manifest", "-m", help="Path to krds.toml (default: ./krds.toml)"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Logging level (default: from krds.toml, else WARNING)"),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """Load configuration and set up logging."""
    global _manifest
    try:
        _manifest = load_manifest(manifest)
    except KrdsError as e:
        _fail(str(e))

    level = (log_level or _manifest.logging.level).upper()
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        _fail(f"Unknown log level: {log_level}")
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)


# =============================================================================
# Token Commands
# =============================================================================


@app.command()
def css(
    theme: Annotated[ThemeOption | None, typer.Option("--theme", "-t", help="Theme to emit")] = None,
    utilities: Annotated[
        bool | None,
        typer.Option("--utilities/--no-utilities", help="Append utility classes"),
    ] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write to file")] = None,
) -> None:
    """Print the token stylesheet."""
    include_utilities = utilities if utilities is not None else _manifest.output.utilities
    tokens = _tokens()
    _write_or_echo(
        emit_stylesheet(tokens, _theme(theme), include_utilities, tokens.namespace), output
    )


@app.command()
def tokens(
    fmt: Annotated[
        ExportFormat | None,
        typer.Option("--format", "-f", help="Export format"),
    ] = None,
    theme: Annotated[ThemeOption | None, typer.Option("--theme", "-t", help="Theme for css export")] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write to file")] = None,
) -> None:
    """Export the token catalog."""
    catalog = _tokens()
    export = export_tokens(
        catalog,
        fmt or ExportFormat(_manifest.output.format),
        theme=_theme(theme),
        namespace=catalog.namespace,
        include_utilities=_manifest.output.utilities,
        meta=CATALOG_META,
    )
    text = export if isinstance(export, str) else json.dumps(export, indent=2, ensure_ascii=False)
    _write_or_echo(text, output)


@app.command()
def token(
    name: Annotated[str, typer.Argument(help="Token name, e.g. krds-light-color-primary-text-default")],
) -> None:
    """Show a token's value and description."""
    catalog = _tokens()
    value = catalog.get_token(name)
    if value is None:
        _fail(f"Unknown token: {name}")
    console.print(f"[bold]{name}[/bold]", highlight=False)
    console.print(f"  value:       {value}", highlight=False, markup=False)
    console.print(f"  description: {describe_token(name, catalog.namespace)}", highlight=False)


@app.command()
def validate() -> None:
    """Validate color token names and values."""
    errors = validate_color_tokens(_tokens(), _manifest.tokens.namespace)
    if errors:
        for error in errors:
            err_console.print(f"[red]✗[/red] {error}", highlight=False)
        err_console.print(f"\n{len(errors)} problem(s) found")
        raise typer.Exit(code=1)
    console.print("[green]✓[/green] All color tokens are valid")


# =============================================================================
# Component Commands
# =============================================================================


@app.command()
def component(
    component_id: Annotated[str, typer.Argument(help="Component id, e.g. button")],
    variant: Annotated[
        str | None, typer.Option("--variant", help="Variant identifier, e.g. button_size_small.html")
    ] = None,
    part: Annotated[Part, typer.Option("--part", help="Which part to print")] = Part.ALL,
) -> None:
    """Print the generated template for a component."""
    library = get_default_library()
    try:
        template = library.fetch_template(component_id, variant)
    except KrdsError as e:
        _fail(str(e))

    if part is Part.HTML:
        typer.echo(template.html)
    elif part is Part.CSS:
        typer.echo(template.css)
    else:
        typer.echo(template.html)
        typer.echo("")
        typer.echo(template.css)


@app.command()
def components(
    category: Annotated[str | None, typer.Option("--category", "-c", help="Filter by category")] = None,
) -> None:
    """List catalog components."""
    library = get_default_library()
    descriptors = (
        library.components_by_category(category) if category else library.all_components()
    )

    if not descriptors:
        console.print("[dim]No components found.[/dim]")
        return

    table = Table(title="KRDS Components")
    table.add_column("ID")
    table.add_column("Class")
    table.add_column("Category")
    table.add_column("Variants", style="dim")

    for descriptor in descriptors:
        table.add_row(
            descriptor.id,
            descriptor.class_name,
            descriptor.category,
            str(len(descriptor.variants)),
        )

    console.print(table)


@app.command()
def preview(
    component_id: Annotated[str, typer.Argument(help="Component id, e.g. modal")],
    theme: Annotated[ThemeOption | None, typer.Option("--theme", "-t")] = None,
    viewport: Annotated[Viewport, typer.Option("--viewport")] = Viewport.DESKTOP,
    variant: Annotated[str | None, typer.Option("--variant")] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write to file")] = None,
) -> None:
    """Render a standalone preview page for a component."""
    tokens = _tokens()
    try:
        page = render_preview(
            component_id,
            _theme(theme),
            viewport,
            variant=variant,
            tokens=tokens,
            namespace=tokens.namespace,
        )
    except KrdsError as e:
        _fail(str(e))
    _write_or_echo(page, output)


# =============================================================================
# Build
# =============================================================================


@app.command()
def build(
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output directory (default: from krds.toml)")
    ] = None,
    theme: Annotated[ThemeOption | None, typer.Option("--theme", "-t")] = None,
) -> None:
    """Write token and component artifacts to a directory."""
    out_dir = output or Path(_manifest.output.directory)
    components_dir = out_dir / "components"
    components_dir.mkdir(parents=True, exist_ok=True)

    tokens = _tokens()
    (out_dir / "tokens.css").write_text(
        emit_stylesheet(tokens, _theme(theme), _manifest.output.utilities, tokens.namespace),
        encoding="utf-8",
    )
    json_export = export_tokens(
        tokens, ExportFormat.JSON, namespace=tokens.namespace, meta=CATALOG_META
    )
    (out_dir / "tokens.json").write_text(
        json.dumps(json_export, indent=2, ensure_ascii=False), encoding="utf-8"
    )

    library = get_default_library()
    for descriptor in library.all_components():
        template = library.fetch_template(descriptor.id)
        (components_dir / f"{descriptor.id}.html").write_text(template.html, encoding="utf-8")
        (components_dir / f"{descriptor.id}.css").write_text(template.css, encoding="utf-8")

    console.print(
        f"[green]✓[/green] Built {len(tokens)} tokens and "
        f"{len(library.all_components())} components into {out_dir}"
    )


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])
