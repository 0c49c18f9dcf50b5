"""
Token CLI commands.

- compile: Validate a brand Rūpa file and compile it to CSS
- validate: Report validation errors and warnings only
- list: Show the poetic token registry
"""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from bodhi.cli.utils import configure_logging, console, err_console
from bodhi.core.brandspec_loader import load_brand_spec
from bodhi.core.compiler import compile_brand, write_stylesheet
from bodhi.core.errors import BodhiError, BrandValidationError, ManifestError
from bodhi.core.ir.brandspec import BrandSpec
from bodhi.core.ir.results import CompileResult, ValidationResult
from bodhi.core.ir.tokens import TokenCategory
from bodhi.core.manifest import BodhiManifest, load_project_manifest
from bodhi.core.registry import get_all_tokens
from bodhi.core.resolver import poetic_brand_values, resolve_poetic_tokens
from bodhi.core.schema_validator import validate

token_app = typer.Typer(
    help="Compile and inspect Rūpa design tokens",
    no_args_is_help=True,
)


def _print_warnings(validation: ValidationResult) -> None:
    if not validation.warnings:
        return
    console.print(f"[yellow]⚠ {len(validation.warnings)} warning(s):[/yellow]")
    for warning in validation.warnings:
        console.print(f"  · {escape(warning)}")
    console.print()


def _print_errors(validation: ValidationResult) -> None:
    err_console.print(f"[red]✗ {len(validation.errors)} validation error(s):[/red]")
    for error in validation.errors:
        err_console.print(f"  ✗ {escape(error)}")


def _manifest() -> BodhiManifest:
    try:
        return load_project_manifest()
    except ManifestError as e:
        err_console.print(f"[red]✗ {escape(e.message)}[/red]")
        raise typer.Exit(code=1)


def _load(path: Path) -> BrandSpec:
    try:
        return load_brand_spec(path)
    except BodhiError as e:
        err_console.print(f"[red]✗ {escape(e.message)}[/red]")
        if not path.exists():
            err_console.print("  Run `bodhi init` to create a default brand file.")
        raise typer.Exit(code=1)


def _print_counts(result: CompileResult) -> None:
    table = Table(title="Token counts")
    table.add_column("Category")
    table.add_column("Tokens", justify="right")
    for category, count in result.category_counts.items():
        table.add_row(category, str(count))
    table.add_row("[bold]total[/bold]", f"[bold]{result.total_tokens}[/bold]")
    console.print(table)


def _print_contrast(result: CompileResult, has_components: bool) -> None:
    if result.adjustments:
        table = Table(title="Contrast adjustments (AAA 7:1)")
        table.add_column("Scheme")
        table.add_column("Component")
        table.add_column("Role")
        table.add_column("Original")
        table.add_column("Adjusted")
        table.add_column("Ratio")
        for adj in result.adjustments:
            table.add_row(
                adj.scheme.value,
                adj.component,
                adj.role or "color",
                adj.original_hex,
                adj.adjusted_hex,
                adj.ratio_note(),
            )
        console.print(table)
    elif has_components:
        console.print("[green]✓ All text colors pass AAA contrast (7:1)[/green]")

    for shortfall in result.shortfalls:
        console.print(
            f"[yellow]⚠ {shortfall.scheme.value} {escape(shortfall.component)}/"
            f"{escape(shortfall.role or 'color')}: {shortfall.original_hex} on "
            f"{shortfall.bg_hex} is {shortfall.original_ratio:.1f}:1 and cannot reach "
            f"{shortfall.target:g}:1; original kept[/yellow]"
        )


def _print_resolution(spec: BrandSpec) -> None:
    table = Table(title="Poetic token resolution")
    table.add_column("Token")
    table.add_column("Property")
    table.add_column("Value")
    table.add_column("Source")
    for category in TokenCategory:
        for token in resolve_poetic_tokens(category, poetic_brand_values(spec, category)):
            table.add_row(
                token.definition.sanskrit,
                token.css_property,
                escape(token.value),
                "brand" if token.overridden else "default",
            )
    console.print(table)


@token_app.command("compile")
def compile_command(
    file: str | None = typer.Argument(None, help="Path to brand Rūpa file (JSON or YAML)"),
    output: str | None = typer.Option(None, "--output", "-o", help="Output CSS file path"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show poetic token resolution details"
    ),
) -> None:
    """Compile a brand Rūpa file to CSS custom properties."""
    configure_logging(verbose)
    manifest = _manifest()
    input_path = Path(file) if file else manifest.rupa_path
    output_path = Path(output) if output else manifest.output_path

    spec = _load(input_path)
    console.print(f"Reading: {escape(str(input_path))}")
    console.print(f"Brand:   {escape(spec.name)} v{escape(spec.version)}")
    console.print()

    try:
        result = compile_brand(spec)
    except BrandValidationError as e:
        _print_warnings(e.result)
        _print_errors(e.result)
        err_console.print("Fix the errors above and recompile.")
        raise typer.Exit(code=1)

    _print_warnings(result.validation)

    try:
        write_stylesheet(result.css, output_path)
    except OSError as e:
        err_console.print(f"[red]✗ Cannot write {escape(str(output_path))}: {e}[/red]")
        raise typer.Exit(code=1)

    _print_counts(result)
    size_kb = len(result.css.encode("utf-8")) / 1024
    console.print(
        f"Compiled {result.total_tokens} tokens → {escape(str(output_path))} ({size_kb:.1f} KB)"
    )
    _print_contrast(result, bool(spec.category("nirmana")))

    if verbose:
        _print_resolution(spec)

    console.print("[green]✓ Rūpa compiled. The form arises from the tokens.[/green]")


@token_app.command("validate")
def validate_command(
    file: str | None = typer.Argument(None, help="Path to brand Rūpa file (JSON or YAML)"),
) -> None:
    """Validate a brand Rūpa file without compiling it."""
    configure_logging()
    manifest = _manifest()
    input_path = Path(file) if file else manifest.rupa_path

    spec = _load(input_path)
    result = validate(spec)
    _print_warnings(result)
    if not result.valid:
        _print_errors(result)
        raise typer.Exit(code=1)
    console.print(f"[green]✓ {escape(str(input_path))} is valid[/green]")


@token_app.command("list")
def list_command(
    category: TokenCategory | None = typer.Option(
        None, "--category", "-c", help="Only show one token family"
    ),
) -> None:
    """List the poetic token registry."""
    table = Table(title="Bodhi poetic tokens")
    table.add_column("Name", no_wrap=True)
    table.add_column("Sanskrit")
    table.add_column("Property")
    table.add_column("Default")
    table.add_column("Intent")
    for token in get_all_tokens().values():
        if category is not None and token.category != category:
            continue
        table.add_row(
            token.name,
            token.sanskrit,
            token.css_property,
            token.default_value,
            token.intent,
        )
    console.print(table)
