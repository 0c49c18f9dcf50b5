"""
Bodhi CLI Package.

- token.py: Rūpa compile / validate / list commands
- utils.py: Shared utilities

Top-level commands (init, --version) live here.
"""

from pathlib import Path

import typer
from rich.markup import escape

from bodhi.cli.token import token_app
from bodhi.cli.utils import configure_logging, console, err_console, version_callback
from bodhi.core.brandspec_loader import RUPA_FILE, save_default_rupa
from bodhi.core.manifest import DEFAULT_MANIFEST, MANIFEST_FILE

app = typer.Typer(
    help="""Bodhi – brand design-token compiler

Command Types:
  • Project Creation: init
    → Write bodhi.toml and a starter Rūpa brand file

  • Tokens: token compile, token validate, token list
    → Compile a Rūpa file into AAA-accessible CSS custom properties
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Bodhi CLI main callback for global options."""
    pass


@app.command(name="init")
def init_command(
    directory: Path = typer.Option(  # noqa: B008
        Path("."), "--dir", "-d", help="Directory to initialize (defaults to current directory)"
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files"),
) -> None:
    """
    Initialize a Bodhi project.

    Creates:
    - bodhi.toml manifest
    - bodhi.rupa.json starter brand file

    Examples:
        bodhi init                    # Init in current dir
        bodhi init --dir ./brand      # Init in another directory
        bodhi init --force            # Overwrite existing files
    """
    configure_logging()
    target = directory.resolve()
    manifest_path = target / MANIFEST_FILE
    rupa_path = target / RUPA_FILE

    existing = [p for p in (manifest_path, rupa_path) if p.exists()]
    if existing and not force:
        for p in existing:
            err_console.print(f"[red]✗ {escape(str(p))} already exists[/red]")
        err_console.print("  Use --force to overwrite.")
        raise typer.Exit(code=1)

    try:
        target.mkdir(parents=True, exist_ok=True)
        manifest_path.write_text(DEFAULT_MANIFEST.format(name=target.name), encoding="utf-8")
        save_default_rupa(rupa_path)
    except OSError as e:
        err_console.print(f"[red]✗ Cannot initialize {escape(str(target))}: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]✓ Created {MANIFEST_FILE} and {RUPA_FILE} in {escape(str(target))}[/green]")
    console.print("  Next: bodhi token compile")


app.add_typer(token_app, name="token")


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "token_app"]
