#!/usr/bin/env python3
"""
Compile Resume Theme DSL Documents

Validates, migrates and compiles resume DSL documents (YAML or JSON) into the
renderer-agnostic AST, printed as JSON.

Examples:
    # Check a document against the schema
    python scripts/compile_dsl.py validate my_theme.yaml

    # Compile a preview AST (placeholders instead of resume data)
    python scripts/compile_dsl.py compile my_theme.yaml

    # Compile for print with resume data, saving the AST
    python scripts/compile_dsl.py compile my_theme.yaml --target pdf --resume resume.json -o ast.json

    # Merge customizations over a bundled theme
    python scripts/compile_dsl.py merge modern my_overrides.yaml

    # List bundled themes
    python scripts/compile_dsl.py themes
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from resumark.contexts.compilation import compile_dsl
from resumark.contexts.compilation.compiler import RENDER_TARGETS
from resumark.contexts.compilation.logger import setup_compilation_logger
from resumark.contexts.schema.logger import setup_schema_logger
from resumark.contexts.schema import CURRENT_DSL_VERSION, InvalidDslError, UnsupportedMigrationError, migrate, validate
from resumark.contexts.theming import YamlThemeStore, merge_dsl
from resumark.contexts.theming.logger import setup_theming_logger
from resumark.utils import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Validate, merge and compile resume theme DSL documents",
    add_completion=False,
)


def load_document(path: Path) -> Dict[str, Any]:
    """Load a YAML or JSON document into plain containers."""
    if not path.exists():
        typer.secho(f"File not found: {path}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return OmegaConf.to_container(OmegaConf.load(path), resolve=True)


def resolve_base(source: str, store: YamlThemeStore) -> Dict[str, Any]:
    """A bundled theme id, or a path to a DSL file."""
    style_config = store.get_style_config(source)
    if style_config is not None:
        return style_config
    return load_document(Path(source))


def emit(text: str, output: Optional[Path]) -> None:
    """Print JSON text, or save it when an output path is given."""
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(exist_ok=True, parents=True)
    output.write_text(text + "\n")
    typer.secho(f"✓ Saved: {output}", fg=typer.colors.GREEN, err=True)


@app.command("validate")
def validate_command(
    dsl_file: Annotated[Path, typer.Argument(help="DSL document (YAML or JSON)")],
    migrate_first: Annotated[
        bool,
        typer.Option("--migrate/--no-migrate", help="Migrate to the current version before validating"),
    ] = True,
    log: Annotated[
        bool,
        typer.Option("--log", help="Write a session log under LOGS_PATH"),
    ] = False,
):
    """
    Validate a DSL document and list every field error.

    Examples:\n
        $ compile_dsl.py validate my_theme.yaml

        $ compile_dsl.py validate legacy.yaml --no-migrate
    """
    if log:
        log_file = setup_schema_logger(
            LOGS_PATH / f"validate_{now()}",
            session={"DSL file": dsl_file, "DSL version": CURRENT_DSL_VERSION, "Migrate": migrate_first},
        )
        typer.echo(f"Log: {log_file}", err=True)

    document = load_document(dsl_file)

    if migrate_first and isinstance(document, dict) and isinstance(document.get("version"), str):
        try:
            document = migrate(document)
        except UnsupportedMigrationError as e:
            typer.secho(str(e), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    result = validate(document)
    if result.valid:
        typer.secho(f"✓ Valid (version {result.data.version})", fg=typer.colors.GREEN)
        return

    typer.secho(f"✗ {len(result.errors)} error(s)", fg=typer.colors.RED, bold=True, err=True)
    for error in result.errors:
        typer.echo(f"  {error} [{error.code}]", err=True)
    raise typer.Exit(code=1)


@app.command("compile")
def compile_command(
    dsl_file: Annotated[Path, typer.Argument(help="DSL document (YAML or JSON)")],
    target: Annotated[str, typer.Option("--target", "-t", help="Render target: html or pdf")] = "html",
    resume: Annotated[
        Optional[Path],
        typer.Option("--resume", "-r", help="Resume data (YAML or JSON); omit for a preview"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the AST here instead of stdout"),
    ] = None,
    log: Annotated[
        bool,
        typer.Option("--log", help="Write a session log under LOGS_PATH"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show DEBUG records (fallbacks, migration steps) on the console"),
    ] = False,
):
    """
    Compile a DSL document to its AST (JSON).

    Examples:\n
        $ compile_dsl.py compile my_theme.yaml

        $ compile_dsl.py compile my_theme.yaml -t pdf -r resume.json -o ast.json
    """
    if target not in RENDER_TARGETS:
        typer.secho(
            f"Unknown target '{target}'. Available: {', '.join(RENDER_TARGETS)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    # --verbose implies a session log
    if log or verbose:
        log_file = setup_compilation_logger(
            LOGS_PATH / f"compile_{now()}",
            target=target,
            session={
                "DSL file": dsl_file,
                "Resume data": resume or "none (preview)",
                "DSL version": CURRENT_DSL_VERSION,
            },
            console_level="DEBUG" if verbose else "INFO",
        )
        typer.echo(f"Log: {log_file}", err=True)

    document = load_document(dsl_file)
    resume_data = load_document(resume) if resume is not None else None

    try:
        ast = compile_dsl(document, target, resume_data=resume_data)
    except (InvalidDslError, UnsupportedMigrationError) as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    emit(ast.to_json(indent=2), output)


@app.command("merge")
def merge_command(
    base: Annotated[str, typer.Argument(help="Bundled theme id or base DSL file")],
    overrides: Annotated[Path, typer.Argument(help="Customizations file (YAML or JSON)")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the merged document here instead of stdout"),
    ] = None,
    log: Annotated[
        bool,
        typer.Option("--log", help="Write a session log under LOGS_PATH"),
    ] = False,
):
    """
    Merge customizations over a theme (arrays replace, objects merge).

    Examples:\n
        $ compile_dsl.py merge modern my_overrides.yaml

        $ compile_dsl.py merge base.yaml custom.yaml -o merged.json
    """
    if log:
        log_file = setup_theming_logger(
            LOGS_PATH / f"merge_{now()}", session={"Base": base, "Overrides": overrides}
        )
        typer.echo(f"Log: {log_file}", err=True)

    merged = merge_dsl(resolve_base(base, YamlThemeStore()), load_document(overrides))
    emit(json.dumps(merged, indent=2), output)


@app.command("themes")
def themes_command():
    """
    List bundled themes.

    Examples:\n
        $ compile_dsl.py themes
    """
    store = YamlThemeStore()
    themes = store.list_themes()
    if not themes:
        typer.secho(f"No themes found in {store.themes_path}", fg=typer.colors.YELLOW, err=True)
        return

    for theme_id in themes:
        layout = store.get_style_config(theme_id).get("layout", {})
        typer.echo(f"{theme_id:<12} {layout.get('type', '?')}")


if __name__ == "__main__":
    app()
