#!/usr/bin/env python3
"""
Resume Preview CLI

Generates LaTeX from resume records and renders LaTeX to the HTML used by the
live preview.

Commands:
    generate - Generate LaTeX from a YAML resume record
    render   - Render a LaTeX source to an HTML fragment
    preview  - Build .tex and standalone .html preview files from a record
    starter  - Print the starter document for a new resume

Examples:\n

    preview_resume.py generate data/jane_doe.yaml                 # Print LaTeX

    preview_resume.py generate data/jane_doe.yaml -o jane.tex     # Write LaTeX

    preview_resume.py render jane.tex -o jane.html                # Render to HTML

    preview_resume.py preview data/jane_doe.yaml                  # Build preview files
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumetex.contexts.rendering import build_preview, load_render_config, render_with_diagnostics
from resumetex.contexts.templating import InputError, TemplateRenderError, default_source, generate
from resumetex.contexts.templating.resume_record import ResumeRecord

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path.cwd()))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(Path(path).resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


def _emit(content: str, output: Optional[Path]) -> None:
    """Print content, or write it to output and report where it went."""
    if output is None:
        typer.echo(content, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    typer.secho(f"✓ Wrote {display_path(output)}", fg=typer.colors.GREEN, err=True)


app = typer.Typer(
    help="Generate LaTeX resumes from records and render them to HTML previews",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("generate")
def generate_command(
    record_path: Annotated[
        Path,
        typer.Argument(help="YAML resume record", exists=True, dir_okay=False),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write LaTeX here instead of stdout"),
    ] = None,
):
    """
    Generate a LaTeX document from a resume record.

    Examples:\n

        $ preview_resume.py generate data/jane_doe.yaml

        $ preview_resume.py generate data/jane_doe.yaml -o outs/jane_doe.tex
    """
    try:
        latex = generate(ResumeRecord.from_yaml(record_path))
    except (InputError, TemplateRenderError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    _emit(latex, output)


@app.command("render")
def render_command(
    source_path: Annotated[
        Path,
        typer.Argument(help="LaTeX source file", exists=True, dir_okay=False),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write HTML here instead of stdout"),
    ] = None,
    escape_html: Annotated[
        bool,
        typer.Option("--escape-html", help="Escape markup characters typed into the source"),
    ] = False,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Render config YAML (default: RENDER_CONFIG_PATH)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Report which passes changed the text"),
    ] = False,
):
    """
    Render a LaTeX source to the preview HTML fragment.

    Examples:\n

        $ preview_resume.py render outs/jane_doe.tex

        $ preview_resume.py render outs/jane_doe.tex --escape-html -o outs/jane_doe.html
    """
    try:
        config = load_render_config(config_path)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if escape_html:
        config.escape_html = True

    result = render_with_diagnostics(source_path.read_text(encoding="utf-8"), config)
    _emit(result.html + "\n", output)

    if verbose:
        typer.echo(f"Changed passes: {', '.join(result.changed_passes) or 'none'}", err=True)
        if result.leftover_commands:
            typer.echo(f"Stripped commands: {', '.join(result.leftover_commands)}", err=True)
    if result.failed_passes:
        typer.secho(
            f"Skipped failed passes: {', '.join(result.failed_passes)}",
            fg=typer.colors.YELLOW,
            err=True,
        )


@app.command("preview")
def preview_command(
    record_path: Annotated[
        Path,
        typer.Argument(help="YAML resume record"),
    ],
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-d", help="Directory for the .tex and .html files"),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Render config YAML (default: RENDER_CONFIG_PATH)"),
    ] = None,
):
    """
    Build .tex and standalone .html preview files for a resume record.

    Examples:\n

        $ preview_resume.py preview data/jane_doe.yaml

        $ preview_resume.py preview data/jane_doe.yaml --output-dir outs/jane
    """
    typer.secho(f"\nPreviewing: {record_path}", fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    try:
        config = load_render_config(config_path)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    result = build_preview(record_path, output_dir=output_dir, config=config)

    typer.echo("")
    if result.success:
        typer.secho("✓ Preview built", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  LaTeX: {display_path(result.tex_path)}")
        typer.echo(f"  HTML: {display_path(result.html_path)}")
    else:
        typer.secho("✗ Preview failed", fg=typer.colors.RED, bold=True)
        typer.secho(f"  {result.error}", fg=typer.colors.RED)

    if result.log_dir:
        typer.echo(f"  Log: {display_path(result.log_dir / 'render.log')}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("starter")
def starter_command(
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the starter document here instead of stdout"),
    ] = None,
):
    """Print (or write) the starter document offered for a brand new resume."""
    _emit(default_source(), output)


if __name__ == "__main__":
    app()
