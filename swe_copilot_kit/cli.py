from __future__ import annotations

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .catalog import describe_template, list_templates
from .config import templates_root
from .gitignore import update_gitignore
from .installer import CopyErrorKind, CopyOptions, CopyResult, init_all

app = typer.Typer(help="Initialize GitHub Copilot prompts, agents and skills in your project.")
console = Console()

EXIT_OK = 0
EXIT_ERROR = 1

BANNER = Panel.fit(
    "[bold white]SWE Copilot Kit[/bold white]\n[grey50]Copilot Prompts, Agents, Skills Initializer[/grey50]",
    border_style="cyan",
)

NEXT_STEPS = (
    "Review the generated files in .github/prompts, .github/agents and .github/skills",
    "Customize the templates to match your project needs",
    "Use GitHub Copilot Chat with your new templates",
)


class OutputFormat(str, Enum):
    table = "table"
    json = "json"
    md = "md"


def _json_print(payload: dict) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=True, sort_keys=True))


def _print_key_value_table(title: str, rows: list[tuple[str, str]]) -> None:
    table = Table(title=title)
    table.add_column("Field")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(key, value)
    console.print(table)


def _emit_success(
    command: str,
    output_format: OutputFormat,
    data: dict,
    md_renderer: Callable[[dict], str] | None = None,
    table_renderer: Callable[[dict], None] | None = None,
) -> None:
    if output_format == OutputFormat.json:
        _json_print(
            {
                "ok": True,
                "command": command,
                "exit_code": EXIT_OK,
                "data": data,
            }
        )
        return

    if output_format == OutputFormat.md and md_renderer is not None:
        console.print(md_renderer(data))
        return

    if output_format == OutputFormat.table and table_renderer is not None:
        table_renderer(data)
        return

    if output_format == OutputFormat.md:
        lines = [f"# {command}", ""]
        lines.extend(f"- **{key}**: {value}" for key, value in data.items())
        console.print("\n".join(lines))
    else:
        _print_key_value_table(
            title=command,
            rows=[(str(key), str(value)) for key, value in data.items()],
        )


def _emit_error(
    command: str,
    output_format: OutputFormat,
    exit_code: int,
    code: str,
    message: str,
) -> None:
    if output_format == OutputFormat.json:
        _json_print(
            {
                "ok": False,
                "command": command,
                "exit_code": exit_code,
                "error": {
                    "code": code,
                    "message": message,
                },
            }
        )
    elif output_format == OutputFormat.md:
        console.print(f"# {command}\n\n- **status**: error\n- **code**: {code}\n- **message**: {message}")
    else:
        console.print(f"[red]Error ({code}):[/red] {message}")

    raise typer.Exit(code=exit_code)


def _result_payload(result: CopyResult) -> dict:
    return {
        "success": result.success,
        "files_count": result.files_count,
        "destination": str(result.destination),
        "error": result.error,
        "error_kind": result.error_kind.value if result.error_kind else None,
    }


def _print_copy_result(category: str, result: CopyResult) -> None:
    if result.success:
        console.print(
            f"[green]✔[/green] Installed [green]{result.files_count}[/green] {category} file(s) "
            f"to [cyan]{result.destination}[/cyan]"
        )
    elif result.error_kind == CopyErrorKind.destination_exists:
        console.print(f"[yellow]⚠ {result.error}[/yellow]")
    else:
        console.print(f"[red]✖[/red] Failed to install {category}: {result.error}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)


@app.command("init")
def init_project(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files."),
    claude_code: bool = typer.Option(False, "--claude-code", help="Initialize for Claude Code (coming soon)."),
    antigravity: bool = typer.Option(False, "--antigravity", help="Initialize for Antigravity (coming soon)."),
    target_dir: Optional[Path] = typer.Option(
        None, "--target-dir", "-t", help="Project root to initialize. Defaults to the current directory."
    ),
    output_format: OutputFormat = typer.Option(OutputFormat.table, "--format", help="Output format."),
):
    """Initialize .github/prompts, .github/agents and .github/skills directories."""
    for enabled, label in ((claude_code, "Claude Code"), (antigravity, "Antigravity")):
        if enabled:
            _emit_success(
                command="init",
                output_format=output_format,
                data={"status": "unsupported", "message": f"{label} support is coming soon!"},
                table_renderer=lambda payload: console.print(f"[yellow]⚠ {payload['message']}[/yellow]"),
            )
            return

    target = (target_dir or Path.cwd()).resolve()
    if not target.is_dir():
        _emit_error(
            command="init",
            output_format=output_format,
            exit_code=EXIT_ERROR,
            code="invalid_target_dir",
            message=f"Target directory does not exist: {target}",
        )
        raise

    options = CopyOptions(force=force, target_dir=target)
    try:
        if output_format == OutputFormat.table:
            console.print(BANNER)
            console.print(f"[blue]Target directory:[/blue] {target}\n")
            with console.status("Installing templates..."):
                results = init_all(options)
        else:
            results = init_all(options)
        gitignore_updated = update_gitignore(target)
    except OSError as error:
        _emit_error(
            command="init",
            output_format=output_format,
            exit_code=EXIT_ERROR,
            code="init_error",
            message=str(error),
        )
        raise

    data = {
        "target_dir": str(target),
        "results": {category: _result_payload(result) for category, result in results.items()},
        "gitignore_updated": gitignore_updated,
    }

    def render_md(payload: dict) -> str:
        lines = [f"# Init: `{payload['target_dir']}`", ""]
        for category, result in payload["results"].items():
            if result["success"]:
                lines.append(f"- **{category}**: {result['files_count']} file(s) in `{result['destination']}`")
            else:
                lines.append(f"- **{category}**: {result['error_kind']} | {result['error']}")
        lines.append(f"- **gitignore_updated**: {payload['gitignore_updated']}")
        return "\n".join(lines)

    def render_table(payload: dict) -> None:
        for category, result in results.items():
            _print_copy_result(category, result)
        if payload["gitignore_updated"]:
            console.print("[green]✔[/green] Updated .gitignore")
        else:
            console.print("[blue]ℹ[/blue] .gitignore already up to date")
        console.print("\n[bold green]Successfully initialized GitHub Copilot configuration![/bold green]\n")
        console.print("[grey50]Next steps:[/grey50]")
        for idx, step in enumerate(NEXT_STEPS, start=1):
            console.print(f"  {idx}. {step}")

    _emit_success(
        command="init",
        output_format=output_format,
        data=data,
        md_renderer=render_md,
        table_renderer=render_table,
    )


@app.command("list")
def list_available(
    output_format: OutputFormat = typer.Option(OutputFormat.table, "--format", help="Output format."),
):
    """List available templates."""
    root = templates_root()
    listing = list_templates(root)
    data = {
        "templates_dir": str(root),
        "templates": {
            category: [
                {"name": name, "description": describe_template(root / category / name)}
                for name in names
            ]
            for category, names in listing.items()
        },
    }

    def render_md(payload: dict) -> str:
        lines = ["# Available templates", ""]
        for category, items in payload["templates"].items():
            if not items:
                continue
            lines.append(f"## {category.capitalize()}")
            for item in items:
                suffix = f" | {item['description']}" if item["description"] else ""
                lines.append(f"- `{item['name']}`{suffix}")
            lines.append("")
        return "\n".join(lines).rstrip()

    def render_table(payload: dict) -> None:
        console.print(BANNER)
        table = Table(title="Available templates")
        table.add_column("Category")
        table.add_column("Template")
        table.add_column("Description")
        for category, items in payload["templates"].items():
            for item in items:
                table.add_row(category, item["name"], item["description"])
        console.print(table)

    _emit_success(
        command="list",
        output_format=output_format,
        data=data,
        md_renderer=render_md,
        table_renderer=render_table,
    )


@app.command("version")
def version(
    output_format: OutputFormat = typer.Option(OutputFormat.table, "--format", help="Output format."),
) -> None:
    """Print version."""
    _emit_success(command="version", output_format=output_format, data={"version": __version__})


if __name__ == "__main__":
    app()
