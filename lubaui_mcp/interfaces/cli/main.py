"""
CLI Main - Typer-based command-line interface.

Usage:
    lubaui token "spacing large"
    lubaui component button
    lubaui validate-spacing 15
    lubaui suggest "settings page"
    lubaui mcp
    lubaui serve
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from lubaui_mcp.config import LubaUIError, get_settings

app = typer.Typer(
    name="lubaui",
    help="LubaUI - Design system lookup for tokens, components and primitives",
    add_completion=False,
)
console = Console()

JSON_OPTION = typer.Option(False, "--json", "-j", help="Print the raw JSON result")


def _lookup_service():
    from lubaui_mcp.domains.catalog import get_catalog
    from lubaui_mcp.domains.lookup import LookupService
    from lubaui_mcp.domains.search import FuzzyRanker

    ranker = FuzzyRanker(default_max_results=get_settings().search_default_limit)
    return LookupService(get_catalog(), ranker)


def _run(operation) -> dict[str, Any]:
    """Run an operation, turning domain errors into a clean exit."""
    try:
        return operation()
    except LubaUIError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)


def _emit_json(result: dict[str, Any]) -> None:
    typer.echo(json.dumps(result, indent=2, ensure_ascii=False))


def _not_found(result: dict[str, Any]) -> bool:
    if result.get("found") is False:
        console.print(f"[yellow]{result['message']}[/yellow]")
        return True
    return False


@app.command()
def token(
    query: str = typer.Argument(..., help="Token name, API path, or description"),
    category: str | None = typer.Option(
        None, "--category", "-c", help="spacing, radius, color, typography, motion or glass"
    ),
    as_json: bool = JSON_OPTION,
) -> None:
    """Look up design tokens."""
    result = _run(lambda: _lookup_service().lookup_token(query, category))

    if as_json:
        _emit_json(result)
        return
    if _not_found(result):
        return

    table = Table(title=f"Tokens matching '{query}'")
    table.add_column("API", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Tier")
    table.add_column("Description")

    for t in result["tokens"]:
        value = t.get("value")
        if value is None and "light" in t:
            value = f"{t['light']} / {t.get('dark', '-')}"
        table.add_row(t["api"], str(value), str(t.get("tier", "")), t.get("description", ""))

    console.print(table)


@app.command()
def component(
    query: str = typer.Argument(..., help="Component name, e.g. 'Button' or 'LubaTextField'"),
    as_json: bool = JSON_OPTION,
) -> None:
    """Look up a component's parameters, example and tokens."""
    result = _run(lambda: _lookup_service().lookup_component(query))

    if as_json:
        _emit_json(result)
        return
    if _not_found(result):
        return

    for entry in result["components"]:
        _print_entry(entry, subtitle=None)


@app.command()
def primitive(
    query: str = typer.Argument(..., help="Primitive name, e.g. 'pressable' or 'glass'"),
    as_json: bool = JSON_OPTION,
) -> None:
    """Look up an interaction primitive."""
    result = _run(lambda: _lookup_service().lookup_primitive(query))

    if as_json:
        _emit_json(result)
        return
    if _not_found(result):
        return

    for entry in result["primitives"]:
        _print_entry(entry, subtitle=entry.get("modifier"))


def _print_entry(entry: dict[str, Any], subtitle: str | None) -> None:
    """Render a component or primitive as a panel plus parameter table."""
    example = escape(entry.get("example", ""))
    body = f"{escape(entry['description'])}\n\n[bold]Example:[/bold]\n{example}"
    if entry.get("tokens"):
        body += f"\n\n[bold]Tokens:[/bold] {', '.join(entry['tokens'])}"
    if entry.get("presets"):
        presets = ", ".join(f"{k}={v}" for k, v in entry["presets"].items())
        body += f"\n[bold]Presets:[/bold] {presets}"

    console.print(Panel(body, title=f"[bold cyan]{entry['name']}[/bold cyan]", subtitle=subtitle))

    if entry.get("parameters"):
        table = Table(show_header=True, header_style="bold")
        table.add_column("Parameter", style="cyan")
        table.add_column("Type")
        table.add_column("Default", style="green")
        table.add_column("Description")
        for p in entry["parameters"]:
            default = "required" if p.get("required") else str(p.get("default", ""))
            table.add_row(p["name"], p["type"], default, p.get("description", ""))
        console.print(table)


@app.command()
def colors(
    query: str = typer.Argument(..., help="Color category or search term"),
    as_json: bool = JSON_OPTION,
) -> None:
    """Show a color category, or search across colors."""
    result = _run(lambda: _lookup_service().get_color_palette(query))

    if as_json:
        _emit_json(result)
        return
    if _not_found(result):
        return

    title = f"Colors: {result['category']}" if "category" in result else f"Colors matching '{query}'"
    table = Table(title=title)
    table.add_column("API", style="cyan")
    table.add_column("Light")
    table.add_column("Dark")
    table.add_column("Description")

    for c in result["colors"] or []:
        table.add_row(c["api"], c.get("light", "-"), c.get("dark", "-"), c.get("description", ""))

    console.print(table)


@app.command("validate-spacing")
def validate_spacing(
    value: float = typer.Argument(..., help="Spacing value in points"),
    as_json: bool = JSON_OPTION,
) -> None:
    """Check a spacing value against the 4pt grid."""
    from lubaui_mcp.domains.validation import validate_spacing as check

    _print_validation(check(value), as_json)


@app.command("validate-radius")
def validate_radius(
    value: float = typer.Argument(..., help="Radius value in points"),
    as_json: bool = JSON_OPTION,
) -> None:
    """Check a corner radius against the radius scale."""
    from lubaui_mcp.domains.validation import validate_radius as check

    _print_validation(check(value), as_json)


def _print_validation(result: dict[str, Any], as_json: bool) -> None:
    if as_json:
        _emit_json(result)
        return

    if result["valid"]:
        console.print(f"[green]Valid:[/green] {result['message']}")
    else:
        console.print(f"[yellow]Off scale:[/yellow] {result['message']}")


@app.command()
def suggest(
    description: str = typer.Argument(..., help="What you're building"),
    as_json: bool = JSON_OPTION,
) -> None:
    """Suggest tokens, components and primitives for a UI."""
    from lubaui_mcp.domains.catalog import get_catalog
    from lubaui_mcp.domains.suggest import TokenSuggester

    result = _run(lambda: TokenSuggester(get_catalog()).suggest(description))

    if as_json:
        _emit_json(result)
        return

    if result["matchedPatterns"]:
        console.print(f"\n[bold]Patterns:[/bold] {', '.join(result['matchedPatterns'])}")
        for kind, hints in result["suggestions"].items():
            console.print(f"\n[bold cyan]{kind.title()}[/bold cyan]")
            for hint in hints:
                console.print(f"  - {escape(hint)}")
    else:
        console.print(Panel(result["note"], title="No pattern matched", style="yellow"))

    components = ", ".join(c["name"] for c in result["recommendedComponents"]) or "-"
    primitives = ", ".join(p["name"] for p in result["recommendedPrimitives"]) or "-"
    console.print(f"\n[bold]Components:[/bold] {components}")
    console.print(f"[bold]Primitives:[/bold] {primitives}")


@app.command()
def mcp(
    name: str | None = typer.Option(None, "--name", "-n", help="Server name reported to clients"),
) -> None:
    """Run the MCP server on stdio."""
    from lubaui_mcp.interfaces.mcp import serve_mcp

    serve_mcp(server_name=name)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to bind"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
) -> None:
    """Start the REST API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print("\n[green]Starting LubaUI API server[/green]")
    console.print(f"[dim]http://{host}:{port}[/dim]\n")

    uvicorn.run(
        "lubaui_mcp.interfaces.api:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
        log_level=settings.log_level.lower(),
    )


@app.command()
def version() -> None:
    """Show version information."""
    from lubaui_mcp import __version__

    console.print(f"LubaUI MCP v{__version__}")


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=getattr(logging, get_settings().log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    app()


if __name__ == "__main__":
    main()
