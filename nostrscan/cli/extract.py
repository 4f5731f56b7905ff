"""Extract command."""

import json
from pathlib import Path

import rich_click as click
from rich.markup import escape
from rich.table import Table

from ..config import get_settings
from ..content import EXTRACTORS
from ..models.config import ALL_KINDS
from ._console import console


def _read_input(text: str | None, file_path: Path | None) -> str:
    if text is not None and file_path is not None:
        raise click.UsageError("Pass TEXT or --file, not both")
    if file_path is not None:
        return file_path.read_text(encoding="utf-8", errors="replace")
    if text is not None:
        return text

    stdin = click.get_text_stream("stdin")
    if stdin.isatty():
        raise click.UsageError("Provide TEXT, --file, or pipe content on stdin")
    return stdin.read()


def _serialize(item) -> str | dict:
    if isinstance(item, str):
        return item
    return item.model_dump(mode="json")


def _render_table(kind: str, items: list) -> Table:
    table = Table(title=f"{kind} ({len(items)})", title_justify="left")
    if kind == "media":
        table.add_column("Kind", style="bold")
        table.add_column("URL", overflow="fold")
        table.add_column("Thumbnail", overflow="fold")
        for item in items:
            table.add_row(item.kind.value, escape(item.url), escape(item.thumbnail or "-"))
    elif kind == "links":
        table.add_column("Domain", style="bold")
        table.add_column("URL", overflow="fold")
        for item in items:
            table.add_row(escape(item.domain) if item.domain else "[red]invalid[/red]", escape(item.url))
    elif kind == "quotes":
        table.add_column("Kind", style="bold")
        table.add_column("Reference", overflow="fold")
        for item in items:
            table.add_row(item.kind.value, escape(item.raw_match))
    else:
        table.add_column("Value", overflow="fold")
        for item in items:
            table.add_row(escape(f"#{item}" if kind == "hashtags" else item))
    return table


@click.command()
@click.argument("text", required=False)
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read note text from a file",
)
@click.option(
    "--only",
    "-k",
    "kinds",
    multiple=True,
    type=click.Choice(ALL_KINDS),
    help="Reference kinds to extract (repeatable)",
)
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of tables")
def extract(text: str | None, file_path: Path | None, kinds: tuple[str, ...], as_json: bool):
    """Extract references from TEXT, a file, or stdin."""
    settings = get_settings()
    content = _read_input(text, file_path)
    selected = list(kinds) or list(settings.output.kinds)
    results = {kind: EXTRACTORS[kind](content) for kind in ALL_KINDS if kind in selected}

    if as_json or settings.output.format == "json":
        payload = {kind: [_serialize(item) for item in items] for kind, items in results.items()}
        click.echo(json.dumps(payload, indent=2))
        return

    if not any(results.values()):
        console.print("No references found.")
        return

    for kind, items in results.items():
        if items:
            console.print(_render_table(kind, items))
