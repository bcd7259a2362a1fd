"""Journal CLI commands."""

import sys

import click
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

from cli.utils import format_mood, get_components, resolve_journal_path
from shared_types import MoodLabel

console = Console()


def _find_entry(c: dict, filename: str):
    filepath = resolve_journal_path(c["paths"]["journal_dir"], filename)
    if filepath is None:
        console.print(f"[red]Not found:[/] {filename}")
    return filepath


@click.group()
def journal():
    """Manage journal entries."""
    pass


@journal.command("add")
@click.option("--title", help="Entry title (defaults to date)")
@click.option("--tags", help="Comma-separated tags")
@click.argument("content", required=False)
def journal_add(title: str, tags: str, content: str):
    """Add new journal entry. Opens editor if no content provided."""
    c = get_components()

    if not content:
        content = click.edit("")
        if not content or not content.strip():
            console.print("[yellow]No content provided, cancelled.[/]")
            return

    tag_list = [t.strip() for t in tags.split(",")] if tags else []

    try:
        filepath = c["storage"].create(content=content, title=title, tags=tag_list)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    post = c["storage"].read(filepath)
    console.print(f"[green]Created:[/] {filepath.name}")
    console.print(f"Mood: {format_mood(post.get('mood', 'neutral'), post.get('emoji', ''))}")


@journal.command("list")
@click.option(
    "-m",
    "--mood",
    type=click.Choice([m.value for m in MoodLabel]),
    help="Filter by mood",
)
@click.option("--tag", help="Filter by tag")
@click.option("-n", "--limit", default=10, help="Max entries to show")
def journal_list(mood: str, tag: str, limit: int):
    """List recent journal entries."""
    c = get_components()
    entries = c["storage"].list_entries(mood=mood, tags=[tag] if tag else None, limit=limit)

    if not entries:
        console.print("[yellow]No entries found.[/]")
        return

    table = Table(show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Mood")
    table.add_column("Title")
    table.add_column("Tags", style="dim")

    for e in entries:
        date = e["created"][:10] if e["created"] else "?"
        tags = ", ".join(e["tags"][:3]) if e["tags"] else ""
        table.add_row(date, format_mood(e["mood"], e["emoji"]), e["title"][:40], tags)

    console.print(table)


@journal.command("view")
@click.argument("filename")
def journal_view(filename: str):
    """View a journal entry."""
    c = get_components()
    filepath = _find_entry(c, filename)
    if filepath is None:
        return

    post = c["storage"].read(filepath)
    console.print(f"\n[cyan bold]{post.get('title', filepath.stem)}[/]")
    console.print(
        f"[dim]Created: {str(post.get('created', '?'))[:10]}[/] | "
        f"Mood: {format_mood(post.get('mood', 'neutral'), post.get('emoji', ''))}"
    )
    if post.get("tags"):
        console.print(f"[dim]Tags: {', '.join(post['tags'])}[/]")
    console.print()
    console.print(Markdown(post.content))


@journal.command("edit")
@click.argument("filename")
def journal_edit(filename: str):
    """Edit a journal entry in $EDITOR and re-detect its mood."""
    c = get_components()
    filepath = _find_entry(c, filename)
    if filepath is None:
        return

    post = c["storage"].read(filepath)
    content = click.edit(post.content)
    if content is None or content == post.content:
        console.print("[yellow]No changes.[/]")
        return

    try:
        c["storage"].update(filepath, content=content)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    post = c["storage"].read(filepath)
    console.print(f"[green]Updated:[/] {filepath.name}")
    console.print(f"Mood: {format_mood(post.get('mood', 'neutral'), post.get('emoji', ''))}")


@journal.command("delete")
@click.argument("filename")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def journal_delete(filename: str, yes: bool):
    """Delete a journal entry."""
    c = get_components()
    filepath = _find_entry(c, filename)
    if filepath is None:
        return

    if not yes:
        if not click.confirm(f"Delete {filepath.name}?"):
            return

    c["storage"].delete(filepath)
    console.print(f"[green]Deleted:[/] {filepath.name}")
