"""Mood detection and statistics CLI commands."""

import json

import click
from rich.console import Console
from rich.table import Table

from cli.utils import MOOD_STYLE, format_mood, get_components
from shared_types import MoodLabel

console = Console()


@click.group()
def mood():
    """Detect moods and show mood statistics."""
    pass


@mood.command("check")
@click.argument("text")
@click.option("--explain", is_flag=True, help="Show the keyword and negation that decided the mood")
@click.option("--json", "as_json", is_flag=True, help="Print result as JSON")
def mood_check(text: str, explain: bool, as_json: bool):
    """Detect the mood of TEXT without saving it."""
    from journal.mood import classifier

    explanation = classifier.explain(text)
    result = explanation.result

    if as_json:
        data = result.to_dict()
        if explain:
            data["keyword"] = explanation.keyword
            data["negation"] = explanation.negation
        click.echo(json.dumps(data, ensure_ascii=False))
        return

    console.print(f"Mood: {format_mood(result.mood, result.emoji)}")
    if explain:
        if explanation.keyword is None:
            console.print("[dim]No mood keyword found.[/]")
        else:
            console.print(f"[dim]Matched '{explanation.keyword}' ({explanation.matched_mood})[/]")
        if explanation.negated:
            console.print(f"[dim]Negated by '{explanation.negation}'[/]")


@mood.command("stats")
@click.option(
    "-d", "--days", type=click.IntRange(min=1), help="Window in days (default from config)"
)
def mood_stats(days: int):
    """Show mood counts, weekly breakdown and averages."""
    from journal.analytics import summarize, weekly_average_scores, weekly_mood_frequency

    c = get_components()
    analytics_cfg = c["config_model"].analytics
    days = days or analytics_cfg.window_days

    entries = c["storage"].list_entries(limit=None)
    if not entries:
        console.print("[yellow]No entries found. Add journal entries to track mood.[/]")
        return

    summary = summarize(entries, days=days, target_days=analytics_cfg.consistency_target_days)

    counts = Table(show_header=True, title="Mood counts")
    counts.add_column("Mood")
    counts.add_column("Entries", justify="right")
    counts.add_column("")
    for label in MoodLabel:
        n = summary.counts.get(label.value, 0)
        style = MOOD_STYLE.get(label.value, "dim")
        counts.add_row(label.value, str(n), f"[{style}]{'█' * n}[/]")
    console.print(counts)

    frequency = weekly_mood_frequency(entries, days=days)
    averages = weekly_average_scores(entries, days=days)

    daily = Table(show_header=True, title=f"Last {days} days")
    daily.add_column("Day", style="dim")
    for label in MoodLabel:
        daily.add_column(label.value, justify="right")
    daily.add_column("Avg", justify="right")
    for day, moods in frequency.items():
        row = [day.strftime("%a %d")]
        row.extend(str(moods[label.value]) for label in MoodLabel)
        row.append(f"{averages[day]:.1f}")
        daily.add_row(*row)
    console.print(daily)

    console.print(
        f"\n[bold]Entries:[/] {summary.total_entries}  |  "
        f"[bold]Most frequent:[/] {summary.dominant_mood}  |  "
        f"[bold]Consistency:[/] {summary.consistency}%"
    )
    console.print(
        f"[bold]Last {days} days:[/] {summary.window_entries} entries, "
        f"mostly {summary.window_dominant_mood}, average {summary.window_average_score:.1f}/4"
    )


@mood.command("reclassify")
def mood_reclassify():
    """Re-detect the mood of every stored entry."""
    c = get_components()

    with console.status("Reclassifying entries..."):
        changed = c["storage"].reclassify_all()

    console.print(f"[green]Reclassified:[/] {changed} entries changed")
