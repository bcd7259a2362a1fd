"""Init CLI command."""

from pathlib import Path

import click
import yaml
from rich.console import Console

from cli.config import get_paths, load_config

console = Console()

SAMPLE_ENTRIES = [
    {
        "title": "First Entry",
        "tags": ["onboarding"],
        "content": "Started my journal today. Feeling happy and excited to keep this going!",
    },
    {
        "title": "Long Day",
        "tags": ["work"],
        "content": "Kaam ka pressure bohot tha aaj, deadline ki wajah se overthinking ho rahi hai.",
    },
]

MINIMAL_CONFIG = {
    "paths": {
        "journal_dir": "~/moodjournal/journal",
    },
    "logging": {
        "level": "INFO",
    },
    "analytics": {
        "window_days": 7,
        "consistency_target_days": 30,
    },
}


@click.command()
@click.option("--samples", is_flag=True, help="Create sample journal entries")
@click.option(
    "--config-path",
    type=click.Path(path_type=Path),
    default=Path.home() / "moodjournal" / "config.yaml",
    show_default=True,
    help="Where to write the config file",
)
def init(samples: bool, config_path: Path):
    """Initialize journal directory, config, and optionally sample entries."""
    config = load_config()
    paths = get_paths(config)

    for name, path in paths.items():
        path.mkdir(parents=True, exist_ok=True)
        console.print(f"[green]✓[/] {name}: {path}")

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            yaml.dump(MINIMAL_CONFIG, f, default_flow_style=False)
        console.print(f"[green]✓[/] Created config: {config_path}")
    else:
        console.print(f"[dim]Config exists: {config_path}[/]")

    if samples:
        from journal import JournalStorage

        storage = JournalStorage(paths["journal_dir"])
        for entry in SAMPLE_ENTRIES:
            filepath = storage.create(
                content=entry["content"], title=entry["title"], tags=entry["tags"]
            )
            console.print(f"[green]✓[/] Sample entry: {filepath.name}")

    console.print("\n[bold]Ready![/] Try: moodjournal journal add \"Aaj dil khush hai\"")
