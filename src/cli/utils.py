"""Shared CLI utilities."""

from pathlib import Path
from typing import Optional

MOOD_STYLE = {
    "happy": "green",
    "neutral": "dim",
    "sad": "blue",
    "angry": "red",
    "stressed": "yellow",
}


def format_mood(mood: str, emoji: str = "") -> str:
    """Rich markup for a mood label with its emoji."""
    style = MOOD_STYLE.get(mood, "dim")
    return f"{emoji} [{style}]{mood}[/]".strip()


def get_components() -> dict:
    """Initialize storage and config for a command."""
    from cli.config import get_paths, load_config, load_config_model
    from journal import JournalStorage

    config = load_config()
    config_model = load_config_model()
    paths = get_paths(config)

    storage = JournalStorage(paths["journal_dir"])

    return {
        "config": config,
        "config_model": config_model,
        "paths": paths,
        "storage": storage,
    }


def resolve_journal_path(journal_dir: Path, filename: str) -> Optional[Path]:
    """Resolve and validate a journal file path.

    Returns resolved Path if valid and found, None otherwise.
    """
    journal_dir = journal_dir.resolve()
    filepath = (journal_dir / filename).resolve()

    if filepath == journal_dir or not filepath.is_relative_to(journal_dir):
        return None

    if filepath.is_file():
        return filepath

    # Glob fallback for partial match
    matches = sorted(
        m
        for m in journal_dir.glob(f"*{filename}*")
        if m.is_file() and m.resolve().is_relative_to(journal_dir)
    )
    return matches[0] if matches else None
