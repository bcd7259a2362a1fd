"""Shared test fixtures for mood-journal."""

import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import structlog

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by setup_logging."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    structlog.reset_defaults()


@pytest.fixture
def temp_dirs(tmp_path):
    """Create temp directories for the journal."""
    journal_dir = tmp_path / "journal"
    journal_dir.mkdir()

    return {"journal_dir": journal_dir}


@pytest.fixture
def sample_journal_entries():
    """Pre-populated test journal entries, one per detectable mood."""
    return [
        {
            "title": "Good Day",
            "content": "Had an amazing lunch with friends, feeling happy.",
            "tags": ["friends"],
        },
        {
            "title": "Missing Home",
            "content": "Aaj bohot udaas hoon, ghar ki yaad aa rahi hai.",
            "tags": ["family"],
        },
        {
            "title": "Traffic",
            "content": "Stuck in traffic for two hours. So annoyed.",
            "tags": ["commute"],
        },
        {
            "title": "Deadline",
            "content": "Kaam ka pressure, deadline kal hai.",
            "tags": ["work"],
        },
        {
            "title": "Groceries",
            "content": "Bought vegetables and milk.",
            "tags": [],
        },
    ]


@pytest.fixture
def populated_journal(temp_dirs, sample_journal_entries):
    """Journal storage with pre-populated entries."""
    from journal.storage import JournalStorage

    storage = JournalStorage(temp_dirs["journal_dir"])

    created_paths = []
    for entry in sample_journal_entries:
        path = storage.create(
            content=entry["content"],
            title=entry["title"],
            tags=entry.get("tags"),
        )
        created_paths.append(path)

    return {"storage": storage, "paths": created_paths}


@pytest.fixture
def dated_entries():
    """Entry dicts shaped like JournalStorage.list_entries output, spread over days."""
    now = datetime(2026, 10, 19, 12, 0, 0)

    def at(days_ago: int, mood: str) -> dict:
        return {"created": (now - timedelta(days=days_ago)).isoformat(), "mood": mood}

    return {
        "now": now,
        "entries": [
            at(0, "happy"),
            at(0, "happy"),
            at(1, "sad"),
            at(2, "stressed"),
            at(3, "angry"),
            at(6, "neutral"),
            at(10, "sad"),
            at(20, "sad"),
        ],
    }
