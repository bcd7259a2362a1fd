"""Markdown journal CRUD operations with mood tagging."""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional

import frontmatter
import structlog
import yaml

from shared_types import MoodLabel

from .mood import classify_mood

logger = structlog.get_logger()

MAX_CONTENT_LENGTH = 100_000  # 100KB
MAX_TAG_LENGTH = 50
MAX_TAGS = 20


def _sanitize_slug(text: str) -> str:
    """Sanitize text into safe filename slug. Only [a-z0-9-] allowed."""
    slug = text.lower().replace(" ", "-")
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    return slug[:50]


def _sanitize_tag(tag: str) -> str:
    """Sanitize a single tag."""
    return re.sub(r"[^\w\s-]", "", tag).strip()[:MAX_TAG_LENGTH]


class JournalStorage:
    """Manages markdown journal files with YAML frontmatter.

    Every entry carries a ``mood`` and ``emoji`` in its frontmatter, computed
    from the body whenever the body is written.
    """

    def __init__(self, journal_dir: str | Path):
        self.journal_dir = Path(journal_dir).expanduser().resolve()
        self.journal_dir.mkdir(parents=True, exist_ok=True)

    def _generate_filename(self, title: str) -> str:
        """Generate filename from date and title."""
        date_str = datetime.now().strftime("%Y-%m-%d")
        slug = _sanitize_slug(title) or "entry"
        return f"{date_str}_{slug}.md"

    def _validate_path(self, filepath: Path) -> Path:
        """Ensure resolved path is inside journal_dir."""
        resolved = filepath.resolve()
        if not resolved.is_relative_to(self.journal_dir):
            raise ValueError(f"Path escapes journal directory: {filepath}")
        return resolved

    def _entry_path(self, filepath: str | Path) -> Path:
        """Resolve an entry path; relative names are taken from journal_dir."""
        filepath = Path(filepath)
        if not filepath.is_absolute():
            filepath = self.journal_dir / filepath
        return self._validate_path(filepath)

    @staticmethod
    def _validate_content(content: str) -> None:
        if not content or not content.strip():
            raise ValueError("Entry content is empty")
        if len(content) > MAX_CONTENT_LENGTH:
            raise ValueError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")

    def create(
        self,
        content: str,
        title: Optional[str] = None,
        tags: Optional[list[str]] = None,
        metadata: Optional[dict] = None,
    ) -> Path:
        """Create new journal entry tagged with its detected mood.

        Args:
            content: Main body text
            title: Optional title (defaults to date)
            tags: Optional list of tags
            metadata: Additional frontmatter fields

        Returns:
            Path to created file

        Raises:
            ValueError: If content is empty or too long, or path escapes journal dir
        """
        self._validate_content(content)

        now = datetime.now()
        title = title or now.strftime("%B %d, %Y")

        if tags:
            tags = [_sanitize_tag(t) for t in tags[:MAX_TAGS] if t.strip()]

        result = classify_mood(content)

        fm = frontmatter.Post(content)
        fm["title"] = title
        fm["created"] = now.isoformat()
        fm["tags"] = tags or []

        if metadata:
            for k, v in metadata.items():
                fm[k] = v

        fm["mood"] = str(result.mood)
        fm["emoji"] = result.emoji

        filename = self._generate_filename(title)
        filepath = self._validate_path(self.journal_dir / filename)

        # Handle duplicates
        counter = 1
        while filepath.exists():
            base = filename.rsplit(".", 1)[0]
            filepath = self._validate_path(self.journal_dir / f"{base}_{counter}.md")
            counter += 1

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(frontmatter.dumps(fm))

        logger.info("journal_entry_created", path=filepath.name, mood=str(result.mood))
        return filepath

    def read(self, filepath: str | Path) -> frontmatter.Post:
        """Read journal entry.

        Raises:
            FileNotFoundError: If the entry does not exist
        """
        return frontmatter.load(self._entry_path(filepath), encoding="utf-8")

    def update(
        self,
        filepath: str | Path,
        content: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> Path:
        """Update existing entry. Mood and emoji are always re-derived from the body."""
        filepath = self._entry_path(filepath)
        post = frontmatter.load(filepath, encoding="utf-8")

        if metadata:
            for k, v in metadata.items():
                post[k] = v

        if content is not None:
            self._validate_content(content)
            post.content = content

        result = classify_mood(post.content)
        post["mood"] = str(result.mood)
        post["emoji"] = result.emoji

        post["updated"] = datetime.now().isoformat()

        with open(filepath, "w", encoding="utf-8") as f:
            f.write(frontmatter.dumps(post))

        logger.info("journal_entry_updated", path=filepath.name, mood=post.get("mood"))
        return filepath

    def delete(self, filepath: str | Path) -> bool:
        """Delete journal entry."""
        filepath = self._entry_path(filepath)
        if filepath.exists():
            filepath.unlink()
            logger.info("journal_entry_deleted", path=filepath.name)
            return True
        return False

    def list_entries(
        self,
        mood: Optional[str] = None,
        tags: Optional[list[str]] = None,
        limit: Optional[int] = 50,
    ) -> list[dict]:
        """List journal entries newest first, with optional mood/tag filtering."""
        entries = []

        for f in self.journal_dir.glob("*.md"):
            try:
                post = frontmatter.load(f, encoding="utf-8")
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.debug("journal_entry_unreadable", path=f.name, error=str(e))
                continue

            entry = {
                "path": f,
                "title": post.get("title", f.stem),
                "created": str(post.get("created") or ""),
                "tags": post.get("tags") or [],
                "mood": post.get("mood") or MoodLabel.NEUTRAL.value,
                "emoji": post.get("emoji", ""),
                "preview": post.content[:200] if post.content else "",
            }

            if mood and entry["mood"] != mood:
                continue

            if tags and not any(t in entry["tags"] for t in tags):
                continue

            entries.append(entry)

        entries.sort(key=lambda e: (e["created"], e["path"].name), reverse=True)
        if limit is not None:
            entries = entries[:limit]
        return entries

    def reclassify_all(self) -> int:
        """Re-run mood detection over every entry.

        Returns:
            Number of entries whose stored mood or emoji changed
        """
        changed = 0
        for f in sorted(self.journal_dir.glob("*.md")):
            try:
                post = frontmatter.load(f, encoding="utf-8")
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.debug("journal_entry_unreadable", path=f.name, error=str(e))
                continue

            result = classify_mood(post.content)
            if post.get("mood") == str(result.mood) and post.get("emoji") == result.emoji:
                continue

            logger.info(
                "journal_entry_reclassified",
                path=f.name,
                old=post.get("mood"),
                new=str(result.mood),
            )
            post["mood"] = str(result.mood)
            post["emoji"] = result.emoji
            with open(f, "w", encoding="utf-8") as fh:
                fh.write(frontmatter.dumps(post))
            changed += 1

        return changed
