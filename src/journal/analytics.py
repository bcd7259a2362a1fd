"""Mood analytics over persisted journal entries."""

from collections import Counter
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional

from shared_types import MoodLabel

MOOD_SCORES = {
    MoodLabel.HAPPY: 4,
    MoodLabel.NEUTRAL: 3,
    MoodLabel.SAD: 2,
    MoodLabel.ANGRY: 1,
    MoodLabel.STRESSED: 0,
}
UNKNOWN_MOOD_SCORE = 2


@dataclass
class MoodSummary:
    """Aggregate mood statistics for a set of entries."""

    total_entries: int
    counts: dict[str, int] = field(default_factory=dict)
    dominant_mood: str = MoodLabel.NEUTRAL.value
    window_days: int = 7
    window_entries: int = 0
    window_dominant_mood: str = MoodLabel.NEUTRAL.value
    window_average_score: float = 0.0
    consistency: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def _entry_mood(entry: dict) -> str:
    return entry.get("mood") or MoodLabel.NEUTRAL.value


def _parse_created(entry: dict) -> Optional[datetime]:
    """Parse an entry's created timestamp as naive local time, None if absent/invalid."""
    created = entry.get("created")
    if not created:
        return None
    if isinstance(created, datetime):
        dt = created
    elif isinstance(created, date):
        dt = datetime.combine(created, datetime.min.time())
    else:
        try:
            dt = datetime.fromisoformat(str(created).replace("Z", "+00:00"))
        except ValueError:
            return None
    if dt.tzinfo:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def mood_score(mood: str) -> int:
    """Numeric score for a mood label. Unknown labels score 2."""
    try:
        return MOOD_SCORES[MoodLabel(mood)]
    except ValueError:
        return UNKNOWN_MOOD_SCORE


def mood_counts(entries: list[dict]) -> dict[str, int]:
    """Count entries per mood, in first-seen order. Missing mood counts as neutral."""
    return dict(Counter(_entry_mood(e) for e in entries))


def most_frequent_mood(counts: dict[str, int]) -> str:
    """Mood with the highest count. Ties go to the mood seen later."""
    best = None
    for mood, n in counts.items():
        if best is None or n >= counts[best]:
            best = mood
    return best or MoodLabel.NEUTRAL.value


def entries_in_window(
    entries: list[dict], days: int = 7, now: Optional[datetime] = None
) -> list[dict]:
    """Entries created on or after now - days."""
    cutoff = (now or datetime.now()) - timedelta(days=days)
    result = []
    for entry in entries:
        dt = _parse_created(entry)
        if dt is not None and dt >= cutoff:
            result.append(entry)
    return result


def _last_days(days: int, today: Optional[date]) -> list[date]:
    today = today or date.today()
    return [today - timedelta(days=i) for i in range(days - 1, -1, -1)]


def weekly_mood_frequency(
    entries: list[dict], days: int = 7, today: Optional[date] = None
) -> dict[date, dict[str, int]]:
    """Per-day mood counts for the last `days` calendar days, oldest first."""
    frequency = {d: {m.value: 0 for m in MoodLabel} for d in _last_days(days, today)}

    for entry in entries:
        dt = _parse_created(entry)
        if dt is None:
            continue
        day = frequency.get(dt.date())
        if day is None:
            continue
        mood = _entry_mood(entry)
        if mood in day:
            day[mood] += 1

    return frequency


def weekly_average_scores(
    entries: list[dict], days: int = 7, today: Optional[date] = None
) -> dict[date, float]:
    """Average mood score per day for the last `days` days. Empty days are 0.0."""
    scores: dict[date, list[int]] = {d: [] for d in _last_days(days, today)}

    for entry in entries:
        dt = _parse_created(entry)
        if dt is None or dt.date() not in scores:
            continue
        scores[dt.date()].append(mood_score(_entry_mood(entry)))

    return {d: (sum(s) / len(s) if s else 0.0) for d, s in scores.items()}


def average_mood_score(entries: list[dict]) -> float:
    """Mean mood score rounded to one decimal. 0.0 when there are no entries."""
    if not entries:
        return 0.0
    total = sum(mood_score(_entry_mood(e)) for e in entries)
    return round(total / len(entries), 1)


def consistency_score(total: int, target_days: int = 30) -> int:
    """Journaling consistency as a percentage of target_days, capped at 100."""
    if target_days <= 0:
        return 0
    return min(100, round(total / target_days * 100))


def summarize(
    entries: list[dict],
    days: int = 7,
    target_days: int = 30,
    now: Optional[datetime] = None,
) -> MoodSummary:
    """Build a MoodSummary for entries, with a trailing window of `days`."""
    counts = mood_counts(entries)
    window = entries_in_window(entries, days=days, now=now)

    return MoodSummary(
        total_entries=len(entries),
        counts=counts,
        dominant_mood=most_frequent_mood(counts),
        window_days=days,
        window_entries=len(window),
        window_dominant_mood=most_frequent_mood(mood_counts(window)),
        window_average_score=average_mood_score(window),
        consistency=consistency_score(len(entries), target_days),
    )
