"""Shared enums and types for mood-journal."""

from enum import StrEnum


class MoodLabel(StrEnum):
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    STRESSED = "stressed"
    NEUTRAL = "neutral"
