from .mood import MoodClassifier, MoodResult, classify_mood
from .storage import JournalStorage

__all__ = ["JournalStorage", "MoodClassifier", "MoodResult", "classify_mood"]
