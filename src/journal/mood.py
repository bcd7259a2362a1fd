"""Keyword-based mood classification for journal entries.

Matching is plain substring containment on the lower-cased text: no
tokenization, no stemming, no punctuation stripping. Moods are scanned in
table order and keywords in list order; the first hit decides the mood.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from shared_types import MoodLabel

NEGATIONS = ("nahi", "na", "nahin", "not")

# English + Roman Urdu. Order matters: first match wins.
MOOD_KEYWORDS: tuple[tuple[MoodLabel, tuple[str, ...]], ...] = (
    (
        MoodLabel.HAPPY,
        (
            "happy", "joy", "khush", "khushi", "mast", "mazedaar", "hansi", "masti", "smile",
            "laugh", "awesome", "fantastic", "good", "yay", "amazing", "great", "excited",
            "delighted", "sunny", "bright", "cheerful", "smiley", "lovely", "fun", "party",
            "funny", "hepi", "heppy", "joyful", "pleasant", "thrilled", "content", "blessed",
            "excellent", "wonderful", "perfect", "super", "cool", "positive", "funf", "bliss",
            "sunshine", "joyous", "loving", "goodvibes", "smileface", "happygood", "hahaha",
            "hehe", "lol", "funniest", "enjoy", "yippee", "bestday", "fantasticday",
            "happytime", "happyface", "awesomeee", "joyfull", "smiling", "goodtime", "cheery",
            "laughing", "exciting", "smileyface", "cheerfulday", "happyfeel", "happyvibes",
            "lovelyday", "joyfulmoment", "yayyay", "goodmood", "funfun", "hepii", "hepiii",
            "happydayyy", "partytime", "funvibes", "positivevibes", "sunnyday", "happylife",
            "joyfullife", "smileyday", "funfilled", "awesomefun", "greattime", "happyenergy",
            "khushi hui", "bohot khush", "dil khush", "masti mein", "hansi aayi", "maze aya",
            "khushi ka mahsoos", "achha lag raha", "mauj masti",
        ),
    ),
    (
        MoodLabel.SAD,
        (
            "sad", "udaas", "dukhi", "lonely", "cry", "heartbroken", "down", "tired", "pain",
            "grief", "stress", "tension", "blue", "melancholy", "tear", "broken", "sorrow",
            "upset", "hopeless", "helpless", "frustrated", "woe", "hurt", "loss", "udaasi",
            "dukhiya", "niraash", "dil dukhi", "udasi ka ehsaas", "dukhi hoon", "sadface",
            "tearful", "crying", "weep", "sadmoment", "sadfeeling", "painfulday", "sadday",
            "sadlife", "badmood", "upsetface", "lonelytime", "tragic", "tragically",
            "miserable", "troublesome", "depressing", "sadly", "blehday", "heartache",
            "brokenheart", "lonelyyy", "sadness", "sadnessss", "downcast", "melancholic",
            "depressinggg", "woeful", "lossfeel", "tearfeeling", "sadfeelinggg", "sadfacee",
            "downfeeling", "lonelyface", "painfeeling", "blehfeeling", "troubled",
            "dukhi mehsoos", "dukhi feel", "dard mehsoos", "udasi mehsoos",
        ),
    ),
    (
        MoodLabel.ANGRY,
        (
            "angry", "ghussa", "gusy", "marunga", "chorunga", "gussy", "naraz", "rage",
            "furious", "annoyed", "hate", "mad", "irritated", "pissed", "frustrated", "upset",
            "annoy", "grumpy", "tension", "anger", "ghusse", "narazgi", "ghussewala",
            "ghussaa", "angery", "angeryyy", "madface", "rageface", "furiousface",
            "annoyedface", "angriness", "madfeeling", "upsetface", "hatefeel",
            "frustratedface", "pissedoff", "irritatedface", "angryday", "ragefeel",
            "annoying", "irritation", "temper", "fuming", "boiling", "infuriated", "madmoment",
            "naraz hoon", "ghussa aa gaya", "ghussa aaya", "dil naraz", "ghusse ka ehsaas",
            "narazgi ka ehsaas", "narazfeel",
        ),
    ),
    (
        MoodLabel.STRESSED,
        (
            "stressed", "pareshan", "tang", "thak", "pressure", "overworked", "nervous",
            "tense", "fatigue", "burnout", "panic", "overthinking", "stresst", "stressedout",
            "pressurefeel", "overworkedday", "worried", "tensed", "tension", "stressedday",
            "burnoutfeel", "overthinkingfeel", "fatigued", "frustratedfeel", "worriedday",
            "panicfeel", "tiredday", "exhaustedfeel", "stresstime", "overloaded", "anxious",
            "nervousfeel", "strain", "tensefeel", "tiredfeel", "stressface", "fatiguefeel",
            "anxiety", "anxiousday", "overload", "overloadfeel", "burnedout", "fatigueday",
            "panicky", "tensedday", "stressedtime", "tensionday", "exhaustion",
            "overthinkingday", "panicday", "nervousday", "pressurefeeling", "stressedface",
            "fatigueface", "tiredface", "worriedfacee", "overwork", "stressedmood",
            "strainface", "overthinkingface", "burnedoutday", "stresstime", "panicface",
            "anxiousmoment", "tiredmoment", "overloaded", "worriedmoment", "frustratedtime",
            "overthinkingmoment", "stressedmoment", "pressuremoment", "fatiguemoment",
            "stressmoment", "burnoutmoment", "soch raha", "fikr", "dimaag mein tension",
            "kaam ka pressure", "stress mehsoos", "pareshani", "thakan", "tanaav",
            "overthinking ka ehsaas",
        ),
    ),
)

MOOD_EMOJIS = MappingProxyType(
    {
        MoodLabel.HAPPY: "😊",
        MoodLabel.SAD: "😢",
        MoodLabel.ANGRY: "😠",
        MoodLabel.STRESSED: "😫",
        MoodLabel.NEUTRAL: "😐",
    }
)

# Mood emitted when the matched keyword is negated
NEGATION_FLIPS = MappingProxyType(
    {
        MoodLabel.HAPPY: MoodLabel.SAD,
        MoodLabel.SAD: MoodLabel.HAPPY,
        MoodLabel.ANGRY: MoodLabel.NEUTRAL,
        MoodLabel.STRESSED: MoodLabel.NEUTRAL,
    }
)


@dataclass(frozen=True)
class MoodResult:
    """Detected mood and its display glyph."""

    mood: MoodLabel
    emoji: str

    @classmethod
    def of(cls, mood: MoodLabel) -> "MoodResult":
        return cls(mood=mood, emoji=MOOD_EMOJIS[mood])

    def to_dict(self) -> dict:
        return {"mood": str(self.mood), "emoji": self.emoji}


NEUTRAL = MoodResult.of(MoodLabel.NEUTRAL)


@dataclass(frozen=True)
class MoodExplanation:
    """Classification result plus what triggered it."""

    result: MoodResult
    matched_mood: Optional[MoodLabel] = None
    keyword: Optional[str] = None
    negation: Optional[str] = None

    @property
    def negated(self) -> bool:
        return self.negation is not None


class MoodClassifier:
    """Deterministic lexical mood classifier with a local negation check."""

    def __init__(
        self,
        keywords: tuple[tuple[MoodLabel, tuple[str, ...]], ...] = MOOD_KEYWORDS,
        negations: tuple[str, ...] = NEGATIONS,
    ):
        self.keywords = keywords
        self.negations = negations

    def classify(self, text: Optional[str]) -> MoodResult:
        """Classify text into a mood. Never raises for string input."""
        return self.explain(text).result

    def explain(self, text: Optional[str]) -> MoodExplanation:
        """Classify text and report the keyword and negation that decided it."""
        if not text or not text.strip():
            return MoodExplanation(result=NEUTRAL)

        lower = text.lower()
        for mood, keywords in self.keywords:
            for keyword in keywords:
                if keyword not in lower:
                    continue
                negation = self._find_negation(lower, keyword)
                if negation is not None:
                    return MoodExplanation(
                        result=MoodResult.of(NEGATION_FLIPS[mood]),
                        matched_mood=mood,
                        keyword=keyword,
                        negation=negation,
                    )
                return MoodExplanation(
                    result=MoodResult.of(mood), matched_mood=mood, keyword=keyword
                )

        return MoodExplanation(result=NEUTRAL)

    def _find_negation(self, lower: str, keyword: str) -> Optional[str]:
        """Return the first negation term directly before or after keyword, if any."""
        for neg in self.negations:
            if f"{neg} {keyword}" in lower or f"{keyword} {neg}" in lower:
                return neg
        return None


# Module-level singleton
classifier = MoodClassifier()


def classify_mood(text: Optional[str]) -> MoodResult:
    """Classify text with the default keyword tables."""
    return classifier.classify(text)
