import math
import re

WORDS_PER_MINUTE = 200

_WHITESPACE = re.compile(r"\s+")


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len([word for word in _WHITESPACE.split(text) if word])


def estimate_reading_time(text: str) -> int:
    """Estimate reading time in whole minutes, rounding up."""
    return math.ceil(count_words(text) / WORDS_PER_MINUTE)
