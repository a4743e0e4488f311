# Test fixtures
from .sample_texts import (
    TAMIL_LINES,
    TAMIL_LINES_LATIN,
    TAMIL_HEADLINE,
    TAMIL_BROKEN,
    TAMIL_BROKEN_LATIN,
    ARABIC_ALLAH,
    BUCKWALTER_ALLAH,
    ARABIC_HUMMUS,
    ARABIC_HUMMUS_SHADDA_FIRST,
    BUCKWALTER_HUMMUS,
)

__all__ = [
    "TAMIL_LINES",
    "TAMIL_LINES_LATIN",
    "TAMIL_HEADLINE",
    "TAMIL_BROKEN",
    "TAMIL_BROKEN_LATIN",
    "ARABIC_ALLAH",
    "BUCKWALTER_ALLAH",
    "ARABIC_HUMMUS",
    "ARABIC_HUMMUS_SHADDA_FIRST",
    "BUCKWALTER_HUMMUS",
]
