"""
Unicode character descriptions for diagnostics and documentation.
"""

import unicodedata
from dataclasses import dataclass

# Characters unicodedata has no name for, or that would garble a report line
HARDWIRED_NAMES = {
    "\n": "NEWLINE",
    "\t": "TAB",
}


@dataclass(frozen=True)
class UnicodeChar:
    char: str  # Empty for characters that would break a one-line report
    name: str
    code: str
    category: str


def code_for(ch: str) -> str:
    """U+XXXX notation for a single code point."""
    return f"U+{ord(ch):04X}"


def name_for(ch: str) -> str:
    if ch in HARDWIRED_NAMES:
        return HARDWIRED_NAMES[ch]
    return unicodedata.name(ch, "<UNNAMED>")


def describe(ch: str) -> str:
    """
    One-line description of a code point, e.g. "U+0627 ARABIC LETTER ALEF".
    """
    return f"{code_for(ch)} {name_for(ch)}"


def unicode_info(s: str) -> list[UnicodeChar]:
    """Describe every code point of s."""
    res = []
    for ch in s:
        res.append(UnicodeChar(
            char="" if ch in HARDWIRED_NAMES else ch,
            name=name_for(ch),
            code=code_for(ch),
            category=unicodedata.category(ch),
        ))
    return res
